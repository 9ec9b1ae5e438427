import sys

from stepmodal.cli import main

sys.exit(main())
