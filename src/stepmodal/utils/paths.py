"""Centralized path definitions for stepmodal.

All filesystem locations the package may touch live here. Nothing is created
at import time; callers create directories when they first write to them.
"""

import os
from pathlib import Path

# Base application directory
STEPMODAL_DIR = Path(os.environ.get("STEPMODAL_HOME", Path.home() / ".stepmodal"))

# Subdirectories
LOGS_DIR = STEPMODAL_DIR / "logs"

# Specific files
CONFIG_PATH = STEPMODAL_DIR / "config.json"
