"""Command line entry point: runs the demo walkthrough."""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console

from stepmodal.utils.config_manager import ConfigManager
from stepmodal.utils.errors import ErrorHandler, StepModalError, format_error_message
from stepmodal.utils.logging import get_logger, init_logging

logger = get_logger(__name__)


def setup_argument_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the demo command."""

    parser = argparse.ArgumentParser(
        prog="stepmodal",
        description="Run a demo multi-screen modal in the terminal",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a JSON configuration file (default: ~/.stepmodal/config.json)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from configuration)",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write JSON logs to the configured log directory",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Override the default modal width in cells",
    )
    parser.add_argument(
        "--closed",
        action="store_true",
        help="Start with the modal hidden (press 'o' to open it)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 = success, 1 = error)
    """

    args = setup_argument_parser().parse_args(argv)
    console = Console(stderr=True)

    try:
        manager = ConfigManager(args.config)
        if args.width is not None:
            manager.set_config("modal.default_width", args.width, persist=False)

        logging_config = manager.config.logging
        log_dir = Path(logging_config.log_dir) if (args.log_file or logging_config.file_logging) else None
        init_logging(
            args.log_level or logging_config.log_level,
            log_dir=log_dir,
            tui=True,
            force=True,
        )

        from stepmodal.tui.app import StepModalDemoApp

        StepModalDemoApp(config=manager.config.modal, open_on_start=not args.closed).run()
        return 0

    except StepModalError as e:
        ErrorHandler.handle(e, "stepmodal", log_traceback=False)
        console.print(f"Error: {format_error_message(e)}", style="red", markup=False)
        return 1


if __name__ == "__main__":
    sys.exit(main())
