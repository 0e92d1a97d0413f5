"""Entry point for the random background terminal launcher."""

import argparse
import logging
import sys

from .errors import EmptyPaletteError, LaunchError
from .launcher import launch_terminal
from .palette import load_palette
from .selector import select_color
from .utils.logs import configure_logging

EXIT_INVALID_DATA = 65
EXIT_LAUNCH_FAILED = 127
EXIT_WAIT_FAILED = 1
SIGNAL_EXIT_BASE = 128

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="rand-bk",
        description="Launch Alacritty with a background color from a palette",
    )
    parser.add_argument(
        "-i",
        "--index",
        help="Palette position to use, starting at 0 (default: random)",
    )
    parser.add_argument(
        "-c",
        "--color",
        help="Explicit background color, takes precedence over --index",
    )
    return parser


def exit_status(returncode: int) -> int:
    """Map a child return code to a shell exit status."""
    if returncode < 0:
        return SIGNAL_EXIT_BASE - returncode
    return returncode


def main(argv: list[str] | None = None) -> None:
    """Run the launcher."""
    configure_logging()
    args = build_parser().parse_args(argv)

    try:
        palette = load_palette()
    except EmptyPaletteError:
        logger.exception("Error: palette has no usable colors.")
        sys.exit(EXIT_INVALID_DATA)

    logger.info("Loaded %d colors from %s", len(palette), palette.source)

    color = select_color(palette.colors, index=args.index, color=args.color)

    try:
        returncode = launch_terminal(color)
    except LaunchError:
        logger.exception("Error: could not start the terminal emulator.")
        sys.exit(EXIT_LAUNCH_FAILED)
    except OSError:
        logger.exception("Error: waiting for the terminal emulator failed.")
        sys.exit(EXIT_WAIT_FAILED)

    sys.exit(exit_status(returncode))


if __name__ == "__main__":
    main()
