"""Terminal emulator launcher."""

import logging
import subprocess

from .errors import LaunchError

TERMINAL = "alacritty"

logger = logging.getLogger(__name__)


def build_command(color: str, terminal: str = TERMINAL) -> list[str]:
    """Build the terminal command line with the background color option."""
    return [terminal, f"--option=colors.primary.background='{color}'"]


def launch_terminal(color: str, terminal: str = TERMINAL) -> int:
    """Launch the terminal emulator with the given background and wait for it.

    Args:
        color: Background color passed through verbatim
        terminal: Terminal emulator executable

    Returns:
        Exit status of the terminal process.

    Raises:
        LaunchError: The terminal process could not be started.
        OSError: Waiting for the terminal process failed.

    """
    command = build_command(color, terminal)
    logger.debug("Launching: %s", command)
    try:
        process = subprocess.Popen(command)  # noqa: S603
    except OSError as e:
        msg = f"Failed to launch {terminal} terminal emulator: {e}"
        raise LaunchError(msg) from e

    with process:
        return process.wait()
