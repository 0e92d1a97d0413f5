"""Candidate locations for the palette file."""

import os
import sys
from pathlib import Path

APP_NAME = "rand-bk"
COLORS_FILE_NAME = "colors"


def executable_dir() -> Path | None:
    """Directory holding the running entry point, if it can be determined."""
    if not sys.argv or not sys.argv[0]:
        return None
    return Path(sys.argv[0]).resolve().parent


def candidate_paths(app_name: str = APP_NAME) -> list[Path]:
    """List palette file locations in priority order.

    Args:
        app_name: Name used for the per-user and system-wide locations

    Returns:
        Paths to try, highest priority first. Locations under the home
        directory are left out when ``HOME`` is unset.

    """
    paths: list[Path] = []

    exe_dir = executable_dir()
    if exe_dir is not None:
        paths.append(exe_dir / COLORS_FILE_NAME)

    paths.append(Path(COLORS_FILE_NAME))

    home = os.environ.get("HOME")
    if home:
        paths.append(Path(home) / ".config" / app_name / COLORS_FILE_NAME)
        paths.append(Path(home) / f".{app_name}-{COLORS_FILE_NAME}")

    paths.append(Path("/etc") / app_name / COLORS_FILE_NAME)

    return paths
