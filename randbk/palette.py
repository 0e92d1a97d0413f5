"""Palette loading and parsing."""

import logging
from collections.abc import Iterable
from pathlib import Path

from .default_colors import EMBEDDED_COLORS
from .errors import EmptyPaletteError
from .palette_data import PaletteData
from .utils.paths import candidate_paths

MARKER = "#"
EMBEDDED_SOURCE = "<embedded>"

logger = logging.getLogger(__name__)


def parse_colors(content: str) -> list[str]:
    """Keep the stripped lines that start with the color marker, in order."""
    stripped = (line.strip() for line in content.splitlines())
    return [line for line in stripped if line and line.startswith(MARKER)]


def load_palette_source(paths: Iterable[Path] | None = None) -> tuple[str, str]:
    """Read raw palette text from the first readable candidate file.

    Args:
        paths: Candidate files in priority order, defaults to ``candidate_paths()``

    Returns:
        Tuple of the palette text and a label naming where it came from. Falls
        back to the embedded default palette when no candidate can be read.

    """
    if paths is None:
        paths = candidate_paths()

    for path in paths:
        try:
            if not path.exists():
                continue
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read colors from %s: %s", path, e)
            continue
        logger.info("Loaded colors from: %s", path)
        return content, str(path)

    logger.info("Using embedded colors as fallback")
    return EMBEDDED_COLORS, EMBEDDED_SOURCE


def load_palette(paths: Iterable[Path] | None = None) -> PaletteData:
    """Load and parse the palette, rejecting sources with no usable colors."""
    content, source = load_palette_source(paths)
    colors = parse_colors(content)
    if not colors:
        logger.error("No valid colors found in %s", source)
        msg = f"No valid colors found in {source}"
        raise EmptyPaletteError(msg)
    return PaletteData(source, colors)
