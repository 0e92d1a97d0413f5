"""Resolve the background color for this run."""

import logging
from collections.abc import Sequence

import numpy as np

from .errors import EmptyPaletteError

MAX_INDEX = 2**64 - 1

logger = logging.getLogger(__name__)


def parse_index(raw: str) -> int:
    """Parse a palette index, treating anything but an unsigned 64-bit integer as 0.

    Only ASCII digits with an optional leading ``+`` are accepted; surrounding
    whitespace, signs other than ``+`` and digit separators all count as invalid.
    """
    digits = raw.removeprefix("+")
    if not (digits.isascii() and digits.isdigit()):
        return 0
    index = int(digits)
    return index if index <= MAX_INDEX else 0


def select_color(
    colors: Sequence[str],
    index: str | None = None,
    color: str | None = None,
    rng: np.random.Generator | None = None,
) -> str:
    """Pick the color to launch the terminal with.

    An explicit ``color`` always wins, then an in-bounds ``index``. Otherwise,
    including when ``index`` is out of bounds, a palette entry is drawn
    uniformly at random. Empty strings count as not given.

    Args:
        colors: Palette entries in file order
        index: Palette position as typed on the command line
        color: Explicit color value, used verbatim
        rng: Random generator for the fallback draw

    Returns:
        The resolved color string.

    """
    if not colors:
        msg = "Cannot select a color from an empty palette"
        raise EmptyPaletteError(msg)

    chosen = ""
    position = 0

    if index is not None:
        position = parse_index(index)
        if position < len(colors):
            chosen = colors[position]
        else:
            logger.warning(
                "Index %s is out of bounds (max: %d)", index, len(colors) - 1
            )

    if color:
        chosen = color

    if not chosen:
        if rng is None:
            rng = np.random.default_rng()
        position = int(rng.integers(0, len(colors)))
        logger.info("Chosen randomly at index: %d", position)
        chosen = colors[position]
    else:
        logger.info("Chosen from index: %d", position)

    logger.info("Chosen color: %s", chosen)
    return chosen
