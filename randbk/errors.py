"""Exceptions raised while resolving a color and launching the terminal."""


class EmptyPaletteError(ValueError):
    """Palette source produced no usable color entries."""


class LaunchError(RuntimeError):
    """Terminal emulator process could not be started."""
