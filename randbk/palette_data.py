"""Palette data container for loaded color entries."""


class PaletteData:
    """Container for palette colors together with the source they came from."""

    def __init__(self, source: str, colors: list[str]) -> None:
        """Initialize palette data with a source label and color list."""
        self.source = source
        self.colors = colors

    def __len__(self) -> int:
        return len(self.colors)
