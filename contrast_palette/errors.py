class PaletteError(Exception):
    """Base class for palette extraction errors."""


class ImageLoadError(PaletteError):
    """The image source could not be loaded or decoded."""
