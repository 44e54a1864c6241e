"""Error kinds raised by accent-tool.

Everything derives from AccentToolError so the CLI can turn any of them
into a one-line message and exit code 1.
"""


class AccentToolError(Exception):
    """Base class for all accent-tool errors."""


class InvalidFormat(AccentToolError, ValueError):
    """A colour value could not be parsed (bad hex string or triple)."""


class ImageLoadError(AccentToolError):
    """The image file is missing, unreadable, or in an unsupported format."""


class ImageEncodeError(AccentToolError):
    """Writing an image (temporary sample or target file) failed."""


class PaletteExtractionError(AccentToolError):
    """The palette extractor could not produce colours."""
