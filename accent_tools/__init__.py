"""accent-tool — perceptual colour analysis and light transforms for one image."""

from accent_tools.core.analyzer import ImageAnalyzer
from accent_tools.core.colour_math import Colour, brightness, hex_to_rgb, rgb_to_hex, saturation, to_rgb
from accent_tools.core.errors import (
    AccentToolError,
    ImageEncodeError,
    ImageLoadError,
    InvalidFormat,
    PaletteExtractionError,
)
from accent_tools.core.palette import KMeansExtractor, PaletteExtractor

__all__ = [
    'AccentToolError',
    'Colour',
    'ImageAnalyzer',
    'ImageEncodeError',
    'ImageLoadError',
    'InvalidFormat',
    'KMeansExtractor',
    'PaletteExtractionError',
    'PaletteExtractor',
    'brightness',
    'hex_to_rgb',
    'rgb_to_hex',
    'saturation',
    'to_rgb',
]
