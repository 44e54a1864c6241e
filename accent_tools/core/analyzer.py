"""ImageAnalyzer — accent colours, average colour, trim and simple transforms.

One analyzer owns one decoded Pillow image. Read-only queries (accent
colours, average colour) work on a disposable copy from `working_copy()`,
so they never shrink or re-encode the bound image. Transforms (trim,
resize, blur, modulate) replace the bound image.

Accent pipeline:
  1. copy, bestfit resize into sample_size x sample_size (Lanczos)
  2. encode the copy as PNG to <tmp_dir>/<uuid4>.png
  3. extractor.extract(png, count) -> colours, most prevalent first
  4. keep colours with brightness < max_brightness (all when negative)
  5. delete the PNG (failures logged, never raised)
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import numpy as np
from loguru import logger
from PIL import Image, ImageEnhance, ImageFilter

from accent_tools.core import colour_math
from accent_tools.core.colour_math import Colour
from accent_tools.core.env import Settings
from accent_tools.core.errors import (
    ImageEncodeError,
    ImageLoadError,
    PaletteExtractionError,
)
from accent_tools.core.palette import KMeansExtractor, PaletteExtractor

TRANSPARENT = (0, 0, 0, 0)

# Largest Euclidean distance between two RGBA pixels: sqrt(4 * 255^2)
MAX_RGBA_DISTANCE = 510.0

RESAMPLING_FILTERS = {
    'nearest': Image.Resampling.NEAREST,
    'box': Image.Resampling.BOX,
    'bilinear': Image.Resampling.BILINEAR,
    'hamming': Image.Resampling.HAMMING,
    'bicubic': Image.Resampling.BICUBIC,
    'lanczos': Image.Resampling.LANCZOS,
}

# Formats Pillow cannot write with an alpha band
_NO_ALPHA_FORMATS = {'BMP', 'EPS', 'JPEG', 'PCX', 'PPM'}


def bestfit_size(size: tuple[int, int], box: tuple[int, int]) -> tuple[int, int]:
    """Scale `size` to fit inside `box`, keeping aspect ratio. May enlarge."""
    w, h = size
    bw, bh = box
    scale = min(bw / w, bh / h)
    return (max(1, round(w * scale)), max(1, round(h * scale)))


def _open_image(path: str | Path) -> Image.Image:
    try:
        image = Image.open(path)
    except FileNotFoundError as e:
        raise ImageLoadError(f'Image not found: {path}') from e
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageLoadError(f'Cannot decode image {path}: {e}') from e

    try:
        image.load()
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        image.close()
        raise ImageLoadError(f'Cannot decode image {path}: {e}') from e
    return image


def _remove_quietly(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f'Could not remove temporary sample {path}: {e}')


class ImageAnalyzer:
    """Colour analysis and light transforms over a single loaded image.

    Not safe for concurrent use; the bound image belongs to this instance.
    """

    def __init__(
        self,
        image_path: str | Path,
        extractor: PaletteExtractor | None = None,
        settings: Settings | None = None,
    ):
        self.image_path = str(image_path)
        self.settings = settings or Settings.from_env()
        self.extractor = extractor or KMeansExtractor(
            n_samples=self.settings.sample_pixels,
            seed=self.settings.seed,
        )
        self.background = TRANSPARENT

        image = _open_image(image_path)
        self._format = image.format
        if image.mode not in ('RGB', 'RGBA') or 'transparency' in image.info:
            converted = image.convert('RGBA' if image.has_transparency_data else 'RGB')
            image.close()
            image = converted
        self.image = image
        logger.debug(f'Loaded {self.image_path}: {self._format} {image.mode} {image.width}x{image.height}')

    def __enter__(self) -> ImageAnalyzer:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self.image.close()

    def _replace(self, image: Image.Image) -> None:
        old, self.image = self.image, image
        if old is not image:
            old.close()

    @contextmanager
    def working_copy(self) -> Iterator[Image.Image]:
        """A throwaway copy of the bound image, closed when the block exits."""
        work = self.image.copy()
        try:
            yield work
        finally:
            work.close()

    # -- queries ---------------------------------------------------------

    def get_format(self) -> str | None:
        return self._format

    def get_image_size(self) -> tuple[int, int]:
        return self.image.size

    def has_transparency(self) -> bool:
        """True if the image carries an alpha channel. Pixels are not inspected."""
        return self.image.has_transparency_data

    def accent_colours(self, count: int = 5, sample_size: int = 500, max_brightness: float = -1) -> list[Colour]:
        """Most used colours in the image, optionally capped by brightness.

        Args:
            count: number of colours to ask the extractor for.
            sample_size: the image is downsampled to fit in a square of this size first.
            max_brightness: colours at or above this brightness are dropped; negative keeps all.

        Returns:
            Colours in extractor rank order. May be empty.
        """
        if count < 1:
            raise ValueError(f'count must be at least 1, got {count}')
        if sample_size < 1:
            raise ValueError(f'sample_size must be at least 1, got {sample_size}')

        tmp_path = Path(self.settings.tmp_dir) / f'{uuid.uuid4().hex}.png'
        try:
            with self.working_copy() as work:
                size = bestfit_size(work.size, (sample_size, sample_size))
                sample = work.resize(size, Image.Resampling.LANCZOS)
                try:
                    sample.save(tmp_path, format='PNG')
                except (OSError, ValueError) as e:
                    raise ImageEncodeError(f'Cannot write sample {tmp_path}: {e}') from e
                finally:
                    sample.close()
            logger.debug(f'Accent sample {size[0]}x{size[1]} written to {tmp_path}')

            try:
                colours = self.extractor.extract(tmp_path, count)
            except PaletteExtractionError:
                raise
            except Exception as e:
                raise PaletteExtractionError(f'Palette extraction failed: {e}') from e
        finally:
            _remove_quietly(tmp_path)

        kept = [c for c in colours if max_brightness < 0 or colour_math.brightness(c) < max_brightness]
        logger.debug(f'Accent colours: {len(colours)} extracted, {len(kept)} kept')
        return kept

    def average_colour(self) -> Colour:
        """Area-averaged colour of the whole image."""
        with self.working_copy() as work:
            pixel = work.resize((1, 1), Image.Resampling.BOX).getpixel((0, 0))
        return (int(pixel[0]), int(pixel[1]), int(pixel[2]))

    # -- transforms ------------------------------------------------------

    def trim(self, fuzz: float = 0.1) -> tuple[int, int]:
        """Crop away the border matching the top-left pixel within `fuzz`.

        `fuzz` is a fraction (0-1) of the largest RGBA distance. The result
        starts at (0, 0). A uniform image is left as it is.
        """
        if not 0 <= fuzz <= 1:
            raise ValueError(f'fuzz must be between 0 and 1, got {fuzz}')

        arr = np.asarray(self.image.convert('RGBA'), dtype=np.float64)
        dist = np.sqrt(((arr - arr[0, 0]) ** 2).sum(axis=-1)) / MAX_RGBA_DISTANCE
        content = dist > fuzz
        if not content.any():
            return self.image.size

        rows = np.flatnonzero(content.any(axis=1))
        cols = np.flatnonzero(content.any(axis=0))
        box = (int(cols[0]), int(rows[0]), int(cols[-1]) + 1, int(rows[-1]) + 1)
        if box != (0, 0, self.image.width, self.image.height):
            self._replace(self.image.crop(box))
        return self.image.size

    def resize(self, width: int, height: int, resample: str = 'lanczos', bestfit: bool = False) -> tuple[int, int]:
        if width < 1 or height < 1:
            raise ValueError(f'Target size must be positive, got {width}x{height}')
        try:
            method = RESAMPLING_FILTERS[resample.lower()]
        except KeyError:
            raise ValueError(
                f'Unknown resample filter: {resample}. Available: {", ".join(RESAMPLING_FILTERS)}'
            ) from None

        size = bestfit_size(self.image.size, (width, height)) if bestfit else (width, height)
        self._replace(self.image.resize(size, method))
        return self.image.size

    def blur(self, spread: float = 8, radius: float = 0, gaussian: bool = False) -> None:
        """Gaussian blur with std dev `spread`, or a box blur of `radius` (falls back to `spread`)."""
        if spread < 0 or radius < 0:
            raise ValueError('blur spread and radius must not be negative')
        kernel = ImageFilter.GaussianBlur(radius=spread) if gaussian else ImageFilter.BoxBlur(radius or spread)
        self._replace(self.image.filter(kernel))

    def modulate(self, brightness: float = 100, saturation: float = 100, hue: float = 100) -> None:
        """Percent adjustments, 100 = unchanged. Hue 0 and 200 both rotate by 180 degrees."""
        if brightness < 0 or saturation < 0:
            raise ValueError('brightness and saturation must not be negative')

        alpha = self.image.getchannel('A') if 'A' in self.image.getbands() else None
        rgb = self.image.convert('RGB')
        if brightness != 100:
            rgb = ImageEnhance.Brightness(rgb).enhance(brightness / 100)
        if saturation != 100:
            rgb = ImageEnhance.Color(rgb).enhance(saturation / 100)
        if hue != 100:
            shift = round((hue - 100) / 200 * 256)
            h, s, v = rgb.convert('HSV').split()
            h = h.point(lambda x: (x + shift) % 256)
            rgb = Image.merge('HSV', (h, s, v)).convert('RGB')
        if alpha is not None:
            rgb.putalpha(alpha)
        self._replace(rgb)

    def colorize(self, black: bool = True) -> None:
        """Recolour a (transparent) logo towards black or white."""
        self.modulate(0 if black else 255, 100, 0)

    def save(self, path: str | Path, format: str = 'png') -> bool:
        """Write the image. Returns False (and logs) instead of raising."""
        fmt = format.upper()
        if fmt == 'JPG':
            fmt = 'JPEG'

        image = self.image
        try:
            if fmt in _NO_ALPHA_FORMATS and 'A' in image.getbands():
                image = Image.new('RGB', image.size, self.background[:3])
                image.paste(self.image, mask=self.image.getchannel('A'))
            image.save(path, format=fmt)
        except Exception as e:
            logger.error(f'Saving {path} as {fmt} failed: {e}')
            return False
        finally:
            if image is not self.image:
                image.close()

        self._format = fmt
        return True
