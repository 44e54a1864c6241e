"""Dominant colour extraction using k-means clustering.

A palette extractor turns a raster file into its most prevalent colours,
ranked by share of the sampled pixels. ImageAnalyzer only needs the
`extract(source, count)` method, so tests and callers can pass their own.

KMeansExtractor samples up to 5000 pixels (seeded, reproducible), clusters
them with KMeans (n_init=3) and orders the cluster centres by population.
Fully transparent pixels are left out of the sample; an image with no
visible pixel yields no colours.
The cluster count is capped at the number of distinct sampled colours so a
flat image never yields duplicate centres.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import numpy as np
from loguru import logger
from PIL import Image
from sklearn.cluster import KMeans

from accent_tools.core.colour_math import Colour
from accent_tools.core.errors import PaletteExtractionError


class PaletteExtractor(Protocol):
    def extract(self, source: str | Path, count: int) -> list[Colour]: ...


class KMeansExtractor:
    def __init__(self, n_samples: int = 5000, seed: int = 42, n_init: int = 3):
        self.n_samples = n_samples
        self.seed = seed
        self.n_init = n_init

    def _sample(self, source: str | Path) -> np.ndarray:
        with Image.open(source) as image:
            arr = np.array(image.convert('RGBA'))
        rgba = arr.reshape(-1, 4)
        # Fully transparent pixels carry no visible colour
        pixels = rgba[rgba[:, 3] > 0, :3]

        if len(pixels) > self.n_samples:
            indices = np.random.default_rng(self.seed).choice(len(pixels), self.n_samples, replace=False)
            pixels = pixels[indices]
        return pixels

    def extract(self, source: str | Path, count: int) -> list[Colour]:
        """Return up to `count` colours from `source`, most prevalent first."""
        if count < 1:
            raise ValueError(f'count must be at least 1, got {count}')

        try:
            pixels = self._sample(source)
        except OSError as e:
            raise PaletteExtractionError(f'Cannot read raster for palette extraction: {source}') from e

        if len(pixels) == 0:
            return []

        distinct = len(np.unique(pixels, axis=0))
        n_clusters = min(count, distinct)

        try:
            km = KMeans(n_clusters=n_clusters, n_init=self.n_init, random_state=self.seed)
            km.fit(pixels.astype(float))
        except (ValueError, MemoryError) as e:
            raise PaletteExtractionError(f'KMeans clustering failed: {e}') from e

        centres = np.clip(np.rint(km.cluster_centers_), 0, 255).astype(int)
        counts = np.bincount(km.labels_, minlength=len(centres))
        # Stable sort keeps KMeans order for equal populations
        order = np.argsort(-counts, kind='stable')

        logger.debug(f'KMeans: {len(pixels)} samples, {distinct} distinct, {n_clusters} clusters')
        return [(int(centres[i][0]), int(centres[i][1]), int(centres[i][2])) for i in order]
