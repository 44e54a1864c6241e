"""Shared fixtures: synthetic images written with Pillow, settings, log capture."""

from pathlib import Path

import pytest
from loguru import logger
from PIL import Image, ImageDraw

from accent_tools.core.env import Settings

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)


@pytest.fixture(autouse=True)
def _reset_loguru():
    yield
    logger.remove()


@pytest.fixture
def log_messages():
    """Collect loguru messages (WARNING and above) emitted during the test."""
    messages: list[str] = []
    sink_id = logger.add(lambda m: messages.append(str(m)), level='WARNING', format='{level}|{message}')
    yield messages
    logger.remove(sink_id)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    tmp_dir = tmp_path / 'work'
    tmp_dir.mkdir()
    return Settings(tmp_dir=tmp_dir)


@pytest.fixture
def solid_png(tmp_path: Path) -> Path:
    path = tmp_path / 'solid.png'
    Image.new('RGB', (64, 48), (10, 20, 30)).save(path)
    return path


@pytest.fixture
def framed_png(tmp_path: Path) -> Path:
    """100x80 white canvas with a 40x40 red square at (20, 10)."""
    path = tmp_path / 'framed.png'
    img = Image.new('RGB', (100, 80), WHITE)
    ImageDraw.Draw(img).rectangle((20, 10, 59, 49), fill=RED)
    img.save(path)
    return path


@pytest.fixture
def three_colour_png(tmp_path: Path) -> Path:
    """100x100: red 60%, blue 30%, green 10% (vertical bands)."""
    path = tmp_path / 'bands.png'
    img = Image.new('RGB', (100, 100), RED)
    draw = ImageDraw.Draw(img)
    draw.rectangle((60, 0, 89, 99), fill=BLUE)
    draw.rectangle((90, 0, 99, 99), fill=GREEN)
    img.save(path)
    return path


@pytest.fixture
def wide_png(tmp_path: Path) -> Path:
    path = tmp_path / 'wide.png'
    img = Image.new('RGB', (200, 100), WHITE)
    ImageDraw.Draw(img).rectangle((0, 0, 99, 99), fill=BLUE)
    img.save(path)
    return path


@pytest.fixture
def rgba_png(tmp_path: Path) -> Path:
    """Fully opaque RGBA image — alpha channel present, no transparent pixel."""
    path = tmp_path / 'opaque_rgba.png'
    Image.new('RGBA', (32, 32), (100, 150, 200, 255)).save(path)
    return path


@pytest.fixture
def logo_png(tmp_path: Path) -> Path:
    """Transparent canvas with an opaque grey disc in the middle."""
    path = tmp_path / 'logo.png'
    img = Image.new('RGBA', (40, 40), (0, 0, 0, 0))
    ImageDraw.Draw(img).ellipse((10, 10, 29, 29), fill=(120, 120, 120, 255))
    img.save(path)
    return path
