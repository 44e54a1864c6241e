"""Tests for accent_tools.core.colour_math — hex parsing, brightness, saturation."""

import numpy as np
import pytest

from accent_tools.core.colour_math import brightness, hex_to_rgb, rgb_to_hex, saturation, to_rgb
from accent_tools.core.errors import InvalidFormat


class TestHexToRgb:
    def test_white(self):
        assert hex_to_rgb('#ffffff') == (255, 255, 255)

    def test_black(self):
        assert hex_to_rgb('#000000') == (0, 0, 0)

    def test_blue600(self):
        assert hex_to_rgb('#2563eb') == (37, 99, 235)

    def test_uppercase(self):
        assert hex_to_rgb('#FFFFFF') == (255, 255, 255)

    def test_no_hash(self):
        assert hex_to_rgb('ff0000') == (255, 0, 0)

    def test_short_hex_doubles_digits(self):
        assert hex_to_rgb('f0a') == (255, 0, 170)
        assert hex_to_rgb('#0f0') == hex_to_rgb('00ff00')

    def test_short_hex_is_not_nibble_shift(self):
        # 'a' becomes 'aa' (170), not 'a0' (160)
        assert hex_to_rgb('#a00')[0] == 170

    def test_extra_digits_ignored(self):
        assert hex_to_rgb('#12345678') == (0x12, 0x34, 0x56)

    @pytest.mark.parametrize('value', ['#2563eb', '#000000', '#ffffff', '#0a0b0c', '#f8fafc'])
    def test_round_trip(self, value):
        assert rgb_to_hex(hex_to_rgb(value)) == value

    @pytest.mark.parametrize('value', ['zz0000', '#ff', 'ffff', '#fffff', '', '#', 'gg', '12 456', '#+f0000'])
    def test_invalid_raises(self, value):
        with pytest.raises(InvalidFormat):
            hex_to_rgb(value)

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            hex_to_rgb('zz0000')

    def test_non_string_raises(self):
        with pytest.raises(InvalidFormat):
            hex_to_rgb(0xFF0000)


class TestToRgb:
    def test_tuple_passthrough(self):
        assert to_rgb((1, 2, 3)) == (1, 2, 3)

    def test_list_becomes_tuple(self):
        assert to_rgb([1, 2, 3]) == (1, 2, 3)

    def test_hex_string(self):
        assert to_rgb('#010203') == (1, 2, 3)

    def test_numpy_channels(self):
        assert to_rgb(np.array([255, 128, 0], dtype=np.uint8)) == (255, 128, 0)

    @pytest.mark.parametrize('value', [(1, 2), (1, 2, 3, 4), (256, 0, 0), (-1, 0, 0), (1.5, 2, 3), (True, 0, 0), None])
    def test_invalid(self, value):
        with pytest.raises(InvalidFormat):
            to_rgb(value)


class TestBrightness:
    def test_black_is_zero(self):
        assert brightness((0, 0, 0)) == 0.0

    def test_grey_scores_its_level(self):
        assert brightness((128, 128, 128)) == pytest.approx(128.0)
        assert brightness((50, 50, 50)) == pytest.approx(50.0)

    def test_monotonic_on_greys(self):
        assert brightness((255, 255, 255)) > brightness((128, 128, 128)) > brightness((0, 0, 0))

    def test_green_weighted_heaviest(self):
        assert brightness((0, 255, 0)) > brightness((255, 0, 0)) > brightness((0, 0, 255))

    def test_formula(self):
        expected = (0.241 * 37**2 + 0.691 * 99**2 + 0.068 * 235**2) ** 0.5
        assert brightness((37, 99, 235)) == pytest.approx(expected)

    def test_accepts_hex(self):
        assert brightness('#2563eb') == brightness((37, 99, 235))
        assert brightness('#fff') == pytest.approx(255.0)

    def test_invalid_hex_raises(self):
        with pytest.raises(InvalidFormat):
            brightness('nothex')


class TestSaturation:
    def test_pure_red(self):
        assert saturation((255, 0, 0)) == 1.0

    def test_grey(self):
        assert saturation((128, 128, 128)) == 0.0

    def test_black_is_zero(self):
        assert saturation((0, 0, 0)) == 0.0

    def test_formula(self):
        assert saturation((200, 100, 50)) == pytest.approx(0.75)

    def test_accepts_hex(self):
        assert saturation('#f00') == 1.0

    @pytest.mark.parametrize('colour', [(1, 0, 0), (255, 254, 253), (10, 200, 30), (0, 0, 1), (77, 77, 78)])
    def test_bounded(self, colour):
        assert 0.0 <= saturation(colour) <= 1.0
