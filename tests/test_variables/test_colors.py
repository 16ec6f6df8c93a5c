"""Tests for color helpers."""

import re

import pytest

from less_theme.variables import is_valid_color, palette_shade, random_color


class TestIsValidColor:
    @pytest.mark.parametrize(
        "value",
        ["#fff", "#ffff", "#ffffff", "#ffffff80", "rgba(0, 0, 0, 0.5)", "rgb(24, 144, 255)",
         "hsl(209, 100%, 55%)", "fade(@black, 15%)", "tint(@primary-color, 20%)",
         'color(~`colorPalette("@{primary-color}", 6)`)'],
    )
    def test_valid(self, value):
        assert is_valid_color(value)

    @pytest.mark.parametrize(
        "value", ["", None, "20px", "#ggg", "#12345", "14", "solid", "0 2px 8px fade(@black, 15%)"],
    )
    def test_invalid(self, value):
        assert not is_valid_color(value)


class TestRandomColor:
    def test_format(self):
        for _ in range(50):
            assert re.fullmatch(r"#[0-9a-f]{6}", random_color())

    def test_is_valid(self):
        assert is_valid_color(random_color())


class TestPaletteShade:
    def test_primary_shade(self):
        assert palette_shade("@primary-6") == 'color(~`colorPalette("@{primary-color}", 6)`)'

    def test_theme_shade(self):
        assert palette_shade("@theme-1") == 'color(~`colorPalette("@{theme-color}", 1)`)'

    def test_other_family(self):
        assert palette_shade("@blue-3") == 'color(~`colorPalette("@{blue}", 3)`)'

    def test_no_shade_number(self):
        assert palette_shade("@primary-color") is None
