"""
Tests for environment-driven configuration helpers.
"""

import pytest

from models import Color
from games.Breakout import config


class TestEnvHelpers:
    """Reading typed values from the environment."""

    def test_int_default(self, monkeypatch):
        monkeypatch.delenv('BREAKOUT_TEST_INT', raising=False)
        assert config._get_int('BREAKOUT_TEST_INT', 7) == 7

    def test_int_override(self, monkeypatch):
        monkeypatch.setenv('BREAKOUT_TEST_INT', '42')
        assert config._get_int('BREAKOUT_TEST_INT', 7) == 42

    def test_float_override(self, monkeypatch):
        monkeypatch.setenv('BREAKOUT_TEST_FLOAT', '2.5')
        assert config._get_float('BREAKOUT_TEST_FLOAT', 1.0) == 2.5

    @pytest.mark.parametrize("raw,expected", [
        ('true', True),
        ('1', True),
        ('YES', True),
        ('false', False),
        ('0', False),
    ])
    def test_bool_values(self, monkeypatch, raw, expected):
        monkeypatch.setenv('BREAKOUT_TEST_BOOL', raw)
        assert config._get_bool('BREAKOUT_TEST_BOOL', not expected) is expected

    @pytest.mark.parametrize("raw", ['0', '-3.5'])
    def test_positive_float_rejects_non_positive(self, monkeypatch, raw):
        monkeypatch.setenv('BREAKOUT_TEST_SIZE', raw)
        with pytest.raises(ValueError):
            config._get_positive_float('BREAKOUT_TEST_SIZE', 10.0)

    def test_invalid_int_raises(self, monkeypatch):
        monkeypatch.setenv('BREAKOUT_TEST_INT', 'many')
        with pytest.raises(ValueError):
            config._get_int('BREAKOUT_TEST_INT', 7)

    def test_color_override(self, monkeypatch):
        monkeypatch.setenv('BREAKOUT_TEST_COLOR', '10, 20, 30')
        assert config._get_color('BREAKOUT_TEST_COLOR', '0, 0, 0').as_rgb_tuple == (10, 20, 30)

    def test_color_out_of_range_raises(self, monkeypatch):
        monkeypatch.setenv('BREAKOUT_TEST_COLOR', '300, 0, 0')
        with pytest.raises(ValueError):
            config._get_color('BREAKOUT_TEST_COLOR', '0, 0, 0')


class TestDefaults:
    """Shipped defaults."""

    def test_colors_are_validated_models(self):
        for name, color in config.COLORS.items():
            assert isinstance(color, Color), name
        assert config.COLORS['player'].as_rgb_tuple == (0, 121, 241)

    def test_grid_fits_default_screen(self):
        grid_width = config.GRID_COLUMNS * (config.BLOCK_WIDTH + config.GRID_PADDING)
        assert grid_width <= config.SCREEN_WIDTH
