"""Tests for lane color assignment."""

import pytest

from graphlane.constants import DEFAULT_PALETTE
from graphlane.graph.colors import color_for, lane_color_key, normalize_palette, string_hash


class TestStringHash:
    """The rolling hash behind color_for."""

    def test_empty(self):
        assert string_hash("") == 0

    def test_known_values(self):
        assert string_hash("0") == 48
        assert string_hash("ab") == 97 * 31 + 98
        assert string_hash("hello") == 99162322

    def test_wraps_to_32_bits(self):
        assert string_hash("polygenelubricants") == -(2**31)
        long_name = "refs/remotes/origin/feature/" + "x" * 200
        assert -(2**31) <= string_hash(long_name) < 2**31


class TestColorFor:
    """Stable colors per key."""

    def test_deterministic(self):
        assert color_for("main") == color_for("main")
        assert color_for("feature/login") == color_for("feature/login")

    def test_always_from_palette(self):
        for key in ["main", "develop", "0", "1", "7", "", "polygenelubricants"]:
            assert color_for(key) in DEFAULT_PALETTE

    def test_lane_keys(self):
        assert color_for("0") == "#6366f1"
        assert color_for("1") == "#ec4899"

    def test_custom_palette(self):
        palette = ["#111111", "#222222"]
        assert color_for("0", palette) == "#111111"
        assert color_for("1", palette) == "#222222"

    def test_palette_exhaustion_reuses_colors(self):
        colors = {color_for(str(lane)) for lane in range(20)}
        assert colors == set(DEFAULT_PALETTE)


class TestLaneColorKey:
    def test_branch_wins(self):
        assert lane_color_key("main", 3) == "main"

    def test_lane_fallback(self):
        assert lane_color_key("", 3) == "3"


class TestNormalizePalette:
    """Palette validation through QColor."""

    def test_hex_lowercased(self):
        assert normalize_palette(["#ABCDEF"]) == ("#abcdef",)

    def test_named_colors(self):
        assert normalize_palette(["red", "blue"]) == ("#ff0000", "#0000ff")

    def test_invalid_color(self):
        with pytest.raises(ValueError, match="Invalid palette color"):
            normalize_palette(["#12345", "not-a-color"])

    def test_empty(self):
        with pytest.raises(ValueError):
            normalize_palette([])
