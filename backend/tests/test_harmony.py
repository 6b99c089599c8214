"""
Unit tests for the harmony engine, palette de-duplication and contrast advice.
"""

import dataclasses

import pytest

from swatchgrid.services.colors.contrast import DARK_TEXT, LIGHT_TEXT, ideal_text_color, yiq_luma
from swatchgrid.services.colors.conversions import HSL, rgb_to_hsl
from swatchgrid.services.colors.harmony import (
    SCHEME_ORDER, Category, generate_schemes, generate_schemes_from_hsl,
    monochrome_offsets
)
from swatchgrid.services.colors.harmony.dedup import flatten_unique
from swatchgrid.services.colors.parsing import parse_color


def hue_distance(h1, h2):
    """Minimum angular separation between two hues, in degrees."""
    diff = abs(h1 - h2) % 360.0
    return min(diff, 360.0 - diff)


class TestSchemeGeneration:
    """Test the six harmony schemes."""
    
    def test_category_sizes(self):
        schemes = generate_schemes("#5EB0E5")
        assert len(schemes.complementary) == 1
        assert len(schemes.split) == 2
        assert len(schemes.analogous) == 4
        assert len(schemes.triadic) == 2
        assert len(schemes.quadratic) == 3
        assert len(schemes.monochrome) == 4
    
    def test_complementary_hue(self):
        base_h = rgb_to_hsl(parse_color("#5EB0E5")).h
        schemes = generate_schemes("#5EB0E5")
        assert schemes.complementary[0].hsl.h == (base_h + 180) % 360
    
    def test_hue_offsets(self):
        base = HSL(200.0, 0.6, 0.5)
        schemes = generate_schemes_from_hsl(base)
        expected = {
            "split": [350, 50],
            "analogous": [140, 170, 230, 260],
            "triadic": [80, 320],
            "quadratic": [290, 20, 110],
        }
        for category, hues in expected.items():
            actual = [c.hsl.h for c in schemes.colors_for(category)]
            assert actual == pytest.approx(hues)
            for color in schemes.colors_for(category):
                assert color.hsl.s == base.s
                assert color.hsl.l == base.l
    
    def test_red_primaries(self):
        schemes = generate_schemes("#FF0000")
        assert schemes.complementary[0].hex == "#00FFFF"
        assert [c.hex for c in schemes.triadic] == ["#0000FF", "#00FF00"]
        assert schemes.analogous[0].hex == "#FF00FF"
        assert schemes.analogous[3].hex == "#FFFF00"
    
    def test_monochrome_steps(self):
        """Darker steps gain saturation, lighter steps lose it."""
        schemes = generate_schemes_from_hsl(HSL(200.0, 0.5, 0.5))
        lightness = [c.hsl.l for c in schemes.monochrome]
        saturation = [c.hsl.s for c in schemes.monochrome]
        assert lightness == pytest.approx([0.28, 0.38, 0.62, 0.72])
        assert saturation == pytest.approx([0.55, 0.55, 0.45, 0.45])
        assert all(c.hsl.h == 200.0 for c in schemes.monochrome)
    
    def test_monochrome_offsets(self):
        assert monochrome_offsets(-0.22) == (0.05, -0.22)
        assert monochrome_offsets(0.12) == (-0.05, 0.12)
    
    def test_monochrome_clamps(self):
        schemes = generate_schemes_from_hsl(HSL(0.0, 1.0, 0.9))
        assert [c.hsl.l for c in schemes.monochrome][2:] == [1.0, 1.0]
        assert schemes.monochrome[0].hsl.s == 1.0
    
    def test_var_names_and_categories(self):
        schemes = generate_schemes("#1AA4FF")
        assert [c.var_name for c in schemes.analogous] == [
            "--color-analogous-1", "--color-analogous-2",
            "--color-analogous-3", "--color-analogous-4"
        ]
        for category in SCHEME_ORDER:
            assert all(c.category == category.value for c in schemes.colors_for(category))
    
    def test_hues_normalized(self):
        schemes = generate_schemes("#1AA4FF")
        for category in SCHEME_ORDER:
            for color in schemes.colors_for(category):
                assert 0 <= color.hsl.h < 360
                assert 0 <= color.hsl.s <= 1
                assert 0 <= color.hsl.l <= 1
                assert color.hex == color.hex.upper()
    
    def test_base_is_roundtrip_not_input_text(self):
        schemes = generate_schemes("  #1aa4ff ")
        assert schemes.base.hex == "#1AA4FF"
        assert schemes.base.hsl == rgb_to_hsl(parse_color("#1AA4FF"))
    
    def test_unparseable_base_uses_fallback(self):
        assert generate_schemes("nonsense").base.hex == "#1AA4FF"
    
    def test_triadic_end_to_end(self):
        schemes = generate_schemes("#1AA4FF")
        base_h = schemes.base.h
        first, second = schemes.triadic
        assert hue_distance(first.hsl.h, base_h - 120) < 1e-9
        assert hue_distance(second.hsl.h, base_h + 120) < 1e-9
    
    def test_records_are_immutable(self):
        schemes = generate_schemes("#1AA4FF")
        with pytest.raises(dataclasses.FrozenInstanceError):
            schemes.complementary[0].hex = "#000000"
    
    def test_colors_for_rejects_base_and_unknown(self):
        schemes = generate_schemes("#1AA4FF")
        with pytest.raises(ValueError):
            schemes.colors_for(Category.BASE)
        with pytest.raises(ValueError):
            schemes.colors_for("tetradic")
    
    def test_deterministic(self):
        assert generate_schemes("#5EB0E5") == generate_schemes("#5eb0e5")


class TestFlattenUnique:
    """Test cross-scheme de-duplication."""
    
    def test_limit_and_uniqueness(self):
        schemes = generate_schemes("#FF0000")
        colors = flatten_unique(schemes, 12)
        hexes = [c.hex for c in colors]
        assert len(colors) == 12
        assert len(set(hexes)) == len(hexes)
    
    def test_first_seen_order(self):
        """Quadratic +180 repeats the complementary and is skipped."""
        schemes = generate_schemes("#FF0000")
        colors = flatten_unique(schemes, 20)
        assert len(colors) == 15
        assert colors[0].category == "complementary"
        assert [c.hex for c in colors].count("#00FFFF") == 1
        assert colors[9].var_name == "--color-quadratic-1"
        assert colors[10].var_name == "--color-quadratic-3"
        assert colors[11].category == "monochrome"
    
    def test_grey_base_collapses(self):
        """Every hue rotation of a grey is the same grey."""
        colors = flatten_unique(generate_schemes("#808080"))
        assert colors[0].hex == "#808080"
        assert len(colors) == 5
        assert all(c.category == "monochrome" for c in colors[1:])
    
    def test_small_and_zero_limit(self):
        schemes = generate_schemes("#1AA4FF")
        assert len(flatten_unique(schemes, 3)) == 3
        assert flatten_unique(schemes, 0) == []


class TestContrast:
    """Test readable text color selection."""
    
    def test_extremes(self):
        assert ideal_text_color("#FFFFFF") == "#0f172a"
        assert ideal_text_color("#000000") == "#FFFFFF"
    
    def test_threshold_is_inclusive(self):
        assert yiq_luma(128, 128, 128) == 128
        assert ideal_text_color("rgb(128,128,128)") == DARK_TEXT
        assert ideal_text_color("rgb(127,127,127)") == LIGHT_TEXT
    
    def test_mixed_colors(self):
        assert ideal_text_color("#1AA4FF") == DARK_TEXT
        assert ideal_text_color("#0000FF") == LIGHT_TEXT
        assert ideal_text_color("hsl(60, 100%, 50%)") == DARK_TEXT
