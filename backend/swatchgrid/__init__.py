"""
SwatchGrid

Harmony palette engine: parses a base color, converts between RGB and HSL,
and derives complementary, split, analogous, triadic, quadratic and
monochrome schemes for swatch-grid presentation.
"""

__version__ = "1.0.0"
