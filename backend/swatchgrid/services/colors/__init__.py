"""
SwatchGrid Colors Module

Provides color text parsing, RGB/HSL/hex conversion, harmony scheme
generation and contrast advice for swatch-grid palettes.
"""

__version__ = "1.0.0"
