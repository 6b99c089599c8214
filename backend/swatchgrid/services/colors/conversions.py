"""
SwatchGrid Color Space Conversions

RGB <-> HSL conversion and hex formatting. Hue is expressed in degrees,
saturation and lightness as [0, 1] fractions, RGB as 8-bit integer channels.
"""

import math
from typing import NamedTuple


class RGB(NamedTuple):
    """8-bit sRGB color."""
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """HSL color. Hue in degrees, saturation/lightness in [0, 1]."""
    h: float
    s: float
    l: float


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves rounded towards +infinity.
    
    Python's round() uses banker's rounding, which would turn 127.5 into 128
    but 126.5 into 126; channel math expects a consistent half-up rule.
    """
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value to the closed interval [low, high]."""
    return min(max(value, low), high)


def wrap_hue(h: float) -> float:
    """
    Reduce a hue angle into [0, 360) using a true mathematical modulo.
    
    Args:
        h: Hue in degrees (any real, may be negative)
        
    Returns:
        Equivalent hue in [0, 360)
    """
    wrapped = h % 360.0
    # -1e-14 % 360 gives 360.0 in floating point
    if wrapped >= 360.0:
        wrapped -= 360.0
    return wrapped


def adjust(hsl: HSL, dh: float = 0.0, ds: float = 0.0, dl: float = 0.0) -> HSL:
    """
    Offset an HSL color, wrapping hue and clamping saturation/lightness.
    
    Args:
        hsl: Source color
        dh: Hue delta in degrees
        ds: Saturation delta
        dl: Lightness delta
        
    Returns:
        New HSL with hue in [0, 360) and s, l in [0, 1]
    """
    return HSL(
        h=wrap_hue(hsl.h + dh),
        s=clamp(hsl.s + ds, 0.0, 1.0),
        l=clamp(hsl.l + dl, 0.0, 1.0),
    )


def rgb_to_hsl(rgb: RGB) -> HSL:
    """
    Convert an RGB color to HSL.
    
    The hue is not re-normalized; callers wrap it before use.
    
    Args:
        rgb: 8-bit RGB channels
        
    Returns:
        HSL with hue in degrees, saturation and lightness in [0, 1]
    """
    r, g, b = rgb.r / 255.0, rgb.g / 255.0, rgb.b / 255.0
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    h = 0.0
    s = 0.0
    l = (max_c + min_c) / 2.0
    
    if max_c != min_c:
        d = max_c - min_c
        s = d / (2.0 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)
        if max_c == r:
            h = (g - b) / d + (6.0 if g < b else 0.0)
        elif max_c == g:
            h = (b - r) / d + 2.0
        else:
            h = (r - g) / d + 4.0
        h *= 60.0
    
    return HSL(h, s, l)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert an HSL color to 8-bit RGB.
    
    Args:
        h: Hue in degrees (any real; wrapped into [0, 360))
        s: Saturation [0, 1]
        l: Lightness [0, 1]
        
    Returns:
        RGB with each channel rounded to the nearest integer
    """
    hue = wrap_hue(h) / 360.0
    
    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, hue + 1 / 3)
        g = _hue_to_channel(p, q, hue)
        b = _hue_to_channel(p, q, hue - 1 / 3)
    
    return RGB(
        round_half_up(r * 255),
        round_half_up(g * 255),
        round_half_up(b * 255),
    )


def rgb_to_hex(rgb: RGB) -> str:
    """
    Format an RGB color as canonical uppercase "#RRGGBB".
    
    Examples:
        >>> rgb_to_hex(RGB(26, 164, 255))
        '#1AA4FF'
    """
    r, g, b = (round_half_up(c) for c in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL straight to canonical hex."""
    return rgb_to_hex(hsl_to_rgb(h, s, l))
