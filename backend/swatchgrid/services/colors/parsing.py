"""
SwatchGrid Color Text Parsing

Turns free-form color text (hex, rgb()/rgba(), hsl()/hsla()) into a canonical
RGB triple. Parsing never raises: unrecognized text yields FALLBACK_RGB.

Formats are tried in the order of COLOR_MATCHERS; the first matcher whose
pattern accepts the text and whose converter produces a color wins.
"""

import math
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from swatchgrid.config import config
from swatchgrid.utils.logging import get_logger
from .conversions import RGB, clamp, hsl_to_rgb, round_half_up

logger = get_logger()

FALLBACK_RGB = RGB(26, 164, 255)

_SEPARATORS = re.compile(r"[,/ ]+")
_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class ColorMatcher:
    """One recognized input format: a pattern and the converter for its match."""
    name: str
    pattern: re.Pattern
    convert: Callable[[re.Match], Optional[RGB]]


def leading_number(token: str) -> Optional[float]:
    """
    Read the numeric prefix of a token ("120deg" -> 120.0, "50%" -> 50.0).
    
    Returns:
        Parsed float, or None when the token does not start with a number
        or the number overflows to infinity
    """
    match = _LEADING_NUMBER.match(token.strip())
    if match is None:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def split_arguments(body: str) -> List[str]:
    """Split functional-notation contents on runs of comma, slash and space."""
    return [part.strip() for part in _SEPARATORS.split(body) if part.strip()]


def _from_hex(match: re.Match) -> Optional[RGB]:
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c + c for c in digits)
    num = int(digits, 16)
    return RGB((num >> 16) & 255, (num >> 8) & 255, num & 255)


def _rgb_channel(token: str) -> Optional[int]:
    value = leading_number(token)
    if value is None:
        return None
    if token.endswith("%"):
        value *= 2.55
    if not math.isfinite(value):
        return None
    return round_half_up(value)


def _from_rgb_function(match: re.Match) -> Optional[RGB]:
    parts = split_arguments(match.group(1))
    if len(parts) < 3:
        return None
    
    channels = [_rgb_channel(token) for token in parts[:3]]
    if any(c is None for c in channels):
        return None
    return RGB(*channels)


def _fraction(token: str) -> Optional[float]:
    value = leading_number(token)
    if value is None:
        return None
    return value / 100.0 if token.endswith("%") else value


def _from_hsl_function(match: re.Match) -> Optional[RGB]:
    parts = split_arguments(match.group(1))
    if len(parts) < 3:
        return None
    
    h = leading_number(parts[0])
    s = _fraction(parts[1])
    l = _fraction(parts[2])
    if h is None or s is None or l is None:
        return None
    try:
        return hsl_to_rgb(h, s, l)
    except (ValueError, OverflowError):
        # s and l near float max overflow to inf or nan inside the conversion
        return None


COLOR_MATCHERS: Tuple[ColorMatcher, ...] = (
    ColorMatcher("hex", re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE), _from_hex),
    ColorMatcher("rgb", re.compile(r"^rgba?\(([^)]+)\)$", re.IGNORECASE), _from_rgb_function),
    ColorMatcher("hsl", re.compile(r"^hsla?\(([^)]+)\)$", re.IGNORECASE), _from_hsl_function),
)


def clamp_rgb(rgb: RGB) -> RGB:
    """Clamp each channel into [0, 255]."""
    return RGB(*(int(clamp(c, 0, 255)) for c in rgb))


def parse_color_tagged(text, clamp_channels: Optional[bool] = None) -> Tuple[str, RGB]:
    """
    Parse color text and report which format recognized it.
    
    Args:
        text: Color text; None and non-strings are coerced with str()
        clamp_channels: Clamp channels to [0, 255]; defaults to
            config.CLAMP_PARSED_CHANNELS
        
    Returns:
        Tuple of (format name, RGB) where format name is one of
        "hex", "rgb", "hsl" or "fallback"
    """
    if clamp_channels is None:
        clamp_channels = config.CLAMP_PARSED_CHANNELS
    
    s = str(text if text is not None else "").strip()
    
    for matcher in COLOR_MATCHERS:
        match = matcher.pattern.match(s)
        if match is None:
            continue
        rgb = matcher.convert(match)
        if rgb is None:
            # Pattern matched but arguments were unusable; later formats can't match either
            break
        return matcher.name, clamp_rgb(rgb) if clamp_channels else rgb
    
    logger.debug("Unrecognized color text, using fallback", extra={"input": s[:64]})
    return "fallback", FALLBACK_RGB


def parse_color(text, clamp_channels: Optional[bool] = None) -> RGB:
    """
    Parse free-form color text into RGB.
    
    Examples:
        >>> parse_color("#1aa4ff")
        RGB(r=26, g=164, b=255)
        >>> parse_color("rgb(255 0 0 / 50%)")
        RGB(r=255, g=0, b=0)
        >>> parse_color("not-a-color")
        RGB(r=26, g=164, b=255)
    """
    return parse_color_tagged(text, clamp_channels)[1]
