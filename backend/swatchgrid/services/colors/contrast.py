"""
Readable foreground selection using the YIQ luma heuristic.
"""

from .parsing import parse_color

DARK_TEXT = "#0f172a"
LIGHT_TEXT = "#FFFFFF"
LUMA_THRESHOLD = 128


def yiq_luma(r: float, g: float, b: float) -> float:
    """Weighted grayscale approximation of an RGB color, 0-255."""
    return (r * 299 + g * 587 + b * 114) / 1000


def ideal_text_color(color_text: str) -> str:
    """
    Pick the text color that reads best on the given background.
    
    Args:
        color_text: Background color in any parse_color format
        
    Returns:
        DARK_TEXT for light backgrounds, LIGHT_TEXT otherwise
    """
    return DARK_TEXT if yiq_luma(*parse_color(color_text)) >= LUMA_THRESHOLD else LIGHT_TEXT
