"""
SwatchGrid Swatch Rendering

Creates PNG swatch artifacts for UI preview: a single strip for one
rendered frame, or labeled rows for every harmony category of a scheme set.
"""

import base64
import io
from typing import Any, Dict, List, Sequence

from PIL import Image, ImageDraw

from ..parsing import parse_color
from . import SCHEME_ORDER, SchemeSet


def create_color_chip(color_hex: str, chip_size: int = 40, label_color: str = None) -> Image.Image:
    """
    Create a single color chip image.
    
    Args:
        color_hex: Hex color to render
        chip_size: Size of the square chip in pixels
        label_color: If given, draw the hex code on the chip in this color
        
    Returns:
        PIL Image of the color chip
    """
    chip = Image.new('RGB', (chip_size, chip_size), tuple(parse_color(color_hex)))
    
    if label_color is not None:
        draw = ImageDraw.Draw(chip)
        draw.text((2, chip_size - 12), color_hex.lstrip('#'), fill=tuple(parse_color(label_color)))
    
    return chip


def create_strip(
    hexes: Sequence[str],
    chip_size: int = 40,
    spacing: int = 2,
    label_colors: Sequence[str] = None
) -> Image.Image:
    """
    Create a horizontal strip of color chips.
    
    Args:
        hexes: Colors in display order
        chip_size: Size of each color chip
        spacing: Spacing between chips
        label_colors: Optional per-chip label colors (same length as hexes)
        
    Returns:
        PIL Image of the color strip
    """
    if not hexes:
        return Image.new('RGB', (chip_size, chip_size), (255, 255, 255))
    
    num_chips = len(hexes)
    strip_width = num_chips * chip_size + (num_chips - 1) * spacing
    strip = Image.new('RGB', (strip_width, chip_size), (255, 255, 255))
    
    x_pos = 0
    for i, color_hex in enumerate(hexes):
        label = label_colors[i] if label_colors else None
        strip.paste(create_color_chip(color_hex, chip_size, label), (x_pos, 0))
        x_pos += chip_size + spacing
    
    return strip


def create_scheme_swatch(
    schemes: SchemeSet,
    chip_size: int = 40,
    spacing: int = 2,
    row_spacing: int = 4,
    include_labels: bool = True
) -> Image.Image:
    """
    Create a swatch with one labeled row per harmony category.
    
    The base color leads every row so each scheme reads against it.
    """
    rows = []
    for category in SCHEME_ORDER:
        hexes = [schemes.base.hex] + [c.hex for c in schemes.colors_for(category)]
        rows.append((category.value, create_strip(hexes, chip_size, spacing)))
    
    label_height = 16 if include_labels else 0
    width = max(row.width for _, row in rows)
    height = sum(label_height + row.height + row_spacing for _, row in rows) - row_spacing
    
    swatch = Image.new('RGB', (width, height), (255, 255, 255))
    draw = ImageDraw.Draw(swatch)
    
    y_pos = 0
    for name, row in rows:
        if include_labels:
            draw.text((2, y_pos), name.title(), fill=(0, 0, 0))
            y_pos += label_height
        swatch.paste(row, (0, y_pos))
        y_pos += row.height + row_spacing
    
    return swatch


def encode_png_b64(image: Image.Image) -> str:
    """Encode a PIL image as base64 PNG."""
    buffer = io.BytesIO()
    image.save(buffer, format='PNG')
    return base64.b64encode(buffer.getvalue()).decode('utf-8')


def render_frame_swatch(frame, chip_size: int = 40, spacing: int = 2) -> str:
    """
    Render a RenderFrame's swatches as a base64-encoded PNG strip.
    
    Each chip carries its hex code in the frame's chosen text color.
    """
    strip = create_strip(
        [item.hex for item in frame.items],
        chip_size,
        spacing,
        label_colors=[item.text_color for item in frame.items]
    )
    return encode_png_b64(strip)


def render_scheme_swatch(schemes: SchemeSet, chip_size: int = 40, spacing: int = 2) -> str:
    """Render every harmony category as a base64-encoded labeled PNG."""
    return encode_png_b64(create_scheme_swatch(schemes, chip_size, spacing))


def create_swatch_metadata(hexes: Sequence[str], chip_size: int, spacing: int) -> Dict[str, Any]:
    """
    Describe a rendered strip: geometry and color order.
    
    Returns:
        Dictionary with swatch metadata
    """
    colors: List[str] = list(hexes)
    return {
        "format": "strip",
        "chip_size_px": chip_size,
        "spacing_px": spacing,
        "total_colors": len(colors),
        "colors": colors
    }
