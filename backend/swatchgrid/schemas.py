"""
SwatchGrid API Schemas
Pydantic models for palette, scheme, parse and contrast responses.
"""
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field

HEX_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("swatchgrid-palette", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")


class HSLModel(BaseModel):
    """HSL triple."""
    h: float = Field(..., description="Hue in degrees")
    s: float = Field(..., description="Saturation (0.0-1.0)")
    l: float = Field(..., description="Lightness (0.0-1.0)")


class BaseColorModel(BaseModel):
    """Base color after its HSL round trip."""
    hex: str = Field(..., pattern=HEX_PATTERN, description="Hex color code in format #RRGGBB")
    h: float = Field(..., description="Hue in degrees (not normalized)")
    s: float = Field(..., description="Saturation (0.0-1.0)")
    l: float = Field(..., description="Lightness (0.0-1.0)")


class HarmonyColorModel(BaseModel):
    """A single generated harmony color."""
    hex: str = Field(..., pattern=HEX_PATTERN, description="Hex color code in format #RRGGBB")
    hsl: HSLModel
    category: str = Field(..., description="Harmony category that produced this color")
    var_name: str = Field(..., description="CSS variable name, e.g. --color-split-1")


class SchemeSetResponse(BaseModel):
    """All harmony schemes for one base color."""
    base: BaseColorModel
    complementary: List[HarmonyColorModel]
    split: List[HarmonyColorModel]
    analogous: List[HarmonyColorModel]
    triadic: List[HarmonyColorModel]
    quadratic: List[HarmonyColorModel]
    monochrome: List[HarmonyColorModel]
    input_format: str = Field(..., description="Detected input format: hex, rgb, hsl or fallback")
    swatch_png_b64: Optional[str] = Field(None, description="Base64-encoded PNG with one labeled row per scheme")
    request_id: str


class SwatchItemModel(BaseModel):
    """A rendered swatch with presentation hints."""
    hex: str = Field(..., pattern=HEX_PATTERN)
    category: str
    var_name: str = Field(..., description="--color-base or --color-NN")
    text_color: str = Field(..., description="Readable text color for this swatch")
    button_background: str
    button_color: str


class SwatchMeta(BaseModel):
    """Swatch artifact geometry."""
    format: str
    chip_size_px: int
    spacing_px: int
    total_colors: int
    colors: List[str]


class PaletteResponse(BaseModel):
    """One rendered view of the swatch grid."""
    base_hex: str = Field(..., pattern=HEX_PATTERN)
    filter: str = Field(..., description="Harmony category or 'all'")
    items: List[SwatchItemModel]
    strip: List[str] = Field(..., description="First and last swatch colors for the background strip")
    tab_background: str
    tab_color: str
    swatch_png_b64: Optional[str] = Field(None, description="Base64-encoded PNG strip of the swatches")
    swatch_meta: Optional[SwatchMeta] = None
    request_id: str
    processing_time_ms: float


class ParseResponse(BaseModel):
    """Result of parsing a color string."""
    input: str
    format: str = Field(..., description="hex, rgb, hsl or fallback")
    rgb: List[int] = Field(..., min_length=3, max_length=3)
    hex: str = Field(..., pattern=HEX_PATTERN)
    hsl: HSLModel


class ContrastResponse(BaseModel):
    """Readable text color for a background."""
    color: str
    luma: float = Field(..., description="YIQ luma (0-255)")
    text_color: str = Field(..., description="#0f172a or #FFFFFF")


class RandomColorResponse(BaseModel):
    """A random base color."""
    hex: str = Field(..., pattern=HEX_PATTERN)


class MetricsResponse(BaseModel):
    """In-process metrics summary."""
    uptime_seconds: float
    counters: Dict[str, int]
    timing_stats: Dict[str, Dict[str, Any]]
