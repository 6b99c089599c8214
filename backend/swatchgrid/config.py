"""
SwatchGrid Configuration
Manages environment variables and defaults for the palette engine and API.
"""
import os
from typing import List


class Config:
    """Configuration class for SwatchGrid services."""
    
    # Logging
    LOG_LEVEL: str = os.environ.get("SWATCHGRID_LOG_LEVEL", "INFO")
    LOG_JSON: bool = bool(int(os.environ.get("SWATCHGRID_LOG_JSON", "0")))
    
    # Palette defaults
    DEFAULT_BASE_COLOR: str = os.environ.get("SWATCHGRID_DEFAULT_BASE_COLOR", "#5eb0e5")
    DEFAULT_FILTER: str = os.environ.get("SWATCHGRID_DEFAULT_FILTER", "split")
    PALETTE_LIMIT: int = int(os.environ.get("SWATCHGRID_PALETTE_LIMIT", "12"))
    
    # Parsed rgb()/hsl() channels outside [0, 255] are clamped unless disabled
    CLAMP_PARSED_CHANNELS: bool = bool(int(os.environ.get("SWATCHGRID_CLAMP_PARSED_CHANNELS", "1")))
    
    # Demo auto-advance (milliseconds)
    DEMO_INTERVAL_MS: int = int(os.environ.get("SWATCHGRID_DEMO_INTERVAL_MS", "2000"))
    DEMO_START_DELAY_MS: int = int(os.environ.get("SWATCHGRID_DEMO_START_DELAY_MS", "600"))
    
    # Swatch artifact
    SWATCH_CHIP_SIZE: int = int(os.environ.get("SWATCHGRID_SWATCH_CHIP_SIZE", "48"))
    SWATCH_SPACING: int = int(os.environ.get("SWATCHGRID_SWATCH_SPACING", "2"))
    
    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get(
        "SWATCHGRID_ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173"
    )
    
    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("SWATCHGRID_METRICS_ENABLED", "1")))
    
    SERVICE_NAME: str = "swatchgrid-palette"
    
    @classmethod
    def validate_filter(cls, palette_filter: str) -> bool:
        """Validate category filter parameter."""
        return palette_filter in [
            "all", "complementary", "split", "analogous",
            "triadic", "quadratic", "monochrome"
        ]
    
    @classmethod
    def validate_limit(cls, limit: int) -> bool:
        """Validate palette limit parameter."""
        return 1 <= limit <= 99
    
    @classmethod
    def validate_chip_size(cls, chip_size: int) -> bool:
        """Validate swatch chip size in pixels."""
        return 8 <= chip_size <= 256
    
    @classmethod
    def allowed_origins(cls) -> List[str]:
        """CORS origins as a list, empty entries dropped."""
        return [o.strip() for o in cls.ALLOWED_ORIGINS.split(",") if o.strip()]


# Global config instance
config = Config()
