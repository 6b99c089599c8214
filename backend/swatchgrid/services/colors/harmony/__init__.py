"""
SwatchGrid Harmony Engine

Derives the six named harmony schemes (complementary, split, analogous,
triadic, quadratic, monochrome) from a single base color. Every scheme is
a fixed list of hue, saturation and lightness offsets applied to the base
HSL; results are packed as immutable HarmonyColor records.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from ..conversions import HSL, adjust, hsl_to_hex, rgb_to_hsl
from ..parsing import parse_color


class Category(str, Enum):
    """Closed set of harmony categories plus the base swatch."""
    BASE = "base"
    COMPLEMENTARY = "complementary"
    SPLIT = "split"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    QUADRATIC = "quadratic"
    MONOCHROME = "monochrome"


# Order used when flattening schemes into one palette
SCHEME_ORDER: Tuple[Category, ...] = (
    Category.COMPLEMENTARY,
    Category.SPLIT,
    Category.ANALOGOUS,
    Category.TRIADIC,
    Category.QUADRATIC,
    Category.MONOCHROME,
)

HUE_OFFSETS: Dict[Category, Tuple[float, ...]] = {
    Category.COMPLEMENTARY: (180,),
    Category.SPLIT: (180 - 30, 180 + 30),
    Category.ANALOGOUS: (-60, -30, 30, 60),
    Category.TRIADIC: (-120, 120),
    Category.QUADRATIC: (90, 180, 270),
}

MONOCHROME_STEPS: Tuple[float, ...] = (-0.22, -0.12, 0.12, 0.22)
MONOCHROME_SATURATION_SHIFT = 0.05


@dataclass(frozen=True)
class HarmonyColor:
    """A generated palette color with its scheme metadata."""
    hex: str  # "#RRGGBB" uppercase
    hsl: HSL
    category: str
    var_name: str  # "--color-<category>-<n>"


@dataclass(frozen=True)
class BaseColor:
    """The base color after its own HSL -> hex round trip."""
    hex: str
    h: float
    s: float
    l: float

    @property
    def hsl(self) -> HSL:
        return HSL(self.h, self.s, self.l)


@dataclass(frozen=True)
class SchemeSet:
    """All harmony schemes for one base color. Replaced wholesale on change."""
    base: BaseColor
    complementary: Tuple[HarmonyColor, ...]
    split: Tuple[HarmonyColor, ...]
    monochrome: Tuple[HarmonyColor, ...]
    analogous: Tuple[HarmonyColor, ...]
    triadic: Tuple[HarmonyColor, ...]
    quadratic: Tuple[HarmonyColor, ...]

    def colors_for(self, category) -> Tuple[HarmonyColor, ...]:
        """
        Colors of one harmony category.
        
        Raises:
            ValueError: If category is base or not a harmony category
        """
        category = Category(category)
        if category is Category.BASE:
            raise ValueError("base is not a harmony category")
        return getattr(self, category.value)


def monochrome_offsets(dl: float) -> Tuple[float, float]:
    """
    Saturation and lightness deltas for one monochrome step.
    
    Lighter steps lose a little saturation, darker steps gain it.
    
    Returns:
        Tuple of (ds, dl)
    """
    ds = -MONOCHROME_SATURATION_SHIFT if dl > 0 else MONOCHROME_SATURATION_SHIFT
    return ds, dl


def pack(colors: List[HSL], category: Category) -> Tuple[HarmonyColor, ...]:
    """Convert derived HSL values to HarmonyColor records numbered from 1."""
    return tuple(
        HarmonyColor(
            hex=hsl_to_hex(*hsl),
            hsl=hsl,
            category=category.value,
            var_name=f"--color-{category.value}-{i + 1}",
        )
        for i, hsl in enumerate(colors)
    )


def generate_hue_scheme(base: HSL, category: Category) -> Tuple[HarmonyColor, ...]:
    """Rotate the base hue by each offset registered for category."""
    return pack([adjust(base, dh=dh) for dh in HUE_OFFSETS[category]], category)


def generate_monochrome(base: HSL) -> Tuple[HarmonyColor, ...]:
    """Shift lightness in fixed steps, compensating saturation."""
    derived = []
    for step in MONOCHROME_STEPS:
        ds, dl = monochrome_offsets(step)
        derived.append(adjust(base, ds=ds, dl=dl))
    return pack(derived, Category.MONOCHROME)


def generate_schemes_from_hsl(base: HSL) -> SchemeSet:
    """
    Build the full SchemeSet for an already-converted base color.
    
    Args:
        base: Base color; hue may be unnormalized
        
    Returns:
        SchemeSet with every category populated
    """
    h, s, l = base
    return SchemeSet(
        base=BaseColor(hex=hsl_to_hex(h, s, l), h=h, s=s, l=l),
        complementary=generate_hue_scheme(base, Category.COMPLEMENTARY),
        split=generate_hue_scheme(base, Category.SPLIT),
        monochrome=generate_monochrome(base),
        analogous=generate_hue_scheme(base, Category.ANALOGOUS),
        triadic=generate_hue_scheme(base, Category.TRIADIC),
        quadratic=generate_hue_scheme(base, Category.QUADRATIC),
    )


def generate_schemes(base_text: str) -> SchemeSet:
    """
    Generate all harmony schemes for a base color.
    
    Args:
        base_text: Base color in any format accepted by parse_color
        
    Returns:
        SchemeSet; unparseable text yields the schemes of the fallback color
    """
    return generate_schemes_from_hsl(rgb_to_hsl(parse_color(base_text)))

