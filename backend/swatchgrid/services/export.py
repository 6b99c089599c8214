"""
Export artifacts for clipboard collaborators: a CSS custom-property block
and a comma-joined hex list, both capped at the palette limit including
the base color.
"""

from typing import List, Sequence

from swatchgrid.services.colors.harmony import SchemeSet
from swatchgrid.services.colors.harmony.dedup import DEFAULT_LIMIT, flatten_unique

ALL_FILTER = "all"


def palette_hexes(schemes: SchemeSet, palette_filter: str, limit: int = DEFAULT_LIMIT) -> List[str]:
    """
    Hex values shown for a filter: the base first, then the filter's colors.
    
    Args:
        schemes: Generated scheme set
        palette_filter: Harmony category name or "all"
        limit: Maximum entries including the base
        
    Returns:
        Up to limit hex strings
        
    Raises:
        ValueError: If palette_filter is not a harmony category or "all"
    """
    if palette_filter == ALL_FILTER:
        colors = flatten_unique(schemes, limit)
    else:
        colors = schemes.colors_for(palette_filter)
    return ([schemes.base.hex] + [c.hex for c in colors])[:limit]


def css_var_name(index: int) -> str:
    """CSS custom property for the index-th (1-based) non-base swatch."""
    return f"--color-{index:02d}"


def css_variables_block(hexes: Sequence[str], limit: int = DEFAULT_LIMIT) -> str:
    """
    Render hexes as a :root block, first entry as --color-base.
    
    Examples:
        >>> print(css_variables_block(["#1AA4FF", "#FF751A"]))
        :root {
          --color-base: #1AA4FF;
          --color-01: #FF751A;
        }
    """
    items = list(hexes)[:limit]
    if not items:
        return ":root {\n}"
    
    lines = [":root {", f"  --color-base: {items[0]};"]
    for i, hex_value in enumerate(items[1:]):
        lines.append(f"  {css_var_name(i + 1)}: {hex_value};")
    lines.append("}")
    return "\n".join(lines)


def hex_list(hexes: Sequence[str], limit: int = DEFAULT_LIMIT) -> str:
    """Join hexes with ", ", capped at limit entries."""
    return ", ".join(list(hexes)[:limit])
