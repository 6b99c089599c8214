"""
Palette de-duplication across harmony schemes.
"""

from typing import List

from . import SCHEME_ORDER, HarmonyColor, SchemeSet

DEFAULT_LIMIT = 12


def flatten_unique(schemes: SchemeSet, limit: int = DEFAULT_LIMIT) -> List[HarmonyColor]:
    """
    Flatten every harmony category into one list without repeated colors.
    
    Categories are concatenated in SCHEME_ORDER (base excluded). The first
    occurrence of each hex wins and collection stops once limit distinct
    colors are found.
    
    Args:
        schemes: Generated scheme set
        limit: Maximum number of colors returned
        
    Returns:
        Colors in first-seen order, at most limit entries
    """
    seen = set()
    out: List[HarmonyColor] = []
    if limit <= 0:
        return out
    
    for category in SCHEME_ORDER:
        for color in schemes.colors_for(category):
            key = color.hex.upper()
            if key in seen:
                continue
            seen.add(key)
            out.append(color)
            if len(out) >= limit:
                return out
    return out
