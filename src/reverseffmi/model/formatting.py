"""Display formatting for heights, weights and slider values."""
from __future__ import annotations

import math

from reverseffmi.model.units import UnitSystem
from reverseffmi.utils import kg_to_lbs

HALF_GLYPH = "½"


def format_height_imperial(inches: float) -> str:
    """
    Format inches as feet and inches, e.g. 70 -> 5'10" and 70.5 -> 5'10½".

    The half-inch glyph is used when the fractional inch is 0.5 +- 0.01.
    """
    # absorb cm -> inch round-trip noise (69.99999999 must read as 5'10")
    inches = round(inches, 6)
    feet = math.floor(inches / 12)
    remaining = inches % 12
    whole = math.floor(remaining)
    fraction = remaining - whole

    if abs(fraction - 0.5) < 0.01:
        return f"{feet}'{whole}{HALF_GLYPH}\""
    return f"{feet}'{whole}\""

def format_height_metric(cm: float) -> str:
    return f"{cm:g}"

def format_one_decimal(value: float) -> str:
    return f"{value:.1f}"

def format_weight(kg: float, unit_system: UnitSystem) -> str:
    """Format a mass to one decimal, in lbs for imperial and kg for metric."""
    if unit_system is UnitSystem.IMPERIAL:
        return format_one_decimal(kg_to_lbs(kg))
    return format_one_decimal(kg)

def weight_unit_label(unit_system: UnitSystem) -> str:
    return "lbs" if unit_system is UnitSystem.IMPERIAL else "kg"
