import math

CM_PER_INCH = 2.54
LBS_PER_KG = 2.20462


def inches_to_cm(inches: float) -> float:
    """Convert inches to centimetres."""
    return inches * CM_PER_INCH

def cm_to_inches(cm: float) -> float:
    """Convert centimetres to inches."""
    return cm / CM_PER_INCH

def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds (display only)."""
    return kg * LBS_PER_KG

def snap_to_step(value: float, min_value: float, step: float) -> float:
    """
    Snap a value to the nearest point of the grid ``min_value + k * step``.

    Ties are rounded half-up (towards +inf), so a value exactly half a step
    above a grid point goes to the next point.
    """
    steps = math.floor((value - min_value) / step + 0.5)
    return min_value + steps * step

def clamp(value: float, min_value: float, max_value: float) -> float:
    """Restrict a value to the inclusive range [min_value, max_value]."""
    return max(min_value, min(max_value, value))

def snap_and_clamp(value: float, min_value: float, max_value: float, step: float) -> float:
    """Snap to the step grid first, then clamp into range."""
    return clamp(snap_to_step(value, min_value, step), min_value, max_value)
