"""
Physique Calculator
===================
Reverse FFMI calculation: from a height, a body fat percentage and a target
normalized FFMI, find the body weight that produces that FFMI.

Forward formulas:
    FFMI = lean_mass_kg / height_m^2
    normalized FFMI = FFMI + 6.1 * (1.8 - height_m)

Solved for weight:
    1. FFMI = normalized FFMI - 6.1 * (1.8 - height_m)
    2. lean_mass_kg = FFMI * height_m^2
    3. total_weight_kg = lean_mass_kg / (1 - body_fat / 100)
    4. fat_mass_kg = total_weight_kg - lean_mass_kg
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union, TYPE_CHECKING

import numpy as np

from reverseffmi.config import NORMALIZATION_SLOPE, REFERENCE_HEIGHT_M

if TYPE_CHECKING:
    import numpy.typing as npt

FloatOrArray = Union[float, "npt.NDArray[np.float64]"]


@dataclass(frozen=True)
class PhysiqueResult:
    """Target body composition. Fields are floats, or arrays for array input."""
    total_weight_kg: FloatOrArray
    lean_mass_kg: FloatOrArray
    fat_mass_kg: FloatOrArray


def _as_float(value: FloatOrArray) -> FloatOrArray:
    arr = np.asarray(value, dtype=np.float64)
    return arr if arr.ndim else np.float64(arr)


def denormalize_ffmi(normalized_ffmi: FloatOrArray, height_m: FloatOrArray) -> FloatOrArray:
    """Remove the height correction from a normalized FFMI."""
    return normalized_ffmi - NORMALIZATION_SLOPE * (REFERENCE_HEIGHT_M - height_m)


def compute_target_physique(
    height_cm: FloatOrArray,
    body_fat_percent: FloatOrArray,
    normalized_ffmi: FloatOrArray
) -> PhysiqueResult:
    """
    Compute the target total weight, lean mass and fat mass.

    Inputs are not range-checked. Outside the supported domain the result
    degrades numerically (e.g. body_fat_percent = 100 gives an infinite
    weight) instead of raising.

    Args:
        height_cm: Height in centimetres.
        body_fat_percent: Target body fat in percent (0-100).
        normalized_ffmi: Target normalized FFMI in kg/m^2.

    Returns:
        PhysiqueResult in kilograms. Scalar input gives float fields, numpy
        arrays are evaluated elementwise (with broadcasting).
    """
    height_m = _as_float(height_cm) / 100.0
    body_fat = _as_float(body_fat_percent)
    target = _as_float(normalized_ffmi)

    with np.errstate(divide="ignore", invalid="ignore"):
        ffmi = denormalize_ffmi(target, height_m)
        lean_mass_kg = ffmi * np.square(height_m)
        total_weight_kg = lean_mass_kg / (1.0 - body_fat / 100.0)
        fat_mass_kg = total_weight_kg - lean_mass_kg

    return PhysiqueResult(
        total_weight_kg=total_weight_kg,
        lean_mass_kg=lean_mass_kg,
        fat_mass_kg=fat_mass_kg,
    )
