"""
FFMI Categories
===============
Classification of a normalized FFMI into seven ordered bands.

Bands are left-closed / right-open; the last band (Elite) is open-ended.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FFMICategory:
    label: str
    description: str
    color: str  # hex, used by the view
    lower: float  # inclusive
    upper: float  # exclusive

    def contains(self, normalized_ffmi: float) -> bool:
        return self.lower <= normalized_ffmi < self.upper

    @property
    def range_text(self) -> str:
        """Short range text for the reference guide, e.g. '<18' or '18-20'."""
        if math.isinf(self.lower):
            return f"<{self.upper:g}"
        if math.isinf(self.upper):
            return f"{self.lower:g}+"
        return f"{self.lower:g}-{self.upper:g}"


FFMI_CATEGORIES: Tuple[FFMICategory, ...] = (
    FFMICategory("Below Average", "Below average muscle mass", "#9CA3AF", -math.inf, 18.0),
    FFMICategory("Average", "Average muscle development", "#60A5FA", 18.0, 20.0),
    FFMICategory("Above Average", "Noticeable muscle development", "#4ADE80", 20.0, 22.0),
    FFMICategory("Excellent", "Excellent natural development", "#FACC15", 22.0, 23.0),
    FFMICategory("Superior", "Near natural limit", "#FB923C", 23.0, 25.0),
    FFMICategory("Natural Limit", "At or near genetic ceiling", "#F87171", 25.0, 26.0),
    FFMICategory("Elite", "Likely enhanced or genetic outlier", "#C084FC", 26.0, math.inf),
)


def classify_ffmi(normalized_ffmi: float) -> FFMICategory:
    """Return the band containing normalized_ffmi."""
    for category in FFMI_CATEGORIES:
        if normalized_ffmi < category.upper:
            return category
    # nan compares False everywhere; treat it as the top band
    return FFMI_CATEGORIES[-1]


def reference_bands() -> Tuple[FFMICategory, ...]:
    """Bands shown in the reference guide (the open-ended top band is omitted)."""
    return tuple(c for c in FFMI_CATEGORIES if not math.isinf(c.upper))
