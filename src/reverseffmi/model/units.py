"""
Unit Systems & Slider Domains
=============================
Value types describing which unit the user works in and the numeric domain
(min, max, step) of every input control.

Classes:
    UnitSystem: Imperial or Metric.
    SliderRange: Inclusive [min, max] domain with a step grid anchored at min.
    SliderConfig: A SliderRange together with the current value and display hints.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from reverseffmi.utils import snap_and_clamp


class UnitSystem(str, Enum):
    IMPERIAL = "Imperial"
    METRIC = "Metric"

    def toggled(self) -> UnitSystem:
        return UnitSystem.METRIC if self is UnitSystem.IMPERIAL else UnitSystem.IMPERIAL


@dataclass(frozen=True)
class SliderRange:
    """
    Domain of a continuous control.

    Raises:
        ValueError: if min >= max or step <= 0.
    """
    min: float
    max: float
    step: float

    def __post_init__(self) -> None:
        if self.min >= self.max:
            raise ValueError(f"Slider min ({self.min}) must be smaller than max ({self.max}).")
        if self.step <= 0:
            raise ValueError(f"Slider step must be positive, got {self.step}.")

    def settle(self, value: float) -> float:
        """Snap onto the step grid, then clamp into [min, max]."""
        return snap_and_clamp(value, self.min, self.max, self.step)

    def contains(self, value: float, tol: float = 1e-9) -> bool:
        """True if value lies in range and on the step grid (within tol)."""
        if value < self.min - tol or value > self.max + tol:
            return False
        steps = (value - self.min) / self.step
        return abs(steps - round(steps)) <= tol * max(1.0, abs(steps))

    def with_value(
        self,
        value: float,
        *,
        unit: str = "",
        format_value: Optional[Callable[[float], str]] = None
    ) -> SliderConfig:
        return SliderConfig(
            min=self.min, max=self.max, step=self.step,
            value=value, unit=unit, format_value=format_value
        )


@dataclass(frozen=True)
class SliderConfig:
    """Everything the host hands to a slider: domain, current value and display hints."""
    min: float
    max: float
    step: float
    value: float
    unit: str = ""
    format_value: Optional[Callable[[float], str]] = None

    def __post_init__(self) -> None:
        SliderRange(self.min, self.max, self.step)

    @property
    def range(self) -> SliderRange:
        return SliderRange(self.min, self.max, self.step)
