"""
Calculator State (Data Model)
=============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the current height, body fat, target FFMI and
   unit system in one place. The sliders never own a value; they propose one
   and the host writes it here.
2. Decoupling: Views read from this object and re-render; nothing in here
   knows about Qt.

Classes:
    CalculatorState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from reverseffmi.config import (
    HEIGHT_RANGES, BODY_FAT_RANGE, FFMI_RANGE, DEFAULT_UNIT_SYSTEM,
    DEFAULT_HEIGHT_CM, DEFAULT_BODY_FAT_PERCENT, DEFAULT_NORMALIZED_FFMI
)
from reverseffmi.model.calculator import PhysiqueResult, compute_target_physique
from reverseffmi.model.categories import FFMICategory, classify_ffmi
from reverseffmi.model.formatting import (
    format_height_imperial, format_height_metric, format_one_decimal
)
from reverseffmi.model.units import SliderConfig, UnitSystem
from reverseffmi.utils import cm_to_inches, inches_to_cm

logger = logging.getLogger(__name__)


@dataclass
class CalculatorState:
    """
    Current inputs of the calculator.

    Height is always stored in centimetres, whatever unit is displayed.
    """
    height_cm: float = DEFAULT_HEIGHT_CM
    body_fat_percent: float = DEFAULT_BODY_FAT_PERCENT
    normalized_ffmi: float = DEFAULT_NORMALIZED_FFMI
    unit_system: UnitSystem = DEFAULT_UNIT_SYSTEM

    # ---- derived values ----

    @property
    def is_imperial(self) -> bool:
        return self.unit_system is UnitSystem.IMPERIAL

    def result(self) -> PhysiqueResult:
        return compute_target_physique(self.height_cm, self.body_fat_percent, self.normalized_ffmi)

    def category(self) -> FFMICategory:
        return classify_ffmi(self.normalized_ffmi)

    def height_slider_config(self) -> SliderConfig:
        """Height slider domain and value in the current display unit."""
        height_range = HEIGHT_RANGES[self.unit_system]
        if self.is_imperial:
            return height_range.with_value(
                cm_to_inches(self.height_cm), unit="", format_value=format_height_imperial
            )
        return height_range.with_value(self.height_cm, unit="cm", format_value=format_height_metric)

    def body_fat_slider_config(self) -> SliderConfig:
        return BODY_FAT_RANGE.with_value(self.body_fat_percent, unit="%", format_value=format_one_decimal)

    def ffmi_slider_config(self) -> SliderConfig:
        return FFMI_RANGE.with_value(self.normalized_ffmi, format_value=format_one_decimal)

    # ---- mutations ----

    def set_height_display(self, value: float) -> None:
        """Set height from a value in the current display unit (inches or cm)."""
        self.height_cm = inches_to_cm(value) if self.is_imperial else value
        logger.debug(f"Height set to {self.height_cm:.2f} cm")

    def set_body_fat_percent(self, value: float) -> None:
        self.body_fat_percent = value
        logger.debug(f"Body fat set to {value}%")

    def set_normalized_ffmi(self, value: float) -> None:
        self.normalized_ffmi = value
        logger.debug(f"Normalized FFMI set to {value}")

    def set_unit_system(self, unit_system: UnitSystem) -> bool:
        """
        Switch the display unit and move the stored height onto the new unit's grid.

        The height is converted to the target unit, snapped to that unit's
        step, then clamped to its range (in that order).

        Returns:
            True if the unit changed, False if it already was the active one.

        Raises:
            ValueError: if unit_system is not a UnitSystem.
        """
        if not isinstance(unit_system, UnitSystem):
            raise ValueError(f"Unknown unit system: {unit_system!r}")
        if unit_system is self.unit_system:
            return False

        target_range = HEIGHT_RANGES[unit_system]
        if unit_system is UnitSystem.IMPERIAL:
            inches = target_range.settle(cm_to_inches(self.height_cm))
            self.height_cm = inches_to_cm(inches)
        else:
            self.height_cm = target_range.settle(self.height_cm)

        self.unit_system = unit_system
        logger.info(f"Switched to {unit_system.value} units, height is {self.height_cm:.2f} cm")
        return True

    def toggle_unit_system(self) -> bool:
        return self.set_unit_system(self.unit_system.toggled())
