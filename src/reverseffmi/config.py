"""
Configuration & Constants
=========================
This module serves as the central registry for slider domains, default inputs
and global settings.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (60, 84, 152, 213, ...) scattered
   throughout the view and model code.
2. Deployment: It reads the few runtime knobs (log level, log file) from the
   environment so a packaged build can be debugged without code changes.

Exports:
    HEIGHT_RANGES (dict): Height slider domain per UnitSystem.
    BODY_FAT_RANGE (SliderRange): Body fat % slider domain.
    FFMI_RANGE (SliderRange): Normalized FFMI slider domain.
    LOG_LEVEL (int): Level passed to setup_logging().
    LOG_FILE (str | None): Optional log file path.
"""
import logging
import os
from typing import Dict, Optional

from reverseffmi.model.units import SliderRange, UnitSystem

APP_ID = "reverse-ffmi"
VISIBLE_APP_NAME = "Reverse FFMI Calculator"

# Height: 5'0" to 7'0" in half inches, or 152 cm to 213 cm in whole centimetres
HEIGHT_RANGES: Dict[UnitSystem, SliderRange] = {
    UnitSystem.IMPERIAL: SliderRange(min=60.0, max=84.0, step=0.5),
    UnitSystem.METRIC: SliderRange(min=152.0, max=213.0, step=1.0),
}

BODY_FAT_RANGE = SliderRange(min=5.0, max=35.0, step=0.5)
FFMI_RANGE = SliderRange(min=15.0, max=30.0, step=0.5)

# Reference height of the FFMI normalization [m]
REFERENCE_HEIGHT_M = 1.8
# Slope of the FFMI height correction [kg/m^2 per m]
NORMALIZATION_SLOPE = 6.1

DEFAULT_UNIT_SYSTEM = UnitSystem.IMPERIAL
DEFAULT_HEIGHT_CM = 178.0  # ~5'10"
DEFAULT_BODY_FAT_PERCENT = 12.0
DEFAULT_NORMALIZED_FFMI = 20.0

# Keyboard PageUp/PageDown jump
PAGE_STEP_MULTIPLIER = 10


def _env_log_level(default: int = logging.INFO) -> int:
    name = os.environ.get("REVERSEFFMI_LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        print(f"WARNING: Unknown log level '{name}', falling back to INFO")
        return default
    return level


LOG_LEVEL: int = _env_log_level()
LOG_FILE: Optional[str] = os.environ.get("REVERSEFFMI_LOG_FILE") or None
