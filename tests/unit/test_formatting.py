from reverseffmi.model.formatting import (
    format_height_imperial, format_height_metric, format_one_decimal, format_weight, weight_unit_label
)
from reverseffmi.model.units import UnitSystem
from reverseffmi.utils import cm_to_inches, inches_to_cm


def test_format_height_imperial_whole_inches() -> None:
    assert format_height_imperial(60.0) == "5'0\""
    assert format_height_imperial(70.0) == "5'10\""
    assert format_height_imperial(84.0) == "7'0\""


def test_format_height_imperial_half_inch_glyph() -> None:
    assert format_height_imperial(70.5) == "5'10½\""
    assert format_height_imperial(71.505) == "5'11½\""
    assert format_height_imperial(71.3) == "5'11\""


def test_format_height_imperial_ignores_round_trip_noise() -> None:
    for inches in (60.0, 69.5, 70.0, 72.0, 83.5):
        assert format_height_imperial(cm_to_inches(inches_to_cm(inches))) == format_height_imperial(inches)
    assert format_height_imperial(71.9999999999) == "6'0\""


def test_format_height_metric() -> None:
    assert format_height_metric(178.0) == "178"
    assert format_height_metric(177.8) == "177.8"


def test_format_weight_by_unit_system() -> None:
    assert format_weight(71.5698, UnitSystem.METRIC) == "71.6"
    assert format_weight(71.5698, UnitSystem.IMPERIAL) == "157.8"
    assert weight_unit_label(UnitSystem.IMPERIAL) == "lbs"
    assert weight_unit_label(UnitSystem.METRIC) == "kg"


def test_format_one_decimal() -> None:
    assert format_one_decimal(12.0) == "12.0"
    assert format_one_decimal(20.5) == "20.5"
