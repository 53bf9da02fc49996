from PySide6.QtCore import QPoint, Qt
from PySide6.QtTest import QTest

from reverseffmi.model.units import UnitSystem
from reverseffmi.view.widgets.unit_toggle import UnitToggle


def make_toggle(unit_system: UnitSystem) -> UnitToggle:
    toggle = UnitToggle(unit_system)
    toggle.resize(200, 40)
    toggle.show()
    return toggle


def test_clicking_a_segment_requests_that_unit(qapp) -> None:
    toggle = make_toggle(UnitSystem.IMPERIAL)
    requested = []
    toggle.unit_requested.connect(requested.append)

    metric_center = toggle.segment_rect(UnitSystem.METRIC).center().toPoint()
    imperial_center = toggle.segment_rect(UnitSystem.IMPERIAL).center().toPoint()
    QTest.mouseClick(toggle, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, metric_center)
    QTest.mouseClick(toggle, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, imperial_center)

    assert requested == [UnitSystem.METRIC, UnitSystem.IMPERIAL]
    # the toggle only requests; the owner switches it
    assert toggle.unit_system() is UnitSystem.IMPERIAL
    toggle.close()


def test_clicking_the_rim_flips_the_unit(qapp) -> None:
    toggle = make_toggle(UnitSystem.METRIC)
    requested = []
    toggle.unit_requested.connect(requested.append)

    QTest.mouseClick(toggle, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, QPoint(1, 1))

    assert requested == [UnitSystem.IMPERIAL]
    toggle.close()


def test_segments_split_the_inner_area(qapp) -> None:
    toggle = make_toggle(UnitSystem.IMPERIAL)
    left = toggle.segment_rect(UnitSystem.IMPERIAL)
    right = toggle.segment_rect(UnitSystem.METRIC)
    assert left.right() == right.left()
    assert left.width() == right.width()
    assert toggle.unit_at(left.center().x(), left.center().y()) is UnitSystem.IMPERIAL
    assert toggle.unit_at(1, 1) is None

    toggle.set_unit_system(UnitSystem.METRIC)
    assert toggle.unit_system() is UnitSystem.METRIC
    assert not toggle.grab().isNull()
    toggle.close()
