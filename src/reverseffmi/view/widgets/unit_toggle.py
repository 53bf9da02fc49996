"""
Unit Toggle
Segmented Imperial | Metric switch with a sliding highlight.
"""
from __future__ import annotations

from PySide6.QtCore import Qt, QRectF, QSize, Signal
from PySide6.QtGui import QColor, QMouseEvent, QPainter
from PySide6.QtWidgets import QSizePolicy, QWidget

from reverseffmi.model.units import UnitSystem

BACKGROUND = QColor(31, 41, 55, 178)
HIGHLIGHT = QColor(147, 51, 234)
TEXT_ACTIVE = QColor("white")
TEXT_INACTIVE = QColor(156, 163, 175)

PADDING = 4

# left segment first
SEGMENTS = (UnitSystem.IMPERIAL, UnitSystem.METRIC)


class UnitToggle(QWidget):
    """
    Clicking a segment selects that unit. Clicking the padding around the
    segments flips the current unit. The toggle only requests a unit; the
    owner calls `set_unit_system()`.
    """
    unit_requested = Signal(object)  # UnitSystem

    def __init__(self, unit_system: UnitSystem, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._unit_system = unit_system
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setAccessibleName(self.tr("Unit system"))

    def unit_system(self) -> UnitSystem:
        return self._unit_system

    def set_unit_system(self, unit_system: UnitSystem) -> None:
        if unit_system is self._unit_system:
            return
        self._unit_system = unit_system
        self.update()

    def segment_rect(self, unit_system: UnitSystem) -> QRectF:
        inner = QRectF(self.rect()).adjusted(PADDING, PADDING, -PADDING, -PADDING)
        half = inner.width() / 2
        index = SEGMENTS.index(unit_system)
        return QRectF(inner.left() + index * half, inner.top(), half, inner.height())

    def unit_at(self, x: float, y: float) -> UnitSystem | None:
        for unit_system in SEGMENTS:
            if self.segment_rect(unit_system).contains(x, y):
                return unit_system
        return None

    def sizeHint(self) -> QSize:
        return QSize(200, 40)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        event.accept()
        pos = event.position()
        target = self.unit_at(pos.x(), pos.y())
        self.unit_requested.emit(target if target is not None else self._unit_system.toggled())

    def paintEvent(self, event) -> None:
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        try:
            outer = QRectF(self.rect())
            p.setPen(Qt.PenStyle.NoPen)
            p.setBrush(BACKGROUND)
            p.drawRoundedRect(outer, outer.height() / 2, outer.height() / 2)

            active = self.segment_rect(self._unit_system)
            p.setBrush(HIGHLIGHT)
            p.drawRoundedRect(active, active.height() / 2, active.height() / 2)

            for unit_system in SEGMENTS:
                p.setPen(TEXT_ACTIVE if unit_system is self._unit_system else TEXT_INACTIVE)
                p.drawText(self.segment_rect(unit_system), Qt.AlignmentFlag.AlignCenter, self.tr(unit_system.value))
        finally:
            p.end()
