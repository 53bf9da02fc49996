"""
Smooth Slider
=============
A continuous, controlled range input: drag, mouse wheel and keyboard
interaction, snapped to a step grid and clamped to [min, max].

The slider never changes its own value. Every interaction only *proposes* a
value through `value_requested` (and the optional `on_change` callback);
the owner decides and calls `set_value()`.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import Qt, QEvent, QObject, QPointF, QRectF, QSize, Signal
from PySide6.QtGui import (
    QColor, QFont, QKeyEvent, QLinearGradient, QMouseEvent, QPainter, QPen, QWheelEvent
)
from PySide6.QtWidgets import QApplication, QSizePolicy, QWidget

from reverseffmi.config import PAGE_STEP_MULTIPLIER
from reverseffmi.model.units import SliderConfig, SliderRange

logger = logging.getLogger(__name__)

# Colours
TRACK_START = QColor(59, 130, 246)
TRACK_END = QColor(147, 51, 234)
TRACK_EMPTY = QColor(55, 65, 81)
THUMB_FILL = QColor("white")
THUMB_BORDER = QColor(168, 85, 247)
LABEL_COLOR = QColor(209, 213, 219)
VALUE_COLOR = QColor("white")
MUTED_COLOR = QColor(156, 163, 175)
HINT_COLOR = QColor(107, 114, 128)

# Geometry [px]
HEADER_HEIGHT = 28
HINT_HEIGHT = 18
TRACK_HEIGHT = 12
TRACK_HEIGHT_ACTIVE = 16
THUMB_SIZE = 16
THUMB_SIZE_HOVER = 20
THUMB_SIZE_DRAG = 24
SIDE_MARGIN = THUMB_SIZE_DRAG // 2 + 2


def _key_code(key) -> int:
    return key.value if hasattr(key, "value") else int(key)


# key code -> number of steps
_KEY_STEPS = {
    _key_code(Qt.Key.Key_Right): 1,
    _key_code(Qt.Key.Key_Up): 1,
    _key_code(Qt.Key.Key_Left): -1,
    _key_code(Qt.Key.Key_Down): -1,
    _key_code(Qt.Key.Key_PageUp): PAGE_STEP_MULTIPLIER,
    _key_code(Qt.Key.Key_PageDown): -PAGE_STEP_MULTIPLIER,
}
_KEY_HOME = _key_code(Qt.Key.Key_Home)
_KEY_END = _key_code(Qt.Key.Key_End)


class SmoothSlider(QWidget):
    """
    Controlled slider widget.

    Args:
        label: Caption shown above the track.
        value: Initial value (owned by the caller).
        min_value, max_value, step: Domain of the slider.
        on_change: Optional callable connected to `value_requested`.
        format_value: Optional value -> text function for the header.
        unit: Optional unit suffix shown after the value.
    """
    value_requested = Signal(float)

    def __init__(
        self,
        label: str,
        value: float,
        min_value: float,
        max_value: float,
        step: float,
        on_change: Optional[Callable[[float], None]] = None,
        format_value: Optional[Callable[[float], str]] = None,
        unit: str = "",
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self._label = label
        self._value = value
        self._range = SliderRange(min_value, max_value, step)
        self._format_value = format_value
        self._unit = unit

        # presentational state only
        self._dragging = False
        self._hovering = False
        self._last_drag_pos: Optional[QPointF] = None

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setAccessibleName(label)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        if on_change is not None:
            self.value_requested.connect(on_change)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @classmethod
    def from_config(
        cls,
        label: str,
        config: SliderConfig,
        on_change: Optional[Callable[[float], None]] = None,
        parent: QWidget | None = None
    ) -> SmoothSlider:
        return cls(
            label, config.value, config.min, config.max, config.step,
            on_change=on_change, format_value=config.format_value, unit=config.unit, parent=parent
        )

    def value(self) -> float:
        return self._value

    def set_value(self, value: float) -> None:
        """Display a new value. Only the owner calls this."""
        if value == self._value:
            return
        self._value = value
        self.update()

    def slider_range(self) -> SliderRange:
        return self._range

    def apply_config(self, config: SliderConfig) -> None:
        """Replace domain, value and display hints at once (e.g. on a unit switch)."""
        self._range = config.range
        self._value = config.value
        self._format_value = config.format_value
        self._unit = config.unit
        self.update()

    def label(self) -> str:
        return self._label

    def unit(self) -> str:
        return self._unit

    def display_text(self) -> str:
        return self._format_value(self._value) if self._format_value else f"{self._value:g}"

    def is_dragging(self) -> bool:
        return self._dragging

    def is_hovering(self) -> bool:
        return self._hovering

    def track_rect(self) -> QRectF:
        """Track area in widget coordinates. Its width spans [min, max] linearly."""
        height = TRACK_HEIGHT_ACTIVE if (self._dragging or self._hovering) else TRACK_HEIGHT
        center_y = HEADER_HEIGHT + THUMB_SIZE_DRAG / 2
        width = max(0.0, self.width() - 2 * SIDE_MARGIN)
        return QRectF(SIDE_MARGIN, center_y - height / 2, width, height)

    # ---- value mapping ----

    def value_at_offset(self, offset: float, width: float) -> float:
        """Map a horizontal offset within a track of the given width to a settled value."""
        r = self._range
        if width <= 0:
            return r.settle(self._value)
        raw = r.min + (offset / width) * (r.max - r.min)
        return r.settle(raw)

    def value_for_key(self, key: Qt.Key | int) -> Optional[float]:
        """Settled value a key press proposes, or None if the key is not handled."""
        r = self._range
        code = _key_code(key)
        if code == _KEY_HOME:
            return r.settle(r.min)
        if code == _KEY_END:
            return r.settle(r.max)
        steps = _KEY_STEPS.get(code)
        if steps is None:
            return None
        return r.settle(self._value + steps * r.step)

    def value_for_wheel(self, delta_y: float) -> Optional[float]:
        """
        One step per wheel event: rolling away from the user (positive Qt delta)
        increases, towards the user decreases. A zero vertical delta is ignored.
        """
        if delta_y == 0:
            return None
        direction = 1 if delta_y > 0 else -1
        return self._range.settle(self._value + direction * self._range.step)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _propose(self, value: float) -> None:
        logger.debug(f"{self._label}: proposing {value}")
        self.value_requested.emit(value)

    def _propose_from_x(self, x: float) -> None:
        track = self.track_rect()
        self._propose(self.value_at_offset(x - track.left(), track.width()))

    def _hit_rect(self) -> QRectF:
        track = self.track_rect()
        pad = (THUMB_SIZE_DRAG - track.height()) / 2
        return track.adjusted(-SIDE_MARGIN, -pad, SIDE_MARGIN, pad)

    # ---- drag capture ----

    def _begin_drag(self) -> None:
        if self._dragging:
            return
        self._dragging = True
        self._last_drag_pos = None
        # moves and the release must be seen wherever the pointer goes
        QApplication.instance().installEventFilter(self)
        logger.debug(f"{self._label}: drag started")
        self.update()

    def _end_drag(self) -> None:
        if not self._dragging:
            return
        self._dragging = False
        self._last_drag_pos = None
        app = QApplication.instance()
        if app is not None:
            app.removeEventFilter(self)
        logger.debug(f"{self._label}: drag ended")
        self.update()

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if not self._dragging:
            return False

        etype = event.type()
        if etype == QEvent.Type.MouseMove:
            if not event.buttons() & Qt.MouseButton.LeftButton:
                # release happened somewhere we never saw it
                self._end_drag()
                return False
            global_pos = event.globalPosition()
            if self._last_drag_pos is None or global_pos != self._last_drag_pos:
                self._last_drag_pos = global_pos
                self._propose_from_x(self.mapFromGlobal(global_pos).x())
        elif etype == QEvent.Type.MouseButtonRelease:
            if event.button() == Qt.MouseButton.LeftButton:
                self._end_drag()
        elif etype == QEvent.Type.ApplicationDeactivate:
            self._end_drag()
        return False

    # ---- Qt event handlers ----

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton or not self._hit_rect().contains(event.position()):
            super().mousePressEvent(event)
            return
        event.accept()
        self.setFocus(Qt.FocusReason.MouseFocusReason)
        self._begin_drag()
        self._propose_from_x(event.position().x())

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton and self._dragging:
            event.accept()
            self._end_drag()
            return
        super().mouseReleaseEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        # accepted even when ignored so an enclosing scroll area does not scroll
        event.accept()
        new_value = self.value_for_wheel(event.angleDelta().y())
        if new_value is not None:
            self._propose(new_value)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        new_value = self.value_for_key(event.key())
        if new_value is None:
            super().keyPressEvent(event)
            return
        event.accept()
        self._propose(new_value)

    def enterEvent(self, event) -> None:
        self._hovering = True
        self.update()
        super().enterEvent(event)

    def leaveEvent(self, event: QEvent) -> None:
        self._hovering = False
        self.update()
        super().leaveEvent(event)

    def hideEvent(self, event) -> None:
        self._end_drag()
        super().hideEvent(event)

    def changeEvent(self, event: QEvent) -> None:
        if event.type() == QEvent.Type.EnabledChange and not self.isEnabled():
            self._end_drag()
        super().changeEvent(event)

    def sizeHint(self) -> QSize:
        return QSize(320, HEADER_HEIGHT + THUMB_SIZE_DRAG + HINT_HEIGHT)

    def minimumSizeHint(self) -> QSize:
        return QSize(120, HEADER_HEIGHT + THUMB_SIZE_DRAG + HINT_HEIGHT)

    # ---- painting ----

    def _fraction(self) -> float:
        r = self._range
        return min(1.0, max(0.0, (self._value - r.min) / (r.max - r.min)))

    def paintEvent(self, event) -> None:
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        try:
            self._paint_header(p)
            self._paint_track(p)
            if self._hovering:
                self._paint_hint(p)
        finally:
            p.end()

    def _scaled_font(self, factor: float, family: str | None = None) -> QFont:
        font = QFont(family) if family else QFont(self.font())
        size = self.font().pointSizeF()
        if size > 0:
            font.setPointSizeF(size * factor)
        return font

    def _paint_header(self, p: QPainter) -> None:
        header = QRectF(SIDE_MARGIN, 0, max(0.0, self.width() - 2 * SIDE_MARGIN), HEADER_HEIGHT)

        p.setFont(self._scaled_font(0.95))
        p.setPen(LABEL_COLOR)
        p.drawText(header, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter, self._label)

        unit_width = 0.0
        if self._unit:
            p.setPen(MUTED_COLOR)
            unit_width = p.fontMetrics().horizontalAdvance(f" {self._unit}")
            p.drawText(header, Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter, f" {self._unit}")

        value_font = self._scaled_font(1.2, "monospace")
        value_font.setStyleHint(QFont.StyleHint.Monospace)
        value_font.setBold(True)
        p.setFont(value_font)
        p.setPen(VALUE_COLOR)
        p.drawText(
            header.adjusted(0, 0, -unit_width, 0),
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter,
            self.display_text()
        )

    def _paint_track(self, p: QPainter) -> None:
        track = self.track_rect()
        radius = track.height() / 2
        thumb_x = track.left() + self._fraction() * track.width()

        p.setPen(Qt.PenStyle.NoPen)
        p.setBrush(TRACK_EMPTY)
        p.drawRoundedRect(track, radius, radius)

        filled = QRectF(track.left(), track.top(), thumb_x - track.left(), track.height())
        if filled.width() > 0:
            gradient = QLinearGradient(track.left(), 0, max(thumb_x, track.left() + 1), 0)
            gradient.setColorAt(0.0, TRACK_START)
            gradient.setColorAt(1.0, TRACK_END)
            p.setBrush(gradient)
            p.drawRoundedRect(filled, radius, radius)

        if self._dragging:
            size = THUMB_SIZE_DRAG
        elif self._hovering:
            size = THUMB_SIZE_HOVER
        else:
            size = THUMB_SIZE
        if self._dragging or self.hasFocus():
            halo = QColor(THUMB_BORDER)
            halo.setAlpha(90)
            p.setBrush(halo)
            p.drawEllipse(QPointF(thumb_x, track.center().y()), size / 2 + 4, size / 2 + 4)

        p.setPen(QPen(THUMB_BORDER, 2))
        p.setBrush(THUMB_FILL)
        p.drawEllipse(QPointF(thumb_x, track.center().y()), size / 2, size / 2)

    def _paint_hint(self, p: QPainter) -> None:
        hint = QRectF(0, self.height() - HINT_HEIGHT, self.width(), HINT_HEIGHT)
        p.setFont(self._scaled_font(0.8))
        p.setPen(HINT_COLOR)
        p.drawText(hint, Qt.AlignmentFlag.AlignCenter, self.tr("Scroll to adjust"))
