"""
Main Application Window
=======================
The single calculator window: unit toggle, three input sliders, the target
physique and the FFMI reference guide.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure of the application.
2. Routing: It is the owner of the CalculatorState. Sliders and the unit
   toggle only request values; this window writes them into the state and
   re-renders everything from it.
"""
from __future__ import annotations

import html
import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QFrame, QScrollArea
)

from reverseffmi.config import VISIBLE_APP_NAME
from reverseffmi.model.categories import reference_bands
from reverseffmi.model.formatting import format_weight, weight_unit_label
from reverseffmi.model.state import CalculatorState
from reverseffmi.model.units import UnitSystem
from reverseffmi.view.widgets.smooth_slider import SmoothSlider
from reverseffmi.view.widgets.unit_toggle import UnitToggle

logger = logging.getLogger(__name__)

STYLE_SHEET = """
    QMainWindow, QScrollArea, #content { background-color: #111827; }
    QLabel { color: #D1D5DB; }
    QFrame#card { background-color: rgba(31, 41, 55, 128); border: 1px solid rgba(55, 65, 81, 128); border-radius: 16px; }
    QFrame#results { background-color: rgba(49, 46, 129, 60); border: 1px solid rgba(168, 85, 247, 77); border-radius: 16px; }
    QFrame#guide { background-color: rgba(31, 41, 55, 77); border: 1px solid rgba(55, 65, 81, 77); border-radius: 12px; }
    QLabel#title { color: #C084FC; font-size: 28px; font-weight: bold; }
    QLabel#subtitle { color: #9CA3AF; font-size: 15px; }
    QLabel#sectionTitle { color: #9CA3AF; font-size: 13px; font-weight: bold; }
    QLabel#resultValue { font-size: 26px; font-weight: bold; }
    QLabel#resultCaption { color: #9CA3AF; font-size: 11px; }
    QLabel#muted { color: #6B7280; }
"""

RESULT_COLORS = {
    "total": "#FFFFFF",
    "lean": "#4ADE80",
    "fat": "#FACC15",
}


class ResultTile(QWidget):
    """A big number with a caption underneath."""
    def __init__(self, caption: str, color: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._caption = caption

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.lbl_value = QLabel("-")
        self.lbl_value.setObjectName("resultValue")
        self.lbl_value.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_value.setStyleSheet(f"color: {color};")
        self.lbl_caption = QLabel(caption)
        self.lbl_caption.setObjectName("resultCaption")
        self.lbl_caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.lbl_value)
        layout.addWidget(self.lbl_caption)

    def set_value(self, text: str, unit: str) -> None:
        self.lbl_value.setText(text)
        self.lbl_caption.setText(f"{self._caption.upper()} ({unit})")


class MainWindow(QMainWindow):
    def __init__(self, state: CalculatorState | None = None) -> None:
        super().__init__()
        self.state: CalculatorState = state if state is not None else CalculatorState()

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(720, 960)
        self.setStyleSheet(STYLE_SHEET)

        content = QWidget()
        content.setObjectName("content")
        layout = QVBoxLayout(content)
        layout.setContentsMargins(32, 32, 32, 32)
        layout.setSpacing(24)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setWidget(content)
        self.setCentralWidget(scroll)

        # --- 1. HEADER ---
        title = QLabel(self.tr("Reverse FFMI Calculator"))
        title.setObjectName("title")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        subtitle = QLabel(self.tr("Calculate your target weight based on desired physique"))
        subtitle.setObjectName("subtitle")
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)
        layout.addWidget(subtitle)

        # --- 2. UNIT TOGGLE ---
        self.unit_toggle = UnitToggle(self.state.unit_system)
        self.unit_toggle.unit_requested.connect(self.on_unit_requested)
        toggle_row = QHBoxLayout()
        toggle_row.addStretch()
        toggle_row.addWidget(self.unit_toggle)
        toggle_row.addStretch()
        layout.addLayout(toggle_row)

        # --- 3. SLIDERS ---
        self.height_slider = SmoothSlider.from_config(
            self.tr("Height"), self.state.height_slider_config(), on_change=self.on_height_requested
        )
        layout.addWidget(self._card(self.height_slider))

        self.body_fat_slider = SmoothSlider.from_config(
            self.tr("Target Body Fat"), self.state.body_fat_slider_config(), on_change=self.on_body_fat_requested
        )
        layout.addWidget(self._card(self.body_fat_slider))

        self.ffmi_slider = SmoothSlider.from_config(
            self.tr("Target Normalized FFMI"), self.state.ffmi_slider_config(), on_change=self.on_ffmi_requested
        )
        self.lbl_category = QLabel()
        self.lbl_category_description = QLabel()
        self.lbl_category_description.setObjectName("muted")
        category_row = QHBoxLayout()
        category_row.setContentsMargins(14, 0, 14, 0)
        category_row.addWidget(self.lbl_category)
        category_row.addWidget(self.lbl_category_description, 1)
        layout.addWidget(self._card(self.ffmi_slider, category_row))

        # --- 4. RESULTS ---
        layout.addWidget(self._build_results())

        # --- 5. REFERENCE GUIDE ---
        layout.addWidget(self._build_reference_guide())

        footer = QLabel(self.tr("FFMI (Fat-Free Mass Index) is normalized to a height of 1.8m (5'11\")"))
        footer.setObjectName("muted")
        footer.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(footer)
        layout.addStretch()

        self.refresh()

    # --- LAYOUT HELPERS ---

    @staticmethod
    def _card(slider: SmoothSlider, extra: QHBoxLayout | None = None) -> QFrame:
        card = QFrame()
        card.setObjectName("card")
        v = QVBoxLayout(card)
        v.setContentsMargins(12, 16, 12, 12)
        v.addWidget(slider)
        if extra is not None:
            v.addLayout(extra)
        return card

    def _build_results(self) -> QFrame:
        frame = QFrame()
        frame.setObjectName("results")
        v = QVBoxLayout(frame)
        v.setContentsMargins(24, 24, 24, 24)

        heading = QLabel(self.tr("Your Target Physique"))
        heading.setObjectName("subtitle")
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        v.addWidget(heading)

        row = QHBoxLayout()
        self.tile_total = ResultTile(self.tr("Total Weight"), RESULT_COLORS["total"])
        self.tile_lean = ResultTile(self.tr("Lean Mass"), RESULT_COLORS["lean"])
        self.tile_fat = ResultTile(self.tr("Fat Mass"), RESULT_COLORS["fat"])
        for tile in (self.tile_total, self.tile_lean, self.tile_fat):
            row.addWidget(tile)
        v.addLayout(row)
        return frame

    def _build_reference_guide(self) -> QFrame:
        frame = QFrame()
        frame.setObjectName("guide")
        v = QVBoxLayout(frame)
        v.setContentsMargins(20, 16, 20, 16)

        heading = QLabel(self.tr("NORMALIZED FFMI REFERENCE"))
        heading.setObjectName("sectionTitle")
        v.addWidget(heading)

        grid = QGridLayout()
        grid.setHorizontalSpacing(16)
        self.reference_labels: list[QLabel] = []
        for i, band in enumerate(reference_bands()):
            lbl = QLabel(f"<span style='color:{band.color}'>&#9679;</span> {html.escape(band.range_text)}: {self.tr(band.label)}")
            lbl.setTextFormat(Qt.TextFormat.RichText)
            grid.addWidget(lbl, i // 3, i % 3)
            self.reference_labels.append(lbl)
        v.addLayout(grid)
        return frame

    # --- SLOTS ---

    def on_height_requested(self, value: float) -> None:
        self.state.set_height_display(value)
        self.refresh()

    def on_body_fat_requested(self, value: float) -> None:
        self.state.set_body_fat_percent(value)
        self.refresh()

    def on_ffmi_requested(self, value: float) -> None:
        self.state.set_normalized_ffmi(value)
        self.refresh()

    def on_unit_requested(self, unit_system: UnitSystem) -> None:
        if not self.state.set_unit_system(unit_system):
            return
        self.unit_toggle.set_unit_system(unit_system)
        config = self.state.height_slider_config()
        self.height_slider.apply_config(config)
        logger.debug(f"Height slider now spans {config.min:g}-{config.max:g} in steps of {config.step:g}")
        self.refresh()

    # --- RENDER ---

    def refresh(self) -> None:
        """Re-render every output from the current state."""
        state = self.state
        self.height_slider.set_value(state.height_slider_config().value)
        self.body_fat_slider.set_value(state.body_fat_percent)
        self.ffmi_slider.set_value(state.normalized_ffmi)

        category = state.category()
        self.lbl_category.setText(f"<b>{self.tr(category.label)}</b>")
        self.lbl_category.setStyleSheet(f"color: {category.color};")
        self.lbl_category_description.setText(f"— {self.tr(category.description)}")

        result = state.result()
        unit = weight_unit_label(state.unit_system)
        self.tile_total.set_value(format_weight(result.total_weight_kg, state.unit_system), unit)
        self.tile_lean.set_value(format_weight(result.lean_mass_kg, state.unit_system), unit)
        self.tile_fat.set_value(format_weight(result.fat_mass_kg, state.unit_system), unit)
