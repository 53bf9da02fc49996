from __future__ import annotations

import os
from typing import Callable, List

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from reverseffmi.view.widgets.smooth_slider import SmoothSlider


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture()
def recorder() -> Callable[[SmoothSlider], List[float]]:
    """Connect to a slider and collect every proposed value."""
    def _attach(slider: SmoothSlider) -> List[float]:
        received: List[float] = []
        slider.value_requested.connect(received.append)
        return received

    return _attach
