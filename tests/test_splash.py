import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QWidget

from xfb.app.splash import DEFAULT_ALIGNMENT, DEFAULT_COLOR, WARNING_COLOR, ProgressReporter


@pytest.fixture
def reporter(qtbot):
    rep = ProgressReporter()
    qtbot.addWidget(rep.splash)
    return rep


def test_missing_image_uses_placeholder(reporter):
    assert not reporter.splash.pixmap().isNull()


def test_messages_are_recorded_in_order(reporter):
    reporter.show()
    reporter.update("Initializing...")
    reporter.update("Failed to load translation!", color=WARNING_COLOR)
    assert reporter.texts == ["Initializing...", "Failed to load translation!"]
    first, second = reporter.messages
    assert first.alignment == DEFAULT_ALIGNMENT
    assert first.color == DEFAULT_COLOR
    assert second.color == QColor(Qt.GlobalColor.red)
    assert reporter.splash.message() == "Failed to load translation!"


def test_finish_requires_visible_window(reporter, qtbot):
    window = QWidget()
    qtbot.addWidget(window)
    reporter.show()
    with pytest.raises(RuntimeError):
        reporter.finish(window)
    assert reporter.splash.isVisible()


def test_finish_closes_splash_after_window_shown(reporter, qtbot):
    window = QWidget()
    qtbot.addWidget(window)
    reporter.show()
    window.show()
    reporter.finish(window)
    assert reporter.finished is True
    assert not reporter.splash.isVisible()
    assert window.isVisible()
