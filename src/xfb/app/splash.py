"""Splash screen progress reporting during bootstrap.

Bootstrap runs on the GUI thread and blocks it with file I/O, so every status
update flushes the event queue explicitly; otherwise the splash would keep
showing a stale message (or nothing at all) until the event loop starts.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QPainter, QPixmap
from PyQt6.QtWidgets import QApplication, QSplashScreen, QWidget

from ..constants import APP_NAME

__all__ = ["ProgressMessage", "ProgressReporter", "DEFAULT_ALIGNMENT", "DEFAULT_COLOR", "WARNING_COLOR"]

DEFAULT_ALIGNMENT = Qt.AlignmentFlag.AlignBottom | Qt.AlignmentFlag.AlignHCenter
DEFAULT_COLOR = QColor(Qt.GlobalColor.darkBlue)
WARNING_COLOR = QColor(Qt.GlobalColor.red)


@dataclass(frozen=True)
class ProgressMessage:
    text: str
    alignment: Qt.AlignmentFlag
    color: QColor


def _placeholder_pixmap() -> QPixmap:
    pixmap = QPixmap(480, 270)
    pixmap.fill(QColor("#eff1f5"))
    painter = QPainter(pixmap)
    font = QFont()
    font.setPointSize(32)
    font.setBold(True)
    painter.setFont(font)
    painter.setPen(QColor("#4c4f69"))
    painter.drawText(pixmap.rect(), Qt.AlignmentFlag.AlignCenter, APP_NAME)
    painter.end()
    return pixmap


class ProgressReporter:
    """Owns the splash surface for the lifetime of the bootstrap."""

    def __init__(self, image_path: str | Path | None = None) -> None:
        pixmap = QPixmap(str(image_path)) if image_path else QPixmap()
        if pixmap.isNull():
            pixmap = _placeholder_pixmap()
        self.splash = QSplashScreen(pixmap)
        self.messages: List[ProgressMessage] = []
        self.finished = False

    def show(self) -> None:
        self.splash.show()
        QApplication.processEvents()

    def update(
        self,
        message: str,
        alignment: Optional[Qt.AlignmentFlag] = None,
        color: Optional[QColor] = None,
    ) -> None:
        entry = ProgressMessage(
            message,
            DEFAULT_ALIGNMENT if alignment is None else alignment,
            DEFAULT_COLOR if color is None else color,
        )
        self.messages.append(entry)
        self.splash.showMessage(entry.text, entry.alignment, entry.color)
        QApplication.processEvents()

    @property
    def texts(self) -> List[str]:
        return [m.text for m in self.messages]

    def hide(self) -> None:
        self.splash.hide()
        QApplication.processEvents()

    def finish(self, owner_window: QWidget) -> None:
        """Close the splash once ``owner_window`` has been exposed.

        The window must already be shown so there is never a frame with
        neither surface on screen.
        """
        if not owner_window.isVisible():
            raise RuntimeError("Splash can only finish after the main window is shown")
        self.splash.finish(owner_window)
        self.finished = True
