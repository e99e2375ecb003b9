"""Main window shell for the XFB player.

Playback, playlists and the music database live in the player modules that
plug into this window; at startup it only needs the resolved bootstrap result.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from .app.bootstrap import BootstrapResult
from .constants import APP_NAME


class PlayerWindow(QMainWindow):
    def __init__(self, result: BootstrapResult):
        super().__init__()
        self.result = result
        self.setWindowTitle(APP_NAME)
        self.resize(1024, 640)
        self._build_ui()

    def _build_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        self.status_label = QLabel(
            f"{APP_NAME} - language: {self.result.locale.language}, "
            f"theme: {self.result.theme.variant}"
        )
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.status_label)
        if self.result.warnings:
            self.statusBar().showMessage(
                "; ".join(w.detail or w.reason.value for w in self.result.warnings)
            )
