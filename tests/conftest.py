# Shared fixtures for the bootstrap tests.
# Qt runs on the offscreen platform so the suite works without a display; the
# variable must be set before pytest-qt creates the QApplication.

import os
import shutil
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

PACKAGE_RESOURCES = Path(__file__).resolve().parents[1] / "src" / "xfb" / "resources"


@pytest.fixture
def resource_dir(tmp_path: Path) -> Path:
    """Private copy of the bundled resources that a test may modify."""
    target = tmp_path / "resources"
    shutil.copytree(PACKAGE_RESOURCES, target)
    return target


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    # Deliberately not created: first-run provisioning must create it.
    return tmp_path / "config" / "Netpack - Online Solutions" / "XFB"


class DelayRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def no_delay() -> DelayRecorder:
    return DelayRecorder()
