"""Shared pytest setup for the launcher tests.

The end-to-end tests run ``python -m canteen.cli`` from the repository root,
so the package does not have to be installed for them. Tests that rely on
POSIX shell stubs or exec carry the ``unix`` marker.
"""

import sys

import pytest

from canteen.config import JAVA_HOME_FALLBACK_VAR, LAUNCH_MODE_VAR, VERBOSE_VAR

PLATFORM_MARKERS = {
    "unix": "runs only where java can be a /bin/sh stub and exec is available",
    "windows": "runs only on Windows",
}


def pytest_configure(config):
    for name, description in PLATFORM_MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Skip tests marked for the other platform family."""
    on_windows = sys.platform.startswith('win')
    wrong_platform = "unix" if on_windows else "windows"
    skip = pytest.mark.skip(reason=f"{wrong_platform}-only test")

    for item in items:
        if wrong_platform in item.keywords:
            item.add_marker(skip)


@pytest.fixture(autouse=True)
def clean_launcher_env(monkeypatch):
    """Keep the developer's CANTEEN_* settings out of the tests."""
    for name in (JAVA_HOME_FALLBACK_VAR, LAUNCH_MODE_VAR, VERBOSE_VAR):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_java(tmp_path):
    """Return a factory writing an executable stub ``java`` shell script.

    The factory takes the script body and an optional directory name and
    returns the directory holding the stub.
    """
    def _make(body: str, dirname: str = "bin"):
        bin_dir = tmp_path / dirname
        bin_dir.mkdir(parents=True, exist_ok=True)
        java = bin_dir / "java"
        java.write_text("#!/bin/sh\n" + body)
        java.chmod(0o755)
        return bin_dir
    return _make
