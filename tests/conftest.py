import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep log files and ICONWORKS__ overrides from leaking between tests."""

    monkeypatch.setenv("ICONWORKS_LOG_DIR", str(tmp_path / "logs"))
    for key in list(os.environ):
        if key.startswith("ICONWORKS__"):
            monkeypatch.delenv(key)
    yield


@pytest.fixture
def write_icons(tmp_path):
    """Write an icons YAML document to a temporary file and return its path."""

    def _write(text: str, name: str = "icons.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
