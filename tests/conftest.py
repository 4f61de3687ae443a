import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from suffixgrep.config_loader import SuffixConfig  # noqa: E402


@pytest.fixture
def home(tmp_path, monkeypatch):
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("USERPROFILE", raising=False)
    return home_dir


@pytest.fixture
def txt_log_config():
    return SuffixConfig(suffixes=frozenset({"txt", "log"}))
