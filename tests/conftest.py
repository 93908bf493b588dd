from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure `src/` and this directory are importable when pytest runs without
# an editable install.
_TESTS_DIR = Path(__file__).resolve().parent
_SRC = _TESTS_DIR.parent / "src"
for _path in (_SRC, _TESTS_DIR):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

from adapters.deepl_client import DeepLClient  # noqa: E402
from core.config import AppSettings  # noqa: E402
from core.services.commands import DesktopIO  # noqa: E402
from fakes import FakeClipboard, FakeDeepL, FakeNotifier, FakeSelection  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep real preferences (env vars, user .env) out of the tests."""

    for key in list(os.environ):
        if key.startswith("DEEPL_LAUNCHER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    return AppSettings(_env_file=None, api_key="test-key:fx")


@pytest.fixture
def fake_deepl():
    return FakeDeepL()


@pytest.fixture
def client(settings, fake_deepl):
    return DeepLClient(lambda: settings, transport=fake_deepl.transport)


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def make_io(notifier):
    def _make(selection: str | None = None, clipboard: str | None = None) -> DesktopIO:
        return DesktopIO(
            selection=FakeSelection(selection),
            clipboard=FakeClipboard(clipboard),
            notifier=notifier,
        )

    return _make
