import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from training_config.config import create_default_configuration  # noqa: E402
from training_config.core.settings import get_settings  # noqa: E402
from training_config.storage import InMemoryConfigurationStore  # noqa: E402


class SpyStore(InMemoryConfigurationStore):
    """In-memory store that records every call made to it."""

    def __init__(self) -> None:
        super().__init__()
        self.calls = []

    def load(self, key, model):
        self.calls.append(("load", key))
        return super().load(key, model)

    def save(self, key, value):
        self.calls.append(("save", key))
        super().save(key, value)

    @property
    def saves(self):
        return [call for call in self.calls if call[0] == "save"]


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch, tmp_path):
    """Keep settings and data directories isolated per test."""
    for name in (
        "TRAINING_CONFIG_DATA_DIR",
        "TRAINING_CONFIG_LOG_LEVEL",
        "TRAINING_CONFIG_JSON_LOGS",
        "TRAINING_CONFIG_BOOTSTRAP_DEFAULTS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def spy_store():
    return SpyStore()


@pytest.fixture
def default_config():
    return create_default_configuration()
