# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - clean_config (autouse): drop the config singleton and any
#   SYNOPSIZE_* variables so tests never see the caller's env.
# - aggregator: a fresh SynopsisAggregator.
# - write_source: write text to a temporary file, return its path.
# ==============================================

import pytest

from synopsize import config as config_module
from synopsize.analysis import SynopsisAggregator

CONFIG_VARIABLES = (
    "SYNOPSIZE_SAMPLE_SIZE",
    "SYNOPSIZE_RANDOM_SEED",
    "SYNOPSIZE_INPUT_FORMAT",
    "SYNOPSIZE_REQUEST_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Reset configuration state around every test."""
    for name in CONFIG_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_config_instance", None)
    yield


@pytest.fixture
def aggregator():
    """Create a fresh aggregator."""
    return SynopsisAggregator()


@pytest.fixture
def write_source(tmp_path):
    """Write text to a file under tmp_path and return its path as a string."""
    def _write(text: str, name: str = "data.csv") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
