import json

import pytest

from du_simulator.fixture import SIMULATOR_DATA_FILE
from du_simulator.utils import teardown_logging


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Point the temp-dir search and config home at per-test directories."""
    temp_dir = tmp_path / "tmp"
    temp_dir.mkdir()
    for name in ("TMP", "TEMP", "TEMPDIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TMPDIR", str(temp_dir))
    monkeypatch.setenv("DU_SIMULATOR_HOME", str(tmp_path / "home"))
    yield temp_dir
    teardown_logging()


@pytest.fixture
def fixture_path(isolated_env):
    return isolated_env / SIMULATOR_DATA_FILE


@pytest.fixture
def write_fixture(fixture_path):
    """Write a fixture document to the discovered fixture location."""
    def _write(data):
        if isinstance(data, str):
            fixture_path.write_text(data)
        else:
            fixture_path.write_text(json.dumps(data))
        return fixture_path
    return _write
