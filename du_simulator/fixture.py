"""
Fixture store - locates, parses and releases the simulator data file.

The fixture is an optional JSON document at
<temp dir>/du-simulator-data.json. It is read fresh for every handler
call and released before the call returns, so edits made between calls
are always picked up.

A missing, unreadable or malformed fixture is not an error: load_fixture()
returns None and the caller falls back to its default outcome.
"""

import json
import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional

from du_simulator.schemas import Action, CATCH_ALL_SELECTOR

logger = logging.getLogger(__name__)

SIMULATOR_DATA_FILE = "du-simulator-data.json"

# Ordered search, first variable that is set wins.
TEMP_DIR_ENV_VARS = ("TMPDIR", "TMP", "TEMP", "TEMPDIR")
ROOT_TEMP_DIR = "/tmp"

# Formatted paths at or above this many bytes are rejected.
MAX_PATH_LENGTH = 512


def get_temporary_path_name(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Return the system temporary directory name.

    The directory is neither created nor checked for existence.

    Args:
        environ: Environment mapping to search. Defaults to os.environ

    Returns:
        Value of the first set variable in TMPDIR, TMP, TEMP, TEMPDIR,
        otherwise "/tmp"
    """
    if environ is None:
        environ = os.environ
    for name in TEMP_DIR_ENV_VARS:
        value = environ.get(name)
        if value is not None:
            return value
    return ROOT_TEMP_DIR


def get_simulator_data_file_path(environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """
    Return the fixture file path, or None if it cannot be formatted.

    Args:
        environ: Environment mapping to search. Defaults to os.environ

    Returns:
        Path to du-simulator-data.json, or None when the formatted path
        is too long
    """
    path = f"{get_temporary_path_name(environ)}/{SIMULATOR_DATA_FILE}"
    if len(os.fsencode(path)) >= MAX_PATH_LENGTH:
        return None
    return Path(path)


class Fixture:
    """
    Parsed simulator data.

    Wraps the top-level JSON object. After release() the fixture is empty
    and every lookup misses.
    """

    def __init__(self, data: dict[str, Any], path: Optional[Path] = None):
        self._data: Optional[dict[str, Any]] = data
        self.path = path

    @property
    def released(self) -> bool:
        return self._data is None

    def get(self, key: str) -> Any:
        """Get a top-level value, None if missing or released."""
        if self._data is None:
            return None
        return self._data.get(key)

    def release(self) -> None:
        """Drop the parsed tree. Safe to call more than once."""
        self._data = None

    def __repr__(self) -> str:
        keys = [] if self._data is None else list(self._data.keys())
        return f"Fixture(path={self.path}, actions={keys})"


def build_fixture_template() -> dict[str, Any]:
    """
    Return a fixture that reproduces the built-in defaults.

    Selector-keyed actions get a single "*" entry; the others are flat
    records.
    """
    template: dict[str, Any] = {}
    for action in Action:
        record = {
            "resultCode": int(action.default_result_code),
            "extendedResultCode": 0,
        }
        template[action.value] = {CATCH_ALL_SELECTOR: record} if action.uses_selector else record
    return template


def load_fixture(path: Optional[Path] = None) -> Optional[Fixture]:
    """
    Load the simulator fixture.

    Args:
        path: Fixture path. Defaults to get_simulator_data_file_path()

    Returns:
        Fixture that the caller must release, or None when the fixture is
        absent, unreadable, not valid JSON, or not a JSON object
    """
    if path is None:
        path = get_simulator_data_file_path()
    if path is None:
        logger.info("Cannot format simulator data file path, using defaults")
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError, RecursionError):
        # ValueError covers JSONDecodeError, UnicodeDecodeError and oversized
        # integer literals
        logger.info(f"Cannot read datafile: {path}")
        return None

    if not isinstance(data, dict):
        logger.info(f"Datafile is not a JSON object: {path}")
        return None

    return Fixture(data, path=path)


@contextmanager
def open_fixture(path: Optional[Path] = None) -> Iterator[Optional[Fixture]]:
    """
    Load the fixture for the duration of a with-block.

    Yields the Fixture (or None when absent) and releases it on every
    exit path.
    """
    fixture = load_fixture(path)
    try:
        yield fixture
    finally:
        if fixture is not None:
            fixture.release()
