"""
Selector resolver - picks the result record for (action, selector).

Lookup order:
1. fixture[action]; missing -> None
2. no selector -> the action table itself is the record
3. table[selector], then table["*"]; both missing -> None

Number fields follow JSON-number semantics: anything that is not a
finite number reads as 0, and values wrap to signed 32 bits.
resultDetails is only taken when it is a string.
"""

import logging
import math
from typing import Any, Optional

from du_simulator.fixture import Fixture
from du_simulator.schemas import Action, CATCH_ALL_SELECTOR, ResultRecord

logger = logging.getLogger(__name__)


def _get_object(container: Any, key: str) -> Optional[dict[str, Any]]:
    if not isinstance(container, dict):
        return None
    value = container.get(key)
    return value if isinstance(value, dict) else None


def _to_int32(value: int) -> int:
    """Wrap to a signed 32-bit result code."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _get_number(record: dict[str, Any], key: str) -> int:
    value = record.get(key)
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return _to_int32(int(value))


def _get_string(record: dict[str, Any], key: str) -> Optional[str]:
    value = record.get(key)
    return value if isinstance(value, str) else None


def to_result_record(record: dict[str, Any]) -> ResultRecord:
    """Read a fixture entry into a ResultRecord."""
    return ResultRecord(
        result_code=_get_number(record, "resultCode"),
        extended_result_code=_get_number(record, "extendedResultCode"),
        result_details=_get_string(record, "resultDetails"),
    )


def select(table: Optional[dict[str, Any]], selector: str) -> Optional[dict[str, Any]]:
    """
    Select an entry from an action table, falling back to the catch-all.

    Args:
        table: Action table from the fixture (may be None)
        selector: Specific key to look up

    Returns:
        The specific entry if present, else the "*" entry, else None
    """
    entry = _get_object(table, selector)
    if entry is None:
        entry = _get_object(table, CATCH_ALL_SELECTOR)
        if entry is not None:
            logger.debug(f"No matching results for '{selector}', fallback to catch-all result")
    return entry


def resolve(
    fixture: Optional[Fixture],
    action: Action | str,
    selector: Optional[str] = None,
) -> Optional[ResultRecord]:
    """
    Resolve the result record for an action.

    Args:
        fixture: Loaded fixture, or None when absent
        action: Action (or its fixture key)
        selector: File name or installed criteria; None/empty reads the
                  action table itself as the record

    Returns:
        ResultRecord, or None when nothing matches
    """
    if fixture is None:
        return None

    key = action.value if isinstance(action, Action) else action
    table = fixture.get(key)
    if not isinstance(table, dict):
        return None

    if selector:
        record = select(table, selector)
    else:
        record = table

    if record is None:
        return None
    return to_result_record(record)
