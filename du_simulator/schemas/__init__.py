"""
du_simulator.schemas - Data types shared by the handler and its host.

Action -> ResultRecord -> AducResult

1. Action: one of the five simulated operations, with its default result code
2. ResultRecord: a fixture entry resolved for (action, selector)
3. AducResult: the (result code, extended result code) pair returned to the host

FileEntity is the host-owned file reference consumed by download.
"""

from .actions import (
    Action,
    CATCH_ALL_SELECTOR,
    DEFAULT_RESULT_CODES,
)
from .file_entity import FileEntity
from .result import (
    AducResult,
    ResultCode,
    ResultRecord,
    ERC_STEPS_HANDLER_GET_FILE_ENTITY_FAILURE,
    is_result_code_failure,
    make_extended_result_code,
)

__all__ = [
    # Actions
    "Action",
    "CATCH_ALL_SELECTOR",
    "DEFAULT_RESULT_CODES",
    # Files
    "FileEntity",
    # Results
    "AducResult",
    "ResultCode",
    "ResultRecord",
    "ERC_STEPS_HANDLER_GET_FILE_ENTITY_FAILURE",
    "is_result_code_failure",
    "make_extended_result_code",
]
