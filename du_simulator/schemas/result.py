"""
Result schemas - the host's result vocabulary.

AducResult is what every handler operation returns: a result code plus an
extended result code. ResultRecord is the transient view of one fixture
entry, including the optional free-text details.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class ResultCode(IntEnum):
    """Named result codes. Any code <= 0 is a failure."""
    FAILURE = 0
    FAILURE_CANCELLED = -1
    SUCCESS = 1

    DOWNLOAD_SUCCESS = 500
    DOWNLOAD_IN_PROGRESS = 501
    DOWNLOAD_SKIPPED_FILE_EXISTS = 502

    INSTALL_SUCCESS = 600
    INSTALL_IN_PROGRESS = 601
    INSTALL_REQUIRED_REBOOT = 606

    APPLY_SUCCESS = 700
    APPLY_IN_PROGRESS = 701
    APPLY_REQUIRED_REBOOT = 706

    CANCEL_SUCCESS = 800
    CANCEL_UNABLE_TO_CANCEL = 801

    IS_INSTALLED_INSTALLED = 900
    IS_INSTALLED_NOT_INSTALLED = 901


def make_extended_result_code(facility: int, component: int, value: int) -> int:
    """Pack an extended result code: 4-bit facility, 8-bit component, 20-bit value."""
    return ((facility & 0xF) << 28) | ((component & 0xFF) << 20) | (value & 0xFFFFF)


FACILITY_UPDATE_CONTENT_HANDLER = 0x3
COMPONENT_STEPS_HANDLER = 0x01

# Host could not supply a file entity during download.
ERC_STEPS_HANDLER_GET_FILE_ENTITY_FAILURE = make_extended_result_code(
    FACILITY_UPDATE_CONTENT_HANDLER, COMPONENT_STEPS_HANDLER, 0x00A
)


def is_result_code_failure(result_code: int) -> bool:
    """Default failure predicate: zero and negative codes are failures."""
    return result_code <= 0


@dataclass(frozen=True)
class AducResult:
    """
    Outcome of a handler operation.

    Attributes:
        result_code: Host result code (see ResultCode)
        extended_result_code: Facility/component specific detail code, 0 if none
    """
    result_code: int
    extended_result_code: int = 0

    @property
    def is_failure(self) -> bool:
        return is_result_code_failure(self.result_code)


@dataclass(frozen=True)
class ResultRecord:
    """
    A result entry read from the fixture.

    Attributes:
        result_code: Value of "resultCode" (0 when unset)
        extended_result_code: Value of "extendedResultCode" (0 when unset)
        result_details: Value of "resultDetails", None when unset or not a string
    """
    result_code: int = 0
    extended_result_code: int = 0
    result_details: Optional[str] = None

    def to_result(self) -> AducResult:
        return AducResult(self.result_code, self.extended_result_code)
