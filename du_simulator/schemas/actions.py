"""
Action enum defining the five simulated lifecycle operations.

The enum value is the top-level key of the action's table in the fixture
file. Selector scheme per action:
- download     -> target file name, falls back to "*"
- install      -> none, the table is the result record
- apply        -> none
- cancel       -> none
- isInstalled  -> installed criteria string, falls back to "*"
"""

from enum import Enum

from .result import ResultCode

CATCH_ALL_SELECTOR = "*"


class Action(str, Enum):
    """Simulated content handler actions, valued by their fixture key."""
    DOWNLOAD = "download"
    INSTALL = "install"
    APPLY = "apply"
    CANCEL = "cancel"
    IS_INSTALLED = "isInstalled"

    @property
    def uses_selector(self) -> bool:
        """True when the action table is keyed by selector rather than being the record."""
        return self in (Action.DOWNLOAD, Action.IS_INSTALLED)

    @property
    def default_result_code(self) -> ResultCode:
        return DEFAULT_RESULT_CODES[self]


# isInstalled defaults to "installed": the simulator assumes the update is
# already applied unless the fixture says otherwise.
DEFAULT_RESULT_CODES: dict[Action, ResultCode] = {
    Action.DOWNLOAD: ResultCode.DOWNLOAD_SUCCESS,
    Action.INSTALL: ResultCode.INSTALL_SUCCESS,
    Action.APPLY: ResultCode.APPLY_SUCCESS,
    Action.CANCEL: ResultCode.CANCEL_SUCCESS,
    Action.IS_INSTALLED: ResultCode.IS_INSTALLED_INSTALLED,
}
