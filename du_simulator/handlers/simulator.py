"""
Simulator content handler.

Instead of doing real work, every operation looks its outcome up in the
simulator fixture (see du_simulator.fixture). The fixture is loaded at the
start of each call and released before it returns.

Outcomes per call:
- default: no fixture, or no matching entry -> the action's default code
- resolved: the fixture entry's resultCode/extendedResultCode (+ details)
- structural failure (download only): the host could not supply a file
  entity -> FAILURE / ERC_STEPS_HANDLER_GET_FILE_ENTITY_FAILURE
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from du_simulator.config import SimulatorConfig, load_config
from du_simulator.errors import FileEntityError
from du_simulator.fixture import open_fixture
from du_simulator.handlers.base import ContentHandler
from du_simulator.resolver import resolve
from du_simulator.schemas import (
    Action,
    AducResult,
    ERC_STEPS_HANDLER_GET_FILE_ENTITY_FAILURE,
    FileEntity,
    ResultCode,
    ResultRecord,
    is_result_code_failure,
)
from du_simulator.utils import setup_logging, teardown_logging
from du_simulator.workflow import WorkflowContext

logger = logging.getLogger(__name__)


class SimulatorHandler(ContentHandler):
    """
    Content handler whose outcomes come from the simulator fixture.

    Logging is set up by start() and torn down by stop(); the handler can
    also be used as a context manager.

    Usage:
        with SimulatorHandler(log_level="DEBUG") as handler:
            result = handler.install(workflow)
    """

    def __init__(
        self,
        config: Optional[SimulatorConfig] = None,
        log_level: Optional[str] = None,
        fixture_path: Optional[Path] = None,
        is_failure: Callable[[int], bool] = is_result_code_failure,
    ) -> None:
        """
        Args:
            config: Logging configuration. Defaults to SimulatorConfig()
            log_level: Overrides config.log_level when given
            fixture_path: Fixture location. Defaults to the temp-dir search
            is_failure: Host predicate classifying result codes as failures
        """
        self.config = config or SimulatorConfig()
        self.log_level = log_level or self.config.log_level
        self.fixture_path = fixture_path
        self._is_failure = is_failure
        self._started = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Initialize logging for this handler."""
        setup_logging(
            log_level=self.log_level,
            log_file=self.config.get_log_file_path(),
            log_format=self.config.log_format,
            console_output=self.config.log_console,
        )
        self._started = True

    def stop(self) -> None:
        """Tear down the logging set up by start()."""
        if self._started:
            teardown_logging()
            self._started = False

    def __enter__(self) -> "SimulatorHandler":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def download(self, workflow: WorkflowContext) -> AducResult:
        """
        Simulate downloading every file of the update.

        Bundle updates are used when there are any, otherwise the standalone
        update files. Files are resolved in order against the "download"
        table (file name, then "*"); the first failing file ends the loop.
        """
        default = AducResult(Action.DOWNLOAD.default_result_code)

        use_bundle_files = True
        file_count = workflow.bundle_updates_count()
        if file_count == 0:
            use_bundle_files = False
            file_count = workflow.update_files_count()

        result = default
        with open_fixture(self.fixture_path) as fixture:
            if fixture is None:
                logger.debug("No simulator data file provided, returning default result code")
                return default

            for index in range(file_count):
                entity = self._get_file_entity(workflow, index, use_bundle_files)
                if entity is None:
                    return AducResult(
                        ResultCode.FAILURE, ERC_STEPS_HANDLER_GET_FILE_ENTITY_FAILURE
                    )

                logger.info(
                    f"Downloading file#{index} (targetFileName:{entity.target_filename}).",
                    extra={"action": Action.DOWNLOAD.value, "selector": entity.target_filename},
                )
                try:
                    record = resolve(fixture, Action.DOWNLOAD, entity.target_filename)
                finally:
                    workflow.release_file_entity(entity)

                result = self._adopt(workflow, record, default)
                if self._is_failure(result.result_code):
                    break

        return result

    def install(self, workflow: WorkflowContext) -> AducResult:
        return self._run_action(workflow, Action.INSTALL)

    def apply(self, workflow: WorkflowContext) -> AducResult:
        return self._run_action(workflow, Action.APPLY)

    def cancel(self, workflow: WorkflowContext) -> AducResult:
        return self._run_action(workflow, Action.CANCEL)

    def is_installed(self, workflow: WorkflowContext) -> AducResult:
        """Resolve the "isInstalled" table by the workflow's installed criteria."""
        criteria = workflow.get_installed_criteria()
        return self._run_action(workflow, Action.IS_INSTALLED, criteria)

    def run(self, action: Action | str, workflow: WorkflowContext) -> AducResult:
        """Dispatch an action by enum or fixture key."""
        action = Action(action)
        dispatch = {
            Action.DOWNLOAD: self.download,
            Action.INSTALL: self.install,
            Action.APPLY: self.apply,
            Action.CANCEL: self.cancel,
            Action.IS_INSTALLED: self.is_installed,
        }
        return dispatch[action](workflow)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _run_action(
        self,
        workflow: WorkflowContext,
        action: Action,
        selector: Optional[str] = None,
    ) -> AducResult:
        default = AducResult(action.default_result_code)

        with open_fixture(self.fixture_path) as fixture:
            if fixture is None:
                logger.debug("No simulator data file provided, returning default result code")
                return default
            record = resolve(fixture, action, selector)

        return self._adopt(workflow, record, default)

    def _adopt(
        self,
        workflow: WorkflowContext,
        record: Optional[ResultRecord],
        default: AducResult,
    ) -> AducResult:
        if record is None:
            return default
        if record.result_details is not None:
            workflow.set_result_details(record.result_details)
        return record.to_result()

    def _get_file_entity(
        self,
        workflow: WorkflowContext,
        index: int,
        use_bundle_files: bool,
    ) -> Optional[FileEntity]:
        try:
            if use_bundle_files:
                entity = workflow.get_bundle_updates_file(index)
            else:
                entity = workflow.get_update_file(index)
        except FileEntityError as e:
            logger.error(f"Cannot get file entity #{index}: {e}")
            return None

        if entity is None:
            logger.error(f"Cannot get file entity #{index}")
            return None

        if not entity.target_filename:
            logger.error(f"File entity #{index} has no target file name")
            workflow.release_file_entity(entity)
            return None

        return entity


def create_update_content_handler_extension(log_level: Optional[str] = None) -> Optional[ContentHandler]:
    """
    Factory for the simulator content handler.

    Loads the configuration, constructs the handler and starts its logging.
    Any failure is logged and reported as None (extension unavailable).

    Args:
        log_level: Overrides the configured logging level

    Returns:
        A started SimulatorHandler, or None on failure
    """
    try:
        handler = SimulatorHandler(config=load_config(), log_level=log_level)
        handler.start()
        logger.info("Instantiating a Simulator Update Content Handler")
        return handler
    except Exception as e:
        logger.error(f"Unhandled exception creating simulator handler: {e}", exc_info=True)
        return None
