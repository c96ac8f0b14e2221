"""
Base content handler protocol.

A content handler performs the lifecycle of one update type for the host
workflow engine: download, install, apply, cancel and the installed check.
Each operation receives the host's WorkflowContext and returns an
AducResult; free-text details go back through the context.
"""

from abc import ABC, abstractmethod

from du_simulator.schemas import AducResult
from du_simulator.workflow import WorkflowContext


class ContentHandler(ABC):
    """
    Abstract base class for update content handlers.

    Implementations are constructed by a factory registered in the
    du_simulator.content_handlers entry-point group.
    """

    @abstractmethod
    def download(self, workflow: WorkflowContext) -> AducResult:
        """
        Download the update's files.

        Args:
            workflow: Host workflow for the current update

        Returns:
            Result of the last file processed, or the first failure
        """
        pass

    @abstractmethod
    def install(self, workflow: WorkflowContext) -> AducResult:
        pass

    @abstractmethod
    def apply(self, workflow: WorkflowContext) -> AducResult:
        pass

    @abstractmethod
    def cancel(self, workflow: WorkflowContext) -> AducResult:
        pass

    @abstractmethod
    def is_installed(self, workflow: WorkflowContext) -> AducResult:
        """
        Check whether the update described by the workflow is installed.

        Args:
            workflow: Host workflow, supplies the installed criteria

        Returns:
            IS_INSTALLED_INSTALLED / IS_INSTALLED_NOT_INSTALLED or a failure
        """
        pass
