"""
Host workflow boundary.

The host workflow engine owns the update's file lists, the installed
criteria and the result-details field. The simulator handler only talks to
it through WorkflowContext. InMemoryWorkflow is a list-backed
implementation used by the CLI and the tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from du_simulator.schemas import FileEntity


class WorkflowContext(ABC):
    """
    Abstract view of the host's workflow for one update.

    File accessors return None (or raise FileEntityError) when the host
    cannot supply the entity for an index.
    """

    @abstractmethod
    def bundle_updates_count(self) -> int:
        pass

    @abstractmethod
    def get_bundle_updates_file(self, index: int) -> Optional[FileEntity]:
        pass

    @abstractmethod
    def update_files_count(self) -> int:
        pass

    @abstractmethod
    def get_update_file(self, index: int) -> Optional[FileEntity]:
        pass

    def release_file_entity(self, entity: FileEntity) -> None:
        """Give a file entity back to the host. Default: nothing to free."""
        pass

    @abstractmethod
    def get_installed_criteria(self) -> Optional[str]:
        pass

    @abstractmethod
    def set_result_details(self, details: str) -> None:
        pass


@dataclass
class InMemoryWorkflow(WorkflowContext):
    """
    Workflow backed by plain lists.

    Attributes:
        update_files: Standalone update files
        bundle_updates: Bundle update files, preferred by download when non-empty
        installed_criteria: Value returned by get_installed_criteria()
        result_details: Last details string written by the handler
        released: Entities handed back by the handler, in order
    """
    update_files: list[FileEntity] = field(default_factory=list)
    bundle_updates: list[FileEntity] = field(default_factory=list)
    installed_criteria: Optional[str] = None
    result_details: Optional[str] = None
    released: list[FileEntity] = field(default_factory=list)

    @classmethod
    def from_filenames(
        cls,
        update_files: Optional[list[str]] = None,
        bundle_updates: Optional[list[str]] = None,
        installed_criteria: Optional[str] = None,
    ) -> "InMemoryWorkflow":
        """Build a workflow from bare target file names."""
        return cls(
            update_files=[FileEntity(name) for name in update_files or []],
            bundle_updates=[FileEntity(name) for name in bundle_updates or []],
            installed_criteria=installed_criteria,
        )

    def bundle_updates_count(self) -> int:
        return len(self.bundle_updates)

    def get_bundle_updates_file(self, index: int) -> Optional[FileEntity]:
        if 0 <= index < len(self.bundle_updates):
            return self.bundle_updates[index]
        return None

    def update_files_count(self) -> int:
        return len(self.update_files)

    def get_update_file(self, index: int) -> Optional[FileEntity]:
        if 0 <= index < len(self.update_files):
            return self.update_files[index]
        return None

    def release_file_entity(self, entity: FileEntity) -> None:
        self.released.append(entity)

    def get_installed_criteria(self) -> Optional[str]:
        return self.installed_criteria

    def set_result_details(self, details: str) -> None:
        self.result_details = details
