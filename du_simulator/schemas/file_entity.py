"""
FileEntity schema - a host-owned reference to one update file.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileEntity:
    """
    One file of an update, as handed out by the host workflow.

    The simulator only reads target_filename. Entities are handed back to
    the host via WorkflowContext.release_file_entity() right after use.

    Attributes:
        target_filename: File name the update expects on the device
        file_id: Host-side identifier, informational only
    """
    target_filename: str
    file_id: str = ""
