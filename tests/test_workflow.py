"""Tests for the in-memory host workflow."""

from du_simulator.schemas import FileEntity
from du_simulator.workflow import InMemoryWorkflow, WorkflowContext


def test_is_workflow_context():
    assert isinstance(InMemoryWorkflow(), WorkflowContext)


def test_from_filenames():
    workflow = InMemoryWorkflow.from_filenames(
        update_files=["a.bin"],
        bundle_updates=["b.bin", "c.bin"],
        installed_criteria="1.0",
    )
    assert workflow.update_files_count() == 1
    assert workflow.bundle_updates_count() == 2
    assert workflow.get_bundle_updates_file(1) == FileEntity("c.bin")
    assert workflow.get_installed_criteria() == "1.0"


def test_out_of_range_is_none():
    workflow = InMemoryWorkflow.from_filenames(update_files=["a.bin"])
    assert workflow.get_update_file(1) is None
    assert workflow.get_update_file(-1) is None
    assert workflow.get_bundle_updates_file(0) is None


def test_release_and_details_are_recorded():
    workflow = InMemoryWorkflow.from_filenames(update_files=["a.bin"])
    entity = workflow.get_update_file(0)
    workflow.release_file_entity(entity)
    workflow.set_result_details("done")
    assert workflow.released == [entity]
    assert workflow.result_details == "done"
