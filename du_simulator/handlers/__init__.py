"""
Content handlers for du-simulator.

Usage:
    from du_simulator.handlers import SimulatorHandler
    from du_simulator.workflow import InMemoryWorkflow

    workflow = InMemoryWorkflow.from_filenames(update_files=["fw.bin"])
    with SimulatorHandler() as handler:
        result = handler.download(workflow)
"""

from du_simulator.handlers.base import ContentHandler
from du_simulator.handlers.simulator import (
    SimulatorHandler,
    create_update_content_handler_extension,
)

__all__ = [
    "ContentHandler",
    "SimulatorHandler",
    "create_update_content_handler_extension",
]
