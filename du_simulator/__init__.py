"""
du-simulator - Fixture-driven update content handler simulator

Simulates download, install, apply, cancel and installed checks for an
update workflow by reading the expected outcomes from a JSON fixture.
"""

__version__ = "0.1.0"


__all__ = ["SimulatorHandler", "create_update_content_handler_extension", "load_fixture", "resolve"]

from .fixture import load_fixture
from .resolver import resolve
from .handlers import SimulatorHandler, create_update_content_handler_extension
