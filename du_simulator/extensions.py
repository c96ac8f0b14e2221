"""Content handler discovery and construction via entrypoints."""
from importlib.metadata import entry_points
from typing import Callable, Dict, Optional
import logging

from du_simulator.errors import ExtensionNotFoundError
from du_simulator.handlers.base import ContentHandler

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "du_simulator.content_handlers"

HandlerFactory = Callable[..., Optional[ContentHandler]]


def discover_content_handlers() -> Dict[str, HandlerFactory]:
    """
    Discover content handler factories from entrypoints.

    Returns:
        {"simulator": <create_update_content_handler_extension>, ...}
    """
    factories = {}

    eps = entry_points()
    for ep in eps.select(group=ENTRY_POINT_GROUP):
        # ep.value: "du_simulator.handlers.simulator:create_update_content_handler_extension"
        factories[ep.name] = ep.load()

    return factories


def get_factory(name: str) -> HandlerFactory:
    """Get a specific content handler factory."""
    factories = discover_content_handlers()
    if name not in factories:
        raise ExtensionNotFoundError(
            f"Unknown content handler: {name}. Registered: {sorted(factories)}"
        )
    return factories[name]


def load_content_handler(name: str, log_level: Optional[str] = None) -> Optional[ContentHandler]:
    """
    Create a content handler through its registered factory.

    Args:
        name: Entrypoint name (e.g. "simulator")
        log_level: Passed to the factory

    Returns:
        The handler, or None when the factory failed (extension unavailable)

    Raises:
        ExtensionNotFoundError: If no factory is registered under name
    """
    factory = get_factory(name)

    logger.debug(f"Creating content handler: {name}")
    try:
        handler = factory(log_level)
    except Exception:
        logger.error(
            f"Content handler factory failed: {name}",
            exc_info=True,
            extra={"extension": name},
        )
        return None

    if handler is None:
        logger.warning(f"Content handler unavailable: {name}")
    return handler
