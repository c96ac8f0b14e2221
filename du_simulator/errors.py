"""
Error classes for du-simulator.

Most anomalies never surface as exceptions: a missing or malformed fixture
and selector misses degrade to the action's default outcome, and a host that
cannot supply a file entity is reported as a result code. These types exist
for the few places where something has to be raised:

- FileEntityError: raised by host implementations, absorbed by the handler
- ConfigError: invalid config.yaml
- ManifestError: invalid import-manifest arguments
- ExtensionNotFoundError: unknown content-handler extension name
"""


class SimulatorError(Exception):
    """Base exception for du-simulator."""
    pass


class FileEntityError(SimulatorError):
    """
    The host could not supply a file entity for an index.

    The simulator handler converts this into the structural-failure
    result instead of propagating it.
    """
    pass


class ConfigError(SimulatorError):
    """Configuration validation error."""
    pass


class ManifestError(SimulatorError):
    """Invalid argument for the import manifest generator."""
    pass


class ExtensionNotFoundError(SimulatorError):
    """No content handler extension is registered under the given name."""
    pass
