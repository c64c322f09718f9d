"""Exception hierarchy.

The pure reducer never raises for command input; these cover the I/O and
configuration edges around it.
"""


class RoverError(Exception):
    """Base class for rover errors."""


class StorageError(RoverError):
    """A position or obstacle record could not be written."""


class ConfigError(RoverError):
    """Configuration values are missing or malformed."""
