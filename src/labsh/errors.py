"""Exception types raised by labsh."""


class LabshError(Exception):
    """Base class for labsh errors."""


class ChildCreationError(LabshError):
    """No child process could be created."""


class HandleReapedError(LabshError):
    """A child handle was used after its process had been waited on."""


class ConfigError(LabshError):
    """The configuration file or environment holds invalid values."""
