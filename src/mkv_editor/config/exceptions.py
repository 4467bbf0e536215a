"""Configuration exceptions."""


class ConfigError(Exception):
    """Raised when the run configuration is invalid.

    A ConfigError is fatal: it is raised before any file is inspected or
    modified, and aborts the whole run.
    """

    pass
