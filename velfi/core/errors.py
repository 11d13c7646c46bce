"""Custom exceptions used across velfi."""


class VelfiError(Exception):
    """Base error for the application."""


class ConfigError(VelfiError):
    """Configuration related error."""


class PathRelationError(VelfiError):
    """Raised when no relative path exists between two paths."""


class InteractionError(VelfiError):
    """Raised when the dialog layer fails (not when the user cancels)."""
