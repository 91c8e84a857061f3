"""Domain errors — custom exceptions for settings synchronization.

These exceptions are raised by domain services and caught by application
or presentation layers. They carry no infrastructure dependencies.
"""


class SettingsSyncError(Exception):
    """Base exception for all settings-sync errors."""


class InvalidPreferenceValueError(SettingsSyncError, ValueError):
    """Raised when a preference value is outside its enumerated set."""

    def __init__(self, key: str, value: object, allowed: tuple[str, ...] = ()) -> None:
        self.key = key
        self.value = value
        self.allowed = allowed
        message = f"Invalid value {value!r} for preference '{key}'"
        if allowed:
            message += f" (expected one of: {', '.join(allowed)})"
        super().__init__(message)


class StorageError(SettingsSyncError):
    """Base class for persistence collaborator failures."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(message)


class StorageReadError(StorageError):
    """Raised when a key cannot be read from persistent storage."""


class StorageWriteError(StorageError):
    """Raised when a key cannot be written to persistent storage."""


class HydrationError(SettingsSyncError):
    """Aggregate of the failures seen during startup reconciliation.

    Hydration never raises this; it is built on demand from a
    ``HydrationReport`` so callers can surface or log it as a whole.
    """

    def __init__(self, failures: list[str]) -> None:
        self.failures = failures
        super().__init__("Hydration completed with errors: " + "; ".join(failures))


class ConfigurationError(SettingsSyncError):
    """Raised when configuration is invalid or missing."""
