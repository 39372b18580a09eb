"""
Exceptions for the Mediview Patient Directory

All exceptions inherit from PatientDirectoryError so callers can catch
every directory failure in one place. Loader failures carry a `kind` so
the screen can pick the right recovery (retry vs. reconfigure).
"""


class PatientDirectoryError(Exception):
    """Base exception for all patient directory errors."""

    pass


class ConfigurationError(PatientDirectoryError):
    """Raised when the persisted settings cannot be read or written."""

    pass


class PatientLoadError(PatientDirectoryError):
    """Base exception for failures while loading the patient store."""

    kind = "load_failed"
    retryable = True

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigMissingError(PatientLoadError):
    """No storage path is configured, so loading was not attempted."""

    kind = "config_missing"
    retryable = False

    def __init__(self, message: str = "Server path not configured"):
        super().__init__(message)


class ReadFailedError(PatientLoadError):
    """The read capability reported an error (I/O, missing file, bad JSON).

    The reason is kept verbatim for display.
    """

    kind = "read_failed"

    def __init__(self, reason: str):
        super().__init__(f"Failed to load patient data: {reason}")
        self.reason = reason


class InvalidFormatError(PatientLoadError):
    """The patient store was readable but its content is not a JSON array."""

    kind = "invalid_format"
    retryable = False

    def __init__(self, message: str = "Invalid patient data format"):
        super().__init__(message)


class NavigationFailedError(PatientDirectoryError):
    """Raised by a navigation host when a route or focus request fails."""

    pass
