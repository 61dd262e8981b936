"""
Exception classes for marathon-discovery.

The Marathon client raises these; the discovery client absorbs them.
"""


class MarathonDiscoveryError(Exception):
    """Base exception for all marathon-discovery errors."""

    pass


class ConfigurationError(MarathonDiscoveryError):
    """Raised when configuration is invalid."""

    pass


class MarathonError(MarathonDiscoveryError):
    """
    Raised when a Marathon API call fails.

    Covers network errors, timeouts, non-2xx responses and malformed bodies.

    Attributes:
        status_code: HTTP status code, if a response was received.
        original_error: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.original_error = original_error

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.status_code is not None:
            parts.append(f"Status: {self.status_code}")
        if self.original_error:
            parts.append(f"Cause: {type(self.original_error).__name__}: {self.original_error}")
        return " | ".join(parts)


class ApplicationNotFoundError(MarathonError):
    """Raised when Marathon has no application with the requested id."""

    def __init__(self, app_id: str):
        super().__init__(f"Application {app_id} does not exist", status_code=404)
        self.app_id = app_id
