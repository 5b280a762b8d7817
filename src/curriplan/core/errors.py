"""
Service Exceptions

Raised by the data layer and translated to JSON error responses by the
handlers registered in ``curriplan.main``.
"""


class ServiceError(Exception):
    """A request could not be served because of a database failure.

    Attributes:
        message: Generic, client-safe description (e.g. 'Failed to add grade').
        original_error: The underlying exception, kept for logging only.
    """

    status_code = 500

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message}: {self.original_error}"
        return self.message


class ImportValidationError(Exception):
    """Raised when a bulk-import request body is not a list of curriculums."""

    status_code = 400

    def __init__(self, message: str = "Invalid curriculum data") -> None:
        super().__init__(message)
        self.message = message
