"""
Application exceptions.

Each exception carries a client-safe message, the HTTP status it maps to,
and optional details. Handlers in app.api.exception_handlers turn them into
``{"message": ..., "error": ...}`` JSON responses.
"""

from typing import Any


class FitnessTrackerError(Exception):
    """Base exception for all API errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: Any | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"message": self.message}
        if self.details:
            body["error"] = self.details
        return body

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status_code={self.status_code}, message={self.message!r})"


class ValidationFailure(FitnessTrackerError):
    """Payload passed schema checks but violates a stored constraint."""

    status_code = 400


class UnauthenticatedError(FitnessTrackerError):
    """Missing, malformed or expired credential."""

    status_code = 401

    def __init__(self, message: str = "Not authenticated", details: Any | None = None) -> None:
        super().__init__(message, details)


class ForbiddenError(FitnessTrackerError):
    """Authenticated, but the record belongs to someone else."""

    status_code = 403

    def __init__(self, message: str = "Unauthorized", details: Any | None = None) -> None:
        super().__init__(message, details)


class NotFoundError(FitnessTrackerError):
    status_code = 404

    def __init__(self, resource: str = "Record", details: Any | None = None) -> None:
        self.resource = resource
        super().__init__(f"{resource} not found", details)


class ConflictError(FitnessTrackerError):
    status_code = 409


class StoreUnavailableError(FitnessTrackerError):
    """The database could not be reached."""

    status_code = 503

    def __init__(self, message: str = "Database unavailable", details: Any | None = None) -> None:
        super().__init__(message, details)
