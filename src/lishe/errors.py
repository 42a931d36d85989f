"""Application error taxonomy."""


class LisheError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict[str, object]:
        """Return the JSON error body."""
        payload: dict[str, object] = {"message": self.message}
        if self.field:
            payload["field"] = self.field
        return payload


class ValidationError(LisheError):
    """Raised when input is malformed or missing."""

    status_code = 400


class NotFoundError(LisheError):
    """Raised when an id/owner combination does not exist."""

    status_code = 404


class UnauthorizedError(LisheError):
    """Raised when a request has no valid session."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class UpstreamError(LisheError):
    """Raised when the text generation service fails."""

    status_code = 502
