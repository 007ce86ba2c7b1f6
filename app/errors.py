from typing import Any, Dict, Iterable, Optional


class ValidationError(Exception):
    """Bad or missing input fields. `errors` maps a dotted field path to a message."""

    def __init__(self, errors: Dict[str, str], message: str = "Validation Error"):
        super().__init__(message)
        self.message = message
        self.errors = errors

    @classmethod
    def from_pydantic(cls, raw_errors: Iterable[Dict[str, Any]]) -> "ValidationError":
        """
        Builds field errors from pydantic's `errors()` output.
        Request locations ("body", "query") are dropped from the path.
        """
        errors: Dict[str, str] = {}
        for error in raw_errors:
            loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
            path = ".".join(loc) or "body"
            # Keep the first message reported for each field
            errors.setdefault(path, error.get("msg", "Invalid value"))
        return cls(errors)


class StorageUnavailable(Exception):
    """The backing store could not be reached or refused the operation."""

    def __init__(self, message: str = "Storage unavailable", detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class NetworkError(Exception):
    """The UI could not talk to the API. Always safe to retry by hand."""

    def __init__(self, message: str, status_code: Optional[int] = None, retryable: bool = True):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.retryable = retryable


class UnknownActivityType(ValueError):
    """Raised by the estimator for a type outside the known categories."""
