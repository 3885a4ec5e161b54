"""Domain-level error kinds and exceptions for the assistant API."""

from enum import StrEnum


class ErrorKind(StrEnum):
    API_ERROR = "ApiError"
    EMPTY_RESPONSE = "EmptyResponse"
    NOT_IMPLEMENTED = "NotImplemented"
    UNKNOWN = "Unknown"


class BadRequestError(ValueError):
    """Raised for client-side invalid requests at the domain layer."""
