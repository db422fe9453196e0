"""Exception hierarchy for the UberApp API.

Every error carries the HTTP status it maps to and a small numeric
code.  Services raise these; ``main.create_app`` registers a single
handler that renders them as ``{"detail": ..., "code": ...}``.
"""

from __future__ import annotations

from fastapi import status


class UberAppError(Exception):
    """Base exception for all API errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: int = 0

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class QueryError(UberAppError):
    """A list query string could not be turned into a clause."""


class UnrecognizedParameter(QueryError):
    code = 1001

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Wrong query params :{name}")


class PairedParameterMissing(QueryError):
    code = 1002

    def __init__(self, first: str, second: str) -> None:
        self.names = (first, second)
        super().__init__(f"{first} & {second} params must be in pair.")


class InvalidParameterValue(QueryError):
    code = 1003

    def __init__(self, name: str, value: str, reason: str = "") -> None:
        self.name = name
        self.value = value
        message = f"Invalid value for query param {name}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MalformedIdentifier(UberAppError):
    code = 2001

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid identifier: {raw}")


class ValidationError(UberAppError):
    """A candidate entity broke one of its resource rules."""

    code = 3001

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


class ConflictingUniqueField(UberAppError):
    code = 3002

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Driver/Passenger has conflict {field}: {value}")


class SerializationError(UberAppError):
    """Request body is not valid JSON or does not fit the resource shape."""

    code = 3003


class NotFound(UberAppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = 4004

    def __init__(self, label: str, entity_id: str) -> None:
        self.label = label
        self.entity_id = entity_id
        super().__init__(f"{label}: {entity_id} not found")


class AuthenticationError(UberAppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = 4010
