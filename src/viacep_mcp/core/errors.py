from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    TRANSPORT = "transport"
    CANCELLED = "cancelled"
    DECODE = "decode"


class ViaCepError(Exception):
    """Base error for viacep-mcp."""

    kind: ErrorKind


class InvalidInputError(ViaCepError):
    """Raised when ViaCEP rejects the CEP as malformed (HTTP 400)."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str = "the given CEP is invalid") -> None:
        super().__init__(message)


class NotFoundError(ViaCepError):
    """Raised when a well-formed CEP has no address (``"erro": true``)."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "the given CEP was not found") -> None:
        super().__init__(message)


class TransportError(ViaCepError):
    """Raised when the HTTP request itself fails."""

    kind = ErrorKind.TRANSPORT


class DecodeError(ViaCepError):
    """Raised when the response body is not an address object."""

    kind = ErrorKind.DECODE


class LookupCancelledError(ViaCepError):
    """Raised when the lookup context is cancelled or its deadline elapses first."""

    kind = ErrorKind.CANCELLED

    def __init__(self, reason: BaseException) -> None:
        super().__init__(str(reason))
        self.reason = reason
