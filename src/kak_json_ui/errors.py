"""Typed failures raised by the JSON UI codec."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Machine-readable category of a decode failure."""

    MALFORMED_MESSAGE = "malformed_message"
    INVALID_COLOR = "invalid_color"
    INVALID_ATTRIBUTE = "invalid_attribute"


class CodecError(Exception):
    """Decode failure for a single JSON UI message."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        method: str | None = None,
        expected_arity: int | None = None,
        actual_arity: int | None = None,
        token: str | None = None,
    ) -> None:
        """Initialize with an error kind, a human-readable message and optional details.

        Args:
            kind: Failure category.
            message: Human-readable error description.
            method: Offending method name, when known.
            expected_arity: Number of params the method requires, for arity mismatches.
            actual_arity: Number of params the message carried, for arity mismatches.
            token: Offending color or attribute token.

        """
        super().__init__(message)
        self.kind = kind
        self.method = method
        self.expected_arity = expected_arity
        self.actual_arity = actual_arity
        self.token = token

    @property
    def code(self) -> str:
        """Machine-readable error code (e.g. ``invalid_color``)."""
        return self.kind.value

    @classmethod
    def malformed(
        cls, message: str, *, method: str | None = None, expected_arity: int | None = None, actual_arity: int | None = None
    ) -> "CodecError":
        """Build a ``malformed_message`` error."""
        return cls(
            ErrorKind.MALFORMED_MESSAGE, message, method=method, expected_arity=expected_arity, actual_arity=actual_arity
        )

    @classmethod
    def invalid_color(cls, token: str) -> "CodecError":
        """Build an ``invalid_color`` error for an unrecognized color token."""
        return cls(ErrorKind.INVALID_COLOR, f"Invalid color: {token!r}", token=token)

    @classmethod
    def invalid_attribute(cls, token: str) -> "CodecError":
        """Build an ``invalid_attribute`` error for an unrecognized attribute token."""
        return cls(ErrorKind.INVALID_ATTRIBUTE, f"Invalid attribute: {token!r}", token=token)
