"""Exception hierarchy for tryresult."""

from __future__ import annotations


class TryResultError(Exception):
    """Base exception for all tryresult errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(TryResultError):
    """Configuration validation or resolution failed."""


class ThrownValueError(TryResultError):
    """Uniform error for a failure value that was not an exception.

    ``str(err)`` is the textual form of the payload; the payload itself is
    kept on :attr:`value`.
    """

    def __init__(self, message: str, *, value: object) -> None:
        super().__init__(message)
        self.value = value


class SerializationError(TryResultError):
    """A failure payload could not be turned into a message.

    Only raised when ``Config.unserializable`` is ``"raise"``.
    """

    def __init__(
        self, message: str, *, value: object, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.value = value
