"""Normalization of arbitrary failure values into exceptions.

Anything that is already an exception passes through untouched, so its
identity, traceback and chained causes survive. Strings become the message
as-is; every other value is rendered as compact JSON (the same text
``JSON.stringify`` would produce for it) and wrapped in
:class:`~tryresult.errors.ThrownValueError`.
"""

from __future__ import annotations

import logging

from pydantic_core import to_json

from tryresult.config import Config
from tryresult.errors import SerializationError, ThrownValueError

logger = logging.getLogger(__name__)

__all__ = ["describe_value", "normalize_error"]


def describe_value(value: object, *, config: Config | None = None) -> str:
    """Return the message text for a non-exception failure value.

    Raises:
        SerializationError: If *value* cannot be serialized and the
            configured policy is ``"raise"``.
    """
    if isinstance(value, str):
        return value
    try:
        return to_json(value, inf_nan_mode="null").decode()
    except ValueError as exc:
        # Cycles and unknown types both surface as ValueError subclasses.
        return _unserializable_message(value, exc, config or Config())


def normalize_error(value: object, *, config: Config | None = None) -> BaseException:
    """Coerce *value* into an exception suitable for ``Failure.error``."""
    if isinstance(value, BaseException):
        return value
    return ThrownValueError(describe_value(value, config=config), value=value)


def _unserializable_message(value: object, exc: ValueError, config: Config) -> str:
    if config.unserializable == "raise":
        raise SerializationError(
            f"Cannot serialize {type(value).__name__} failure value: {exc}",
            value=value,
            hint="Use unserializable='repr' or 'placeholder' to fall back.",
        ) from exc

    logger.debug(
        "Falling back to %s for unserializable %s payload: %s",
        config.unserializable,
        type(value).__name__,
        exc,
    )
    if config.unserializable == "placeholder":
        return config.placeholder or ""
    return repr(value)
