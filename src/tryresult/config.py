"""Configuration: Frozen Config resolved from arguments and environment."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Literal, get_args

from dotenv import load_dotenv

from tryresult.errors import ConfigurationError

UnserializablePolicy = Literal["repr", "placeholder", "raise"]

_POLICIES: tuple[str, ...] = get_args(UnserializablePolicy)

UNSERIALIZABLE_ENV_VAR = "TRYRESULT_UNSERIALIZABLE"
PLACEHOLDER_ENV_VAR = "TRYRESULT_PLACEHOLDER"

DEFAULT_POLICY: UnserializablePolicy = "repr"
DEFAULT_PLACEHOLDER = "<unserializable value>"

_dotenv_loaded = False


def _load_dotenv_once() -> None:
    global _dotenv_loaded
    if _dotenv_loaded:
        return
    load_dotenv()
    _dotenv_loaded = True


@dataclass(frozen=True)
class Config:
    """Immutable configuration for failure normalization.

    Unset fields are resolved from ``TRYRESULT_UNSERIALIZABLE`` and
    ``TRYRESULT_PLACEHOLDER`` (a ``.env`` file is honored), then from
    built-in defaults.

    Example:
        config = Config(unserializable="placeholder")
        result = Failure(cyclic, config=config)
    """

    #: What to do with a payload that cannot be serialized to JSON.
    unserializable: UnserializablePolicy | None = None
    #: Message used by the ``"placeholder"`` policy.
    placeholder: str | None = None

    def __post_init__(self) -> None:
        """Resolve unset fields from the environment and validate."""
        if self.unserializable is None or self.placeholder is None:
            _load_dotenv_once()

        if self.unserializable is None:
            raw = os.environ.get(UNSERIALIZABLE_ENV_VAR, "").strip().lower()
            object.__setattr__(self, "unserializable", raw or DEFAULT_POLICY)

        if self.placeholder is None:
            object.__setattr__(
                self,
                "placeholder",
                os.environ.get(PLACEHOLDER_ENV_VAR) or DEFAULT_PLACEHOLDER,
            )

        if self.unserializable not in _POLICIES:
            raise ConfigurationError(
                f"Unknown unserializable policy: {self.unserializable!r}",
                hint=f"Supported policies: {', '.join(map(repr, _POLICIES))}",
            )
        if not isinstance(self.placeholder, str):
            raise ConfigurationError(
                f"placeholder must be a string, got {type(self.placeholder).__name__}",
                hint=f"Pass placeholder='...' or set {PLACEHOLDER_ENV_VAR}.",
            )

    def __str__(self) -> str:
        """Return a compact, developer-friendly representation."""
        return (
            f"Config(unserializable={self.unserializable!r}, "
            f"placeholder={self.placeholder!r})"
        )

    __repr__ = __str__
