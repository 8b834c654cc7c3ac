"""Result primitives for exception-free error handling.

``Success`` and ``Failure`` form a closed union. Both carry the
``success``/``failure`` flags as class-level constants, so the flags are
always complementary and cannot be reassigned on an instance.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, ClassVar, Literal

from tryresult.normalize import normalize_error

if TYPE_CHECKING:
    from tryresult.config import Config


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """A completed, valid outcome wrapping ``data`` verbatim."""

    data: T

    success: ClassVar[Literal[True]] = True
    failure: ClassVar[Literal[False]] = False


@dataclasses.dataclass(frozen=True, slots=True, init=False)
class Failure:
    """A raised or rejected outcome.

    Any value is accepted. Exceptions are stored as-is; anything else is
    normalized into a :class:`~tryresult.errors.ThrownValueError`.
    """

    error: BaseException

    success: ClassVar[Literal[False]] = False
    failure: ClassVar[Literal[True]] = True

    def __init__(self, error: object, *, config: Config | None = None) -> None:
        object.__setattr__(self, "error", normalize_error(error, config=config))


type Result[T] = Success[T] | Failure
