"""Try executor: run a callable and capture its outcome as a result.

``attempt`` keeps synchronous callables synchronous and makes awaitable ones
awaitable, deciding from the shape of the returned value. ``attempt_async``
is the explicit deferred form and always returns a coroutine.

Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``,
``SystemExit`` and ``asyncio.CancelledError`` keep propagating.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, overload

from tryresult.result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine

    from tryresult.config import Config

logger = logging.getLogger(__name__)

__all__ = ["Try", "attempt", "attempt_async"]


@overload
def attempt[T](
    fn: Callable[[], Awaitable[T]], *, config: Config | None = ...
) -> Coroutine[Any, Any, Result[T]]: ...


@overload
def attempt[T](fn: Callable[[], T], *, config: Config | None = ...) -> Result[T]: ...


def attempt(
    fn: Callable[[], Any], *, config: Config | None = None
) -> Result[Any] | Coroutine[Any, Any, Result[Any]]:
    """Execute *fn* and return a result indicating success or failure.

    Args:
        fn: Zero-argument callable to execute.
        config: Normalization settings; resolved from the environment when
            omitted.

    Returns:
        ``Success``/``Failure`` when *fn* completes synchronously, or a
        coroutine resolving to one when *fn* returns an awaitable.

    Example:
        result = attempt(lambda: int("42"))
        if result.success:
            print(result.data)

        result = await attempt(fetch_profile)
    """
    try:
        value = fn()
    except Exception as exc:
        logger.debug("Captured %s from %r", type(exc).__name__, fn)
        return Failure(exc, config=config)

    if inspect.isawaitable(value):
        return _settle(value, fn, config)
    return Success(value)


async def attempt_async[T](
    fn: Callable[[], Awaitable[T] | T], *, config: Config | None = None
) -> Result[T]:
    """Execute *fn* and await its outcome, whatever shape it has.

    Synchronous callables are run directly; awaitables they return are
    awaited. The coroutine always completes with a result.
    """
    outcome = attempt(fn, config=config)
    if inspect.isawaitable(outcome):
        return await outcome
    return outcome


async def _settle[T](
    awaitable: Awaitable[T], fn: Callable[[], Any], config: Config | None
) -> Result[T]:
    try:
        value = await awaitable
    except Exception as exc:
        logger.debug("Captured %s awaiting %r", type(exc).__name__, fn)
        return Failure(exc, config=config)
    return Success(value)


#: Constructor-style alias, mirroring ``Success``/``Failure``.
Try = attempt
