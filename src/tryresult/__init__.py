"""tryresult: exception-free results for sync and async callables.

Public API:
    - attempt() / Try(): Run a callable, get Success or Failure back
    - attempt_async(): Always-awaitable variant
    - Success, Failure, Result: The result union
    - normalize_error(): Coerce any value into an exception
    - Config: Normalization settings
"""

from __future__ import annotations

import logging

from tryresult.config import Config
from tryresult.errors import (
    ConfigurationError,
    SerializationError,
    ThrownValueError,
    TryResultError,
)
from tryresult.executor import Try, attempt, attempt_async
from tryresult.normalize import describe_value, normalize_error
from tryresult.result import Failure, Result, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("tryresult")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("tryresult").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Failure",
    "Result",
    "SerializationError",
    "Success",
    "ThrownValueError",
    "Try",
    "TryResultError",
    "__version__",
    "attempt",
    "attempt_async",
    "describe_value",
    "normalize_error",
]
