"""resultant: explicit success/failure values with composable combinators.

Public API:
    - Ok / Err: the two variants of a Result
    - Result: ``Ok[T] | Err[E]`` type alias
    - Panic: raised when an ``Err`` is unwrapped
    - Config: panic policy (raise or abort)
"""

from __future__ import annotations

import logging

from resultant.config import Config, get_config, reset_config, set_config
from resultant.errors import ConfigurationError, Panic, ResultantError
from resultant.result import Err, Ok, Result

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultant")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultant").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Err",
    "Ok",
    "Panic",
    "Result",
    "ResultantError",
    "get_config",
    "reset_config",
    "set_config",
]
