"""Configuration: frozen Config holding the process-wide panic policy."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Literal, cast

from resultant.errors import ConfigurationError

PanicMode = Literal["raise", "abort"]

PANIC_MODE_ENV_VAR = "RESULTANT_PANIC_MODE"
_PANIC_MODES: tuple[PanicMode, ...] = ("raise", "abort")
_DEFAULT_PANIC_MODE: PanicMode = "raise"

_dotenv_loaded = False


def _try_load_dotenv() -> None:
    """Load the nearest .env file (searched upward from the working directory) once.

    Variables already present in the environment are never overridden.
    """
    global _dotenv_loaded
    if _dotenv_loaded:
        return
    from dotenv import find_dotenv, load_dotenv

    load_dotenv(find_dotenv(usecwd=True))
    _dotenv_loaded = True


@dataclass(frozen=True)
class Config:
    """Immutable configuration for resultant.

    ``panic_mode`` decides what ``unwrap`` does with an ``Err``: ``"raise"``
    raises :class:`resultant.errors.Panic`, ``"abort"`` aborts the process.
    When *None* it is resolved from ``RESULTANT_PANIC_MODE``.

    Example:
        set_config(Config(panic_mode="abort"))
    """

    #: Auto-resolved from ``RESULTANT_PANIC_MODE`` when *None*.
    panic_mode: PanicMode | None = None

    def __post_init__(self) -> None:
        """Resolve the panic mode from the environment and validate it."""
        raw = self.panic_mode
        if raw is None:
            _try_load_dotenv()
            raw = os.environ.get(PANIC_MODE_ENV_VAR) or _DEFAULT_PANIC_MODE

        mode = str(raw).strip().lower()
        if mode not in _PANIC_MODES:
            raise ConfigurationError(
                f"Unknown panic mode: {raw!r}",
                hint=f"Set {PANIC_MODE_ENV_VAR} or pass panic_mode= one of: "
                + ", ".join(repr(m) for m in _PANIC_MODES),
            )
        object.__setattr__(self, "panic_mode", cast("PanicMode", mode))

    def __str__(self) -> str:
        """Return a developer-friendly representation."""
        return f"Config(panic_mode={self.panic_mode!r})"

    __repr__ = __str__


_active: Config | None = None


def get_config() -> Config:
    """Return the active config, resolving it from the environment on first use."""
    global _active
    if _active is None:
        _active = Config()
    return _active


def set_config(config: Config) -> Config | None:
    """Install ``config`` as the active config and return the previous one."""
    global _active
    previous, _active = _active, config
    return previous


def reset_config() -> None:
    """Forget the active config so the next lookup re-reads the environment.

    The .env file is read again on the next resolution as well.
    """
    global _active, _dotenv_loaded
    _active = None
    _dotenv_loaded = False


__all__ = [
    "PANIC_MODE_ENV_VAR",
    "Config",
    "PanicMode",
    "get_config",
    "reset_config",
    "set_config",
]
