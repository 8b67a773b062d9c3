"""Exception hierarchy for resultant."""

from __future__ import annotations


class ResultantError(Exception):
    """Base exception for recoverable resultant errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(ResultantError):
    """Configuration validation or resolution failed."""


class Panic(BaseException):
    """Unrecoverable fault raised when an ``Err`` is unwrapped.

    Derives from ``BaseException`` so ``except Exception`` recovery blocks
    let it through, the same way they let ``SystemExit`` through. Unwrapping
    is an assertion by the caller; a ``Panic`` means that assertion was wrong.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint
