"""Result type for explicit, composable error propagation.

A ``Result`` is either ``Ok(value)`` or ``Err(error)``. Operations that can
fail return one instead of raising, and callers chain the combinators below
instead of writing try/except ladders.

Usage:
    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Err(f"not a number: {raw!r}")
        return Ok(int(raw))

    port = parse_port(raw).and_then(check_range).unwrap_or(8080)

    match parse_port(raw):
        case Ok(value):
            print(f"port {value}")
        case Err(error):
            print(f"bad port: {error}")

Both variants are frozen. No combinator mutates its receiver; each returns a
new ``Result`` or hands back the receiver untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, NoReturn

from resultant._panic import panic

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success variant carrying ``value``."""

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return not self.is_ok()

    def ok(self) -> T:
        """Return the success payload."""
        return self.value

    def err(self) -> None:
        """Return ``None``; an ``Ok`` has no failure payload."""
        return None

    def map[V](self, f: Callable[[T], V]) -> Ok[V]:
        """Apply ``f`` to the success payload.

        ``f`` is called exactly once. An exception raised by ``f``
        propagates unchanged.
        """
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], object]) -> Ok[T]:
        """Return ``self``; ``f`` is never called on an ``Ok``."""
        return self

    def and_then[V, E](self, f: Callable[[T], Result[V, E]]) -> Result[V, E]:
        """Return ``f(value)``, which may itself be ``Ok`` or ``Err``."""
        return f(self.value)

    def or_else(self, f: Callable[[Any], object]) -> Ok[T]:
        """Return ``self``; the recovery function is not called."""
        return self

    def and_[V, E](self, other: Result[V, E]) -> Result[V, E]:
        """Return ``other``, dropping this success payload.

        ``other`` is built by the caller before the call, whether or not it
        ends up being used. Wrap the construction in :meth:`and_then` when
        it is expensive or has side effects.
        """
        return other

    def or_(self, other: object) -> Ok[T]:
        """Return ``self``; the first success wins."""
        return self

    def unwrap(self, message: str | None = None) -> T:
        """Return the success payload."""
        return self.value

    def unwrap_or(self, default: object) -> T:
        """Return the success payload, ignoring ``default``."""
        return self.value


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failure variant carrying ``error``.

    ``error`` can be anything: a string, an error code, an exception
    instance or a structured value. It is never interpreted here.
    """

    error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return not self.is_ok()

    def ok(self) -> None:
        """Return ``None``; an ``Err`` has no success payload."""
        return None

    def err(self) -> E:
        """Return the failure payload."""
        return self.error

    def map(self, f: Callable[[Any], object]) -> Err[E]:
        """Return ``self``; ``f`` is never called on an ``Err``."""
        return self

    def map_err[V](self, f: Callable[[E], V]) -> Err[V]:
        """Apply ``f`` to the failure payload.

        ``f`` is called exactly once. An exception raised by ``f``
        propagates unchanged.
        """
        return Err(f(self.error))

    def and_then(self, f: Callable[[Any], object]) -> Err[E]:
        """Return ``self`` without calling ``f``.

        This short-circuits a chain of fallible steps at the first failure.
        """
        return self

    def or_else[T, V](self, f: Callable[[E], Result[T, V]]) -> Result[T, V]:
        """Return ``f(error)``, a recovery or fallback computation."""
        return f(self.error)

    def and_(self, other: object) -> Err[E]:
        """Return ``self``; the left-most error wins."""
        return self

    def or_[T, V](self, other: Result[T, V]) -> Result[T, V]:
        """Return ``other``, whichever variant it is."""
        return other

    def unwrap(self, message: str | None = None) -> NoReturn:
        """Panic, since there is no success payload to return.

        Args:
            message: Diagnostic to panic with. When omitted the diagnostic
                embeds ``str(error)``; when given the payload is left out.

        Raises:
            Panic: Unless the active config aborts the process instead.
        """
        if message is None:
            message = f"called `Result.unwrap()` on an `Err` value: {self.error!s}"
        panic(message)

    def unwrap_or[T](self, default: T) -> T:
        """Return ``default``."""
        return default


type Result[T, E] = Ok[T] | Err[E]

__all__ = ["Err", "Ok", "Result"]
