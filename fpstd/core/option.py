"""
Option container and its capability descriptors.

An Option either holds exactly one value or is empty. Emptiness is tracked
separately from the held value, so ``some(None)`` is a legal, non-empty
Option.

Usage:
    opt = some(10)
    opt.map(lambda x: x * 2).unwrap_or(0)  # 20

    NOTHING.unwrap_or(0)  # 0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from fpstd.core.algebra import Alternative, Eq, Foldable, Monad, Monoid

T = TypeVar('T')
U = TypeVar('U')

__all__ = [
    'Option',
    'some',
    'NOTHING',
    'from_nullable',
    'option_eq',
    'OPTION_MONAD',
    'OPTION_ALTERNATIVE',
    'OPTION_FOLDABLE',
    'OptionFoldable',
]


@dataclass(frozen=True)
class Option(Generic[T]):
    """
    Option<T> - Safe handling of possibly absent values

    Build values with `some` and `NOTHING` rather than the constructor.
    """
    _value: Optional[T] = None
    _is_some: bool = False

    def __post_init__(self):
        if not self._is_some and self._value is not None:
            raise ValueError("An empty Option cannot hold a value; use Option.some")

    @classmethod
    def some(cls, value: T) -> 'Option[T]':
        """Create Some variant"""
        return cls(_value=value, _is_some=True)

    @classmethod
    def nothing(cls) -> 'Option[T]':
        """Create Nothing variant"""
        return cls()

    @property
    def value(self) -> Optional[T]:
        """Held value, or None when empty. Check `is_some` first."""
        return self._value

    def is_some(self) -> bool:
        """Check if Some"""
        return self._is_some

    def is_none(self) -> bool:
        """Check if Nothing"""
        return not self._is_some

    def unwrap_or(self, default: T) -> T:
        """Unwrap or return default"""
        return self._value if self._is_some else default

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        """True if Some and the held value satisfies predicate"""
        return self._is_some and predicate(self._value)

    def map(self, f: Callable[[T], U]) -> 'Option[U]':
        """Map function over Some value"""
        if self._is_some:
            return Option.some(f(self._value))
        return Option.nothing()

    def flat_map(self, f: Callable[[T], 'Option[U]']) -> 'Option[U]':
        """FlatMap for chaining Options"""
        if self._is_some:
            return f(self._value)
        return Option.nothing()

    def filter(self, predicate: Callable[[T], bool]) -> 'Option[T]':
        """Filter by predicate"""
        return self if self.exists(predicate) else Option.nothing()

    def match(self, on_some: Callable[[T], U], on_nothing: Callable[[], U]) -> U:
        """Pattern matching"""
        return on_some(self._value) if self._is_some else on_nothing()

    def __repr__(self) -> str:
        if self._is_some:
            return f"Option.Some({self._value!r})"
        return "Option.Nothing"


NOTHING: Option[Any] = Option.nothing()


def some(value: T) -> Option[T]:
    return Option.some(value)


def from_nullable(value: Optional[T]) -> Option[T]:
    """Some(value) unless value is None."""
    return NOTHING if value is None else Option.some(value)


def option_eq(eq: Eq[T]) -> Eq[Option[T]]:
    """Lift an Eq over the held values: empties are equal, mixed cases are not."""

    def equals(x: Option[T], y: Option[T]) -> bool:
        if x.is_none() or y.is_none():
            return x.is_none() and y.is_none()
        return eq.equals(x.value, y.value)

    return Eq(equals=equals)


# ─── Descriptors ───


OPTION_MONAD = Monad(
    map=lambda fa, f: fa.map(f),
    of=some,
    chain=lambda fa, f: fa.flat_map(f),
)

OPTION_ALTERNATIVE = Alternative(
    map=lambda fa, f: fa.map(f),
    of=some,
    alt=lambda fa, that: fa if fa.is_some() else that(),
    zero=lambda: NOTHING,
)


@dataclass(frozen=True)
class OptionFoldable(Foldable):
    """Foldable for Option; `fold_map` hands back `f(value)` without touching `concat`."""

    def fold_map(self, monoid: Monoid[U], fa: Option[T], f: Callable[[T], U]) -> U:
        return f(fa.value) if fa.is_some() else monoid.empty


OPTION_FOLDABLE = OptionFoldable(
    reduce=lambda fa, b, f: f(b, fa.value) if fa.is_some() else b,
)
