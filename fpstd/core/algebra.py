"""
Capability descriptors for the fpstd combinators.

A descriptor is a frozen bundle of callables describing what a type (or a
type constructor, for Monad/Alternative/Foldable) can do. Helpers take the
descriptor as an explicit argument; nothing here is registered globally and
no law is checked.

Usage:
    from fpstd.core.algebra import STRING_MONOID, LIST_FOLDABLE

    LIST_FOLDABLE.fold_map(STRING_MONOID, ["a", "b"], str.upper)  # "AB"
"""

from __future__ import annotations

import functools
import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from toolz import identity

A = TypeVar('A')
B = TypeVar('B')

__all__ = [
    'Eq',
    'Semigroup',
    'Monoid',
    'Functor',
    'Monad',
    'Alternative',
    'Foldable',
    'eq_by',
    'EQ_STRICT',
    'STRING_MONOID',
    'SUM_MONOID',
    'PRODUCT_MONOID',
    'ALL_MONOID',
    'ANY_MONOID',
    'TUPLE_MONOID',
    'IDENTITY_MONAD',
    'LIST_FOLDABLE',
    'LIST_ALTERNATIVE',
]


# ─── Value-level descriptors ───


@dataclass(frozen=True)
class Eq(Generic[A]):
    """Equality comparator for values of type A."""
    equals: Callable[[A, A], bool]


@dataclass(frozen=True)
class Semigroup(Generic[A]):
    """Associative combine over A."""
    concat: Callable[[A, A], A]


@dataclass(frozen=True)
class Monoid(Semigroup[A]):
    """Semigroup with an identity element."""
    empty: A


# ─── Context descriptors ───
# Python has no higher-kinded types, so wrapped values are typed as Any.


@dataclass(frozen=True)
class Functor:
    map: Callable[[Any, Callable[[Any], Any]], Any]


@dataclass(frozen=True)
class Monad(Functor):
    """Supports lifting (`of`) and sequencing of dependent computations (`chain`)."""
    of: Callable[[Any], Any]
    chain: Callable[[Any, Callable[[Any], Any]], Any]


@dataclass(frozen=True)
class Alternative(Functor):
    """
    Supports choice between computations.

    `alt` receives its second argument as a thunk so instances can skip
    building it once the first argument is already non-empty.
    """
    of: Callable[[Any], Any]
    alt: Callable[[Any, Callable[[], Any]], Any]
    zero: Callable[[], Any]


@dataclass(frozen=True)
class Foldable:
    """Left fold over a structure: ``reduce(fa, initial, step)``."""
    reduce: Callable[[Any, Any, Callable[[Any, Any], Any]], Any]

    def fold_map(self, monoid: Monoid[B], fa: Any, f: Callable[[Any], B]) -> B:
        """Map every element into `monoid` and combine the results."""
        return self.reduce(fa, monoid.empty, lambda acc, a: monoid.concat(acc, f(a)))


# ─── Stock instances ───


def eq_by(key: Callable[[A], Any]) -> Eq[A]:
    """Equality on the result of `key`."""
    return Eq(equals=lambda x, y: key(x) == key(y))


EQ_STRICT: Eq[Any] = Eq(equals=operator.eq)

STRING_MONOID: Monoid[str] = Monoid(concat=operator.add, empty="")
SUM_MONOID: Monoid[float] = Monoid(concat=operator.add, empty=0)
PRODUCT_MONOID: Monoid[float] = Monoid(concat=operator.mul, empty=1)
ALL_MONOID: Monoid[bool] = Monoid(concat=lambda x, y: x and y, empty=True)
ANY_MONOID: Monoid[bool] = Monoid(concat=lambda x, y: x or y, empty=False)
TUPLE_MONOID: Monoid[tuple] = Monoid(concat=operator.add, empty=())

# A value is its own context: `chain` is plain application.
IDENTITY_MONAD = Monad(
    map=lambda fa, f: f(fa),
    of=identity,
    chain=lambda fa, f: f(fa),
)

LIST_FOLDABLE = Foldable(reduce=lambda fa, b, f: functools.reduce(f, fa, b))

# List choice concatenates, so it always evaluates the second argument.
LIST_ALTERNATIVE = Alternative(
    map=lambda fa, f: [f(a) for a in fa],
    of=lambda a: [a],
    alt=lambda fa, that: [*fa, *that()],
    zero=lambda: [],
)
