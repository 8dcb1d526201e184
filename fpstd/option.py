"""
Utility functions to accommodate `fpstd.core.option.Option`.

Every helper except `none_as` is curried with `toolz.curry`; the examples
below call them one argument at a time.

Usage:
    from fpstd.core import EQ_STRICT, NOTHING, STRING_MONOID, some
    from fpstd.option import alt_all_by, invert, to_monoid, unsafe_unwrap

    unsafe_unwrap(some(5))                          # 5
    invert(EQ_STRICT)('x')(NOTHING)                 # some('x')
    to_monoid(STRING_MONOID)(NOTHING)               # ''
    alt_all_by([lambda _: NOTHING, some])('foo')    # some('foo')
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from toolz import curry

from fpstd import alternative, monoid
from fpstd.boolean import invert as invert_bool
from fpstd.core.algebra import Eq, Monoid
from fpstd.core.option import (
    NOTHING,
    OPTION_ALTERNATIVE,
    OPTION_FOLDABLE,
    Option,
)
from fpstd.exceptions import UnwrapError
from fpstd.lazy import Lazy
from fpstd.logger import logger

A = TypeVar('A')
B = TypeVar('B')

UNWRAP_FAILED_MESSAGE = "Unsafe attempt to unwrap Option failed"

__all__ = [
    'unsafe_expect',
    'unsafe_unwrap',
    'none_as',
    'invert',
    'to_monoid',
    'mempty_when',
    'mempty_unless',
    'pure_if',
    'alt_all_by',
]


# ─── Unsafe ───


@curry
def unsafe_expect(msg: str, x: Option[A]) -> A:
    """
    Unwrap the value from within an Option, raising `UnwrapError(msg)` if empty.

    Only use this where the Option is already known to be non-empty.

    Example:
        with pytest.raises(UnwrapError, match='^foo$'):
            unsafe_expect('foo')(NOTHING)
    """
    if x.is_none():
        logger.debug("unwrap of empty Option: %s", msg)
        raise UnwrapError(msg)

    return x.value


unsafe_unwrap: Callable[[Option[A]], A] = unsafe_expect(UNWRAP_FAILED_MESSAGE)


# ─── Construction ───


def none_as() -> Option[A]:
    """
    An empty Option whose type parameter is fixed by the call site.

    Example:
        empty: Option[int] = none_as()
    """
    return NOTHING


# ─── Transformation ───


@curry
def invert(eq: Eq[A], val: A, x: Option[A]) -> Option[A]:
    """
    Toggle `val` in and out of an Option.

    An Option holding something equal to `val` (per `eq`) becomes empty.
    Anything else, empty or holding a different value, becomes `some(val)`.
    Applying it twice to `some(y)` with `y != val` therefore gives
    `NOTHING`, not `some(y)`.

    Example:
        f = invert(EQ_STRICT)('x')

        f(NOTHING)     # some('x')
        f(some('y'))   # some('x')
        f(some('x'))   # NOTHING
    """
    if x.exists(lambda y: eq.equals(y, val)):
        return NOTHING
    return Option.some(val)


@curry
def to_monoid(M: Monoid[A], x: Option[A]) -> A:
    """
    The held value, or the monoid's identity if empty.

    Example:
        f = to_monoid(STRING_MONOID)

        f(some('x'))  # 'x'
        f(NOTHING)    # ''
    """
    return monoid.to_monoid(OPTION_FOLDABLE, M, x)


# ─── Conditional construction ───
# Not built on the monoid versions, which would need a redundant Monoid input.


@curry
def mempty_when(x: bool, m: Lazy[Option[A]]) -> Option[A]:
    """
    `NOTHING` if `x`, else the lazy Option. The dual to `mempty_unless`.

    `m` is only called when `x` is false.
    """
    return NOTHING if x else m()


@curry
def mempty_unless(x: bool, m: Lazy[Option[A]]) -> Option[A]:
    """
    The lazy Option if `x`, else `NOTHING`. The dual to `mempty_when`.

    `m` is only called when `x` is true.
    """
    return mempty_when(invert_bool(x), m)


@curry
def pure_if(x: bool, y: Lazy[A]) -> Option[A]:
    """
    `some` of the lazy value if `x`, else `NOTHING`. `y` is only called if `x`.

    Example:
        person = {'name': 'Hodor', 'age': 40}

        pure_if(person['age'] == 42)(lambda: person['name'])  # NOTHING
    """
    return alternative.pure_if(OPTION_ALTERNATIVE, x, y)


@curry
def alt_all_by(fs: Sequence[Callable[[A], Option[B]]], x: A) -> Option[B]:
    """
    Apply `fs` to `x` in order and return the first non-empty result.

    Functions after the first non-empty result are not called. Returns
    `NOTHING` if every result is empty or `fs` is empty.
    """
    return alternative.alt_all_by(OPTION_ALTERNATIVE, fs, x)
