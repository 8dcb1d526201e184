"""
Helpers over any Alternative.

Each helper takes the descriptor first. `fpstd.option` specialises them to the
Option descriptor.
"""

import functools
from typing import Any, Callable, Iterable, TypeVar

from toolz import curry

from fpstd.core.algebra import Alternative
from fpstd.lazy import Lazy

A = TypeVar('A')

__all__ = ['pure_if', 'alt_all', 'alt_all_by']


@curry
def pure_if(F: Alternative, x: bool, y: Lazy[A]) -> Any:
    """Lift the lazy value with `F.of` if `x`, else `F.zero()`. `y` only runs if `x`."""
    return F.of(y()) if x else F.zero()


@curry
def alt_all(F: Alternative, fas: Iterable[Any]) -> Any:
    """Combine already built values with `F.alt`, starting from `F.zero()`."""
    return functools.reduce(lambda acc, fa: F.alt(acc, lambda: fa), fas, F.zero())


@curry
def alt_all_by(F: Alternative, fs: Iterable[Callable[[A], Any]], x: A) -> Any:
    """
    Apply every function in `fs` to `x` and combine the results with `F.alt`.

    Functions are applied left to right, each inside the thunk handed to
    `F.alt`, so an instance whose `alt` ignores its second argument once the
    first is non-empty stops calling functions there.
    """
    return functools.reduce(
        lambda acc, f: F.alt(acc, lambda: f(x)),
        fs,
        F.zero(),
    )
