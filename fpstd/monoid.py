"""Monoid helpers, generic over the Foldable or Monoid supplied by the caller."""

from typing import Any, TypeVar

from toolz import curry, identity

from fpstd.boolean import invert
from fpstd.core.algebra import Foldable, Monoid
from fpstd.lazy import Lazy

A = TypeVar('A')

__all__ = ['to_monoid', 'mempty_when', 'mempty_unless']


@curry
def to_monoid(F: Foldable, M: Monoid[A], fa: Any) -> A:
    """
    Fold `fa` with `M`, yielding `M.empty` when `fa` has no elements.

    Example:
        to_monoid(LIST_FOLDABLE)(STRING_MONOID)(["a", "b"])  # "ab"
    """
    return F.fold_map(M, fa, identity)


@curry
def mempty_when(M: Monoid[A], x: bool, m: Lazy[A]) -> A:
    """`M.empty` if `x`, else the lazy value. `m` is only called when `x` is false."""
    return M.empty if x else m()


@curry
def mempty_unless(M: Monoid[A], x: bool, m: Lazy[A]) -> A:
    """The dual to `mempty_when`: the lazy value if `x`, else `M.empty`."""
    return mempty_when(M, invert(x), m)
