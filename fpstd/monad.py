"""
Conditional branching inside a monadic context.

Usage:
    from fpstd.core import THUNK_MONAD, Thunk
    from fpstd.monad import if_m

    action = if_m(THUNK_MONAD)(Thunk(lambda: True))(
        Thunk(lambda: 'foo'))(Thunk(lambda: 'bar'))

    action.force()  # 'foo', and the 'bar' action never runs
"""

from typing import Any

from toolz import curry

from fpstd.core.algebra import Monad

__all__ = ['if_m', 'and_m', 'or_m']


@curry
def if_m(M: Monad, p: Any, x: Any, y: Any) -> Any:
    """
    Monadic if/then/else.

    Sequences `p` with `M.chain` and continues with `x` when it yields true,
    otherwise with `y`. Both branches are already built; whether the
    unselected one has run is up to the context.
    """
    return M.chain(p, lambda b: x if b else y)


@curry
def and_m(M: Monad, x: Any, y: Any) -> Any:
    """Continue with `y` only when `x` yields true."""
    return if_m(M, x, y, M.of(False))


@curry
def or_m(M: Monad, x: Any, y: Any) -> Any:
    """Continue with `y` only when `x` yields false."""
    return if_m(M, x, M.of(True), y)
