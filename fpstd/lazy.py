"""Thunk aliases and helpers."""

from typing import Callable, TypeVar, Union

from fpstd.core.thunk import Thunk

A = TypeVar('A')

Lazy = Callable[[], A]

__all__ = ['Lazy', 'lazy', 'memoize', 'execute']


def lazy(value: A) -> Lazy[A]:
    """Wrap an already computed value as a constant thunk."""
    return lambda: value


def memoize(thunk: Lazy[A]) -> Thunk[A]:
    """Evaluate `thunk` at most once, however many times the result is called."""
    return thunk if isinstance(thunk, Thunk) else Thunk(thunk)


def execute(thunk: Union[Lazy[A], Thunk[A]]) -> A:
    return thunk()
