"""
Memoised lazy values and the deferred-effect monad built on them.

Usage:
    thunk = Thunk(lambda: expensive_computation())
    thunk.force()  # Evaluates once
    thunk()        # Returns cached value
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from fpstd.core.algebra import Monad

T = TypeVar('T')
U = TypeVar('U')

__all__ = ['Thunk', 'THUNK_MONAD']


@dataclass
class Thunk(Generic[T]):
    """
    Thunk<T> - Lazy evaluation with memoization

    A Thunk is itself a zero-argument callable, so it can be passed anywhere a
    plain thunk is expected.
    """
    _computation: Callable[[], T]
    _cached: Optional[T] = None
    _evaluated: bool = False

    def force(self) -> T:
        """Force evaluation (memoized)"""
        if not self._evaluated:
            self._cached = self._computation()
            self._evaluated = True
        return self._cached

    def __call__(self) -> T:
        return self.force()

    def is_evaluated(self) -> bool:
        """Check if already evaluated"""
        return self._evaluated

    def map(self, f: Callable[[T], U]) -> 'Thunk[U]':
        """Map over thunk result (lazy)"""
        return Thunk(lambda: f(self.force()))

    def flat_map(self, f: Callable[[T], 'Thunk[U]']) -> 'Thunk[U]':
        """Sequence a dependent thunk (lazy); neither side runs until forced"""
        return Thunk(lambda: f(self.force()).force())

    def __repr__(self) -> str:
        if self._evaluated:
            return f"Thunk(evaluated -> {self._cached!r})"
        return "Thunk(pending)"


# Nothing runs until the outermost Thunk is forced, and `chain` only forces the
# Thunk its continuation returns.
THUNK_MONAD = Monad(
    map=lambda fa, f: fa.map(f),
    of=lambda a: Thunk(lambda: a),
    chain=lambda fa, f: fa.flat_map(f),
)
