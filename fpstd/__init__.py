"""
fpstd - small combinators over optional values, monads, monoids and booleans.

Helpers are grouped by the structure they work on and import as modules:

    from fpstd import option as O
    from fpstd.core import NOTHING, some

    O.alt_all_by([lambda _: NOTHING, some])('foo')  # some('foo')
"""

from fpstd import alternative, boolean, lazy, monad, monoid, option
from fpstd.exceptions import FpStdError, UnwrapError

__version__ = "0.1.0"

__all__ = [
    "alternative",
    "boolean",
    "lazy",
    "monad",
    "monoid",
    "option",
    "FpStdError",
    "UnwrapError",
]
