"""Minimal algebra layer consumed by the fpstd combinators."""

from fpstd.core.algebra import (
    ALL_MONOID,
    ANY_MONOID,
    EQ_STRICT,
    IDENTITY_MONAD,
    LIST_ALTERNATIVE,
    LIST_FOLDABLE,
    PRODUCT_MONOID,
    STRING_MONOID,
    SUM_MONOID,
    TUPLE_MONOID,
    Alternative,
    Eq,
    Foldable,
    Functor,
    Monad,
    Monoid,
    Semigroup,
    eq_by,
)
from fpstd.core.option import (
    NOTHING,
    OPTION_ALTERNATIVE,
    OPTION_FOLDABLE,
    OPTION_MONAD,
    Option,
    from_nullable,
    option_eq,
    some,
)
from fpstd.core.thunk import THUNK_MONAD, Thunk

__all__ = [
    "Eq",
    "Semigroup",
    "Monoid",
    "Functor",
    "Monad",
    "Alternative",
    "Foldable",
    "eq_by",
    "EQ_STRICT",
    "STRING_MONOID",
    "SUM_MONOID",
    "PRODUCT_MONOID",
    "ALL_MONOID",
    "ANY_MONOID",
    "TUPLE_MONOID",
    "IDENTITY_MONAD",
    "LIST_FOLDABLE",
    "LIST_ALTERNATIVE",
    "Option",
    "some",
    "NOTHING",
    "from_nullable",
    "option_eq",
    "OPTION_MONAD",
    "OPTION_ALTERNATIVE",
    "OPTION_FOLDABLE",
    "Thunk",
    "THUNK_MONAD",
]
