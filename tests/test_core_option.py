"""Tests for the Option container and its descriptors."""

import pytest

from fpstd.core import (
    EQ_STRICT,
    NOTHING,
    OPTION_ALTERNATIVE,
    OPTION_FOLDABLE,
    OPTION_MONAD,
    Monoid,
    Option,
    from_nullable,
    option_eq,
    some,
)


class TestConstruction:
    def test_some(self):
        opt = some(1)
        assert opt.is_some()
        assert not opt.is_none()
        assert opt.value == 1

    def test_nothing(self):
        assert NOTHING.is_none()
        assert Option.nothing() == NOTHING

    def test_some_none_is_not_empty(self):
        assert some(None).is_some()
        assert some(None) != NOTHING

    def test_from_nullable(self):
        assert from_nullable(None) == NOTHING
        assert from_nullable(0) == some(0)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            some(1)._value = 2

    def test_empty_cannot_hold_value(self):
        with pytest.raises(ValueError, match="cannot hold a value"):
            Option(5)

    def test_empty_constructor_equals_nothing(self):
        assert Option() == NOTHING

    def test_repr(self):
        assert repr(some("a")) == "Option.Some('a')"
        assert repr(NOTHING) == "Option.Nothing"


class TestMethods:
    def test_map(self):
        assert some(2).map(lambda x: x * 2) == some(4)
        assert NOTHING.map(lambda x: x * 2) == NOTHING

    def test_flat_map(self):
        assert some(2).flat_map(lambda x: some(x + 1)) == some(3)
        assert some(2).flat_map(lambda _: NOTHING) == NOTHING

    def test_filter(self):
        assert some(4).filter(lambda x: x % 2 == 0) == some(4)
        assert some(3).filter(lambda x: x % 2 == 0) == NOTHING

    def test_exists(self):
        assert some(4).exists(lambda x: x > 3)
        assert not NOTHING.exists(lambda _: True)

    def test_unwrap_or(self):
        assert some(1).unwrap_or(0) == 1
        assert NOTHING.unwrap_or(0) == 0

    def test_match(self):
        assert some(1).match(on_some=lambda v: f"Found: {v}", on_nothing=lambda: "none") == "Found: 1"
        assert NOTHING.match(on_some=lambda v: v, on_nothing=lambda: "none") == "none"


class TestOptionEq:
    @pytest.mark.parametrize(
        "x, y, expected",
        [
            (NOTHING, NOTHING, True),
            (some(1), some(1), True),
            (some(1), some(2), False),
            (some(1), NOTHING, False),
            (NOTHING, some(1), False),
        ],
    )
    def test_cases(self, x, y, expected):
        assert option_eq(EQ_STRICT).equals(x, y) is expected


class TestDescriptors:
    def test_monad(self):
        assert OPTION_MONAD.of(1) == some(1)
        assert OPTION_MONAD.chain(some(1), lambda x: some(x + 1)) == some(2)
        assert OPTION_MONAD.map(NOTHING, lambda x: x + 1) == NOTHING

    def test_alternative_is_lazy(self, explode):
        assert OPTION_ALTERNATIVE.alt(some(1), explode) == some(1)
        assert OPTION_ALTERNATIVE.alt(NOTHING, lambda: some(2)) == some(2)
        assert OPTION_ALTERNATIVE.zero() == NOTHING

    def test_foldable(self):
        assert OPTION_FOLDABLE.reduce(some(2), 10, lambda b, a: b + a) == 12
        assert OPTION_FOLDABLE.reduce(NOTHING, 10, lambda b, a: b + a) == 10

    def test_foldable_fold_map_skips_concat(self, explode):
        monoid = Monoid(concat=explode, empty="")
        assert OPTION_FOLDABLE.fold_map(monoid, some("x"), str.upper) == "X"
        assert OPTION_FOLDABLE.fold_map(monoid, NOTHING, str.upper) == ""
