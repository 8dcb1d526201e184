"""
fpstd Combinators Example

Walks through the Option, Monad, Boolean and Monoid helpers and prints what
each call returns.

Run with:
    pip install -e .
    python examples/combinators_example.py
"""

from fpstd import boolean, option as O
from fpstd.core import (
    EQ_STRICT,
    IDENTITY_MONAD,
    LIST_FOLDABLE,
    NOTHING,
    STRING_MONOID,
    THUNK_MONAD,
    Thunk,
    some,
)
from fpstd.exceptions import UnwrapError
from fpstd.logger import setup_logger
from fpstd.monad import if_m
from fpstd.monoid import to_monoid


def option_examples():
    """Demonstrate the Option helpers."""
    print("=" * 60)
    print("Option Helpers")
    print("=" * 60)

    print(f"unsafe_unwrap(some(5)): {O.unsafe_unwrap(some(5))}")  # 5
    try:
        O.unsafe_expect("no price configured")(NOTHING)
    except UnwrapError as e:
        print(f"unsafe_expect on NOTHING raised: {e}")

    toggle = O.invert(EQ_STRICT)("dark")
    print(f"toggle(NOTHING): {toggle(NOTHING)}")              # Option.Some('dark')
    print(f"toggle(some('dark')): {toggle(some('dark'))}")    # Option.Nothing
    print(f"toggle(some('light')): {toggle(some('light'))}")  # Option.Some('dark')

    print(f"to_monoid(NOTHING): {O.to_monoid(STRING_MONOID)(NOTHING)!r}")  # ''

    def lookup(key: str):
        print(f"  looking up {key!r}")
        return some(key.upper())

    print(f"mempty_when(True): {O.mempty_when(True)(lambda: lookup('a'))}")
    print(f"mempty_when(False): {O.mempty_when(False)(lambda: lookup('b'))}")

    person = {"name": "Hodor", "age": 40}
    print(f"pure_if(age == 40): {O.pure_if(person['age'] == 40)(lambda: person['name'])}")

    config = {"port": "8080"}
    from_env = lambda key: NOTHING  # noqa: E731
    from_config = lambda key: some(config[key]) if key in config else NOTHING  # noqa: E731
    print(f"alt_all_by(port): {O.alt_all_by([from_env, from_config])('port')}")  # Option.Some('8080')


def monad_examples():
    """Demonstrate branching inside a monadic context."""
    print("\n" + "=" * 60)
    print("Monadic Branching")
    print("=" * 60)

    print(f"if_m(identity): {if_m(IDENTITY_MONAD)(True)('foo')('bar')}")

    def action(name: str) -> Thunk:
        def run():
            print(f"  running {name}")
            return name
        return Thunk(run)

    deferred = if_m(THUNK_MONAD)(Thunk(lambda: False))(action("then"))(action("else"))
    print(f"Built action, evaluated? {deferred.is_evaluated()}")  # False
    print(f"Result: {deferred.force()}")  # only 'else' runs


def monoid_and_boolean_examples():
    """Demonstrate the generic Monoid and Boolean helpers."""
    print("\n" + "=" * 60)
    print("Monoid & Boolean Helpers")
    print("=" * 60)

    print(f"to_monoid(list): {to_monoid(LIST_FOLDABLE)(STRING_MONOID)(['a', 'b', 'c'])}")
    is_valid_port = boolean.all_pass([lambda p: p > 0, lambda p: p < 65536])
    print(f"all_pass(8080): {is_valid_port(8080)}")  # True
    print(f"xor(True)(True): {boolean.xor(True)(True)}")  # False


def main():
    """Run all examples."""
    setup_logger(level="DEBUG")  # show the debug record from unsafe_expect
    option_examples()
    monad_examples()
    monoid_and_boolean_examples()


if __name__ == "__main__":
    main()
