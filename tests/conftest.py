import pytest


class CallCounter:
    """Wraps callables and counts how often any of them ran."""

    def __init__(self):
        self.count = 0

    def wrap(self, f):
        def wrapped(*args):
            self.count += 1
            return f(*args)

        return wrapped


@pytest.fixture
def counter() -> CallCounter:
    return CallCounter()


@pytest.fixture
def explode():
    """A function that must never be called."""

    def f(*_):
        raise AssertionError("should not have been called")

    return f
