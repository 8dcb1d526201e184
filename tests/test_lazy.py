from fpstd.core import Thunk
from fpstd.lazy import execute, lazy, memoize


class TestLazy:
    def test_lazy_returns_value(self):
        assert lazy(3)() == 3

    def test_memoize_runs_once(self, counter):
        thunk = memoize(counter.wrap(lambda: "x"))
        assert thunk() == "x"
        assert thunk() == "x"
        assert counter.count == 1

    def test_memoize_keeps_existing_thunk(self):
        thunk = Thunk(lambda: 1)
        assert memoize(thunk) is thunk

    def test_execute(self):
        assert execute(lambda: 5) == 5
        assert execute(Thunk(lambda: 6)) == 6
