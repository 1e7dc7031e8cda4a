"""
Tests for vetted.memoize.
"""

import logging

from vetted import (
    NOT_A_NUMBER,
    IsNumber,
    Memoized,
    Positive,
    ValidationRule,
    error,
    memoize,
    ok,
)


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self, value, *meta):
        self.calls += 1
        return (value, meta)


class TestMemoize:
    def test_same_arguments_cached(self):
        fn = Counter()
        cached = memoize(fn)
        assert cached(1, "a") == (1, ("a",))
        assert cached(1, "a") == (1, ("a",))
        assert fn.calls == 1

    def test_single_slot(self):
        fn = Counter()
        cached = memoize(fn)
        cached(1)
        cached(2)
        cached(1)
        assert fn.calls == 3

    def test_meta_change_misses(self):
        fn = Counter()
        cached = memoize(fn)
        cached(1, "a")
        cached(1, "b")
        assert fn.calls == 2

    def test_meta_length_change_misses(self):
        fn = Counter()
        cached = memoize(fn)
        cached(1, "a")
        cached(1, "a", "b")
        assert fn.calls == 2

    def test_equal_values_hit_by_default(self):
        fn = Counter()
        cached = memoize(fn)
        cached([1, 2])
        cached([1, 2])
        assert fn.calls == 1

    def test_equal_values_of_different_types_miss(self):
        fn = Counter()
        cached = memoize(fn)
        cached(1)
        assert cached(True) == (True, ())
        assert cached(1.0) == (1.0, ())
        assert fn.calls == 3

    def test_memoized_rule_rejects_bool_after_int(self):
        rule = IsNumber().memoize()
        assert rule(1) == ok(1)
        assert rule(True) == error(NOT_A_NUMBER)

    def test_memoized_rule_sees_float_after_int(self):
        rule = ValidationRule.create(lambda v: ok(type(v).__name__)).memoize()
        assert rule(1) == ok("int")
        assert rule(1.0) == ok("float")

    def test_custom_equality(self):
        fn = Counter()
        cached = memoize(fn, equality=lambda left, right: left["id"] == right["id"])
        cached({"id": 1, "name": "a"})
        assert cached({"id": 1, "name": "b"}) == ({"id": 1, "name": "a"}, ())
        assert fn.calls == 1

    def test_identity_equality(self):
        fn = Counter()
        cached = memoize(fn, equality=lambda left, right: left is right)
        cached([1])
        cached([1])
        assert fn.calls == 2

    def test_meta_equalities_by_position(self):
        fn = Counter()
        cached = memoize(fn, meta_equalities=[None, lambda left, right: True])
        cached(1, "locale", "request-1")
        cached(1, "locale", "request-2")
        assert fn.calls == 1
        cached(1, "other-locale", "request-2")
        assert fn.calls == 2

    def test_clear(self):
        fn = Counter()
        cached = memoize(fn)
        cached(1)
        cached.clear()
        cached(1)
        assert fn.calls == 2


class TestFork:
    def test_fork_has_its_own_slot(self):
        fn = Counter()
        first = memoize(fn)
        second = first.fork()
        first(1)
        second(2)
        first(1)
        second(2)
        assert fn.calls == 2

    def test_fork_keeps_configuration(self):
        fn = Counter()
        equality = lambda left, right: True  # noqa: E731
        forked = memoize(fn, equality=equality).fork()
        assert isinstance(forked, Memoized)
        assert forked.fn is fn
        assert forked.equality is equality
        forked(1)
        forked(2)
        assert fn.calls == 1


class TestDecorator:
    def test_bare(self):
        @memoize
        def double(n):
            return n * 2

        assert isinstance(double, Memoized)
        assert double(2) == 4
        assert double.__name__ == "double"

    def test_with_arguments(self):
        calls = []

        @memoize(equality=lambda left, right: left % 10 == right % 10)
        def last_digit(n):
            calls.append(n)
            return n % 10

        assert last_digit(13) == 3
        assert last_digit(23) == 3
        assert calls == [13]

    def test_memoized_rule_function(self):
        cached = memoize(Positive().fn)
        assert cached(4) == ok(4)
        assert cached(4) == ok(4)


class TestLogging:
    def test_hits_and_misses_logged(self, caplog):
        cached = memoize(lambda n: n)
        with caplog.at_level(logging.DEBUG, logger="vetted.memoize"):
            cached(1)
            cached(1)
        messages = [record.getMessage() for record in caplog.records]
        assert any("miss" in m for m in messages)
        assert any("hit" in m for m in messages)
