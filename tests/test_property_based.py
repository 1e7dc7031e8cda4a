"""Property-based tests for the rule algebra laws."""

from hypothesis import given
from hypothesis import strategies as st

from vetted import (
    NOT_POSITIVE,
    Positive,
    ValidationRule,
    combine,
    error,
    many,
    ok,
)

# A small family of rules over ints, each either failing or transforming.
rules = st.sampled_from(
    [
        ValidationRule.create(ok),
        ValidationRule.create(lambda n: ok(n + 1)),
        ValidationRule.create(lambda n: ok(n * -2)),
        ValidationRule.create(lambda n: ok(n) if n % 2 == 0 else error(f"odd {n}")),
        ValidationRule.create(lambda n: error("always")),
        Positive(),
    ]
)


@given(rules, st.integers())
def test_map_identity(rule, n):
    """Mapping the identity function changes nothing."""
    assert rule.map(lambda x: x)(n) == rule(n)


@given(rules, rules, rules, st.integers())
def test_compose_associative(a, b, c, n):
    """Grouping of compose does not matter."""
    assert ((a >> b) >> c)(n) == (a >> (b >> c))(n)


@given(st.lists(st.integers()))
def test_many_accumulates_every_failure(values):
    """Error list keeps the input length and holds an error exactly where an element failed."""
    result = many(Positive())(values)
    failing = [i for i, v in enumerate(values) if v < 0]

    if not failing:
        assert result == ok(values)
        return

    assert result.is_invalid()
    assert len(result.error) == len(values)
    assert [i for i, e in enumerate(result.error) if e is not None] == failing
    assert all(result.error[i] == NOT_POSITIVE for i in failing)


@given(st.dictionaries(st.text(min_size=1, max_size=8), st.integers(), max_size=8))
def test_combine_reports_exactly_failing_keys(record):
    """Error dict keys are exactly the keys whose rule failed."""
    result = combine({key: Positive() for key in record})(record)
    failing = {key for key, v in record.items() if v < 0}

    if not failing:
        assert result == ok(record)
    else:
        assert result.is_invalid()
        assert set(result.error) == failing


@given(st.integers(), st.lists(st.booleans(), max_size=6))
def test_test_reports_failures_in_order(n, outcomes):
    """test() returns one error per failing check, in the order declared."""
    checks = [
        ValidationRule.create(lambda _, i=i, passes=passes: ok() if passes else error(i))
        for i, passes in enumerate(outcomes)
    ]
    result = ValidationRule.create(ok).test(*checks)(n)
    expected = [i for i, passes in enumerate(outcomes) if not passes]

    if expected:
        assert result == error(expected)
    else:
        assert result == ok(n)
