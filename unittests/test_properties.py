from typing import Optional

from hypothesis import assume, given
from hypothesis import strategies as st

from funcvalid import And, Eq, FailureKind, Gt, LenBw, LengthUnit, Lt, Not, OneOf, Or, ValidationError

_scalars = st.one_of(st.integers(), st.text(max_size=10), st.booleans(), st.floats(allow_nan=False))


def _passes(error: Optional[ValidationError]) -> bool:
    return error is None


class TestEqualityProperties:
    @given(_scalars)
    def test_equal_to_itself(self, value):
        assert Eq(value)(value) is None

    @given(_scalars, _scalars)
    def test_different_values_fail(self, value, other):
        assume(type(value) is not type(other) or value != other)
        error = Eq(value)(other)
        assert error is not None
        assert error.kind == FailureKind.EQUALITY

    @given(st.lists(st.integers(), max_size=5), st.integers())
    def test_one_of_is_membership(self, elements, value):
        assert _passes(OneOf(*elements)(value)) == (value in elements)


class TestOrderingProperties:
    @given(st.integers(), st.integers())
    def test_lt_follows_less_than(self, pattern, value):
        assert _passes(Lt(pattern)(value)) == (value < pattern)

    @given(st.integers(), st.integers())
    def test_gt_follows_greater_than(self, pattern, value):
        assert _passes(Gt(pattern)(value)) == (value > pattern)

    @given(st.text(max_size=5), st.text(max_size=5))
    def test_strings_are_ordered_lexicographically(self, pattern, value):
        assert _passes(Lt(pattern)(value)) == (value < pattern)


class TestLengthProperties:
    @given(st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=20), st.text(max_size=25))
    def test_between_is_inclusive(self, minimum, span, value):
        validator = LenBw(minimum, minimum + span)
        assert _passes(validator(value)) == (minimum <= len(value) <= minimum + span)

    @given(st.text(max_size=25))
    def test_bytes_are_never_fewer_than_characters(self, value):
        length = len(value)
        assert LenBw(length, length)(value) is None
        assert _passes(LenBw(0, length, LengthUnit.BYTES)(value)) == (len(value.encode("utf-8")) == length)


class TestCombinatorProperties:
    @given(st.integers(), st.integers())
    def test_double_negation(self, pattern, value):
        assert _passes(Not(Not(Eq(pattern)))(value)) == _passes(Eq(pattern)(value))

    @given(st.lists(st.integers(), max_size=5), st.integers())
    def test_and_is_all(self, patterns, value):
        validators = [Not(Eq(pattern)) for pattern in patterns]
        assert _passes(And(*validators)(value)) == all(pattern != value for pattern in patterns)

    @given(st.lists(st.integers(), max_size=5), st.integers())
    def test_or_is_any(self, patterns, value):
        validators = [Eq(pattern) for pattern in patterns]
        error = Or(*validators)(value)
        assert _passes(error) == any(pattern == value for pattern in patterns)
        if error is not None:
            assert len(error.causes) == len(patterns)
