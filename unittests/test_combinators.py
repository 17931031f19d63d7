from typing import Any, Optional

import pytest

from funcvalid import And, AnyErr, Eq, FailureKind, LenGt, LenLt, Not, Or, Regexp, ValidationError

_SENTINEL = ValidationError("Sentinel", FailureKind.PATTERN)


def _always_fail(inp: Any) -> Optional[ValidationError]:
    return _SENTINEL


class _Recorder:
    """Validator function which remembers its inputs"""

    def __init__(self, result: Optional[ValidationError] = None):
        self.calls: list[Any] = []
        self.result = result

    def __call__(self, inp: Any) -> Optional[ValidationError]:
        self.calls.append(inp)
        return self.result


class TestNot:
    def test_negation(self):
        assert Not(Eq(1))(2) is None
        error = Not(Eq(1))(1)
        assert error is not None
        assert error.kind == FailureKind.NEGATION
        assert str(error) == "error: Not"

    def test_double_negation(self):
        validator = Not(Not(Eq(1)))
        assert validator(1) is None
        assert validator(2) is not None

    def test_operator(self):
        assert (~Eq(1))(2) is None
        assert (~Eq(1))(1) is not None


class TestAnd:
    @pytest.mark.parametrize(
        "inp, failing_rule",
        [
            pytest.param("test", None),
            pytest.param("testelek", "LenLt"),
            pytest.param("t", "LenGt"),
        ],
    )
    def test_length_range(self, inp: str, failing_rule: Optional[str]):
        error = And(LenGt(1), LenLt(5))(inp)
        if failing_rule is None:
            assert error is None
        else:
            assert error is not None
            assert error.rule == failing_rule

    def test_first_failure_is_returned_verbatim_and_short_circuits(self):
        recorder = _Recorder()
        assert And(_always_fail, recorder)("x") is _SENTINEL
        assert recorder.calls == []

    def test_runs_left_to_right(self):
        first = _Recorder()
        second = _Recorder(_SENTINEL)
        assert And(first, second)("x") is _SENTINEL
        assert first.calls == ["x"]
        assert second.calls == ["x"]

    def test_empty_is_valid(self):
        assert And()("anything") is None

    def test_operator(self):
        assert (LenGt(1) & LenLt(5))("test") is None
        assert (LenGt(1) & LenLt(5))("testelek") is not None

    def test_non_callable(self):
        with pytest.raises(TypeError):
            And(5)  # type:ignore[arg-type]


class TestOr:
    def test_any_passes(self):
        assert Or(Regexp("a.*"), Regexp("b.*"))("alma") is None

    def test_all_fail(self):
        validator = Or(Regexp("d.*"), Regexp("c.*"))
        error = validator("beta")
        assert error is not None
        assert error.kind == FailureKind.DISJUNCTION
        assert str(error) == "error: Or"

    def test_sub_failures_are_kept_as_causes(self):
        error = Or(Eq(1), _always_fail)(2)
        assert error is not None
        assert len(error.causes) == 2
        assert error.causes[0].rule == "Eq"
        assert error.causes[1] is _SENTINEL

    def test_short_circuits_on_first_success(self):
        recorder = _Recorder(_SENTINEL)
        assert Or(Eq(1), recorder)(1) is None
        assert recorder.calls == []

    def test_empty_is_invalid(self):
        assert Or()("anything") is not None

    def test_operator(self):
        assert (Eq(1) | Eq(2))(2) is None
        assert (Eq(1) | Eq(2))(3) is not None


class TestAnyErr:
    def test_all_none(self):
        assert AnyErr(None, None) is None

    def test_no_arguments(self):
        assert AnyErr() is None

    def test_first_failure(self):
        first = ValidationError("First", FailureKind.LENGTH)
        second = ValidationError("Second", FailureKind.LENGTH)
        assert AnyErr(None, first, second) is first

    def test_single_failure(self):
        assert AnyErr(_SENTINEL) is _SENTINEL

    def test_iterable(self):
        assert AnyErr([None, _SENTINEL]) is _SENTINEL
        assert AnyErr(validator("x") for validator in (Eq("x"), LenGt(0))) is None

    def test_aggregates_independent_fields(self):
        username, password = "john", "short"
        error = AnyErr(
            And(LenGt(0), LenLt(31))(username),
            And(LenGt(6), LenLt(33))(password),
        )
        assert error is not None
        assert error.rule == "LenGt"

    def test_single_plain_exception(self):
        custom = ValueError("custom")
        assert AnyErr(custom) is custom  # type:ignore[arg-type]

    def test_plain_exception_from_function_validator(self):
        def reject_everything(inp: Any) -> Any:
            return KeyError(inp)

        error = AnyErr(And(reject_everything)("x"))
        assert isinstance(error, KeyError)
