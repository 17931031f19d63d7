"""
Contains the combinators which compose validators into new validators and the `AnyErr` helper.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .errors import FailureKind, ValidationError
from .types import InputT
from .validator import Validator, as_validator


@dataclass(frozen=True)
class Not(Validator[InputT]):
    """
    Valid iff the wrapped validator fails.
    """

    validator: Callable[[InputT], Optional[ValidationError]]

    def __post_init__(self):
        object.__setattr__(self, "validator", as_validator(self.validator))

    def check(self, inp: InputT) -> Optional[ValidationError]:
        if self.validator(inp) is not None:
            return None
        return self.fail(FailureKind.NEGATION)


@dataclass(frozen=True, init=False)
class And(Validator[InputT]):
    """
    Valid iff all validators pass. The validators run from left to right and the first failure is returned as is.
    Without any validators every input is valid.
    """

    validators: tuple[Validator[InputT], ...]

    def __init__(self, *validators: Callable[[InputT], Optional[ValidationError]]):
        object.__setattr__(self, "validators", tuple(as_validator(validator) for validator in validators))

    def check(self, inp: InputT) -> Optional[ValidationError]:
        for validator in self.validators:
            error = validator(inp)
            if error is not None:
                return error
        return None


@dataclass(frozen=True, init=False)
class Or(Validator[InputT]):
    """
    Valid iff at least one validator passes. The validators run from left to right until the first one passes.
    If all of them fail, a single "error: Or" failure is returned; the individual failures are available as its
    `causes`. Without any validators every input is invalid.
    """

    validators: tuple[Validator[InputT], ...]

    def __init__(self, *validators: Callable[[InputT], Optional[ValidationError]]):
        object.__setattr__(self, "validators", tuple(as_validator(validator) for validator in validators))

    def check(self, inp: InputT) -> Optional[ValidationError]:
        causes: list[ValidationError] = []
        for validator in self.validators:
            error = validator(inp)
            if error is None:
                return None
            causes.append(error)
        return ValidationError(self.name, FailureKind.DISJUNCTION, causes=causes)


# pylint: disable=invalid-name
def AnyErr(*errors: Optional[ValidationError] | Iterable[Optional[ValidationError]]) -> Optional[ValidationError]:
    """
    Returns the first failure which is not None or None if there is none. Use this to aggregate the validation results
    of the independent fields of a composite object, e.g.:
    ```
    def validate(self):
        return AnyErr(
            LenBw(1, 30)(self.username),
            LenBw(7, 32)(self.password),
        )
    ```
    A single iterable (e.g. a generator) is accepted as well and consumed lazily.
    """
    candidates: Iterable[Optional[ValidationError]]
    if len(errors) == 1 and not isinstance(errors[0], BaseException) and errors[0] is not None:
        candidates = errors[0]  # type:ignore[assignment]
    else:
        candidates = errors  # type:ignore[assignment]
    for error in candidates:
        if error is not None:
            return error
    return None
