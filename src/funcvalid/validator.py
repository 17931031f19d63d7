"""
Contains the abstract `Validator` base class. A validator is a callable which takes an input and returns either `None`
(the input is valid) or a `ValidationError` describing why it isn't.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, Optional

from typeguard import TypeCheckError, check_type

from .errors import FailureKind, ValidationError
from .types import InputT


class Validator(ABC, Generic[InputT]):
    """
    Base class of all validators. Subclasses are immutable value objects holding the parameters they got created with
    and implement `check`. Calling the validator first makes sure the input is an instance of `input_type` and then
    delegates to `check`. Validators never raise on bad input.
    """

    input_type: ClassVar[Any] = Any

    @property
    def name(self) -> str:
        """The rule name used in failure messages"""
        return type(self).__name__

    def __call__(self, inp: InputT) -> Optional[ValidationError]:
        if self.input_type is not Any:
            try:
                check_type(inp, self.input_type)
            except TypeCheckError as error:
                return ValidationError(self.name, FailureKind.TYPE, detail=str(error))
        return self.check(inp)

    @abstractmethod
    def check(self, inp: InputT) -> Optional[ValidationError]:
        """
        Validates an input which already is of the expected input type.
        """

    def fail(self, kind: FailureKind, detail: Optional[str] = None) -> ValidationError:
        """
        Creates a failure attributed to this validator.
        """
        return ValidationError(self.name, kind, detail=detail)

    def is_valid(self, inp: InputT) -> bool:
        """Returns True if the input passes this validator"""
        return self(inp) is None

    def ensure(self, inp: InputT) -> InputT:
        """
        Returns the input unchanged if it is valid, raises the `ValidationError` otherwise.
        """
        error = self(inp)
        if error is not None:
            raise error
        return inp

    # pylint: disable=import-outside-toplevel
    def __invert__(self) -> "Validator[InputT]":
        from .combinators import Not

        return Not(self)

    def __and__(self, other: Callable[[InputT], Optional[ValidationError]]) -> "Validator[InputT]":
        from .combinators import And

        return And(self, other)

    def __or__(self, other: Callable[[InputT], Optional[ValidationError]]) -> "Validator[InputT]":
        from .combinators import Or

        return Or(self, other)


@dataclass(frozen=True)
class FunctionValidator(Validator[InputT]):
    """
    Wraps a plain function with the validator signature so that it gets the methods and operators of `Validator`.
    """

    function: Callable[[InputT], Optional[ValidationError]]
    rule_name: Optional[str] = None

    @property
    def name(self) -> str:
        if self.rule_name is not None:
            return self.rule_name
        return getattr(self.function, "__name__", type(self).__name__)

    def check(self, inp: InputT) -> Optional[ValidationError]:
        return self.function(inp)


def as_validator(
    function: Callable[[InputT], Optional[ValidationError]], name: Optional[str] = None
) -> Validator[InputT]:
    """
    Turns any callable returning an optional `ValidationError` into a `Validator`. Validators are returned as is.
    """
    if isinstance(function, Validator):
        return function
    if not callable(function):
        raise TypeError(f"{function!r} is not callable")
    return FunctionValidator(function, name)
