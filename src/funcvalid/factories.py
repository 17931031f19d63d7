"""
Contains the validator factories. Each factory captures its parameters and returns an immutable validator, e.g.:
```
is_answer = Eq(42)
is_answer(42)  # -> None
is_answer(0)  # -> ValidationError("error: Eq")
```
"""
import logging
import re
from collections.abc import Sized
from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional

from frozendict import frozendict

from .errors import FailureKind, ValidationError
from .types import Comparable, InputT, KeyT, LengthUnit, ValueT
from .validator import Validator

_logger = logging.getLogger(__name__)


def _strict_equals(value: Any, other: Any) -> bool:
    """
    Equality without implicit coercion, i.e. `1 != 1.0` and `1 != True`.
    """
    return type(value) is type(other) and value == other


@dataclass(frozen=True)
class Eq(Validator[InputT]):
    """
    Valid iff the input equals `pattern` and is of exactly the same type.
    """

    pattern: InputT

    def check(self, inp: InputT) -> Optional[ValidationError]:
        if _strict_equals(inp, self.pattern):
            return None
        return self.fail(FailureKind.EQUALITY)


@dataclass(frozen=True)
class _Ordering(Validator[InputT]):
    pattern: Comparable

    def _compare(self, inp: Any) -> bool:
        raise NotImplementedError

    def check(self, inp: InputT) -> Optional[ValidationError]:
        try:
            if self._compare(inp):
                return None
        except TypeError as error:
            return self.fail(FailureKind.TYPE, detail=str(error))
        return self.fail(FailureKind.ORDER)


@dataclass(frozen=True)
class Lt(_Ordering[InputT]):
    """
    Valid iff the input is less than `pattern`.
    """

    def _compare(self, inp: Any) -> bool:
        return bool(inp < self.pattern)


@dataclass(frozen=True)
class Gt(_Ordering[InputT]):
    """
    Valid iff the input is greater than `pattern`.
    """

    def _compare(self, inp: Any) -> bool:
        return bool(inp > self.pattern)


@dataclass(frozen=True)
class Regexp(Validator[str]):
    """
    Valid iff the regular expression finds a match anywhere in the input, anchor the pattern if you need a full match.
    The pattern is compiled on each call (backed by the cache of the `re` module). An invalid pattern is reported as a
    `CONFIGURATION` failure on every call.
    """

    input_type = str
    pattern: str
    flags: int = 0

    def check(self, inp: str) -> Optional[ValidationError]:
        try:
            matched = re.search(self.pattern, inp, self.flags)
        except re.error as error:
            _logger.debug("Invalid regular expression %r: %s", self.pattern, error)
            return self.fail(FailureKind.CONFIGURATION, detail=f"invalid pattern {self.pattern!r}: {error}")
        if matched is not None:
            return None
        return self.fail(FailureKind.PATTERN)


@dataclass(frozen=True)
class RegexpRE(Validator[str]):
    """
    Same as `Regexp` but takes an already compiled pattern. The built-in catalog is made of these.
    """

    input_type = str
    pattern: re.Pattern
    rule_name: str = "Regexp"

    @property
    def name(self) -> str:
        return self.rule_name

    def check(self, inp: str) -> Optional[ValidationError]:
        if self.pattern.search(inp) is not None:
            return None
        return self.fail(FailureKind.PATTERN)


@dataclass(frozen=True)
class _Length(Validator[Sized]):
    input_type = Sized

    def _measure(self, inp: Sized, unit: LengthUnit) -> int:
        if unit is LengthUnit.BYTES and isinstance(inp, str):
            return len(inp.encode("utf-8"))
        return len(inp)


@dataclass(frozen=True)
class LenEq(_Length):
    """
    Valid iff the length of the input equals `length`.
    """

    length: int
    unit: LengthUnit = LengthUnit.CHARACTERS

    def check(self, inp: Sized) -> Optional[ValidationError]:
        if self._measure(inp, self.unit) == self.length:
            return None
        return self.fail(FailureKind.LENGTH)


@dataclass(frozen=True)
class LenBw(_Length):
    """
    Valid iff `minimum <= len(input) <= maximum`. An empty range (`minimum > maximum`) fails on every input.
    """

    minimum: int
    maximum: int
    unit: LengthUnit = LengthUnit.CHARACTERS

    def check(self, inp: Sized) -> Optional[ValidationError]:
        if self.minimum <= self._measure(inp, self.unit) <= self.maximum:
            return None
        return self.fail(FailureKind.LENGTH)


@dataclass(frozen=True)
class LenLt(_Length):
    """
    Valid iff the length of the input is less than `length`.
    """

    length: int
    unit: LengthUnit = LengthUnit.CHARACTERS

    def check(self, inp: Sized) -> Optional[ValidationError]:
        if self._measure(inp, self.unit) < self.length:
            return None
        return self.fail(FailureKind.LENGTH)


@dataclass(frozen=True)
class LenGt(_Length):
    """
    Valid iff the length of the input is greater than `length`.
    """

    length: int
    unit: LengthUnit = LengthUnit.CHARACTERS

    def check(self, inp: Sized) -> Optional[ValidationError]:
        if self._measure(inp, self.unit) > self.length:
            return None
        return self.fail(FailureKind.LENGTH)


@dataclass(frozen=True, init=False)
class OneOf(Validator[InputT]):
    """
    Valid iff the input equals one of the given elements (see `Eq` for what "equals" means).
    """

    elements: tuple[InputT, ...]

    def __init__(self, *elements: InputT):
        object.__setattr__(self, "elements", elements)

    def check(self, inp: InputT) -> Optional[ValidationError]:
        if any(_strict_equals(inp, element) for element in self.elements):
            return None
        return self.fail(FailureKind.MEMBERSHIP)


@dataclass(frozen=True)
class KeyIn(Validator[KeyT], Generic[KeyT, ValueT]):
    """
    Valid iff the input is a key of the mapping. The values are ignored.
    """

    mapping: Mapping[KeyT, ValueT]

    def __post_init__(self):
        if not isinstance(self.mapping, frozendict):
            object.__setattr__(self, "mapping", frozendict(self.mapping))

    def check(self, inp: KeyT) -> Optional[ValidationError]:
        try:
            if inp in self.mapping:
                return None
        except TypeError as error:
            return self.fail(FailureKind.TYPE, detail=str(error))
        return self.fail(FailureKind.MEMBERSHIP)


@dataclass(frozen=True)
class ValueIn(Validator[ValueT], Generic[KeyT, ValueT]):
    """
    Valid iff the input equals one of the values of the mapping. This is a linear scan.
    """

    mapping: Mapping[KeyT, ValueT]

    def __post_init__(self):
        if not isinstance(self.mapping, frozendict):
            object.__setattr__(self, "mapping", frozendict(self.mapping))

    def check(self, inp: ValueT) -> Optional[ValidationError]:
        if any(_strict_equals(inp, value) for value in self.mapping.values()):
            return None
        return self.fail(FailureKind.MEMBERSHIP)


@dataclass(frozen=True)
class ErrorValidator(Validator[Any]):
    """
    Always fails with the given message. This is how an invalid configuration is expressed as a validator, e.g. an
    unknown lookup key.
    """

    error_message: str

    def check(self, inp: Any) -> Optional[ValidationError]:
        return ValidationError(self.name, FailureKind.CONFIGURATION, message=f"error: {self.error_message}")
