"""
Contains helpers for composite objects which validate their own fields (see the `Validable` protocol), e.g.:
```
@dataclass
class LoginRequest:
    username: str
    password: str

    def validate(self) -> Optional[ValidationError]:
        return AnyErr(
            LenBw(1, 30)(self.username),
            LenBw(7, 32)(self.password),
        )
```
or equivalently, with `Fields`:
```
    _validator = Fields({"username": LenBw(1, 30), "password": LenBw(7, 32)})

    def validate(self) -> Optional[ValidationError]:
        return self._validator(self)
```
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from frozendict import frozendict

from .combinators import AnyErr
from .errors import FailureKind, ValidationError
from .types import Validable
from .validator import Validator, as_validator

_logger = logging.getLogger(__name__)


def _resolve(obj: Any, attribute_path: str) -> Any:
    """
    Follows the dotted `attribute_path` starting at `obj`. Raises an AttributeError naming the first path prefix which
    could not be resolved.
    """
    current_obj: Any = obj
    attribute_names = attribute_path.split(".")
    for index, attribute_name in enumerate(attribute_names):
        try:
            current_obj = getattr(current_obj, attribute_name)
        except AttributeError as error:
            raise AttributeError(f"{'.'.join(attribute_names[: index + 1])}: Not found") from error
    return current_obj


@dataclass(frozen=True, init=False)
class Fields(Validator[Any]):
    """
    Validates attributes of the input. The keys of the mapping are (dotted) attribute paths, the values are the
    validators to apply to the attribute values. All fields are validated, the first failure (in mapping order) is
    returned with the attribute path as detail. A missing attribute is a `MISSING` failure.
    """

    field_validators: frozendict[str, Validator[Any]]

    def __init__(self, field_validators: Mapping[str, Callable[[Any], Optional[ValidationError]]]):
        object.__setattr__(
            self,
            "field_validators",
            frozendict({path: as_validator(validator) for path, validator in field_validators.items()}),
        )

    def check(self, inp: Any) -> Optional[ValidationError]:
        return AnyErr(
            [self._validate_field(inp, path, validator) for path, validator in self.field_validators.items()]
        )

    def _validate_field(self, inp: Any, path: str, validator: Validator[Any]) -> Optional[ValidationError]:
        try:
            value = _resolve(inp, path)
        except AttributeError as error:
            _logger.debug("Field %s of %r could not be resolved: %s", path, inp, error)
            return self.fail(FailureKind.MISSING, detail=str(error))
        error = validator(value)
        if error is None:
            return None
        return error.with_detail(path)


def validate_all(*validables: Validable) -> Optional[ValidationError]:
    """
    Validates all given objects and returns the first failure (or None).
    """
    for validable in validables:
        if not isinstance(validable, Validable):
            raise TypeError(f"{validable!r} has no validate() method")
    return AnyErr([validable.validate() for validable in validables])
