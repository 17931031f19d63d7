"""
This package provides type-safe validators in functional style. A validator is simply a callable which takes an input
and returns `None` if the input is valid or a `ValidationError` otherwise. Factories like `Eq` or `LenBw` capture their
parameters and return such validators, combinators like `And`, `Or` and `Not` compose them:
```
username_ok = And(LenGt(1), LenLt(31), Regexp(r"^[a-z0-9_]+$"))
username_ok("john_doe")  # -> None
```
Pre-built validators for common string formats live in `funcvalid.builtin`.
"""

from .combinators import And, AnyErr, Not, Or
from .errors import FailureKind, ValidationError
from .factories import Eq, ErrorValidator, Gt, KeyIn, LenBw, LenEq, LenGt, LenLt, Lt, OneOf, Regexp, RegexpRE, ValueIn
from .fields import Fields, validate_all
from .types import LengthUnit, Validable, ValidatorFunction
from .validator import FunctionValidator, Validator, as_validator
