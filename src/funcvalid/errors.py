"""
Contains the failure descriptor returned by every validator.
"""
from enum import Enum
from typing import Iterable, Optional


class FailureKind(Enum):
    """
    Structured tag describing why a validation failed. Prefer dispatching on this instead of parsing messages.
    """

    EQUALITY = "equality"
    ORDER = "order"
    PATTERN = "pattern"
    LENGTH = "length"
    MEMBERSHIP = "membership"
    NEGATION = "negation"
    DISJUNCTION = "disjunction"
    CONFIGURATION = "configuration"
    TYPE = "type"
    MISSING = "missing"
    FORMAT = "format"
    FILE = "file"


class ValidationError(ValueError):
    """
    A failed validation. Validators return instances of this class instead of raising them; `None` means the input
    passed. If you prefer exceptions, use `Validator.ensure` or simply `raise` the returned object.
    """

    def __init__(
        self,
        rule: str,
        kind: FailureKind,
        detail: Optional[str] = None,
        message: Optional[str] = None,
        causes: Iterable["ValidationError"] = (),
    ):
        self.rule = rule
        self.kind = kind
        self.detail = detail
        self.causes: tuple[ValidationError, ...] = tuple(causes)
        self.message = message if message is not None else f"error: {rule}"
        super().__init__(self.message)

    def __str__(self):
        if self.detail is None:
            return self.message
        return f"{self.message} ({self.detail})"

    def __repr__(self):
        return f"ValidationError(rule={self.rule!r}, kind={self.kind}, detail={self.detail!r})"

    def with_detail(self, detail: str) -> "ValidationError":
        """
        Returns a copy of this failure with the given detail prepended to the existing one.
        """
        if self.detail is not None:
            detail = f"{detail}: {self.detail}"
        return ValidationError(self.rule, self.kind, detail=detail, message=self.message, causes=self.causes)
