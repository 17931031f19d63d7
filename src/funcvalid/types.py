"""
Contains the types used in the validation library
"""
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol, TypeAlias, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from .errors import ValidationError


class Comparable(Protocol):
    """
    A protocol that defines the `<` operator. Together with `>` this is everything `Lt` and `Gt` need.
    """

    def __lt__(self, other: Any) -> bool:
        ...


@runtime_checkable
class Validable(Protocol):
    """
    A protocol for composite objects which know how to validate their own fields.
    The usual implementation calls several validators on its attributes and aggregates the results using `AnyErr`.
    """

    def validate(self) -> "Optional[ValidationError]":
        ...


class LengthUnit(Enum):
    """
    Determines what the length validators count.
    """

    CHARACTERS = "characters"
    """`len()` of the input, i.e. code points for `str` and elements for any other sized object"""
    BYTES = "bytes"
    """the number of bytes of the UTF-8 encoded input if it is a `str`, `len()` otherwise"""


InputT = TypeVar("InputT")
KeyT = TypeVar("KeyT")
ValueT = TypeVar("ValueT")
ValidatorFunction: TypeAlias = Callable[[InputT], "Optional[ValidationError]"]
