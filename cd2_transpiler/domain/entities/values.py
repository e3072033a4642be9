"""Shape tagging for JSON values.

CD1 and CD2 disagree on the shape of several fields (a scalar in one place,
a list of weighted bins in another). Every value read from a document is
classified into a :class:`ValueShape` so transforms can dispatch on shape and
fail loudly on a mismatch instead of relying on duck-typed access.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import TypeAlias

from ..exceptions import MalformedInputError

JsonScalar: TypeAlias = str | int | float | bool
JsonValue: TypeAlias = (
    JsonScalar | None | Sequence["JsonValue"] | Mapping[str, "JsonValue"]
)
Number: TypeAlias = int | float


class ValueShape(StrEnum):
    NULL = "null"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def shape_of(value: object) -> ValueShape:
    match value:
        case None:
            return ValueShape.NULL
        case bool() | int() | float() | str():
            return ValueShape.SCALAR
        case Mapping():
            return ValueShape.MAPPING
        case Sequence():
            return ValueShape.SEQUENCE
        case _:
            raise MalformedInputError(
                f"Unsupported value of type {type(value).__name__}"
            )


def is_number(value: object) -> bool:
    # bool is an int subclass but never a valid stat value
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def expect_mapping(value: object, *, where: str) -> Mapping[str, JsonValue]:
    if shape_of(value) is not ValueShape.MAPPING:
        raise MalformedInputError(
            f"{where} must be an object, got {describe(value)}"
        )
    return value  # type: ignore[return-value]


def expect_number(value: object, *, where: str) -> Number:
    if not is_number(value):
        raise MalformedInputError(f"{where} must be a number, got {describe(value)}")
    return value  # type: ignore[return-value]


def expect_string(value: object, *, where: str) -> str:
    if not isinstance(value, str):
        raise MalformedInputError(f"{where} must be a string, got {describe(value)}")
    return value


def describe(value: object) -> str:
    shape = shape_of(value)
    if shape is ValueShape.SCALAR:
        return f"{type(value).__name__} {value!r}"
    return shape.value
