"""Value transforms referenced by name from the mapping table."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import TYPE_CHECKING

from ..entities.values import (
    ValueShape,
    expect_mapping,
    expect_number,
    shape_of,
)
from ..exceptions import MalformedInputError

if TYPE_CHECKING:
    from ..entities.values import JsonValue, Number

Transform = Callable[["JsonValue", str], "JsonValue"]


def identity(value: JsonValue, where: str) -> JsonValue:
    return value


def resistance_to_multiplier(value: JsonValue, where: str) -> JsonValue:
    """Turn a CD1 resistance ``r`` into the CD2 damage multiplier ``1 - r``.

    Accepts a single number or one number per player count.
    """
    match shape_of(value):
        case ValueShape.SEQUENCE:
            return [
                complement(expect_number(item, where=f"{where}[{index}]"))
                for index, item in enumerate(value)  # type: ignore[arg-type]
            ]
        case _:
            return complement(expect_number(value, where=where))


def complement(number: Number) -> Number:
    if isinstance(number, int):
        return 1 - number
    # repr() gives the shortest round-tripping form, so 1 - 0.7 stays 0.3
    return float(Decimal(1) - Decimal(repr(number)))


def flatten_bins(value: JsonValue, where: str) -> JsonValue:
    """Drop the ``range`` wrapper CD1 puts around weighted bins.

    ``[{"weight": 1, "range": {"min": 2, "max": 3}}]`` becomes
    ``[{"weight": 1, "min": 2, "max": 3}]``. Values that are not weighted
    bins pass through unchanged.
    """
    if shape_of(value) is not ValueShape.SEQUENCE or not value:
        return value
    first = value[0]  # type: ignore[index]
    if shape_of(first) is not ValueShape.MAPPING or "weight" not in first:  # type: ignore[operator]
        return value
    return [
        _flatten_bin(entry, f"{where}[{index}]")
        for index, entry in enumerate(value)  # type: ignore[arg-type]
    ]


def _flatten_bin(entry: JsonValue, where: str) -> dict[str, JsonValue]:
    bin_ = expect_mapping(entry, where=where)
    if "weight" not in bin_:
        raise MalformedInputError(f"{where} is missing its weight")
    if "range" in bin_:
        if "min" in bin_ or "max" in bin_:
            raise MalformedInputError(
                f"{where} has both a range and min/max bounds"
            )
        bounds = expect_mapping(bin_["range"], where=f"{where}.range")
    else:
        bounds = bin_
    missing = [key for key in ("min", "max") if key not in bounds]
    if missing:
        raise MalformedInputError(f"{where} is missing {', '.join(missing)}")
    return {"weight": bin_["weight"], "min": bounds["min"], "max": bounds["max"]}


TRANSFORMS: dict[str, Transform] = {
    "identity": identity,
    "resistance_to_multiplier": resistance_to_multiplier,
    "flatten_bins": flatten_bins,
}


def get_transform(name: str) -> Transform:
    try:
        return TRANSFORMS[name]
    except KeyError:
        raise ValueError(f"Unknown transform: {name}") from None
