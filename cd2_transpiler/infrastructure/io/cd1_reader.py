"""CD1 document reader.

CD1 files are JSON with one relaxation: the game accepts literal line
breaks inside strings, which is how multiline descriptions are written.
Such files only parse with ``strict=False``, and the document remembers
whether its Description was written that way so the output can match.
Duplicate keys and non-finite numbers are rejected since there is no
defined way to convert them.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ...constants import SourceFields
from ...domain.entities.document import CD1Document
from ...domain.entities.values import describe
from ...domain.exceptions import MalformedInputError

if TYPE_CHECKING:
    from ...domain.entities.values import JsonValue

_BOM = "\ufeff"


def _reject_duplicates(pairs: list[tuple[str, JsonValue]]) -> dict[str, JsonValue]:
    result: dict[str, JsonValue] = {}
    for key, value in pairs:
        if key in result:
            raise MalformedInputError(f"Duplicate key [{key}]")
        result[key] = value
    return result


def _reject_constant(name: str) -> float:
    raise MalformedInputError(f"Non-finite number {name} is not valid JSON")


def _load(text: str, *, strict: bool) -> JsonValue:
    return json.loads(
        text,
        strict=strict,
        object_pairs_hook=_reject_duplicates,
        parse_constant=_reject_constant,
    )


def _has_line_break(value: JsonValue) -> bool:
    return isinstance(value, str) and ("\n" in value or "\r" in value)


def parse_cd1(text: str) -> CD1Document:
    text = text.removeprefix(_BOM)
    try:
        try:
            data = _load(text, strict=True)
            control_characters = False
        except json.JSONDecodeError:
            data = _load(text, strict=False)
            control_characters = True
    except json.JSONDecodeError as exc:
        raise MalformedInputError(
            f"The JSON parser couldn't parse the file. Is it a proper JSON? ({exc})"
        ) from exc
    if not isinstance(data, dict):
        raise MalformedInputError(
            f"A CD1 document must be a JSON object, got {describe(data)}"
        )
    return CD1Document.from_mapping(
        data,
        literal_line_breaks=control_characters
        and _has_line_break(data.get(SourceFields.DESCRIPTION)),
    )
