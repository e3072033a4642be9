"""CD2 document serializer.

Pretty and compact output carry the same data; only whitespace differs.
Keys keep the assembled order, which is already deterministic, so the
output is byte-identical across runs. Numbers are written from the parsed
``int``/``float`` values and are never reformatted.
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING

from ...constants import Defaults, Modules, SourceFields
from ...domain.services.mutator_synthesizer import render_modules

if TYPE_CHECKING:
    from ...domain.entities.document import CD2Document
    from ...domain.entities.values import JsonValue

COMPACT_SEPARATORS = (",", ":")
PRETTY_KEY_SEPARATOR = ": "

# a \n or \r escape that is not itself an escaped backslash followed by n/r
_LINE_BREAK_ESCAPE = re.compile(r"(?<!\\)((?:\\\\)*)\\([nr])")
_LINE_BREAKS = {"n": "\n", "r": "\r"}


def document_to_payload(document: CD2Document) -> dict[str, JsonValue]:
    payload: dict[str, JsonValue] = dict(render_modules(document))
    payload.update(document.extensions)
    return payload


def serialize(
    document: CD2Document,
    *,
    pretty: bool = Defaults.PRETTY_PRINT,
    indent: int = Defaults.INDENT,
    raw_multiline_description: bool = Defaults.RAW_MULTILINE_DESCRIPTION,
) -> str:
    payload = document_to_payload(document)
    if pretty:
        text = json.dumps(payload, indent=indent, ensure_ascii=False, allow_nan=False)
    else:
        text = json.dumps(
            payload,
            separators=COMPACT_SEPARATORS,
            ensure_ascii=False,
            allow_nan=False,
        )
    if raw_multiline_description:
        key_separator = PRETTY_KEY_SEPARATOR if pretty else COMPACT_SEPARATORS[1]
        text = _restore_multiline_description(text, document, key_separator)
    return text


def _restore_multiline_description(
    text: str, document: CD2Document, key_separator: str
) -> str:
    """Write the description's line breaks as literal line breaks.

    This is the layout the game itself uses for multiline descriptions. The
    result is only readable by lenient JSON parsers.
    """
    settings = document.modules.get(Modules.DIFFICULTY_SETTING, {})
    description = settings.get(SourceFields.DESCRIPTION)
    if not isinstance(description, str) or not (
        "\n" in description or "\r" in description
    ):
        return text
    escaped = json.dumps(description, ensure_ascii=False)
    raw = _LINE_BREAK_ESCAPE.sub(
        lambda match: match.group(1) + _LINE_BREAKS[match.group(2)], escaped
    )
    key = json.dumps(SourceFields.DESCRIPTION)
    return text.replace(
        f"{key}{key_separator}{escaped}", f"{key}{key_separator}{raw}", 1
    )
