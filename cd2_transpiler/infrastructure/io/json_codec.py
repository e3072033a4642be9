"""JSON codec adapter.

Implements the application's ``DocumentCodecPort`` on top of the CD1 reader
and the CD2 serializer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .cd1_reader import parse_cd1
from .cd2_serializer import serialize

if TYPE_CHECKING:
    from ...application.models import OutputOptions
    from ...domain.entities.document import CD1Document, CD2Document


class JsonDocumentCodec:
    pass

    def parse(self, text: str) -> CD1Document:
        return parse_cd1(text)

    def serialize(self, document: CD2Document, options: OutputOptions) -> str:
        return serialize(
            document,
            pretty=options.pretty_print,
            indent=options.indent,
            raw_multiline_description=bool(options.raw_multiline_description),
        )
