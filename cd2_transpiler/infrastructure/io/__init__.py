"""File input/output for CD1 and CD2 documents."""

from .cd1_reader import parse_cd1
from .cd2_serializer import document_to_payload, serialize
from .document_files import DocumentFileStore, derive_target_path
from .exceptions import (
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    DataWriteError,
    TranspilerInfrastructureError,
)
from .json_codec import JsonDocumentCodec

__all__ = [
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "DataWriteError",
    "DocumentFileStore",
    "JsonDocumentCodec",
    "TranspilerInfrastructureError",
    "derive_target_path",
    "document_to_payload",
    "parse_cd1",
    "serialize",
]
