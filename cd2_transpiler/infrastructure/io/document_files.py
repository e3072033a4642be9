from __future__ import annotations

from pathlib import Path

from ...constants import Defaults
from .exceptions import DataParseError, DataSourceNotFoundError, DataWriteError


def derive_target_path(
    source: Path, target: Path | None = None, marker: str = Defaults.OUTPUT_MARKER
) -> Path:
    """Output path for ``source``.

    An explicit ``target`` always wins. Otherwise the output sits next to
    the input with ``marker`` inserted before the suffix:
    ``Hazard6.json`` becomes ``Hazard6.cd2.json`` and ``Hazard6`` becomes
    ``Hazard6.cd2``.
    """
    if target is not None:
        return target
    return source.with_name(f"{source.stem}.{marker}{source.suffix}")


class DocumentFileStore:
    pass

    def __init__(self, encoding: str = "utf-8") -> None:
        super().__init__()
        self.encoding = encoding

    def target_path(
        self, source: Path, target: Path | None, marker: str = Defaults.OUTPUT_MARKER
    ) -> Path:
        resolved = derive_target_path(source, target, marker)
        if resolved.resolve() == source.resolve():
            raise DataWriteError(f"Refusing to overwrite the input file {source}")
        return resolved

    def read_text(self, path: Path) -> str:
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        try:
            return path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}, expected {self.encoding}: {e}"
            ) from e
        except OSError as e:
            raise DataSourceNotFoundError(f"Could not read {path}: {e}") from e

    def write_text(self, path: Path, text: str) -> Path:
        if path.is_dir():
            raise DataWriteError(f"Output path is a directory: {path}")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # newline="" keeps the serializer's line breaks on every platform
            with path.open("w", encoding=self.encoding, newline="") as handle:
                handle.write(text)
        except OSError as e:
            raise DataWriteError(f"Failed to write {path}: {e}") from e
        return path
