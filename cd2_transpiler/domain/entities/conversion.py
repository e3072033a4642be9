"""Per-run conversion state.

A :class:`ConversionContext` is created for each conversion and threaded
through the translators. It applies the unknown-field policy and records
what was dropped so the caller can report it; the domain layer itself never
logs.

Example:
    >>> context = ConversionContext(strict=False)
    >>> context.unknown("Typo", location="document")
    >>> context.warnings
    ['Unsupported field: [Typo] in document. Dropping.']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..exceptions import UnknownFieldError

if TYPE_CHECKING:
    from .document import CD2Document


def _empty_str_list() -> list[str]:
    return []


def _empty_dropped() -> list[DroppedField]:
    return []


@dataclass(frozen=True, slots=True)
class DroppedField:
    name: str
    location: str
    reason: str


@dataclass(slots=True)
class ConversionContext:
    """Unknown-field policy plus the diagnostics collected during one run.

    Attributes:
        strict: Raise :class:`UnknownFieldError` on unrecognized fields instead
            of warning and dropping them.
        warnings: Non-fatal issues, in the order they were found.
        notes: Informational messages (synthesized mutators, elite fixes).
        dropped: Deprecated or unknown fields left out of the output.
    """

    strict: bool = False
    warnings: list[str] = field(default_factory=_empty_str_list)
    notes: list[str] = field(default_factory=_empty_str_list)
    dropped: list[DroppedField] = field(default_factory=_empty_dropped)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def note(self, message: str) -> None:
        self.notes.append(message)

    def drop(self, name: str, *, location: str, reason: str) -> None:
        self.dropped.append(DroppedField(name=name, location=location, reason=reason))

    def unknown(self, name: str, *, location: str) -> None:
        if self.strict:
            raise UnknownFieldError(name, location)
        self.warn(f"Unsupported field: [{name}] in {location}. Dropping.")
        self.drop(name, location=location, reason="unknown field")


@dataclass(slots=True)
class ConversionResult:
    document: CD2Document
    warnings: list[str] = field(default_factory=_empty_str_list)
    notes: list[str] = field(default_factory=_empty_str_list)
    dropped: list[DroppedField] = field(default_factory=_empty_dropped)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0
