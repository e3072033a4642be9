"""CD1 → CD2 conversion engine.

This is a pure domain service: it takes an in-memory :class:`CD1Document`
and returns a :class:`ConversionResult`, with no file access and no logging.
Every call owns its own :class:`ConversionContext`, so one converter can be
reused for any number of documents.

Pipeline:
    classify fields → translate stats, enemies and mutators → assemble
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...constants import SourceFields
from ..entities.conversion import ConversionContext, ConversionResult
from .assembler import TopLevelAssembler
from .enemy_translator import EnemyDescriptorTranslator
from .field_classifier import Outcome, classify_document
from .mutator_synthesizer import MutatorSynthesizer
from .stat_translator import StatModuleTranslator

if TYPE_CHECKING:
    from ..entities.document import CD1Document
    from ..entities.mapping import MappingTable


class CD2Converter:
    def __init__(self, table: MappingTable) -> None:
        super().__init__()
        self.table = table
        self._stat_translator = StatModuleTranslator(table)
        self._enemy_translator = EnemyDescriptorTranslator(
            table, self._stat_translator
        )
        self._mutator_synthesizer = MutatorSynthesizer(table)
        self._assembler = TopLevelAssembler(table)

    def convert(
        self, document: CD1Document, *, strict: bool = False
    ) -> ConversionResult:
        """Convert a CD1 document.

        Args:
            document: Parsed CD1 input.
            strict: Fail on unrecognized fields instead of dropping them.

        Returns:
            ConversionResult with the assembled document and diagnostics.

        Raises:
            MalformedInputError: A consumed field has an unexpected shape.
            MissingRequiredFieldError: A mandatory field is absent.
            UnsupportedMultilineNameError: The name spans several lines.
            UnknownFieldError: Strict mode and an unrecognized field.
        """
        context = ConversionContext(strict=strict)
        classified = classify_document(document, self.table)
        for item in classified:
            if item.outcome is Outcome.DROP and item.mapping is not None:
                context.drop(
                    item.name,
                    location="document",
                    reason=item.mapping.reason or "deprecated",
                )
            elif item.outcome is Outcome.UNKNOWN:
                context.unknown(item.name, location="document")

        stat_modules = self._stat_translator.translate(
            document.get(SourceFields.PAWN_STATS),
            context,
            location="document",
            pregrouped=document.fields,
        )
        enemies = None
        if document.get(SourceFields.ENEMY_DESCRIPTORS) is not None:
            enemies = self._enemy_translator.translate(
                document.get(SourceFields.ENEMY_DESCRIPTORS), context
            )
        mutators = self._mutator_synthesizer.synthesize(document, context)

        cd2 = self._assembler.assemble(
            document,
            classified,
            context,
            stat_modules=stat_modules,
            enemies=enemies,
            mutators=mutators,
        )
        return ConversionResult(
            document=cd2,
            warnings=list(context.warnings),
            notes=list(context.notes),
            dropped=list(context.dropped),
        )
