"""Convert one CD1 file into a CD2 file.

The output file is written only once the whole document has been converted
and serialized, so a failed run never leaves a partial or stale result
behind.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import traceback
from typing import TYPE_CHECKING

from ..domain.services.converter import CD2Converter
from .models import ConvertResponse

if TYPE_CHECKING:
    from ..domain.entities.conversion import ConversionResult
    from ..domain.entities.document import CD1Document
    from .models import ConvertRequest, OutputOptions
    from .ports.repositories import (
        DocumentCodecPort,
        DocumentFilePort,
        MappingTableRepositoryPort,
    )
    from .ports.services import LoggerPort

@dataclass(slots=True)
class ConversionDependencies:
    logger: LoggerPort
    mapping_repository: MappingTableRepositoryPort
    document_files: DocumentFilePort
    codec: DocumentCodecPort


class ConversionUseCase:
    pass

    def __init__(self, dependencies: ConversionDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._mapping_repository = dependencies.mapping_repository
        self._document_files = dependencies.document_files
        self._codec = dependencies.codec
        self._converter: CD2Converter | None = None

    @property
    def converter(self) -> CD2Converter:
        if self._converter is None:
            self._converter = CD2Converter(self._mapping_repository.load())
        return self._converter

    def execute(self, request: ConvertRequest) -> ConvertResponse:
        response = ConvertResponse(source=request.source)
        try:
            target = self._document_files.target_path(
                request.source, request.target, request.output_marker
            )
            response.target = target
            self.logger.log_conversion_start(request.source, target)

            text = self._document_files.read_text(request.source)
            document = self._codec.parse(text)
            self.logger.debug(f"Parsed {len(document)} top-level fields")

            result = self.converter.convert(document, strict=request.strict)
            self._report(result)
            payload = self._codec.serialize(
                result.document, self._output_options(request.output, document)
            )

            self._document_files.write_text(target, payload)
        except Exception as exc:
            response.success = False
            response.error = str(exc)
            response.error_type = type(exc).__name__
            self.logger.error(f"{request.source}: {exc}")
            self.logger.debug(traceback.format_exc())
            return response

        response.document = result.document
        response.warnings = list(result.warnings)
        response.notes = list(result.notes)
        response.dropped = list(result.dropped)
        self.logger.log_conversion_complete(
            target,
            module_count=len(result.document.modules),
            mutator_count=len(result.document.mutators),
        )
        return response

    @staticmethod
    def _output_options(
        options: OutputOptions, document: CD1Document
    ) -> OutputOptions:
        if options.raw_multiline_description is not None:
            return options
        return replace(
            options, raw_multiline_description=document.literal_line_breaks
        )

    def _report(self, result: ConversionResult) -> None:
        for warning in result.warnings:
            self.logger.warning(warning)
        for dropped in result.dropped:
            self.logger.log_field_dropped(dropped)
        for note in result.notes:
            self.logger.verbose(note)
