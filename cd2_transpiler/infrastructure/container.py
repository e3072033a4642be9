from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.conversion_use_case import (
    ConversionDependencies,
    ConversionUseCase,
)
from .io.document_files import DocumentFileStore
from .io.json_codec import JsonDocumentCodec
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.mapping_table_repository import MappingTableRepository

if TYPE_CHECKING:
    from pathlib import Path

    from ..application.ports.repositories import (
        DocumentCodecPort,
        DocumentFilePort,
        MappingTableRepositoryPort,
    )
    from ..application.ports.services import LoggerPort


class DependencyContainer:
    """Composition root.

    Every instance builds its own collaborators on first use and keeps them;
    two containers never share a mapping table or a logger.
    """

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        mapping_table_path: Path | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.mapping_table_path = mapping_table_path
        self._logger_instance: LoggerPort | None = None
        self._mapping_repository_instance: MappingTableRepositoryPort | None = None
        self._document_files_instance: DocumentFilePort | None = None
        self._codec_instance: DocumentCodecPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_mapping_repository(self) -> MappingTableRepositoryPort:
        if self._mapping_repository_instance is None:
            self._mapping_repository_instance = MappingTableRepository(
                self.mapping_table_path
            )
        return self._mapping_repository_instance

    def create_document_files(self) -> DocumentFilePort:
        if self._document_files_instance is None:
            self._document_files_instance = DocumentFileStore()
        return self._document_files_instance

    def create_codec(self) -> DocumentCodecPort:
        if self._codec_instance is None:
            self._codec_instance = JsonDocumentCodec()
        return self._codec_instance

    def create_conversion_use_case(self) -> ConversionUseCase:
        return ConversionUseCase(
            ConversionDependencies(
                logger=self.create_logger(),
                mapping_repository=self.create_mapping_repository(),
                document_files=self.create_document_files(),
                codec=self.create_codec(),
            )
        )

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._mapping_repository_instance = None
        self._document_files_instance = None
        self._codec_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_document_files(self, document_files: DocumentFilePort) -> None:
        self._document_files_instance = document_files


def create_default_container(verbose: int = 0) -> DependencyContainer:
    return DependencyContainer(verbose=verbose)


def create_test_container(verbose: int = 0) -> DependencyContainer:
    return DependencyContainer(verbose=verbose, use_null_logger=True)
