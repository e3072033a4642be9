from .repositories import (
    DocumentCodecPort,
    DocumentFilePort,
    MappingTableRepositoryPort,
)
from .services import LoggerPort

__all__ = [
    "DocumentCodecPort",
    "DocumentFilePort",
    "LoggerPort",
    "MappingTableRepositoryPort",
]
