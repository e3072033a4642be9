"""Domain services for CD1 → CD2 conversion."""

from .assembler import TopLevelAssembler
from .converter import CD2Converter
from .enemy_translator import EnemyDescriptorTranslator
from .field_classifier import ClassifiedField, Outcome, classify_document, classify_field
from .mutator_synthesizer import MutatorSynthesizer, render_modules, supply_vector
from .stat_translator import StatModuleTranslator
from .transforms import TRANSFORMS, get_transform

__all__ = [
    "TRANSFORMS",
    "CD2Converter",
    "ClassifiedField",
    "EnemyDescriptorTranslator",
    "MutatorSynthesizer",
    "Outcome",
    "StatModuleTranslator",
    "TopLevelAssembler",
    "classify_document",
    "classify_field",
    "get_transform",
    "render_modules",
    "supply_vector",
]
