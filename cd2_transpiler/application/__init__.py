"""Application layer for the CD2 transpiler.

This layer contains the conversion use case and the ports (interfaces) it
needs from the infrastructure.
"""

from .models import ConvertRequest, ConvertResponse, OutputOptions

# Import ConversionUseCase from .conversion_use_case directly; it pulls in
# the whole domain service stack.

__all__ = [
    "ConvertRequest",
    "ConvertResponse",
    "OutputOptions",
]
