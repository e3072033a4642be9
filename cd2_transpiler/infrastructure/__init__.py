"""Infrastructure layer.

File access, JSON reading and writing, packaged mapping data and console
logging. Nothing in here knows the CD1 → CD2 rules.
"""

from .container import (
    DependencyContainer,
    create_default_container,
    create_test_container,
)

__all__ = [
    "DependencyContainer",
    "create_default_container",
    "create_test_container",
]
