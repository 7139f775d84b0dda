"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (logbus.config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── CodeLookupError
        └── PublishError
"""

from logbus.kernel.errors.application import ApplicationError
from logbus.kernel.errors.base import BaseError
from logbus.kernel.errors.infrastructure import (
    CodeLookupError,
    InfrastructureError,
    PublishError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CodeLookupError",
    "InfrastructureError",
    "PublishError",
]
