"""Application-layer errors."""

from __future__ import annotations

from logbus.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Problem in how the library was set up or called."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
