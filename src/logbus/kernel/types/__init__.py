"""Kernel types – tagged optional values."""
from logbus.kernel.types.option import NOTHING, Nothing, Option, Some, maybe

__all__ = ["NOTHING", "Nothing", "Option", "Some", "maybe"]
