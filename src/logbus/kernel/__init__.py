"""Kernel – errors, optional values, clocks and messaging ports."""
