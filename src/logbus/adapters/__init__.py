"""Adapters – concrete key-value stores and log buses."""
