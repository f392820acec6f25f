"""Utilities for the SSTDR twin."""

from sstdr_twin.utils.logging import get_logger

__all__ = [
    "get_logger",
]
