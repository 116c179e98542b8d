"""
Core functionality for BitGA.

This package contains the application configuration shared by the entry
point and the tests.
"""

from src.core.config import settings

__all__ = [
    "settings",
]
