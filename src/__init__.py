"""
BitGA - Source Package

This package contains the BitGA genetic algorithm, its fitness functions and
the application-level configuration.
"""

__version__ = "1.0.0"

# Package-level imports for convenience
from src.core.config import settings

__all__ = [
    "settings",
    "__version__",
]
