"""
Base classes for fitness evaluation in BitGA.

This module provides the abstract base class for fitness functions and a
wrapper that turns a plain function into one.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Callable

import numpy as np


class FitnessFunction(ABC):
    """
    Abstract base class for fitness functions.

    A fitness function maps a chromosome to a scalar score; higher is better.
    Instances are callable so they can be handed to the engine directly.
    Implementations must not modify the chromosome.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize fitness function with optional configuration.

        Args:
            config: Configuration parameters for the fitness function
        """
        self.config = config or {}

    @abstractmethod
    def evaluate(self, chromosome: np.ndarray) -> float:
        """
        Evaluate a chromosome and return its fitness score.

        Args:
            chromosome: Real-valued genes

        Returns:
            Fitness score (maximized)
        """
        pass

    def __call__(self, chromosome: np.ndarray) -> float:
        return float(self.evaluate(chromosome))


class CallableFitness(FitnessFunction):
    """Adapts a plain ``vector -> float`` function."""

    def __init__(self, function: Callable[[np.ndarray], float], config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.function = function

    def evaluate(self, chromosome: np.ndarray) -> float:
        return self.function(chromosome)
