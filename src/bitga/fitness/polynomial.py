"""
Polynomial fitness functions.

The quintic is the demo objective of the command line entry point; the
linear function is a simple monotone objective handy for checking that the
search moves towards the upper bound.
"""

from typing import Dict, Any, Optional, Sequence

import numpy as np

from src.bitga.fitness.base import FitnessFunction


# Coefficients from the highest power down to the constant term
QUINTIC_COEFFICIENTS = (12.0, -975.0, 28000.0, -345000.0, 1800000.0, 0.0)
QUINTIC_SCALE = 1_000_000.0


class PolynomialFitness(FitnessFunction):
    """
    Polynomial of the first gene, divided by a scale factor.

    Config keys:
        coefficients: Coefficients from the highest power down to the constant
        scale: Divisor applied to the polynomial value
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.coefficients: Sequence[float] = self.config.get("coefficients", (1.0, 0.0))
        self.scale: float = self.config.get("scale", 1.0)

    def evaluate(self, chromosome: np.ndarray) -> float:
        x = float(chromosome[0])
        return float(np.polyval(self.coefficients, x)) / self.scale


class QuinticPolynomialFitness(PolynomialFitness):
    """(12x^5 - 975x^4 + 28000x^3 - 345000x^2 + 1800000x) / 1e6 on the first gene."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        config = {
            "coefficients": QUINTIC_COEFFICIENTS,
            "scale": QUINTIC_SCALE,
            **(config or {})
        }
        super().__init__(config)


class LinearFitness(FitnessFunction):
    """Sum of all genes; the identity for a single-gene chromosome."""

    def evaluate(self, chromosome: np.ndarray) -> float:
        return float(np.sum(chromosome))
