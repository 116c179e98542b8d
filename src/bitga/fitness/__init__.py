"""
BitGA fitness functions.

This module provides the fitness function base class and the polynomial
objectives used by the demo and the test scenarios.
"""

from src.bitga.fitness.base import (
    FitnessFunction,
    CallableFitness
)

from src.bitga.fitness.polynomial import (
    PolynomialFitness,
    QuinticPolynomialFitness,
    LinearFitness
)

__all__ = [
    # Base classes
    "FitnessFunction",
    "CallableFitness",

    # Polynomials
    "PolynomialFitness",
    "QuinticPolynomialFitness",
    "LinearFitness",
]
