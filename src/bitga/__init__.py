"""
BitGA Genetic Algorithm Framework.

This module implements a real-valued genetic algorithm whose crossover and
mutation operate on the IEEE-754 bit patterns of the genes, together with a
driver that keeps restarting the search while the runs keep improving.
"""

from src.bitga.core.config import (
    BitGAConfig,
    EvolutionParameters,
    LoggingConfig,
    create_default_config,
    create_test_config,
    create_demo_config
)
from src.bitga.core.individual import Individual
from src.bitga.core.population import Population
from src.bitga.core.engine import GeneticAlgorithmEngine
from src.bitga.core.driver import MultiRunDriver, DriverResult, StopReason, optimize
from src.bitga.fitness import (
    FitnessFunction,
    CallableFitness,
    QuinticPolynomialFitness,
    LinearFitness
)

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "BitGAConfig",
    "EvolutionParameters",
    "LoggingConfig",
    "create_default_config",
    "create_test_config",
    "create_demo_config",
    # Population
    "Individual",
    "Population",
    # Engine
    "GeneticAlgorithmEngine",
    # Driver
    "MultiRunDriver",
    "DriverResult",
    "StopReason",
    "optimize",
    # Fitness
    "FitnessFunction",
    "CallableFitness",
    "QuinticPolynomialFitness",
    "LinearFitness",
]
