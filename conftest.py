"""
PyTest configuration and fixtures for BitGA.

This module provides shared test fixtures: seeded random generators,
small configurations and simple fitness functions.
"""

import os
import sys

import numpy as np
import pytest
import logfire

# Add project root to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.bitga.core.config import (
    BitGAConfig,
    EvolutionParameters,
    LoggingConfig,
    create_test_config
)
from src.bitga.core.individual import Individual
from src.bitga.core.population import Population
from src.bitga.fitness import LinearFitness, QuinticPolynomialFitness


# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def test_config() -> BitGAConfig:
    """Small seeded configuration: one gene in [0, 31], four individuals, five generations."""
    return create_test_config()


@pytest.fixture
def wide_config() -> BitGAConfig:
    """Configuration with several genes and a symmetric range."""
    return BitGAConfig(
        evolution=EvolutionParameters(
            chromosome_size=5,
            min_val=-100.0,
            max_val=100.0,
            population_size=10,
            generations=8,
            mutation_rate=0.5,
            max_runs=3
        ),
        logging=LoggingConfig(log_level="DEBUG"),
        random_seed=7
    )


@pytest.fixture
def linear_fitness() -> LinearFitness:
    """Sum of genes; the identity for a single gene."""
    return LinearFitness()


@pytest.fixture
def quintic_fitness() -> QuinticPolynomialFitness:
    """Demo objective."""
    return QuinticPolynomialFitness()


def make_population(fitnesses, genes=None) -> Population:
    """Build an evaluated population with the given fitness values."""
    individuals = []
    for index, fitness in enumerate(fitnesses):
        chromosome = [float(index)] if genes is None else genes[index]
        individual = Individual(chromosome=chromosome)
        individual.update_fitness(fitness)
        individuals.append(individual)
    return Population(individuals)


@pytest.fixture
def population_factory():
    """Factory for evaluated populations with chosen fitness values."""
    return make_population


class ScriptedRng:
    """
    Stand-in for ``numpy.random.Generator`` returning scripted draws.

    ``random()`` pops values from ``rolls``; ``integers()`` records the
    requested range and returns its lower bound unless ``picks`` has values.
    """

    def __init__(self, rolls=None, picks=None):
        self.rolls = list(rolls or [])
        self.picks = list(picks or [])
        self.integer_calls = []

    def random(self):
        return self.rolls.pop(0)

    def integers(self, low, high=None):
        if high is None:
            low, high = 0, low
        self.integer_calls.append((low, high))
        if self.picks:
            return self.picks.pop(0)
        return low


@pytest.fixture
def scripted_rng():
    """Factory for scripted random sources."""
    return ScriptedRng

