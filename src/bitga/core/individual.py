"""
Individual Representation for BitGA.

An individual is a fixed-length float64 chromosome together with the cached
result of the last fitness evaluation.
"""

from typing import Dict, Any, Iterable
from dataclasses import dataclass
import math

import numpy as np


def rank_value(fitness: float) -> float:
    """Map a fitness to a totally ordered value; NaN ranks below everything."""
    if math.isnan(fitness):
        return float('-inf')
    return fitness


@dataclass(eq=False)
class Individual:
    """
    Represents an individual in the population.

    The fitness is 0.0 until the individual is evaluated. Mutating the
    chromosome in place makes the fitness stale, which is tracked by the
    ``evaluated`` flag.
    """

    chromosome: np.ndarray
    fitness: float = 0.0
    evaluated: bool = False

    def __post_init__(self):
        self.chromosome = np.array(self.chromosome, dtype=np.float64)

    @classmethod
    def from_genes(cls, genes: Iterable[float]) -> "Individual":
        """Create an unevaluated individual from a sequence of genes."""
        return cls(chromosome=np.fromiter(genes, dtype=np.float64))

    @property
    def size(self) -> int:
        """Number of genes in the chromosome."""
        return int(self.chromosome.shape[0])

    def update_fitness(self, fitness: float) -> None:
        """Update the cached fitness score."""
        self.fitness = float(fitness)
        self.evaluated = True

    def invalidate(self) -> None:
        """Mark the cached fitness as stale."""
        self.evaluated = False

    def clone(self) -> "Individual":
        """Create a copy decoupled from the population that owns this individual."""
        return Individual(
            chromosome=self.chromosome.copy(),
            fitness=self.fitness,
            evaluated=self.evaluated
        )

    def sort_key(self) -> float:
        """Fitness used for ranking."""
        return rank_value(self.fitness)

    def to_dict(self) -> Dict[str, Any]:
        """Convert individual to dictionary representation."""
        return {
            "chromosome": self.chromosome.tolist(),
            "fitness": self.fitness,
            "evaluated": self.evaluated
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Individual":
        """Create individual from dictionary representation."""
        return cls(
            chromosome=np.asarray(data["chromosome"], dtype=np.float64),
            fitness=data.get("fitness", 0.0),
            evaluated=data.get("evaluated", False)
        )

    def __repr__(self) -> str:
        genes = ", ".join(repr(float(g)) for g in self.chromosome)
        return f"Individual(chromosome=[{genes}], fitness={self.fitness!r})"
