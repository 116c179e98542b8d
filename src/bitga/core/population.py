"""
Population Management for BitGA.

This module manages the population of individuals throughout a run:
random initialization, fitness evaluation, ranking, elitist replacement
of the worst half and summary statistics.
"""

from typing import List, Optional, Dict, Any, Callable, Iterator, Sequence

import numpy as np

from src.bitga.core.individual import Individual, rank_value


FitnessCallable = Callable[[np.ndarray], float]


class Population:
    """
    Manages an ordered collection of individuals.

    Order is only meaningful after ``rank``: index 0 is then the best
    individual and the tail holds the worst ones.
    """

    def __init__(self, individuals: Optional[List[Individual]] = None, generation: int = 0):
        """Initialize population with an optional list of individuals."""
        self.individuals: List[Individual] = individuals if individuals is not None else []
        self.generation = generation
        self.statistics: Dict[str, Any] = {}

    @classmethod
    def generate(
        cls,
        pop_size: int,
        chromosome_size: int,
        min_val: float,
        max_val: float,
        rng: np.random.Generator
    ) -> "Population":
        """
        Create a population of random individuals.

        Every gene is drawn independently and uniformly from [min_val, max_val).

        Args:
            pop_size: Number of individuals
            chromosome_size: Number of genes per individual
            min_val: Lower gene bound
            max_val: Upper gene bound
            rng: Random source

        Returns:
            Unevaluated population
        """
        if pop_size <= 0:
            raise ValueError(f"Population size must be positive, got {pop_size}")
        if chromosome_size <= 0:
            raise ValueError(f"Chromosome size must be positive, got {chromosome_size}")
        if not max_val > min_val:
            raise ValueError(f"max_val ({max_val}) must be greater than min_val ({min_val})")

        genes = rng.uniform(min_val, max_val, size=(pop_size, chromosome_size))
        return cls([Individual(chromosome=row) for row in genes])

    def __len__(self) -> int:
        return len(self.individuals)

    def __iter__(self) -> Iterator[Individual]:
        return iter(self.individuals)

    def __getitem__(self, index: int) -> Individual:
        return self.individuals[index]

    @property
    def best(self) -> Individual:
        """Top of the ranked order."""
        return self.individuals[0]

    def evaluate(self, fitness_function: FitnessCallable) -> int:
        """
        Evaluate every individual with the fitness function.

        The chromosome handed to the fitness function is read-only.

        Returns:
            Number of fitness function calls
        """
        for individual in self.individuals:
            genes = individual.chromosome.view()
            genes.flags.writeable = False
            individual.update_fitness(fitness_function(genes))
        return len(self.individuals)

    def rank(self) -> None:
        """Sort in place by descending fitness, keeping ties in their current order."""
        self.individuals.sort(key=Individual.sort_key, reverse=True)

    def sum_of_fitnesses(self) -> float:
        """Sum of the cached fitness values."""
        return sum(individual.fitness for individual in self.individuals)

    def replace_worst(self, children: Sequence[Individual]) -> None:
        """
        Replace the worst individuals of a ranked population with children.

        The population is reversed, the children are spliced into the front
        slots and the order is reversed back, so the top
        ``len(self) - len(children)`` individuals survive untouched.
        """
        if len(children) > len(self.individuals):
            raise ValueError(
                f"Cannot replace {len(children)} individuals in a population of {len(self.individuals)}"
            )

        self.individuals.reverse()
        self.individuals[:len(children)] = list(children)
        self.individuals.reverse()

    def advance_generation(self) -> None:
        """Move the population to the next generation number."""
        self.generation += 1

    def calculate_statistics(self) -> Dict[str, Any]:
        """
        Calculate population fitness statistics.

        NaN or infinite fitness values propagate into the mean, median and
        standard deviation; best and worst follow the ranking order.
        """
        fitnesses = [ind.fitness for ind in self.individuals]

        if not fitnesses:
            return {}

        values = np.asarray(fitnesses, dtype=np.float64)
        with np.errstate(invalid='ignore', over='ignore'):
            avg_fitness = float(np.mean(values))
            median_fitness = float(np.median(values))
            fitness_std = float(np.std(values, ddof=1)) if len(values) > 1 else 0.0

        self.statistics = {
            "generation": self.generation,
            "population_size": len(self.individuals),
            "best_fitness": max(fitnesses, key=rank_value),
            "worst_fitness": min(fitnesses, key=rank_value),
            "avg_fitness": avg_fitness,
            "median_fitness": median_fitness,
            "fitness_std": fitness_std
        }
        return self.statistics

    def to_dict(self) -> Dict[str, Any]:
        """Convert population to dictionary representation."""
        return {
            "generation": self.generation,
            "individuals": [ind.to_dict() for ind in self.individuals]
        }
