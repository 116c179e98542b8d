"""
Reproduction Operators for BitGA.

Selection, crossover and mutation work directly on the IEEE-754 bit patterns
of the genes:

- ``select`` is a fitness-proportional draw with a uniform fallback.
- ``crossover`` ANDs the raw bits of both parents gene by gene.
- ``mutate`` flips one bit position in every gene of an individual.

Every random draw goes through the generator passed in by the caller.
"""

from typing import List, Tuple

import numpy as np

from src.bitga.core.bits import to_bits, from_bits, bit_mask, clamp
from src.bitga.core.individual import Individual
from src.bitga.core.population import Population


# (upper bound of the roll, (low, high) bit range with exclusive high)
MUTATION_BIT_RANGES: List[Tuple[float, Tuple[int, int]]] = [
    (0.75, (0, 32)),
    (0.90, (31, 48)),
    (1.00, (47, 64)),
]


def select(population: Population, sum_of_fitnesses: float, rng: np.random.Generator) -> Individual:
    """
    Select one individual with probability driven by its fitness.

    A single roll ``r`` is compared against each individual's own normalized
    fitness in ranked order and the first individual with
    ``r < fitness / sum_of_fitnesses`` wins. This is not a cumulative
    roulette wheel: fitter individuals at the front win far more often than
    their share. When nobody wins (for example an all-zero or NaN sum)
    a member is picked uniformly at random.

    Args:
        population: Ranked population
        sum_of_fitnesses: Sum of the fitness values of the population
        rng: Random source

    Returns:
        The selected individual (not a copy)
    """
    if len(population) == 0:
        raise ValueError("Cannot select from an empty population")

    roll = rng.random()

    # IEEE division: a zero sum gives +inf, -inf or NaN shares instead of raising
    with np.errstate(divide='ignore', invalid='ignore'):
        for individual in population:
            if roll < np.float64(individual.fitness) / sum_of_fitnesses:
                return individual

    return population[int(rng.integers(len(population)))]


def crossover(
    parent1: Individual,
    parent2: Individual,
    chromosome_size: int,
    min_val: float,
    max_val: float
) -> Individual:
    """
    Create a child whose genes are the bitwise AND of the parents' genes.

    Both genes are reinterpreted as 64-bit patterns, ANDed, reinterpreted as
    float64 and clamped into [min_val, max_val]. Deterministic.

    Returns:
        Unevaluated child with fitness 0.0
    """
    if parent1.size < chromosome_size or parent2.size < chromosome_size:
        raise ValueError(
            f"Parents must carry at least {chromosome_size} genes, "
            f"got {parent1.size} and {parent2.size}"
        )

    bits = to_bits(parent1.chromosome[:chromosome_size]) & to_bits(parent2.chromosome[:chromosome_size])
    return Individual(chromosome=clamp(from_bits(bits), min_val, max_val))


def choose_bit_position(rng: np.random.Generator) -> int:
    """
    Pick the bit to flip during mutation.

    Low mantissa bits [0, 32) are picked 75% of the time, the upper mantissa
    [31, 48) 15% of the time and the top of the mantissa, the exponent and the
    sign [47, 64) the remaining 10%.
    """
    roll = rng.random()

    for upper, (low, high) in MUTATION_BIT_RANGES:
        if roll <= upper:
            return int(rng.integers(low, high))

    low, high = MUTATION_BIT_RANGES[-1][1]
    return int(rng.integers(low, high))


def mutate(individual: Individual, min_val: float, max_val: float, rng: np.random.Generator) -> int:
    """
    Flip the same randomly chosen bit in every gene of an individual.

    Genes are clamped into [min_val, max_val] after the flip and the
    individual's fitness becomes stale.

    Returns:
        The flipped bit position
    """
    position = choose_bit_position(rng)
    flipped = to_bits(individual.chromosome) ^ bit_mask(position)

    individual.chromosome = clamp(from_bits(flipped), min_val, max_val)
    individual.invalidate()

    return position
