"""
Genetic Algorithm Engine for BitGA.

This module implements the generational loop of a single run: it builds the
initial population and then applies selection, crossover, elitist
replacement, mutation and re-evaluation for a fixed number of generations.
"""

import logging
from datetime import datetime
from typing import List, Optional, Dict, Any, Callable

import logfire
import numpy as np

from src.bitga.core.config import BitGAConfig, LoggingConfig
from src.bitga.core.individual import Individual
from src.bitga.core.operators import select, crossover, mutate
from src.bitga.core.population import Population


def setup_logger(name: str, logging_config: LoggingConfig) -> logging.Logger:
    """Setup a logger with a stream handler at the configured level."""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, logging_config.log_level))
    logger.disabled = not logging_config.enable_logging

    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


class GeneticAlgorithmEngine:
    """
    Main engine for running one genetic algorithm optimization.

    The engine is synchronous and owns its population exclusively for the
    duration of ``run``. All randomness comes from ``self.rng``.
    """

    def __init__(
        self,
        config: BitGAConfig,
        fitness_function: Callable[[np.ndarray], float],
        rng: Optional[np.random.Generator] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the genetic algorithm engine.

        Args:
            config: BitGA configuration
            fitness_function: Function mapping a chromosome to a fitness score
            rng: Optional random generator (seeded from the config otherwise)
            logger: Optional logger instance
        """
        self.config = config
        self.fitness_function = fitness_function
        self.rng = rng if rng is not None else np.random.default_rng(config.random_seed)
        self.logger = logger or setup_logger("bitga.engine", config.logging)

        # State tracking
        self.current_population: Optional[Population] = None
        self.best_individual: Optional[Individual] = None
        self.best_per_generation: List[Individual] = []
        self.history: List[Dict[str, Any]] = []
        self.start_time: Optional[datetime] = None
        self.total_evaluations = 0

    def run(self) -> Individual:
        """
        Run the genetic algorithm for the configured number of generations.

        Returns:
            A copy of the best individual of the last generation
        """
        params = self.config.evolution

        with logfire.span("GA Run",
                          population_size=params.population_size,
                          generations=params.generations):

            self.start_time = datetime.now()
            self.best_per_generation = []
            self.history = []
            self.total_evaluations = 0

            self.current_population = self._initialize_population()
            self.best_individual = self.current_population.best.clone()
            self._record_history()

            for generation in range(1, params.generations + 1):
                with logfire.span("Generation", generation=generation):
                    self._evolve_generation()

                    self.best_individual = self.current_population.best.clone()
                    self.best_per_generation.append(self.best_individual)
                    self._record_history()

                    if generation % self.config.logging.log_interval == 0:
                        self._log_progress(generation)

            elapsed_time = datetime.now() - self.start_time
            self.logger.info(
                f"Run completed in {elapsed_time}: best fitness {self.best_individual.fitness:.6f}"
            )

            return self.best_individual.clone()

    def _initialize_population(self) -> Population:
        """Generate, evaluate and rank the initial population."""
        params = self.config.evolution

        with logfire.span("Initialize Population"):
            self.logger.debug("Generating initial population...")
            population = Population.generate(
                params.population_size,
                params.chromosome_size,
                params.min_val,
                params.max_val,
                self.rng
            )
            self._log_population("Generated population", population)

            self.logger.debug("Evaluating initial population...")
            self._evaluate(population)
            population.rank()
            self._log_population("Evaluated initial population", population)

            self.logger.info(f"Initialized population with {len(population)} individuals")
            return population

    def _evolve_generation(self) -> None:
        """Apply one full generation to the current population."""
        population = self.current_population

        parents = self._select_parents()
        children = self._create_children(parents)

        population.replace_worst(children)
        self._mutate_population()

        self.logger.debug("Evaluating population...")
        self._evaluate(population)
        population.rank()
        population.advance_generation()
        self._log_population("New population", population)

        self.logger.debug(f"Best of generation: {population.best!r}")

    def _select_parents(self) -> List[List[Individual]]:
        """Draw one pair of parents per child."""
        population = self.current_population
        sum_of_fitnesses = population.sum_of_fitnesses()

        self.logger.debug("Selecting parents...")
        parents = []
        for _ in range(self.config.evolution.parents_size):
            couple = []
            for _ in range(2):
                parent = select(population, sum_of_fitnesses, self.rng)
                self.logger.debug(f"Selected parent: {parent!r}")
                couple.append(parent)
            parents.append(couple)

        return parents

    def _create_children(self, parents: List[List[Individual]]) -> List[Individual]:
        """Cross over every couple into one child."""
        params = self.config.evolution

        self.logger.debug("Crossing-over...")
        children = []
        for parent1, parent2 in parents:
            child = crossover(parent1, parent2, params.chromosome_size, params.min_val, params.max_val)
            self.logger.debug(f"Cross-over: {parent1!r} {parent2!r} -> {child!r}")
            children.append(child)

        return children

    def _mutate_population(self) -> int:
        """Roll the mutation rate for every individual and mutate the winners."""
        params = self.config.evolution
        mutations = 0

        self.logger.debug("Mutating...")
        for individual in self.current_population:
            if self.rng.random() < params.mutation_rate:
                before = individual.clone()
                mutate(individual, params.min_val, params.max_val, self.rng)
                self.logger.debug(f"Mutation occurred: {before!r} -> {individual!r}")
                mutations += 1

        if not mutations:
            self.logger.debug("No mutation occurred.")

        return mutations

    def _evaluate(self, population: Population) -> None:
        """Evaluate fitness for all individuals in the population."""
        self.total_evaluations += population.evaluate(self.fitness_function)

    def _record_history(self) -> None:
        """Record current population statistics in history."""
        stats = self.current_population.calculate_statistics()
        self.history.append({
            **stats,
            "timestamp": datetime.now().isoformat()
        })

    def _log_population(self, message: str, population: Population) -> None:
        """Dump a population at DEBUG level when configured to."""
        if self.config.logging.log_population:
            self.logger.debug(f"{message}: {population.individuals!r}")

    def _log_progress(self, generation: int) -> None:
        """Log evolution progress."""
        stats = self.current_population.statistics

        self.logger.info(
            f"Generation {generation}: "
            f"Best: {stats.get('best_fitness', 0):.4f}, "
            f"Avg: {stats.get('avg_fitness', 0):.4f}, "
            f"Std: {stats.get('fitness_std', 0):.4f}"
        )

        logfire.info(
            "Evolution Progress",
            evolution_generation=generation,
            **{k: v for k, v in stats.items() if k != "generation"}
        )
