"""
Multi-Run Driver for BitGA.

Restarts the genetic algorithm from fresh random populations for as long as
each new run is at least as good as the best accepted so far.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any, Callable

import logfire
import numpy as np

from src.bitga.core.config import BitGAConfig
from src.bitga.core.engine import GeneticAlgorithmEngine, setup_logger
from src.bitga.core.individual import Individual


class StopReason(Enum):
    """Why the multi-run driver stopped."""
    NO_IMPROVEMENT = "no_improvement"
    RUN_BUDGET = "run_budget"


@dataclass
class DriverResult:
    """Outcome of a multi-run optimization."""

    best: Individual
    run_results: List[Individual] = field(default_factory=list)
    accepted_runs: int = 0
    stop_reason: StopReason = StopReason.NO_IMPROVEMENT

    @property
    def total_runs(self) -> int:
        """Number of engine runs executed."""
        return len(self.run_results)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary representation."""
        return {
            "best": self.best.to_dict(),
            "run_results": [ind.to_dict() for ind in self.run_results],
            "accepted_runs": self.accepted_runs,
            "total_runs": self.total_runs,
            "stop_reason": self.stop_reason.value
        }


class MultiRunDriver:
    """
    Repeatedly runs the engine while runs keep up with the best so far.

    The first run is always accepted. Each later run is accepted when its best
    fitness is not lower than the accepted best; the first run that falls
    behind stops the driver. ``max_runs`` caps the total number of runs
    (0 leaves the loop unbounded).
    """

    def __init__(
        self,
        config: BitGAConfig,
        fitness_function: Callable[[np.ndarray], float],
        rng: Optional[np.random.Generator] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.config = config
        self.fitness_function = fitness_function
        self.rng = rng if rng is not None else np.random.default_rng(config.random_seed)
        self.logger = logger or setup_logger("bitga.driver", config.logging)

    def _budget_exhausted(self, runs: int) -> bool:
        max_runs = self.config.evolution.max_runs
        return max_runs > 0 and runs >= max_runs

    def run_once(self) -> Individual:
        """Execute one independent engine run sharing the driver's random source."""
        engine = GeneticAlgorithmEngine(self.config, self.fitness_function, rng=self.rng)
        return engine.run()

    def run(self) -> DriverResult:
        """
        Run the engine until a run fails to improve or the budget is spent.

        Returns:
            The accepted best individual, every run's best and the stop reason
        """
        with logfire.span("Multi-Run Optimization", max_runs=self.config.evolution.max_runs):
            best: Optional[Individual] = None
            result_runs: List[Individual] = []
            accepted = 0

            while True:
                last_best = self.run_once()
                result_runs.append(last_best)
                run_number = len(result_runs)

                logfire.info("Run finished", run=run_number, fitness=last_best.fitness)

                if best is not None and not (best.fitness <= last_best.fitness):
                    self.logger.info(
                        f"Run {run_number} did not improve "
                        f"({last_best.fitness:.6f} < {best.fitness:.6f}), stopping"
                    )
                    stop_reason = StopReason.NO_IMPROVEMENT
                    break

                best = last_best
                accepted += 1
                self.logger.info(f"Run {run_number} accepted with fitness {best.fitness:.6f}")

                if self._budget_exhausted(run_number):
                    self.logger.info(f"Run budget of {run_number} runs exhausted")
                    stop_reason = StopReason.RUN_BUDGET
                    break

            return DriverResult(
                best=best,
                run_results=result_runs,
                accepted_runs=accepted,
                stop_reason=stop_reason
            )


def optimize(
    config: BitGAConfig,
    fitness_function: Callable[[np.ndarray], float],
    rng: Optional[np.random.Generator] = None
) -> DriverResult:
    """Run the multi-run driver with a fresh driver instance."""
    return MultiRunDriver(config, fitness_function, rng=rng).run()
