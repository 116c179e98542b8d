"""
BitGA Optimizer - Main Entry Point

This module loads the environment, configures Logfire for observability and
runs the multi-run genetic algorithm on the quintic polynomial demo objective.
Algorithm parameters come from the CHROMOSOME_SIZE, MIN_VAL, MAX_VAL, MUT_RAT,
POP_SIZE, NOFIT, NOFR and RANDOM_SEED environment variables.
"""

import json
import logging
import sys
from typing import Optional

from dotenv import load_dotenv
import logfire

from src.core.config import Settings
from src.bitga import BitGAConfig, DriverResult, QuinticPolynomialFitness, optimize

# Load environment variables
load_dotenv()

logger = logging.getLogger("bitga")


def configure_observability(settings: Settings) -> None:
    """Configure Logfire and the root log handler."""
    logfire.configure(**settings.get_logfire_settings())

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def write_results(result: DriverResult, config: BitGAConfig, path: str) -> None:
    """Save the optimization summary as JSON."""
    with open(path, 'w') as f:
        json.dump({"config": config.to_dict(), **result.to_dict()}, f, indent=2)

    logger.info(f"Saved results to {path}")


def main(settings: Optional[Settings] = None) -> int:
    """
    Run the optimizer.

    Returns:
        Process exit code
    """
    settings = settings or Settings()
    configure_observability(settings)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    try:
        config = BitGAConfig.from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        logfire.error("Invalid configuration", error=str(e))
        return 1

    config.logging.log_level = settings.log_level

    with logfire.span("BitGA Optimization", **config.evolution.model_dump()):
        result = optimize(config, QuinticPolynomialFitness())

    logger.info(f"Best solution: {result.best!r}")
    logfire.info(
        "Best solution",
        chromosome=result.best.chromosome.tolist(),
        fitness=result.best.fitness,
        runs=result.total_runs,
        stop_reason=result.stop_reason.value
    )

    if settings.results_path:
        write_results(result, config, settings.results_path)

    logger.info("Program execution finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
