"""
BitGA Configuration Module.

This module defines configuration classes for the BitGA genetic algorithm,
including evolution parameters, logging settings and the run budget of the
multi-run driver.
"""

from typing import Optional, Dict, Any, Literal
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
import os


class EvolutionParameters(BaseModel):
    """Parameters controlling the genetic algorithm evolution process."""

    model_config = ConfigDict(validate_assignment=True)

    # Chromosome parameters
    chromosome_size: int = Field(
        default=1,
        ge=1,
        description="Number of real-valued genes per chromosome"
    )
    min_val: float = Field(
        default=0.0,
        allow_inf_nan=False,
        description="Lower bound (inclusive) of every gene"
    )
    max_val: float = Field(
        default=31.0,
        allow_inf_nan=False,
        description="Upper bound (inclusive) of every gene"
    )

    # Population parameters
    population_size: int = Field(
        default=20,
        ge=2,
        description="Number of individuals in the population (must be even)"
    )
    generations: int = Field(
        default=50,
        ge=0,
        description="Number of generations per run"
    )

    # Genetic operators
    mutation_rate: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Probability that an individual is mutated each generation"
    )

    # Multi-run driver
    max_runs: int = Field(
        default=10,
        ge=0,
        description="Maximum number of runs for the multi-run driver (0 for unbounded)"
    )

    @field_validator('population_size')
    def validate_population_size(cls, v):
        """Ensure the population can be split into parent pairs."""
        if v % 2 != 0:
            raise ValueError('Population size must be even')
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> "EvolutionParameters":
        """Ensure the gene range is not empty."""
        if self.max_val <= self.min_val:
            raise ValueError("max_val must be greater than min_val")
        return self

    @property
    def parents_size(self) -> int:
        """Number of parent pairs (and children) per generation."""
        return self.population_size // 2


class LoggingConfig(BaseModel):
    """Configuration for logging and monitoring."""

    enable_logging: bool = Field(
        default=True,
        description="Enable evolution logging"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_interval: int = Field(
        default=1,
        ge=1,
        description="Generations between progress logs"
    )
    log_population: bool = Field(
        default=False,
        description="Dump whole populations at DEBUG level"
    )


class BitGAConfig(BaseModel):
    """Main configuration class for BitGA."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid'
    )

    # Sub-configurations
    evolution: EvolutionParameters = Field(
        default_factory=EvolutionParameters,
        description="Evolution parameters"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging and monitoring configuration"
    )

    # General settings
    random_seed: Optional[int] = Field(
        default=None,
        description="Random seed for reproducibility"
    )

    @classmethod
    def from_env(cls) -> "BitGAConfig":
        """Create configuration from environment variables."""
        config_dict = {}

        # Evolution parameters from env
        if chromosome_size := os.getenv("CHROMOSOME_SIZE"):
            config_dict.setdefault("evolution", {})["chromosome_size"] = int(chromosome_size)
        if min_val := os.getenv("MIN_VAL"):
            config_dict.setdefault("evolution", {})["min_val"] = float(min_val)
        if max_val := os.getenv("MAX_VAL"):
            config_dict.setdefault("evolution", {})["max_val"] = float(max_val)
        if mutation_rate := os.getenv("MUT_RAT"):
            config_dict.setdefault("evolution", {})["mutation_rate"] = float(mutation_rate)
        if pop_size := os.getenv("POP_SIZE"):
            config_dict.setdefault("evolution", {})["population_size"] = int(pop_size)
        if generations := os.getenv("NOFIT"):
            config_dict.setdefault("evolution", {})["generations"] = int(generations)
        if max_runs := os.getenv("NOFR"):
            config_dict.setdefault("evolution", {})["max_runs"] = int(max_runs)

        # General settings
        if random_seed := os.getenv("RANDOM_SEED"):
            config_dict["random_seed"] = int(random_seed)

        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()

    def save(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        import json
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: str) -> "BitGAConfig":
        """Load configuration from JSON file."""
        import json
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls(**data)


# Convenience functions
def create_default_config() -> BitGAConfig:
    """Create a default configuration suitable for most use cases."""
    return BitGAConfig()


def create_test_config() -> BitGAConfig:
    """Create a configuration suitable for testing (smaller, faster, seeded)."""
    return BitGAConfig(
        evolution=EvolutionParameters(
            chromosome_size=1,
            min_val=0.0,
            max_val=31.0,
            population_size=4,
            generations=5,
            mutation_rate=0.2,
            max_runs=3
        ),
        logging=LoggingConfig(
            log_level="DEBUG",
            log_interval=1
        ),
        random_seed=42
    )


def create_demo_config() -> BitGAConfig:
    """Create the configuration of the quintic polynomial demo."""
    return BitGAConfig(
        evolution=EvolutionParameters(
            chromosome_size=1,
            min_val=0.0,
            max_val=31.0,
            population_size=50,
            generations=100,
            mutation_rate=0.3,
            max_runs=20
        ),
        logging=LoggingConfig(
            log_interval=10
        )
    )
