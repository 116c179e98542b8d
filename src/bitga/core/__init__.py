"""
BitGA Core Module - Genetic Algorithm Components.

This module contains the core components of the BitGA genetic algorithm,
including configuration, individual representation, population management,
the reproduction operators, the evolution engine and the multi-run driver.
"""

from src.bitga.core.config import (
    BitGAConfig,
    EvolutionParameters,
    LoggingConfig,
    create_default_config,
    create_test_config,
    create_demo_config
)

from src.bitga.core.bits import (
    to_bits,
    from_bits,
    float_to_bits,
    bits_to_float,
    clamp
)

from src.bitga.core.individual import Individual

from src.bitga.core.population import Population

from src.bitga.core.operators import (
    select,
    crossover,
    mutate,
    choose_bit_position
)

from src.bitga.core.engine import (
    GeneticAlgorithmEngine
)

from src.bitga.core.driver import (
    MultiRunDriver,
    DriverResult,
    StopReason,
    optimize
)

__all__ = [
    # Configuration
    "BitGAConfig",
    "EvolutionParameters",
    "LoggingConfig",
    "create_default_config",
    "create_test_config",
    "create_demo_config",

    # Bit manipulation
    "to_bits",
    "from_bits",
    "float_to_bits",
    "bits_to_float",
    "clamp",

    # Population management
    "Individual",
    "Population",

    # Reproduction operators
    "select",
    "crossover",
    "mutate",
    "choose_bit_position",

    # Engine
    "GeneticAlgorithmEngine",

    # Multi-run driver
    "MultiRunDriver",
    "DriverResult",
    "StopReason",
    "optimize"
]
