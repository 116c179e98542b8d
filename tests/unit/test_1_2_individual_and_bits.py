"""
Unit tests for individuals and IEEE-754 bit helpers (Subtask 1.2).

Tests cover:
- float64 <-> uint64 reinterpretation
- Bit masks
- Clamping rules (including NaN and negative zero)
- Individual creation, fitness caching, cloning and serialization
"""

import math

import numpy as np
import pytest

from src.bitga.core.bits import (
    to_bits,
    from_bits,
    float_to_bits,
    bits_to_float,
    bit_mask,
    clamp
)
from src.bitga.core.individual import Individual, rank_value


class TestBitReinterpretation:
    """Test suite for the float/bits conversion primitives."""

    @pytest.mark.parametrize("value, bits", [
        (0.0, 0x0000000000000000),
        (-0.0, 0x8000000000000000),
        (1.0, 0x3FF0000000000000),
        (1.5, 0x3FF8000000000000),
        (2.0, 0x4000000000000000),
        (3.0, 0x4008000000000000),
        (5.0, 0x4014000000000000),
        (31.0, 0x403F000000000000),
        (-2.5, 0xC004000000000000),
    ])
    def test_known_bit_patterns(self, value, bits):
        """Known IEEE-754 double patterns."""
        assert float_to_bits(value) == bits
        assert bits_to_float(bits) == value
        assert math.copysign(1.0, bits_to_float(bits)) == math.copysign(1.0, value)

    def test_vector_conversion(self):
        """Arrays keep their shape and byte content."""
        values = np.array([1.0, -2.5, 31.0])

        bits = to_bits(values)

        assert bits.dtype == np.uint64
        assert bits.tolist() == [0x3FF0000000000000, 0xC004000000000000, 0x403F000000000000]
        np.testing.assert_array_equal(from_bits(bits), values)

    def test_scalar_is_promoted_to_vector(self):
        """Scalars become one-element arrays."""
        assert to_bits(2.0).shape == (1,)
        assert from_bits(0x4000000000000000).tolist() == [2.0]

    def test_nan_and_infinity_patterns(self):
        """Exponent all ones encodes infinity or NaN."""
        assert math.isinf(bits_to_float(0x7FF0000000000000))
        assert math.isnan(bits_to_float(0x7FF8000000000000))

    def test_bit_mask(self):
        """Masks select exactly one bit."""
        assert int(bit_mask(0)) == 1
        assert int(bit_mask(52)) == 1 << 52
        assert int(bit_mask(63)) == 1 << 63

        with pytest.raises(ValueError):
            bit_mask(64)
        with pytest.raises(ValueError):
            bit_mask(-1)


class TestClamp:
    """Test suite for the clamping rule."""

    def test_values_inside_range_are_untouched(self):
        values = np.array([0.0, 1.25, 31.0])
        np.testing.assert_array_equal(clamp(values, 0.0, 31.0), values)

    def test_values_outside_range_snap_to_bounds(self):
        values = np.array([-3.0, 45.0, -np.inf, np.inf])
        np.testing.assert_array_equal(clamp(values, 0.0, 31.0), [0.0, 31.0, 0.0, 31.0])

    def test_nan_snaps_to_lower_bound(self):
        assert clamp(np.array([np.nan]), -2.0, 2.0).tolist() == [-2.0]

    def test_negative_zero_is_kept(self):
        """-0.0 is not below 0.0, so it is kept bit-for-bit."""
        result = clamp(np.array([-0.0]), 0.0, 31.0)
        assert float_to_bits(result[0]) == 0x8000000000000000


class TestIndividual:
    """Test suite for the individual data model."""

    def test_individual_creation(self):
        """New individuals are unevaluated with zero fitness."""
        individual = Individual(chromosome=[1.0, 2.0])

        assert individual.fitness == 0.0
        assert individual.evaluated is False
        assert individual.size == 2
        assert individual.chromosome.dtype == np.float64

    def test_from_genes(self):
        individual = Individual.from_genes(x for x in (3.0, 4.0))
        assert individual.chromosome.tolist() == [3.0, 4.0]

    def test_chromosome_is_owned(self):
        """The individual copies the array it is built from."""
        genes = np.array([1.0, 2.0])
        individual = Individual(chromosome=genes)

        genes[0] = 99.0

        assert individual.chromosome[0] == 1.0

    def test_fitness_update_and_invalidation(self):
        individual = Individual(chromosome=[1.0])

        individual.update_fitness(3)
        assert individual.fitness == 3.0
        assert isinstance(individual.fitness, float)
        assert individual.evaluated is True

        individual.invalidate()
        assert individual.evaluated is False
        assert individual.fitness == 3.0

    def test_clone_is_decoupled(self):
        """Clones survive later changes to the original."""
        individual = Individual(chromosome=[1.0, 2.0])
        individual.update_fitness(5.0)

        snapshot = individual.clone()
        individual.chromosome[0] = 7.0
        individual.update_fitness(9.0)

        assert snapshot.chromosome.tolist() == [1.0, 2.0]
        assert snapshot.fitness == 5.0
        assert snapshot.evaluated is True

    def test_serialization(self):
        """Test individual serialization and deserialization."""
        individual = Individual(chromosome=[0.5, -1.5])
        individual.update_fitness(2.0)

        data = individual.to_dict()
        assert data == {"chromosome": [0.5, -1.5], "fitness": 2.0, "evaluated": True}

        restored = Individual.from_dict(data)
        assert restored.chromosome.tolist() == [0.5, -1.5]
        assert restored.fitness == 2.0
        assert restored.evaluated is True

    def test_rank_value_orders_nan_last(self):
        assert rank_value(1.0) == 1.0
        assert rank_value(float("nan")) == float("-inf")

    def test_repr(self):
        individual = Individual(chromosome=[1.0])
        assert repr(individual) == "Individual(chromosome=[1.0], fitness=0.0)"
