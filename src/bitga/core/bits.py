"""
IEEE-754 Bit Manipulation for BitGA.

This module provides the float64 <-> uint64 reinterpretation primitives used by
the bitwise crossover and bit-flip mutation operators, plus the clamping rule
shared by both.
"""

from typing import Iterable, Union

import numpy as np


ArrayLike = Union[np.ndarray, Iterable[float], float]

BITS_PER_GENE = 64


def to_bits(values: ArrayLike) -> np.ndarray:
    """
    Reinterpret float64 values as their raw 64-bit patterns.

    Args:
        values: Real values (scalar or sequence)

    Returns:
        uint64 array holding the same bytes as the input
    """
    return np.atleast_1d(np.asarray(values, dtype=np.float64)).view(np.uint64)


def from_bits(bits: Union[np.ndarray, Iterable[int], int]) -> np.ndarray:
    """
    Reinterpret raw 64-bit patterns as float64 values.

    Args:
        bits: Unsigned 64-bit patterns (scalar or sequence)

    Returns:
        float64 array holding the same bytes as the input
    """
    return np.atleast_1d(np.asarray(bits, dtype=np.uint64)).view(np.float64)


def float_to_bits(value: float) -> int:
    """Get the raw bit pattern of a single float as a Python int."""
    return int(to_bits(value)[0])


def bits_to_float(bits: int) -> float:
    """Build a float from a single raw bit pattern."""
    return float(from_bits(bits)[0])


def bit_mask(position: int) -> np.uint64:
    """Single-bit mask for a position in [0, 64)."""
    if not 0 <= position < BITS_PER_GENE:
        raise ValueError(f"Bit position must be in [0, {BITS_PER_GENE}), got {position}")
    return np.uint64(1) << np.uint64(position)


def clamp(values: np.ndarray, min_val: float, max_val: float) -> np.ndarray:
    """
    Snap values into [min_val, max_val].

    Values below the range become min_val and values above become max_val;
    everything else (including -0.0 when min_val is 0.0) is kept bit-for-bit.
    NaN has no place in the range and is snapped to min_val.
    """
    values = np.asarray(values, dtype=np.float64)
    clamped = np.where(values < min_val, min_val, values)
    clamped = np.where(clamped > max_val, max_val, clamped)
    return np.where(np.isnan(clamped), min_val, clamped)
