"""Fast bit-level approximations of the square root and its reciprocal.

Both functions work on the IEEE-754 single-precision bit pattern of their
argument. They trade accuracy, a few percent at worst for ``sqrtf``, for
speed.
"""

from __future__ import annotations

import struct
from collections.abc import Sequence

from espdsp.arith import _to_f32

__all__ = ["sqrtf", "inverted_sqrtf", "sqrt_f32"]

_FLOAT = struct.Struct("<f")
_INT = struct.Struct("<i")
_UINT = struct.Struct("<I")

_SQRT_MAGIC = 0x1FBB4000
_INV_SQRT_MAGIC = 0x5F3759DF


def _float_bits_signed(value: float) -> int:
    return _INT.unpack(_FLOAT.pack(_to_f32(value)))[0]


def _float_bits_unsigned(value: float) -> int:
    return _UINT.unpack(_FLOAT.pack(_to_f32(value)))[0]


def _float_from_signed(bits: int) -> float:
    wrapped = ((bits + 0x80000000) & 0xFFFFFFFF) - 0x80000000
    return _FLOAT.unpack(_INT.pack(wrapped))[0]


def _float_from_unsigned(bits: int) -> float:
    return _FLOAT.unpack(_UINT.pack(bits & 0xFFFFFFFF))[0]


def sqrtf(value: float) -> float:
    """Approximate the square root of ``value`` by halving its exponent bits."""
    return _float_from_signed(_SQRT_MAGIC + (_float_bits_signed(value) >> 1))


def inverted_sqrtf(value: float) -> float:
    """Approximate ``1 / sqrt(value)`` with one Newton-Raphson refinement."""
    x2 = _to_f32(_to_f32(value) * 0.5)
    guess = _float_from_unsigned(_INV_SQRT_MAGIC - (_float_bits_unsigned(value) >> 1))
    correction = _to_f32(1.5 - _to_f32(_to_f32(x2 * guess) * guess))
    return _to_f32(guess * correction)


def sqrt_f32(data: Sequence[float], length: int | None = None) -> list[float]:
    """Apply :func:`sqrtf` to the first ``length`` items of ``data``."""
    if data is None:
        raise ValueError("data must not be None")
    count = len(data) if length is None else max(int(length), 0)
    if count > len(data):
        raise ValueError(f"length {count} exceeds the {len(data)} items given")
    return [sqrtf(item) for item in data[:count]]