"""Element-wise arithmetic on strided float32 and int16 sequences.

Every function reads ``length`` elements from its inputs, taking every
``step``-th item, and writes the results to every ``step_out``-th slot of
``out``.  When ``out`` is omitted a new list is allocated.  When ``length``
is omitted it is the largest count that every sequence can supply.  Results
are rounded to single precision (float functions) or wrapped to 16 bits
(integer functions), as the fixed-width types they model would be.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Callable, MutableSequence, Sequence

__all__ = [
    "add_f32",
    "sub_f32",
    "mul_f32",
    "addc_f32",
    "mulc_f32",
    "add_s16",
    "mul_s16",
    "mulc_s16",
]

_F32 = struct.Struct("<f")


def _to_f32(value: float) -> float:
    """Round a number to the nearest IEEE-754 single-precision value."""
    try:
        return _F32.unpack(_F32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _to_s16(value: int) -> int:
    """Wrap an integer to the signed 16-bit range."""
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


def _require(name: str, seq: object) -> None:
    if seq is None:
        raise ValueError(f"{name} must not be None")


def _check_step(name: str, step: int) -> None:
    if step < 0:
        raise ValueError(f"{name} must not be negative, got {step}")


def _capacity(seq: Sequence, step: int) -> int | None:
    """Number of strided positions available in ``seq``; None if unbounded."""
    if step == 0:
        return None if len(seq) else 0
    return (len(seq) + step - 1) // step


def _resolve_length(
    length: int | None,
    bounds: list[tuple[Sequence | None, int]],
) -> int:
    if length is not None:
        return max(int(length), 0)
    limits = [
        cap
        for seq, step in bounds
        if seq is not None and (cap := _capacity(seq, step)) is not None
    ]
    if not limits:
        raise ValueError("length cannot be derived when every step is zero")
    return min(limits)


def _prepare_out(
    out: MutableSequence | None,
    length: int,
    step_out: int,
    fill: float | int,
) -> MutableSequence:
    if out is not None:
        return out
    if length == 0:
        return []
    return [fill] * ((length - 1) * step_out + 1)


def _binary(
    op: Callable,
    convert: Callable,
    input1: Sequence,
    input2: Sequence,
    length: int | None,
    step1: int,
    step2: int,
    step_out: int,
    out: MutableSequence | None,
    fill: float | int,
) -> MutableSequence:
    _require("input1", input1)
    _require("input2", input2)
    for name, step in (("step1", step1), ("step2", step2), ("step_out", step_out)):
        _check_step(name, step)
    count = _resolve_length(
        length, [(input1, step1), (input2, step2), (out, step_out)]
    )
    result = _prepare_out(out, count, step_out, fill)
    # Element by element, so that in-place use sees earlier writes as the
    # underlying strided loop would.
    for i in range(count):
        a = convert(input1[i * step1])
        b = convert(input2[i * step2])
        result[i * step_out] = op(a, b)
    return result


def _unary(
    op: Callable,
    convert: Callable,
    data: Sequence,
    length: int | None,
    step_in: int,
    step_out: int,
    out: MutableSequence | None,
    fill: float | int,
) -> MutableSequence:
    _require("data", data)
    _check_step("step_in", step_in)
    _check_step("step_out", step_out)
    count = _resolve_length(length, [(data, step_in), (out, step_out)])
    result = _prepare_out(out, count, step_out, fill)
    for i in range(count):
        result[i * step_out] = op(convert(data[i * step_in]))
    return result


def add_f32(input1, input2, length=None, step1=1, step2=1, step_out=1, out=None):
    """out[i*step_out] = input1[i*step1] + input2[i*step2] in float32."""
    return _binary(
        lambda a, b: _to_f32(a + b), _to_f32,
        input1, input2, length, step1, step2, step_out, out, 0.0,
    )


def sub_f32(input1, input2, length=None, step1=1, step2=1, step_out=1, out=None):
    """out[i*step_out] = input1[i*step1] - input2[i*step2] in float32."""
    return _binary(
        lambda a, b: _to_f32(a - b), _to_f32,
        input1, input2, length, step1, step2, step_out, out, 0.0,
    )


def mul_f32(input1, input2, length=None, step1=1, step2=1, step_out=1, out=None):
    """out[i*step_out] = input1[i*step1] * input2[i*step2] in float32."""
    return _binary(
        lambda a, b: _to_f32(a * b), _to_f32,
        input1, input2, length, step1, step2, step_out, out, 0.0,
    )


def addc_f32(data, length=None, c=0.0, step_in=1, step_out=1, out=None):
    """out[i*step_out] = data[i*step_in] + c in float32."""
    constant = _to_f32(c)
    return _unary(
        lambda x: _to_f32(x + constant), _to_f32,
        data, length, step_in, step_out, out, 0.0,
    )


def mulc_f32(data, length=None, c=1.0, step_in=1, step_out=1, out=None):
    """out[i*step_out] = data[i*step_in] * c in float32."""
    constant = _to_f32(c)
    return _unary(
        lambda x: _to_f32(x * constant), _to_f32,
        data, length, step_in, step_out, out, 0.0,
    )


def add_s16(input1, input2, length=None, step1=1, step2=1, step_out=1, shift=0, out=None):
    """out[i*step_out] = (input1[i*step1] + input2[i*step2]) >> shift, as int16."""
    return _binary(
        lambda a, b: _to_s16((a + b) >> shift), _to_s16,
        input1, input2, length, step1, step2, step_out, out, 0,
    )


def mul_s16(input1, input2, length=None, step1=1, step2=1, step_out=1, shift=15, out=None):
    """out[i*step_out] = (input1[i*step1] * input2[i*step2]) >> shift, as int16."""
    return _binary(
        lambda a, b: _to_s16((a * b) >> shift), _to_s16,
        input1, input2, length, step1, step2, step_out, out, 0,
    )


def mulc_s16(data, length=None, c=0x7FFF, step_in=1, step_out=1, out=None):
    """out[i*step_out] = (data[i*step_in] * c) >> 15, as int16 (Q15 scaling)."""
    constant = _to_s16(c)
    return _unary(
        lambda x: _to_s16((x * constant) >> 15), _to_s16,
        data, length, step_in, step_out, out, 0,
    )