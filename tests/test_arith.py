import math

import pytest

from espdsp.arith import (
    add_f32,
    add_s16,
    addc_f32,
    mul_f32,
    mul_s16,
    mulc_f32,
    mulc_s16,
    sub_f32,
)


def test_add_f32_in_place():
    n = 32
    x = [float(i) for i in range(n)]
    result = add_f32(x, x, n, 1, 1, 1, out=x)
    assert result is x
    assert x == [2.0 * i for i in range(n)]


def test_sub_f32_in_place():
    n = 32
    x = [float(i) for i in range(n)]
    sub_f32(x, x, n, 1, 1, 1, out=x)
    assert x == [0.0] * n


def test_mul_f32_in_place():
    n = 32
    x = [float(i) for i in range(n)]
    mul_f32(x, x, n, 1, 1, 1, out=x)
    assert x == [float(i * i) for i in range(n)]


def test_addc_f32_in_place():
    n = 64
    x = [float(i) for i in range(n)]
    addc_f32(x, n, 10, 1, 1, out=x)
    assert x == [float(i + 10) for i in range(n)]


def test_mulc_f32_in_place():
    n = 64
    x = [float(i) for i in range(n)]
    mulc_f32(x, n, 10, 1, 1, out=x)
    assert x == [float(i * 10) for i in range(n)]


@pytest.mark.parametrize("n", [64, 256])
def test_add_s16_in_place(n):
    x = [i << 4 for i in range(n)]
    add_s16(x, x, n, 1, 1, 1, 0, out=x)
    assert x == [(i << 4) * 2 for i in range(n)]


@pytest.mark.parametrize("n", [64, 256])
def test_mulc_s16_quarter_scale(n):
    x = [i << 4 for i in range(n)]
    mulc_s16(x, n, 0x2000, 1, 1, out=x)
    assert x == [i << 2 for i in range(n)]


def test_new_list_returned_when_out_omitted():
    a = [1.0, 2.0, 3.0]
    b = [4.0, 5.0, 6.0]
    assert add_f32(a, b) == [5.0, 7.0, 9.0]
    assert a == [1.0, 2.0, 3.0]


def test_length_derived_from_shortest_input():
    assert add_f32([1.0, 2.0, 3.0, 4.0, 5.0], [1.0, 1.0, 1.0]) == [2.0, 3.0, 4.0]


def test_input_strides():
    assert add_f32([1.0, 2.0, 3.0, 4.0], [10.0, 20.0], 2, step1=2) == [11.0, 23.0]


def test_output_stride_leaves_gaps_untouched():
    out = [-1.0] * 4
    add_f32([1.0, 3.0], [10.0, 20.0], 2, step_out=2, out=out)
    assert out == [11.0, -1.0, 23.0, -1.0]


def test_zero_step_broadcasts_single_element():
    assert mul_f32([1.0, 2.0, 3.0], [2.0], step2=0) == [2.0, 4.0, 6.0]


def test_empty_inputs_give_empty_output():
    assert add_f32([], []) == []


def test_negative_length_does_nothing():
    out = [7.0, 7.0]
    add_f32([1.0, 1.0], [1.0, 1.0], -3, out=out)
    assert out == [7.0, 7.0]


def test_float32_rounding():
    assert add_f32([16777216.0], [1.0]) == [16777216.0]


def test_float32_overflow_becomes_infinity():
    (value,) = mul_f32([1e20], [1e20])
    assert math.isinf(value) and value > 0


def test_add_s16_wraps():
    assert add_s16([32767], [1]) == [-32768]


def test_add_s16_arithmetic_shift():
    assert add_s16([-3], [0], shift=1) == [-2]


def test_mul_s16_default_q15_shift():
    assert mul_s16([16384], [16384]) == [8192]


def test_mul_s16_wraps_after_shift():
    assert mul_s16([-32768], [-32768], shift=15) == [-32768]


def test_mulc_s16_negative_values():
    assert mulc_s16([-16], c=0x2000) == [-4]


@pytest.mark.parametrize(
    "call",
    [
        lambda: add_f32(None, [1.0]),
        lambda: sub_f32([1.0], None),
        lambda: mul_f32(None, None),
        lambda: addc_f32(None, 1, 1.0),
        lambda: mulc_f32(None, 1, 1.0),
        lambda: add_s16(None, [1]),
        lambda: mul_s16([1], None),
        lambda: mulc_s16(None, 1, 1),
    ],
)
def test_missing_input_raises(call):
    with pytest.raises(ValueError):
        call()


def test_negative_step_raises():
    with pytest.raises(ValueError):
        add_f32([1.0, 2.0], [1.0, 2.0], 2, step1=-1)


def test_all_zero_steps_without_length_raises():
    with pytest.raises(ValueError):
        addc_f32([1.0], c=1.0, step_in=0, step_out=0)


def test_length_too_long_raises_index_error():
    with pytest.raises(IndexError):
        add_f32([1.0], [1.0], 2)