import math
import random

import pytest

from espdsp.fastsqrt import inverted_sqrtf, sqrt_f32, sqrtf


def _error_db(expected, actual):
    return 20 * math.log10(abs((expected - actual) / expected) + 0.000001)


def test_sqrtf_error_below_minus_25_db_on_random_values():
    rng = random.Random(1234)
    for _ in range(20000):
        test_value = float(rng.randint(1, 2**31 - 1))
        expected = math.sqrt(test_value)
        actual = sqrtf(test_value)
        assert _error_db(expected, actual) <= -25, test_value


def test_sqrt_f32_squares():
    n = 256
    expected = [i * 10.0 for i in range(n)]
    data = [y * y for y in expected]
    result = sqrt_f32(data, n)
    assert len(result) == n
    for got, want in zip(result[1:], expected[1:]):
        assert _error_db(want, got) <= -25
    assert 0.0 <= result[0] < 1e-18


def test_sqrt_f32_default_length_uses_whole_sequence():
    data = [1.0, 4.0, 9.0, 16.0]
    assert sqrt_f32(data) == [sqrtf(v) for v in data]


def test_sqrt_f32_partial_length():
    data = [1.0, 4.0, 9.0]
    assert sqrt_f32(data, 2) == [sqrtf(1.0), sqrtf(4.0)]


def test_sqrt_f32_rejects_none():
    with pytest.raises(ValueError):
        sqrt_f32(None, 3)


def test_sqrt_f32_rejects_length_beyond_data():
    with pytest.raises(ValueError):
        sqrt_f32([1.0, 2.0], 5)


@pytest.mark.parametrize("value", [0.01, 0.5, 1.0, 2.0, 3.0, 100.0, 12345.0, 1e10])
def test_inverted_sqrtf_close_to_reciprocal_root(value):
    expected = 1.0 / math.sqrt(value)
    assert abs(inverted_sqrtf(value) - expected) / expected < 0.002


def test_sqrtf_is_monotonic_on_powers_of_two():
    results = [sqrtf(2.0**k) for k in range(-10, 20)]
    assert results == sorted(results)