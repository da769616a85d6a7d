"""Second-order IIR (biquad) filtering and coefficient design in float32.

Coefficient sets are five numbers ``[b0, b1, b2, a1, a2]``, normalised so
that ``a0 == 1``.  Frequencies are relative to the sample rate (0 .. 0.5).
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from espdsp.arith import _to_f32

__all__ = [
    "Biquad",
    "gen_lpf",
    "gen_hpf",
    "gen_bpf",
    "gen_bpf0db",
    "gen_notch",
    "gen_allpass360",
    "gen_allpass180",
    "gen_peaking_eq",
    "gen_low_shelf",
    "gen_high_shelf",
]

_MIN_Q = 0.0001


class Biquad:
    """Direct form II biquad; the two-sample delay line persists between calls."""

    def __init__(self, coeffs: Sequence[float], state: Sequence[float] | None = None) -> None:
        if coeffs is None or len(coeffs) != 5:
            raise ValueError("coeffs must hold exactly five values: b0, b1, b2, a1, a2")
        self.coeffs = [_to_f32(c) for c in coeffs]
        if state is None:
            self.state = [0.0, 0.0]
        else:
            if len(state) != 2:
                raise ValueError("state must hold exactly two values")
            self.state = [_to_f32(w) for w in state]

    def reset(self) -> None:
        """Clear the delay line."""
        self.state = [0.0, 0.0]

    def process(self, samples: Iterable[float]) -> list[float]:
        """Filter ``samples``, returning one output per input."""
        b0, b1, b2, a1, a2 = self.coeffs
        w0, w1 = self.state
        outputs = []
        for sample in samples:
            d0 = _to_f32(_to_f32(_to_f32(sample) - _to_f32(a1 * w0)) - _to_f32(a2 * w1))
            out = _to_f32(_to_f32(_to_f32(b0 * d0) + _to_f32(b1 * w0)) + _to_f32(b2 * w1))
            outputs.append(out)
            w1, w0 = w0, d0
        self.state = [w0, w1]
        return outputs


def _prepare(f: float, q_factor: float) -> tuple[float, float, float]:
    """Return (cos w0, sin w0, alpha) rounded to float32."""
    q = _to_f32(_MIN_Q if q_factor <= _MIN_Q else q_factor)
    w0 = _to_f32(2 * math.pi * f)
    c = _to_f32(math.cos(w0))
    s = _to_f32(math.sin(w0))
    alpha = _to_f32(s / _to_f32(2 * q))
    return c, s, alpha


def _normalise(b0: float, b1: float, b2: float, a0: float, a1: float, a2: float) -> list[float]:
    return [_to_f32(v / a0) for v in (b0, b1, b2, a1, a2)]


def _amplitude(gain: float) -> float:
    return _to_f32(math.sqrt(10.0 ** (gain / 20.0)))


def gen_lpf(f: float, q_factor: float) -> list[float]:
    """Low-pass filter with cut-off ``f``."""
    c, _, alpha = _prepare(f, q_factor)
    b0 = (1 - c) / 2
    return _normalise(b0, 1 - c, b0, 1 + alpha, -2 * c, 1 - alpha)


def gen_hpf(f: float, q_factor: float) -> list[float]:
    """High-pass filter with cut-off ``f``."""
    c, _, alpha = _prepare(f, q_factor)
    b0 = (1 + c) / 2
    return _normalise(b0, -(1 + c), b0, 1 + alpha, -2 * c, 1 - alpha)


def gen_bpf(f: float, q_factor: float) -> list[float]:
    """Band-pass filter centred on ``f`` with peak gain of Q."""
    c, s, alpha = _prepare(f, q_factor)
    b0 = s / 2
    return _normalise(b0, 0.0, -b0, 1 + alpha, -2 * c, 1 - alpha)


def gen_bpf0db(f: float, q_factor: float) -> list[float]:
    """Band-pass filter centred on ``f`` with 0 dB passband gain."""
    c, _, alpha = _prepare(f, q_factor)
    return _normalise(alpha, 0.0, -alpha, 1 + alpha, -2 * c, 1 - alpha)


def gen_notch(f: float, gain: float, q_factor: float) -> list[float]:
    """Notch filter at ``f`` with ``gain`` dB in the stop band."""
    c, _, alpha = _prepare(f, q_factor)
    a = _amplitude(gain)
    return _normalise(1 + alpha * a, -2 * c, 1 - alpha * a, 1 + alpha, -2 * c, 1 - alpha)


def gen_allpass360(f: float, q_factor: float) -> list[float]:
    """All-pass filter with 360 degree phase shift around ``f``."""
    c, _, alpha = _prepare(f, q_factor)
    return _normalise(1 - alpha, -2 * c, 1 + alpha, 1 + alpha, -2 * c, 1 - alpha)


def gen_allpass180(f: float, q_factor: float) -> list[float]:
    """All-pass filter for the 180 degree case; same coefficients as the 360 one."""
    c, _, alpha = _prepare(f, q_factor)
    return _normalise(1 - alpha, -2 * c, 1 + alpha, 1 + alpha, -2 * c, 1 - alpha)


def gen_peaking_eq(f: float, q_factor: float) -> list[float]:
    """Peaking filter at ``f``; same coefficients as :func:`gen_bpf0db`."""
    c, _, alpha = _prepare(f, q_factor)
    return _normalise(alpha, 0.0, -alpha, 1 + alpha, -2 * c, 1 - alpha)


def gen_low_shelf(f: float, gain: float, q_factor: float) -> list[float]:
    """Low shelf filter at ``f`` with ``gain`` dB."""
    c, _, alpha = _prepare(f, q_factor)
    a = _amplitude(gain)
    k = 2 * math.sqrt(a) * alpha
    b0 = a * ((a + 1) - (a - 1) * c + k)
    b1 = 2 * a * ((a - 1) - (a + 1) * c)
    b2 = a * ((a + 1) - (a - 1) * c - k)
    a0 = (a + 1) + (a - 1) * c + k
    a1 = -2 * ((a - 1) + (a + 1) * c)
    a2 = (a + 1) + (a - 1) * c - k
    return _normalise(b0, b1, b2, a0, a1, a2)


def gen_high_shelf(f: float, gain: float, q_factor: float) -> list[float]:
    """High shelf filter at ``f`` with ``gain`` dB."""
    c, _, alpha = _prepare(f, q_factor)
    a = _amplitude(gain)
    k = 2 * math.sqrt(a) * alpha
    b0 = a * ((a + 1) + (a - 1) * c + k)
    b1 = -2 * a * ((a - 1) + (a + 1) * c)
    b2 = a * ((a + 1) + (a - 1) * c - k)
    a0 = (a + 1) - (a - 1) * c + k
    a1 = 2 * ((a - 1) - (a + 1) * c)
    a2 = (a + 1) - (a - 1) * c - k
    return _normalise(b0, b1, b2, a0, a1, a2)