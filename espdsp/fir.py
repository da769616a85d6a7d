"""Finite impulse response filters, plain and decimating, in float32."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from espdsp.arith import _to_f32

__all__ = ["Fir", "FirDecimator"]


class Fir:
    """FIR filter with a circular delay line; state persists between calls."""

    def __init__(self, coeffs: Sequence[float]) -> None:
        if coeffs is None or len(coeffs) == 0:
            raise ValueError("coeffs must hold at least one coefficient")
        self.coeffs = [_to_f32(c) for c in coeffs]
        self.delay = [0.0] * len(self.coeffs)
        self.pos = 0

    @property
    def n(self) -> int:
        """Number of filter taps."""
        return len(self.coeffs)

    def reset(self) -> None:
        """Clear the delay line."""
        self.delay = [0.0] * self.n
        self.pos = 0

    def _push(self, sample: float) -> None:
        self.delay[self.pos] = _to_f32(sample)
        self.pos = (self.pos + 1) % self.n

    def _output(self) -> float:
        # Oldest sample pairs with the last coefficient, newest with the first.
        ordered = self.delay[self.pos:] + self.delay[: self.pos]
        acc = 0.0
        for coeff, value in zip(reversed(self.coeffs), ordered):
            acc = _to_f32(acc + _to_f32(coeff * value))
        return acc

    def process(self, samples: Iterable[float]) -> list[float]:
        """Filter ``samples``, returning one output per input."""
        outputs = []
        for sample in samples:
            self._push(sample)
            outputs.append(self._output())
        return outputs


class FirDecimator(Fir):
    """FIR filter that emits one output for every ``decim`` inputs."""

    def __init__(self, coeffs: Sequence[float], decim: int, start_pos: int = 0) -> None:
        if start_pos >= decim:
            raise ValueError(
                f"start_pos must be below decim ({decim}), got {start_pos}"
            )
        super().__init__(coeffs)
        self.decim = decim
        self.start_pos = start_pos
        self.d_pos = start_pos

    def reset(self) -> None:
        """Clear the delay line and restore the decimation counter."""
        super().reset()
        self.d_pos = self.start_pos

    def process(self, samples: Iterable[float]) -> list[float]:
        """Filter ``samples``, returning only the decimated outputs."""
        outputs = []
        for sample in samples:
            self._push(sample)
            self.d_pos += 1
            if self.d_pos >= self.decim:
                self.d_pos = 0
                outputs.append(self._output())
        return outputs