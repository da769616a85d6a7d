# espdsp

Small signal-processing building blocks in plain Python, computed in
single precision (float functions) or 16-bit fixed point (integer functions)
so that results match what those fixed-width types would give.

- `espdsp.arith`: element-wise vector arithmetic with independent strides
  for each input and for the output: `add_f32`, `sub_f32`, `mul_f32`,
  `addc_f32`, `mulc_f32` on float data, and `add_s16`, `mul_s16`, `mulc_s16`
  on 16-bit integer data (results are shifted right and wrapped to 16 bits).
- `espdsp.fastsqrt`: bit-level approximations of the square root and the
  inverse square root: `sqrtf`, `inverted_sqrtf`, and `sqrt_f32` for a
  sequence.
- `espdsp.fir`: a streaming FIR filter (`Fir`) and a decimating FIR filter
  (`FirDecimator`); both keep their delay line between calls to `process`
  and can be cleared with `reset`.
- `espdsp.biquad`: a direct form II second-order IIR filter (`Biquad`) and
  coefficient generators `gen_lpf`, `gen_hpf`, `gen_bpf`, `gen_bpf0db`,
  `gen_notch`, `gen_allpass360`, `gen_allpass180`, `gen_peaking_eq`,
  `gen_low_shelf`, `gen_high_shelf`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Vector arithmetic

Every function reads `length` elements, taking every `step`-th item of each
input, and writes to every `step_out`-th slot of `out`. When `out` is
omitted a new list is returned; when `length` is omitted it is the largest
count every sequence can supply. Passing `None` as an input or a negative
step raises `ValueError`.

```python
from espdsp.arith import add_f32, mulc_s16

add_f32([1.0, 2.0], [10.0, 20.0], 2, 1, 1, 1)     # [11.0, 22.0]
mulc_s16([16, 32, 48], 3, 0x2000, 1, 1)            # Q15 multiply: [4, 8, 12]
```

Passing the same list as an input and as `out` works in place.

## Fast square roots

`sqrtf(x)` halves the exponent bits of `x`; its error is a few percent at
worst. `inverted_sqrtf(x)` approximates `1 / sqrt(x)` with one
Newton-Raphson step. `sqrt_f32(data, length=None)` applies `sqrtf` to the
first `length` items and raises `ValueError` if `length` exceeds the data.

## FIR filters

```python
from espdsp.fir import Fir, FirDecimator

fir = Fir([0.25, 0.25, 0.25, 0.25])
first = fir.process([1.0, 0.0, 0.0])
second = fir.process([0.0, 0.0])                   # continues from `first`

decimator = FirDecimator([1.0, 0.0, 0.0, 0.0], decim=4, start_pos=0)
decimated = decimator.process(range(16))           # one output per four inputs
```

`Fir` needs at least one coefficient; `FirDecimator` raises `ValueError`
when `start_pos` is not below `decim`.

## Biquad filters

```python
from espdsp.biquad import Biquad, gen_lpf

lowpass = Biquad(gen_lpf(0.1, 1.0))
filtered = lowpass.process([1.0] + [0.0] * 31)
```

Frequencies given to the generators are normalised to the sample rate, so
they lie between 0 and 0.5; Q factors at or below 0.0001 are raised to
0.0001. Coefficients are returned as `[b0, b1, b2, a1, a2]` with `a0` taken
to be 1. `gen_allpass180` returns the same coefficients as `gen_allpass360`,
and `gen_peaking_eq` the same as `gen_bpf0db`. `Biquad` takes exactly five
coefficients and an optional two-value starting state.

## What this package does not do

It has no FFT, DCT, window, convolution, correlation or matrix routines and
no signal generators, and it offers no command-line tool: it is a library
of the functions and classes listed above.