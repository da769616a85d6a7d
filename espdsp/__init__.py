"""Vector arithmetic, fast square roots, FIR and biquad IIR filters."""

__version__ = "0.1.0"
__all__ = ["arith", "fastsqrt", "fir", "biquad"]