"""Audio DSP building blocks: fast math approximations and bitstream autocorrelation."""

__version__ = "0.1.0"

__all__ = ["fastmath", "bits", "special", "hyperbolic", "trig"]