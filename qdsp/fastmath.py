"""Fast approximations of exponentials, logarithms and powers.

The approximations work directly on the IEEE-754 single precision bit
layout: exponentials assemble a float from an integer built out of the
argument, logarithms read the integer image of a float back as a number.
"""

from __future__ import annotations

import math
import struct

__all__ = [
    "fastpow2",
    "fastexp",
    "fasterpow2",
    "fasterexp",
    "fastlog2",
    "fastlog",
    "fasterlog2",
    "fasterlog",
    "fastpow",
    "fasterpow",
]

_FLOAT32_MAX = 3.4028234663852886e38
_MANTISSA_SCALE = float(1 << 23)
_INV_LN2 = 1.442695040
_LN2 = 0.69314718


def _f32(x: float) -> float:
    """Round a Python float to the nearest single precision value."""
    if math.isnan(x) or math.isinf(x):
        return x
    if abs(x) > _FLOAT32_MAX:
        return math.copysign(math.inf, x)
    return struct.unpack("<f", struct.pack("<f", x))[0]


def _float_to_bits(x: float) -> int:
    """Return the 32-bit integer image of ``x`` as a single precision float."""
    return struct.unpack("<I", struct.pack("<f", _f32(x)))[0]


def _bits_to_float(i: int) -> float:
    """Return the single precision float whose bit pattern is ``i``."""
    return struct.unpack("<f", struct.pack("<I", i & 0xFFFFFFFF))[0]


def _to_uint32(x: float) -> int:
    """Truncate ``x`` towards zero and wrap it into 32 unsigned bits."""
    return int(x) & 0xFFFFFFFF


def fastpow2(p: float) -> float:
    """Approximate ``2 ** p``; arguments below -126 are clipped."""
    if math.isnan(p):
        return math.nan
    offset = 1.0 if p < 0 else 0.0
    clipp = -126.0 if p < -126 else _f32(p)
    if math.isinf(clipp):
        return math.inf
    w = int(clipp)
    z = clipp - w + offset
    bits = _to_uint32(
        _MANTISSA_SCALE
        * (clipp + 121.2740575 + 27.7280233 / (4.84252568 - z) - 1.49012907 * z)
    )
    return _bits_to_float(bits)


def fastexp(p: float) -> float:
    """Approximate ``e ** p``."""
    return fastpow2(_INV_LN2 * p)


def fasterpow2(p: float) -> float:
    """Coarser and cheaper approximation of ``2 ** p``."""
    if math.isnan(p):
        return math.nan
    clipp = -126.0 if p < -126 else _f32(p)
    if math.isinf(clipp):
        return math.inf
    return _bits_to_float(_to_uint32(_MANTISSA_SCALE * (clipp + 126.94269504)))


def fasterexp(p: float) -> float:
    """Coarser and cheaper approximation of ``e ** p``."""
    return fasterpow2(_INV_LN2 * p)


def fastlog2(x: float) -> float:
    """Approximate ``log2(x)`` for positive ``x``."""
    i = _float_to_bits(x)
    mx = _bits_to_float((i & 0x007FFFFF) | 0x3F000000)
    y = i * 1.1920928955078125e-7
    return y - 124.22551499 - 1.498030302 * mx - 1.72587999 / (0.3520887068 + mx)


def fastlog(x: float) -> float:
    """Approximate the natural logarithm of positive ``x``."""
    return _LN2 * fastlog2(x)


def fasterlog2(x: float) -> float:
    """Coarser and cheaper approximation of ``log2(x)``."""
    return _float_to_bits(x) * 1.1920928955078125e-7 - 126.94269504


def fasterlog(x: float) -> float:
    """Coarser and cheaper approximation of the natural logarithm."""
    return _float_to_bits(x) * 8.2629582881927490e-8 - 87.989971088


def fastpow(x: float, p: float) -> float:
    """Approximate ``x ** p`` for positive ``x``."""
    return fastpow2(p * fastlog2(x))


def fasterpow(x: float, p: float) -> float:
    """Coarser and cheaper approximation of ``x ** p`` for positive ``x``."""
    return fasterpow2(p * fasterlog2(x))