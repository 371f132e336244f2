"""Fast approximations of sine, cosine and tangent.

``fastsin`` and ``fastcos`` are accurate for arguments in ``[-pi, pi]``
and ``fasttan`` for ``[-pi/2, pi/2]``. The ``*full`` variants first
reduce any finite argument into that range. The reduction loses
accuracy once ``|x|`` is much larger than about a thousand. The
``faster`` variants use shorter polynomials and are coarser.
"""

from __future__ import annotations

import math

__all__ = [
    "fastsin",
    "fastersin",
    "fastsinfull",
    "fastersinfull",
    "fastcos",
    "fastercos",
    "fastcosfull",
    "fastercosfull",
    "fasttan",
    "fastertan",
    "fasttanfull",
    "fastertanfull",
]

_FOUR_OVER_PI = 1.2732395447351627
_FOUR_OVER_PI_SQ = 0.40528473456935109
_TWO_OVER_PI = 0.63661977236758134
_TWO_PI = 6.2831853071795865
_INV_TWO_PI = 0.15915494309189534
_HALF_PI = 1.5707963267948966
_HALF_PI_MINUS_TWO_PI = -4.7123889803846899

_SIN_Q = 0.78444488374548933
_SIN_P = 0.20363937680730309
_SIN_R = 0.015124940802184233
_SIN_S = -0.0032225901625579573

_FASTER_SIN_Q = 0.77633023248007499
_FASTER_SIN_P = 0.22308510060189463

_FASTER_COS_P = 0.54641335845679634


def _parabola(x: float) -> float:
    """Parabolic first estimate of ``sin(x)`` on ``[-pi, pi]``."""
    return _FOUR_OVER_PI * x - _FOUR_OVER_PI_SQ * x * abs(x)


def _reduce(x: float) -> float:
    """Map ``x`` to the offset used by the full-range variants."""
    if not math.isfinite(x):
        raise ValueError(f"argument must be finite, got {x!r}")
    k = int(x * _INV_TWO_PI)
    half = -0.5 if x < 0 else 0.5
    return (half + k) * _TWO_PI


def fastsin(x: float) -> float:
    """Approximate ``sin(x)`` for ``x`` in ``[-pi, pi]``."""
    sign = math.copysign(1.0, x)
    qpprox = _parabola(x)
    qpproxsq = qpprox * qpprox
    p = sign * _SIN_P
    r = sign * _SIN_R
    s = sign * _SIN_S
    return _SIN_Q * qpprox + qpproxsq * (p + qpproxsq * (r + qpproxsq * s))


def fastersin(x: float) -> float:
    """Coarser and cheaper approximation of ``sin(x)`` on ``[-pi, pi]``."""
    p = math.copysign(1.0, x) * _FASTER_SIN_P
    qpprox = _parabola(x)
    return qpprox * (_FASTER_SIN_Q + p * qpprox)


def fastsinfull(x: float) -> float:
    """Approximate ``sin(x)`` for any finite ``x``."""
    return fastsin(_reduce(x) - x)


def fastersinfull(x: float) -> float:
    """Coarser approximation of ``sin(x)`` for any finite ``x``."""
    return fastersin(_reduce(x) - x)


def fastcos(x: float) -> float:
    """Approximate ``cos(x)`` for ``x`` in ``[-pi, pi]``."""
    offset = _HALF_PI_MINUS_TWO_PI if x > _HALF_PI else _HALF_PI
    return fastsin(x + offset)


def fastercos(x: float) -> float:
    """Coarser and cheaper approximation of ``cos(x)`` on ``[-pi, pi]``."""
    qpprox = 1.0 - _TWO_OVER_PI * abs(x)
    return qpprox + _FASTER_COS_P * qpprox * (1.0 - qpprox * qpprox)


def fastcosfull(x: float) -> float:
    """Approximate ``cos(x)`` for any finite ``x``."""
    return fastsinfull(x + _HALF_PI)


def fastercosfull(x: float) -> float:
    """Coarser approximation of ``cos(x)`` for any finite ``x``."""
    return fastersinfull(x + _HALF_PI)


def fasttan(x: float) -> float:
    """Approximate ``tan(x)`` for ``x`` in ``[-pi/2, pi/2]``."""
    return fastsin(x) / fastsin(x + _HALF_PI)


def fastertan(x: float) -> float:
    """Coarser and cheaper approximation of ``tan(x)`` on ``[-pi/2, pi/2]``."""
    return fastersin(x) / fastercos(x)


def fasttanfull(x: float) -> float:
    """Approximate ``tan(x)`` for any finite ``x``."""
    xnew = x - _reduce(x)
    return fastsin(xnew) / fastcos(xnew)


def fastertanfull(x: float) -> float:
    """Coarser approximation of ``tan(x)`` for any finite ``x``."""
    xnew = x - _reduce(x)
    return fastersin(xnew) / fastercos(xnew)