import math

import pytest

from qdsp.trig import (
    fastcos,
    fastcosfull,
    fastercos,
    fastercosfull,
    fastersin,
    fastersinfull,
    fastertan,
    fastertanfull,
    fastsin,
    fastsinfull,
    fasttan,
    fasttanfull,
)

BASIC_RANGE = [i * math.pi / 32 for i in range(-32, 33)]
TAN_RANGE = [i / 20 for i in range(-20, 21)]
WIDE_RANGE = [i * 0.37 for i in range(-100, 101)]


def test_fastsin_zero_is_zero():
    assert fastsin(0.0) == 0.0
    assert fastersin(0.0) == 0.0


@pytest.mark.parametrize("x", BASIC_RANGE)
def test_fastsin_close_to_sin(x):
    assert fastsin(x) == pytest.approx(math.sin(x), abs=1e-3)


@pytest.mark.parametrize("x", BASIC_RANGE)
def test_fastersin_close_to_sin(x):
    assert fastersin(x) == pytest.approx(math.sin(x), abs=2e-2)


@pytest.mark.parametrize("x", BASIC_RANGE)
def test_fastsin_is_odd(x):
    assert fastsin(-x) == -fastsin(x)
    assert fastersin(-x) == -fastersin(x)


@pytest.mark.parametrize("x", BASIC_RANGE)
def test_fastcos_close_to_cos(x):
    assert fastcos(x) == pytest.approx(math.cos(x), abs=1e-3)


@pytest.mark.parametrize("x", BASIC_RANGE)
def test_fastercos_close_to_cos(x):
    assert fastercos(x) == pytest.approx(math.cos(x), abs=2e-2)


@pytest.mark.parametrize("x", BASIC_RANGE)
def test_fastercos_is_even(x):
    assert fastercos(-x) == fastercos(x)


def test_fastercos_at_zero_is_one():
    assert fastercos(0.0) == 1.0


@pytest.mark.parametrize("x", WIDE_RANGE)
def test_fastsinfull_close_to_sin(x):
    assert fastsinfull(x) == pytest.approx(math.sin(x), abs=1e-3)


@pytest.mark.parametrize("x", WIDE_RANGE)
def test_fastersinfull_close_to_sin(x):
    assert fastersinfull(x) == pytest.approx(math.sin(x), abs=2e-2)


@pytest.mark.parametrize("x", WIDE_RANGE)
def test_fastcosfull_close_to_cos(x):
    assert fastcosfull(x) == pytest.approx(math.cos(x), abs=1e-3)


@pytest.mark.parametrize("x", WIDE_RANGE)
def test_fastercosfull_close_to_cos(x):
    assert fastercosfull(x) == pytest.approx(math.cos(x), abs=2e-2)


@pytest.mark.parametrize("x", [0.3, 1.1, 2.5, -0.7, -2.9])
def test_full_variants_are_periodic(x):
    shifted = x + 4 * math.pi
    assert fastsinfull(shifted) == pytest.approx(fastsinfull(x), abs=1e-3)
    assert fastcosfull(shifted) == pytest.approx(fastcosfull(x), abs=1e-3)


@pytest.mark.parametrize("x", TAN_RANGE)
def test_fasttan_close_to_tan(x):
    assert fasttan(x) == pytest.approx(math.tan(x), abs=5e-3)


@pytest.mark.parametrize("x", TAN_RANGE)
def test_fastertan_close_to_tan(x):
    assert fastertan(x) == pytest.approx(math.tan(x), abs=6e-2)


@pytest.mark.parametrize("k", [-3, -1, 0, 2, 5])
@pytest.mark.parametrize("x", [-1.0, -0.4, 0.2, 0.9])
def test_fasttanfull_close_to_tan(x, k):
    arg = x + k * math.pi
    assert fasttanfull(arg) == pytest.approx(math.tan(x), abs=5e-3)
    assert fastertanfull(arg) == pytest.approx(math.tan(x), abs=6e-2)


def test_sin_cos_pythagorean_identity():
    for x in BASIC_RANGE:
        assert fastsin(x) ** 2 + fastcos(x) ** 2 == pytest.approx(1.0, abs=2e-3)


@pytest.mark.parametrize(
    "func",
    [fastsinfull, fastersinfull, fastcosfull, fastercosfull, fasttanfull, fastertanfull],
)
@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_full_variants_reject_non_finite(func, value):
    with pytest.raises(ValueError):
        func(value)