# qdsp

Small building blocks for audio signal processing in pure Python. It has
fast approximations of common math functions and an autocorrelation over
bit streams. The package has no dependencies outside the standard library.

## Modules

- `qdsp.fastmath`: approximations of `pow2`, `exp`, `log2`, `log` and `pow`.
  They work on the IEEE-754 single precision bit layout. The functions are
  `fastpow2`, `fastexp`, `fastlog2`, `fastlog` and `fastpow`. The coarser and
  cheaper variants are `fasterpow2`, `fasterexp`, `fasterlog2`, `fasterlog`
  and `fasterpow`. Arguments to the `pow2` and `exp` functions below -126 (in
  base two) are clipped.
- `qdsp.special`: approximations of the error function and related
  functions. It has `fasterf`, `fastererf`, `fasterfc`, `fastererfc`,
  `fastinverseerf`, `fasterinverseerf`, `fastlgamma`, `fasterlgamma`,
  `fastdigamma` and `fasterdigamma`. The inverse error functions need an
  argument strictly between -1 and 1. The gamma and digamma functions need a
  positive argument. Any other argument raises `ValueError`.
- `qdsp.hyperbolic`: approximations of hyperbolic functions, Lambert W and the
  sigmoid.
  - `fastsinh`, `fastcosh`, `fasttanh` and their `faster*` variants.
  - `fastlambertw` and `fasterlambertw`, for the principal branch W0(x).
  - `fastlambertwexpx` and `fasterlambertwexpx`, for W0(exp(x)).
  - `fastsigmoid` and `fastersigmoid`.
- `qdsp.trig`: approximations of `sin`, `cos` and `tan`.
  - `fastsin` and `fastcos` are for arguments in `[-pi, pi]`.
  - `fasttan` is for arguments in `[-pi/2, pi/2]`.
  - The `*full` variants (`fastsinfull`, `fastcosfull`, `fasttanfull` and
    their `faster*` forms) first reduce any finite argument into that range.
    A non-finite argument raises `ValueError`.
- `qdsp.bits`: bit counting and bitstream autocorrelation.
  - `count_bits(i)` counts the set bits of a non-negative integer.
  - `BitstreamACF(words, value_size=64)` holds a bit stream stored as words
    of `value_size` bits each, least significant bit first. Calling it with a
    bit position XORs the first half of the stream with the stream shifted by
    that position. It returns the number of mismatching bits. A lower count
    means stronger periodicity at that position.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from qdsp.fastmath import fastlog2, fastpow2

fastlog2(8.0)   # close to 3.0
fastpow2(3.0)   # close to 8.0
```

```python
from qdsp.trig import fastsinfull

fastsinfull(10.0)  # close to math.sin(10.0)
```

```python
from qdsp.bits import BitstreamACF

acf = BitstreamACF([0b1010_1010] * 8, 8)
acf(0)  # 0: the stream matches itself
acf(1)  # 24: shifted by one bit, every compared bit differs
```

## What it does not do

The package is a set of numeric functions and has no signal chain. It does
not read or write audio files and does not talk to audio or MIDI devices. It
has no oscillators, filters or pitch detector. It also has no types for
durations, frequencies, intervals or pitches. All functions take and return
plain Python numbers.