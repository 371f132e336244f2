import pytest

from qdsp.bits import BitstreamACF, count_bits


@pytest.mark.parametrize("k", [0, 1, 7, 31, 32, 63, 100])
def test_single_bit_counts_one(k):
    assert count_bits(1 << k) == 1


@pytest.mark.parametrize("n", [0, 1, 5, 32, 64, 128])
def test_all_ones_counts_width(n):
    assert count_bits((1 << n) - 1) == n


def test_disjoint_bits_add_up():
    a = 0b1011_0000
    b = 0b0000_0110
    assert count_bits(a | b) == count_bits(a) + count_bits(b)


def test_zero_has_no_bits():
    assert count_bits(0) == 0


def test_negative_rejected():
    with pytest.raises(ValueError):
        count_bits(-1)


def test_mid_array_is_half_minus_one():
    words = [0xAA] * 8
    acf = BitstreamACF(words, 8)
    assert acf.mid_array == len(words) // 2 - 1


def test_mid_array_has_floor_of_one():
    acf = BitstreamACF([0, 0, 0], 8)
    assert acf.mid_array == 1


def test_zero_shift_is_perfect_correlation():
    words = [0x5A, 0x3C, 0x5A, 0x3C, 0x5A, 0x3C]
    acf = BitstreamACF(words, 8)
    assert acf(0) == 0


def test_alternating_bits_period_two():
    words = [0xAA] * 8
    acf = BitstreamACF(words, 8)
    assert acf(2) == 0
    assert acf(1) == acf.mid_array * 8


def test_shift_across_word_boundary():
    words = [0x0F] * 8
    acf = BitstreamACF(words, 8)
    assert acf(8) == 0
    assert acf(4) == acf.mid_array * 8


def test_word_aligned_shift_counts_mismatches():
    words = [0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00]
    acf = BitstreamACF(words, 8)
    assert acf(16) == 0
    assert acf(8) == acf.mid_array * 8


def test_sixty_four_bit_words_default():
    words = [0xAAAAAAAAAAAAAAAA] * 6
    acf = BitstreamACF(words)
    assert acf.value_size == 64
    assert acf(2) == 0
    assert acf(1) == acf.mid_array * 64


def test_too_few_words_rejected():
    with pytest.raises(ValueError):
        BitstreamACF([0xFF], 8)


def test_bad_value_size_rejected():
    with pytest.raises(ValueError):
        BitstreamACF([0, 0, 0, 0], 0)


def test_negative_position_rejected():
    acf = BitstreamACF([0] * 4, 8)
    with pytest.raises(ValueError):
        acf(-1)