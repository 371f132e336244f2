"""Bit counting and bitstream autocorrelation."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["count_bits", "BitstreamACF"]


def count_bits(i: int) -> int:
    """Return the number of set bits in the non-negative integer ``i``."""
    if i < 0:
        raise ValueError("count_bits expects a non-negative integer")
    return bin(i).count("1")


class BitstreamACF:
    """Autocorrelation of a bit stream with a shifted copy of itself.

    The stream is held as a sequence of unsigned words of ``value_size``
    bits each, least significant bit first. Calling the object with a bit
    position XORs the first half of the stream with the stream shifted by
    that position and counts the mismatching bits: the lower the count,
    the stronger the periodicity at that position.
    """

    def __init__(self, words: Sequence[int], value_size: int = 64) -> None:
        if value_size <= 0:
            raise ValueError("value_size must be positive")
        if len(words) < 2:
            raise ValueError("the bit stream needs at least two words")
        self.words = words
        self.value_size = value_size
        self.mid_array = max(len(words) // 2 - 1, 1)
        self._mask = (1 << value_size) - 1

    def __call__(self, pos: int) -> int:
        """Count mismatching bits between the stream and itself shifted by ``pos``."""
        if pos < 0:
            raise ValueError("position must be non-negative")
        index, shift = divmod(pos, self.value_size)
        words = self.words
        head = words[: self.mid_array]
        if shift == 0:
            shifted = words[index : index + self.mid_array]
            return sum(count_bits(a ^ b) for a, b in zip(head, shifted, strict=True))

        shift2 = self.value_size - shift
        count = 0
        for i, word in enumerate(head):
            low = words[index + i] >> shift
            high = (words[index + i + 1] << shift2) & self._mask
            count += count_bits(word ^ (low | high))
        return count