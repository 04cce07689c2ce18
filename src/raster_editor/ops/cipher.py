"""
cipher.py — XOR keystream encryption with a pinned, portable PRNG

WHAT THIS MODULE DOES
---------------------
encrypt_decrypt(grid, model, key) XORs every pixel (row-major order) with one
pseudo-random draw:
  • color images      draw from [0, 2**24) and XOR the whole packed pixel
                      (the alpha byte of 0xAARRGGBB is left untouched)
  • grayscale images  draw from [0, 256) and XOR the brightness
XOR is self-inverse, so a second call with the same key restores the image.

WHY NOT numpy.random?
---------------------
Decryption only works if the keystream is reproduced bit-for-bit. numpy's
Generator methods document no cross-version stream guarantee, so the
generator here is spelled out completely:

    Lcg48 — 48-bit linear congruential generator
        state_0   = (seed XOR 0x5DEECE66D) mod 2**48
        state_n+1 = (0x5DEECE66D · state_n + 0xB) mod 2**48
        next_bits(b) = state_n+1 >> (48 - b)

    next_below(bound):
        power of two:  (bound · next_bits(31)) >> 31
        otherwise:     rejection sampling on next_bits(31) % bound

These are the published java.util.Random constants and bounded-draw rules,
so any implementation of that algorithm produces the same ciphertext.
"""

from __future__ import annotations
import logging

import numpy as np

from raster_editor.color.color_model import ColorModel

logger = logging.getLogger(__name__)

COLOR_KEY_SPACE = 1 << 24
GRAY_KEY_SPACE = 256


class Lcg48:
    MULTIPLIER = 0x5DEECE66D
    INCREMENT = 0xB
    MASK = (1 << 48) - 1

    def __init__(self, seed: int) -> None:
        self._state = (int(seed) ^ self.MULTIPLIER) & self.MASK

    def next_bits(self, bits: int) -> int:
        """Advance once and return the top `bits` (1..32) bits of the state."""
        self._state = (self._state * self.MULTIPLIER + self.INCREMENT) & self.MASK
        return self._state >> (48 - bits)

    def next_below(self, bound: int) -> int:
        """Uniform int in [0, bound)."""
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        if bound & (bound - 1) == 0:
            return (bound * self.next_bits(31)) >> 31
        while True:
            bits = self.next_bits(31)
            value = bits % bound
            if bits - value + (bound - 1) < (1 << 31):
                return value


def keystream(key: int, count: int, bound: int) -> np.ndarray:
    """`count` consecutive draws from Lcg48(key) in [0, bound), as int64."""
    rng = Lcg48(key)
    return np.fromiter((rng.next_below(bound) for _ in range(count)), dtype=np.int64, count=count)


def encrypt_decrypt(grid: np.ndarray, model: ColorModel, key: int) -> np.ndarray:
    bound = COLOR_KEY_SPACE if model.is_color else GRAY_KEY_SPACE
    logger.debug("xor keystream: %d draws below %d", grid.size, bound)
    stream = keystream(key, grid.size, bound).reshape(grid.shape)
    return np.bitwise_xor(grid, stream)
