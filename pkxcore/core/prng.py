"""
Keystream generator for PKX record encryption.

The games encrypt stored creatures with the output of a linear congruential
generator:

    X[n+1] = (0x41C64E6D * X[n] + 0x6073) mod 2**32

Each step yields the high 16 bits of the new state.  The record cipher XORs
those 16-bit words over the record body, so the same keystream both
encrypts and decrypts.
"""

from typing import Iterator, Optional, Tuple

# ── Constants ──────────────────────────────────────────────────────────────────
LCG_MULTIPLIER     = 0x41C64E6D
LCG_INCREMENT      = 0x00006073
SEED_MASK          = 0xFFFFFFFF

# Modular inverse of the multiplier, used to run the generator backwards.
INVERSE_MULTIPLIER = 0xEEB9EB65
INVERSE_INCREMENT  = 0x0A3561A1

RAND_SHIFT         = 16


def next_state(state: int) -> Tuple[int, int]:
    """
    Advance the generator by one step.

    Args:
        state: Current 32-bit state

    Returns:
        (word, new_state) where word is the high 16 bits of new_state
    """
    state = (state * LCG_MULTIPLIER + LCG_INCREMENT) & SEED_MASK
    return state >> RAND_SHIFT, state


def prev_state(state: int) -> int:
    """Return the state that ``next_state`` turned into ``state``."""
    return (state * INVERSE_MULTIPLIER + INVERSE_INCREMENT) & SEED_MASK


def keystream(seed: int) -> Iterator[int]:
    """Yield the endless sequence of 16-bit keystream words for ``seed``."""
    state = seed & SEED_MASK
    while True:
        word, state = next_state(state)
        yield word


class PRNG:
    """
    Stateful wrapper around the generator.

    >>> rng = PRNG(0x8D6F7897)
    >>> hex(rng.rand())
    '0xcafe'
    >>> hex(rng.seed)
    '0xcafebabe'
    >>> hex(rng.prev_seed())
    '0x8d6f7897'
    """

    def __init__(self, seed: int = 0):
        self._seed = seed & SEED_MASK

    @property
    def seed(self) -> int:
        return self._seed

    @seed.setter
    def seed(self, value: int):
        self._seed = value & SEED_MASK

    def rand(self) -> int:
        """Advance one step and return the 16-bit output word."""
        word, self._seed = next_state(self._seed)
        return word

    def prev_seed(self, seed: Optional[int] = None) -> int:
        """Previous state relative to ``seed`` (or the current one). Does not move."""
        return prev_state(self._seed if seed is None else seed)

    def prev_rand(self) -> int:
        """Step backwards and return the high 16 bits of the restored state."""
        self._seed = prev_state(self._seed)
        return self._seed >> RAND_SHIFT

    def __repr__(self) -> str:
        return f"PRNG(seed=0x{self._seed:08X})"
