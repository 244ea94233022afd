"""
Values derived from primitive fields.

These are implemented once here and shared by every generation layout.
Each is a pure function of already-decoded integers; nothing is cached.
"""

from typing import Optional

from .stats import Stats
from .types import HiddenPower, Nature, NATURE_COUNT, ShinyType

SHINY_SHIFT = 4

# Bit weight of each stat's parity in the Hidden Power type sum.
HIDDEN_POWER_WEIGHTS = Stats(
    hp=1, attack=2, defense=4,
    special_attack=16, special_defense=32, speed=8,
)
HIDDEN_POWER_TYPES = tuple(HiddenPower)


def trainer_shiny_value(tid: int, sid: int) -> int:
    """TSV: ``(tid ^ sid) >> 4``."""
    return (tid ^ sid) >> SHINY_SHIFT


def shiny_value(pid: int) -> int:
    """PSV: ``((pid >> 16) ^ (pid & 0xFFFF)) >> 4``."""
    return ((pid >> 16) ^ (pid & 0xFFFF)) >> SHINY_SHIFT


def is_shiny(tid: int, sid: int, pid: int) -> bool:
    return trainer_shiny_value(tid, sid) == shiny_value(pid)


def shiny_xor(tid: int, sid: int, pid: int) -> int:
    return tid ^ sid ^ (pid >> 16) ^ (pid & 0xFFFF)


def shiny_type(tid: int, sid: int, pid: int) -> ShinyType:
    """Square when the full xor is 0, star when only the low nibble differs."""
    xor = shiny_xor(tid, sid, pid)
    if xor == 0:
        return ShinyType.SQUARE
    if xor >> SHINY_SHIFT == 0:
        return ShinyType.STAR
    return ShinyType.NONE


def hidden_power_index(ivs: Stats) -> int:
    """Index 0-15 into the Hidden Power type table."""
    total = sum((iv & 1) * weight for iv, weight in zip(ivs, HIDDEN_POWER_WEIGHTS))
    return total * 15 // 63


def hidden_power_type(ivs: Stats) -> HiddenPower:
    return HIDDEN_POWER_TYPES[hidden_power_index(ivs)]


def minted_nature(nature: int, stat_nature: Optional[int]) -> int:
    """
    The nature that governs stats.

    ``stat_nature`` is the mint override byte, or None for formats that do
    not store one.  It only wins when it is a valid nature different from
    the rolled one.
    """
    if stat_nature is None or stat_nature >= NATURE_COUNT or stat_nature == nature:
        return nature
    return stat_nature


def effective_nature(nature: int, stat_nature: Optional[int]) -> Nature:
    return Nature(minted_nature(nature, stat_nature))
