"""
Stat blocks and the packed individual-value word.

IV32 layout (one u32, low bits first):

  bits  0-4   hp
  bits  5-9   atk
  bits 10-14  def
  bits 15-19  spa
  bits 20-24  spd
  bits 25-29  spe
  bit  30     is egg
  bit  31     is nicknamed
"""

from typing import Dict, NamedTuple

IV_BITS          = 5
IV_MASK          = 0x1F
IV_MAX           = 31
STAT_COUNT       = 6
EGG_FLAG_BIT     = 30
NICKNAMED_FLAG_BIT = 31


class Stats(NamedTuple):
    """Six per-stat values, used for both IVs and EVs."""
    hp:              int
    attack:          int
    defense:         int
    special_attack:  int
    special_defense: int
    speed:           int

    def total(self) -> int:
        return sum(self)

    def to_dict(self) -> Dict[str, int]:
        return dict(self._asdict())


def unpack_ivs(iv32: int) -> Stats:
    """Split the packed IV word into six 5-bit values. Flag bits are ignored."""
    values = [(iv32 >> (i * IV_BITS)) & IV_MASK for i in range(STAT_COUNT)]
    return Stats(*values)


def is_egg(iv32: int) -> bool:
    return bool((iv32 >> EGG_FLAG_BIT) & 1)


def is_nicknamed(iv32: int) -> bool:
    return bool((iv32 >> NICKNAMED_FLAG_BIT) & 1)
