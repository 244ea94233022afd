"""
Generation 8 records: Sword/Shield (.pk8 / .ek8).

PK8 Structure:
  - 328 bytes stored, 344 bytes in the party
  - 8 byte header + 4 blocks of 80 bytes
  - The ability id widens to 16 bits, pushing the rest of block A forward
  - 0x21 holds the stat nature set by a mint
  - 0x22: bit 0 fateful, bits 2-3 gender
"""

from typing import Optional

from ..core.stats import Stats
from ..core.types import AbilityNumber, Ball, Gender, Language, Nature, to_enum
from .pkx import Pkx

# ── Offsets ────────────────────────────────────────────────────────────────────
OFS_ABILITY         = 0x14
OFS_ABILITY_NUMBER  = 0x16      # low 3 bits
OFS_PID             = 0x1C
OFS_NATURE          = 0x20
OFS_STAT_NATURE     = 0x21
OFS_FLAGS           = 0x22
OFS_FORM            = 0x24
OFS_EVS             = 0x26      # hp, atk, def, spa, spd, spe
OFS_NICKNAME        = 0x58
OFS_MOVES           = 0x72
OFS_IV32            = 0x8C
OFS_HT_FRIENDSHIP   = 0xC8
OFS_VERSION         = 0xDE
OFS_LANGUAGE        = 0xE2
OFS_OT_NAME         = 0xF8
OFS_OT_FRIENDSHIP   = 0x112
OFS_BALL            = 0x124
OFS_MET_LEVEL       = 0x125     # bit 7 is the OT gender

NAME_LENGTH         = 0x18
GENDER_SHIFT        = 2


class Pk8(Pkx):
    """A decoded generation 8 record."""

    FORMAT_NAME = "PK8"
    STORED_SIZE = 328
    PARTY_SIZE  = 344
    BLOCK_SIZE  = 80

    # Subclasses with the same block A but a different block B-D layout
    # override these.
    OFS_NICKNAME      = OFS_NICKNAME
    OFS_MOVES         = OFS_MOVES
    OFS_IV32          = OFS_IV32
    OFS_HT_FRIENDSHIP = OFS_HT_FRIENDSHIP
    OFS_VERSION       = OFS_VERSION
    OFS_LANGUAGE      = OFS_LANGUAGE
    OFS_OT_NAME       = OFS_OT_NAME
    OFS_OT_FRIENDSHIP = OFS_OT_FRIENDSHIP
    OFS_BALL          = OFS_BALL
    OFS_MET_LEVEL     = OFS_MET_LEVEL
    GENDER_SHIFT      = GENDER_SHIFT

    @property
    def ability(self) -> int:
        return self.read_u16(OFS_ABILITY)

    @property
    def ability_number(self) -> AbilityNumber:
        return to_enum(AbilityNumber, self.read_bits(OFS_ABILITY_NUMBER, 0, 0x7), "ability_number")

    @property
    def pid(self) -> int:
        return self.read_u32(OFS_PID)

    @property
    def nature(self) -> Nature:
        return to_enum(Nature, self.read_u8(OFS_NATURE), "nature")

    @property
    def stat_nature(self) -> Optional[int]:
        return self.read_u8(OFS_STAT_NATURE)

    @property
    def fateful_encounter(self) -> bool:
        return self.read_flag(OFS_FLAGS, 0)

    @property
    def gender(self) -> Gender:
        return to_enum(Gender, self.read_bits(OFS_FLAGS, self.GENDER_SHIFT, 0x3), "gender")

    @property
    def form(self) -> int:
        return self.read_u16(OFS_FORM)

    @property
    def evs(self) -> Stats:
        return Stats(*(self.read_u8(OFS_EVS + i) for i in range(6)))

    @property
    def move1(self) -> int:
        return self.read_u16(self.OFS_MOVES)

    @property
    def move2(self) -> int:
        return self.read_u16(self.OFS_MOVES + 2)

    @property
    def move3(self) -> int:
        return self.read_u16(self.OFS_MOVES + 4)

    @property
    def move4(self) -> int:
        return self.read_u16(self.OFS_MOVES + 6)

    @property
    def iv32(self) -> int:
        return self.read_u32(self.OFS_IV32)

    @property
    def nickname(self) -> str:
        return self.read_string(self.OFS_NICKNAME, NAME_LENGTH)

    @property
    def ot_name(self) -> str:
        return self.read_string(self.OFS_OT_NAME, NAME_LENGTH)

    @property
    def ht_friendship(self) -> int:
        return self.read_u8(self.OFS_HT_FRIENDSHIP)

    @property
    def ot_friendship(self) -> int:
        return self.read_u8(self.OFS_OT_FRIENDSHIP)

    @property
    def ball(self) -> Ball:
        return to_enum(Ball, self.read_u8(self.OFS_BALL), "ball")

    @property
    def met_level(self) -> int:
        return self.read_bits(self.OFS_MET_LEVEL, 0, 0x7F)

    @property
    def version(self) -> int:
        return self.read_u8(self.OFS_VERSION)

    @property
    def language(self) -> Language:
        return to_enum(Language, self.read_u8(self.OFS_LANGUAGE), "language")
