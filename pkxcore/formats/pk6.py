"""
Generation 6 records: X/Y and Omega Ruby/Alpha Sapphire (.pk6 / .ek6).

PK6 Structure:
  - 232 bytes stored, 260 bytes in the party
  - 8 byte header + 4 blocks of 56 bytes
  - Block A (0x08): species, item, trainer ids, exp, ability, pid,
    nature, gender/form byte, EVs
  - Block B (0x40): nickname, moves, PP, relearn moves
  - Block C (0x78): handler name and memories
  - Block D (0xB0): trainer name, friendship, met data, ball, version
"""

from typing import List

from ..core.stats import Stats
from ..core.types import AbilityNumber, Ball, Gender, Language, Nature, to_enum
from .pkx import Pkx

# ── Offsets ────────────────────────────────────────────────────────────────────
OFS_ABILITY         = 0x14
OFS_ABILITY_NUMBER  = 0x15
OFS_PID             = 0x18
OFS_NATURE          = 0x1C
OFS_GENDER_FORM     = 0x1D      # bit 0 fateful, bits 1-2 gender, bits 3-7 form
OFS_EVS             = 0x1E      # hp, atk, def, spa, spd, spe
OFS_NICKNAME        = 0x40
OFS_MOVES           = 0x5A
OFS_MOVE_PP         = 0x62
OFS_MOVE_PP_UPS     = 0x66
OFS_RELEARN_MOVES   = 0x6A
OFS_IV32            = 0x74
OFS_HT_NAME         = 0x78
OFS_HT_FRIENDSHIP   = 0xA2
OFS_OT_NAME         = 0xB0
OFS_OT_FRIENDSHIP   = 0xCA
OFS_EGG_LOCATION    = 0xD8
OFS_MET_LOCATION    = 0xDA
OFS_BALL            = 0xDC
OFS_MET_LEVEL       = 0xDD      # bit 7 is the OT gender
OFS_VERSION         = 0xDF
OFS_LANGUAGE        = 0xE3

NAME_LENGTH         = 0x18      # 12 UTF-16 code units


class Pk6(Pkx):
    """A decoded generation 6 record."""

    FORMAT_NAME = "PK6"
    STORED_SIZE = 232
    PARTY_SIZE  = 260
    BLOCK_SIZE  = 56

    @property
    def ability(self) -> int:
        return self.read_u8(OFS_ABILITY)

    @property
    def ability_number(self) -> AbilityNumber:
        return to_enum(AbilityNumber, self.read_u8(OFS_ABILITY_NUMBER), "ability_number")

    @property
    def pid(self) -> int:
        return self.read_u32(OFS_PID)

    @property
    def nature(self) -> Nature:
        return to_enum(Nature, self.read_u8(OFS_NATURE), "nature")

    @property
    def fateful_encounter(self) -> bool:
        return self.read_flag(OFS_GENDER_FORM, 0)

    @property
    def gender(self) -> Gender:
        return to_enum(Gender, self.read_bits(OFS_GENDER_FORM, 1, 0x3), "gender")

    @property
    def form(self) -> int:
        return self.read_u8(OFS_GENDER_FORM) >> 3

    @property
    def evs(self) -> Stats:
        return Stats(*(self.read_u8(OFS_EVS + i) for i in range(6)))

    @property
    def move1(self) -> int:
        return self.read_u16(OFS_MOVES)

    @property
    def move2(self) -> int:
        return self.read_u16(OFS_MOVES + 2)

    @property
    def move3(self) -> int:
        return self.read_u16(OFS_MOVES + 4)

    @property
    def move4(self) -> int:
        return self.read_u16(OFS_MOVES + 6)

    @property
    def move_pp(self) -> List[int]:
        return [self.read_u8(OFS_MOVE_PP + i) for i in range(4)]

    @property
    def move_pp_ups(self) -> List[int]:
        return [self.read_u8(OFS_MOVE_PP_UPS + i) for i in range(4)]

    @property
    def relearn_moves(self) -> List[int]:
        return [self.read_u16(OFS_RELEARN_MOVES + 2 * i) for i in range(4)]

    @property
    def iv32(self) -> int:
        return self.read_u32(OFS_IV32)

    @property
    def nickname(self) -> str:
        return self.read_string(OFS_NICKNAME, NAME_LENGTH)

    @property
    def ht_name(self) -> str:
        return self.read_string(OFS_HT_NAME, NAME_LENGTH)

    @property
    def ot_name(self) -> str:
        return self.read_string(OFS_OT_NAME, NAME_LENGTH)

    @property
    def ht_friendship(self) -> int:
        return self.read_u8(OFS_HT_FRIENDSHIP)

    @property
    def ot_friendship(self) -> int:
        return self.read_u8(OFS_OT_FRIENDSHIP)

    @property
    def egg_location(self) -> int:
        return self.read_u16(OFS_EGG_LOCATION)

    @property
    def met_location(self) -> int:
        return self.read_u16(OFS_MET_LOCATION)

    @property
    def ball(self) -> Ball:
        return to_enum(Ball, self.read_u8(OFS_BALL), "ball")

    @property
    def met_level(self) -> int:
        return self.read_bits(OFS_MET_LEVEL, 0, 0x7F)

    @property
    def ot_gender(self) -> Gender:
        return Gender(self.read_bits(OFS_MET_LEVEL, 7, 0x1))

    @property
    def version(self) -> int:
        return self.read_u8(OFS_VERSION)

    @property
    def language(self) -> Language:
        return to_enum(Language, self.read_u8(OFS_LANGUAGE), "language")
