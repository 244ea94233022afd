"""
Field typing for decoded PKX values.

Small closed sets (natures, genders, ability slots, languages, hidden-power
types, balls) are enums.  Open-ended ids (species, moves, abilities, items)
stay plain ints and are named through the tables in ``names``.
"""

from enum import Enum, IntEnum
from typing import Type, TypeVar

from .errors import UnknownFieldValue

E = TypeVar('E', bound=IntEnum)


class Nature(IntEnum):
    """The 25 natures, in stored-id order."""
    HARDY   = 0
    LONELY  = 1
    BRAVE   = 2
    ADAMANT = 3
    NAUGHTY = 4
    BOLD    = 5
    DOCILE  = 6
    RELAXED = 7
    IMPISH  = 8
    LAX     = 9
    TIMID   = 10
    HASTY   = 11
    SERIOUS = 12
    JOLLY   = 13
    NAIVE   = 14
    MODEST  = 15
    MILD    = 16
    QUIET   = 17
    BASHFUL = 18
    RASH    = 19
    CALM    = 20
    GENTLE  = 21
    SASSY   = 22
    CAREFUL = 23
    QUIRKY  = 24

    @property
    def display_name(self) -> str:
        return self.name.title()


NATURE_COUNT = len(Nature)


class Gender(IntEnum):
    MALE       = 0
    FEMALE     = 1
    GENDERLESS = 2


class AbilityNumber(IntEnum):
    """Which of the species' ability slots is active (stored as a bit)."""
    FIRST  = 1
    SECOND = 2
    HIDDEN = 4


class Language(IntEnum):
    NONE     = 0
    JAPANESE = 1
    ENGLISH  = 2
    FRENCH   = 3
    ITALIAN  = 4
    GERMAN   = 5
    UNUSED   = 6
    SPANISH  = 7
    KOREAN   = 8
    CHINESE_SIMPLIFIED  = 9
    CHINESE_TRADITIONAL = 10


class HiddenPower(IntEnum):
    """Hidden Power types.  Normal (and Fairy) can never be rolled."""
    FIGHTING = 0
    FLYING   = 1
    POISON   = 2
    GROUND   = 3
    ROCK     = 4
    BUG      = 5
    GHOST    = 6
    STEEL    = 7
    FIRE     = 8
    WATER    = 9
    GRASS    = 10
    ELECTRIC = 11
    PSYCHIC  = 12
    ICE      = 13
    DRAGON   = 14
    DARK     = 15

    @property
    def display_name(self) -> str:
        return self.name.title()


class Ball(IntEnum):
    NONE      = 0
    MASTER    = 1
    ULTRA     = 2
    GREAT     = 3
    POKE      = 4
    SAFARI    = 5
    NET       = 6
    DIVE      = 7
    NEST      = 8
    REPEAT    = 9
    TIMER     = 10
    LUXURY    = 11
    PREMIER   = 12
    DUSK      = 13
    HEAL      = 14
    QUICK     = 15
    CHERISH   = 16
    FAST      = 17
    LEVEL     = 18
    LURE      = 19
    HEAVY     = 20
    LOVE      = 21
    FRIEND    = 22
    MOON      = 23
    SPORT     = 24
    DREAM     = 25
    BEAST     = 26
    STRANGE   = 27
    LA_POKE   = 28
    LA_GREAT  = 29
    LA_ULTRA  = 30
    LA_FEATHER = 31
    LA_WING   = 32
    LA_JET    = 33
    LA_HEAVY  = 34
    LA_LEADEN = 35
    LA_GIGATON = 36
    LA_ORIGIN = 37


class ShinyType(Enum):
    NONE   = "none"
    STAR   = "star"
    SQUARE = "square"


def to_enum(enum_cls: Type[E], value: int, field_name: str) -> E:
    """
    Convert a raw id into ``enum_cls``.

    Raises:
        UnknownFieldValue: if ``value`` has no member
    """
    try:
        return enum_cls(value)
    except ValueError:
        raise UnknownFieldValue(field_name, value) from None
