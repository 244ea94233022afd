"""
Base class for decoded PKX records.

A generation adapter only knows where its fields live.  It subclasses
``Pkx``, publishes its record sizes and implements the primitive accessors
with ``ByteReader`` reads.  Everything derived from those primitives
(shininess, IVs, hidden power, minted nature, display names) is defined
once here and works unchanged for every generation.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from ..core import derived
from ..core.crypto import decrypt_record
from ..core.errors import InvalidRecordSize, UnknownFieldValue
from ..core.names import ability_name, move_name, species_name, version_name
from ..core.reader import Buffer, ByteReader
from ..core.stats import Stats, is_egg, is_nicknamed, unpack_ivs
from ..core.types import (
    AbilityNumber, Ball, Gender, HiddenPower, Language, Nature, ShinyType,
)

logger = logging.getLogger(__name__)


def _lowered(member) -> str:
    return member.name.lower()


def _display(member) -> str:
    return member.display_name


class Pkx(ByteReader, ABC):
    """
    A decoded creature record.

    Construct from raw (encrypted) bytes; the record is decrypted once and
    the canonical buffer is kept as immutable ``bytes``.
    """

    FORMAT_NAME: str = ""
    STORED_SIZE: int = 0
    PARTY_SIZE:  int = 0
    BLOCK_SIZE:  int = 0

    def __init__(self, raw: Buffer):
        self.check_size(raw)
        super().__init__(decrypt_record(raw, self.BLOCK_SIZE))
        logger.debug(f"Decoded {self.FORMAT_NAME} record ({len(raw)} bytes)")

    @classmethod
    def sizes(cls) -> Tuple[int, int]:
        return cls.STORED_SIZE, cls.PARTY_SIZE

    @classmethod
    def check_size(cls, data: Buffer):
        """
        Raises:
            InvalidRecordSize: if ``data`` is neither stored nor party size
        """
        if len(data) not in cls.sizes():
            raise InvalidRecordSize(cls.FORMAT_NAME, cls.sizes(), len(data))

    @classmethod
    def from_decrypted(cls, data: Buffer) -> 'Pkx':
        """Wrap a buffer that is already in canonical (decrypted) order."""
        cls.check_size(data)
        obj = cls.__new__(cls)
        ByteReader.__init__(obj, data)
        return obj

    @property
    def is_party(self) -> bool:
        return len(self) == self.PARTY_SIZE

    # ── Primitive fields ──────────────────────────────────────────────────────

    @property
    def encryption_constant(self) -> int:
        return self.read_u32(0x00)

    @property
    def checksum(self) -> int:
        """Stored checksum. Never verified."""
        return self.read_u16(0x06)

    @property
    def species(self) -> int:
        return self.read_u16(0x08)

    @property
    def held_item(self) -> int:
        return self.read_u16(0x0A)

    @property
    def tid(self) -> int:
        return self.read_u16(0x0C)

    @property
    def sid(self) -> int:
        return self.read_u16(0x0E)

    @property
    def exp(self) -> int:
        return self.read_u32(0x10)

    @property
    @abstractmethod
    def ability(self) -> int: ...

    @property
    @abstractmethod
    def ability_number(self) -> AbilityNumber: ...

    @property
    @abstractmethod
    def pid(self) -> int: ...

    @property
    @abstractmethod
    def nature(self) -> Nature: ...

    @property
    def stat_nature(self) -> Optional[int]:
        """Mint override byte; None for formats that do not store one."""
        return None

    @property
    @abstractmethod
    def fateful_encounter(self) -> bool: ...

    @property
    @abstractmethod
    def gender(self) -> Gender: ...

    @property
    @abstractmethod
    def form(self) -> int: ...

    @property
    @abstractmethod
    def evs(self) -> Stats: ...

    @property
    @abstractmethod
    def move1(self) -> int: ...

    @property
    @abstractmethod
    def move2(self) -> int: ...

    @property
    @abstractmethod
    def move3(self) -> int: ...

    @property
    @abstractmethod
    def move4(self) -> int: ...

    @property
    @abstractmethod
    def iv32(self) -> int: ...

    @property
    @abstractmethod
    def nickname(self) -> str: ...

    @property
    @abstractmethod
    def ot_name(self) -> str: ...

    @property
    @abstractmethod
    def ht_friendship(self) -> int: ...

    @property
    @abstractmethod
    def ot_friendship(self) -> int: ...

    @property
    @abstractmethod
    def language(self) -> Language: ...

    @property
    @abstractmethod
    def version(self) -> int: ...

    @property
    @abstractmethod
    def ball(self) -> Ball: ...

    @property
    @abstractmethod
    def met_level(self) -> int: ...

    # ── Derived fields ────────────────────────────────────────────────────────

    @property
    def tsv(self) -> int:
        return derived.trainer_shiny_value(self.tid, self.sid)

    @property
    def psv(self) -> int:
        return derived.shiny_value(self.pid)

    @property
    def is_shiny(self) -> bool:
        return derived.is_shiny(self.tid, self.sid, self.pid)

    @property
    def shiny_type(self) -> ShinyType:
        return derived.shiny_type(self.tid, self.sid, self.pid)

    @property
    def ivs(self) -> Stats:
        return unpack_ivs(self.iv32)

    @property
    def is_egg(self) -> bool:
        return is_egg(self.iv32)

    @property
    def is_nicknamed(self) -> bool:
        return is_nicknamed(self.iv32)

    @property
    def hidden_power(self) -> HiddenPower:
        return derived.hidden_power_type(self.ivs)

    @property
    def minted_nature(self) -> Nature:
        return derived.effective_nature(self.nature, self.stat_nature)

    @property
    def moves(self) -> List[int]:
        return [self.move1, self.move2, self.move3, self.move4]

    @property
    def species_name(self) -> str:
        return species_name(self.species)

    @property
    def ability_name(self) -> str:
        return ability_name(self.ability)

    @property
    def move_names(self) -> List[str]:
        return [move_name(m) for m in self.moves if m]

    @property
    def version_name(self) -> str:
        return version_name(self.version)

    @property
    def display_name(self) -> str:
        """Nickname if different from species name, else species name."""
        if self.is_nicknamed and self.nickname and self.nickname != self.species_name:
            return f"{self.nickname} ({self.species_name})"
        return self.species_name

    def _label(self, attr: str, render=_lowered):
        """Render an enum field for ``to_dict``. A raw id with no member is returned as is."""
        try:
            return render(getattr(self, attr))
        except UnknownFieldValue as e:
            return e.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            'format':              self.FORMAT_NAME,
            'is_party':            self.is_party,
            'encryption_constant': self.encryption_constant,
            'checksum':            self.checksum,
            'species':             self.species,
            'species_name':        self.species_name,
            'form':                self.form,
            'nickname':            self.nickname,
            'is_nicknamed':        self.is_nicknamed,
            'is_egg':              self.is_egg,
            'held_item':           self.held_item,
            'exp':                 self.exp,
            'pid':                 self.pid,
            'tid':                 self.tid,
            'sid':                 self.sid,
            'tsv':                 self.tsv,
            'psv':                 self.psv,
            'is_shiny':            self.is_shiny,
            'shiny_type':          self.shiny_type.value,
            'ot_name':             self.ot_name,
            'ot_friendship':       self.ot_friendship,
            'ht_friendship':       self.ht_friendship,
            'ability':             self.ability,
            'ability_name':        self.ability_name,
            'ability_number':      self._label('ability_number'),
            'nature':              self._label('nature', _display),
            'minted_nature':       self._label('minted_nature', _display),
            'gender':              self._label('gender'),
            'fateful_encounter':   self.fateful_encounter,
            'ivs':                 self.ivs.to_dict(),
            'evs':                 self.evs.to_dict(),
            'hidden_power':        self.hidden_power.display_name,
            'moves':               self.moves,
            'move_names':          self.move_names,
            'language':            self._label('language'),
            'version':             self.version,
            'version_name':        self.version_name,
            'ball':                self._label('ball'),
            'met_level':           self.met_level,
        }

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(species={self.species_name!r}, "
                f"pid=0x{self.pid:08X}, ec=0x{self.encryption_constant:08X})")
