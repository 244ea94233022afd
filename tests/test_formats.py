import pytest

from pkxcore.core.errors import InvalidRecordSize, UnknownFieldValue, UnknownFormat
from pkxcore.core.stats import Stats
from pkxcore.core.types import (
    AbilityNumber, Ball, Gender, HiddenPower, Language, Nature,
)
from pkxcore.formats import FORMATS, Pa8, Pk6, Pk7, Pk8, Pk9, get_format

# 6 IVs of 31, 30, 31, 30, 31, 30 with the nicknamed flag set
IV32 = 31 | (30 << 5) | (31 << 10) | (30 << 15) | (31 << 20) | (30 << 25) | (1 << 31)


@pytest.mark.parametrize("cls, stored, party, block", [
    (Pk6, 232, 260, 56),
    (Pk7, 232, 260, 56),
    (Pk8, 328, 344, 80),
    (Pa8, 360, 376, 88),
    (Pk9, 328, 344, 80),
])
def test_published_sizes(cls, stored, party, block):
    assert (cls.STORED_SIZE, cls.PARTY_SIZE, cls.BLOCK_SIZE) == (stored, party, block)
    assert cls.STORED_SIZE == 8 + 4 * cls.BLOCK_SIZE


def test_registry():
    assert set(FORMATS) == {'pk6', 'pk7', 'pk8', 'pa8', 'pk9'}
    assert get_format('PK8') is Pk8
    with pytest.raises(UnknownFormat):
        get_format('pk5')


def test_unknown_format_is_a_key_error():
    with pytest.raises(KeyError):
        get_format('xyz')


# ── PK7 ──────────────────────────────────────────────────────────────────────

def test_pk7_uses_gen6_layout(record_builder):
    pkx = (record_builder(Pk7, 0x9ABCDEF0)
           .u16(0x08, 778).u8(0x14, 209).u8(0x15, 1)
           .u32(0x18, 0x11112222).u8(0x1C, 13).u8(0x1D, 0x02)
           .u16(0x5A, 421).u16(0x5C, 425)
           .u32(0x74, IV32).text(0x40, "Mimi")
           .u8(0xDC, 4).u8(0xDD, 50).u8(0xDF, 30).u8(0xE3, 2)
           .decode())
    assert pkx.FORMAT_NAME == "PK7"
    assert pkx.species_name == "Mimikyu"
    assert pkx.ability_name == "Disguise"
    assert pkx.ability_number is AbilityNumber.FIRST
    assert pkx.nature is Nature.JOLLY
    assert pkx.gender is Gender.FEMALE
    assert pkx.moves == [421, 425, 0, 0]
    assert pkx.nickname == "Mimi"
    assert pkx.version_name == "Sun"
    assert pkx.met_level == 50
    assert pkx.stat_nature is None


# ── PK8 ──────────────────────────────────────────────────────────────────────

def pk8_like(builder, cls, seed=0x13572468):
    return (builder(cls, seed)
            .u16(0x08, 887).u16(0x0A, 1).u16(0x0C, 12345).u16(0x0E, 54321)
            .u32(0x10, 1_250_000)
            .u16(0x14, 151).u8(0x16, 0x04)
            .u32(0x1C, 0xCAFEBABE).u8(0x20, 3).u8(0x21, 10)
            .u16(0x24, 2)
            .u8(0x26, 4).u8(0x27, 252).u8(0x2B, 252))


def test_pk8_fields(record_builder):
    pkx = (pk8_like(record_builder, Pk8)
           .u8(0x22, 0x01 | (1 << 2))
           .text(0x58, "Dragapult")
           .u16(0x72, 434).u16(0x74, 369).u16(0x76, 247).u16(0x78, 85)
           .u32(0x8C, IV32)
           .u8(0xC8, 50).u8(0xDE, 44).u8(0xE2, 2)
           .text(0xF8, "Leon").u8(0x112, 255)
           .u8(0x124, 16).u8(0x125, 0x80 | 60)
           .decode())
    assert pkx.species_name == "Dragapult"
    assert pkx.held_item == 1
    assert (pkx.tid, pkx.sid) == (12345, 54321)
    assert pkx.exp == 1_250_000
    assert pkx.ability_name == "Infiltrator"
    assert pkx.ability_number is AbilityNumber.HIDDEN
    assert pkx.pid == 0xCAFEBABE
    assert pkx.nature is Nature.ADAMANT
    assert pkx.stat_nature == 10
    assert pkx.minted_nature is Nature.TIMID
    assert pkx.fateful_encounter
    assert pkx.gender is Gender.FEMALE
    assert pkx.form == 2
    assert pkx.evs == Stats(4, 252, 0, 0, 0, 252)
    assert pkx.move_names == ["Draco Meteor", "U-turn", "Shadow Ball", "Thunderbolt"]
    assert pkx.ivs == Stats(31, 30, 31, 30, 31, 30)
    assert pkx.is_nicknamed and not pkx.is_egg
    assert pkx.nickname == "Dragapult"
    assert pkx.display_name == "Dragapult"
    assert pkx.ht_friendship == 50
    assert pkx.version_name == "Sword"
    assert pkx.language is Language.ENGLISH
    assert pkx.ot_name == "Leon"
    assert pkx.ot_friendship == 255
    assert pkx.ball is Ball.CHERISH
    assert pkx.met_level == 60


def test_pk8_unminted_nature(record_builder):
    pkx = pk8_like(record_builder, Pk8).u8(0x21, 3).decode()
    assert pkx.minted_nature is Nature.ADAMANT


def test_pk8_hidden_power(record_builder):
    # odd hp/def/spd -> S = 1 + 4 + 32 = 37 -> 37*15//63 = 8
    pkx = pk8_like(record_builder, Pk8).u32(0x8C, IV32).decode()
    assert pkx.hidden_power is HiddenPower.FIRE


# ── PA8 ──────────────────────────────────────────────────────────────────────

def test_pa8_fields(record_builder):
    pkx = (pk8_like(record_builder, Pa8)
           .u8(0x22, 0x00)
           .u16(0x54, 33).u16(0x56, 52)
           .text(0x60, "Hisuian")
           .u32(0x94, IV32)
           .u8(0xD8, 7).u8(0xEE, 47).u8(0xF2, 1)
           .text(0x110, "Rei").u8(0x12A, 120)
           .u8(0x137, 28).u8(0x13D, 12)
           .decode())
    assert pkx.FORMAT_NAME == "PA8"
    assert len(pkx) == 360
    assert pkx.ability_name == "Infiltrator"
    assert pkx.minted_nature is Nature.TIMID
    assert pkx.gender is Gender.MALE
    assert pkx.move_names == ["Tackle", "Ember"]
    assert pkx.nickname == "Hisuian"
    assert pkx.ivs == Stats(31, 30, 31, 30, 31, 30)
    assert pkx.ht_friendship == 7
    assert pkx.version_name == "Legends: Arceus"
    assert pkx.language is Language.JAPANESE
    assert pkx.ot_name == "Rei"
    assert pkx.ot_friendship == 120
    assert pkx.ball is Ball.LA_POKE
    assert pkx.met_level == 12


def test_pa8_rejects_pk8_sized_data():
    with pytest.raises(InvalidRecordSize):
        Pa8(bytes(328))


# ── PK9 ──────────────────────────────────────────────────────────────────────

def test_pk9_fields(record_builder):
    pkx = (pk8_like(record_builder, Pk9)
           .u8(0x22, 2 << 1)
           .u32(0x8C, IV32)
           .u8(0xCE, 51).u8(0xD5, 9)
           .u8(0x124, 4)
           .decode())
    assert pkx.FORMAT_NAME == "PK9"
    assert pkx.gender is Gender.GENDERLESS
    assert pkx.version_name == "Violet"
    assert pkx.language is Language.CHINESE_SIMPLIFIED
    assert pkx.species == 887
    assert pkx.ball is Ball.POKE


def test_pk9_species_returned_as_stored(record_builder):
    pkx = pk8_like(record_builder, Pk9).u16(0x08, 1000).u8(0x124, 4).decode()
    assert pkx.species == 1000
    assert pkx.species_name == "Species #1000"


@pytest.mark.parametrize("cls", [Pk8, Pa8, Pk9])
def test_party_size_accepted(cls, record_builder):
    pkx = pk8_like(lambda c, s: record_builder(c, s, party=True), cls).decode()
    assert pkx.is_party
    assert pkx.pid == 0xCAFEBABE


def test_pk8_unknown_gender_survives_to_dict(record_builder):
    pkx = pk8_like(record_builder, Pk8).u8(0x22, 3 << 2).u8(0xE2, 99).decode()
    with pytest.raises(UnknownFieldValue):
        pkx.gender
    d = pkx.to_dict()
    assert d['gender'] == 3
    assert d['language'] == 99
    assert d['ability_number'] == "hidden"
