import struct

import pytest

from pkxcore.core.crypto import encrypt_record
from pkxcore.core.errors import InvalidRecordSize, UnknownFieldValue
from pkxcore.core.stats import Stats
from pkxcore.core.types import (
    AbilityNumber, Ball, Gender, HiddenPower, Language, Nature, ShinyType,
)
from pkxcore.formats import Pk6

from conftest import DITTO_PK6


@pytest.fixture
def ditto(ditto_ek6):
    return Pk6(ditto_ek6)


def test_sizes():
    assert Pk6.STORED_SIZE == 8 + 4 * Pk6.BLOCK_SIZE == 232
    assert Pk6.PARTY_SIZE == 260


def test_canonical_buffer(ditto):
    assert ditto.data == DITTO_PK6
    assert isinstance(ditto.data, bytes)
    assert not ditto.is_party


def test_identity_fields(ditto):
    assert ditto.encryption_constant == 0x02865C80
    assert ditto.checksum == 0x41D6
    assert ditto.species == 132
    assert ditto.species_name == "Ditto"
    assert ditto.held_item == 280
    assert ditto.exp == 1_000_000
    assert ditto.pid == 0x31370F23
    assert ditto.form == 0


def test_trainer_fields(ditto):
    assert ditto.tid == 63062
    assert ditto.sid == 51266
    assert ditto.ot_name.startswith("Ditto is ")
    assert ditto.ot_friendship == 70
    assert ditto.ht_friendship == 70
    assert ditto.ot_gender is Gender.MALE


def test_ability(ditto):
    assert ditto.ability == 150
    assert ditto.ability_name == "Imposter"
    assert ditto.ability_number is AbilityNumber.HIDDEN


def test_nature(ditto):
    assert ditto.nature is Nature.ADAMANT
    assert ditto.stat_nature is None
    assert ditto.minted_nature is Nature.ADAMANT


def test_gender_and_flags(ditto):
    assert ditto.gender is Gender.GENDERLESS
    assert not ditto.fateful_encounter
    assert not ditto.is_egg
    assert ditto.is_nicknamed
    assert ditto.nickname == "Adamant 6IVs"
    assert ditto.display_name == "Adamant 6IVs (Ditto)"


def test_stats(ditto):
    assert ditto.iv32 == 0xBFFFFFFF
    assert ditto.ivs == Stats(31, 31, 31, 31, 31, 31)
    assert ditto.evs == Stats(252, 0, 6, 252, 0, 0)
    assert ditto.hidden_power is HiddenPower.DARK


def test_moves(ditto):
    assert ditto.moves == [144, 0, 0, 0]
    assert ditto.move_names == ["Transform"]
    assert ditto.move_pp == [16, 0, 0, 0]
    assert ditto.move_pp_ups == [3, 0, 0, 0]
    assert ditto.relearn_moves == [0, 0, 0, 0]


def test_shiny(ditto):
    assert ditto.tsv == 993
    assert ditto.psv == 993
    assert ditto.is_shiny
    assert ditto.shiny_type is ShinyType.SQUARE


def test_origin(ditto):
    assert ditto.language is Language.FRENCH
    assert ditto.version == 24
    assert ditto.version_name == "X"
    assert ditto.ball is Ball.LUXURY
    assert ditto.met_level == 30
    assert ditto.met_location == 148
    assert ditto.egg_location == 0


def test_to_dict(ditto):
    d = ditto.to_dict()
    assert d['format'] == "PK6"
    assert d['species_name'] == "Ditto"
    assert d['nature'] == "Adamant"
    assert d['ability_number'] == "hidden"
    assert d['gender'] == "genderless"
    assert d['language'] == "french"
    assert d['hidden_power'] == "Dark"
    assert d['ivs']['speed'] == 31
    assert d['evs'] == {
        'hp': 252, 'attack': 0, 'defense': 6,
        'special_attack': 252, 'special_defense': 0, 'speed': 0,
    }
    assert d['shiny_type'] == "square"


def test_repr(ditto):
    assert repr(ditto) == "Pk6(species='Ditto', pid=0x31370F23, ec=0x02865C80)"


def test_from_decrypted_matches(ditto):
    assert Pk6.from_decrypted(DITTO_PK6).to_dict() == ditto.to_dict()


def test_party_record(record_builder):
    pkx = (record_builder(Pk6, 0xA5A5A5A5, party=True)
           .u16(0x08, 25).u8(0x1C, 10).u8(0x15, 1).u8(0xE3, 2)
           .u8(0xDC, 4).u16(0xE8, 0x1234)
           .decode())
    assert pkx.is_party
    assert len(pkx) == 260
    assert pkx.species_name == "Pikachu"
    assert pkx.nature is Nature.TIMID
    # battle-stats tail survives the round trip
    assert struct.unpack_from('<H', pkx.data, 0xE8)[0] == 0x1234


@pytest.mark.parametrize("size", [0, 231, 233, 259, 261, 328])
def test_wrong_size_rejected(size):
    with pytest.raises(InvalidRecordSize) as exc:
        Pk6(bytes(size))
    assert exc.value.expected == (232, 260)
    assert exc.value.actual == size
    assert "232 or 260" in str(exc.value)


def test_out_of_range_nature_raises(record_builder):
    pkx = record_builder(Pk6, 1).u8(0x1C, 30).u8(0x15, 1).decode()
    with pytest.raises(UnknownFieldValue):
        pkx.nature


def test_blank_slot_to_dict():
    pkx = Pk6(encrypt_record(bytes(232), 56))
    d = pkx.to_dict()
    assert d['species'] == 0
    assert d['species_name'] == "Species #0"
    assert d['ability_number'] == 0
    assert d['nature'] == "Hardy"
    assert d['gender'] == "male"
    assert d['language'] == "none"
    assert d['ball'] == "none"
    with pytest.raises(UnknownFieldValue):
        pkx.ability_number


def test_to_dict_keeps_unknown_raw_ids(record_builder):
    pkx = record_builder(Pk6, 1).u8(0x1C, 30).u8(0x15, 1).u8(0xDC, 200).decode()
    d = pkx.to_dict()
    assert d['nature'] == 30
    assert d['minted_nature'] == 30
    assert d['ball'] == 200
    assert d['ability_number'] == "first"
