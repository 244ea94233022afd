"""
PKX record encryption for generation 6 and later.

A stored record is laid out as:

  - 0x00: encryption constant (u32)
  - 0x04: sanity placeholder (u16)
  - 0x06: checksum (u16)
    (the 8 header bytes are never encrypted)
  - 0x08: four equal-size blocks (A, B, C, D), shuffled and encrypted
  - party records only: a battle-stats tail after the blocks, encrypted

Decoding happens in two stages:
  1) Decryption: XOR every 16-bit word of the body with the keystream
     seeded by the encryption constant.  The party tail is XORed with a
     second keystream restarted from the same seed.
  2) Unshuffling: the blocks are put back in A, B, C, D order according to
     bits 13-17 of the encryption constant.

Encoding runs the same two stages in reverse order, using the inverse
block permutation.
"""

import logging
import struct
from typing import List, Optional, Tuple, Union

from .errors import InvalidRecordSize
from .prng import keystream

logger = logging.getLogger(__name__)

Buffer = Union[bytes, bytearray, memoryview]

# ── Constants ──────────────────────────────────────────────────────────────────
HEADER_SIZE  = 8
BLOCK_COUNT  = 4
SHUFFLE_SHIFT = 13
SHUFFLE_MASK  = 0x1F

# Source block for each destination slot, one row per shuffle value.
# The rows enumerate the 24 orderings of four blocks:
#   00 = ABCD   01 = ABDC   02 = ACBD   03 = ADBC   04 = ACDB   05 = ADCB
#   06 = BACD   07 = BADC   08 = CABD   09 = DABC   10 = CADB   11 = DACB
#   12 = BCAD   13 = BDAC   14 = CBAD   15 = DBAC   16 = CDAB   17 = DCAB
#   18 = BCDA   19 = BDCA   20 = CBDA   21 = DBCA   22 = CDBA   23 = DCBA
BLOCK_POSITION: Tuple[Tuple[int, int, int, int], ...] = (
    (0, 1, 2, 3), (0, 1, 3, 2), (0, 2, 1, 3), (0, 3, 1, 2),
    (0, 2, 3, 1), (0, 3, 2, 1), (1, 0, 2, 3), (1, 0, 3, 2),
    (2, 0, 1, 3), (3, 0, 1, 2), (2, 0, 3, 1), (3, 0, 2, 1),
    (1, 2, 0, 3), (1, 3, 0, 2), (2, 1, 0, 3), (3, 1, 0, 2),
    (2, 3, 0, 1), (3, 2, 0, 1), (1, 2, 3, 0), (1, 3, 2, 0),
    (2, 1, 3, 0), (3, 1, 2, 0), (2, 3, 1, 0), (3, 2, 1, 0),
)
SHUFFLE_COUNT = len(BLOCK_POSITION)


def _invert(order: Tuple[int, ...]) -> Tuple[int, ...]:
    inverse = [0] * len(order)
    for dest, src in enumerate(order):
        inverse[src] = dest
    return tuple(inverse)


BLOCK_POSITION_INVERT: Tuple[Tuple[int, int, int, int], ...] = tuple(
    _invert(order) for order in BLOCK_POSITION
)


# ── Helpers ────────────────────────────────────────────────────────────────────

def shuffle_value(seed: int) -> int:
    """Block permutation index (0-23) selected by an encryption constant."""
    return ((seed >> SHUFFLE_SHIFT) & SHUFFLE_MASK) % SHUFFLE_COUNT


def read_seed(raw: Buffer) -> int:
    """Read the encryption constant from the first four bytes of a record."""
    return struct.unpack_from('<I', raw, 0)[0]


def _check_length(data: Buffer, block_size: int) -> int:
    body_end = HEADER_SIZE + BLOCK_COUNT * block_size
    if len(data) < body_end or (len(data) - body_end) % 2:
        raise InvalidRecordSize("record", (body_end,), len(data))
    return body_end


# ── Cipher stages ──────────────────────────────────────────────────────────────

def crypt(data: Buffer, seed: int, start: int = HEADER_SIZE, end: Optional[int] = None) -> bytearray:
    """
    XOR the 16-bit little-endian words of ``data[start:end]`` with the keystream.

    The operation is its own inverse.  Bytes outside the range are copied
    unchanged.

    Args:
        data:  Record bytes
        seed:  Keystream seed (the encryption constant)
        start: First byte to transform
        end:   One past the last byte to transform (default: end of data)

    Returns:
        bytearray: A transformed copy of ``data``
    """
    out = bytearray(data)
    if end is None:
        end = len(out)
    words = keystream(seed)
    for offset in range(start, end, 2):
        word = struct.unpack_from('<H', out, offset)[0]
        struct.pack_into('<H', out, offset, word ^ next(words))
    return out


def crypt_record(data: Buffer, seed: int, block_size: int) -> bytearray:
    """Apply the keystream to the block area and, if present, the party tail."""
    body_end = _check_length(data, block_size)
    out = crypt(data, seed, HEADER_SIZE, body_end)
    if len(out) > body_end:
        out = crypt(out, seed, body_end, len(out))
    return out


def shuffle(data: Buffer, order: Tuple[int, ...], block_size: int) -> bytearray:
    """
    Rearrange the four body blocks so destination slot ``i`` receives
    source block ``order[i]``.
    """
    _check_length(data, block_size)
    out = bytearray(data)
    for dest, src in enumerate(order):
        dest_ofs = HEADER_SIZE + dest * block_size
        src_ofs  = HEADER_SIZE + src * block_size
        out[dest_ofs:dest_ofs + block_size] = data[src_ofs:src_ofs + block_size]
    return out


# ── Public API ─────────────────────────────────────────────────────────────────

def decrypt(raw: Buffer, seed: int, block_size: int) -> bytes:
    """
    Decrypt and unshuffle a raw record.

    Args:
        raw:        Encrypted record (stored or party size)
        seed:       Encryption constant
        block_size: Size of each of the four body blocks for the format

    Returns:
        bytes: The canonical plaintext, same length as ``raw``

    Raises:
        InvalidRecordSize: if ``raw`` is shorter than header + 4 blocks
    """
    sv = shuffle_value(seed)
    data = crypt_record(raw, seed, block_size)
    data = shuffle(data, BLOCK_POSITION[sv], block_size)
    logger.debug(f"Decrypted {len(raw)}-byte record (EC 0x{seed:08X}, shuffle {sv})")
    return bytes(data)


def encrypt(plain: Buffer, seed: int, block_size: int) -> bytes:
    """
    Shuffle and encrypt a canonical buffer; the inverse of :func:`decrypt`.

    Only used to build fixtures and to check the round trip.  Decoded
    entities never write back.
    """
    sv = shuffle_value(seed)
    data = shuffle(plain, BLOCK_POSITION_INVERT[sv], block_size)
    return bytes(crypt_record(data, seed, block_size))


def decrypt_record(raw: Buffer, block_size: int) -> bytes:
    """Decrypt a raw record using the encryption constant stored at offset 0."""
    return decrypt(raw, read_seed(raw), block_size)


def encrypt_record(plain: Buffer, block_size: int) -> bytes:
    """Encrypt a canonical buffer using the encryption constant at offset 0."""
    return encrypt(plain, read_seed(plain), block_size)


def block_order(seed: int) -> str:
    """Stored block placed in each canonical slot for ``seed``, e.g. ``'BCDA'``."""
    return "".join("ABCD"[i] for i in BLOCK_POSITION[shuffle_value(seed)])


def split_blocks(data: Buffer, block_size: int) -> List[bytes]:
    """The four body blocks of a record, in stored order."""
    _check_length(data, block_size)
    return [
        bytes(data[HEADER_SIZE + i * block_size:HEADER_SIZE + (i + 1) * block_size])
        for i in range(BLOCK_COUNT)
    ]
