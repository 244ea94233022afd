"""
Legends: Arceus records (.pa8 / .ea8).

PA8 shares block A with PK8 but every block is 88 bytes long and block B
opens with the move list instead of the nickname, which shifts the rest
of the record.
"""

from .pk8 import Pk8


class Pa8(Pk8):
    """A decoded Legends: Arceus record."""

    FORMAT_NAME = "PA8"
    STORED_SIZE = 360
    PARTY_SIZE  = 376
    BLOCK_SIZE  = 88

    OFS_MOVES         = 0x54
    OFS_NICKNAME      = 0x60
    OFS_IV32          = 0x94
    OFS_HT_FRIENDSHIP = 0xD8
    OFS_VERSION       = 0xEE
    OFS_LANGUAGE      = 0xF2
    OFS_OT_NAME       = 0x110
    OFS_OT_FRIENDSHIP = 0x12A
    OFS_BALL          = 0x137
    OFS_MET_LEVEL     = 0x13D
