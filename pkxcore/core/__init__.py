"""
Format-independent building blocks: keystream, cipher, byte access,
stat unpacking, derived values and field typing.
"""

from .crypto import decrypt, decrypt_record, encrypt, encrypt_record, shuffle_value
from .errors import InvalidRecordSize, PKXError, UnknownFieldValue, UnknownFormat
from .prng import PRNG, keystream
from .reader import ByteReader
from .stats import Stats, unpack_ivs
