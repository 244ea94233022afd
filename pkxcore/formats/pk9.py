"""
Generation 9 records: Scarlet/Violet (.pk9 / .ek9).

Same sizes and nearly the same layout as PK8.  Gender moves down to bits
1-2 of the flag byte and the version and language bytes move up.

Species ids are returned exactly as stored.  Scarlet/Violet store their
own internal species index, which only matches the national dex number up
to the end of generation 8.
"""

from .pk8 import Pk8


class Pk9(Pk8):
    """A decoded Scarlet/Violet record."""

    FORMAT_NAME = "PK9"

    GENDER_SHIFT = 1
    OFS_VERSION  = 0xCE
    OFS_LANGUAGE = 0xD5
