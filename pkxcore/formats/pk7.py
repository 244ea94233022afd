"""
Generation 7 records: Sun/Moon and Ultra Sun/Ultra Moon (.pk7 / .ek7).

PK7 keeps the PK6 block layout, sizes and field offsets.  Only the meaning
of a few bytes outside the decoded field set changed between the two
generations, so the adapter is the PK6 one under its own format name.
"""

from .pk6 import Pk6


class Pk7(Pk6):
    """A decoded generation 7 record."""

    FORMAT_NAME = "PK7"
