"""
pkxcore: decoder for encrypted PKX creature records (generations 6-9).
"""

__version__ = "1.0.0"

from .core.errors import InvalidRecordSize, PKXError, UnknownFieldValue, UnknownFormat
from .formats import FORMATS, Pa8, Pk6, Pk7, Pk8, Pk9, Pkx, get_format
from .loader import decode, load_pkx
