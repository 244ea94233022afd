"""
Generation layout adapters and the format registry.
"""

from typing import Dict, Type

from ..core.errors import UnknownFormat
from .pkx import Pkx
from .pk6 import Pk6
from .pk7 import Pk7
from .pk8 import Pk8
from .pa8 import Pa8
from .pk9 import Pk9

FORMATS: Dict[str, Type[Pkx]] = {
    'pk6': Pk6,
    'pk7': Pk7,
    'pk8': Pk8,
    'pa8': Pa8,
    'pk9': Pk9,
}


def get_format(name: str) -> Type[Pkx]:
    """
    Look up an adapter class by format name (case-insensitive).

    Raises:
        UnknownFormat: if no adapter is registered under ``name``
    """
    try:
        return FORMATS[name.lower()]
    except KeyError:
        raise UnknownFormat(name) from None


__all__ = ['FORMATS', 'get_format', 'Pkx', 'Pk6', 'Pk7', 'Pk8', 'Pa8', 'Pk9']
