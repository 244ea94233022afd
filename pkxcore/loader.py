"""
Loading PKX records from bytes and files.

File names carry the format in their extension: ``.pk6`` holds a
decrypted record, ``.ek6`` an encrypted one, and likewise for the other
generations.  Decrypted files are wrapped as-is; encrypted ones go through
the cipher.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from .core.errors import PKXError
from .core.reader import Buffer
from .formats import FORMATS, get_format
from .formats.pkx import Pkx

logger = logging.getLogger(__name__)

# extension -> (format name, is encrypted)
EXTENSIONS = {f".{name}": (name, False) for name in FORMATS}
EXTENSIONS.update({f".e{name[1:]}": (name, True) for name in FORMATS})


def decode(data: Buffer, fmt: str) -> Pkx:
    """
    Decode an encrypted record.

    Args:
        data: Raw record bytes (stored or party size)
        fmt:  Format name, e.g. ``"pk6"``

    Raises:
        UnknownFormat:     if ``fmt`` is not registered
        InvalidRecordSize: if ``data`` has the wrong length for ``fmt``
    """
    return get_format(fmt)(data)


def detect_format(path: str) -> Optional[Tuple[str, bool]]:
    """(format name, is encrypted) from a file extension, or None."""
    return EXTENSIONS.get(Path(path).suffix.lower())


def load_pkx(file_path: str, fmt: Optional[str] = None) -> Optional[Pkx]:
    """
    Load a record from disk.

    Args:
        file_path: Path to a .pk*/.ek* file (or any file when ``fmt`` is given)
        fmt:       Format name; overrides the extension.  Data is then
                   treated as encrypted.

    Returns:
        The decoded record on success, None on failure
    """
    path = Path(file_path)
    if fmt is None:
        detected = detect_format(file_path)
        if detected is None:
            logger.error(f"Cannot tell PKX format from file name: {file_path}")
            return None
        fmt, encrypted = detected
    else:
        encrypted = True

    if not path.exists():
        logger.error(f"PKX file not found: {file_path}")
        return None

    try:
        data = path.read_bytes()
    except OSError as e:
        logger.error(f"Cannot read PKX file: {e}")
        return None

    try:
        cls = get_format(fmt)
        pkx = cls(data) if encrypted else cls.from_decrypted(data)
    except PKXError as e:
        logger.error(f"Cannot decode {file_path}: {e}")
        return None

    logger.info(f"Loaded {pkx.FORMAT_NAME} {pkx.species_name} from {path.name}")
    return pkx
