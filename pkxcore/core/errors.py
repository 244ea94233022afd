"""
Exceptions raised by pkxcore.

Decoding itself cannot fail once a buffer has the right length, so every
error here is a precondition violation detected at a boundary: a buffer of
the wrong size, a raw id with no enum member, or an unknown format name.
"""


class PKXError(Exception):
    """Base class for all pkxcore errors."""


class InvalidRecordSize(PKXError, ValueError):
    """A raw record does not have one of the sizes its format accepts."""

    def __init__(self, format_name: str, expected, actual: int):
        self.format_name = format_name
        self.expected = tuple(expected)
        self.actual = actual
        sizes = " or ".join(str(s) for s in self.expected)
        super().__init__(
            f"Cannot decode {format_name}: must be {sizes} bytes (got {actual} bytes)"
        )


class UnknownFieldValue(PKXError, ValueError):
    """A decoded raw id has no member in the enum used to type it."""

    def __init__(self, field_name: str, value: int):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Unknown {field_name} value: {value}")


class UnknownFormat(PKXError, KeyError):
    """No generation adapter is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown PKX format: {self.name!r}"
