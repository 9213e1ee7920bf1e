"""The kinds of tag in the named binary tag format."""

from __future__ import annotations

from enum import IntEnum

from blockhost.bytebuffer import ByteBuffer


class TagType(IntEnum):
    """Tag kinds, valued by their one-byte wire identifier."""

    END = 0
    BYTE = 1
    SHORT = 2
    INT = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    COMPOUND = 10
    INT_ARRAY = 11
    LONG_ARRAY = 12

    @classmethod
    def from_id(cls, type_id: int) -> "TagType":
        """Look up the tag kind for a wire identifier."""
        if type_id > max(cls):
            raise ValueError("Tried to get Tag Type with Tag Type ID > 12.")
        try:
            return cls(type_id)
        except ValueError:
            raise ValueError(f"Invalid Tag Type ID: {type_id}") from None

    @property
    def type_name(self) -> str:
        """The conventional name of the kind, such as ``TAG_ByteArray``."""
        return "TAG_" + "".join(part.capitalize() for part in self.name.split("_"))


def read_tag_type(buffer: ByteBuffer) -> TagType:
    """Read a one-byte tag kind from the front of ``buffer``."""
    return TagType.from_id(buffer.read_ubyte())