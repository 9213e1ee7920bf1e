"""Scalar and array tags of the named binary tag format."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from blockhost.bytebuffer import ByteBuffer
from blockhost.tag_type import TagType


@dataclass
class Tag:
    """A named tag; the kind is fixed by the subclass."""

    tag_type: ClassVar[TagType]
    name: str

    def write_type(self, buffer: ByteBuffer) -> None:
        buffer.write_ubyte(int(self.tag_type))

    def write_name(self, buffer: ByteBuffer) -> None:
        buffer.write_string_modified_utf8(self.name)

    def write(self, buffer: ByteBuffer, include_preamble: bool = True) -> None:
        """Write the tag; the preamble is its kind byte and its name."""
        if include_preamble:
            self.write_type(buffer)
            self.write_name(buffer)
        self._write_payload(buffer)

    def _write_payload(self, buffer: ByteBuffer) -> None:
        """Write the part that follows the preamble."""

    def to_string(self, indent: int = 0) -> str:
        """Human-readable description, indented by ``indent`` tabs."""
        indentation = "\t" * indent
        label = f"'{self.name}'" if self.name else "None"
        return f"{indentation}{self.tag_type.type_name}({label}):"

    def __str__(self) -> str:
        return self.to_string(0)


@dataclass
class TagEnd(Tag):
    """Marks the end of a compound tag."""

    tag_type: ClassVar[TagType] = TagType.END
    name: str = field(default="", init=False)

    def write(self, buffer: ByteBuffer, include_preamble: bool = True) -> None:
        self.write_type(buffer)

    def to_string(self, indent: int = 0) -> str:
        return ""


@dataclass
class _ValueTag(Tag):
    value: object

    @classmethod
    def _read_tag(cls, buffer: ByteBuffer, include_name: bool):
        name = buffer.read_string_modified_utf8() if include_name else ""
        return cls(name, cls._read_value(buffer))

    def _write_payload(self, buffer: ByteBuffer) -> None:
        self._write_value(buffer, self.value)

    def _describe(self) -> str:
        return str(self.value)

    def to_string(self, indent: int = 0) -> str:
        return f"{super().to_string(indent)} {self._describe()}"


@dataclass
class TagByte(_ValueTag):
    tag_type: ClassVar[TagType] = TagType.BYTE
    value: int
    _read_value = staticmethod(ByteBuffer.read_byte)
    _write_value = staticmethod(ByteBuffer.write_byte)

    @classmethod
    def read(cls, buffer: ByteBuffer, include_name: bool = True) -> TagByte:
        """Read a byte tag whose kind byte has already been consumed."""
        return cls._read_tag(buffer, include_name)


@dataclass
class TagShort(_ValueTag):
    tag_type: ClassVar[TagType] = TagType.SHORT
    value: int
    _read_value = staticmethod(ByteBuffer.read_be_short)
    _write_value = staticmethod(ByteBuffer.write_be_short)

    @classmethod
    def read(cls, buffer: ByteBuffer, include_name: bool = True) -> TagShort:
        """Read a short tag whose kind byte has already been consumed."""
        return cls._read_tag(buffer, include_name)


@dataclass
class TagInt(_ValueTag):
    tag_type: ClassVar[TagType] = TagType.INT
    value: int
    _read_value = staticmethod(ByteBuffer.read_be_int)
    _write_value = staticmethod(ByteBuffer.write_be_int)

    @classmethod
    def read(cls, buffer: ByteBuffer, include_name: bool = True) -> TagInt:
        """Read an int tag whose kind byte has already been consumed."""
        return cls._read_tag(buffer, include_name)


@dataclass
class TagLong(_ValueTag):
    tag_type: ClassVar[TagType] = TagType.LONG
    value: int
    _read_value = staticmethod(ByteBuffer.read_be_long)
    _write_value = staticmethod(ByteBuffer.write_be_long)

    @classmethod
    def read(cls, buffer: ByteBuffer, include_name: bool = True) -> TagLong:
        """Read a long tag whose kind byte has already been consumed."""
        return cls._read_tag(buffer, include_name)


@dataclass
class TagFloat(_ValueTag):
    tag_type: ClassVar[TagType] = TagType.FLOAT
    value: float
    _read_value = staticmethod(ByteBuffer.read_be_float)
    _write_value = staticmethod(ByteBuffer.write_be_float)

    @classmethod
    def read(cls, buffer: ByteBuffer, include_name: bool = True) -> TagFloat:
        """Read a float tag whose kind byte has already been consumed."""
        return cls._read_tag(buffer, include_name)

    def _describe(self) -> str:
        return f"{self.value:f}"


@dataclass
class TagDouble(_ValueTag):
    tag_type: ClassVar[TagType] = TagType.DOUBLE
    value: float
    _read_value = staticmethod(ByteBuffer.read_be_double)
    _write_value = staticmethod(ByteBuffer.write_be_double)

    @classmethod
    def read(cls, buffer: ByteBuffer, include_name: bool = True) -> TagDouble:
        """Read a double tag whose kind byte has already been consumed."""
        return cls._read_tag(buffer, include_name)

    def _describe(self) -> str:
        return f"{self.value:f}"


@dataclass
class TagString(_ValueTag):
    tag_type: ClassVar[TagType] = TagType.STRING
    value: str
    _read_value = staticmethod(ByteBuffer.read_string_modified_utf8)
    _write_value = staticmethod(ByteBuffer.write_string_modified_utf8)

    @classmethod
    def read(cls, buffer: ByteBuffer, include_name: bool = True) -> TagString:
        """Read a string tag whose kind byte has already been consumed."""
        return cls._read_tag(buffer, include_name)

    def _describe(self) -> str:
        return f'"{self.value}"'


@dataclass
class _ArrayTag(Tag):
    value: list
    _unit: ClassVar[str] = "items"

    @classmethod
    def _read_tag(cls, buffer: ByteBuffer, include_name: bool):
        name = buffer.read_string_modified_utf8() if include_name else ""
        length = buffer.read_be_int()
        return cls(name, [cls._read_item(buffer) for _ in range(length)])

    def _write_payload(self, buffer: ByteBuffer) -> None:
        buffer.write_be_int(len(self.value))
        for item in self.value:
            self._write_item(buffer, item)

    def to_string(self, indent: int = 0) -> str:
        return f"{super().to_string(indent)} [{len(self.value)} {self._unit}]"


@dataclass
class TagByteArray(_ArrayTag):
    tag_type: ClassVar[TagType] = TagType.BYTE_ARRAY
    value: list[int]
    _unit: ClassVar[str] = "bytes"
    _read_item = staticmethod(ByteBuffer.read_byte)
    _write_item = staticmethod(ByteBuffer.write_byte)

    @classmethod
    def read(cls, buffer: ByteBuffer, include_name: bool = True) -> TagByteArray:
        """Read a byte array tag whose kind byte has already been consumed."""
        return cls._read_tag(buffer, include_name)


@dataclass
class TagIntArray(_ArrayTag):
    tag_type: ClassVar[TagType] = TagType.INT_ARRAY
    value: list[int]
    _unit: ClassVar[str] = "ints"
    _read_item = staticmethod(ByteBuffer.read_be_int)
    _write_item = staticmethod(ByteBuffer.write_be_int)

    @classmethod
    def read(cls, buffer: ByteBuffer, include_name: bool = True) -> TagIntArray:
        """Read an int array tag whose kind byte has already been consumed."""
        return cls._read_tag(buffer, include_name)


@dataclass
class TagLongArray(_ArrayTag):
    tag_type: ClassVar[TagType] = TagType.LONG_ARRAY
    value: list[int]
    _unit: ClassVar[str] = "longs"
    _read_item = staticmethod(ByteBuffer.read_be_long)
    _write_item = staticmethod(ByteBuffer.write_be_long)

    @classmethod
    def read(cls, buffer: ByteBuffer, include_name: bool = True) -> TagLongArray:
        """Read a long array tag whose kind byte has already been consumed."""
        return cls._read_tag(buffer, include_name)