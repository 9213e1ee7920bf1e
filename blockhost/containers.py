"""List and compound tags of the named binary tag format."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from blockhost.bytebuffer import ByteBuffer
from blockhost.tag_type import TagType, read_tag_type
from blockhost.tags import (
    Tag,
    TagByte,
    TagByteArray,
    TagDouble,
    TagEnd,
    TagFloat,
    TagInt,
    TagIntArray,
    TagLong,
    TagLongArray,
    TagShort,
    TagString,
)


def _entries_block(header: str, entries: list[Tag], indent: int) -> str:
    indentation = "\t" * indent
    body = "".join(f"{entry.to_string(indent + 1)}\n" for entry in entries)
    return f"{header}\n{indentation}{{\n{body}{indentation}}}"


@dataclass
class TagList(Tag):
    """An ordered sequence of unnamed tags that all share one kind."""

    tag_type: ClassVar[TagType] = TagType.LIST
    list_type: TagType
    items: list[Tag] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.list_type = TagType(self.list_type)
        if any(item.tag_type != self.list_type for item in self.items):
            raise ValueError("Tried to create TagList with items of multiple tag types.")

    @classmethod
    def read(cls, buffer: ByteBuffer, include_name: bool = True) -> "TagList":
        """Read a list whose kind byte has already been consumed."""
        name = buffer.read_string_modified_utf8() if include_name else ""
        list_type = read_tag_type(buffer)
        length = buffer.read_be_int()
        items: list[Tag] = []
        if length > 0:
            if list_type == TagType.END:
                raise ValueError("Encountered NBT Tag List with End Type Tag, but length longer than 0.")
            items = [read_tag(list_type, buffer, include_name=False) for _ in range(length)]
        return cls(name, list_type, items)

    def write(self, buffer: ByteBuffer, include_preamble: bool = True) -> None:
        if include_preamble:
            self.write_type(buffer)
            self.write_name(buffer)
        buffer.write_ubyte(int(self.list_type))
        buffer.write_be_int(len(self.items))
        for item in self.items:
            item.write(buffer, False)

    def to_string(self, indent: int = 0) -> str:
        header = f"{Tag.to_string(self, indent)} {len(self.items)} entries"
        return _entries_block(header, self.items, indent)


@dataclass
class TagCompound(Tag):
    """A group of named tags, closed on the wire by an end tag."""

    tag_type: ClassVar[TagType] = TagType.COMPOUND
    items: list[Tag] = field(default_factory=list)

    @classmethod
    def read(cls, buffer: ByteBuffer, include_name: bool = True) -> "TagCompound":
        """Read a compound whose kind byte has already been consumed.

        The closing end tag is consumed but not kept among the items.
        """
        name = buffer.read_string_modified_utf8() if include_name else ""
        items: list[Tag] = []
        while True:
            if len(buffer) == 0:
                raise ValueError("ByteBuffer ended while reading TagCompound, TagEnd never found.")
            next_type = read_tag_type(buffer)
            if next_type == TagType.END:
                break
            items.append(read_tag(next_type, buffer, include_name=True))
        return cls(name, items)

    def write(self, buffer: ByteBuffer, include_preamble: bool = True) -> None:
        if include_preamble:
            self.write_type(buffer)
            self.write_name(buffer)
        for item in self.items:
            item.write(buffer, True)

    def to_string(self, indent: int = 0) -> str:
        entries = [item for item in self.items if item.tag_type != TagType.END]
        count = len(self.items) - 1 if self.items and self.items[-1].tag_type == TagType.END else len(self.items)
        header = f"{Tag.to_string(self, indent)} {count} entries"
        return _entries_block(header, entries, indent)


_READERS = {
    TagType.BYTE: TagByte,
    TagType.SHORT: TagShort,
    TagType.INT: TagInt,
    TagType.LONG: TagLong,
    TagType.FLOAT: TagFloat,
    TagType.DOUBLE: TagDouble,
    TagType.BYTE_ARRAY: TagByteArray,
    TagType.STRING: TagString,
    TagType.LIST: TagList,
    TagType.COMPOUND: TagCompound,
    TagType.INT_ARRAY: TagIntArray,
    TagType.LONG_ARRAY: TagLongArray,
}


def read_tag(tag_type: TagType, buffer: ByteBuffer, include_name: bool = True) -> Tag:
    """Read the body of a tag of kind ``tag_type`` from ``buffer``."""
    tag_type = TagType(tag_type)
    if tag_type == TagType.END:
        return TagEnd()
    return _READERS[tag_type].read(buffer, include_name)