"""Fluent builders for compound and list tags."""

from __future__ import annotations

from collections.abc import Iterable

from blockhost.containers import TagCompound, TagList
from blockhost.tag_type import TagType
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


class TagCompoundBuilder:
    """Collects named tags and produces a compound closed by an end tag."""

    def __init__(self, name: str = "") -> None:
        self._name = name
        self._items: list[Tag] = []

    def _add(self, tag: Tag) -> "TagCompoundBuilder":
        self._items.append(tag)
        return self

    def end(self) -> TagCompound:
        """Close the compound with an end tag and return it."""
        self._items.append(TagEnd())
        return TagCompound(self._name, list(self._items))

    def add_byte(self, name: str, value: int) -> "TagCompoundBuilder":
        return self._add(TagByte(name, value))

    def add_short(self, name: str, value: int) -> "TagCompoundBuilder":
        return self._add(TagShort(name, value))

    def add_int(self, name: str, value: int) -> "TagCompoundBuilder":
        return self._add(TagInt(name, value))

    def add_long(self, name: str, value: int) -> "TagCompoundBuilder":
        return self._add(TagLong(name, value))

    def add_float(self, name: str, value: float) -> "TagCompoundBuilder":
        return self._add(TagFloat(name, value))

    def add_double(self, name: str, value: float) -> "TagCompoundBuilder":
        return self._add(TagDouble(name, value))

    def add_byte_array(self, name: str, value: Iterable[int]) -> "TagCompoundBuilder":
        return self._add(TagByteArray(name, list(value)))

    def add_string(self, name: str, value: str) -> "TagCompoundBuilder":
        return self._add(TagString(name, value))

    def add_list(self, value: TagList) -> "TagCompoundBuilder":
        return self._add(value)

    def add_compound(self, value: TagCompound) -> "TagCompoundBuilder":
        return self._add(value)

    def add_int_array(self, name: str, value: Iterable[int]) -> "TagCompoundBuilder":
        return self._add(TagIntArray(name, list(value)))

    def add_long_array(self, name: str, value: Iterable[int]) -> "TagCompoundBuilder":
        return self._add(TagLongArray(name, list(value)))


class TagListBuilder:
    """Collects unnamed tags of one kind and produces a list tag."""

    def __init__(self, list_type: TagType, name: str = "") -> None:
        self._list_type = TagType(list_type)
        self._name = name
        self._items: list[Tag] = []

    def _add(self, expected: TagType, tag: Tag) -> "TagListBuilder":
        if expected != self._list_type:
            raise ValueError("Tried to add invalid type to TagList")
        self._items.append(tag)
        return self

    def build(self) -> TagList:
        return TagList(self._name, self._list_type, list(self._items))

    def add_byte(self, value: int) -> "TagListBuilder":
        return self._add(TagType.BYTE, TagByte("", value))

    def add_short(self, value: int) -> "TagListBuilder":
        return self._add(TagType.SHORT, TagShort("", value))

    def add_int(self, value: int) -> "TagListBuilder":
        return self._add(TagType.INT, TagInt("", value))

    def add_long(self, value: int) -> "TagListBuilder":
        return self._add(TagType.LONG, TagLong("", value))

    def add_float(self, value: float) -> "TagListBuilder":
        return self._add(TagType.FLOAT, TagFloat("", value))

    def add_double(self, value: float) -> "TagListBuilder":
        return self._add(TagType.DOUBLE, TagDouble("", value))

    def add_byte_array(self, value: Iterable[int]) -> "TagListBuilder":
        return self._add(TagType.BYTE_ARRAY, TagByteArray("", list(value)))

    def add_string(self, value: str) -> "TagListBuilder":
        return self._add(TagType.STRING, TagString("", value))

    def add_list(self, value: TagList) -> "TagListBuilder":
        return self._add(TagType.LIST, value)

    def add_compound(self, value: TagCompound) -> "TagListBuilder":
        return self._add(TagType.COMPOUND, value)

    def add_int_array(self, value: Iterable[int]) -> "TagListBuilder":
        return self._add(TagType.INT_ARRAY, TagIntArray("", list(value)))

    def add_long_array(self, value: Iterable[int]) -> "TagListBuilder":
        return self._add(TagType.LONG_ARRAY, TagLongArray("", list(value)))