import pytest

from blockhost.bytebuffer import ByteBuffer
from blockhost.containers import TagCompound, TagList, read_tag
from blockhost.tag_type import TagType, read_tag_type
from blockhost.tags import TagByte, TagEnd, TagInt, TagString


def _roundtrip(tag):
    buffer = ByteBuffer()
    tag.write(buffer)
    kind = read_tag_type(buffer)
    return kind, read_tag(kind, buffer), buffer


def test_list_roundtrip():
    original = TagList("nums", TagType.INT, [TagInt("", 1), TagInt("", -7)])
    kind, result, rest = _roundtrip(original)
    assert kind == TagType.LIST
    assert result == original
    assert len(rest) == 0


def test_list_rejects_mixed_types():
    with pytest.raises(ValueError, match="multiple tag types"):
        TagList("x", TagType.INT, [TagInt("", 1), TagByte("", 2)])


def test_empty_end_list_roundtrip():
    original = TagList("", TagType.END, [])
    _, result, _ = _roundtrip(original)
    assert result.items == []
    assert result.list_type == TagType.END


def test_end_list_with_length_raises():
    buffer = ByteBuffer()
    buffer.write_string_modified_utf8("")
    buffer.write_ubyte(0)
    buffer.write_be_int(2)
    with pytest.raises(ValueError, match="End Type Tag"):
        TagList.read(buffer)


def test_list_items_written_without_preamble():
    original = TagList("", TagType.BYTE, [TagByte("", 5)])
    buffer = ByteBuffer()
    original.write(buffer, False)
    assert buffer.data == bytes([1, 0, 0, 0, 1, 5])


def test_compound_roundtrip_drops_end():
    original = TagCompound("root", [TagByte("b", 3), TagString("s", "hi"), TagEnd()])
    kind, result, rest = _roundtrip(original)
    assert kind == TagType.COMPOUND
    assert result.name == "root"
    assert result.items == original.items[:-1]
    assert len(rest) == 0


def test_compound_wire_bytes():
    buffer = ByteBuffer()
    TagCompound("", [TagByte("a", 1), TagEnd()]).write(buffer)
    assert buffer.data == b"\x0a\x00\x00\x01\x00\x01a\x01\x00"


def test_compound_without_end_raises():
    buffer = ByteBuffer()
    TagCompound("c", [TagByte("a", 1)]).write(buffer)
    read_tag_type(buffer)
    with pytest.raises(ValueError, match="TagEnd never found"):
        TagCompound.read(buffer)


def test_nested_list_of_compounds_roundtrip():
    inner = TagCompound("", [TagInt("v", 9), TagEnd()])
    original = TagList("lst", TagType.COMPOUND, [inner])
    _, result, rest = _roundtrip(original)
    assert result.items[0].items == [TagInt("v", 9)]
    assert len(rest) == 0


def test_list_to_string():
    tag = TagList("nums", TagType.INT, [TagInt("", 1), TagInt("", 2)])
    assert tag.to_string(0) == "TAG_List('nums'): 2 entries\n{\n\tTAG_Int(None): 1\n\tTAG_Int(None): 2\n}"


def test_compound_to_string_skips_end():
    tag = TagCompound("", [TagByte("b", 4), TagEnd()])
    text = tag.to_string(1)
    assert text.startswith("\tTAG_Compound(None): 1 entries\n\t{\n")
    assert text.endswith("\t}")
    assert "\t\tTAG_Byte('b'): 4\n" in text


def test_read_tag_end_kind():
    assert read_tag(TagType.END, ByteBuffer()) == TagEnd()