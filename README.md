# blockhost

Building blocks for a server that speaks the Minecraft Java Edition protocol
(version 1.20.2, protocol 764).

## Modules

- `blockhost.varint` handles VarInt and VarLong values. It has `encode_varint`,
  `decode_varint`, `encode_varlong`, `decode_varlong` and `encoding_length`.
  The decoders take either an object with a `read_ubyte()` method or an
  iterable of byte values.
- `blockhost.bytebuffer` provides `ByteBuffer`. It is a byte queue: you write at
  the end and read from the front.
  - Plain readers and writers are little-endian. The `be_` ones are big-endian.
  - It also reads and writes VarInt-prefixed UTF-8 strings, modified UTF-8
    strings, VarInts and VarLongs, and UUIDs.
  - `compress()` and `decompress()` apply zlib to the contents in place.
  - A read that needs more bytes than the buffer holds raises
    `BufferUnderflowError`, which is a subclass of `ValueError`.
- `blockhost.tag_type` has `TagType`, an `IntEnum` of the NBT tag kinds. It also
  has `TagType.from_id`, `TagType.type_name` and `read_tag_type(buffer)`.
- `blockhost.tags` has the scalar and array tags: `TagEnd`, `TagByte`,
  `TagShort`, `TagInt`, `TagLong`, `TagFloat`, `TagDouble`, `TagString`,
  `TagByteArray`, `TagIntArray` and `TagLongArray`.
- `blockhost.containers` has `TagList`, `TagCompound` and `read_tag`.
  - Every tag has `write(buffer, include_preamble=True)` and
    `to_string(indent)`.
  - Every tag except `TagEnd` has a `read(buffer, include_name=True)`
    classmethod. It expects the kind byte to have been read already.
  - A `TagList` rejects items whose kind differs from its `list_type`.
- `blockhost.builders` has `TagCompoundBuilder` and `TagListBuilder`. They build
  tags fluently.
  - `TagCompoundBuilder.end()` adds the closing `TagEnd` and returns a
    `TagCompound`.
  - `TagListBuilder` raises `ValueError` when you add an item of the wrong kind.
- `blockhost.protocol` handles packet framing.
  - `ConnectionState` lists the protocol phases.
  - `Packet` holds an id and a payload.
  - `PacketDecoder.feed(data)` returns the list of packets completed by the
    bytes received so far. Set `compressed=True` once compression is on.
  - `encode_packet(packet_id, payload, compression_threshold=None)` builds a
    frame. Payloads at or above the threshold are deflated.
- `blockhost.packets` reads serverbound packets. It has `Handshake`,
  `LoginStart`, `EncryptionResponse`, `LoginPluginResponse`, `PluginMessage`
  and `read_client_information`.
- `blockhost.auth` supports session authentication.
  - `server_hash(shared_secret, public_key)` computes the server id hash using
    `mc_hex_digest` and `twos_complement`.
  - `parse_session_profile(body)` turns the session service's JSON answer into
    a `MojangProfile`.
- `blockhost.keypair` has `RSAKeypair`. It generates a 1024-bit key by default
  and offers `der_encoded_public_key` and PKCS#1 v1.5 `decrypt`.
- `blockhost.uuidutil` checks UUIDs written without dashes
  (`valid_undashed_uuid`) and adds the dashes back (`canonicalize_uuid`).
- `blockhost.config` has `load_server_config(path)`. It parses a TOML file into
  a dict. The default path is `../server.toml`.
- `blockhost.server` has `MinecraftServer`, which keeps the configuration, a
  lazily generated `rsa_keypair` and the player list. Players are managed with
  `add_player`, `remove_player`, `get_player` and `get_player_by_id`.
- `blockhost.player` has `Player`, `ClientInformation`, `MojangProfile` and
  `MojangProfileProperty`.

## What it does not do

The package does not listen on a socket and has no command to start a server.
It does not encrypt or decrypt the connection stream. It does not make the HTTP
request to the session service. It does not build clientbound packets such as
the status response or login success. It supplies the pieces that such a
server is built from.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Writing and reading an NBT compound:

```python
from blockhost.bytebuffer import ByteBuffer
from blockhost.builders import TagCompoundBuilder
from blockhost.containers import TagCompound

root = (
    TagCompoundBuilder("hello world")
    .add_string("name", "Bananrama")
    .add_int("level", 3)
    .end()
)

buffer = ByteBuffer()
root.write(buffer)

buffer.read_ubyte()  # the compound's kind byte
again = TagCompound.read(buffer)
print(again.to_string(0))
```

Framing and decoding a packet:

```python
from blockhost.protocol import PacketDecoder, encode_packet

frame = encode_packet(0x01, b"\x00\x00\x00\x00\x00\x00\x00\x2a")
packets = PacketDecoder().feed(frame)
print(packets[0].packet_id, packets[0].payload.read_be_long())  # 1 42
```