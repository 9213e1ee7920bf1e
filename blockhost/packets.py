"""Serverbound packets read during handshaking, login and configuration."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from blockhost.bytebuffer import ByteBuffer
from blockhost.player import ClientInformation
from blockhost.protocol import ConnectionState


@dataclass
class Handshake:
    """The first packet a client sends, naming the state it wants next."""

    protocol_version: int
    server_address: str
    server_port: int
    next_state: int

    @classmethod
    def read(cls, buffer: ByteBuffer) -> "Handshake":
        return cls(
            protocol_version=buffer.read_varint(),
            server_address=buffer.read_string(),
            server_port=buffer.read_be_ushort(),
            next_state=buffer.read_varint(),
        )

    @property
    def next_connection_state(self) -> ConnectionState:
        """The requested state; raises ValueError for an unknown one."""
        return ConnectionState(self.next_state)


@dataclass
class LoginStart:
    """The client's username and UUID at the start of login."""

    username: str
    unique_id: uuid.UUID

    @classmethod
    def read(cls, buffer: ByteBuffer) -> "LoginStart":
        return cls(buffer.read_string(), buffer.read_uuid())


@dataclass
class EncryptionResponse:
    """The shared secret and verify token, both encrypted with the server key."""

    shared_secret: bytes
    verify_token: bytes

    @classmethod
    def read(cls, buffer: ByteBuffer) -> "EncryptionResponse":
        shared_secret = buffer.read_ubytes(buffer.read_varint())
        verify_token = buffer.read_ubytes(buffer.read_varint())
        return cls(shared_secret, verify_token)


@dataclass
class LoginPluginResponse:
    """A reply to a login plugin request; the rest of the packet is its data."""

    message_id: int
    channel: str
    data: bytes

    @classmethod
    def read(cls, buffer: ByteBuffer) -> "LoginPluginResponse":
        message_id = buffer.read_varint()
        channel = buffer.read_string()
        return cls(message_id, channel, buffer.read_ubytes(len(buffer)))


@dataclass
class PluginMessage:
    """A plugin channel message sent during configuration."""

    channel: str
    data: bytes

    @classmethod
    def read(cls, buffer: ByteBuffer) -> "PluginMessage":
        channel = buffer.read_string()
        return cls(channel, buffer.read_ubytes(len(buffer)))


def read_client_information(buffer: ByteBuffer) -> ClientInformation:
    """Read the client settings packet sent during configuration."""
    return ClientInformation(
        locale=buffer.read_string(),
        view_distance=buffer.read_byte(),
        chat_mode=buffer.read_varint(),
        chat_colors_enabled=buffer.read_boolean(),
        displayed_skin_parts=buffer.read_ubyte(),
        main_hand=buffer.read_varint(),
        text_filtering_enabled=buffer.read_boolean(),
        allow_server_listings=buffer.read_boolean(),
    )