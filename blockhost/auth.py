"""Session authentication helpers: the server hash and the profile answer."""

from __future__ import annotations

import hashlib
import json
import uuid
from typing import Union

from blockhost.player import MojangProfile, MojangProfileProperty
from blockhost.uuidutil import canonicalize_uuid

SESSION_URL = "https://sessionserver.mojang.com/session/minecraft/hasJoined"


def twos_complement(data: bytes) -> bytes:
    """Negate a big-endian number held in ``data``, keeping its width."""
    width = len(data)
    if width == 0:
        return b""
    value = int.from_bytes(data, "big")
    return ((-value) % (1 << (8 * width))).to_bytes(width, "big")


def mc_hex_digest(digest: bytes) -> str:
    """Format a digest as a signed hexadecimal number without leading zeros."""
    negative = len(digest) > 0 and digest[0] >= 0x80
    if negative:
        digest = twos_complement(digest)
    result = digest.hex().lstrip("0")
    return f"-{result}" if negative else result


def server_hash(shared_secret: bytes, public_key: bytes) -> str:
    """The server id hash sent to the session service."""
    sha1 = hashlib.sha1()
    sha1.update(shared_secret)
    sha1.update(public_key)
    return mc_hex_digest(sha1.digest())


def parse_session_profile(body: Union[str, bytes]) -> MojangProfile:
    """Build a profile from the session service's JSON answer.

    Raises ValueError if the body is not JSON or holds no valid id.
    """
    document = json.loads(body)
    if not isinstance(document, dict):
        raise ValueError("Session response is not a JSON object")
    properties = [
        MojangProfileProperty(
            str(entry.get("name", "")),
            str(entry.get("value", "")),
            str(entry.get("signature", "")),
        )
        for entry in document.get("properties") or []
    ]
    unique_id = uuid.UUID(canonicalize_uuid(str(document.get("id", ""))))
    return MojangProfile(unique_id, str(document.get("name", "")), properties)