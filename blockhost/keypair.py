"""The server's RSA key pair used during the login handshake."""

from __future__ import annotations

from functools import cached_property

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

KEY_SIZE = 1024


class RSAKeypair:
    """A freshly generated RSA key pair."""

    def __init__(self, key_size: int = KEY_SIZE) -> None:
        self.key_size = key_size
        self.private_key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)
        self.public_key = self.private_key.public_key()

    @cached_property
    def der_encoded_public_key(self) -> bytes:
        """The public key as DER-encoded SubjectPublicKeyInfo."""
        return self.public_key.public_bytes(
            serialization.Encoding.DER,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def decrypt(self, encrypted: bytes) -> bytes:
        """Decrypt PKCS#1 v1.5 padded data; raises ValueError if it is invalid."""
        return self.private_key.decrypt(bytes(encrypted), padding.PKCS1v15())