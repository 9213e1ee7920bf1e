"""Server-wide state: configuration, keys and the list of players."""

from __future__ import annotations

import uuid
from functools import cached_property
from typing import Any, Optional

from blockhost.config import load_server_config
from blockhost.keypair import RSAKeypair
from blockhost.player import Player

VERSION_NAME = "1.20.2"
PROTOCOL_VERSION = 764


class MinecraftServer:
    """Holds the configuration, the RSA key pair and the connected players."""

    version_name = VERSION_NAME
    protocol_version = PROTOCOL_VERSION

    def __init__(self, config: Optional[dict[str, Any]] = None) -> None:
        self.config: dict[str, Any] = load_server_config() if config is None else config
        self._players: list[Player] = []

    @cached_property
    def rsa_keypair(self) -> RSAKeypair:
        """The key pair for the login handshake, generated on first use."""
        return RSAKeypair()

    @property
    def players(self) -> list[Player]:
        """A copy of the current player list."""
        return list(self._players)

    def add_player(self, player: Player) -> None:
        self._players.append(player)

    def remove_player(self, unique_id: Optional[uuid.UUID]) -> None:
        """Remove every player with ``unique_id``; ``None`` removes nothing."""
        if unique_id is None:
            return
        self._players = [player for player in self._players if player.unique_id != unique_id]

    def get_player(self, username: str) -> Optional[Player]:
        return next((player for player in self._players if player.username == username), None)

    def get_player_by_id(self, unique_id: Optional[uuid.UUID]) -> Optional[Player]:
        return next((player for player in self._players if player.unique_id == unique_id), None)