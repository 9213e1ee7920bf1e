"""Connected players and what the client and the session service tell us about them."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ClientInformation:
    """Settings the client reports during configuration."""

    locale: str = ""
    view_distance: int = 0
    chat_mode: int = 0
    chat_colors_enabled: bool = False
    displayed_skin_parts: int = 0
    main_hand: int = 0
    text_filtering_enabled: bool = False
    allow_server_listings: bool = False


@dataclass
class MojangProfileProperty:
    """One property of a session profile, such as the skin textures."""

    name: str
    value: str
    signature: str = ""

    def is_signed(self) -> bool:
        return bool(self.signature)


@dataclass
class MojangProfile:
    """The profile returned by the session service for an authenticated player."""

    unique_id: uuid.UUID
    name: str
    properties: list[MojangProfileProperty] = field(default_factory=list)


@dataclass
class Player:
    """A player together with the connection it came in on."""

    connection: Any
    username: str
    unique_id: Optional[uuid.UUID]
    mojang_profile: Optional[MojangProfile] = None
    client_information: ClientInformation = field(default_factory=ClientInformation)