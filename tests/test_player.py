import uuid

from blockhost.player import ClientInformation, MojangProfile, MojangProfileProperty, Player


def test_property_signed_only_with_signature():
    assert MojangProfileProperty("textures", "e30=", "signature").is_signed() is True
    assert MojangProfileProperty("textures", "e30=").is_signed() is False
    assert MojangProfileProperty("textures", "e30=", "").is_signed() is False


def test_client_information_defaults():
    info = ClientInformation()
    assert info.locale == ""
    assert info.view_distance == 0
    assert info.chat_colors_enabled is False
    assert info.allow_server_listings is False


def test_player_has_own_client_information():
    first = Player(None, "alice", uuid.uuid4())
    second = Player(None, "bob", uuid.uuid4())
    first.client_information.locale = "en_us"
    assert second.client_information.locale == ""
    assert first.client_information is not second.client_information


def test_player_profile_starts_empty_and_can_be_set():
    unique_id = uuid.uuid4()
    player = Player(None, "alice", unique_id)
    assert player.mojang_profile is None
    profile = MojangProfile(unique_id, "alice", [MojangProfileProperty("textures", "e30=")])
    player.mojang_profile = profile
    assert player.mojang_profile.unique_id == unique_id
    assert player.mojang_profile.properties[0].name == "textures"