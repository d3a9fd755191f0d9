from __future__ import annotations

import asyncio

import pytest

from cachecord import GuildEmoji, Snowflake
from cachecord.errors import (EmojiManaged, GuildMemberStateMissing,
                              MissingPermissions, NotFound, UnknownGuild)

from conftest import (EMOJI_ROLE, GUILD_ID, ME_ID, emoji_payload,
                      guild_payload, user_payload)


def make_emoji(client, guild, **overrides) -> GuildEmoji:
    return guild.emojis._add(emoji_payload(**overrides))


def state(emoji: GuildEmoji):
    return (
        emoji.id, emoji.name, emoji.managed, emoji.available,
        emoji.require_colons, emoji.animated, emoji.author, frozenset(emoji.role_ids),
    )


def test_construct_from_payload(client, guild):
    emoji = GuildEmoji(client, emoji_payload("1", name="foo", roles=["99"]), guild)

    assert emoji.id == 1 and isinstance(emoji.id, Snowflake)
    assert emoji.guild_id == int(GUILD_ID)
    assert emoji.guild is guild
    assert emoji.name == "foo"
    assert emoji.role_ids == {Snowflake(99)}
    assert emoji.author is None


def test_construct_without_id_raises(client, guild):
    with pytest.raises(KeyError):
        GuildEmoji(client, {"name": "foo"}, guild) # type: ignore[typeddict-item]


def test_patch_is_partial(client, guild):
    emoji = GuildEmoji(client, {"id": "1", "name": "foo", "managed": False, "roles": ["99"]}, guild)
    emoji._patch({"name": "bar"}) # type: ignore[typeddict-item]

    assert emoji.name == "bar"
    assert emoji.role_ids == {Snowflake(99)}
    assert emoji.managed is False


def test_patch_is_idempotent(client, guild):
    payload = emoji_payload(name="x", roles=["5", "6"], user=user_payload())
    emoji = GuildEmoji(client, payload, guild)

    emoji._patch(payload)
    once = state(emoji)
    emoji._patch(payload)

    assert state(emoji) == once


def test_patch_user_uses_shared_cache(client, guild):
    emoji = make_emoji(client, guild, user=user_payload("77"))

    assert emoji.author is client.users.get(77)


def test_clone_is_independent(client, guild):
    emoji = make_emoji(client, guild, roles=["9"])
    clone = emoji._clone()

    assert clone is not emoji
    assert clone.equals(emoji)
    assert emoji.equals(clone)

    clone.role_ids.add(Snowflake(10))
    clone.name = "changed"

    assert emoji.role_ids == {Snowflake(9)}
    assert emoji.name == "foo"


def test_identity_equality(client, guild):
    a = make_emoji(client, guild, id="1")
    b = GuildEmoji(client, emoji_payload("1", name="other"), guild)
    c = make_emoji(client, guild, id="2")

    assert a == b
    assert hash(a) == hash(b)
    assert a != c


def test_equals_emoji(client, guild):
    a = GuildEmoji(client, emoji_payload("1", roles=["9"]), guild)
    b = GuildEmoji(client, emoji_payload("1", roles=["9"]), guild)
    c = GuildEmoji(client, emoji_payload("2", roles=["9"]), guild)

    assert a.equals(a)
    assert a.equals(b) and b.equals(a)
    assert not a.equals(c) and not c.equals(a)

    b._patch({"available": False}) # type: ignore[typeddict-item]
    assert not a.equals(b)


def test_equals_raw_payload(client, guild):
    emoji = GuildEmoji(client, {"id": "1", "name": "x", "roles": ["9"]}, guild)

    assert emoji.equals({"id": "1", "name": "x", "roles": ["9"]})
    assert not emoji.equals({"id": "1", "name": "x", "roles": ["9", "10"]})
    assert not emoji.equals({"id": "2", "name": "x", "roles": ["9"]})
    assert not emoji.equals({"id": "1", "name": "y", "roles": ["9"]})
    assert not emoji.equals("1") # type: ignore[arg-type]


def test_str_and_identifier(client, guild):
    emoji = make_emoji(client, guild, id="5", name="blob")
    animated = make_emoji(client, guild, id="6", name="party", animated=True)

    assert str(emoji) == "<:blob:5>"
    assert str(animated) == "<a:party:6>"
    assert animated.identifier == "a:party:6"
    assert str(emoji.url) == "https://cdn.discordapp.com/emojis/5.png"
    assert str(animated.url) == "https://cdn.discordapp.com/emojis/6.gif"


def test_deletable(client, guild):
    assert make_emoji(client, guild).deletable is True
    assert make_emoji(client, guild, id="2", managed=True).deletable is False


def test_not_deletable_without_permission(client, powerless_guild):
    emoji = make_emoji(client, powerless_guild)
    assert emoji.deletable is False


def test_deletable_requires_member_state(client):
    guild = client._add_guild(guild_payload(members=False))
    emoji = make_emoji(client, guild)

    with pytest.raises(GuildMemberStateMissing):
        emoji.deletable


def test_owner_can_delete(client):
    guild = client._add_guild(guild_payload(owner_id=ME_ID))
    assert make_emoji(client, guild).deletable is True


def test_fetch_author(client, guild, http):
    emoji = make_emoji(client, guild, id="3")
    http.emojis[(int(GUILD_ID), 3)] = emoji_payload("3", name="renamed", user=user_payload("42"))

    author = asyncio.run(emoji.fetch_author())

    assert author is not None and author.id == 42
    assert emoji.author is author
    assert emoji.name == "renamed"
    assert http.calls == [("get_guild_emoji", (int(GUILD_ID), 3), {})]


def test_fetch_author_may_stay_missing(client, guild, http):
    emoji = make_emoji(client, guild, id="3")
    http.emojis[(int(GUILD_ID), 3)] = emoji_payload("3")

    assert asyncio.run(emoji.fetch_author()) is None


def test_fetch_author_managed_makes_no_request(client, guild, http):
    emoji = make_emoji(client, guild, managed=True)

    with pytest.raises(EmojiManaged):
        asyncio.run(emoji.fetch_author())
    assert http.calls == []


def test_fetch_author_missing_permission(client, powerless_guild, http):
    emoji = make_emoji(client, powerless_guild)

    with pytest.raises(MissingPermissions) as info:
        asyncio.run(emoji.fetch_author())

    assert info.value.permission == "manage_emojis_and_stickers"
    assert info.value.guild is powerless_guild
    assert http.calls == []


def test_fetch_author_missing_member_state(client, http):
    guild = client._add_guild(guild_payload(members=False))
    emoji = make_emoji(client, guild)

    with pytest.raises(GuildMemberStateMissing):
        asyncio.run(emoji.fetch_author())
    assert http.calls == []


def test_fetch_author_transport_error_propagates(client, guild, http):
    emoji = make_emoji(client, guild, id="404")

    with pytest.raises(NotFound):
        asyncio.run(emoji.fetch_author())
    assert http.call_names() == ["get_guild_emoji"]


def test_edit_and_set_name_delegate(client, guild, http):
    emoji = make_emoji(client, guild, id="7")

    edited = asyncio.run(emoji.set_name("bar", "cleanup"))

    assert http.calls == [("modify_guild_emoji", (int(GUILD_ID), 7), {"payload": {"name": "bar"}, "reason": "cleanup"})]
    assert edited.name == "bar"
    assert edited == emoji


def test_delete_returns_self(client, guild, http):
    emoji = make_emoji(client, guild, id="8")

    result = asyncio.run(emoji.delete("spam"))

    assert result is emoji
    assert result.name == "foo"
    assert http.calls == [("delete_guild_emoji", (int(GUILD_ID), 8), {"reason": "spam"})]
    assert 8 not in guild.emojis


def test_orphaned_emoji(client, guild):
    emoji = make_emoji(client, guild)
    client._remove_guild(guild.id)

    with pytest.raises(UnknownGuild):
        emoji.guild
    with pytest.raises(UnknownGuild):
        asyncio.run(emoji.edit({"name": "x"}))


def test_role_manager(client, guild, http):
    emoji = make_emoji(client, guild, id="11", roles=[EMOJI_ROLE, "12345"])

    roles = emoji.roles
    assert len(roles) == 2
    assert list(roles.cache) == [Snowflake(EMOJI_ROLE)]
    assert guild.roles[Snowflake(EMOJI_ROLE)] in roles
    assert int(EMOJI_ROLE) in roles

    asyncio.run(roles.remove("12345"))
    assert http.calls[-1][2]["payload"] == {"roles": [EMOJI_ROLE]}

    assert emoji.role_ids == {Snowflake(EMOJI_ROLE)}

    asyncio.run(roles.add(guild.default_role))
    assert http.calls[-1][2]["payload"] == {"roles": [GUILD_ID, EMOJI_ROLE]}
    assert guild.emojis.get(11).role_ids == {Snowflake(GUILD_ID), Snowflake(EMOJI_ROLE)}

    with pytest.raises(TypeError):
        asyncio.run(roles.add(object()))


def test_consecutive_role_edits_keep_both(client, guild, http):
    emoji = make_emoji(client, guild, id="13", roles=[])

    asyncio.run(emoji.roles.add(EMOJI_ROLE))
    asyncio.run(emoji.roles.add(GUILD_ID))

    assert http.calls[-1][2]["payload"] == {"roles": [GUILD_ID, EMOJI_ROLE]}
    assert emoji.role_ids == {Snowflake(GUILD_ID), Snowflake(EMOJI_ROLE)}


def test_set_name_updates_cache(client, guild):
    emoji = make_emoji(client, guild, id="14")

    asyncio.run(emoji.set_name("bar"))

    assert guild.emojis.get(14) is emoji
    assert emoji.name == "bar"


def test_equals_malformed_payload(client, guild):
    emoji = make_emoji(client, guild, id="15", roles=["9"])

    assert not emoji.equals({"id": "abc", "name": "foo", "roles": ["9"]})
    assert not emoji.equals({"id": "15", "name": "foo", "roles": ["nine"]})
    assert not emoji.equals({"id": None, "name": "foo"})
    assert not emoji.equals({"name": "foo", "roles": ["9"]})
