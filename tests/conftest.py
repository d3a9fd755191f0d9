from __future__ import annotations

from typing import Any

import pytest

from cachecord import Client, Permissions
from cachecord.errors import NotFound

ME_ID = "1000"
OTHER_ID = "1001"
GUILD_ID = "500"
ADMIN_ROLE = "600"
EMOJI_ROLE = "601"

def user_payload(id: str = OTHER_ID, **overrides: Any) -> dict[str, Any]:
    data = {
        "id": id,
        "username": f"user{id}",
        "discriminator": "0",
        "avatar": None,
    }
    data.update(overrides)
    return data

def role_payload(id: str, permissions: int = 0, **overrides: Any) -> dict[str, Any]:
    data = {
        "id": id,
        "name": f"role{id}",
        "color": 0,
        "hoist": False,
        "position": 1,
        "permissions": str(permissions),
        "managed": False,
        "mentionable": False,
    }
    data.update(overrides)
    return data

def emoji_payload(id: str = "1", **overrides: Any) -> dict[str, Any]:
    data = {
        "id": id,
        "name": "foo",
        "roles": [],
        "require_colons": True,
        "managed": False,
        "animated": False,
        "available": True,
    }
    data.update(overrides)
    return data

def guild_payload(*, me_roles: list[str] | None = None, members: bool = True, **overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": GUILD_ID,
        "name": "guild",
        "icon": None,
        "owner_id": OTHER_ID,
        "roles": [
            role_payload(GUILD_ID, 0, name="@everyone", position=0),
            role_payload(ADMIN_ROLE, int(Permissions(1 << 30))),
            role_payload(EMOJI_ROLE, 0),
        ],
        "emojis": [],
    }
    if members:
        data["members"] = [
            {"user": user_payload(ME_ID), "roles": list(me_roles or []), "nick": None},
        ]
    data.update(overrides)
    return data


class FakeHTTP:
    """In memory stand-in for :class:`cachecord.http.HTTPSession` recording every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []
        self.emojis: dict[tuple[int, int], dict[str, Any]] = {}
        self.users: dict[int, dict[str, Any]] = {}
        self.guilds: dict[int, dict[str, Any]] = {}
        self.me = user_payload(ME_ID)
        self.closed = False
        self._next_id = 9000

    def _record(self, call: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((call, args, kwargs))

    def call_names(self) -> list[str]:
        return [c[0] for c in self.calls]

    async def get_current_user(self) -> dict[str, Any]:
        self._record("get_current_user")
        return self.me

    async def get_user(self, user_id: int) -> dict[str, Any]:
        self._record("get_user", user_id)
        try:
            return self.users[int(user_id)]
        except KeyError:
            raise NotFound(404, {"message": "Unknown User", "code": 10013}) from None

    async def get_guild(self, guild_id: int) -> dict[str, Any]:
        self._record("get_guild", guild_id)
        return self.guilds[int(guild_id)]

    async def list_guild_emojis(self, guild_id: int) -> list[dict[str, Any]]:
        self._record("list_guild_emojis", guild_id)
        return [d for (gid, _), d in self.emojis.items() if gid == int(guild_id)]

    async def get_guild_emoji(self, guild_id: int, emoji_id: int) -> dict[str, Any]:
        self._record("get_guild_emoji", guild_id, emoji_id)
        try:
            return self.emojis[(int(guild_id), int(emoji_id))]
        except KeyError:
            raise NotFound(404, {"message": "Unknown Emoji", "code": 10014}) from None

    async def create_guild_emoji(self, guild_id: int, *, name: str, image: str, roles=None, reason=None) -> dict[str, Any]:
        self._record("create_guild_emoji", guild_id, name=name, image=image, roles=roles, reason=reason)
        self._next_id += 1
        data = emoji_payload(str(self._next_id), name=name, roles=list(roles or []), user=self.me)
        self.emojis[(int(guild_id), self._next_id)] = data
        return data

    async def modify_guild_emoji(self, guild_id: int, emoji_id: int, *, payload: dict[str, Any], reason=None) -> dict[str, Any]:
        self._record("modify_guild_emoji", guild_id, emoji_id, payload=payload, reason=reason)
        key = (int(guild_id), int(emoji_id))
        data = dict(self.emojis.get(key) or emoji_payload(str(emoji_id)))
        if "name" in payload:
            data["name"] = payload["name"]
        if "roles" in payload:
            data["roles"] = list(payload["roles"] or [])
        self.emojis[key] = data
        return data

    async def delete_guild_emoji(self, guild_id: int, emoji_id: int, *, reason=None) -> None:
        self._record("delete_guild_emoji", guild_id, emoji_id, reason=reason)
        self.emojis.pop((int(guild_id), int(emoji_id)), None)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def http() -> FakeHTTP:
    return FakeHTTP()

@pytest.fixture
def client(http: FakeHTTP) -> Client:
    client = Client("token", http=http) # type: ignore[arg-type]
    client.user = client.users._add(http.me)
    return client

@pytest.fixture
def guild(client: Client):
    """A guild where the client can manage emojis."""
    return client._add_guild(guild_payload(me_roles=[ADMIN_ROLE]))

@pytest.fixture
def powerless_guild(client: Client):
    return client._add_guild(guild_payload(me_roles=[]))
