from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..http import cdn
from .permission import Permissions
from .snowflake import Resource, Snowflake

if TYPE_CHECKING:
    from yarl import URL

    from ..types import Role as RoleP

__all__ = (
    "Role",
)

@dataclass(eq=False, repr=False)
class Role(Resource):
    __slots__ = (
        "guild_id",
        "name",
        "color",
        "display_separate",
        "position",
        "permissions",
        "integration_managed",
        "mentionable",
        "icon",
        "emoji",
        "bot_id",
        "integration_id",
        "premium_subscriber"
    )
    guild_id: Snowflake
    name: str
    color: int
    display_separate: bool
    position: int
    permissions: Permissions
    integration_managed: bool
    mentionable: bool
    icon: str | None
    emoji: str | None
    bot_id: Snowflake | None
    integration_id: Snowflake | None
    premium_subscriber: bool | None # None to indicate that tags are missing

    @classmethod
    def from_data(cls, data: RoleP, guild_id: int) -> Role:
        self = object.__new__(cls)
        Resource.__init__(self, data["id"])
        self.guild_id = Snowflake(guild_id)
        self.name = data["name"]
        self.color = data.get("color", 0)
        self.display_separate = data.get("hoist", False)
        self.position = data.get("position", 0)
        self.permissions = Permissions(data.get("permissions", 0))
        self.integration_managed = data.get("managed", False)
        self.mentionable = data.get("mentionable", False)
        self.icon = None
        self.emoji = None
        self.bot_id = None
        self.integration_id = None
        self.premium_subscriber = None
        self._patch(data)
        return self

    def _patch(self, data: RoleP) -> None:
        if "name" in data:
            self.name = data["name"]
        if "color" in data:
            self.color = data["color"]
        if "hoist" in data:
            self.display_separate = data["hoist"]
        if "position" in data:
            self.position = data["position"]
        if "permissions" in data:
            self.permissions = Permissions(data["permissions"])
        if "managed" in data:
            self.integration_managed = data["managed"]
        if "mentionable" in data:
            self.mentionable = data["mentionable"]
        if "icon" in data:
            self.icon = data["icon"]
        if "unicode_emoji" in data:
            self.emoji = data["unicode_emoji"]

        tags = data.get("tags")
        if tags is not None:
            bot_id = tags.get("bot_id")
            integration_id = tags.get("integration_id")
            self.bot_id = Snowflake(bot_id) if bot_id is not None else None
            self.integration_id = Snowflake(integration_id) if integration_id is not None else None
            self.premium_subscriber = "premium_subscriber" in tags

    @property
    def is_default(self) -> bool:
        """:class:`bool`: Whether this is the ``@everyone`` role"""
        return self.id == self.guild_id

    @property
    def mention(self) -> str:
        if self.is_default:
            return "@everyone"
        return f"<@&{self.id}>"

    @property
    def icon_url(self) -> URL | None:
        if self.icon is None:
            return None
        return cdn.ROLE_ICON.make_url(cdn.PNG, id=self.id, hash=self.icon)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Role(id={self.id}, name={self.name!r}, position={self.position})"
