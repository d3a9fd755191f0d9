from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..http import cdn
from .flags import FrozenFlag as FF
from .flags import FrozenFlags
from .snowflake import Resource

if TYPE_CHECKING:
    from yarl import URL

    from ..types import User as UserP

__all__ = (
    "UserFlags",
    "BaseUser",
)

class UserFlags(FrozenFlags):
    __slots__ = ()

    staff = FF(1)
    """:class:`bool`: A discord employee"""
    partner = FF(1 << 1)
    """:class:`bool`: Owner of a partnered server"""
    hypesquad_events = FF(1 << 2)
    bug_hunter_level_1 = FF(1 << 3)
    hypesquad_bravery = FF(1 << 6)
    hypesquad_brilliance = FF(1 << 7)
    hypesquad_balance = FF(1 << 8)
    early_supporter = FF(1 << 9)
    team_user = FF(1 << 10)
    """:class:`bool`: User is a team"""
    bug_hunter_level_2 = FF(1 << 14)
    bug_hunter = FF(1 << 3 | 1 << 14)
    """:class:`bool`: Bug Hunter level 1 or 2"""
    verified_bot = FF(1 << 16)
    verified_dev = FF(1 << 17)
    certified_mod = FF(1 << 18)
    interaction_bot = FF(1 << 19)
    """:class:`bool`: The bot exclusively uses http interactions"""

@dataclass(eq=False, repr=False)
class BaseUser(Resource):
    """A cached user.

    The same instance is shared by every resource referencing the user,
    see :meth:`~cachecord.managers.UserManager._add`.
    """
    __slots__ = (
        "name",
        "discriminator",
        "global_name",
        "avatar",
        "bot",
        "banner",
        "accent_color",
        "flags",
    )

    name: str
    discriminator: str
    global_name: str | None
    avatar: str | None

    bot: bool | None
    banner: str | None
    accent_color: int | None
    flags: UserFlags | None

    @classmethod
    def from_data(cls, data: UserP) -> BaseUser:
        self = object.__new__(cls)
        Resource.__init__(self, data["id"])
        self.name = data["username"]
        self.discriminator = data.get("discriminator", "0")
        self.global_name = None
        self.avatar = None
        self.bot = None
        self.banner = None
        self.accent_color = None
        self.flags = None
        self._patch(data)
        return self

    def _patch(self, data: UserP) -> None:
        if "username" in data:
            self.name = data["username"]
        if "discriminator" in data:
            self.discriminator = data["discriminator"]
        if "global_name" in data:
            self.global_name = data["global_name"]
        if "avatar" in data:
            self.avatar = data["avatar"]
        if "bot" in data:
            self.bot = data["bot"]
        if "banner" in data:
            self.banner = data["banner"]
        if "accent_color" in data:
            self.accent_color = data["accent_color"]

        flags = data.get("flags", data.get("public_flags"))
        if flags is not None:
            self.flags = UserFlags(flags)

    @property
    def display_name(self) -> str:
        return self.global_name or self.name

    @property
    def mention(self) -> str:
        return f"<@{self.id}>"

    @property
    def avatar_url(self) -> URL | None:
        if self.avatar is None:
            return None
        fmt = cdn.GIF if self.avatar.startswith("a_") else cdn.PNG
        return cdn.AVATAR.make_url(fmt, user_id=self.id, hash=self.avatar)

    def __str__(self) -> str:
        if self.discriminator in ("0", "0000"):
            return self.name
        return f"{self.name}#{self.discriminator}"

    def __repr__(self) -> str:
        return f"BaseUser(id={self.id}, name={self.name!r}, bot={self.bot})"
