from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from typing import Annotated
    IntAsStr = Annotated[str, "This is meant to be an int"]

__all__ = (
    "User",
    "RoleTags",
    "Role",
    "Emoji",
    "EditEmoji",
    "Member",
    "Guild",
)

class TotalUser(TypedDict):
    id: IntAsStr
    username: str
    discriminator: str
    avatar: str | None

class User(TotalUser, total=False):
    global_name: str | None
    bot: bool
    system: bool
    banner: str | None
    accent_color: int | None
    flags: int
    public_flags: int

class RoleTags(TypedDict, total=False):
    bot_id: IntAsStr
    integration_id: IntAsStr
    premium_subscriber: None # presence is the property

class TotalRole(TypedDict):
    id: IntAsStr
    name: str
    color: int
    hoist: bool
    position: int
    permissions: IntAsStr
    managed: bool
    mentionable: bool

class Role(TotalRole, total=False):
    icon: str | None
    unicode_emoji: str | None
    tags: RoleTags

class TotalEmoji(TypedDict):
    id: IntAsStr
    name: str | None

class Emoji(TotalEmoji, total=False):
    roles: list[IntAsStr]
    user: User
    require_colons: bool
    managed: bool
    animated: bool
    available: bool

class EditEmoji(TypedDict, total=False):
    name: str
    roles: list[IntAsStr] | None

class Member(TypedDict, total=False):
    user: User
    nick: str | None
    roles: list[IntAsStr]
    joined_at: str
    pending: bool

class TotalGuild(TypedDict):
    id: IntAsStr
    name: str

class Guild(TotalGuild, total=False):
    icon: str | None
    owner_id: IntAsStr
    roles: list[Role]
    emojis: list[Emoji]
    members: list[Member]
    unavailable: bool
    member_count: int
