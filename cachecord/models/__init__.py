from .snowflake import Snowflake, Resource, GuildResource
from .permission import Permissions
from .user import BaseUser, UserFlags
from .role import Role
from .member import Member
from .emoji import GuildEmoji
from .guild import Guild

__all__ = (
    "Snowflake",
    "Resource",
    "GuildResource",
    "Permissions",
    "BaseUser",
    "UserFlags",
    "Role",
    "Member",
    "GuildEmoji",
    "Guild",
)
