from .base import CachedManager
from .users import UserManager
from .emoji_roles import GuildEmojiRoleManager
from .emojis import GuildEmojiManager

__all__ = (
    "CachedManager",
    "UserManager",
    "GuildEmojiRoleManager",
    "GuildEmojiManager",
)
