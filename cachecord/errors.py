"""All cachecord exceptions"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models.guild import Guild

__all__ = (
    "CachecordError",
    "GuildMemberStateMissing",
    "EmojiManaged",
    "MissingPermissions",
    "UnknownGuild",
    "HTTPException",
    "InvalidAuth",
    "Forbidden",
    "NotFound",
    "RateLimited",
    "ServerError",
)

class CachecordError(Exception):
    """Base class for all cachecord related exceptions"""
    pass

class GuildMemberStateMissing(CachecordError):
    """Raised when the client's own member record of a guild is not cached"""
    def __init__(self, guild_id: int) -> None:
        self.guild_id = guild_id
        super().__init__(f"Client's guild member state is missing for guild {guild_id}")

class EmojiManaged(CachecordError):
    """Raised when an operation is attempted on an integration managed emoji"""
    def __init__(self, emoji_id: int) -> None:
        self.emoji_id = emoji_id
        super().__init__(f"Emoji {emoji_id} is managed by an integration")

class MissingPermissions(CachecordError):
    """Raised when an endpoint requiring permission is requested"""
    def __init__(self, permission: str, guild: Guild | None = None) -> None:
        self.permission = permission
        self.guild = guild
        where = f" in guild {guild.id}" if guild is not None else ""
        super().__init__(f"Client is missing {permission!r} permission{where}")

class UnknownGuild(CachecordError):
    """Raised when a resource's guild is not present in the client cache"""
    def __init__(self, guild_id: int) -> None:
        self.guild_id = guild_id
        super().__init__(f"Guild {guild_id} is not cached")

class HTTPException(CachecordError):
    """Raised when a request fails.

    Attributes
    ----------
    status : :class:`int`
        The response status code.
    message : :class:`str`
        The error message sent by the API, or the HTTP reason.
    code : :class:`int`
        The API error code, ``0`` if none was sent.
    """
    def __init__(self, status: int, data: Any = None, reason: str | None = None) -> None:
        self.status = status

        if isinstance(data, dict):
            self.message = data.get("message", reason or "")
            self.code = int(data.get("code", 0))
        else:
            self.message = data if isinstance(data, str) and data else (reason or "")
            self.code = 0

        super().__init__(f"{status} (error code: {self.code}): {self.message}")

class InvalidAuth(HTTPException):
    """Raised when an invalid token is used in a request"""
    pass

class Forbidden(HTTPException):
    """Raised for a 403 response"""
    pass

class NotFound(HTTPException):
    """Raised for a 404 response"""
    pass

class RateLimited(HTTPException):
    """Raised for a 429 response, no retry is done by the library"""
    def __init__(self, status: int, data: Any = None, reason: str | None = None) -> None:
        super().__init__(status, data, reason)
        self.retry_after = float(data.get("retry_after", 0.0)) if isinstance(data, dict) else 0.0

class ServerError(HTTPException):
    """Raised for a 5xx response"""
    pass
