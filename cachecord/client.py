from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .auth import Token
from .http import HTTPSession
from .managers import UserManager
from .models.guild import Guild
from .models.snowflake import Snowflake

if TYPE_CHECKING:
    from .auth import StrOrToken
    from .models.user import BaseUser
    from .types import Guild as GuildP

__all__ = (
    "Client",
)

logger = getLogger("cachecord.client")

class Client:
    """The REST client and the session scoped cache of remote entities.

    Guilds are owned by the client's guild registry. Resources belonging
    to a guild keep only the guild id and look the guild up through
    :meth:`get_guild`.

    Attributes
    ----------
    token : :class:`~cachecord.auth.Token`
        The authorization token.
    http : :class:`~cachecord.http.HTTPSession`
        The REST transport used for all requests.
    users : :class:`~cachecord.managers.UserManager`
        The client wide user cache.
    user : :class:`~cachecord.models.BaseUser`, (``BaseUser | None``)
        The client's own user, available after :meth:`login`.

    Parameters
    ----------
    token : :class:`str`, :class:`Token`, (``str | Token``)
        The API token. If a string is provided then a bot token is built.
    http : :class:`~cachecord.http.HTTPSession`
        The transport to use. If :data:`None` one is built from the token,
        by default :data:`None`.
    """
    http: HTTPSession
    user: BaseUser | None

    def __init__(self, token: StrOrToken, *, http: HTTPSession | None = None) -> None:
        self.token = token if isinstance(token, Token) else Token(token, bot=True)
        self.http = http if http is not None else HTTPSession(self.token)
        self.users = UserManager(self)
        self.user = None
        self._guilds: dict[Snowflake, Guild] = {}
        self._closed = False

    @property
    def guilds(self) -> list[Guild]:
        """list[:class:`~cachecord.models.Guild`]: All cached guilds"""
        return list(self._guilds.values())

    def get_guild(self, guild_id: int) -> Guild | None:
        """Get a cached guild, :data:`None` if it is not cached."""
        return self._guilds.get(Snowflake(guild_id))

    def _add_guild(self, data: GuildP) -> Guild:
        guild = self._guilds.get(Snowflake(data["id"]))
        if guild is None:
            guild = Guild(self, data)
            self._guilds[guild.id] = guild
        else:
            guild._patch(data)
        return guild

    def _remove_guild(self, guild_id: int) -> Guild | None:
        guild = self._guilds.pop(Snowflake(guild_id), None)
        if guild is not None:
            logger.debug("Guild %s removed from cache", guild_id)
        return guild

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("The client is closed.")

    async def login(self) -> BaseUser:
        """Fetch the client's own user.

        Raises
        ------
        :exc:`~cachecord.errors.InvalidAuth`
            The token was rejected.
        """
        self._check_open()

        data = await self.http.get_current_user()
        self.user = self.users._add(data)
        logger.info("Logged in as %s (%s)", self.user, self.user.id)
        return self.user

    async def fetch_guild(self, guild_id: int) -> Guild:
        """Fetch a guild and add it to the cache.

        The returned guild carries its roles and emojis, members
        are not sent by this endpoint.
        """
        self._check_open()
        data = await self.http.get_guild(guild_id)
        return self._add_guild(data)

    async def close(self) -> None:
        """Close the client permanently.
        """
        if self._closed:
            return

        self._closed = True
        await self.http.close()
        logger.info("Client closed")

    async def __aenter__(self) -> Client:
        await self.login()
        return self

    async def __aexit__(self, *_) -> None:
        await self.close()
