from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any, final
from urllib.parse import quote

from aiohttp import ClientSession

from .. import util
from ..errors import (Forbidden, HTTPException, InvalidAuth, NotFound,
                      RateLimited, ServerError)
from .route import Route

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aiohttp import ClientResponse

    from ..auth import Token
    from ..types import Emoji as EmojiP
    from ..types import Guild as GuildP
    from ..types import User as UserP
    from .route import Endpoint

__all__ = (
    "HTTPSession",
    "json_or_raise",
)

logger = getLogger(__name__)

USER_AGENT = "Cachecord (cachecord.py, 0.1.0)"

USER_ME = Route("GET", "/users/@me").with_params()
GET_USER = Route("GET", "/users/{user_id}")
GET_GUILD = Route("GET", "/guilds/{guild_id}")

LIST_EMOJIS = Route("GET", "/guilds/{guild_id}/emojis")
GET_EMOJI = Route("GET", "/guilds/{guild_id}/emojis/{emoji_id}")
CREATE_EMOJI = Route("POST", "/guilds/{guild_id}/emojis")
MODIFY_EMOJI = Route("PATCH", "/guilds/{guild_id}/emojis/{emoji_id}")
DELETE_EMOJI = Route("DELETE", "/guilds/{guild_id}/emojis/{emoji_id}")

_ERRORS: dict[int, type[HTTPException]] = {
    401: InvalidAuth,
    403: Forbidden,
    404: NotFound,
    429: RateLimited,
}

async def json_or_raise(resp: ClientResponse) -> Any:
    """Decode a response body, raising the matching :exc:`HTTPException` for error statuses.

    ``204 No Content`` responses decode to :data:`None`.
    """
    if resp.status == 204:
        return None

    if resp.content_type == "application/json":
        data = await resp.json(loads=util.loads)
    else:
        data = await resp.text()

    if resp.status < 400:
        return data

    exc_type = _ERRORS.get(resp.status)
    if exc_type is None:
        exc_type = ServerError if resp.status >= 500 else HTTPException

    raise exc_type(resp.status, data, resp.reason)

@final
class HTTPSession:
    """The REST transport.

    The underlying :class:`aiohttp.ClientSession` is created on first use
    so that it binds to the running event loop.
    No retries are made, failed requests raise :exc:`~cachecord.errors.HTTPException`.
    Once closed the session can't be used again.
    """
    def __init__(self, token: Token) -> None:
        self.headers = {
            "Authorization": token.get_auth(),
            "User-Agent": USER_AGENT,
        }
        self._session: ClientSession | None = None
        self._closed = False

    @property
    def session(self) -> ClientSession:
        if self._closed:
            raise RuntimeError("The HTTP session is closed.")

        if self._session is None or self._session.closed:
            self._session = ClientSession(headers=self.headers, json_serialize=util.dumps)
        return self._session

    async def request(self, endp: Endpoint, *, reason: str | None = None, **kwargs) -> Any:
        if reason:
            headers = kwargs.setdefault("headers", {})
            headers["X-Audit-Log-Reason"] = quote(reason, safe="/ ")

        async with self.session.request(endp.method, endp.url, **kwargs) as resp:
            logger.debug("%s %s returned %s", endp.method, endp.url, resp.status)
            return await json_or_raise(resp)

    async def get_current_user(self) -> UserP:
        return await self.request(USER_ME)

    async def get_user(self, user_id: int) -> UserP:
        return await self.request(GET_USER.with_params(user_id=user_id))

    async def get_guild(self, guild_id: int) -> GuildP:
        return await self.request(GET_GUILD.with_params(guild_id=guild_id))

    async def list_guild_emojis(self, guild_id: int) -> list[EmojiP]:
        return await self.request(LIST_EMOJIS.with_params(guild_id=guild_id))

    async def get_guild_emoji(self, guild_id: int, emoji_id: int) -> EmojiP:
        return await self.request(GET_EMOJI.with_params(guild_id=guild_id, emoji_id=emoji_id))

    async def create_guild_emoji(
        self, guild_id: int, *,
        name: str, image: str,
        roles: Iterable[int] | None = None,
        reason: str | None = None
    ) -> EmojiP:
        payload: dict[str, Any] = {"name": name, "image": image}
        if roles is not None:
            payload["roles"] = [str(r) for r in roles]

        return await self.request(CREATE_EMOJI.with_params(guild_id=guild_id), json=payload, reason=reason)

    async def modify_guild_emoji(
        self, guild_id: int, emoji_id: int, *,
        payload: dict[str, Any],
        reason: str | None = None
    ) -> EmojiP:
        endp = MODIFY_EMOJI.with_params(guild_id=guild_id, emoji_id=emoji_id)
        return await self.request(endp, json=payload, reason=reason)

    async def delete_guild_emoji(self, guild_id: int, emoji_id: int, *, reason: str | None = None) -> None:
        endp = DELETE_EMOJI.with_params(guild_id=guild_id, emoji_id=emoji_id)
        await self.request(endp, reason=reason)

    async def close(self) -> None:
        self._closed = True
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
