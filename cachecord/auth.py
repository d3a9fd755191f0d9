from __future__ import annotations

from typing import ClassVar, Union

__all__ = (
    "Token",
    "StrOrToken",
)

class Token:
    """An API token used to authorize REST requests.

    Bot and OAuth2 Bearer tokens are supported.

    Attributes
    ----------
    token : :class:`str`
        The raw token without the ``Bot`` or ``Bearer`` prefix.
    """
    BOT_PREFIX: ClassVar[str] = "Bot"
    BEARER_PREFIX: ClassVar[str] = "Bearer"

    __slots__ = ("_bot", "token")

    _bot: bool
    token: str

    def __init__(self, token: str, bot: bool = True):
        if not token or not token.strip():
            raise ValueError("Token can not be empty.")

        self._bot = bot
        self.token = token.strip()

    def get_auth(self) -> str:
        """:class:`str`: The ``Authorization`` header value for this token"""
        prefix = self.BOT_PREFIX if self._bot else self.BEARER_PREFIX
        return f"{prefix} {self.token}"

    @property
    def bot(self) -> bool:
        """:class:`bool`: Whether the token is a bot token"""
        return self._bot

    @property
    def bearer(self) -> bool:
        """:class:`bool`: Whether the token is an OAuth2 bearer token"""
        return not self._bot

    @classmethod
    def from_auth(cls, auth: str) -> Token:
        """Build a :class:`.Token` from an ``Authorization`` header value.

        Raises
        ------
        :exc:`ValueError`
            The header value is not of the form ``<type> <token>``.
        """
        try:
            type_, token = auth.strip().split()
        except ValueError as err:
            raise ValueError("Invalid header auth value received.") from err

        return cls(token, type_.lower() == cls.BOT_PREFIX.lower())

    def __repr__(self) -> str:
        # never leak the secret in logs
        return f"Token(bot={self._bot})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self._bot == other._bot and self.token == other.token

    def __hash__(self) -> int:
        return hash((self._bot, self.token))

StrOrToken = Union[str, Token]
