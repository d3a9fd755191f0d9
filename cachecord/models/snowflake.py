from __future__ import annotations

import copy
import datetime
from typing import TYPE_CHECKING, Final, TypeVar

from ..errors import UnknownGuild

if TYPE_CHECKING:
    from ..client import Client
    from ..util import Msg
    from .guild import Guild

__all__ = (
    "Snowflake",
    "Resource",
    "GuildResource",
)

INC_MASK: Final[int] = 0xFFF
PROC_MASK: Final[int] = 0x1F << 12
WORKER_MASK: Final[int] = PROC_MASK << 5

DISCORD_EPOCH: Final[int] = 1420070400000

R = TypeVar("R", bound="Resource")

class Snowflake(int):
    __slots__ = ()

    @property
    def proc_inc_id(self) -> int:
        return self & INC_MASK

    @property
    def proc_id(self) -> int:
        return (self & PROC_MASK) >> 12

    @property
    def worker_id(self) -> int:
        return (self & WORKER_MASK) >> 17

    @property
    def timestamp_ms(self) -> int:
        return (self >> 22) + DISCORD_EPOCH

    @property
    def timestamp(self) -> float:
        return self.timestamp_ms / 1000

    @property
    def created_at(self) -> datetime.datetime: # may raise OverflowError
        return datetime.datetime.fromtimestamp(self.timestamp, tz=datetime.timezone.utc)

# Base class for cached discord entities
class Resource:
    """A local projection of a server owned resource.

    The resource is identified by :attr:`id`, which never changes
    after construction. Fresher payloads are merged with :meth:`_patch`
    and snapshots are taken with :meth:`_clone`.
    """
    id: Snowflake

    __slots__ = ("id",)

    def __init__(self, id: int):
        self.id = Snowflake(id)

    def _patch(self, data: Msg) -> None:
        pass

    def _clone(self: R) -> R:
        return copy.copy(self)

    @property
    def created_at(self) -> datetime.datetime:
        return self.id.created_at

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"

    def __format__(self, spec: str):
        if not spec:
            return str(self)

        spec = spec.lstrip("(").rstrip(")")
        parts = spec.split(":", 1)

        try:
            attr = getattr(self, parts[0])
        except AttributeError as err:
            raise ValueError(f"Unexpected format attribute: {parts[0]!r}") from err

        if len(parts) == 1:
            return str(attr)

        return format(attr, parts[1])

    def __hash__(self):
        return hash(self.id)

    def __index__(self):
        return self.id

    def __eq__(self, other):
        if not isinstance(other, Resource):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

class GuildResource(Resource):
    """A resource owned by a guild.

    Only the guild id is kept, the guild itself is looked up in the
    client's guild registry on access.
    """
    __slots__ = ("_client", "guild_id")

    _client: Client
    guild_id: Snowflake

    def __init__(self, client: Client, id: int, guild: Guild | int):
        Resource.__init__(self, id)
        self._client = client
        self.guild_id = Snowflake(guild if isinstance(guild, int) else guild.id)

    @property
    def guild(self) -> Guild:
        """:class:`~cachecord.models.Guild`: The owning guild.

        Raises
        ------
        :exc:`~cachecord.errors.UnknownGuild`
            The guild was removed from the client cache.
        """
        guild = self._client.get_guild(self.guild_id)
        if guild is None:
            raise UnknownGuild(self.guild_id)
        return guild
