from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from ..models.snowflake import Resource, Snowflake

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ..client import Client
    from ..util import Msg

__all__ = (
    "CachedManager",
)

logger = getLogger(__name__)

R = TypeVar("R", bound=Resource)

def _is_snowflake(obj: Any) -> bool:
    return isinstance(obj, int) or (isinstance(obj, str) and obj.isdigit())

class CachedManager(Generic[R]):
    """Owner of the cached instances of one resource type.

    Payloads for a resource already in the cache patch the cached
    instance, so every reference to a resource sees the same object.

    Attributes
    ----------
    cache : dict[:class:`~cachecord.models.Snowflake`, :class:`~cachecord.models.Resource`]
        The cached resources by id.
    """
    holds: ClassVar[type[Resource]]

    def __init__(self, client: Client) -> None:
        self._client = client
        self.cache: dict[Snowflake, R] = {}

    def _construct(self, data: Msg) -> R:
        raise NotImplementedError

    def _add(self, data: Msg, *, cache: bool = True) -> R:
        existing = self.cache.get(Snowflake(data["id"]))

        if existing is not None:
            if cache:
                existing._patch(data)
                return existing

            # leave the cached state untouched
            clone = existing._clone()
            clone._patch(data)
            return clone

        entry = self._construct(data)
        if cache:
            self.cache[entry.id] = entry
        return entry

    def _update(self, data: Msg) -> tuple[R | None, R]:
        """Patch a resource, returning a snapshot of its previous state along with it."""
        existing = self.cache.get(Snowflake(data["id"]))
        old = existing._clone() if existing is not None else None
        return old, self._add(data)

    def _sync(self, payloads: Iterable[Msg]) -> tuple[list[R], list[tuple[R, R]], list[R]]:
        """Make the cache match ``payloads``.

        Returns
        -------
        tuple[list, list, list]
            The created resources, the ``(old, new)`` pairs of resources whose
            state changed and the removed resources.
        """
        created: list[R] = []
        updated: list[tuple[R, R]] = []
        seen: set[Snowflake] = set()

        for data in payloads:
            old, new = self._update(data)
            seen.add(new.id)
            if old is None:
                created.append(new)
            elif not self._same_state(old, new):
                updated.append((old, new))

        removed = [self.cache.pop(rid) for rid in list(self.cache) if rid not in seen]
        if removed:
            logger.debug("%s dropped stale entries %s", type(self).__name__, [r.id for r in removed])

        return created, updated, removed

    def _same_state(self, old: R, new: R) -> bool:
        return False

    def _remove(self, id: int) -> R | None:
        return self.cache.pop(Snowflake(id), None)

    def get(self, id: int | str) -> R | None:
        return self.cache.get(Snowflake(id))

    def resolve(self, obj: Any) -> R | None:
        """Resolve a resource or an id into the cached resource, :data:`None` if not cached"""
        if isinstance(obj, self.holds):
            return obj # type: ignore[return-value]

        if _is_snowflake(obj):
            return self.cache.get(Snowflake(obj))

        return None

    def resolve_id(self, obj: Any) -> Snowflake | None:
        """Resolve a resource or an id into an id, :data:`None` for anything else"""
        if isinstance(obj, self.holds):
            return obj.id

        if _is_snowflake(obj):
            return Snowflake(obj)

        return None

    def __len__(self) -> int:
        return len(self.cache)

    def __iter__(self) -> Iterator[R]:
        return iter(self.cache.values())

    def __contains__(self, obj: Any) -> bool:
        return self.resolve_id(obj) in self.cache
