from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Final, Literal, final, overload

from yarl import URL

__all__ = (
    "API_VERSION",
    "Route",
    "Endpoint",
)

API_VERSION: Final[int] = 10

Methods = Literal["GET", "PUT", "PATCH", "POST", "DELETE"]
Parameters = Literal["guild_id", "emoji_id", "user_id", "role_id"]

@final
class Endpoint:
    """A :class:`Route` with all of its path parameters filled in."""
    __slots__ = ("route", "url")

    route: Route
    url: URL

    def __init__(self, route: Route, params: dict[Parameters, int | str]) -> None:
        self.route = route

        try:
            # ignore because we are handling invalid key
            self.url = self.route.BASE / route.path.format_map(params) # type: ignore[arg-type]
        except KeyError as err:
            raise ValueError(f"Missing parameter {err.args[0]!r} for route {route.path!r}") from err

    @property
    def method(self) -> Methods:
        return self.route.method

    def __repr__(self) -> str:
        return f"Endpoint({self.method} {self.url})"

# Routes are interned per method and path
@final
@dataclass(init=False, unsafe_hash=True)
class Route:
    method: Methods
    path: str

    _CACHE: ClassVar[dict[str, Route]] = {}
    BASE: ClassVar[URL] = URL(f"https://discord.com/api/v{API_VERSION}")

    __slots__ = ("method", "path")

    def __new__(cls, method: Methods, path: str) -> Route:
        path = path.lstrip("/")
        cache_bucket = method + ":" + path
        self = cls._CACHE.get(cache_bucket, None)

        if self is None:
            self = super().__new__(cls)
            self.method = method
            self.path = path
            cls._CACHE[cache_bucket] = self

        return self

    @property
    def url(self) -> URL | None:
        if "{" in self.path:
            # still has unformatted parameters
            return None
        return self.BASE / self.path

    @property
    def route(self) -> Route:
        return self

    @overload
    def with_params(self) -> Endpoint:
        ...

    @overload
    def with_params(self, *,
                    guild_id: int = ...,
                    emoji_id: int = ...,
                    user_id: int = ...,
                    role_id: int = ...) -> Endpoint:
        ...

    def with_params(self, **params):
        return Endpoint(self, params) # type: ignore[arg-type] # because overload provided

    def __mod__(self, params: dict[Parameters | str, int | str]) -> Endpoint:
        return Endpoint(self, params) # type: ignore
