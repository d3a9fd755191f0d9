from __future__ import annotations

from typing import ClassVar, Final, Literal, Sequence

from yarl import URL

__all__ = (
    "CDNRoute",
    "EMOJI",
    "AVATAR",
    "GUILD_ICON",
    "ROLE_ICON",
)

CDNParameters = Literal[
    "guild_id",
    "hash",
    "user_id",
    "id",
]

PNG = "png"
JPEG = ("jpeg", "jpg")
WEBP = "webp"
GIF = "gif"

class CDNRoute:
    _CACHE: ClassVar[dict[str, CDNRoute]] = {}
    CDN: Final = URL("https://cdn.discordapp.com/")

    __slots__ = ("path", "formats")

    path: str
    formats: Sequence[str]

    def __new__(cls, path: str, formats: Sequence[str] = (PNG,)):
        path = path.lstrip("/")
        self = cls._CACHE.get(path, None)

        if self is None:
            self = super().__new__(cls)
            self.path = path
            self.formats = tuple(formats)
            cls._CACHE[path] = self

        return self

    def make_url(self, format: str = PNG, *, size: int | None = None, **params: int | str) -> URL:
        if format not in self.formats:
            raise ValueError(f"Invalid format {format!r}, expected one of {self.formats}")

        if size is not None and (size < 16 or size > 4096 or size & (size - 1)):
            raise ValueError("size must be a power of 2 between 16 and 4096")

        try:
            url = self.CDN / (self.path.format_map(params) + "." + format)
        except KeyError as err:
            raise ValueError(f"Missing parameter {err.args[0]!r} for cdn route {self.path!r}") from err

        if size is not None:
            url = url.with_query(size=size)

        return url

EMOJI = CDNRoute("emojis/{id}", (*JPEG, PNG, WEBP, GIF))
AVATAR = CDNRoute("avatars/{user_id}/{hash}", (*JPEG, PNG, WEBP, GIF))
GUILD_ICON = CDNRoute("icons/{guild_id}/{hash}", (*JPEG, PNG, WEBP, GIF))
ROLE_ICON = CDNRoute("role-icons/{id}/{hash}", (*JPEG, PNG, WEBP))
