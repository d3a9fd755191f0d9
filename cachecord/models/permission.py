from __future__ import annotations

from functools import reduce

from .flags import FrozenFlag as FF
from .flags import FrozenFlags

__all__ = (
    "Permissions",
)

class Permissions(FrozenFlags):
    """A read-only permission bitset as sent by the API.

    Every flag is exposed as a :class:`bool` attribute,
    e.g. ``Permissions(1 << 30).manage_emojis``.
    """
    __slots__ = ()

    create_invite = FF(1)
    kick_members = FF(1 << 1)
    ban_members = FF(1 << 2)
    administrator = FF(1 << 3)
    manage_channels = FF(1 << 4)
    manage_guild = FF(1 << 5)
    add_reactions = FF(1 << 6)
    view_audit_log = FF(1 << 7)
    priority_speaker = FF(1 << 8)
    stream = FF(1 << 9)
    view_channel = FF(1 << 10)
    send_messages = FF(1 << 11)
    send_tts_messages = FF(1 << 12)
    manage_messages = FF(1 << 13)
    embed_links = FF(1 << 14)
    attach_files = FF(1 << 15)
    read_message_history = FF(1 << 16)
    mention_everyone = FF(1 << 17)
    use_external_emojis = FF(1 << 18)
    view_guild_insights = FF(1 << 19)

    # voice
    connect = FF(1 << 20)
    speak = FF(1 << 21)
    mute_members = FF(1 << 22)
    deafen_members = FF(1 << 23)
    move_members = FF(1 << 24)
    use_vad = FF(1 << 25)

    change_nickname = FF(1 << 26)
    manage_nicknames = FF(1 << 27)
    manage_roles = FF(1 << 28)
    manage_webhooks = FF(1 << 29)
    manage_emojis = manage_emojis_and_stickers = FF(1 << 30)
    """:class:`bool`: Whether user can create, edit and delete emojis and stickers"""
    use_application_commands = FF(1 << 31)
    request_to_speak = FF(1 << 32)
    manage_events = FF(1 << 33)
    manage_threads = FF(1 << 34)
    create_public_threads = FF(1 << 35)
    create_private_threads = FF(1 << 36)
    use_external_stickers = FF(1 << 37)
    send_messages_in_threads = FF(1 << 38)
    use_embedded_activities = FF(1 << 39)
    moderate_members = FF(1 << 40)

    @classmethod
    def none(cls) -> Permissions:
        return cls(0)

    @classmethod
    def all(cls) -> Permissions:
        """A :class:`Permissions` with every known flag set"""
        return cls(reduce(lambda acc, flag: acc | flag.value, cls.flags().values(), 0))

    def __or__(self, other: int) -> Permissions:
        return Permissions(int(self) | int(other))

    __ror__ = __or__
