from __future__ import annotations

from typing import TypeVar, overload

__all__ = (
    "FrozenFlag",
    "FrozenFlags",
)

S = TypeVar("S", bound="FrozenFlags")

# This returns None so be careful
class FrozenFlags(int): # Read-Only, for user flags and permissions
    __slots__ = ()

    @overload
    def __new__(cls: type[S], data: int) -> S:
        ...

    @overload
    def __new__(cls: type[S], data: None) -> None: # type: ignore[misc]
        ...

    @overload
    def __new__(cls: type[S]) -> None: # type: ignore[misc]
        ...

    @overload
    def __new__(cls: type[S], data: str | bytes | bytearray) -> S:
        ...

    def __new__(cls, data: int | None | str | bytes | bytearray = None):
        if data is not None:
            return super().__new__(cls, data)

    def __getitem__(self, index: int) -> bool:
        return bool(self & (1 << index))

    @classmethod
    def flags(cls) -> dict[str, FrozenFlag]:
        """Mapping of every flag name, aliases included, to its descriptor"""
        return {
            name: flag for klass in reversed(cls.__mro__)
            for name, flag in vars(klass).items() if isinstance(flag, FrozenFlag)
        }

    def __iter__(self):
        for name, flag in self.flags().items():
            yield name, flag.__get__(self, type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self):#x})"


class FrozenFlag:
    __slots__ = ("value",)

    value: int

    def __init__(self, value: int):
        self.value = value

    def __set__(self, inst: FrozenFlags, _):
        raise TypeError("Cannot set value for a FrozenFlag instance")

    def __get__(self, inst: FrozenFlags | None, _):
        if inst is None:
            return self
        return bool(inst & self.value)
