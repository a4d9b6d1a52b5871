"""Registered callbacks and priority levels."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable

HookCallback = Callable[..., Any]


class HookPriority(IntEnum):
    """Named priority levels (lower runs first).

    Any int is a valid priority; these are conveniences that sort
    together with plain integers.
    """

    HIGHEST = 0
    HIGH = 5
    NORMAL = 10
    LOW = 50
    LOWEST = 100


@dataclass(frozen=True, eq=False)
class Entry:
    """A callback registered on a hook.

    ``name`` is only used to remove the entry later and need not be
    unique. Entries compare by identity.
    """

    name: str | None
    callback: HookCallback

    def call(self, params: Sequence[Any]) -> Any:
        return self.callback(*params)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "callback": getattr(self.callback, "__qualname__", repr(self.callback)),
        }
