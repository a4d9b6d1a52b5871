"""Priority-ordered named hooks."""

from hookdispatch.hooks.entry import Entry, HookCallback, HookPriority
from hookdispatch.hooks.registry import (
    Hook,
    HookRegistry,
    get_default_registry,
    is_identical,
    on_hook,
    reset_default_registry,
)

__all__ = [
    "Entry",
    "HookCallback",
    "HookPriority",
    "Hook",
    "HookRegistry",
    "get_default_registry",
    "is_identical",
    "on_hook",
    "reset_default_registry",
]
