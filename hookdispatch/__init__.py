"""hookdispatch: named hooks with priority-ordered callbacks, filters and early exit."""

from hookdispatch.hooks import (
    Entry,
    Hook,
    HookPriority,
    HookRegistry,
    get_default_registry,
    on_hook,
    reset_default_registry,
)
from hookdispatch.helpers import (
    hook_add,
    hook_filter,
    hook_filter_until,
    hook_first_result,
    hook_remove,
    hook_run,
    hook_run_until,
)

__version__ = "0.1.0"

__all__ = [
    "Entry",
    "Hook",
    "HookPriority",
    "HookRegistry",
    "get_default_registry",
    "on_hook",
    "reset_default_registry",
    "hook_add",
    "hook_filter",
    "hook_filter_until",
    "hook_first_result",
    "hook_remove",
    "hook_run",
    "hook_run_until",
    "__version__",
]
