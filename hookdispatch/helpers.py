"""Free-function shortcuts over a hook registry.

Each helper looks the hook up by name and forwards to the matching Hook
method. They use the default registry unless ``registry=`` is given.
"""

from typing import Any

from hookdispatch.hooks.entry import Entry, HookCallback
from hookdispatch.hooks.registry import Hook, HookRegistry, get_default_registry


def _hook(hook_name: str, registry: HookRegistry | None) -> Hook:
    target = registry if registry is not None else get_default_registry()
    return target.get(hook_name)


def hook_add(
    hook_name: str,
    callback: HookCallback,
    priority: int | None = None,
    name: str | None = None,
    *,
    registry: HookRegistry | None = None,
) -> Entry:
    """Add a callback to a hook."""
    return _hook(hook_name, registry).add(callback, priority=priority, name=name)


def hook_remove(
    hook_name: str,
    name: str,
    priority: int | None = None,
    *,
    registry: HookRegistry | None = None,
) -> Hook:
    """Remove the callbacks registered under ``name`` from a hook."""
    return _hook(hook_name, registry).remove(name, priority)


def hook_run(hook_name: str, *params: Any, registry: HookRegistry | None = None) -> None:
    """Run every callback of a hook."""
    _hook(hook_name, registry).execute(params)


def hook_run_until(
    hook_name: str,
    sentinel: Any,
    *params: Any,
    registry: HookRegistry | None = None,
) -> bool:
    """Run callbacks until one returns ``sentinel``."""
    return _hook(hook_name, registry).execute_until(sentinel, params)


def hook_filter(
    hook_name: str,
    initial: Any,
    *params: Any,
    registry: HookRegistry | None = None,
) -> Any:
    """Pass ``initial`` through every callback and return the result."""
    return _hook(hook_name, registry).execute_filter(initial, params)


def hook_filter_until(
    hook_name: str,
    initial: Any,
    sentinel: Any,
    *params: Any,
    registry: HookRegistry | None = None,
) -> Any:
    """Filter ``initial`` through the callbacks until it becomes ``sentinel``."""
    return _hook(hook_name, registry).execute_filter_until(initial, sentinel, params)


def hook_first_result(
    hook_name: str,
    *params: Any,
    registry: HookRegistry | None = None,
) -> Any:
    """Return the first non-None value produced by a hook's callbacks."""
    return _hook(hook_name, registry).first_result(params)
