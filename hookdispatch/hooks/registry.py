"""Named hooks and the registry that owns them."""

import threading
from collections.abc import Sequence
from typing import Any, Callable

import structlog

from hookdispatch.config import Settings, get_settings
from hookdispatch.exceptions import HookError, HookRegistrationError
from hookdispatch.hooks.entry import Entry, HookCallback

logger = structlog.get_logger()

# Only HookRegistry holds this, so hooks cannot be built outside a registry.
_CREATE_TOKEN = object()


_SCALAR_TYPES = (str, bytes, int, float, complex, bool, type(None))


def is_identical(value: Any, sentinel: Any) -> bool:
    """Strict comparison used by the *_until dispatch protocols.

    Scalars match on exact type and value, so 1, 1.0 and True never match
    one another. Lists, tuples and dicts match when they have the exact
    same type and their items are identical pairwise (dicts also in key
    order). Any other object matches only itself, whatever its __eq__ says.
    """
    if value is sentinel:
        return True
    if type(value) is not type(sentinel):
        return False
    if isinstance(value, _SCALAR_TYPES):
        return bool(value == sentinel)
    if isinstance(value, (list, tuple)):
        return len(value) == len(sentinel) and all(
            is_identical(a, b) for a, b in zip(value, sentinel)
        )
    if isinstance(value, dict):
        return len(value) == len(sentinel) and all(
            is_identical(k1, k2) and is_identical(v1, v2)
            for (k1, v1), (k2, v2) in zip(value.items(), sentinel.items())
        )
    return False


class Hook:
    """A named extension point holding priority-ordered callbacks.

    Entries live in buckets keyed by integer priority. Buckets are walked
    in ascending priority and entries within a bucket in the order they
    were added. Every dispatch walks a snapshot taken when it starts, so
    callbacks may add or remove entries on the hook being dispatched
    without affecting the running dispatch.

    Hooks are obtained from HookRegistry.get(); constructing one directly
    raises HookError.
    """

    def __init__(
        self,
        name: str,
        default_priority: int = 10,
        *,
        _token: object = None,
    ):
        if _token is not _CREATE_TOKEN:
            raise HookError(
                f"Hook '{name}' must be obtained from HookRegistry.get()",
                details={"hook_name": name},
            )
        self._name = name
        self._default_priority = default_priority
        self._buckets: dict[int, list[Entry]] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._name

    def __len__(self) -> int:
        with self._lock:
            return sum(len(entries) for entries in self._buckets.values())

    def __repr__(self) -> str:
        return f"Hook(name={self._name!r}, entries={len(self)})"

    def has_entries(self) -> bool:
        return len(self) > 0

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add(
        self,
        callback: HookCallback,
        priority: int | None = None,
        name: str | None = None,
    ) -> Entry:
        """Register a callback on the hook.

        Args:
            callback: Function to call on dispatch
            priority: Bucket to add to (lower runs first); None uses the
                registry's default priority
            name: Optional registration name for later removal

        Returns:
            The created entry, usable with remove_entry()
        """
        if priority is None:
            priority = self._default_priority
        if not callable(callback):
            raise HookRegistrationError(
                self._name, reason=f"callback {callback!r} is not callable"
            )
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise HookRegistrationError(
                self._name,
                reason=f"priority must be an int, got {type(priority).__name__}",
            )
        priority = int(priority)

        entry = Entry(name=name, callback=callback)
        with self._lock:
            if priority not in self._buckets:
                self._buckets[priority] = []
                self._buckets = dict(sorted(self._buckets.items()))
            self._buckets[priority].append(entry)

        logger.debug(
            "Hook callback registered",
            hook=self._name,
            name=name,
            priority=priority,
        )
        return entry

    def on(
        self,
        priority: int | None = None,
        name: str | None = None,
    ) -> Callable[[HookCallback], HookCallback]:
        """Decorator form of add().

        The registration name defaults to the function's __name__.

        Usage:
            @registry.get("content.render").on(priority=5)
            def add_footer(html):
                return html + FOOTER
        """

        def decorator(func: HookCallback) -> HookCallback:
            if name is None:
                self.add(func, priority=priority, name=getattr(func, "__name__", None))
            else:
                self.add(func, priority=priority, name=name)
            return func

        return decorator

    def remove(self, name: str, priority: int | None = None) -> "Hook":
        """Remove every entry registered under ``name``.

        Args:
            name: Registration name to remove
            priority: Only search this bucket (None searches all)

        Returns:
            The hook, for chaining
        """
        removed = 0
        with self._lock:
            for bucket_priority, entries in self._buckets.items():
                if priority is not None and bucket_priority != priority:
                    continue
                kept = [entry for entry in entries if entry.name != name]
                removed += len(entries) - len(kept)
                entries[:] = kept

        if removed:
            logger.debug(
                "Hook callbacks removed",
                hook=self._name,
                name=name,
                priority=priority,
                count=removed,
            )
        return self

    def remove_entry(self, entry: Entry) -> "Hook":
        """Remove one entry by identity. No-op if it is not registered."""
        with self._lock:
            for entries in self._buckets.values():
                kept = [item for item in entries if item is not entry]
                if len(kept) != len(entries):
                    entries[:] = kept
                    logger.debug("Hook entry removed", hook=self._name, name=entry.name)
                    break
        return self

    def reset(self) -> None:
        """Remove all entries. The hook keeps its name and identity."""
        with self._lock:
            self._buckets = {}
        logger.debug("Hook reset", hook=self._name)

    def get_entries(self) -> dict[int, list[Entry]]:
        """Copy of the registrations, keyed by priority in ascending order.

        Buckets emptied by removal may still appear with no entries.
        """
        with self._lock:
            return {priority: list(entries) for priority, entries in self._buckets.items()}

    def _snapshot(self) -> list[Entry]:
        with self._lock:
            return [entry for entries in self._buckets.values() for entry in entries]

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def execute(self, params: Sequence[Any] = ()) -> None:
        """Call every entry with ``params``; return values are discarded."""
        for entry in self._snapshot():
            entry.call(params)

    def run(self, *params: Any) -> None:
        """Variadic form of execute()."""
        self.execute(params)

    def execute_until(self, sentinel: Any, params: Sequence[Any] = ()) -> bool:
        """Call entries until one returns a value identical to ``sentinel``.

        Returns:
            True if an entry returned the sentinel, False otherwise
        """
        for entry in self._snapshot():
            if is_identical(entry.call(params), sentinel):
                return True
        return False

    def execute_filter(self, initial: Any, params: Sequence[Any] = ()) -> Any:
        """Thread a value through every entry.

        Each entry is called with the running value followed by ``params``
        and its return value replaces the running value.

        Returns:
            The value returned by the last entry, or ``initial`` if the
            hook has no entries
        """
        value = initial
        for entry in self._snapshot():
            value = entry.call((value, *params))
        return value

    def filter(self, initial: Any, *params: Any) -> Any:
        """Variadic form of execute_filter()."""
        return self.execute_filter(initial, params)

    def execute_filter_until(
        self,
        initial: Any,
        sentinel: Any,
        params: Sequence[Any] = (),
    ) -> Any:
        """Like execute_filter(), but stop once the value is identical to ``sentinel``."""
        value = initial
        for entry in self._snapshot():
            value = entry.call((value, *params))
            if is_identical(value, sentinel):
                break
        return value

    def first_result(self, params: Sequence[Any] = ()) -> Any:
        """Return the first value that is not None, skipping later entries."""
        for entry in self._snapshot():
            value = entry.call(params)
            if value is not None:
                return value
        return None

    def to_dict(self) -> dict:
        entries = self.get_entries()
        return {
            "name": self._name,
            "entry_count": sum(len(items) for items in entries.values()),
            "entries": {
                priority: [entry.to_dict() for entry in items]
                for priority, items in entries.items()
            },
        }


class HookRegistry:
    """Directory of named hooks.

    Provides:
    - Lazy, idempotent lookup: one Hook per name
    - Listing of every hook created since the last reset
    - Full reset for test isolation

    An application normally builds one registry at its composition root and
    hands it to the components that extend each other through it.
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize the hook registry."""
        self._settings = settings if settings is not None else get_settings()
        self._hooks: dict[str, Hook] = {}
        self._lock = threading.Lock()

    @property
    def settings(self) -> Settings:
        return self._settings

    def get(self, name: str) -> Hook:
        """Find or create the hook called ``name``."""
        with self._lock:
            hook = self._hooks.get(name)
            if hook is None:
                hook = Hook(name, self._settings.default_priority, _token=_CREATE_TOKEN)
                self._hooks[name] = hook
                logger.debug("Hook created", hook=name)
            return hook

    def get_all(self) -> list[Hook]:
        """All hooks in first-lookup order, with or without entries."""
        with self._lock:
            return list(self._hooks.values())

    def names(self) -> list[str]:
        with self._lock:
            return list(self._hooks)

    def reset_all(self) -> None:
        """Forget every hook.

        Hook objects are left as they are; callers still holding one keep a
        working but orphaned hook, and get() builds a fresh one.
        """
        with self._lock:
            count = len(self._hooks)
            self._hooks = {}
        logger.debug("Hook registry reset", hooks_dropped=count)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._hooks

    def __len__(self) -> int:
        with self._lock:
            return len(self._hooks)

    def get_stats(self) -> dict:
        """Get hook registry statistics."""
        counts = [len(hook) for hook in self.get_all()]
        return {
            "total_hooks": len(counts),
            "hooks_with_entries": sum(1 for count in counts if count),
            "total_entries": sum(counts),
        }


def on_hook(
    hook_name: str,
    priority: int | None = None,
    name: str | None = None,
    registry: HookRegistry | None = None,
) -> Callable[[HookCallback], HookCallback]:
    """Decorator for registering a function on a named hook.

    Usage:
        @on_hook("user.created", priority=HookPriority.HIGH)
        def send_welcome_email(user):
            mailer.welcome(user.email)
    """
    target = registry if registry is not None else get_default_registry()
    return target.get(hook_name).on(priority=priority, name=name)


# Global default registry
_default_registry: HookRegistry | None = None
_default_lock = threading.Lock()


def get_default_registry() -> HookRegistry:
    """Get or create the default hook registry."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = HookRegistry()
        return _default_registry


def reset_default_registry() -> None:
    """Reset the default registry."""
    global _default_registry
    with _default_lock:
        _default_registry = None
