#!/usr/bin/env python3
"""Example usage of hookdispatch."""

from hookdispatch import HookPriority, HookRegistry
from hookdispatch.log import configure_logging


def demo_actions(registry: HookRegistry):
    """Demonstrate fire-and-forget hooks."""
    print("=" * 60)
    print("Actions")
    print("=" * 60)

    startup = registry.get("app.startup")
    startup.add(lambda env: print(f"  cache warmed for {env}"), HookPriority.LOW, "cache")
    startup.add(lambda env: print(f"  database connected ({env})"), HookPriority.HIGHEST, "db")
    startup.add(lambda env: print(f"  routes loaded ({env})"))

    startup.run("production")

    startup.remove("cache")
    print("\nAfter removing 'cache':")
    startup.run("staging")


def demo_filters(registry: HookRegistry):
    """Demonstrate value-threading filters."""
    print("\n" + "=" * 60)
    print("Filters")
    print("=" * 60)

    title = registry.get("title")
    title.add(lambda value, site: value.strip(), 0)
    title.add(lambda value, site: value.title(), 5)
    title.add(lambda value, site: f"{value} | {site}", 20)

    print(f"  {title.filter('  hooks in python  ', 'Example Blog')!r}")

    price = registry.get("price")
    price.add(lambda value: value * 0.9, name="discount")
    price.add(lambda value: 0, name="free-shipping-promo")
    price.add(lambda value: value + 5.0, name="shipping")

    print(f"  filter_until 0 -> {price.execute_filter_until(100.0, 0)}")


def demo_short_circuit(registry: HookRegistry):
    """Demonstrate early-exit protocols."""
    print("\n" + "=" * 60)
    print("Short-circuit")
    print("=" * 60)

    guard = registry.get("request.allow")
    guard.add(lambda user: None if user != "banned" else False)
    guard.add(lambda user: print(f"  audit: {user} allowed"))

    for user in ("alice", "banned"):
        denied = guard.execute_until(False, [user])
        print(f"  {user}: {'denied' if denied else 'allowed'}")

    resolver = registry.get("avatar.url")
    resolver.add(lambda email: None, 0, "gravatar-offline")
    resolver.add(lambda email: f"https://cdn.example.com/{email}.png", 1)

    print(f"  avatar: {resolver.first_result(['ada'])}")


def main():
    configure_logging(level="INFO")
    registry = HookRegistry()

    demo_actions(registry)
    demo_filters(registry)
    demo_short_circuit(registry)

    print("\nRegistry stats:", registry.get_stats())


if __name__ == "__main__":
    main()
