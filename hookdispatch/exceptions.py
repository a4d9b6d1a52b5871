"""Custom exceptions for hookdispatch.

Dispatch itself never raises on behalf of a callback: whatever a callback
raises reaches the caller untouched. The classes here cover misuse of the
registry API and bad configuration.
"""

from typing import Any


class HookDispatchError(Exception):
    """Base exception for all hookdispatch errors."""

    def __init__(self, message: str = "", details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for structured logging."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Hook Exceptions
# =============================================================================


class HookError(HookDispatchError):
    """Base exception for hook-related errors."""

    pass


class HookRegistrationError(HookError):
    """Failed to register a callback on a hook."""

    def __init__(
        self,
        hook_name: str,
        reason: str = "",
        message: str = "",
        details: dict | None = None,
    ):
        self.hook_name = hook_name
        self.reason = reason
        super().__init__(
            message or f"Failed to register on hook '{hook_name}': {reason}",
            details={"hook_name": hook_name, "reason": reason, **(details or {})},
        )


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(HookDispatchError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """Invalid configuration value."""

    def __init__(
        self,
        key: str,
        value: Any,
        reason: str = "",
        message: str = "",
        details: dict | None = None,
    ):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            message or f"Invalid configuration for {key}: {reason}",
            details={"key": key, "value": str(value), "reason": reason, **(details or {})},
        )
