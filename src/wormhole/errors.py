"""Wormhole exception hierarchy.

Shared across Route, Router, and the chain executor so every module
raises and catches the same types.
"""


class WormholeError(Exception):
    """Base for all wormhole-specific errors."""


class ConfigurationError(WormholeError):
    """Raised when routing is wired up incorrectly.

    Always raised at setup time, never while a request is running.
    """


class PatternCompileError(ConfigurationError):
    """A path template could not be compiled into a matcher."""

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"Invalid path template '{template}': {reason}")


class InvalidRouteError(ConfigurationError):
    """A route was registered with wrong-shaped arguments."""


class ChainError(WormholeError):
    """The chain executor was driven incorrectly by a middleware unit.

    Raised when a unit calls its ``next`` continuation more than once.
    """
