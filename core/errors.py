from __future__ import annotations


class BridgeError(Exception):
    """Base class for request-fatal errors raised by the annotation engine."""


class InvalidFilterError(BridgeError):
    """The annotation query is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid filter pattern {pattern!r}: {reason}")
        self.pattern = pattern


class CheckListError(BridgeError):
    """The provider could not list checks, so no annotations can be built."""


class ConfigError(BridgeError):
    """Required settings are missing or unusable."""
