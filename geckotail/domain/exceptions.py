from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class GeckoTerminalInputError(DomainError, ValueError):
    """Invalid parameters for a GeckoTerminal query."""
