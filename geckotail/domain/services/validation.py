from __future__ import annotations

import math
from collections.abc import Sequence

from geckotail.domain.entities.includes import ALLOWED_INCLUDES, Endpoint
from geckotail.domain.exceptions import GeckoTerminalInputError


def require_string(value: object, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise GeckoTerminalInputError(f"{field_name} must be a valid string.")
    return value


def require_page(page: object) -> int:
    # bool is an int subclass; True must not pass as page 1.
    if isinstance(page, bool) or not isinstance(page, int) or page < 1:
        raise GeckoTerminalInputError("page must be a positive integer.")
    return page


def require_trade_volume(volume: object) -> int | float:
    if isinstance(volume, bool) or not isinstance(volume, (int, float)):
        raise GeckoTerminalInputError("volume must be a non-negative number.")
    if math.isnan(volume) or volume < 0:
        raise GeckoTerminalInputError("volume must be a non-negative number.")
    return volume


def require_addresses(addresses: object, field_name: str = "Addresses") -> Sequence[str]:
    if not isinstance(addresses, (list, tuple)) or len(addresses) == 0:
        raise GeckoTerminalInputError(f"{field_name} must be a non-empty array.")
    for address in addresses:
        require_string(address, "Address")
    return addresses


def require_include(include: object, endpoint: Endpoint) -> str:
    """Accept a missing or empty include, otherwise only a token allowed for ``endpoint``."""
    if include is None or include == "":
        return ""
    allowed = ALLOWED_INCLUDES.get(endpoint, frozenset())
    if not isinstance(include, str) or include not in allowed:
        raise GeckoTerminalInputError(f'Invalid include parameter "{include}".')
    return include


def join_addresses(addresses: Sequence[str]) -> str:
    """GeckoTerminal takes multiple addresses as one comma-separated path segment."""
    return ",".join(addresses)
