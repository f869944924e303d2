from __future__ import annotations

from .tables import EXCHANGE_ALIASES, lookup


def exchange_name_from_code(exchange_code: str) -> str:
    """Map an exchange code or legacy alias (e.g. "cbot", "NYBOT") to "CME" or "ICE"."""
    return lookup(EXCHANGE_ALIASES, exchange_code.upper(), "exchange code")
