"""Request-building and value-formatting helpers for the Aztec API."""

import re
from decimal import Decimal, InvalidOperation, ROUND_FLOOR, localcontext
from typing import Any, Dict

from aztec_node.exceptions import FormatError

WEI_PER_ETH = 10 ** 18

_ADDRESS = re.compile(r"0x[a-fA-F0-9]{64}")
_WEI = re.compile(r"[0-9]+")


def build_query_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """Drop ``None`` and empty-string values; keep ``0`` and ``False``."""
    return {
        key: value
        for key, value in params.items()
        if value is not None and value != ""
    }


def format_hex_string(value: str) -> str:
    """Add a ``0x`` prefix if missing; empty stays empty."""
    if not value:
        return ""
    return value if value.startswith("0x") else f"0x{value}"


def parse_hex_string(value: str) -> str:
    """Strip a ``0x`` prefix if present; empty stays empty."""
    if not value:
        return ""
    return value[2:] if value.startswith("0x") else value


def validate_address(address: str) -> bool:
    """True if ``address`` is 0x followed by 64 hex digits."""
    return isinstance(address, str) and bool(_ADDRESS.fullmatch(address))


def validate_key(key: str) -> bool:
    """True if ``key`` is 0x followed by 64 hex digits."""
    return isinstance(key, str) and bool(_ADDRESS.fullmatch(key))


def wei_to_eth(wei: str) -> str:
    """
    Convert an integer wei amount to a decimal ETH string.
    
    Trailing zeros are trimmed: ``"1500000000000000000" -> "1.5"``.
    """
    if not isinstance(wei, str) or not _WEI.fullmatch(wei):
        raise FormatError(f"Invalid wei amount {wei!r}")
    padded = wei.rjust(19, "0")
    integer_part = padded[:-18].lstrip("0") or "0"
    decimal_part = padded[-18:].rstrip("0")
    if not decimal_part:
        return integer_part
    return f"{integer_part}.{decimal_part}"


def eth_to_wei(eth: str) -> str:
    """
    Convert a decimal ETH amount to an integer wei string.
    
    Fractions of a wei are rounded down.
    """
    try:
        amount = Decimal(eth)
    except (InvalidOperation, TypeError):
        raise FormatError(f"Invalid ETH amount {eth!r}")
    if not amount.is_finite():
        raise FormatError(f"Invalid ETH amount {eth!r}")
    with localcontext() as ctx:
        ctx.prec = 100
        wei = (amount * WEI_PER_ETH).to_integral_value(rounding=ROUND_FLOOR)
    return str(int(wei))
