"""Display formatting helpers for addresses, token amounts and timestamps."""

import logging
import operator
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from eth_utils import from_wei_decimals

logger = logging.getLogger(__name__)

ADDRESS_PREFIX_CHARS = 6
ADDRESS_SUFFIX_CHARS = 4
MIN_TRUNCATABLE_LENGTH = 10


def format_address(address: Any) -> str:
    """
    Shorten an address for display, e.g. ``0x742d...f44e``.

    Values shorter than 10 characters are returned unchanged. The input is
    not validated as an address.
    """
    if not address:
        return ''
    address_str = str(address)
    if len(address_str) < MIN_TRUNCATABLE_LENGTH:
        return address_str
    return f"{address_str[:ADDRESS_PREFIX_CHARS]}...{address_str[-ADDRESS_SUFFIX_CHARS:]}"


def _to_base_units(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("booleans are not token amounts")
    if isinstance(value, (str, bytes)):
        text = value.decode() if isinstance(value, bytes) else value
        return int(text.strip(), 0)
    return operator.index(value)


def format_units(value: Any, decimals: int = 18) -> str:
    """
    Convert an integer amount of base units to a decimal string.

    Trailing fractional zeros are dropped but at least one fractional digit
    is kept: ``1500000000000000000`` -> ``"1.5"``, ``10**18`` -> ``"1.0"``.

    Raises:
        TypeError: If the value is not an integer amount
        ValueError: If the value cannot be parsed, is outside the uint256 range,
            or decimals is negative
    """
    amount = _to_base_units(value)
    decimals = operator.index(decimals)
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    text = format(Decimal(from_wei_decimals(amount, decimals)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text if "." in text else f"{text}.0"


def format_balance(balance: Any, decimals: int = 18) -> str:
    """Format a token balance, falling back to the raw value if it cannot be converted."""
    if not balance:
        return '0'
    try:
        return format_units(balance, decimals)
    except (TypeError, ValueError) as e:
        logger.warning(f"Failed to format balance {balance!r}: {e}")
        return str(balance)


def format_timestamp(timestamp: Optional[Any]) -> str:
    """Render a unix timestamp (seconds) as a local date-time string."""
    if not timestamp:
        return 'N/A'
    try:
        return datetime.fromtimestamp(float(timestamp)).strftime('%Y-%m-%d %H:%M:%S')
    except (TypeError, ValueError, OverflowError, OSError) as e:
        logger.warning(f"Failed to format timestamp {timestamp!r}: {e}")
        return 'N/A'
