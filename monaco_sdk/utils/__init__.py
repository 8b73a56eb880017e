"""
Utility modules for the Monaco SDK.
"""

from .decimal_utils import (
    UNIVERSAL_DECIMALS,
    to_universal_amount,
    from_universal_amount,
    to_universal_price,
    from_universal_price,
    parse_native_amount,
    format_native_amount,
    parse_to_universal_amount,
    format_universal_amount,
)

__all__ = [
    'UNIVERSAL_DECIMALS',
    'to_universal_amount',
    'from_universal_amount',
    'to_universal_price',
    'from_universal_price',
    'parse_native_amount',
    'format_native_amount',
    'parse_to_universal_amount',
    'format_universal_amount',
]
