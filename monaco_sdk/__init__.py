"""
Monaco SDK - contract ABIs and decimal conversion helpers for the Monaco CLOB.
"""

from .abis import CONTRACT_NAMES, load_abi, get_contract
from .utils import (
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

__version__ = '0.1.0'

__all__ = [
    'CONTRACT_NAMES',
    'load_abi',
    'get_contract',
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
