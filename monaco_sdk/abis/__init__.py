"""
Contract ABIs for the Monaco CLOB contracts.
"""

from .loader import (
    CLOB,
    BOOK,
    STATE,
    VAULT,
    SYMPHONY_ADAPTER,
    CONTRACT_NAMES,
    load_abi,
    get_clob_abi,
    get_book_abi,
    get_state_abi,
    get_vault_abi,
    get_symphony_adapter_abi,
    get_contract,
)

__all__ = [
    'CLOB',
    'BOOK',
    'STATE',
    'VAULT',
    'SYMPHONY_ADAPTER',
    'CONTRACT_NAMES',
    'load_abi',
    'get_clob_abi',
    'get_book_abi',
    'get_state_abi',
    'get_vault_abi',
    'get_symphony_adapter_abi',
    'get_contract',
]
