"""
Contract ABI loading for the Monaco CLOB contracts.
"""

import copy
import json
import sys
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union, TYPE_CHECKING
from eth_utils import to_checksum_address

from monaco_sdk.config import get_abi_dir

if TYPE_CHECKING:
    from web3 import Web3
    from web3.contract import Contract

# Contract names, matching the compiled artifact file names
CLOB = 'CLOB'
BOOK = 'Book'
STATE = 'State'
VAULT = 'Vault'
SYMPHONY_ADAPTER = 'SymphonyAdapter'

CONTRACT_NAMES = (CLOB, BOOK, STATE, VAULT, SYMPHONY_ADAPTER)


@lru_cache(maxsize=None)
def _read_abi_file(path: Path):
    if not path.is_file():
        raise FileNotFoundError(
            f"ABI file not found: {path} (set MONACO_ABI_DIR to the directory holding the ABI JSON files)"
        )
    with open(path, 'r') as f:
        abi = json.load(f)
    print(f"[ABI] Loaded {path.name} from {path.parent}", file=sys.stderr)
    return abi


def load_abi(name: str, abi_dir: Optional[Union[str, Path]] = None):
    """
    Load a contract ABI from its JSON definition file.

    The parsed JSON is cached per file path; each call gets its own copy,
    so callers may modify the result freely.

    Args:
        name: Contract name, one of CONTRACT_NAMES
        abi_dir: Directory holding <name>.json (None to use the configured directory)

    Returns:
        Parsed ABI (normally a list of ABI entries)

    Raises:
        ValueError: If name is not a known contract
        FileNotFoundError: If the ABI file does not exist
    """
    if name not in CONTRACT_NAMES:
        raise ValueError(f"Unknown contract {name!r}, expected one of: {', '.join(CONTRACT_NAMES)}")

    directory = Path(abi_dir).expanduser() if abi_dir is not None else get_abi_dir()
    return copy.deepcopy(_read_abi_file(directory.resolve() / f'{name}.json'))


def get_clob_abi(abi_dir: Optional[Union[str, Path]] = None):
    """Get the CLOB contract ABI."""
    return load_abi(CLOB, abi_dir)


def get_book_abi(abi_dir: Optional[Union[str, Path]] = None):
    """Get the Book contract ABI."""
    return load_abi(BOOK, abi_dir)


def get_state_abi(abi_dir: Optional[Union[str, Path]] = None):
    """Get the State contract ABI."""
    return load_abi(STATE, abi_dir)


def get_vault_abi(abi_dir: Optional[Union[str, Path]] = None):
    """Get the Vault contract ABI."""
    return load_abi(VAULT, abi_dir)


def get_symphony_adapter_abi(abi_dir: Optional[Union[str, Path]] = None):
    """Get the SymphonyAdapter contract ABI."""
    return load_abi(SYMPHONY_ADAPTER, abi_dir)


def get_contract(
    w3: 'Web3',
    name: str,
    address: str,
    abi_dir: Optional[Union[str, Path]] = None
) -> 'Contract':
    """
    Build a web3 contract object for one of the Monaco contracts.
    Nothing is sent to the node.

    Args:
        w3: Web3 instance
        name: Contract name, one of CONTRACT_NAMES
        address: Deployed contract address
        abi_dir: Directory holding the ABI files (None to use the configured directory)

    Returns:
        Contract bound to the checksummed address
    """
    return w3.eth.contract(
        address=to_checksum_address(address),
        abi=load_abi(name, abi_dir)
    )
