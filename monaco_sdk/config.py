"""
SDK configuration. Values are read from environment variables; a .env file
in the working directory is loaded first.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# ABI JSON files shipped alongside the abis package (package data)
DEFAULT_ABI_DIR = Path(__file__).resolve().parent / 'abis'


def get_abi_dir() -> Path:
    """
    Get the directory holding the contract ABI JSON files.

    Returns:
        MONACO_ABI_DIR if set, otherwise the package's abis directory
    """
    abi_dir = os.getenv("MONACO_ABI_DIR", "")
    if abi_dir:
        return Path(abi_dir).expanduser()
    return DEFAULT_ABI_DIR
