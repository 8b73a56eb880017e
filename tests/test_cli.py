import json

import pytest

from monaco_sdk.__main__ import main
from monaco_sdk.abis import loader


@pytest.mark.parametrize("argv,expected", [
    (["to-universal", "1000000", "--decimals", "6"], "1000000000000000000"),
    (["from-universal", "1000000000000000000", "--decimals", "6"], "1000000"),
    (["format", "1500000", "--decimals", "6"], "1.5"),
    (["format-universal", "1500000000000000000", "--decimals", "6"], "1.5"),
    (["parse", "1.5", "--decimals", "6"], "1500000"),
    (["parse-universal", "1.5", "--decimals", "6"], "1500000000000000000"),
    (["to-universal-price", "2500000", "--base-decimals", "8", "--quote-decimals", "6"], "2500000000000000000"),
    (["from-universal-price", "2500000000000000000", "--quote-decimals", "6"], "2500000"),
])
def test_conversion_commands(argv, expected, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out.strip() == expected


def test_parse_error_exits_nonzero(capsys):
    assert main(["parse", "1.0000001", "--decimals", "6"]) == 1
    assert capsys.readouterr().out.startswith("ERROR: Too many decimals")


def test_abi_command(tmp_path, capsys):
    loader._read_abi_file.cache_clear()
    (tmp_path / 'Book.json').write_text(json.dumps([{"type": "event", "name": "OrderPlaced", "inputs": []}]))
    assert main(["abi", "Book", "--abi-dir", str(tmp_path)]) == 0
    assert json.loads(capsys.readouterr().out) == [{"type": "event", "name": "OrderPlaced", "inputs": []}]


def test_abi_command_missing_file(tmp_path, capsys):
    loader._read_abi_file.cache_clear()
    assert main(["abi", "Vault", "--abi-dir", str(tmp_path)]) == 1
    assert capsys.readouterr().out.startswith("ERROR: ABI file not found")


def test_unknown_command_rejected():
    with pytest.raises(SystemExit):
        main(["convert"])
