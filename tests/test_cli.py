from __future__ import annotations

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from adaptive_hasher import SHA512, configure
from adaptive_hasher import cli


def _hash_with_cli(capsys, *args):
    assert cli.main([*args, "hash", "--password", "secret1"]) == 0
    return capsys.readouterr().out.strip()


def test_hash_then_verify(capsys):
    encoded = _hash_with_cli(capsys)
    assert len(bytes.fromhex(encoded)) == 61

    assert cli.main(["verify", encoded, "--password", "secret1"]) == 0
    assert capsys.readouterr().out.strip() == "OK"

    assert cli.main(["verify", encoded, "--password", "wrongpass"]) == 1
    assert capsys.readouterr().out.strip() == "FAILED"


def test_hash_options(capsys):
    encoded = _hash_with_cli(capsys, "--iterations", "5", "--salt-bits", "256", "--digest", "sha512")

    assert configure(5, 256, 256, SHA512).verify("secret1", bytes.fromhex(encoded)) is True


def test_prompts_for_password(capsys, monkeypatch):
    monkeypatch.setattr(cli.getpass, "getpass", lambda prompt: "secret1")

    assert cli.main(["hash"]) == 0
    encoded = capsys.readouterr().out.strip()
    assert cli.main(["verify", encoded]) == 0


def test_verify_rejects_invalid_hex(capsys):
    assert cli.main(["verify", "not-hex", "--password", "secret1"]) == 1
    assert capsys.readouterr().out.strip() == "FAILED"


def test_inspect(capsys):
    encoded = _hash_with_cli(capsys, "--iterations", "7")

    assert cli.main(["inspect", encoded]) == 0
    out = capsys.readouterr().out
    assert "sha256" in out
    assert "iterations: 7" in out
    assert "16 bytes" in out
    assert "32 bytes" in out


def test_inspect_rejects_garbage(capsys):
    assert cli.main(["inspect", "0102"]) == 2
    assert "Error" in capsys.readouterr().err


@pytest.mark.parametrize(
    "args",
    [
        ["--iterations", "0"],
        ["--salt-bits", "14"],
        ["--key-bits", "-8"],
        ["--digest", "md5"],
    ],
)
def test_invalid_configuration_exits_2(capsys, args):
    assert cli.main([*args, "hash", "--password", "secret1"]) == 2
    assert capsys.readouterr().err.startswith("Error:")
