"""Canonical pubkey value and its amino JSON form."""

from __future__ import annotations

import pytest

from picopubkey import (
    Algorithm,
    CanonicalPubkey,
    InvalidPubkeyValueError,
    UnsupportedKeyEncodingError,
)
from vectors import ED25519_PUBKEY, ED25519_PUBKEY_B64, SECP_PUBKEY, SECP_PUBKEY_B64


def test_algorithm_values() -> None:
    assert Algorithm.SECP256K1.value == "tendermint/PubKeySecp256k1"
    assert Algorithm.ED25519.value == "tendermint/PubKeyEd25519"
    assert Algorithm.SR25519.value == "tendermint/PubKeySr25519"


def test_algorithm_key_lengths() -> None:
    assert Algorithm.SECP256K1.key_length == 33
    assert Algorithm.ED25519.key_length == 32
    assert Algorithm.SR25519.key_length == 32


def test_value_is_base64() -> None:
    assert CanonicalPubkey(Algorithm.SECP256K1, SECP_PUBKEY).value == SECP_PUBKEY_B64
    assert CanonicalPubkey(Algorithm.ED25519, ED25519_PUBKEY).value == ED25519_PUBKEY_B64


def test_to_amino_json() -> None:
    pubkey = CanonicalPubkey(Algorithm.SECP256K1, SECP_PUBKEY)
    assert pubkey.to_amino_json() == {
        "type": "tendermint/PubKeySecp256k1",
        "value": SECP_PUBKEY_B64,
    }


def test_from_amino_json() -> None:
    obj = {"type": "tendermint/PubKeyEd25519", "value": ED25519_PUBKEY_B64}
    pubkey = CanonicalPubkey.from_amino_json(obj)
    assert pubkey == CanonicalPubkey(Algorithm.ED25519, ED25519_PUBKEY)
    assert pubkey.to_amino_json() == obj


def test_no_length_check_at_construction() -> None:
    pubkey = CanonicalPubkey(Algorithm.SECP256K1, b"\x01")
    assert pubkey.key_bytes == b"\x01"


def test_from_amino_json_unknown_type() -> None:
    with pytest.raises(UnsupportedKeyEncodingError) as exc_info:
        CanonicalPubkey.from_amino_json({"type": "tendermint/PubKeyFoo", "value": ""})
    assert exc_info.value.marker == "tendermint/PubKeyFoo"


@pytest.mark.parametrize("value", ["not base64!", None, "A08Eé"])
def test_from_amino_json_bad_value(value: object) -> None:
    with pytest.raises(InvalidPubkeyValueError):
        CanonicalPubkey.from_amino_json(
            {"type": "tendermint/PubKeySecp256k1", "value": value}
        )


def test_pubkey_is_hashable_and_frozen() -> None:
    pubkey = CanonicalPubkey(Algorithm.SECP256K1, SECP_PUBKEY)
    assert {pubkey: 1}[CanonicalPubkey(Algorithm.SECP256K1, SECP_PUBKEY)] == 1
    with pytest.raises(AttributeError):
        pubkey.key_bytes = b""  # type: ignore[misc]
