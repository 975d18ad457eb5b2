"""
Public key value types: algorithm tag, canonical pubkey, accepted bech32 prefixes.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import InvalidPubkeyValueError, UnsupportedKeyEncodingError

PUBKEY_BECH32_PREFIXES: tuple[str, ...] = (
    "cosmospub",
    "cosmosvalconspub",
    "cosmosvaloperpub",
)


class Algorithm(str, Enum):
    """Key algorithm; the value is the amino JSON type name."""

    SECP256K1 = "tendermint/PubKeySecp256k1"
    ED25519 = "tendermint/PubKeyEd25519"
    SR25519 = "tendermint/PubKeySr25519"

    @property
    def key_length(self) -> int:
        """Required length of the raw key bytes (secp256k1 is compressed)."""
        return _KEY_LENGTHS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_KEY_LENGTHS = {
    Algorithm.SECP256K1: 33,
    Algorithm.ED25519: 32,
    Algorithm.SR25519: 32,
}

_LABELS = {
    Algorithm.SECP256K1: "compressed secp256k1",
    Algorithm.ED25519: "Ed25519",
    Algorithm.SR25519: "Sr25519",
}


@dataclass(frozen=True)
class CanonicalPubkey:
    """
    Algorithm-tagged raw public key.

    The key length is not checked here; decoders enforce it on untrusted
    input, encoders trust what they are given.
    """

    algorithm: Algorithm
    key_bytes: bytes

    @property
    def value(self) -> str:
        """Base64 of the key bytes, as carried in amino JSON."""
        return base64.b64encode(self.key_bytes).decode("ascii")

    def to_amino_json(self) -> dict[str, str]:
        """Amino JSON form: {"type": ..., "value": <base64>}."""
        return {"type": self.algorithm.value, "value": self.value}

    @classmethod
    def from_amino_json(cls, obj: dict[str, Any]) -> CanonicalPubkey:
        """
        Build a pubkey from its amino JSON form.

        Args:
            obj: Mapping with "type" (amino type name) and "value" (base64).

        Returns:
            CanonicalPubkey with the decoded key bytes (length not checked).
        """
        type_name = obj.get("type")
        try:
            algorithm = Algorithm(type_name)
        except ValueError:
            raise UnsupportedKeyEncodingError(str(type_name), kind="Type") from None
        try:
            key_bytes = base64.b64decode(obj.get("value", ""), validate=True)
        except (ValueError, TypeError) as e:
            raise InvalidPubkeyValueError(f"Invalid base64 pubkey value: {e}") from e
        return cls(algorithm, key_bytes)


__all__: tuple[str, ...] = (
    "Algorithm",
    "CanonicalPubkey",
    "PUBKEY_BECH32_PREFIXES",
)
