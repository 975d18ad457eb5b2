"""
Amino-style tagged binary pubkeys: per-algorithm marker || raw key bytes.

The markers are amino type prefixes whose last byte is the varint length of
the key that follows. There is no other length field; the payload length is
checked against the algorithm's required length.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..exceptions import (
    InvalidPayloadLengthError,
    UnsupportedAlgorithmForEncodingError,
    UnsupportedKeyEncodingError,
)
from ..types import Algorithm, CanonicalPubkey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AminoMarker:
    """Marker bytes identifying one key algorithm in tagged binary."""

    algorithm: Algorithm
    prefix: bytes

    @property
    def key_length(self) -> int:
        return self.algorithm.key_length


AMINO_MARKER_SECP256K1 = AminoMarker(Algorithm.SECP256K1, bytes.fromhex("eb5ae98721"))
AMINO_MARKER_ED25519 = AminoMarker(Algorithm.ED25519, bytes.fromhex("1624de6420"))
AMINO_MARKER_SR25519 = AminoMarker(Algorithm.SR25519, bytes.fromhex("0dfb100520"))

# Decode order
_DECODABLE_MARKERS: tuple[AminoMarker, ...] = (
    AMINO_MARKER_SECP256K1,
    AMINO_MARKER_ED25519,
    AMINO_MARKER_SR25519,
)
_MAX_MARKER_LENGTH = max(len(m.prefix) for m in _DECODABLE_MARKERS)


def decode_amino_pubkey(data: bytes) -> CanonicalPubkey:
    """
    Decode tagged binary into an algorithm-tagged pubkey.

    Args:
        data: Marker followed by the raw key bytes.

    Returns:
        CanonicalPubkey whose key bytes have the algorithm's exact length.

    Raises:
        InvalidPayloadLengthError: Marker matched, key length is wrong.
        UnsupportedKeyEncodingError: No known marker at the start of data.
    """
    data = bytes(data)
    for marker in _DECODABLE_MARKERS:
        if data[: len(marker.prefix)] != marker.prefix:
            continue
        rest = data[len(marker.prefix) :]
        if len(rest) != marker.key_length:
            raise InvalidPayloadLengthError(
                marker.algorithm.value, marker.key_length, len(rest)
            )
        logger.debug("Decoded amino %s pubkey", marker.algorithm.label)
        return CanonicalPubkey(marker.algorithm, rest)
    raise UnsupportedKeyEncodingError(data[:_MAX_MARKER_LENGTH].hex())


def encode_amino_pubkey(pubkey: CanonicalPubkey) -> bytes:
    """
    Encode a pubkey as tagged binary. Only secp256k1 is supported.

    The key length is not validated: a wrong-length key gives output that
    decode_amino_pubkey rejects.

    Args:
        pubkey: Algorithm-tagged raw pubkey.

    Returns:
        Marker bytes followed by pubkey.key_bytes.
    """
    try:
        algorithm = Algorithm(pubkey.algorithm)
    except ValueError:
        raise UnsupportedAlgorithmForEncodingError(str(pubkey.algorithm)) from None
    # Adding a case here needs matching encode tests.
    if algorithm is Algorithm.SECP256K1:
        marker = AMINO_MARKER_SECP256K1
    else:
        raise UnsupportedAlgorithmForEncodingError(algorithm.value)
    return marker.prefix + bytes(pubkey.key_bytes)


__all__: tuple[str, ...] = (
    "AMINO_MARKER_ED25519",
    "AMINO_MARKER_SECP256K1",
    "AMINO_MARKER_SR25519",
    "AminoMarker",
    "decode_amino_pubkey",
    "encode_amino_pubkey",
)
