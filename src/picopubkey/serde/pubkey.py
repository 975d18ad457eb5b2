"""
Bech32 pubkeys (cosmospub1..., cosmosvalconspub1..., cosmosvaloperpub1...).
"""

from __future__ import annotations

import logging

from ..curves import compress_pubkey
from ..exceptions import InvalidPrefixError
from ..types import PUBKEY_BECH32_PREFIXES, Algorithm, CanonicalPubkey
from .amino import decode_amino_pubkey, encode_amino_pubkey
from .bech32 import bech32_decode_bytes, bech32_encode_bytes

logger = logging.getLogger(__name__)


def encode_secp256k1_pubkey(pubkey: bytes) -> CanonicalPubkey:
    """
    Wrap a secp256k1 public key as a canonical pubkey, compressing it first.

    Args:
        pubkey: 65-byte uncompressed or 33-byte compressed secp256k1 key.

    Returns:
        CanonicalPubkey with the 33-byte compressed key.
    """
    return CanonicalPubkey(Algorithm.SECP256K1, compress_pubkey(pubkey))


def decode_bech32_pubkey(bech: str) -> CanonicalPubkey:
    """
    Decode a bech32 pubkey string.

    Args:
        bech: Bech32 text with one of PUBKEY_BECH32_PREFIXES.

    Returns:
        CanonicalPubkey carried in the amino payload.
    """
    prefix, data = bech32_decode_bytes(bech)
    if prefix not in PUBKEY_BECH32_PREFIXES:
        raise InvalidPrefixError(prefix, PUBKEY_BECH32_PREFIXES)
    pubkey = decode_amino_pubkey(data)
    logger.debug("Decoded %s pubkey with prefix %s", pubkey.algorithm.label, prefix)
    return pubkey


def encode_bech32_pubkey(pubkey: CanonicalPubkey, prefix: str) -> str:
    """
    Encode a pubkey as bech32. Only secp256k1 keys can be encoded.

    Args:
        pubkey: Algorithm-tagged raw pubkey.
        prefix: One of PUBKEY_BECH32_PREFIXES.

    Returns:
        Bech32 text "<prefix>1...".
    """
    if prefix not in PUBKEY_BECH32_PREFIXES:
        raise InvalidPrefixError(prefix, PUBKEY_BECH32_PREFIXES)
    return bech32_encode_bytes(prefix, encode_amino_pubkey(pubkey))


__all__: tuple[str, ...] = (
    "decode_bech32_pubkey",
    "encode_bech32_pubkey",
    "encode_secp256k1_pubkey",
)
