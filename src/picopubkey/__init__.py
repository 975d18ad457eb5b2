"""
Cosmos public key encodings: amino tagged binary and bech32 (cosmospub1...).
Pure Python apart from the bech32 checksum codec.
"""

from .__about__ import __version__
from .curves import compress_pubkey, decompress_pubkey
from .exceptions import (
    Bech32FormatError,
    InvalidCurvePointError,
    InvalidPayloadLengthError,
    InvalidPrefixCharsetError,
    InvalidPrefixError,
    InvalidPubkeyValueError,
    PubkeyError,
    UnsupportedAlgorithmForEncodingError,
    UnsupportedKeyEncodingError,
)
from .serde import (
    bech32_decode_bytes,
    bech32_encode_bytes,
    decode_amino_pubkey,
    decode_bech32_pubkey,
    encode_amino_pubkey,
    encode_bech32_pubkey,
    encode_secp256k1_pubkey,
)
from .types import PUBKEY_BECH32_PREFIXES, Algorithm, CanonicalPubkey

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Types
    "Algorithm",
    "CanonicalPubkey",
    "PUBKEY_BECH32_PREFIXES",
    # Curves: secp256k1
    "compress_pubkey",
    "decompress_pubkey",
    # Serde: amino tagged binary
    "decode_amino_pubkey",
    "encode_amino_pubkey",
    # Serde: bech32
    "bech32_decode_bytes",
    "bech32_encode_bytes",
    "decode_bech32_pubkey",
    "encode_bech32_pubkey",
    "encode_secp256k1_pubkey",
    # Errors
    "Bech32FormatError",
    "InvalidCurvePointError",
    "InvalidPayloadLengthError",
    "InvalidPrefixCharsetError",
    "InvalidPrefixError",
    "InvalidPubkeyValueError",
    "PubkeyError",
    "UnsupportedAlgorithmForEncodingError",
    "UnsupportedKeyEncodingError",
)
