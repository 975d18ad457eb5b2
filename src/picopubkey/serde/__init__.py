"""Serialization / deserialization (serde): amino tagged binary and bech32 pubkeys."""

from .amino import decode_amino_pubkey, encode_amino_pubkey
from .bech32 import bech32_decode_bytes, bech32_encode_bytes
from .pubkey import decode_bech32_pubkey, encode_bech32_pubkey, encode_secp256k1_pubkey

__all__: tuple[str, ...] = (
    "bech32_decode_bytes",
    "bech32_encode_bytes",
    "decode_amino_pubkey",
    "decode_bech32_pubkey",
    "encode_amino_pubkey",
    "encode_bech32_pubkey",
    "encode_secp256k1_pubkey",
)
