"""Elliptic-curve helpers: secp256k1 public key compression."""

from .secp256k1 import compress_pubkey, decompress_pubkey

__all__: tuple[str, ...] = (
    "compress_pubkey",
    "decompress_pubkey",
)
