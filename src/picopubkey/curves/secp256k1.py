"""
secp256k1 (Bitcoin/Cosmos curve): public key point compression and decompression.
"""

from __future__ import annotations

from ..exceptions import InvalidCurvePointError

_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_B = 7


def _curve_rhs(x: int) -> int:
    return (x * x * x + _B) % _P


def _lift_x(x: int, odd: bool) -> int:
    """Return y for x with the requested parity; raises if x is not on the curve."""
    if x >= _P:
        raise InvalidCurvePointError("x coordinate not below field prime")
    rhs = _curve_rhs(x)
    y = pow(rhs, (_P + 1) // 4, _P)
    if (y * y) % _P != rhs:
        raise InvalidCurvePointError("x coordinate has no point on secp256k1")
    if (y & 1) != odd:
        y = (_P - y) % _P
    return y


def _parse_point(pubkey: bytes) -> tuple[int, int]:
    """Parse a SEC1 public key (33 or 65 bytes) into validated affine (x, y)."""
    if len(pubkey) == 33 and pubkey[0] in (0x02, 0x03):
        x = int.from_bytes(pubkey[1:], "big")
        return (x, _lift_x(x, pubkey[0] == 0x03))
    if len(pubkey) == 65 and pubkey[0] == 0x04:
        x = int.from_bytes(pubkey[1:33], "big")
        y = int.from_bytes(pubkey[33:], "big")
        if x >= _P or y >= _P or (y * y) % _P != _curve_rhs(x):
            raise InvalidCurvePointError("point is not on secp256k1")
        return (x, y)
    raise InvalidCurvePointError(
        f"invalid secp256k1 pubkey: {len(pubkey)} bytes, "
        f"prefix {pubkey[:1].hex() or 'none'}"
    )


def compress_pubkey(pubkey: bytes) -> bytes:
    """
    Compressed SEC1 form (33 bytes: 0x02/0x03 || x) of a secp256k1 public key.

    Args:
        pubkey: 65-byte uncompressed (0x04 || x || y) or 33-byte compressed key.

    Returns:
        33-byte compressed public key.
    """
    x, y = _parse_point(bytes(pubkey))
    return bytes([0x02 | (y & 1)]) + x.to_bytes(32, "big")


def decompress_pubkey(pubkey: bytes) -> bytes:
    """
    Uncompressed SEC1 form (65 bytes: 0x04 || x || y) of a secp256k1 public key.

    Args:
        pubkey: 33-byte compressed or 65-byte uncompressed key.

    Returns:
        65-byte uncompressed public key.
    """
    x, y = _parse_point(bytes(pubkey))
    return bytes([0x04]) + x.to_bytes(32, "big") + y.to_bytes(32, "big")


__all__: tuple[str, ...] = (
    "compress_pubkey",
    "decompress_pubkey",
)
