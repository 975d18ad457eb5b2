"""
Byte-oriented bech32: wraps the `bech32` package's 5-bit API.
"""

from __future__ import annotations

from bech32 import bech32_decode, bech32_encode, convertbits

from ..exceptions import Bech32FormatError, InvalidPrefixCharsetError


def bech32_decode_bytes(text: str) -> tuple[str, bytes]:
    """
    Decode a bech32 string into its prefix and 8-bit payload.

    Args:
        text: Bech32 text (all lower or all upper case, at most 90 chars).

    Returns:
        (hrp, data) with hrp lower-cased.
    """
    hrp, five_bits = bech32_decode(text)
    if hrp is None or five_bits is None:
        raise Bech32FormatError(f"Invalid bech32 string: {text!r}")
    data = convertbits(five_bits, 5, 8, False)
    if data is None:
        raise Bech32FormatError(f"Invalid bech32 payload padding: {text!r}")
    return hrp, bytes(data)


def bech32_encode_bytes(hrp: str, data: bytes) -> str:
    """
    Encode an 8-bit payload as bech32 under the given prefix.

    Args:
        hrp: Human-readable prefix (lower case, printable ASCII).
        data: Payload bytes.

    Returns:
        Bech32 text.
    """
    if not hrp or any(ord(c) < 33 or ord(c) > 126 for c in hrp) or hrp.lower() != hrp:
        raise InvalidPrefixCharsetError(f"Invalid bech32 prefix characters: {hrp!r}")
    five_bits = convertbits(data, 8, 5)
    return bech32_encode(hrp, five_bits)


__all__: tuple[str, ...] = (
    "bech32_decode_bytes",
    "bech32_encode_bytes",
)
