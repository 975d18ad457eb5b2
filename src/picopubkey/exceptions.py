"""
Errors raised while moving public keys between encodings.

Every class derives from ValueError, so callers that only care about
"bad input" can keep catching that.
"""

from __future__ import annotations


class PubkeyError(ValueError):
    """Base class for all picopubkey errors."""


class Bech32FormatError(PubkeyError):
    """Bech32 text has a bad checksum, charset, case mix, length or padding."""


class InvalidPrefixCharsetError(PubkeyError):
    """Human-readable prefix contains characters bech32 cannot carry."""


class InvalidPrefixError(PubkeyError):
    """Bech32 prefix is not one of the accepted pubkey prefixes."""

    def __init__(self, prefix: str, accepted: tuple[str, ...]) -> None:
        self.prefix = prefix
        self.accepted = accepted
        super().__init__(
            f"Invalid bech32 prefix {prefix!r}. Must be one of {', '.join(accepted)}."
        )


class UnsupportedKeyEncodingError(PubkeyError):
    """Tagged binary marker (or amino JSON type) matches no known algorithm."""

    def __init__(self, marker: str, kind: str = "Amino prefix") -> None:
        self.marker = marker
        super().__init__(f"Unsupported pubkey type. {kind}: {marker}")


class InvalidPayloadLengthError(PubkeyError):
    """Marker matched but the key bytes after it have the wrong length."""

    def __init__(self, algorithm: str, expected: int, actual: int) -> None:
        self.algorithm = algorithm
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid rest data length {actual}. "
            f"Expected {expected} bytes for {algorithm}."
        )


class UnsupportedAlgorithmForEncodingError(PubkeyError):
    """The binary encoder has no marker for this algorithm."""

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(f"Unsupported pubkey type for encoding: {algorithm}")


class InvalidCurvePointError(PubkeyError):
    """Bytes do not form a valid secp256k1 public key."""


class InvalidPubkeyValueError(PubkeyError):
    """Amino JSON pubkey value is not valid base64."""


__all__: tuple[str, ...] = (
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
