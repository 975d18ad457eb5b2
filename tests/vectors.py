"""Shared pubkey test vectors."""

import base64

# secp256k1 generator point G (private key 1)
SECP_G_UNCOMPRESSED = bytes.fromhex(
    "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)
SECP_G_COMPRESSED = bytes.fromhex(
    "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
)

SECP_PUBKEY_B64 = "A08EGB7ro1ORuFhjOnZcSgwYlpe0DSFjVNUIkNNQxwKQ"
SECP_PUBKEY = base64.b64decode(SECP_PUBKEY_B64)
SECP_BECH32 = (
    "cosmospub1addwnpepqd8sgxq7aw348ydctp3n5ajufgxp395hksxjzc6565yfp56scupfqhlgyg5"
)

ED25519_PUBKEY_B64 = "YZHlYxP5R6olj3Tj3f7VgkQE5VaOvv9G0jKATqdQsqI="
ED25519_PUBKEY = base64.b64decode(ED25519_PUBKEY_B64)
ED25519_BECH32 = (
    "cosmosvalconspub1zcjduepqvxg72ccnl9r65fv0wn3amlk4sfzqfe2k36l073kjx2qyaf6sk23qsfde4t"
)

SECP_MARKER = bytes.fromhex("eb5ae98721")
ED25519_MARKER = bytes.fromhex("1624de6420")
SR25519_MARKER = bytes.fromhex("0dfb100520")
