#!/usr/bin/env python3
"""Example: Cosmos bech32 pubkeys (secp256k1 and Ed25519)."""

from picopubkey import (
    decode_bech32_pubkey,
    encode_bech32_pubkey,
    encode_secp256k1_pubkey,
)

# secp256k1 generator point, uncompressed
uncompressed = bytes.fromhex(
    "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)
pubkey = encode_secp256k1_pubkey(uncompressed)
print("Amino JSON:", pubkey.to_amino_json())

bech = encode_bech32_pubkey(pubkey, "cosmospub")
print("Bech32:", bech)
print("Round trip:", decode_bech32_pubkey(bech) == pubkey)

validator = decode_bech32_pubkey(
    "cosmosvalconspub1zcjduepqvxg72ccnl9r65fv0wn3amlk4sfzqfe2k36l073kjx2qyaf6sk23qsfde4t"
)
print("Validator consensus key:", validator.algorithm.label, validator.value)
