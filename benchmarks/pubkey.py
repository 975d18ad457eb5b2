"""
Benchmark pubkey encodings: point compression, amino and bech32 encode/decode.
Compares time per call and peak memory (tracemalloc) per run.

Run from repo root:

  PYTHONPATH=src python benchmarks/pubkey.py

Or after pip install -e .:

  python benchmarks/pubkey.py
"""

from __future__ import annotations

import os
import sys
import time
import tracemalloc

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from picopubkey import (
    compress_pubkey,
    decode_amino_pubkey,
    decode_bech32_pubkey,
    encode_amino_pubkey,
    encode_bech32_pubkey,
    encode_secp256k1_pubkey,
)

N_TIME = 2000
N_MEM = 200
UNCOMPRESSED = bytes.fromhex(
    "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)
PUBKEY = encode_secp256k1_pubkey(UNCOMPRESSED)
AMINO = encode_amino_pubkey(PUBKEY)
BECH = encode_bech32_pubkey(PUBKEY, "cosmospub")


def _time_per_call(fn, *args, n: int = N_TIME, **kwargs) -> float:
    for _ in range(20):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def _peak_kb(fn, *args, n: int = N_MEM, **kwargs) -> float:
    tracemalloc.start()
    if hasattr(tracemalloc, "reset_peak"):
        tracemalloc.reset_peak()
    for _ in range(n):
        fn(*args, **kwargs)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


def main() -> None:
    print("Benchmark: pubkey encodings (pure Python + bech32)")
    print()

    # Sanity
    assert decode_amino_pubkey(AMINO) == PUBKEY
    assert decode_bech32_pubkey(BECH) == PUBKEY
    print("  Sanity check: round trips hold.")
    print()

    print(f"  n = {N_TIME} (time), {N_MEM} (memory)")
    print()

    cases = [
        ("compress_pubkey", compress_pubkey, (UNCOMPRESSED,)),
        ("encode_amino_pubkey", encode_amino_pubkey, (PUBKEY,)),
        ("decode_amino_pubkey", decode_amino_pubkey, (AMINO,)),
        ("encode_bech32_pubkey", encode_bech32_pubkey, (PUBKEY, "cosmospub")),
        ("decode_bech32_pubkey", decode_bech32_pubkey, (BECH,)),
    ]
    for name, fn, args in cases:
        t = _time_per_call(fn, *args) * 1000
        m = _peak_kb(fn, *args)
        print(f"  {name:<22} {t:.4f} ms  peak {m:.2f} KiB")


if __name__ == "__main__":
    main()
