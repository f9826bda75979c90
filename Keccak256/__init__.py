"""
Keccak-256 (Ethereum variant) built on a numba-compiled Keccak-f[1600]
"""

from . import Keccak256
from .Keccak256 import keccak256, keccak256_hex, keccak256_hash, Keccak256Hash
from .CryptoFunc import encode_signal, hash_to_field

__all__ = [
    "Keccak256",
    "keccak256",
    "keccak256_hex",
    "keccak256_hash",
    "Keccak256Hash",
    "encode_signal",
    "hash_to_field",
]
