from . import GLOBAL
from .GLOBAL import LIB_HASH, MY_HASH, OUTPUT_BYTES
from Crypto.Hash import keccak
from .Keccak256 import keccak256 as my_keccak256


def H(s: bytes) -> bytes:
    """
    Implements the hash function H(s) := Keccak-256(s).

    The backend follows GLOBAL.HASH_MODE at call time.

    Args:
        s: A variable-length byte string.

    Returns:
        A 32-byte hash digest.
    """
    if GLOBAL.HASH_MODE == LIB_HASH:
        return keccak.new(digest_bits=256, data=bytes(s)).digest()
    elif GLOBAL.HASH_MODE == MY_HASH:
        return my_keccak256(s)
    else:
        raise Exception("Please choose Hash Library")


def hash_to_field(s: bytes) -> int:
    """
    Keccak-256 of s as a big-endian integer, shifted right by 8 bits.

    The shift keeps the value below 2**248, inside the scalar field used
    for signal hashes.
    """
    return int.from_bytes(H(s), 'big') >> 8


def encode_signal(signal: str) -> str:
    """
    Encode a signal string as a 0x-prefixed, 64-digit hex field element.

    Args:
        signal: Arbitrary text, hashed as UTF-8.

    Returns:
        The string "0x" followed by 64 lowercase hex digits.
    """
    value = hash_to_field(signal.encode('utf-8'))
    return "0x" + format(value, f'0{2 * OUTPUT_BYTES}x')
