from .GLOBAL import *


def pad_length(m: int, rate_bytes: int = RATE_BYTES) -> int:
    """
    Number of padding bytes appended to an m-byte message.

    Always between 1 and rate_bytes: a block-aligned message receives a
    whole extra block.
    """
    if rate_bytes <= 0:
        raise ValueError("Rate must be a positive number of bytes.")
    return rate_bytes - (m % rate_bytes)


def multirate_padding(used_bytes: int, rate_bytes: int = RATE_BYTES,
                      suffix: int = KECCAK_SUFFIX) -> bytes:
    """
    pad10*1 with a domain suffix, in byte form.

    The suffix byte carries the domain bits followed by the first '1' of
    pad10*1; the final '1' is bit 7 of the last byte of the block.

    Args:
        used_bytes: Length of the message being padded.
        rate_bytes: Block size in bytes.
        suffix: Delimited domain suffix (0x01 Keccak, 0x06 SHA3).

    Returns:
        The padding bytes to append.
    """
    if not 0x01 <= suffix <= 0x7F:
        raise ValueError("Domain suffix must be in 0x01..0x7F.")

    q = pad_length(used_bytes, rate_bytes)

    if q == 1:
        # Suffix and final bit share the single free byte
        return bytes([suffix | 0x80])
    return bytes([suffix]) + b'\x00' * (q - 2) + b'\x80'


def pad(message, rate_bytes: int = RATE_BYTES, suffix: int = KECCAK_SUFFIX) -> bytes:
    """Return message || padding, a positive multiple of rate_bytes long."""
    message = memoryview(message).tobytes()
    return message + multirate_padding(len(message), rate_bytes, suffix)
