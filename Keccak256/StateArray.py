"""
State array addressing for Keccak-f[1600].

The 1600-bit state is held as a numpy array of 25 uint64 lanes. Lane (x, y)
lives at linear index x + 5*y. The flat 200-byte view is little-endian per
lane: byte i belongs to lane i // 8, starting at bit (i % 8) * 8.
"""

import numpy as np

from .GLOBAL import *


def lane_index(x: int, y: int) -> int:
    """Linear index of lane (x, y). Coordinates wrap modulo 5."""
    return (x % 5) + 5 * (y % 5)


def lane_coords(i: int) -> tuple[int, int]:
    """Inverse of lane_index: the (x, y) coordinate of linear lane i."""
    if not 0 <= i < LANES:
        raise ValueError(f"Lane index must be in 0..{LANES - 1}.")
    return (i % 5, i // 5)


def bit_position(byte_index: int, bit_in_byte: int = 0) -> tuple[int, int]:
    """
    Locate a bit of the flat byte view inside the lane array.

    Args:
        byte_index: Offset into the 200-byte state (0..199).
        bit_in_byte: Bit within that byte, 0 being the least significant.

    Returns:
        A tuple (lane, bit) where bit is the position inside the 64-bit lane.
    """
    if not 0 <= byte_index < STATE_BYTES:
        raise ValueError(f"Byte index must be in 0..{STATE_BYTES - 1}.")
    if not 0 <= bit_in_byte < 8:
        raise ValueError("Bit index within a byte must be in 0..7.")
    return (byte_index // 8, (byte_index % 8) * 8 + bit_in_byte)


def new_state() -> np.ndarray:
    """A zero-initialised state of 25 lanes."""
    return np.zeros(LANES, dtype=np.uint64)


def get_lane(A: np.ndarray, x: int, y: int) -> int:
    return int(A[lane_index(x, y)])


def set_lane(A: np.ndarray, x: int, y: int, value: int) -> None:
    A[lane_index(x, y)] = np.uint64(value & 0xFFFFFFFFFFFFFFFF)


def get_bit(A: np.ndarray, byte_index: int, bit_in_byte: int = 0) -> int:
    lane, bit = bit_position(byte_index, bit_in_byte)
    return (int(A[lane]) >> bit) & 1


def bytes_to_state(S_bytes) -> np.ndarray:
    """
    Convert up to 200 bytes into a lane array.

    Input shorter than the state is zero-extended, so a rate-sized block
    maps onto the rate lanes and leaves the capacity lanes at zero.
    """
    S_bytes = bytes(S_bytes)
    if len(S_bytes) > STATE_BYTES:
        raise ValueError(f"State input must be at most {STATE_BYTES} bytes.")
    if len(S_bytes) % 8 != 0:
        raise ValueError("State input must cover whole lanes.")
    S_bytes = S_bytes + b'\x00' * (STATE_BYTES - len(S_bytes))
    return np.frombuffer(S_bytes, dtype='<u8').astype(np.uint64)


def state_to_bytes(A: np.ndarray) -> bytes:
    """Serialise the lane array back to its 200-byte little-endian form."""
    return A.astype('<u8').tobytes()
