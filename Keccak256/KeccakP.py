import numpy as np
from numba import jit

from .GLOBAL import *
from .StateArray import bytes_to_state, state_to_bytes

##
## =================================================================
## KECCAK-p[1600, 24] PERMUTATION
## All step mappings work in place on a 25-lane uint64 array,
## lane (x, y) at index x + 5*y.
## =================================================================
##

# Round constants for iota, one per round. These are the outputs of the
# rc(t) LFSR from FIPS 202 Algorithm 5 packed into lanes.
ROUND_CONSTANTS = np.array([
    0x0000000000000001, 0x0000000000008082, 0x800000000000808A, 0x8000000080008000,
    0x000000000000808B, 0x0000000080000001, 0x8000000080008081, 0x8000000000008009,
    0x000000000000008A, 0x0000000000000088, 0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B, 0x8000000000008089, 0x8000000000008003,
    0x8000000000008002, 0x8000000000000080, 0x000000000000800A, 0x800000008000000A,
    0x8000000080008081, 0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
], dtype=np.uint64)

# Table 2: Offsets for rho, already reduced mod 64.
# Row y holds the offsets for x = 0..4.
RHO_OFFSETS = np.array([
    0,  1,  62, 28, 27,
    36, 44, 6,  55, 20,
    3,  10, 43, 25, 39,
    41, 45, 15, 21, 8,
    18, 2,  61, 56, 14,
], dtype=np.int64)


@jit(nopython=True, cache=True)
def ROTL64(a, n):
    """Rotate 64-bit lane 'a' left by 'n' bits."""
    n = n % 64
    if n == 0:
        return a
    return (a << np.uint64(n)) | (a >> np.uint64(64 - n))


@jit(nopython=True, cache=True)
def theta(A):
    """ Algorithm 1: theta"""
    C = np.zeros(5, dtype=np.uint64)

    # Step 1: column parities
    for x in range(5):
        C[x] = A[x] ^ A[x + 5] ^ A[x + 10] ^ A[x + 15] ^ A[x + 20]

    # Step 2-3
    for x in range(5):
        D = C[(x + 4) % 5] ^ ROTL64(C[(x + 1) % 5], 1)
        for y in range(5):
            A[x + 5 * y] ^= D


@jit(nopython=True, cache=True)
def rho(A):
    """ Algorithm 2: rho"""
    for i in range(25):
        A[i] = ROTL64(A[i], RHO_OFFSETS[i])


@jit(nopython=True, cache=True)
def pi(A):
    """ Algorithm 3: pi"""
    B = A.copy()
    for x in range(5):
        for y in range(5):
            A[x + 5 * y] = B[(x + 3 * y) % 5 + 5 * x]


@jit(nopython=True, cache=True)
def chi(A):
    """ Algorithm 4: chi"""
    row = np.zeros(5, dtype=np.uint64)
    for y in range(5):
        for x in range(5):
            row[x] = A[x + 5 * y]
        for x in range(5):
            A[x + 5 * y] = row[x] ^ ((~row[(x + 1) % 5]) & row[(x + 2) % 5])


@jit(nopython=True, cache=True)
def iota(A, i_r):
    """ Algorithm 6: iota"""
    A[0] ^= ROUND_CONSTANTS[i_r]


@jit(nopython=True, cache=True)
def Rnd(A, i_r):
    """ Round function"""
    theta(A)
    rho(A)
    pi(A)
    chi(A)
    iota(A, i_r)


@jit(nopython=True, cache=True)
def keccak_p(A):
    """ Algorithm 7: KECCAK-p[1600, 24]"""
    for i_r in range(n_r):
        Rnd(A, i_r)


def keccak_f(S_bytes) -> bytes:
    """
    Apply Keccak-f[1600] to a 200-byte state string and return the result.

    Byte-level convenience wrapper; the sponge works on the lane array
    directly through keccak_p.
    """
    if len(S_bytes) != STATE_BYTES:
        raise ValueError(f"Keccak-f[1600] state must be {STATE_BYTES} bytes.")
    A = bytes_to_state(S_bytes)
    keccak_p(A)
    return state_to_bytes(A)
