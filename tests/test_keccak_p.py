import numpy as np
import pytest

from Keccak256.KeccakP import (
    RHO_OFFSETS,
    ROTL64,
    ROUND_CONSTANTS,
    Rnd,
    chi,
    iota,
    keccak_f,
    keccak_p,
    pi,
    rho,
    theta,
)
from Keccak256.StateArray import lane_index, new_state


def rc(t):
    """FIPS 202 Algorithm 5, the LFSR behind the round constants."""
    if t % 255 == 0:
        return 1
    R = [1, 0, 0, 0, 0, 0, 0, 0]
    for _ in range(t % 255):
        R.insert(0, 0)
        R[0] ^= R[8]
        R[4] ^= R[8]
        R[5] ^= R[8]
        R[6] ^= R[8]
        R = R[:8]
    return R[0]


def test_round_constants_match_lfsr():
    for i_r in range(24):
        RC = 0
        for j in range(7):
            RC |= rc(j + 7 * i_r) << ((1 << j) - 1)
        assert int(ROUND_CONSTANTS[i_r]) == RC


def test_rho_offsets_match_triangular_rule():
    expected = [0] * 25
    x, y = 1, 0
    for t in range(24):
        expected[lane_index(x, y)] = ((t + 1) * (t + 2) // 2) % 64
        x, y = y, (2 * x + 3 * y) % 5
    assert [int(v) for v in RHO_OFFSETS] == expected


@pytest.mark.parametrize("a,n,expected", [
    (0x1, 1, 0x2),
    (0x8000000000000000, 1, 0x1),
    (0x0123456789ABCDEF, 0, 0x0123456789ABCDEF),
    (0x0123456789ABCDEF, 64, 0x0123456789ABCDEF),
    (0x0123456789ABCDEF, 8, 0x23456789ABCDEF01),
    (0x0123456789ABCDEF, 63, 0x8091A2B3C4D5E6F7),
])
def test_rotl64(a, n, expected):
    assert int(ROTL64(np.uint64(a), n)) == expected


def test_theta_on_single_bit():
    A = new_state()
    A[lane_index(0, 0)] = np.uint64(1)
    theta(A)
    # Column 0 has parity 1: it feeds column 1 directly and column 4 rotated.
    for y in range(5):
        assert int(A[lane_index(1, y)]) == 1
        assert int(A[lane_index(4, y)]) == 2
        assert int(A[lane_index(2, y)]) == 0
        assert int(A[lane_index(3, y)]) == 0
    assert int(A[lane_index(0, 0)]) == 1
    assert int(A[lane_index(0, 1)]) == 0


def test_theta_keeps_zero_state():
    A = new_state()
    theta(A)
    assert not A.any()


def test_rho_rotates_each_lane_by_its_offset():
    A = np.ones(25, dtype=np.uint64)
    rho(A)
    for i in range(25):
        assert int(A[i]) == 1 << int(RHO_OFFSETS[i])


def test_pi_moves_lane_1_0_to_0_2():
    A = new_state()
    A[lane_index(1, 0)] = np.uint64(1)
    pi(A)
    assert int(A[lane_index(0, 2)]) == 1
    assert int(A.sum()) == 1


def test_pi_is_a_lane_permutation():
    A = np.arange(25, dtype=np.uint64)
    pi(A)
    assert sorted(int(v) for v in A) == list(range(25))
    # Lane (0, 0) is the fixed point
    assert int(A[0]) == 0
    for x in range(5):
        for y in range(5):
            assert int(A[lane_index(x, y)]) == lane_index(x + 3 * y, x)


def test_chi_on_single_bit():
    A = new_state()
    A[lane_index(0, 0)] = np.uint64(1)
    chi(A)
    # a[3] ^= ~a[4] & a[0] picks the bit up, nothing else changes
    assert int(A[lane_index(0, 0)]) == 1
    assert int(A[lane_index(3, 0)]) == 1
    assert int(A.sum()) == 2


def test_chi_fixes_all_ones():
    A = np.full(25, 0xFFFFFFFFFFFFFFFF, dtype=np.uint64)
    chi(A)
    assert all(int(v) == 0xFFFFFFFFFFFFFFFF for v in A)


@pytest.mark.parametrize("i_r", [0, 1, 12, 23])
def test_iota_touches_only_lane_0_0(i_r):
    A = new_state()
    iota(A, i_r)
    assert int(A[0]) == int(ROUND_CONSTANTS[i_r])
    assert not A[1:].any()


def test_round_on_zero_state_is_iota_only():
    A = new_state()
    Rnd(A, 0)
    assert int(A[0]) == 1
    assert not A[1:].any()


def test_keccak_p_on_zero_state():
    A = new_state()
    keccak_p(A)
    # First two lanes of Keccak-f[1600] applied to the all-zero state
    assert int(A[0]) == 0xF1258F7940E1DDE7
    assert int(A[1]) == 0x84D5CCF933C0478A


def test_keccak_f_matches_keccak_p():
    S = bytes(range(200))
    A = np.frombuffer(S, dtype='<u8').astype(np.uint64)
    keccak_p(A)
    assert keccak_f(S) == A.astype('<u8').tobytes()


def test_keccak_f_is_deterministic_and_injective_on_samples():
    outputs = {keccak_f(bytes([i]) + bytes(199)) for i in range(32)}
    assert len(outputs) == 32
    assert keccak_f(bytes(200)) == keccak_f(bytes(200))


def test_keccak_f_rejects_wrong_size():
    with pytest.raises(ValueError):
        keccak_f(bytes(136))
