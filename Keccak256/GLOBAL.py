# REF: https://keccak.team/files/Keccak-reference-3.0.pdf
# REF: https://nvlpubs.nist.gov/nistpubs/FIPS/NIST.FIPS.202.pdf

# Keccak-256 (Ethereum)  -  suffix 0x01
# SHA3-256 (FIPS 202)    -  suffix 0x06, otherwise identical

LIB_HASH    = 0
MY_HASH     = 1

HASH_MODE   = MY_HASH


"""
    --- Keccak-f[1600] constants ---

    State width b (bits)              1600
    Lane width w (bits)               64
    l = log2(w)                       6
    Rounds n_r = 12 + 2l              24

"""
b = 1600
w = 64
l = 6
n_r = 12 + 2 * l

LANES = 25
STATE_BYTES = b // 8


"""
    --- Keccak-256 sponge parameters ---

    Rate r (bits)                     1088
    Capacity c (bits)                 512
    Domain suffix                     0x01
    Digest size (bytes)               32

"""
RATE_BITS = 1088
CAPACITY_BITS = 512
RATE_BYTES = RATE_BITS // 8
KECCAK_SUFFIX = 0x01
OUTPUT_BYTES = 32


if RATE_BITS + CAPACITY_BITS != b:
    raise ValueError("Rate and capacity must add up to the state width.")
if RATE_BITS % w != 0:
    raise ValueError("Rate must cover a whole number of lanes.")
