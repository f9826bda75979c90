from .GLOBAL import *
from .Padding import pad
from .Sponge import KeccakSponge


def keccak256(data=None) -> bytes:
    """
    Compute the Keccak-256 digest (Ethereum variant, suffix 0x01).

    Args:
        data: Any bytes-like object. None is the empty message.

    Returns:
        The 32-byte digest.
    """
    message = b'' if data is None else memoryview(data).tobytes()

    sponge = KeccakSponge(RATE_BYTES)
    sponge.absorb(pad(message, RATE_BYTES, KECCAK_SUFFIX))
    return sponge.squeeze(OUTPUT_BYTES)


def keccak256_hex(data=None) -> str:
    return keccak256(data).hex()


def keccak256_hash(input, input_len: int, output) -> None:
    """
    Hash the first input_len bytes of input into the first 32 bytes of
    output.

    Precondition: input may be None only when input_len is 0; that case is
    the empty message. The input is never modified and nothing in output
    beyond the first 32 bytes is touched, even when both views share one
    underlying buffer.

    Args:
        input: Bytes-like message buffer, or None.
        input_len: Number of bytes of input to hash.
        output: Writable bytes-like object of at least 32 bytes.
    """
    out = memoryview(output).cast('B')
    if len(out) < OUTPUT_BYTES:
        raise ValueError(f"Output buffer must hold at least {OUTPUT_BYTES} bytes.")

    message = b'' if input is None else memoryview(input).cast('B')[:input_len]
    # The digest is fully computed before the first output byte is written.
    digest = keccak256(message)
    out[:OUTPUT_BYTES] = digest


class Keccak256Hash:
    """
    hashlib-style Keccak-256 object.

    update() only buffers; the sponge runs over the whole buffer each time
    digest() is called, so digest() may be called repeatedly and further
    updates are allowed afterwards.
    """

    name = "keccak_256"
    digest_size = OUTPUT_BYTES
    block_size = RATE_BYTES

    def __init__(self, data=None):
        self._buffer = bytearray()
        if data is not None:
            self.update(data)

    @classmethod
    def new(cls, data=None):
        """Return a new Keccak-256 hash object."""
        return cls(data)

    def update(self, data):
        """Update the hash object with a bytestring."""
        self._buffer.extend(memoryview(data).cast('B'))

    def copy(self):
        clone = Keccak256Hash()
        clone._buffer = bytearray(self._buffer)
        return clone

    def digest(self):
        """Return the digest as a bytes object."""
        return keccak256(self._buffer)

    def hexdigest(self):
        """Return the digest as a hex-encoded string."""
        return self.digest().hex()
