import logging

from .GLOBAL import *
from .KeccakP import keccak_p
from .StateArray import new_state, bytes_to_state, state_to_bytes

logger = logging.getLogger(__name__)


class KeccakSponge:
    """
    Sponge construction over Keccak-f[1600].

    One instance serves a single hash computation: it owns its state from
    creation until the digest is read and is never shared.
    """

    def __init__(self, rate_bytes=RATE_BYTES):
        if rate_bytes <= 0 or rate_bytes >= STATE_BYTES or rate_bytes % 8 != 0:
            raise ValueError(
                f"Rate must be a multiple of 8 bytes between 8 and {STATE_BYTES - 8}."
            )
        self.state = new_state()
        self.rate_bytes = rate_bytes

    def _absorb_block(self, block):
        """Absorb a single block of rate_bytes."""
        self.state ^= bytes_to_state(block)
        keccak_p(self.state)

    def absorb(self, padded):
        """
        XOR each rate-sized block of an already padded stream into the
        state, permuting after every block.
        """
        if len(padded) % self.rate_bytes != 0:
            raise ValueError(
                f"Padded input length must be a multiple of {self.rate_bytes} bytes."
            )

        blocks = len(padded) // self.rate_bytes
        logger.debug("absorbing %d block(s) of %d bytes", blocks, self.rate_bytes)

        for i in range(0, len(padded), self.rate_bytes):
            self._absorb_block(padded[i : i + self.rate_bytes])

    def squeeze(self, num_bytes):
        """
        Read num_bytes of output from the rate region.

        The state is permuted again only when more than one rate's worth
        of output is requested.
        """
        if num_bytes < 0:
            raise ValueError("Output length must not be negative.")

        output = bytearray()
        while True:
            take = min(num_bytes - len(output), self.rate_bytes)
            output.extend(state_to_bytes(self.state)[:take])
            if len(output) == num_bytes:
                break
            keccak_p(self.state)

        logger.debug("squeezed %d byte(s)", num_bytes)
        return bytes(output)
