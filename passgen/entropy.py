"""
Entropy source backed by the quantum engine.

QuantumRandom is a random.Random whose bits come from simulated qubit
measurements, so it can be handed to PasswordGenerator in place of the
default secrets.SystemRandom.
"""

from __future__ import annotations

import hashlib
import logging
import random
import threading

from .config import QuantumSourceConfig
from .quantum_engine import QuantumEngine

logger = logging.getLogger(__name__)

RECIP_BPF = 2 ** -53  # Number of bits in a float mantissa


def bits_to_bytes(bits: list[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes, MSB first.

    Trailing bits that do not fill a whole byte are dropped rather than
    zero-padded, so every output byte is made only of sampled bits.
    """
    usable = len(bits) - len(bits) % 8
    out = bytearray()
    for i in range(0, usable, 8):
        byte = 0
        for bit in bits[i : i + 8]:
            byte = (byte << 1) | bit
        out.append(byte)
    return bytes(out)


def amplify_entropy(bits: list[int], rounds: int = 1) -> bytes:
    """
    Mix a raw bitstream with `rounds` passes of SHA-256.

    With rounds <= 0 the bits are only packed into bytes.
    """
    if rounds <= 0:
        return bits_to_bytes(bits)

    # Hash input keeps the padding so short bitstreams still hash.
    pad_len = (8 - len(bits) % 8) % 8
    data = bits_to_bytes(bits + [0] * pad_len)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()
    return data


class QuantumRandom(random.Random):
    """
    random.Random driven by quantum samples.

    Sampled blocks are buffered in a byte pool. getrandbits() and random()
    consume from the pool, so every derived method (choice, shuffle,
    randrange, ...) draws from it with the usual uniform index selection.
    The pool is guarded by a lock; one instance can be shared across threads.

    Like SystemRandom, the generator cannot be seeded or have its state
    saved and restored.
    """

    def __init__(
        self,
        *,
        config: QuantumSourceConfig | None = None,
        engine: QuantumEngine | None = None,
    ) -> None:
        self.config = config or QuantumSourceConfig()
        if self.config.entropy_rounds <= 0 and self.config.num_qubits < 8:
            raise ValueError("num_qubits must be at least 8 when entropy_rounds is 0")

        self._engine = engine or QuantumEngine(self.config.num_qubits)
        self._pool = bytearray()
        self._lock = threading.Lock()
        super().__init__()

    def _sample_block(self) -> bytes:
        """
        Sample `quantum_streams` bitstrings, XOR them and amplify.
        """
        combined: list[int] | None = None
        for _ in range(max(1, self.config.quantum_streams)):
            bits = self._engine.sample()
            if combined is None:
                combined = bits
            else:
                if len(bits) != len(combined):
                    raise ValueError(
                        "Quantum streams produced different bit-lengths; "
                        "this should not happen."
                    )
                combined = [b ^ c for b, c in zip(bits, combined)]

        assert combined is not None
        return amplify_entropy(combined, self.config.entropy_rounds)

    def _take(self, numbytes: int) -> bytes:
        with self._lock:
            while len(self._pool) < numbytes:
                block = self._sample_block()
                logger.debug("Refilled quantum pool with %d bytes", len(block))
                self._pool.extend(block)
            out = bytes(self._pool[:numbytes])
            del self._pool[:numbytes]
        return out

    def getrandbits(self, k: int) -> int:
        """getrandbits(k) -> x.  Generates an int with k random bits."""
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        numbytes = (k + 7) // 8
        x = int.from_bytes(self._take(numbytes), "big")
        return x >> (numbytes * 8 - k)

    def random(self) -> float:
        """Get the next random number in the range 0.0 <= X < 1.0."""
        return self.getrandbits(53) * RECIP_BPF

    def seed(self, *args, **kwds) -> None:
        "Stub method.  Not used for a quantum random number generator."
        return None

    def _notimplemented(self, *args, **kwds):
        "Method should not be called for a quantum random number generator."
        raise NotImplementedError("Quantum entropy does not have state.")

    getstate = setstate = _notimplemented
