"""The Grain LFSR in self-shrinking mode, as used to derive Poseidon parameters.

A Grain instance is seeded from the permutation parameters, discards its first
160 raw bits, and then yields an infinite stream of derived bits. Each derived
bit costs one or more raw bit pairs (control, candidate): the candidate is kept
only when the control bit is 1.

Usage:
    grain = Grain(PALLAS_FP, SboxType.POW, t=3, r_f=8, r_p=56)
    c = grain.next_field_element()
"""

from enum import Enum

from core.field import FieldType
from core.metrics import GrainMetrics

STATE_BITS = 80
REFILL_BITS = 8
WARMUP_REFILLS = 20  # 160 discarded bits
TAPS = (62, 51, 38, 23, 13, 0)

# (offset, width) of each seed parameter inside the register
FIELD_TYPE_SLOT = (0, 2)
SBOX_SLOT = (2, 4)
FIELD_BITS_SLOT = (6, 12)
WIDTH_SLOT = (18, 12)
FULL_ROUNDS_SLOT = (30, 10)
PARTIAL_ROUNDS_SLOT = (40, 10)


class SboxType(Enum):
    """S-box kind tag written into bits 2..6 of the seed."""
    POW = "pow"    # x^alpha
    INV = "inv"    # x^(-1)

    @property
    def tag(self) -> int:
        return 0 if self is SboxType.POW else 1


def encode_seed(field_type: FieldType, sbox: SboxType, field_bits: int,
                t: int, r_f: int, r_p: int) -> bytearray:
    """Initial 80-bit register, one 0/1 cell per bit, MSB-first per slot.

    Values wider than their slot are the caller's responsibility; the high
    bits are silently dropped.
    """
    state = bytearray([1]) * STATE_BITS

    def set_bits(slot, value):
        offset, width = slot
        for i in range(width):
            state[offset + width - 1 - i] = (value >> i) & 1

    set_bits(FIELD_TYPE_SLOT, field_type.tag)
    set_bits(SBOX_SLOT, sbox.tag)
    set_bits(FIELD_BITS_SLOT, field_bits)
    set_bits(WIDTH_SLOT, t)
    set_bits(FULL_ROUNDS_SLOT, r_f)
    set_bits(PARTIAL_ROUNDS_SLOT, r_p)
    return state


class Grain:
    """Self-shrinking Grain generator over a target field.

    Iterating yields derived bits forever; next_field_element() packs them
    into canonical field elements. Instances are not thread-safe: every read
    mutates the register.
    """

    def __init__(self, field, sbox: SboxType, t: int, r_f: int, r_p: int):
        self.field = field
        self.metrics = GrainMetrics()
        self._state = encode_seed(field.field_type, sbox, field.num_bits, t, r_f, r_p)
        self._next_bit = STATE_BITS

        for _ in range(WARMUP_REFILLS):
            self._load_next_8_bits()
            self._next_bit = STATE_BITS

    @property
    def register(self) -> bytes:
        return bytes(self._state)

    @property
    def cursor(self) -> int:
        return self._next_bit

    def _load_next_8_bits(self):
        s = self._state
        new_bits = bytearray(REFILL_BITS)
        for i in range(REFILL_BITS):
            for tap in TAPS:
                new_bits[i] ^= s[i + tap]
        # rotate right by 8 in place, then overwrite the tail with the new bits
        s[:] = s[-REFILL_BITS:] + s[:-REFILL_BITS]
        s[STATE_BITS - REFILL_BITS:] = new_bits
        self._next_bit -= REFILL_BITS
        self.metrics.refills += 1

    def _next_raw_bit(self) -> int:
        if self._next_bit == STATE_BITS:
            self._load_next_8_bits()
        bit = self._state[self._next_bit]
        self._next_bit += 1
        self.metrics.raw_bits_read += 1
        return bit

    def __iter__(self):
        return self

    def __next__(self) -> int:
        # Evaluate bits in pairs: a 1 control bit keeps the candidate,
        # a 0 control bit discards it.
        while True:
            self.metrics.pairs_read += 1
            control = self._next_raw_bit()
            candidate = self._next_raw_bit()
            if control:
                self.metrics.derived_bits += 1
                return candidate

    def next_field_element(self):
        """Rejection-sample the next canonical element of self.field.

        There is no retry cap. Each attempt succeeds with probability
        order / 2^num_bits, so a field whose order sits far below the next
        power of two will loop for a long time.
        """
        num_bits = self.field.num_bits
        while True:
            buf = self.field.zero_repr()
            # Fill the repr with bits in little-endian order.
            for i in range(num_bits):
                if next(self):
                    buf[i // 8] |= 1 << (i % 8)

            element = self.field.from_repr(buf)
            if element is not None:
                self.metrics.samples_accepted += 1
                return element
            self.metrics.samples_rejected += 1

