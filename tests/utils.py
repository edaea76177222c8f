"""Test utilities: reference register transitions, scripted generators."""

from core.grain import Grain, SboxType, encode_seed, STATE_BITS, WARMUP_REFILLS


def reference_refill(state: list[int]) -> list[int]:
    """Register after one refill, written out tap by tap."""
    new_bits = [
        state[i + 62] ^ state[i + 51] ^ state[i + 38]
        ^ state[i + 23] ^ state[i + 13] ^ state[i]
        for i in range(8)
    ]
    rotated = state[-8:] + state[:-8]
    return rotated[:72] + new_bits


def reference_warm_register(field, sbox, t, r_f, r_p) -> list[int]:
    state = list(encode_seed(field.field_type, sbox, field.num_bits, t, r_f, r_p))
    for _ in range(WARMUP_REFILLS):
        state = reference_refill(state)
    return state


def load_register(grain: Grain, bits: list[int], cursor: int):
    """Overwrite a generator's register and cursor."""
    assert len(bits) == STATE_BITS
    grain._state[:] = bytes(bits)
    grain._next_bit = cursor


def bits_from_string(s: str) -> list[int]:
    return [int(c) for c in s if c in '01']


class ScriptedGrain(Grain):
    """Grain whose derived bits come from a fixed list."""

    def __init__(self, field, bits):
        super().__init__(field, SboxType.POW, t=0, r_f=0, r_p=0)
        self._script = iter(bits)

    def __next__(self):
        return next(self._script)
