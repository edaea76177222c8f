"""Grain LFSR parameter stream: demo entry point.

Seeds Grain for a Poseidon instance (x^5 S-box, t=3, R_F=8, R_P=56) over
each shipped field and prints the first sampled elements.
Usage: python main.py [count]
"""

import sys
import time
from core.field import PALLAS_FP, VESTA_FQ, MERSENNE_127, BinaryField
from core.grain import Grain, SboxType


T, R_F, R_P = 3, 8, 56


def run_scenario(field, count: int, sbox: SboxType = SboxType.POW):
    """Sample `count` elements of `field` and report bit usage."""
    print(f"=== {field.name}: {field.num_bits} bits, t={T}, R_F={R_F}, R_P={R_P} ===")

    start = time.time()
    grain = Grain(field, sbox, T, R_F, R_P)
    elements = [grain.next_field_element() for _ in range(count)]
    elapsed = time.time() - start

    for i, element in enumerate(elements):
        print(f"  c[{i}] = {element.value:#x}")

    metrics = grain.metrics
    print(f"\n--- Metrics ---")
    print(f"  Warm-up + stream refills: {metrics.refills}")
    print(f"  Raw bits read: {metrics.raw_bits_read}")
    print(f"  Derived bits: {metrics.derived_bits}")
    print(f"  Raw bits per derived bit: {metrics.raw_bits_per_derived_bit:.3f}")
    print(f"  Rejected samples: {metrics.samples_rejected}")
    print(f"  Time: {elapsed:.3f}s")
    print()
    return elements


def main():
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 4
    assert count > 0, "count must be positive"

    for field in (PALLAS_FP, VESTA_FQ, MERSENNE_127, BinaryField("GF2^64", 64)):
        run_scenario(field, count)


if __name__ == "__main__":
    main()
