"""Bit-consumption counters for a Grain instance."""


class GrainMetrics:
    """Track how much raw LFSR output each stage has used."""

    def __init__(self):
        self.refills = 0
        self.raw_bits_read = 0
        self.pairs_read = 0
        self.derived_bits = 0
        self.samples_rejected = 0
        self.samples_accepted = 0

    @property
    def raw_bits_generated(self) -> int:
        return 8 * self.refills

    @property
    def raw_bits_per_derived_bit(self) -> float:
        if self.derived_bits == 0:
            return 0.0
        return self.raw_bits_read / self.derived_bits

    def __repr__(self):
        return (f"GrainMetrics(refills={self.refills}, raw_bits_read={self.raw_bits_read}, "
                f"derived_bits={self.derived_bits}, rejected={self.samples_rejected})")
