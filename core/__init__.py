"""Core primitives: target field descriptors, Grain LFSR, bit counters."""

from core.field import (FieldElement, FieldType, PrimeField, BinaryField,
                        PALLAS_FP, VESTA_FQ, MERSENNE_127)
from core.grain import Grain, SboxType, encode_seed
from core.metrics import GrainMetrics
