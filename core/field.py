"""Target field descriptors for Grain sampling.

Only the canonical encoding is modelled here: the bit length, the size of the
little-endian byte representation and the check that a byte buffer encodes a
value strictly below the modulus. Arithmetic is left to the permutation code.
"""

from enum import Enum


class FieldType(Enum):
    """Field kind tag written into the first two bits of the Grain seed."""
    BINARY = "binary"          # GF(2^n)
    PRIME_ORDER = "prime"      # GF(p)

    @property
    def tag(self) -> int:
        return 0 if self is FieldType.BINARY else 1


class FieldElement:
    """Canonical element of a target field."""

    __slots__ = ('value', 'field')

    def __init__(self, value: int, field):
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "field", field)

    def __setattr__(self, name, val):
        raise AttributeError(f"FieldElement is immutable, cannot set {name!r}")

    def to_bytes(self) -> bytes:
        return self.field.to_repr(self)

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == other
        if isinstance(other, FieldElement):
            return self.field is other.field and self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"{self.field.name}({self.value:#x})"

    def __bool__(self):
        return self.value != 0


class _FieldDescriptor:
    """Shared canonical-encoding logic for a field of size `order`."""

    field_type: FieldType

    def __init__(self, name: str, order: int, num_bits: int):
        self.name = name
        self.order = order
        self.num_bits = num_bits
        self.repr_bytes = (num_bits + 7) // 8

    def zero_repr(self) -> bytearray:
        return bytearray(self.repr_bytes)

    def from_repr(self, buf) -> FieldElement | None:
        """Parse a canonical little-endian encoding.

        Returns None when the encoded integer is not below the field order.
        """
        if len(buf) != self.repr_bytes:
            raise ValueError(f"{self.name} repr must be {self.repr_bytes} bytes, got {len(buf)}")
        value = int.from_bytes(buf, 'little')
        if value >= self.order:
            return None
        return FieldElement(value, self)

    def to_repr(self, element: FieldElement) -> bytes:
        return element.value.to_bytes(self.repr_bytes, 'little')

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, bits={self.num_bits})"


class PrimeField(_FieldDescriptor):
    """GF(p). Canonical values are the integers in [0, p)."""

    field_type = FieldType.PRIME_ORDER

    def __init__(self, name: str, modulus: int):
        if modulus < 2:
            raise ValueError(f"Modulus must be at least 2, got {modulus}")
        super().__init__(name, modulus, modulus.bit_length())
        self.modulus = modulus


class BinaryField(_FieldDescriptor):
    """GF(2^n). Every n-bit pattern is canonical."""

    field_type = FieldType.BINARY

    def __init__(self, name: str, degree: int):
        if degree < 1:
            raise ValueError(f"Degree must be positive, got {degree}")
        super().__init__(name, 1 << degree, degree)
        self.degree = degree


# Pallas base field (= Vesta scalar field)
PALLAS_FP = PrimeField(
    "Fp", 0x40000000000000000000000000000000224698fc094cf91b992d30ed00000001)

# Vesta base field (= Pallas scalar field)
VESTA_FQ = PrimeField(
    "Fq", 0x40000000000000000000000000000000224698fc0994a8dd8c46eb2100000001)

MERSENNE_127 = PrimeField("M127", (1 << 127) - 1)  # 2^127 - 1
