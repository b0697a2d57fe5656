"""The Jubjub twisted Edwards curve over the BLS12-381 scalar field.

Points are kept in affine coordinates ``(u, v)`` on ``-u^2 + v^2 = 1 + d u^2 v^2``.
Scalars are plain integers modulo the order of the prime-order subgroup.
"""

from __future__ import annotations

BASE_FIELD_MODULUS = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
SCALAR_FIELD_MODULUS = 0x0E7DB4EA6533AFA906673B0101343B00A6682093CCC81082D0970E5ED6F72CB7
EDWARDS_D = (-10240 * pow(10241, -1, BASE_FIELD_MODULUS)) % BASE_FIELD_MODULUS

_Q = BASE_FIELD_MODULUS
_SIGN_MASK = (1 << 255) - 1


def _find_non_residue(modulus: int) -> int:
    candidate = 2
    while pow(candidate, (modulus - 1) // 2, modulus) != modulus - 1:
        candidate += 1
    return candidate


_TWO_ADICITY = ((_Q - 1) & -(_Q - 1)).bit_length() - 1
_ODD_PART = (_Q - 1) >> _TWO_ADICITY
_ROOT_OF_UNITY = pow(_find_non_residue(_Q), _ODD_PART, _Q)


def _sqrt(a: int) -> int | None:
    """Return a square root of ``a`` modulo the base field, or None if there is none."""
    a %= _Q
    if a == 0:
        return 0
    if pow(a, (_Q - 1) // 2, _Q) != 1:
        return None
    m, c = _TWO_ADICITY, _ROOT_OF_UNITY
    x = pow(a, (_ODD_PART + 1) // 2, _Q)
    b = pow(a, _ODD_PART, _Q)
    while b != 1:
        i, b2 = 0, b
        while b2 != 1:
            b2 = b2 * b2 % _Q
            i += 1
        f = pow(c, 1 << (m - i - 1), _Q)
        m, c = i, f * f % _Q
        x = x * f % _Q
        b = b * c % _Q
    return x


class Point:
    """A point on the Jubjub curve."""

    __slots__ = ("u", "v")

    def __init__(self, u: int, v: int) -> None:
        self.u = u
        self.v = v

    @classmethod
    def identity(cls) -> Point:
        """The neutral element (0, 1)."""
        return cls(0, 1)

    @classmethod
    def from_affine(cls, u: int, v: int) -> Point:
        """Build a point from raw coordinates without checking the curve equation."""
        return cls(u % _Q, v % _Q)

    @classmethod
    def from_bytes(cls, data: bytes) -> Point:
        """Decode a canonical 32-byte encoding, raising ValueError if it is invalid."""
        data = bytes(data)
        if len(data) != 32:
            raise ValueError("a Jubjub point encoding is 32 bytes long")
        sign = data[31] >> 7
        v = int.from_bytes(data, "little") & _SIGN_MASK
        if v >= _Q:
            raise ValueError("non-canonical v coordinate")
        v2 = v * v % _Q
        denominator = (1 + EDWARDS_D * v2) % _Q
        inverse = pow(denominator, -1, _Q) if denominator else 0
        u = _sqrt((v2 - 1) * inverse)
        if u is None:
            raise ValueError("bytes do not encode a point on the curve")
        if u == 0 and sign:
            raise ValueError("non-canonical encoding of a point with u = 0")
        if u & 1 != sign:
            u = (-u) % _Q
        return cls(u, v)

    def to_bytes(self) -> bytes:
        """Encode as v in little-endian order with the sign of u in the top bit."""
        return ((self.u & 1) << 255 | self.v).to_bytes(32, "little")

    def double(self) -> Point:
        return self + self

    def is_small_order(self) -> bool:
        """True if the point's order divides the cofactor 8."""
        return self.double().double().double() == Point.identity()

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        u1u2 = self.u * other.u % _Q
        v1v2 = self.v * other.v % _Q
        t = EDWARDS_D * u1u2 % _Q * v1v2 % _Q
        plus, minus = (1 + t) % _Q, (1 - t) % _Q
        inverse = pow(plus * minus, -1, _Q)
        u3 = (self.u * other.v + self.v * other.u) * minus % _Q * inverse % _Q
        v3 = (v1v2 + u1u2) * plus % _Q * inverse % _Q
        return Point(u3, v3)

    def __neg__(self) -> Point:
        return Point((-self.u) % _Q, self.v)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar: object) -> Point:
        if not isinstance(scalar, int):
            return NotImplemented
        result = Point.identity()
        for bit in bin(scalar % SCALAR_FIELD_MODULUS)[2:]:
            result = result.double()
            if bit == "1":
                result = result + self
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.u == other.u and self.v == other.v

    def __hash__(self) -> int:
        return hash((self.u, self.v))

    def __repr__(self) -> str:
        return f"jubjub.Point({self.to_bytes().hex()})"


def scalar_from_bytes(data: bytes) -> int:
    """Decode a canonical little-endian scalar, raising ValueError if it is not reduced."""
    data = bytes(data)
    if len(data) != 32:
        raise ValueError("a Jubjub scalar encoding is 32 bytes long")
    value = int.from_bytes(data, "little")
    if value >= SCALAR_FIELD_MODULUS:
        raise ValueError("non-canonical scalar")
    return value


def scalar_to_bytes(value: int) -> bytes:
    """Encode a scalar as 32 little-endian bytes."""
    return (value % SCALAR_FIELD_MODULUS).to_bytes(32, "little")


def scalar_from_bytes_wide(data: bytes) -> int:
    """Reduce 64 little-endian bytes modulo the scalar field order."""
    data = bytes(data)
    if len(data) != 64:
        raise ValueError("a wide scalar is 64 bytes long")
    return int.from_bytes(data, "little") % SCALAR_FIELD_MODULUS