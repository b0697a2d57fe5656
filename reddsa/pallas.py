"""The Pallas curve y^2 = x^3 + 5, a prime-order group.

Points are kept in affine coordinates, with None standing for the point at infinity.
Scalars are plain integers modulo the group order.
"""

from __future__ import annotations

BASE_FIELD_MODULUS = 0x40000000000000000000000000000000224698FC094CF91B992D30ED00000001
SCALAR_FIELD_MODULUS = 0x40000000000000000000000000000000224698FC0994A8DD8C46EB2100000001
CURVE_B = 5

_P = BASE_FIELD_MODULUS
_SIGN_MASK = (1 << 255) - 1


def _find_non_residue(modulus: int) -> int:
    candidate = 2
    while pow(candidate, (modulus - 1) // 2, modulus) != modulus - 1:
        candidate += 1
    return candidate


_TWO_ADICITY = ((_P - 1) & -(_P - 1)).bit_length() - 1
_ODD_PART = (_P - 1) >> _TWO_ADICITY
_ROOT_OF_UNITY = pow(_find_non_residue(_P), _ODD_PART, _P)


def _sqrt(a: int) -> int | None:
    """Return a square root of ``a`` modulo the base field, or None if there is none."""
    a %= _P
    if a == 0:
        return 0
    if pow(a, (_P - 1) // 2, _P) != 1:
        return None
    m, c = _TWO_ADICITY, _ROOT_OF_UNITY
    x = pow(a, (_ODD_PART + 1) // 2, _P)
    b = pow(a, _ODD_PART, _P)
    while b != 1:
        i, b2 = 0, b
        while b2 != 1:
            b2 = b2 * b2 % _P
            i += 1
        f = pow(c, 1 << (m - i - 1), _P)
        m, c = i, f * f % _P
        x = x * f % _P
        b = b * c % _P
    return x


class Point:
    """A point on the Pallas curve; ``xy`` is None for the identity."""

    __slots__ = ("xy",)

    def __init__(self, xy: tuple[int, int] | None = None) -> None:
        self.xy = xy

    @classmethod
    def identity(cls) -> Point:
        """The point at infinity."""
        return cls(None)

    @classmethod
    def from_bytes(cls, data: bytes) -> Point:
        """Decode a canonical 32-byte encoding, raising ValueError if it is invalid."""
        data = bytes(data)
        if len(data) != 32:
            raise ValueError("a Pallas point encoding is 32 bytes long")
        ysign = data[31] >> 7
        x = int.from_bytes(data, "little") & _SIGN_MASK
        if x >= _P:
            raise ValueError("non-canonical x coordinate")
        if x == 0 and not ysign:
            return cls.identity()
        y = _sqrt(x * x * x + CURVE_B)
        if y is None:
            raise ValueError("bytes do not encode a point on the curve")
        if y & 1 != ysign:
            y = (-y) % _P
        return cls((x, y))

    def to_bytes(self) -> bytes:
        """Encode as x in little-endian order with the sign of y in the top bit."""
        if self.xy is None:
            return bytes(32)
        x, y = self.xy
        return ((y & 1) << 255 | x).to_bytes(32, "little")

    def double(self) -> Point:
        if self.xy is None:
            return self
        x, y = self.xy
        if y == 0:
            return Point.identity()
        slope = 3 * x * x * pow(2 * y, -1, _P) % _P
        x3 = (slope * slope - 2 * x) % _P
        y3 = (slope * (x - x3) - y) % _P
        return Point((x3, y3))

    def is_small_order(self) -> bool:
        """True only for the identity, since the group has prime order."""
        return self.xy is None

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        if self.xy is None:
            return other
        if other.xy is None:
            return self
        (x1, y1), (x2, y2) = self.xy, other.xy
        if x1 == x2:
            if (y1 + y2) % _P == 0:
                return Point.identity()
            return self.double()
        slope = (y2 - y1) * pow(x2 - x1, -1, _P) % _P
        x3 = (slope * slope - x1 - x2) % _P
        y3 = (slope * (x1 - x3) - y1) % _P
        return Point((x3, y3))

    def __neg__(self) -> Point:
        if self.xy is None:
            return self
        x, y = self.xy
        return Point((x, (-y) % _P))

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
        return self.xy == other.xy

    def __hash__(self) -> int:
        return hash(self.xy)

    def __repr__(self) -> str:
        return f"pallas.Point({self.to_bytes().hex()})"


def scalar_from_bytes(data: bytes) -> int:
    """Decode a canonical little-endian scalar, raising ValueError if it is not reduced."""
    data = bytes(data)
    if len(data) != 32:
        raise ValueError("a Pallas scalar encoding is 32 bytes long")
    value = int.from_bytes(data, "little")
    if value >= SCALAR_FIELD_MODULUS:
        raise ValueError("non-canonical scalar")
    return value


def scalar_to_bytes(value: int) -> bytes:
    """Encode a scalar as 32 little-endian bytes."""
    return (value % SCALAR_FIELD_MODULUS).to_bytes(32, "little")


def scalar_from_bytes_wide(data: bytes) -> int:
    """Reduce 64 little-endian bytes modulo the group order."""
    data = bytes(data)
    if len(data) != 64:
        raise ValueError("a wide scalar is 64 bytes long")
    return int.from_bytes(data, "little") % SCALAR_FIELD_MODULUS