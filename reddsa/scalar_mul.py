"""Variable-time multiscalar multiplication over public data, using width-5 NAFs."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Optional

from . import jubjub, pallas


@dataclass(frozen=True)
class Curve:
    """What multiscalar multiplication needs to know about a group."""

    name: str
    point_type: type
    scalar_to_bytes: Callable[[int], bytes]
    naf_length: int = 257


JUBJUB = Curve("jubjub", jubjub.Point, jubjub.scalar_to_bytes, 253)
PALLAS = Curve("pallas", pallas.Point, pallas.scalar_to_bytes, 255)


def non_adjacent_form(scalar_bytes: bytes, w: int, naf_length: int) -> list[int]:
    """Compute the width-``w`` non-adjacent form of a 32-byte little-endian scalar."""
    if not 2 <= w <= 8:
        raise ValueError("the NAF width must be between 2 and 8")
    if len(scalar_bytes) != 32:
        raise ValueError("the scalar must be 32 bytes long")
    x = int.from_bytes(scalar_bytes, "little")
    width = 1 << w
    window_mask = width - 1
    naf = [0] * naf_length
    pos = 0
    carry = 0
    while pos < naf_length:
        window = carry + ((x >> pos) & window_mask)
        if window & 1 == 0:
            # An even window keeps the carry: the next bit already accounts for it.
            pos += 1
            continue
        if window < width // 2:
            carry = 0
            naf[pos] = window
        else:
            carry = 1
            naf[pos] = window - width
        pos += w
    return naf


@dataclass(frozen=True)
class LookupTable5:
    """The odd multiples A, 3A, ..., 15A of a point A."""

    entries: tuple

    @classmethod
    def from_point(cls, point: Any) -> LookupTable5:
        doubled = point.double()
        entries = [point]
        for _ in range(7):
            entries.append(doubled + entries[-1])
        return cls(tuple(entries))

    def select(self, x: int) -> Any:
        """Return xA for odd x with 0 < x < 16."""
        if x & 1 != 1 or not 0 < x < 16:
            raise ValueError("the multiple must be odd and between 1 and 15")
        return self.entries[x // 2]


def optional_multiscalar_mul(
    curve: Curve, scalars: Iterable[int], points: Iterable[Optional[Any]]
) -> Optional[Any]:
    """Return c1*P1 + ... + cn*Pn, or None if any point is None."""
    nafs = [
        non_adjacent_form(curve.scalar_to_bytes(scalar), 5, curve.naf_length)
        for scalar in scalars
    ]
    tables = []
    for point in points:
        if point is None:
            return None
        tables.append(LookupTable5.from_point(point))

    result = curve.point_type.identity()
    for column in reversed(list(zip(*nafs))):
        result = result.double()
        for digit, table in zip(column, tables):
            if digit > 0:
                result = result + table.select(digit)
            elif digit < 0:
                result = result - table.select(-digit)
    return result


def vartime_multiscalar_mul(curve: Curve, scalars: Iterable[int], points: Iterable[Any]) -> Any:
    """Return c1*P1 + ... + cn*Pn; scalars and points must have the same length."""
    scalars = list(scalars)
    points = list(points)
    if len(scalars) != len(points):
        raise ValueError("scalars and points must have the same length")
    if any(point is None for point in points):
        raise ValueError("points must not be None")
    return optional_multiscalar_mul(curve, scalars, points)