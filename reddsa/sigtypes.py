"""The RedDSA parameter choices: Sapling and Orchard, spend authorization and binding."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from . import jubjub, pallas

SAPLING_PERSONALIZATION = b"Zcash_RedJubjubH"
ORCHARD_PERSONALIZATION = b"Zcash_RedPallasH"

SAPLING_SPENDAUTHSIG_BASEPOINT_BYTES = bytes(
    [
        48, 181, 242, 170, 173, 50, 86, 48, 188, 221, 219, 206, 77, 103, 101, 109,
        5, 253, 28, 194, 208, 55, 187, 83, 117, 182, 233, 109, 158, 1, 161, 215,
    ]
)
SAPLING_BINDINGSIG_BASEPOINT_BYTES = bytes(
    [
        139, 106, 11, 56, 185, 250, 174, 60, 59, 128, 59, 71, 176, 241, 70, 173,
        80, 171, 34, 30, 110, 42, 251, 230, 219, 222, 69, 203, 169, 211, 129, 237,
    ]
)
# Pallas hash_to_curve("z.cash:Orchard")(b"G")
ORCHARD_SPENDAUTHSIG_BASEPOINT_BYTES = bytes(
    [
        99, 201, 117, 184, 132, 114, 26, 141, 12, 161, 112, 123, 227, 12, 127, 12,
        95, 68, 95, 62, 124, 24, 141, 59, 6, 214, 241, 40, 179, 35, 85, 183,
    ]
)
# Pallas hash_to_curve("z.cash:Orchard-cv")(b"r")
ORCHARD_BINDINGSIG_BASEPOINT_BYTES = bytes(
    [
        145, 90, 60, 136, 104, 198, 195, 14, 47, 128, 144, 238, 69, 215, 110, 64,
        72, 32, 141, 234, 91, 35, 102, 79, 187, 9, 164, 15, 85, 68, 244, 7,
    ]
)


@lru_cache(maxsize=None)
def _decode_point(point_type: type, data: bytes) -> Any:
    return point_type.from_bytes(data)


@dataclass(frozen=True)
class SigType:
    """One RedDSA parameter choice: the group, its generator and the hash personalization."""

    name: str
    personalization: bytes
    point_type: type = field(repr=False)
    scalar_modulus: int = field(repr=False)
    scalar_from_bytes: Callable[[bytes], int] = field(repr=False)
    scalar_to_bytes: Callable[[int], bytes] = field(repr=False)
    scalar_from_bytes_wide: Callable[[bytes], int] = field(repr=False)
    basepoint_bytes: bytes = field(repr=False)
    spend_auth: bool = False

    def basepoint(self) -> Any:
        """The generator used by this signature type."""
        return _decode_point(self.point_type, self.basepoint_bytes)


def _sapling(name: str, basepoint_bytes: bytes, spend_auth: bool) -> SigType:
    return SigType(
        name=name,
        personalization=SAPLING_PERSONALIZATION,
        point_type=jubjub.Point,
        scalar_modulus=jubjub.SCALAR_FIELD_MODULUS,
        scalar_from_bytes=jubjub.scalar_from_bytes,
        scalar_to_bytes=jubjub.scalar_to_bytes,
        scalar_from_bytes_wide=jubjub.scalar_from_bytes_wide,
        basepoint_bytes=basepoint_bytes,
        spend_auth=spend_auth,
    )


def _orchard(name: str, basepoint_bytes: bytes, spend_auth: bool) -> SigType:
    return SigType(
        name=name,
        personalization=ORCHARD_PERSONALIZATION,
        point_type=pallas.Point,
        scalar_modulus=pallas.SCALAR_FIELD_MODULUS,
        scalar_from_bytes=pallas.scalar_from_bytes,
        scalar_to_bytes=pallas.scalar_to_bytes,
        scalar_from_bytes_wide=pallas.scalar_from_bytes_wide,
        basepoint_bytes=basepoint_bytes,
        spend_auth=spend_auth,
    )


SAPLING_SPEND_AUTH = _sapling("sapling.SpendAuth", SAPLING_SPENDAUTHSIG_BASEPOINT_BYTES, True)
SAPLING_BINDING = _sapling("sapling.Binding", SAPLING_BINDINGSIG_BASEPOINT_BYTES, False)
ORCHARD_SPEND_AUTH = _orchard("orchard.SpendAuth", ORCHARD_SPENDAUTHSIG_BASEPOINT_BYTES, True)
ORCHARD_BINDING = _orchard("orchard.Binding", ORCHARD_BINDINGSIG_BASEPOINT_BYTES, False)

ALL_SIG_TYPES = (SAPLING_SPEND_AUTH, SAPLING_BINDING, ORCHARD_SPEND_AUTH, ORCHARD_BINDING)