"""RedDSA signing and verification keys."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

from .sigtypes import SigType


class RedDSAError(Exception):
    """Base class for RedDSA errors."""


class MalformedSigningKeyError(RedDSAError):
    """The bytes do not encode a valid signing key."""


class MalformedVerificationKeyError(RedDSAError):
    """The bytes do not encode a valid verification key."""


def _require_spend_auth(sig_type: SigType) -> None:
    if not sig_type.spend_auth:
        raise TypeError(f"randomization is only supported for spend authorization keys, not {sig_type.name}")


@dataclass(frozen=True)
class VerificationKeyBytes:
    """The 32-byte encoding of a verification key, not yet checked."""

    sig_type: SigType
    data: bytes

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) != 32:
            raise ValueError("a verification key encoding is 32 bytes long")
        object.__setattr__(self, "data", data)

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return f"VerificationKeyBytes(bytes={self.data.hex()!r})"


@dataclass(frozen=True)
class VerificationKey:
    """A verification key whose encoding has been checked and decompressed.

    Small-order keys, the identity included, are accepted.
    """

    sig_type: SigType
    point: Any
    key_bytes: VerificationKeyBytes

    @classmethod
    def from_bytes(cls, sig_type: SigType, data: bytes) -> VerificationKey:
        """Decode a key, raising MalformedVerificationKeyError if the encoding is not canonical."""
        key_bytes = VerificationKeyBytes(sig_type, bytes(data))
        try:
            point = sig_type.point_type.from_bytes(key_bytes.data)
        except ValueError as exc:
            raise MalformedVerificationKeyError(str(exc)) from exc
        return cls(sig_type, point, key_bytes)

    @classmethod
    def from_scalar(cls, sig_type: SigType, scalar: int) -> VerificationKey:
        """The key for the secret scalar: the basepoint multiplied by it."""
        point = sig_type.basepoint() * scalar
        return cls(sig_type, point, VerificationKeyBytes(sig_type, point.to_bytes()))

    def randomize(self, randomizer: int) -> VerificationKey:
        """Add randomizer times the basepoint; spend authorization keys only."""
        _require_spend_auth(self.sig_type)
        point = self.point + self.sig_type.basepoint() * randomizer
        return VerificationKey(self.sig_type, point, VerificationKeyBytes(self.sig_type, point.to_bytes()))

    def __bytes__(self) -> bytes:
        return self.key_bytes.data


class SigningKey:
    """A RedDSA signing key together with its verification key."""

    __slots__ = ("sig_type", "scalar", "_verification_key")

    def __init__(self, sig_type: SigType, scalar: int) -> None:
        self.sig_type = sig_type
        self.scalar = scalar % sig_type.scalar_modulus
        self._verification_key = VerificationKey.from_scalar(sig_type, self.scalar)

    @classmethod
    def generate(
        cls, sig_type: SigType, rng: Optional[Callable[[int], bytes]] = None
    ) -> SigningKey:
        """Make a new key from 64 random bytes drawn from ``rng`` (default: os.urandom)."""
        random_bytes = (rng or os.urandom)(64)
        return cls(sig_type, sig_type.scalar_from_bytes_wide(random_bytes))

    @classmethod
    def from_bytes(cls, sig_type: SigType, data: bytes) -> SigningKey:
        """Decode a canonical 32-byte scalar, raising MalformedSigningKeyError otherwise."""
        data = bytes(data)
        if len(data) != 32:
            raise ValueError("a signing key encoding is 32 bytes long")
        try:
            scalar = sig_type.scalar_from_bytes(data)
        except ValueError as exc:
            raise MalformedSigningKeyError(str(exc)) from exc
        return cls(sig_type, scalar)

    def verification_key(self) -> VerificationKey:
        return self._verification_key

    def randomize(self, randomizer: int) -> SigningKey:
        """Add the randomizer to the secret scalar; spend authorization keys only."""
        _require_spend_auth(self.sig_type)
        return SigningKey(self.sig_type, self.scalar + randomizer)

    def __bytes__(self) -> bytes:
        return self.sig_type.scalar_to_bytes(self.scalar)

    def __repr__(self) -> str:
        return f"SigningKey(sig_type={self.sig_type.name!r}, pk={bytes(self._verification_key).hex()!r})"