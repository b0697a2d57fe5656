"""RedDSA signatures."""

from __future__ import annotations

from dataclasses import dataclass

from .sigtypes import SigType


@dataclass(frozen=True)
class Signature:
    """A RedDSA signature: the encoded commitment R followed by the response s."""

    sig_type: SigType
    r_bytes: bytes
    s_bytes: bytes

    def __post_init__(self) -> None:
        r_bytes, s_bytes = bytes(self.r_bytes), bytes(self.s_bytes)
        if len(r_bytes) != 32 or len(s_bytes) != 32:
            raise ValueError("signature halves are 32 bytes each")
        object.__setattr__(self, "r_bytes", r_bytes)
        object.__setattr__(self, "s_bytes", s_bytes)

    @classmethod
    def from_bytes(cls, sig_type: SigType, data: bytes) -> Signature:
        """Split a 64-byte signature into its R and s halves."""
        data = bytes(data)
        if len(data) != 64:
            raise ValueError("a signature is 64 bytes long")
        return cls(sig_type, data[:32], data[32:])

    def __bytes__(self) -> bytes:
        return self.r_bytes + self.s_bytes

    def __repr__(self) -> str:
        return f"Signature(r_bytes={self.r_bytes.hex()!r}, s_bytes={self.s_bytes.hex()!r})"