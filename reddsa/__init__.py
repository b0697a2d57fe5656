"""RedDSA keys, signature encoding and Jubjub/Pallas group arithmetic."""

__version__ = "0.1.0"
__all__ = ["jubjub", "pallas", "scalar_mul", "sigtypes", "signature", "keys"]