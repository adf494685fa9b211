"""IEEE 802.11 PHY timing model: transmission modes, data rates and frame airtime."""

__version__ = "0.1.0"
__all__ = ["modes", "payload", "preamble", "units"]