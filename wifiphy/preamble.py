"""PHY preamble and header timing for every supported preamble format.

All durations are returned as whole nanoseconds.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from .modes import ModulationClass, WifiMode, mode_by_name

__all__ = [
    "Preamble",
    "TxVector",
    "preamble_detection_duration",
    "training_symbol_duration",
    "ht_sig_duration",
    "sig_a1_duration",
    "sig_a2_duration",
    "sig_b_duration",
    "plcp_header_mode",
    "plcp_header_duration",
    "plcp_preamble_duration",
    "preamble_and_header_duration",
]

_US = 1000


class Preamble(enum.Enum):
    """PHY preamble formats."""

    LONG = "long"
    SHORT = "short"
    HT_MF = "HT-MF"
    HT_GF = "HT-GF"
    VHT_SU = "VHT-SU"
    VHT_MU = "VHT-MU"
    HE_SU = "HE-SU"
    HE_MU = "HE-MU"


_SIG_A_PREAMBLES = frozenset({Preamble.VHT_SU, Preamble.VHT_MU, Preamble.HE_SU, Preamble.HE_MU})
_SIG_B_PREAMBLES = frozenset({Preamble.VHT_MU, Preamble.HE_MU})
_HT_PREAMBLES = frozenset({Preamble.HT_MF, Preamble.HT_GF})


@dataclass
class TxVector:
    """Parameters describing how a frame is transmitted.

    ``channel_width`` is in MHz and ``guard_interval`` in nanoseconds.
    ``mode`` stays None until the transmission mode is known.
    """

    mode: Optional[WifiMode] = None
    preamble: Preamble = Preamble.LONG
    channel_width: int = 20
    guard_interval: int = 800
    nss: int = 1
    ness: int = 0
    stbc: bool = False
    aggregation: bool = False
    tx_power_level: int = 0
    bss_color: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.nss <= 8:
            raise ValueError(f"number of spatial streams must be in 1..8, got {self.nss}")
        if self.ness < 0:
            raise ValueError(f"number of extension streams must not be negative, got {self.ness}")

    @property
    def mode_initialized(self) -> bool:
        """True once a transmission mode has been set."""
        return self.mode is not None

    @property
    def modulation_class(self) -> ModulationClass:
        """Modulation class of the transmission mode."""
        return self.require_mode().modulation_class

    def require_mode(self) -> WifiMode:
        """Return the mode, raising ValueError if none has been set."""
        if self.mode is None:
            raise ValueError("transmission mode has not been set")
        return self.mode

    def data_rate(self) -> int:
        """Data rate in bit/s of the mode with this vector's width, GI and streams."""
        return self.require_mode().data_rate(self.channel_width, self.guard_interval, self.nss)


def preamble_detection_duration() -> int:
    """Time needed to detect a preamble."""
    return 4 * _US


def training_symbol_duration(tx_vector: TxVector) -> int:
    """Duration of the HT/VHT/HE training fields (STBC assumed off)."""
    nss = tx_vector.nss
    if nss < 3:
        n_dltf = nss
    elif nss < 5:
        n_dltf = 4
    elif nss < 7:
        n_dltf = 6
    else:
        n_dltf = 8
    n_eltf = tx_vector.ness if tx_vector.ness < 3 else 4

    preamble = tx_vector.preamble
    if preamble is Preamble.HT_MF:
        return (4 + 4 * n_dltf + 4 * n_eltf) * _US
    if preamble is Preamble.HT_GF:
        return (4 * n_dltf + 4 * n_eltf) * _US
    if preamble in (Preamble.VHT_SU, Preamble.VHT_MU):
        return (4 + 4 * n_dltf) * _US
    if preamble in (Preamble.HE_SU, Preamble.HE_MU):
        return (4 + 8 * n_dltf) * _US
    return 0


def ht_sig_duration(preamble: Preamble) -> int:
    """Duration of the HT-SIG field; zero for non-HT preambles."""
    return 8 * _US if preamble in _HT_PREAMBLES else 0


def sig_a1_duration(preamble: Preamble) -> int:
    """Duration of the VHT/HE SIG-A1 field."""
    return 4 * _US if preamble in _SIG_A_PREAMBLES else 0


def sig_a2_duration(preamble: Preamble) -> int:
    """Duration of the VHT/HE SIG-A2 field."""
    return 4 * _US if preamble in _SIG_A_PREAMBLES else 0


def sig_b_duration(preamble: Preamble) -> int:
    """Duration of the SIG-B field, present only in multi-user preambles."""
    return 4 * _US if preamble in _SIG_B_PREAMBLES else 0


def plcp_header_mode(tx_vector: TxVector) -> WifiMode:
    """Mode used to transmit the (legacy part of the) PHY header."""
    mode = tx_vector.require_mode()
    cls = mode.modulation_class
    if cls in (ModulationClass.OFDM, ModulationClass.HT, ModulationClass.VHT, ModulationClass.HE):
        if tx_vector.channel_width == 5:
            return mode_by_name("OfdmRate1_5MbpsBW5MHz")
        if tx_vector.channel_width == 10:
            return mode_by_name("OfdmRate3MbpsBW10MHz")
        return mode_by_name("OfdmRate6Mbps")
    if cls is ModulationClass.ERP_OFDM:
        return mode_by_name("ErpOfdmRate6Mbps")
    dsss_1mbps = mode_by_name("DsssRate1Mbps")
    if tx_vector.preamble is Preamble.LONG or mode == dsss_1mbps:
        return dsss_1mbps
    return mode_by_name("DsssRate2Mbps")


def _is_short_dsss(tx_vector: TxVector, mode: WifiMode) -> bool:
    return tx_vector.preamble is Preamble.SHORT and mode.data_rate(22) > 1_000_000


def plcp_header_duration(tx_vector: TxVector) -> int:
    """Duration of the legacy PHY header (SIGNAL/L-SIG or DSSS PLCP header)."""
    mode = tx_vector.require_mode()
    cls = mode.modulation_class
    if cls is ModulationClass.OFDM:
        if tx_vector.channel_width == 10:
            return 8 * _US
        if tx_vector.channel_width == 5:
            return 16 * _US
        return 4 * _US
    if cls is ModulationClass.HT:
        return 0 if tx_vector.preamble is Preamble.HT_GF else 4 * _US
    if cls in (ModulationClass.ERP_OFDM, ModulationClass.VHT):
        return 4 * _US
    if cls is ModulationClass.HE:
        return 8 * _US
    return 24 * _US if _is_short_dsss(tx_vector, mode) else 48 * _US


def plcp_preamble_duration(tx_vector: TxVector) -> int:
    """Duration of the legacy training preamble (L-STF + L-LTF or DSSS SYNC/SFD)."""
    mode = tx_vector.require_mode()
    cls = mode.modulation_class
    if cls is ModulationClass.OFDM:
        if tx_vector.channel_width == 10:
            return 32 * _US
        if tx_vector.channel_width == 5:
            return 64 * _US
        return 16 * _US
    if cls in (ModulationClass.HT, ModulationClass.VHT, ModulationClass.HE, ModulationClass.ERP_OFDM):
        return 16 * _US
    return 72 * _US if _is_short_dsss(tx_vector, mode) else 144 * _US


def preamble_and_header_duration(tx_vector: TxVector) -> int:
    """Total duration of preamble, all signal fields and training fields."""
    preamble = tx_vector.preamble
    return (
        plcp_preamble_duration(tx_vector)
        + plcp_header_duration(tx_vector)
        + ht_sig_duration(preamble)
        + sig_a1_duration(preamble)
        + sig_a2_duration(preamble)
        + training_symbol_duration(tx_vector)
        + sig_b_duration(preamble)
    )