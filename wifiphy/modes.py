"""Transmission modes: legacy rates and HT/VHT/HE modulation and coding schemes."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional

__all__ = [
    "ModulationClass",
    "CodeRate",
    "WifiMode",
    "dsss_modes",
    "erp_ofdm_modes",
    "ofdm_modes",
    "ofdm_modes_10mhz",
    "ofdm_modes_5mhz",
    "ht_mcs",
    "vht_mcs",
    "he_mcs",
    "mode_by_name",
]


class ModulationClass(enum.Enum):
    """Family of modulation a mode belongs to."""

    DSSS = "DSSS"
    HR_DSSS = "HR_DSSS"
    ERP_OFDM = "ERP_OFDM"
    OFDM = "OFDM"
    HT = "HT"
    VHT = "VHT"
    HE = "HE"

    @property
    def is_mcs(self) -> bool:
        """True for the classes whose modes are indexed by an MCS value."""
        return self in (ModulationClass.HT, ModulationClass.VHT, ModulationClass.HE)


class CodeRate(enum.Enum):
    """Forward error correction coding rate."""

    UNDEFINED = None
    RATE_1_2 = Fraction(1, 2)
    RATE_2_3 = Fraction(2, 3)
    RATE_3_4 = Fraction(3, 4)
    RATE_5_6 = Fraction(5, 6)

    @property
    def fraction(self) -> Fraction:
        """The coding rate as a fraction; uncoded modes count as 1."""
        return Fraction(1) if self.value is None else self.value


# Constellation size and coding rate for the per-stream MCS index.
_MCS_PARAMETERS: dict[int, tuple[int, CodeRate]] = {
    0: (2, CodeRate.RATE_1_2),
    1: (4, CodeRate.RATE_1_2),
    2: (4, CodeRate.RATE_3_4),
    3: (16, CodeRate.RATE_1_2),
    4: (16, CodeRate.RATE_3_4),
    5: (64, CodeRate.RATE_2_3),
    6: (64, CodeRate.RATE_3_4),
    7: (64, CodeRate.RATE_5_6),
    8: (256, CodeRate.RATE_3_4),
    9: (256, CodeRate.RATE_5_6),
    10: (1024, CodeRate.RATE_3_4),
    11: (1024, CodeRate.RATE_5_6),
}

_HT_VHT_DATA_SUBCARRIERS = {20: 52, 40: 108, 80: 234, 160: 468}
_HE_DATA_SUBCARRIERS = {20: 234, 40: 468, 80: 980, 160: 1960}
_OFDM_DATA_SUBCARRIERS = 48


@dataclass(frozen=True)
class WifiMode:
    """A single transmission mode (legacy rate or MCS)."""

    name: str
    modulation_class: ModulationClass
    mandatory: bool
    code_rate: CodeRate
    constellation_size: int
    mcs_value: Optional[int] = None

    def __str__(self) -> str:
        return self.name

    @property
    def bits_per_subcarrier(self) -> int:
        """Number of coded bits carried by one constellation point."""
        return int(math.log2(self.constellation_size))

    def data_rate(self, channel_width: int = 20, guard_interval: int = 800, nss: int = 1) -> int:
        """Return the data rate in bit/s.

        ``channel_width`` is in MHz and ``guard_interval`` in nanoseconds.
        HT modes take their number of spatial streams from the MCS index.
        """
        cls = self.modulation_class
        bits = self.bits_per_subcarrier
        if cls is ModulationClass.DSSS:
            rate = bits * 1_000_000
        elif cls is ModulationClass.HR_DSSS:
            rate = bits * 1_375_000
        elif cls in (ModulationClass.OFDM, ModulationClass.ERP_OFDM):
            symbol_ns = self._ofdm_symbol_ns(channel_width)
            rate = (
                Fraction(_OFDM_DATA_SUBCARRIERS * bits) * self.code_rate.fraction * 10**9 / symbol_ns
            )
        elif cls in (ModulationClass.HT, ModulationClass.VHT):
            if guard_interval not in (400, 800):
                raise ValueError(f"invalid guard interval {guard_interval} ns for {cls.value}")
            allowed = (20, 40) if cls is ModulationClass.HT else (20, 40, 80, 160)
            if channel_width not in allowed:
                raise ValueError(f"invalid channel width {channel_width} MHz for {cls.value}")
            streams = self.mcs_value // 8 + 1 if cls is ModulationClass.HT else nss
            self._check_nss(streams)
            rate = (
                Fraction(_HT_VHT_DATA_SUBCARRIERS[channel_width] * bits * streams)
                * self.code_rate.fraction
                * 10**9
                / (3200 + guard_interval)
            )
        else:
            if guard_interval not in (800, 1600, 3200):
                raise ValueError(f"invalid guard interval {guard_interval} ns for HE")
            if channel_width not in _HE_DATA_SUBCARRIERS:
                raise ValueError(f"invalid channel width {channel_width} MHz for HE")
            self._check_nss(nss)
            rate = (
                Fraction(_HE_DATA_SUBCARRIERS[channel_width] * bits * nss)
                * self.code_rate.fraction
                * 10**9
                / (12800 + guard_interval)
            )
        return round(rate)

    @staticmethod
    def _check_nss(nss: int) -> None:
        if not 1 <= nss <= 8:
            raise ValueError(f"invalid number of spatial streams {nss}")

    @staticmethod
    def _ofdm_symbol_ns(channel_width: int) -> int:
        if channel_width == 5:
            return 16000
        if channel_width == 10:
            return 8000
        if channel_width >= 20:
            return 4000
        raise ValueError(f"invalid channel width {channel_width} MHz for OFDM")


def _legacy(name: str, cls: ModulationClass, mandatory: bool, rate: CodeRate, size: int) -> WifiMode:
    return WifiMode(name, cls, mandatory, rate, size)


def _mcs(prefix: str, index: int, cls: ModulationClass) -> WifiMode:
    size, rate = _MCS_PARAMETERS[index % 8 if cls is ModulationClass.HT else index]
    return WifiMode(f"{prefix}{index}", cls, False, rate, size, index)


_U = CodeRate.UNDEFINED
_H = CodeRate.RATE_1_2
_T = CodeRate.RATE_2_3
_Q = CodeRate.RATE_3_4

_DSSS = (
    _legacy("DsssRate1Mbps", ModulationClass.DSSS, True, _U, 2),
    _legacy("DsssRate2Mbps", ModulationClass.DSSS, True, _U, 4),
    _legacy("DsssRate5_5Mbps", ModulationClass.HR_DSSS, True, _U, 16),
    _legacy("DsssRate11Mbps", ModulationClass.HR_DSSS, True, _U, 256),
)

_OFDM_LAYOUT = (
    (True, _H, 2),
    (False, _Q, 2),
    (True, _H, 4),
    (False, _Q, 4),
    (True, _H, 16),
    (False, _Q, 16),
    (False, _T, 64),
    (False, _Q, 64),
)


def _ofdm_family(cls: ModulationClass, names: tuple[str, ...], mandatory_limit: int) -> tuple[WifiMode, ...]:
    return tuple(
        _legacy(name, cls, mandatory and position < mandatory_limit, rate, size)
        for position, (name, (mandatory, rate, size)) in enumerate(zip(names, _OFDM_LAYOUT))
    )


_ERP_OFDM = _ofdm_family(
    ModulationClass.ERP_OFDM,
    tuple(f"ErpOfdmRate{r}Mbps" for r in ("6", "9", "12", "18", "24", "36", "48", "54")),
    8,
)
_OFDM = _ofdm_family(
    ModulationClass.OFDM,
    tuple(f"OfdmRate{r}Mbps" for r in ("6", "9", "12", "18", "24", "36", "48", "54")),
    8,
)
# In the 10 MHz and 5 MHz families the 16-QAM 1/2 mode is mandatory only at 10 MHz.
_OFDM_10MHZ = _ofdm_family(
    ModulationClass.OFDM,
    tuple(f"OfdmRate{r}MbpsBW10MHz" for r in ("3", "4_5", "6", "9", "12", "18", "24", "27")),
    8,
)
_OFDM_5MHZ = _ofdm_family(
    ModulationClass.OFDM,
    tuple(f"OfdmRate{r}MbpsBW5MHz" for r in ("1_5", "2_25", "3", "4_5", "6", "9", "12", "13_5")),
    4,
)

_HT = tuple(_mcs("HtMcs", i, ModulationClass.HT) for i in range(32))
_VHT = tuple(_mcs("VhtMcs", i, ModulationClass.VHT) for i in range(10))
_HE = tuple(_mcs("HeMcs", i, ModulationClass.HE) for i in range(12))

_BY_NAME: dict[str, WifiMode] = {
    mode.name: mode
    for family in (_DSSS, _ERP_OFDM, _OFDM, _OFDM_10MHZ, _OFDM_5MHZ, _HT, _VHT, _HE)
    for mode in family
}


def dsss_modes() -> tuple[WifiMode, ...]:
    """DSSS and HR/DSSS rates: 1, 2, 5.5 and 11 Mbps."""
    return _DSSS


def erp_ofdm_modes() -> tuple[WifiMode, ...]:
    """ERP-OFDM rates from 6 to 54 Mbps."""
    return _ERP_OFDM


def ofdm_modes() -> tuple[WifiMode, ...]:
    """OFDM rates from 6 to 54 Mbps for 20 MHz channels."""
    return _OFDM


def ofdm_modes_10mhz() -> tuple[WifiMode, ...]:
    """OFDM rates from 3 to 27 Mbps for 10 MHz channels."""
    return _OFDM_10MHZ


def ofdm_modes_5mhz() -> tuple[WifiMode, ...]:
    """OFDM rates from 1.5 to 13.5 Mbps for 5 MHz channels."""
    return _OFDM_5MHZ


def _pick(family: tuple[WifiMode, ...], index: int, label: str) -> WifiMode:
    if not 0 <= index < len(family):
        raise ValueError(f"{label} MCS index must be in 0..{len(family) - 1}, got {index}")
    return family[index]


def ht_mcs(index: int) -> WifiMode:
    """Return HT MCS ``index`` (0..31)."""
    return _pick(_HT, index, "HT")


def vht_mcs(index: int) -> WifiMode:
    """Return VHT MCS ``index`` (0..9)."""
    return _pick(_VHT, index, "VHT")


def he_mcs(index: int) -> WifiMode:
    """Return HE MCS ``index`` (0..11)."""
    return _pick(_HE, index, "HE")


def mode_by_name(name: str) -> WifiMode:
    """Look up a mode by its unique name; raises KeyError if unknown."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"unknown Wi-Fi mode {name!r}") from None