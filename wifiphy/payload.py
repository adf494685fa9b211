"""Payload (data field) timing, including A-MPDU aggregation bookkeeping.

All durations are whole nanoseconds, like those of :mod:`wifiphy.preamble`.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Optional

from .modes import ModulationClass, ht_mcs
from .preamble import TxVector, preamble_and_header_duration
from .units import is_2_4ghz

__all__ = [
    "MpduType",
    "AmpduTracker",
    "payload_duration",
    "tx_duration",
]

_US = 1000
_FS_PER_NS = 1_000_000
_SIGNAL_EXTENSION = 6 * _US


class MpduType(enum.Enum):
    """Position of an MPDU inside a (possibly aggregated) PSDU."""

    NORMAL = "normal"
    SINGLE = "single"
    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"

    @property
    def closes_psdu(self) -> bool:
        """True when this MPDU carries the end of the PSDU (tail and padding)."""
        return self in (MpduType.NORMAL, MpduType.SINGLE, MpduType.LAST)


@dataclass
class AmpduTracker:
    """Running totals of the A-MPDU currently being timed, subframe by subframe."""

    total_size: int = 0
    total_num_symbols: float = 0.0

    def reset(self) -> None:
        """Forget the aggregate in progress."""
        self.total_size = 0
        self.total_num_symbols = 0.0


_HT_TWO_ENCODERS = frozenset(ht_mcs(i) for i in (21, 22, 23, 28, 29, 30, 31))

# (channel width, spatial streams or None for any, minimum MCS, encoders).
# Rules are applied in order and the last one that matches wins.
_VHT_ENCODER_RULES: tuple[tuple[int, Optional[int], int, int], ...] = (
    (40, 3, 8, 2),
    (80, 2, 7, 2),
    (80, 3, 7, 2),
    (80, 3, 9, 3),
    (80, 4, 4, 2),
    (80, 4, 7, 3),
    (160, None, 7, 2),
    (160, 2, 4, 2),
    (160, 2, 7, 3),
    (160, 3, 3, 2),
    (160, 3, 5, 3),
    (160, 3, 7, 4),
    (160, 4, 2, 2),
    (160, 4, 4, 3),
    (160, 4, 5, 4),
    (160, 4, 7, 6),
)


def _number_of_encoders(tx_vector: TxVector) -> int:
    mode = tx_vector.require_mode()
    encoders = 2 if mode in _HT_TWO_ENCODERS else 1
    if mode.modulation_class is ModulationClass.VHT:
        for width, nss, min_mcs, value in _VHT_ENCODER_RULES:
            if (
                tx_vector.channel_width == width
                and (nss is None or tx_vector.nss == nss)
                and mode.mcs_value >= min_mcs
            ):
                encoders = value
    return encoders


def _symbol_duration(tx_vector: TxVector) -> int:
    cls = tx_vector.modulation_class
    gi = tx_vector.guard_interval
    if cls in (ModulationClass.OFDM, ModulationClass.ERP_OFDM):
        if tx_vector.channel_width == 10:
            return 8 * _US
        if tx_vector.channel_width == 5:
            return 16 * _US
        return 4 * _US
    if cls in (ModulationClass.HT, ModulationClass.VHT):
        if gi not in (400, 800):
            raise ValueError(f"invalid guard interval {gi} ns for {cls.value}")
        return 3200 + gi
    if cls is ModulationClass.HE:
        if gi not in (800, 1600, 3200):
            raise ValueError(f"invalid guard interval {gi} ns for HE")
        return 12800 + gi
    raise ValueError(f"no OFDM symbol duration for {cls.value}")


def payload_duration(
    size: int,
    tx_vector: TxVector,
    frequency: int,
    mpdu_type: MpduType = MpduType.NORMAL,
    tracker: Optional[AmpduTracker] = None,
) -> int:
    """Return the duration of the data field carrying ``size`` bytes.

    ``frequency`` is the operating centre frequency in MHz. For aggregated
    MPDUs, ``tracker`` accumulates the size and symbols of the subframes
    timed so far and is reset after the last one; without a tracker the
    aggregate is treated as empty and nothing is recorded.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    mode = tx_vector.require_mode()
    cls = mode.modulation_class

    if cls in (ModulationClass.DSSS, ModulationClass.HR_DSSS):
        micros = math.ceil(size * 8.0 / (mode.data_rate(22) / 1.0e6))
        return micros * _US

    stbc = 2.0 if tx_vector.stbc and cls in (ModulationClass.HT, ModulationClass.VHT) else 1.0
    encoders = _number_of_encoders(tx_vector)
    symbol_ns = _symbol_duration(tx_vector)
    bits_per_symbol = tx_vector.data_rate() * symbol_ns / 1e9

    if mpdu_type is MpduType.FIRST:
        num_symbols = stbc * (16 + size * 8.0 + 6 * encoders) / (stbc * bits_per_symbol)
        if tracker is not None:
            tracker.total_size += size
            tracker.total_num_symbols += num_symbols
    elif mpdu_type is MpduType.MIDDLE:
        num_symbols = stbc * size * 8.0 / (stbc * bits_per_symbol)
        if tracker is not None:
            tracker.total_size += size
            tracker.total_num_symbols += num_symbols
    elif mpdu_type is MpduType.LAST:
        previous_size = tracker.total_size if tracker is not None else 0
        previous_symbols = tracker.total_num_symbols if tracker is not None else 0.0
        total_size = previous_size + size
        num_symbols = float(
            round(stbc * math.ceil((16 + total_size * 8.0 + 6 * encoders) / (stbc * bits_per_symbol)))
        )
        if previous_symbols > num_symbols:
            raise ValueError("aggregate already uses more symbols than the whole A-MPDU")
        num_symbols -= previous_symbols
        if tracker is not None:
            tracker.reset()
    else:
        num_symbols = float(
            round(stbc * math.ceil((16 + size * 8.0 + 6.0 * encoders) / (stbc * bits_per_symbol)))
        )

    femtos = int(num_symbols * symbol_ns * _FS_PER_NS)
    duration = femtos // _FS_PER_NS

    if cls is ModulationClass.ERP_OFDM:
        return duration + _SIGNAL_EXTENSION
    if cls in (ModulationClass.HT, ModulationClass.HE) and is_2_4ghz(frequency) and mpdu_type.closes_psdu:
        return duration + _SIGNAL_EXTENSION
    return duration


def tx_duration(
    size: int,
    tx_vector: TxVector,
    frequency: int,
    mpdu_type: MpduType = MpduType.NORMAL,
    tracker: Optional[AmpduTracker] = None,
) -> int:
    """Return the full on-air duration: preamble, headers and payload."""
    return preamble_and_header_duration(tx_vector) + payload_duration(
        size, tx_vector, frequency, mpdu_type, tracker
    )