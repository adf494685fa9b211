# wifiphy

A timing model of the IEEE 802.11 physical layer. It covers the DSSS,
HR/DSSS, OFDM (20, 10 and 5 MHz), ERP-OFDM, HT, VHT and HE transmission
modes and their data rates. It also gives PLCP preamble and header timing
and the airtime of payloads and whole frames, A-MPDU subframes included.

All durations are whole nanoseconds. Frequencies and channel widths are in
MHz, and guard intervals are in nanoseconds.

## Installation

```
pip install .
```

## Modules

- `wifiphy.units` has these helpers:
  - `dbm_to_w` and `w_to_dbm` convert between dBm and watts.
  - `db_to_ratio` and `ratio_to_db` convert between dB and linear ratios.
  - `is_2_4ghz` and `is_5ghz` tell which band a centre frequency lies in.
  - `w_to_dbm` and `ratio_to_db` raise `ValueError` for values that are not
    positive.
- `wifiphy.modes` has the enums `ModulationClass` and `CodeRate` and the
  frozen dataclass `WifiMode`.
  - `WifiMode.data_rate(channel_width=20, guard_interval=800, nss=1)` returns
    the rate in bit/s and raises `ValueError` for invalid widths, guard
    intervals or stream counts. HT modes take their stream count from the
    MCS index.
  - The mode families come from `dsss_modes()`, `erp_ofdm_modes()`,
    `ofdm_modes()`, `ofdm_modes_10mhz()` and `ofdm_modes_5mhz()`.
  - Single MCS entries come from `ht_mcs(0..31)`, `vht_mcs(0..9)` and
    `he_mcs(0..11)`.
  - `mode_by_name(name)` looks a mode up by name, for example
    `"OfdmRate6Mbps"` or `"HtMcs7"`, and raises `KeyError` if the name is
    unknown.
- `wifiphy.preamble` has the enum `Preamble` and the dataclass `TxVector`.
  `TxVector` holds the mode, preamble, channel width, guard interval, spatial
  and extension streams, STBC, aggregation, power level and BSS colour.
  The module has a duration function for each field:
  - `preamble_detection_duration`
  - `plcp_preamble_duration`
  - `plcp_header_duration`
  - `ht_sig_duration`
  - `sig_a1_duration`
  - `sig_a2_duration`
  - `sig_b_duration`
  - `training_symbol_duration`
  - `preamble_and_header_duration`, which is the sum of all the above.

  `plcp_header_mode` returns the mode that carries the legacy PHY header.
- `wifiphy.payload` has the enum `MpduType` (NORMAL, SINGLE, FIRST, MIDDLE,
  LAST) and the dataclass `AmpduTracker`.
  - `payload_duration(size, tx_vector, frequency, mpdu_type, tracker)` returns
    the data-field airtime.
  - `tx_duration(...)` adds the preamble and headers to that.
  - When you time an A-MPDU subframe by subframe, pass one `AmpduTracker` to
    every call. It keeps the running totals and resets itself after the
    `LAST` subframe.
  - The 6 µs signal extension is added for ERP-OFDM, and for HT and HE in the
    2.4 GHz band.

## Example

```python
from wifiphy.modes import ht_mcs, ofdm_modes
from wifiphy.payload import AmpduTracker, MpduType, payload_duration, tx_duration
from wifiphy.preamble import Preamble, TxVector

mode = ofdm_modes()[0]                      # OfdmRate6Mbps
print(mode.data_rate(20))                   # 6000000
vector = TxVector(mode=mode, preamble=Preamble.LONG, channel_width=20)
print(tx_duration(1000, vector, 5180))      # 1360000 (ns)

ht = TxVector(mode=ht_mcs(7), preamble=Preamble.HT_MF, channel_width=20)
tracker = AmpduTracker()
sizes = [1500, 1500, 1500]
kinds = [MpduType.FIRST, MpduType.MIDDLE, MpduType.LAST]
total = sum(payload_duration(s, ht, 5180, k, tracker) for s, k in zip(sizes, kinds))
```

## What this package does not do

This package computes rates and airtimes only. It has no channel-number table
that maps channel numbers to frequencies and widths. It has no PHY device
object with state (idle, transmit, receive, sleep, off), transmit power levels
or reception handling. It does not simulate transmission or reception events.

## Running the tests

```
pip install .[test]
pytest
```