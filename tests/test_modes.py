import pytest

from wifiphy.modes import (
    CodeRate,
    ModulationClass,
    dsss_modes,
    erp_ofdm_modes,
    he_mcs,
    ht_mcs,
    mode_by_name,
    ofdm_modes,
    ofdm_modes_10mhz,
    ofdm_modes_5mhz,
    vht_mcs,
)


def _rate_from_name(name, prefix):
    """Read the nominal rate written into a mode's name, in bit/s."""
    text = name[len(prefix):name.index("Mbps")]
    return round(float(text.replace("_", ".")) * 1_000_000)


def test_dsss_rates_match_names():
    for mode in dsss_modes():
        assert mode.data_rate(22) == _rate_from_name(mode.name, "DsssRate")


def test_dsss_classes():
    classes = [m.modulation_class for m in dsss_modes()]
    assert classes == [
        ModulationClass.DSSS,
        ModulationClass.DSSS,
        ModulationClass.HR_DSSS,
        ModulationClass.HR_DSSS,
    ]


@pytest.mark.parametrize(
    "family, prefix, width",
    [
        (ofdm_modes, "OfdmRate", 20),
        (erp_ofdm_modes, "ErpOfdmRate", 20),
        (ofdm_modes_10mhz, "OfdmRate", 10),
        (ofdm_modes_5mhz, "OfdmRate", 5),
    ],
)
def test_ofdm_rates_match_names(family, prefix, width):
    modes = family()
    assert len(modes) == 8
    for mode in modes:
        assert mode.data_rate(width) == _rate_from_name(mode.name, prefix)


def test_ofdm_width_scaling():
    mode = mode_by_name("OfdmRate6Mbps")
    assert mode.data_rate(10) * 2 == mode.data_rate(20)
    assert mode.data_rate(5) * 4 == mode.data_rate(20)


def test_ofdm_invalid_width():
    with pytest.raises(ValueError):
        mode_by_name("OfdmRate6Mbps").data_rate(2)


def test_mandatory_flags_and_code_rates():
    six, nine = ofdm_modes()[0], ofdm_modes()[1]
    assert six.mandatory and not nine.mandatory
    assert six.code_rate is CodeRate.RATE_1_2
    assert nine.code_rate is CodeRate.RATE_3_4
    assert mode_by_name("OfdmRate48Mbps").code_rate is CodeRate.RATE_2_3


def test_mcs_indices_and_names():
    assert ht_mcs(21).name == "HtMcs21"
    assert ht_mcs(21).mcs_value == 21
    assert vht_mcs(9).modulation_class is ModulationClass.VHT
    assert he_mcs(11).name == "HeMcs11"


@pytest.mark.parametrize("factory, bad", [(ht_mcs, 32), (vht_mcs, 10), (he_mcs, 12), (ht_mcs, -1)])
def test_mcs_out_of_range(factory, bad):
    with pytest.raises(ValueError):
        factory(bad)


def test_ht_streams_from_index():
    assert ht_mcs(15).data_rate(20, 800) == 2 * ht_mcs(7).data_rate(20, 800)
    assert ht_mcs(8).constellation_size == ht_mcs(0).constellation_size


def test_ht_rejects_wide_channel_and_bad_gi():
    with pytest.raises(ValueError):
        ht_mcs(0).data_rate(80, 800)
    with pytest.raises(ValueError):
        ht_mcs(0).data_rate(20, 1600)


def test_short_guard_interval_faster():
    assert vht_mcs(5).data_rate(40, 400) > vht_mcs(5).data_rate(40, 800)
    assert he_mcs(5).data_rate(20, 800) > he_mcs(5).data_rate(20, 3200)


def test_vht_nss_scales():
    assert vht_mcs(4).data_rate(80, 800, 3) == pytest.approx(3 * vht_mcs(4).data_rate(80, 800, 1), abs=3)


def test_he_rates_increase_with_mcs():
    rates = [he_mcs(i).data_rate(80, 800) for i in range(12)]
    assert rates == sorted(rates)
    assert len(set(rates)) == 12


def test_wider_channel_faster():
    assert vht_mcs(3).data_rate(160) > vht_mcs(3).data_rate(80) > vht_mcs(3).data_rate(40)


def test_he_bad_parameters():
    with pytest.raises(ValueError):
        he_mcs(0).data_rate(20, 400)
    with pytest.raises(ValueError):
        he_mcs(0).data_rate(20, 800, 9)


def test_mode_by_name_roundtrip():
    for mode in (*dsss_modes(), *ofdm_modes_5mhz(), ht_mcs(3), vht_mcs(8), he_mcs(10)):
        assert mode_by_name(mode.name) is mode
        assert str(mode) == mode.name


def test_mode_by_name_unknown():
    with pytest.raises(KeyError):
        mode_by_name("NoSuchRate")


def test_distinct_modes_not_equal():
    assert ht_mcs(0) != vht_mcs(0)
    assert mode_by_name("OfdmRate6Mbps") != mode_by_name("ErpOfdmRate6Mbps")