import pytest

from wifiphy.units import (
    db_to_ratio,
    dbm_to_w,
    is_2_4ghz,
    is_5ghz,
    ratio_to_db,
    w_to_dbm,
)


def test_zero_db_is_unit_ratio():
    assert db_to_ratio(0) == pytest.approx(1.0)
    assert ratio_to_db(1.0) == pytest.approx(0.0)


def test_ten_db_is_factor_ten():
    assert db_to_ratio(10) == pytest.approx(10.0)


def test_thirty_dbm_is_one_watt():
    assert dbm_to_w(30) == pytest.approx(1.0)
    assert w_to_dbm(1.0) == pytest.approx(30.0)


@pytest.mark.parametrize("dbm", [-101.0, -62.0, 0.0, 16.0206, 20.0])
def test_dbm_round_trip(dbm):
    assert w_to_dbm(dbm_to_w(dbm)) == pytest.approx(dbm)


@pytest.mark.parametrize("db", [-20.0, -3.0, 0.0, 7.0, 25.5])
def test_db_round_trip(db):
    assert ratio_to_db(db_to_ratio(db)) == pytest.approx(db)


def test_dbm_to_w_is_monotonic():
    values = [dbm_to_w(x) for x in (-101.0, -62.0, 0.0, 16.0206)]
    assert values == sorted(values)
    assert all(v > 0 for v in values)


def test_adding_db_multiplies_ratio():
    assert db_to_ratio(7.0 + 3.0) == pytest.approx(db_to_ratio(7.0) * db_to_ratio(3.0))


@pytest.mark.parametrize("bad", [0.0, -1.0])
def test_w_to_dbm_rejects_non_positive(bad):
    with pytest.raises(ValueError):
        w_to_dbm(bad)


@pytest.mark.parametrize("bad", [0.0, -0.5])
def test_ratio_to_db_rejects_non_positive(bad):
    with pytest.raises(ValueError):
        ratio_to_db(bad)


@pytest.mark.parametrize("freq", [2412, 2437, 2472, 2484])
def test_2_4ghz_channels(freq):
    assert is_2_4ghz(freq) is True
    assert is_5ghz(freq) is False


@pytest.mark.parametrize("freq", [5180, 5210, 5570, 5860, 5920])
def test_5ghz_channels(freq):
    assert is_5ghz(freq) is True
    assert is_2_4ghz(freq) is False


def test_band_edges():
    assert is_2_4ghz(2400) is True
    assert is_2_4ghz(2500) is True
    assert is_2_4ghz(2399) is False
    assert is_5ghz(5000) is True
    assert is_5ghz(6000) is True
    assert is_5ghz(6001) is False


def test_zero_frequency_is_in_no_band():
    assert is_2_4ghz(0) is False
    assert is_5ghz(0) is False