import pytest

from meshview.battery import BatteryLevel, BatteryStatus


@pytest.fixture
def level():
    return BatteryLevel(charging_voltage=4.18)


def test_zero_voltage_means_plugged(level):
    assert level.calc_status(0, 0.0) is BatteryStatus.PLUGGED
    assert level.calc_status(100, 0.0) is BatteryStatus.PLUGGED


def test_charging_above_charging_voltage(level):
    assert level.calc_status(100, 4.5) is BatteryStatus.CHARGING


def test_full_needs_percentage_and_voltage(level):
    assert level.calc_status(80, 4.05) is BatteryStatus.FULL
    assert level.calc_status(100, 4.05) is BatteryStatus.FULL


def test_mid_and_low(level):
    assert level.calc_status(35, 3.6) is BatteryStatus.MID
    assert level.calc_status(10, 3.4) is BatteryStatus.LOW


def test_voltage_at_threshold_falls_through(level):
    # strictly greater is required for each level
    assert level.calc_status(80, 4.00) is BatteryStatus.MID


def test_empty_and_warn(level):
    assert level.calc_status(5, 3.2) is BatteryStatus.EMPTY
    assert level.calc_status(0, 3.2) is BatteryStatus.WARN


def test_high_percentage_low_voltage_is_empty(level):
    assert level.calc_status(90, 3.0) is BatteryStatus.EMPTY


def test_charging_voltage_is_configurable():
    custom = BatteryLevel(charging_voltage=5.0)
    assert custom.calc_status(100, 4.5) is BatteryStatus.FULL
    assert custom.calc_status(100, 5.1) is BatteryStatus.CHARGING


@pytest.mark.parametrize("voltage", [3.0, 3.35, 3.55, 4.05, 4.5])
def test_status_never_improves_when_percentage_drops(level, voltage):
    statuses = [level.calc_status(p, voltage) for p in (100, 80, 35, 10, 1, 0)]
    assert statuses == sorted(statuses)