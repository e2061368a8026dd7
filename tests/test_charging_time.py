"""Tests for engine/charging_time.py — curve integration and charger lookups."""

from __future__ import annotations

import numpy as np
import pytest
from pydantic import ValidationError

from calckit.catalog import ChargerModel, PhoneModel, get_charger, load_chargers
from calckit.config import ChargingInputs
from calckit.engine.charging_time import (
    charging_milestones,
    charging_minutes,
    compare_chargers,
    compatible_chargers,
    effective_watts,
    energy_added_wh,
    estimate_charging,
    speed_multiplier,
    speed_multipliers,
)


def _reference_minutes(phone: PhoneModel, watts: float, start: int, end: int) -> float:
    """Plain-loop 1 % Riemann sum used as the expected value."""
    total = 0.0
    for p in range(start, end):
        mah = phone.battery_mah / 100
        total += mah * 3.7 / (watts * speed_multiplier(p) * 1000) * 60
    return total


# ═══════════════════════════════════════════════════════════════════════════
# Curve
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("pct, multiplier", [
    (0, 0.70), (9.99, 0.70),
    (10, 1.00), (49, 1.00),
    (50, 0.60), (79, 0.60),
    (80, 0.30), (89, 0.30),
    (90, 0.15), (94, 0.15),
    (95, 0.05), (99, 0.05), (100, 0.05),
    (-1, 0.50), (100.5, 0.50),
])
def test_speed_multiplier_bands(pct, multiplier):
    assert speed_multiplier(pct) == multiplier


def test_vectorized_multipliers_match_scalar():
    levels = np.array([-5.0, 0.0, 9.5, 10.0, 50.0, 80.0, 90.0, 95.0, 100.0, 120.0])
    expected = [speed_multiplier(p) for p in levels]
    assert speed_multipliers(levels).tolist() == pytest.approx(expected)


# ═══════════════════════════════════════════════════════════════════════════
# Effective power
# ═══════════════════════════════════════════════════════════════════════════

def test_effective_watts_after_losses(iphone_15_pro: PhoneModel, usb_c_20w: ChargerModel):
    # 20 W × 0.95
    assert effective_watts(iphone_15_pro, usb_c_20w) == pytest.approx(19.0)


def test_effective_watts_capped_by_phone(iphone_13: PhoneModel):
    # 96 W × 0.95 far exceeds the 23 W the phone accepts
    assert effective_watts(iphone_13, get_charger("96W USB-C Power Adapter")) == 23.0


def test_wireless_efficiency(iphone_15_pro: PhoneModel):
    # 15 W × 0.85
    assert effective_watts(iphone_15_pro, get_charger("15W MagSafe Charger")) == pytest.approx(12.75)


# ═══════════════════════════════════════════════════════════════════════════
# Integration
# ═══════════════════════════════════════════════════════════════════════════

def test_twenty_to_eighty(iphone_15_pro: PhoneModel, usb_c_20w: ChargerModel):
    minutes = charging_minutes(iphone_15_pro, usb_c_20w, 20, 80)
    assert minutes == pytest.approx(_reference_minutes(iphone_15_pro, 19.0, 20, 80))


def test_full_charge(iphone_13: PhoneModel, usb_c_20w: ChargerModel):
    minutes = charging_minutes(iphone_13, usb_c_20w, 0, 100)
    assert minutes == pytest.approx(_reference_minutes(iphone_13, 19.0, 0, 100))


def test_faster_charger_is_quicker(iphone_15_pro: PhoneModel, usb_c_20w: ChargerModel):
    slow = charging_minutes(iphone_15_pro, get_charger("5W USB-A (In-box Legacy)"), 20, 80)
    fast = charging_minutes(iphone_15_pro, usb_c_20w, 20, 80)
    assert slow == pytest.approx(fast * 19.0 / 4.75)


def test_step_size_changes_result(iphone_15_pro: PhoneModel, usb_c_20w: ChargerModel):
    fine = charging_minutes(iphone_15_pro, usb_c_20w, 5, 95)
    coarse = charging_minutes(iphone_15_pro, usb_c_20w, 5, 95, step_pct=10.0)
    assert fine != pytest.approx(coarse)


def test_trickle_dominates_top_of_charge(iphone_15_pro: PhoneModel, usb_c_20w: ChargerModel):
    bulk = charging_minutes(iphone_15_pro, usb_c_20w, 10, 50)
    tail = charging_minutes(iphone_15_pro, usb_c_20w, 95, 100)
    assert tail > bulk


@pytest.mark.parametrize("start, end", [
    (80, 20), (50, 50), (-10, 50), (20, 120), (None, 80), (20, None),
])
def test_invalid_window_is_zero(iphone_15_pro, usb_c_20w, start, end):
    assert charging_minutes(iphone_15_pro, usb_c_20w, start, end) == 0.0
    assert charging_milestones(iphone_15_pro, usb_c_20w, start, end) == []


# ═══════════════════════════════════════════════════════════════════════════
# Milestones
# ═══════════════════════════════════════════════════════════════════════════

class TestMilestones:

    def test_bands(self, iphone_15_pro, usb_c_20w):
        milestones = charging_milestones(iphone_15_pro, usb_c_20w, 20, 80)
        assert [m.percentage for m in milestones] == [20, 30, 40, 50, 60, 70]
        assert [m.multiplier for m in milestones] == [1.0, 1.0, 1.0, 0.6, 0.6, 0.6]

    def test_cumulative_ends_at_total(self, iphone_15_pro, usb_c_20w):
        milestones = charging_milestones(iphone_15_pro, usb_c_20w, 20, 80)
        times = [m.cumulative_minutes for m in milestones]
        assert times == sorted(times)
        assert times[-1] == pytest.approx(charging_minutes(iphone_15_pro, usb_c_20w, 20, 80))

    def test_partial_last_band(self, iphone_15_pro, usb_c_20w):
        milestones = charging_milestones(iphone_15_pro, usb_c_20w, 0, 25)
        assert [m.percentage for m in milestones] == [0, 10, 20]
        assert milestones[-1].cumulative_minutes == pytest.approx(
            charging_minutes(iphone_15_pro, usb_c_20w, 0, 25)
        )
        assert milestones[0].cumulative_minutes == pytest.approx(
            charging_minutes(iphone_15_pro, usb_c_20w, 0, 10)
        )

    def test_speed_watts(self, iphone_15_pro, usb_c_20w):
        first = charging_milestones(iphone_15_pro, usb_c_20w, 0, 10)[0]
        assert first.speed_watts == pytest.approx(19.0 * 0.7)


# ═══════════════════════════════════════════════════════════════════════════
# Compatibility & comparison
# ═══════════════════════════════════════════════════════════════════════════

def test_usb_c_phone_gets_every_charger(iphone_15_pro: PhoneModel):
    assert compatible_chargers(iphone_15_pro) == list(load_chargers())


def test_lightning_phone_loses_25w_magsafe(iphone_13: PhoneModel):
    names = [c.name for c in compatible_chargers(iphone_13)]
    assert len(names) == 10
    assert "25W MagSafe Charger (iPhone 15)" not in names
    assert "15W MagSafe Charger" in names


def test_comparison_rows(iphone_15_pro: PhoneModel, usb_c_20w: ChargerModel):
    minutes = charging_minutes(iphone_15_pro, usb_c_20w, 20, 80)
    rows = compare_chargers(iphone_15_pro, usb_c_20w, minutes)
    assert [r.charger for r in rows] == [
        "5W USB-A (In-box Legacy)",
        "20W USB-C Power Adapter",
        "30W USB-C Power Adapter",
        "15W MagSafe Charger",
    ]
    current = rows[1]
    assert current.is_current
    assert current.estimated_minutes == pytest.approx(minutes)
    assert sum(r.is_current for r in rows) == 1
    # 30 W × 0.95 = 28.5 W, capped at the phone's 27 W
    assert rows[2].effective_watts == 27.0
    assert rows[2].estimated_minutes == pytest.approx(minutes * 19.0 / 27.0)


def test_estimate_charging_example():
    result = estimate_charging(ChargingInputs(
        phone="iPhone 15 Pro", charger="20W USB-C Power Adapter", start_pct="20", end_pct="80",
    ))
    assert result.effective_watts == pytest.approx(19.0)
    assert result.minutes > 0
    assert len(result.milestones) == 6
    assert len(result.comparisons) == 4


def test_estimate_with_blank_bound_is_zero():
    result = estimate_charging(ChargingInputs(start_pct="", end_pct="80"))
    assert result.minutes == 0.0
    assert result.milestones == []
    assert all(row.estimated_minutes == 0.0 for row in result.comparisons)


def test_unknown_phone_rejected():
    with pytest.raises(ValidationError):
        ChargingInputs(phone="iPhone 99")


def test_unknown_charger_rejected():
    with pytest.raises(ValidationError):
        ChargingInputs(charger="Mystery Brick")


# ═══════════════════════════════════════════════════════════════════════════
# Energy added
# ═══════════════════════════════════════════════════════════════════════════

def test_energy_added(iphone_15_pro: PhoneModel):
    # 3274 mAh × 60 % × 3.7 V / 1000 ≈ 7.27 Wh
    assert energy_added_wh(iphone_15_pro, 20, 80) == pytest.approx(3274 * 0.6 * 3.7 / 1000)


def test_energy_added_does_not_depend_on_charger():
    slow = estimate_charging(ChargingInputs(charger="5W USB-A (In-box Legacy)"))
    fast = estimate_charging(ChargingInputs(charger="30W USB-C Power Adapter"))
    assert slow.energy_added_wh == fast.energy_added_wh
    assert slow.energy_added_wh == pytest.approx(7.26828)


@pytest.mark.parametrize("start, end", [(80, 20), (50, 50), (None, 80), (20, 120)])
def test_energy_added_invalid_window_is_zero(iphone_15_pro, start, end):
    assert energy_added_wh(iphone_15_pro, start, end) == 0.0


def test_estimate_reports_zero_energy_for_blank_bound():
    assert estimate_charging(ChargingInputs(end_pct="")).energy_added_wh == 0.0
