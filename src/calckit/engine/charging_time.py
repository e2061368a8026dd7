"""iPhone charging time — piecewise charging curve, left Riemann sum.

  effective_watts = min(charger.max_watts × charger.efficiency, phone.max_charging_watts)

Speed multiplier by battery level p:

  [0, 10)   0.70   slow start
  [10, 50)  1.00   full-speed fast charge
  [50, 80)  0.60
  [80, 90)  0.30
  [90, 95)  0.15
  [95, 100] 0.05   trickle
  otherwise 0.50

Integration walks start, start+step, … (< end).  Each step stores
capacity × step / 100 mAh at the speed of the step's *starting* level:

  hours = mAh × 3.7 V / (effective_watts × multiplier × 1000)

The step size is part of the model: a coarser step gives a different total.
"""

from __future__ import annotations

import logging

import numpy as np

from calckit.catalog.loader import get_charger, get_phone, load_chargers
from calckit.catalog.models import ChargerModel, Connector, PhoneModel
from calckit.config.charging import ChargingInputs
from calckit.models.results import ChargeMilestone, ChargerComparison, ChargingResult

logger = logging.getLogger(__name__)

NOMINAL_VOLTAGE = 3.7
DEFAULT_STEP_PCT = 1.0
MILESTONE_STEP_PCT = 10.0
FALLBACK_MULTIPLIER = 0.5

# (lower inclusive, upper exclusive, multiplier); the last band includes 100.
CHARGING_CURVE: tuple[tuple[float, float, float], ...] = (
    (0.0, 10.0, 0.70),
    (10.0, 50.0, 1.00),
    (50.0, 80.0, 0.60),
    (80.0, 90.0, 0.30),
    (90.0, 95.0, 0.15),
    (95.0, 100.0, 0.05),
)

COMPARISON_CHARGERS: tuple[str, ...] = (
    "5W USB-A (In-box Legacy)",
    "20W USB-C Power Adapter",
    "30W USB-C Power Adapter",
    "15W MagSafe Charger",
)


def effective_watts(phone: PhoneModel, charger: ChargerModel) -> float:
    """Power actually delivered: charger output after losses, capped by the phone."""
    return min(charger.max_watts * charger.efficiency, phone.max_charging_watts)


def speed_multiplier(percentage: float) -> float:
    """Fraction of effective watts accepted at battery level ``percentage``."""
    for lower, upper, multiplier in CHARGING_CURVE:
        if lower <= percentage < upper:
            return multiplier
    if percentage == 100.0:
        return CHARGING_CURVE[-1][2]
    return FALLBACK_MULTIPLIER


def speed_multipliers(percentages: np.ndarray) -> np.ndarray:
    """Vectorized :func:`speed_multiplier`."""
    p = np.asarray(percentages, dtype=float)
    conditions = [(p >= lower) & (p < upper) for lower, upper, _ in CHARGING_CURVE]
    conditions[-1] = conditions[-1] | (p == 100.0)
    choices = [np.full_like(p, multiplier) for _, _, multiplier in CHARGING_CURVE]
    return np.select(conditions, choices, default=FALLBACK_MULTIPLIER)


def _step_minutes(
    phone: PhoneModel,
    watts: float,
    start_pct: float,
    end_pct: float,
    step_pct: float,
) -> tuple[np.ndarray, np.ndarray]:
    """Starting level and minutes for every integration step."""
    levels = np.arange(start_pct, end_pct, step_pct, dtype=float)
    speeds = watts * speed_multipliers(levels)
    step_mah = phone.battery_mah * step_pct / 100
    hours = (step_mah * NOMINAL_VOLTAGE) / (speeds * 1000)
    return levels, hours * 60


def _window_is_valid(start_pct: float | None, end_pct: float | None, step_pct: float) -> bool:
    if start_pct is None or end_pct is None:
        return False
    return 0 <= start_pct < end_pct <= 100 and step_pct > 0


def charging_minutes(
    phone: PhoneModel,
    charger: ChargerModel,
    start_pct: float | None,
    end_pct: float | None,
    step_pct: float = DEFAULT_STEP_PCT,
) -> float:
    """Minutes to charge from ``start_pct`` to ``end_pct``.

    Zero when either bound is missing, the window is empty or outside
    0–100, or the charger delivers no power.
    """
    watts = effective_watts(phone, charger)
    if not _window_is_valid(start_pct, end_pct, step_pct) or watts <= 0:
        logger.debug("No charging window for start=%s end=%s", start_pct, end_pct)
        return 0.0
    _, minutes = _step_minutes(phone, watts, start_pct, end_pct, step_pct)
    return float(minutes.sum())


def energy_added_wh(phone: PhoneModel, start_pct: float | None, end_pct: float | None) -> float:
    """Watt-hours stored between ``start_pct`` and ``end_pct``; 0 for an invalid window."""
    if not _window_is_valid(start_pct, end_pct, DEFAULT_STEP_PCT):
        return 0.0
    return phone.battery_mah * (end_pct - start_pct) / 100 * NOMINAL_VOLTAGE / 1000


def compatible_chargers(phone: PhoneModel) -> list[ChargerModel]:
    """Chargers offered for ``phone``, in catalog order.

    USB-C phones drop wired chargers named "Lightning"; Lightning phones
    drop the iPhone 15-only 25W MagSafe charger.
    """
    chargers = load_chargers()
    if phone.connector is Connector.USB_C:
        return [c for c in chargers if "Lightning" not in c.name or c.wireless]
    return [c for c in chargers if "25W MagSafe" not in c.name]


def charging_milestones(
    phone: PhoneModel,
    charger: ChargerModel,
    start_pct: float | None,
    end_pct: float | None,
) -> list[ChargeMilestone]:
    """Cumulative time at the end of each 10-point band, from the same 1 % sum."""
    watts = effective_watts(phone, charger)
    if not _window_is_valid(start_pct, end_pct, DEFAULT_STEP_PCT) or watts <= 0:
        return []

    levels, minutes = _step_minutes(phone, watts, start_pct, end_pct, DEFAULT_STEP_PCT)
    cumulative = np.cumsum(minutes)

    milestones: list[ChargeMilestone] = []
    for band_start in np.arange(start_pct, end_pct, MILESTONE_STEP_PCT, dtype=float):
        band_end = min(band_start + MILESTONE_STEP_PCT, end_pct)
        steps = int(np.searchsorted(levels, band_end, side="left"))
        multiplier = speed_multiplier(float(band_start))
        milestones.append(ChargeMilestone(
            percentage=float(band_start),
            cumulative_minutes=float(cumulative[steps - 1]),
            speed_watts=watts * multiplier,
            multiplier=multiplier,
        ))
    return milestones


def compare_chargers(
    phone: PhoneModel,
    current: ChargerModel,
    minutes: float,
) -> list[ChargerComparison]:
    """Scale the current estimate to the reference chargers the phone supports."""
    current_watts = effective_watts(phone, current)
    compatible = {c.name for c in compatible_chargers(phone)}

    comparisons: list[ChargerComparison] = []
    for name in COMPARISON_CHARGERS:
        if name not in compatible:
            continue
        charger = get_charger(name)
        watts = effective_watts(phone, charger)
        estimated = minutes * current_watts / watts if watts > 0 else 0.0
        comparisons.append(ChargerComparison(
            charger=name,
            effective_watts=watts,
            estimated_minutes=estimated,
            is_current=name == current.name,
        ))
    return comparisons


def estimate_charging(inputs: ChargingInputs) -> ChargingResult:
    """Charging time, per-band milestones and charger comparison for ``inputs``."""
    phone = get_phone(inputs.phone)
    charger = get_charger(inputs.charger)
    minutes = charging_minutes(phone, charger, inputs.start_pct, inputs.end_pct)

    return ChargingResult(
        phone=phone.name,
        charger=charger.name,
        start_pct=inputs.start_pct,
        end_pct=inputs.end_pct,
        effective_watts=effective_watts(phone, charger),
        minutes=minutes,
        energy_added_wh=energy_added_wh(phone, inputs.start_pct, inputs.end_pct),
        milestones=charging_milestones(phone, charger, inputs.start_pct, inputs.end_pct),
        comparisons=compare_chargers(phone, charger, minutes),
    )
