"""Appliance energy cost — active + standby consumption projected to cost.

  active_kwh/day  = watts × hours / 1000
  standby_kwh/day = standby_watts × (24 − hours) / 1000     (if counted)
  daily_cost      = (active + standby) × rate
  monthly         = daily × 30,   yearly = daily × 365

Months are a flat 30 days and years 365 days, not calendar lengths.
"""

from __future__ import annotations

import logging

from calckit.catalog.models import ApplianceProfile
from calckit.config.appliance import ApplianceInputs
from calckit.models.results import CostComparison, EnergyResult

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 24
DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365

# Annual cost of common appliances at a typical rate, for context.
REFERENCE_ANNUAL_COSTS: tuple[tuple[str, float], ...] = (
    ("LED Bulb (8h/day)", 3.80),
    ("Laptop (8h/day)", 18.98),
    ("Refrigerator (24h/day)", 143.00),
    ("Central AC (8h/day)", 1022.00),
)


def compute_energy_cost(inputs: ApplianceInputs) -> EnergyResult:
    """Project one appliance's consumption and cost."""
    watts = inputs.wattage
    hours = inputs.hours_per_day

    if watts > 0 and 0 < hours <= HOURS_PER_DAY:
        active_kwh = watts * hours / 1000
    else:
        logger.debug("No active consumption for wattage=%s hours=%s", watts, hours)
        active_kwh = 0.0

    # Standby covers the rest of the day, so only when the appliance is not on 24h.
    standby = inputs.standby_wattage
    if inputs.include_standby and standby > 0 and hours < HOURS_PER_DAY:
        standby_kwh = standby * (HOURS_PER_DAY - hours) / 1000
    else:
        standby_kwh = 0.0

    total_kwh = active_kwh + standby_kwh
    daily_cost = total_kwh * inputs.electricity_rate

    return EnergyResult(
        active_kwh_per_day=active_kwh,
        standby_kwh_per_day=standby_kwh,
        total_kwh_per_day=total_kwh,
        monthly_kwh=total_kwh * DAYS_PER_MONTH,
        yearly_kwh=total_kwh * DAYS_PER_YEAR,
        daily_cost=daily_cost,
        monthly_cost=daily_cost * DAYS_PER_MONTH,
        yearly_cost=daily_cost * DAYS_PER_YEAR,
        active_share_pct=active_kwh / total_kwh * 100 if total_kwh > 0 else 0.0,
    )


def apply_appliance_profile(inputs: ApplianceInputs, profile: ApplianceProfile) -> ApplianceInputs:
    """Copy a catalog appliance's wattages into ``inputs``.

    One-way: later edits to the returned inputs do not touch the catalog.
    Standby is switched on exactly when the profile has a standby wattage.
    """
    if profile.standby_wattage is not None:
        standby, include = float(profile.standby_wattage), True
    else:
        standby, include = 0.0, False
    return inputs.model_copy(update={
        "wattage": float(profile.typical_wattage),
        "standby_wattage": standby,
        "include_standby": include,
    })


def energy_saving_tips(wattage: float, hours_per_day: float) -> list[str]:
    tips: list[str] = []
    if wattage > 1000:
        tips.append(
            "Consider using this high-power appliance during off-peak hours "
            "if you have time-of-use rates"
        )
    if hours_per_day > 8:
        tips.append("Look for opportunities to reduce usage time or use timer controls")
    tips.append("Unplug appliances when not in use to eliminate standby power consumption")
    tips.append("Consider upgrading to an ENERGY STAR certified model for better efficiency")
    return tips


def compare_annual_cost(yearly_cost: float) -> list[CostComparison]:
    """Reference appliances' annual cost, each flagged if cheaper than ``yearly_cost``."""
    return [
        CostComparison(label=label, annual_cost=cost, cheaper=cost < yearly_cost)
        for label, cost in REFERENCE_ANNUAL_COSTS
    ]
