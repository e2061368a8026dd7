"""Phone cost per unit of usage and a plan-value rating.

The voice / data / text split is a fixed 40 / 50 / 10 allocation of the
bill, not derived from the usage figures.
"""

from __future__ import annotations

import logging

from calckit.config.phone import PhoneUsageInputs
from calckit.models.results import (
    EfficiencyRating,
    EfficiencyTier,
    PhoneUsageResult,
    UsageShare,
)

logger = logging.getLogger(__name__)

DAYS_PER_MONTH = 30
HOURS_PER_DAY = 24

VOICE_SHARE = 0.4
DATA_SHARE = 0.5
TEXT_SHARE = 0.1

# Upper bounds (exclusive) on cost per minute, best tier first.
TIER_THRESHOLDS: tuple[tuple[float, EfficiencyTier], ...] = (
    (0.10, EfficiencyTier.EXCELLENT),
    (0.25, EfficiencyTier.GOOD),
    (0.50, EfficiencyTier.FAIR),
)

TIER_TEXT: dict[EfficiencyTier, tuple[str, str]] = {
    EfficiencyTier.NO_USAGE: ("No Usage Data", "Enter your usage to see efficiency"),
    EfficiencyTier.EXCELLENT: ("Excellent Value", "Great deal! You're using your plan efficiently"),
    EfficiencyTier.GOOD: ("Good Value", "Reasonable cost per minute"),
    EfficiencyTier.FAIR: ("Fair Value", "Consider a different plan if usage increases"),
    EfficiencyTier.POOR: ("Poor Value", "You might benefit from an unlimited plan"),
}


def _cost_per(bill: float, units: float) -> float:
    if units <= 0 or bill <= 0:
        return 0.0
    return bill / units


def efficiency_tier(cost_per_minute: float) -> EfficiencyTier:
    if cost_per_minute == 0:
        return EfficiencyTier.NO_USAGE
    for upper, tier in TIER_THRESHOLDS:
        if cost_per_minute < upper:
            return tier
    return EfficiencyTier.POOR


def rate_efficiency(cost_per_minute: float) -> EfficiencyRating:
    tier = efficiency_tier(cost_per_minute)
    label, suggestion = TIER_TEXT[tier]
    return EfficiencyRating(tier=tier, label=label, suggestion=suggestion)


def compute_phone_cost(inputs: PhoneUsageInputs) -> PhoneUsageResult:
    """Cost per minute / text / GB, daily and hourly cost, and the plan rating."""
    bill = inputs.monthly_bill
    cost_per_minute = _cost_per(bill, inputs.minutes_used)
    if cost_per_minute == 0:
        logger.debug("No per-minute cost for bill=%s minutes=%s", bill, inputs.minutes_used)

    breakdown = [
        UsageShare(category="Voice Calls", quantity=inputs.minutes_used, unit="minutes",
                   estimated_cost=bill * VOICE_SHARE),
        UsageShare(category="Data Usage", quantity=inputs.data_gb, unit="GB",
                   estimated_cost=bill * DATA_SHARE),
        UsageShare(category="Text Messages", quantity=inputs.texts_sent, unit="texts",
                   estimated_cost=bill * TEXT_SHARE),
    ]

    return PhoneUsageResult(
        plan_type=inputs.plan_type,
        monthly_bill=bill,
        cost_per_minute=cost_per_minute,
        cost_per_text=_cost_per(bill, inputs.texts_sent),
        cost_per_gb=_cost_per(bill, inputs.data_gb),
        daily_cost=bill / DAYS_PER_MONTH,
        hourly_cost=bill / (DAYS_PER_MONTH * HOURS_PER_DAY),
        breakdown=breakdown,
        efficiency=rate_efficiency(cost_per_minute),
    )
