"""Result models — calculator output contracts."""

from calckit.models.results import (
    BillsSummary,
    BuyingResult,
    CategoryTotal,
    ChargeMilestone,
    ChargerComparison,
    ChargingResult,
    CostComparison,
    CostShare,
    EfficiencyRating,
    EfficiencyTier,
    EnergyResult,
    PhoneUsageResult,
    RentingCostResult,
    RentingResult,
    RentVsBuyResult,
    UsageShare,
)

__all__ = [
    "BillsSummary",
    "BuyingResult",
    "CategoryTotal",
    "ChargeMilestone",
    "ChargerComparison",
    "ChargingResult",
    "CostComparison",
    "CostShare",
    "EfficiencyRating",
    "EfficiencyTier",
    "EnergyResult",
    "PhoneUsageResult",
    "RentingCostResult",
    "RentingResult",
    "RentVsBuyResult",
    "UsageShare",
]
