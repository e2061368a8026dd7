"""Result types — the contract between the engine and the presentation layer.

Every result is a frozen value built fresh by one engine call.  Amounts are
plain floats (dollars, kWh, minutes); formatting them is left to the caller.
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict

from calckit.config.bills import BillCategory
from calckit.config.phone import PlanType


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


# ═══════════════════════════════════════════════════════════════════════════
# Appliance energy
# ═══════════════════════════════════════════════════════════════════════════

class EnergyResult(_Result):
    """Daily, monthly and yearly consumption and cost of one appliance."""

    active_kwh_per_day: float
    """watts × hours / 1000."""
    standby_kwh_per_day: float
    """standby watts × (24 − hours) / 1000, when standby is counted."""
    total_kwh_per_day: float
    monthly_kwh: float
    """Daily × 30."""
    yearly_kwh: float
    """Daily × 365."""
    daily_cost: float
    monthly_cost: float
    yearly_cost: float
    active_share_pct: float
    """Share of daily energy drawn while in use (0–100)."""


class CostComparison(_Result):
    """A reference appliance's annual cost next to the computed one."""

    label: str
    annual_cost: float
    cheaper: bool
    """True when the reference costs less per year than the computed appliance."""


# ═══════════════════════════════════════════════════════════════════════════
# Phone cost
# ═══════════════════════════════════════════════════════════════════════════

class EfficiencyTier(IntEnum):
    """Plan value by cost per minute.  Ordered: POOR < FAIR < GOOD < EXCELLENT."""

    NO_USAGE = 0
    POOR = 1
    FAIR = 2
    GOOD = 3
    EXCELLENT = 4


class EfficiencyRating(_Result):
    tier: EfficiencyTier
    label: str
    suggestion: str


class UsageShare(_Result):
    """Heuristic slice of the bill attributed to one kind of usage."""

    category: str
    quantity: float
    unit: str
    estimated_cost: float


class PhoneUsageResult(_Result):
    plan_type: PlanType
    monthly_bill: float
    cost_per_minute: float
    cost_per_text: float
    cost_per_gb: float
    daily_cost: float
    hourly_cost: float
    breakdown: list[UsageShare]
    efficiency: EfficiencyRating


# ═══════════════════════════════════════════════════════════════════════════
# Rent vs buy
# ═══════════════════════════════════════════════════════════════════════════

class BuyingResult(_Result):
    """Owning over the analysis window."""

    loan_amount: float
    monthly_mortgage: float
    monthly_property_tax: float
    monthly_insurance: float
    monthly_pmi: float
    monthly_hoa: float
    monthly_maintenance: float
    total_monthly_payment: float
    """Mortgage + tax + insurance + PMI + HOA + maintenance."""
    down_payment: float
    total_cost: float
    """total_monthly_payment × years × 12 (down payment not included)."""
    principal_paid: float
    """Loan principal amortized within the window."""
    appreciation: float
    """Linear: price × 3 % × years."""
    final_equity: float
    """down payment + principal paid + appreciation."""


class RentingResult(_Result):
    """Renting over the analysis window, rent escalated once per year."""

    initial_rent: float
    final_rent: float
    monthly_insurance: float
    average_monthly_payment: float
    total_cost: float


class RentVsBuyResult(_Result):
    buying: BuyingResult
    renting: RentingResult
    break_even_years: float
    """0 when buying is already no dearer per month than renting."""
    net_buying: float
    """Equity minus total buying cost."""
    net_renting: float
    """Minus total renting cost (renting builds no equity)."""
    net_difference: float
    buying_is_better: bool


# ═══════════════════════════════════════════════════════════════════════════
# Renting true cost
# ═══════════════════════════════════════════════════════════════════════════

class CostShare(_Result):
    category: str
    amount: float
    percentage: float
    """Share of the monthly total (0–100)."""


class RentingCostResult(_Result):
    total_monthly_cost: float
    total_lease_cost: float
    daily_cost: float
    breakdown: list[CostShare]
    recommended_income: float
    """Monthly income keeping housing at 30 %."""
    conservative_income: float
    """Monthly income keeping housing at 25 %."""
    annual_income_needed: float
    """recommended_income × 12."""


# ═══════════════════════════════════════════════════════════════════════════
# Monthly bills
# ═══════════════════════════════════════════════════════════════════════════

class CategoryTotal(_Result):
    category: BillCategory
    total: float
    percentage: float


class BillsSummary(_Result):
    total_monthly: float
    annual_total: float
    by_category: list[CategoryTotal]
    """Categories with a positive total, in category order."""
    recommended_income: float
    """Monthly income at which bills are 50 % of income."""
    included_count: int
    """Bills with a name and a parsable amount."""


# ═══════════════════════════════════════════════════════════════════════════
# Charging time
# ═══════════════════════════════════════════════════════════════════════════

class ChargeMilestone(_Result):
    """Progress at the start of each 10-point band of the charge."""

    percentage: float
    cumulative_minutes: float
    """Minutes from the start level to the end of this band."""
    speed_watts: float
    multiplier: float


class ChargerComparison(_Result):
    charger: str
    effective_watts: float
    estimated_minutes: float
    is_current: bool


class ChargingResult(_Result):
    phone: str
    charger: str
    start_pct: float | None
    end_pct: float | None
    effective_watts: float
    minutes: float
    energy_added_wh: float
    """Battery energy stored over the window: mAh × (end − start) / 100 × 3.7 V / 1000."""
    milestones: list[ChargeMilestone]
    comparisons: list[ChargerComparison]
