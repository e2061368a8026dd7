"""True monthly and lease-long cost of renting, with income guidelines.

  monthly = rent + utilities + parking + insurance + other fees
  lease   = monthly × lease months + security deposit
  income  = monthly / 0.30  (recommended),  monthly / 0.25  (conservative)
"""

from __future__ import annotations

from calckit.config.renting import RentingCostInputs
from calckit.models.results import CostShare, RentingCostResult

DAYS_PER_MONTH = 30
RECOMMENDED_HOUSING_RATIO = 0.30
CONSERVATIVE_HOUSING_RATIO = 0.25


def compute_renting_cost(inputs: RentingCostInputs) -> RentingCostResult:
    items = [
        ("Base Rent", inputs.monthly_rent),
        ("Utilities", inputs.utilities),
        ("Parking", inputs.parking),
        ("Insurance", inputs.insurance),
        ("Other Fees", inputs.other_fees),
    ]
    total_monthly = sum(amount for _, amount in items)

    breakdown = [
        CostShare(
            category=category,
            amount=amount,
            percentage=amount / total_monthly * 100 if total_monthly > 0 else 0.0,
        )
        for category, amount in items
        if amount > 0
    ]

    recommended = total_monthly / RECOMMENDED_HOUSING_RATIO

    return RentingCostResult(
        total_monthly_cost=total_monthly,
        total_lease_cost=total_monthly * inputs.lease_length_months + inputs.security_deposit,
        daily_cost=total_monthly / DAYS_PER_MONTH,
        breakdown=breakdown,
        recommended_income=recommended,
        conservative_income=total_monthly / CONSERVATIVE_HOUSING_RATIO,
        annual_income_needed=recommended * 12,
    )
