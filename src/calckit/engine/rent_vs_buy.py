"""Rent vs buy a home over a fixed analysis window.

Buying:
  r       = annual_rate / 100 / 12,   N = term_years × 12
  payment = L × r(1+r)^N / ((1+r)^N − 1)      (L / N when r = 0)
  monthly = payment + tax + insurance + PMI + HOA + maintenance
  equity  = down + principal paid in window + price × 3 % × years

Renting (escalated once a year, whole years only):
  for each year: total += rent × 12 + insurance × 12;  rent ×= 1 + increase

Break-even (heuristic, not a cash-flow NPV):
  0 if buying monthly ≤ rent, else down / (buying monthly − rent) / 12 years

Appreciation is linear, not compounded.

An analysis window or loan term outside 0 to 100 years is treated as empty,
and a payment that does not fit in a float is 0.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from calckit.config.housing import REQUIRED_FIELDS, RentVsBuyInputs
from calckit.models.results import BuyingResult, RentingResult, RentVsBuyResult

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
APPRECIATION_RATE = 0.03
MAX_YEARS = 100


def required_inputs_present(form: Mapping[str, object]) -> bool:
    """True when every field needed for a meaningful comparison holds text."""
    for name in REQUIRED_FIELDS:
        value = form.get(name)
        if value is None or not str(value).strip():
            return False
    return True


def monthly_mortgage_payment(loan_amount: float, monthly_rate: float, term_months: float) -> float:
    """Level monthly payment that amortizes ``loan_amount`` over ``term_months``."""
    if loan_amount <= 0 or term_months <= 0:
        return 0.0
    if monthly_rate > 0:
        try:
            factor = (1 + monthly_rate) ** term_months
            payment = loan_amount * monthly_rate * factor / (factor - 1)
        except OverflowError:
            logger.debug("Mortgage payment overflow for rate=%s term=%s", monthly_rate, term_months)
            return 0.0
        return payment if math.isfinite(payment) else 0.0
    return loan_amount / term_months


def principal_paid(
    loan_amount: float,
    monthly_rate: float,
    term_months: float,
    months: int,
) -> float:
    """Principal repaid during the first ``months`` payments.

    Never runs past the loan term and stops early once the balance
    reaches zero.
    """
    payment = monthly_mortgage_payment(loan_amount, monthly_rate, term_months)
    if payment <= 0:
        return 0.0
    balance = loan_amount
    total_principal = 0.0

    steps = months if term_months >= months else math.ceil(max(term_months, 0))
    for _ in range(steps):
        if balance <= 0:
            break
        interest = balance * monthly_rate
        principal = payment - interest
        total_principal += principal
        balance -= principal

    return total_principal


def _bounded_years(years: float, field: str) -> float:
    """``years`` if within 0–MAX_YEARS, else 0."""
    if 0 <= years <= MAX_YEARS:
        return years
    logger.debug("%s=%s outside 0-%s years, treated as empty", field, years, MAX_YEARS)
    return 0.0


def compute_buying_costs(inputs: RentVsBuyInputs) -> BuyingResult:
    years = _bounded_years(inputs.years_to_analyze, "years_to_analyze")
    monthly_rate = inputs.mortgage_rate_pct / 100 / MONTHS_PER_YEAR
    term_months = _bounded_years(inputs.mortgage_term_years, "mortgage_term_years") * MONTHS_PER_YEAR
    loan_amount = inputs.home_price - inputs.down_payment

    mortgage = monthly_mortgage_payment(loan_amount, monthly_rate, term_months)
    total_monthly = (
        mortgage + inputs.property_tax + inputs.home_insurance
        + inputs.pmi + inputs.hoa_fees + inputs.maintenance
    )

    window_months = int(years * MONTHS_PER_YEAR)
    principal = principal_paid(loan_amount, monthly_rate, term_months, window_months)
    appreciation = inputs.home_price * APPRECIATION_RATE * years

    return BuyingResult(
        loan_amount=loan_amount,
        monthly_mortgage=mortgage,
        monthly_property_tax=inputs.property_tax,
        monthly_insurance=inputs.home_insurance,
        monthly_pmi=inputs.pmi,
        monthly_hoa=inputs.hoa_fees,
        monthly_maintenance=inputs.maintenance,
        total_monthly_payment=total_monthly,
        down_payment=inputs.down_payment,
        total_cost=total_monthly * years * MONTHS_PER_YEAR,
        principal_paid=principal,
        appreciation=appreciation,
        final_equity=inputs.down_payment + principal + appreciation,
    )


def compute_renting_costs(inputs: RentVsBuyInputs) -> RentingResult:
    years = _bounded_years(inputs.years_to_analyze, "years_to_analyze")
    increase = inputs.rent_increase_pct / 100
    insurance = inputs.renters_insurance

    total_cost = 0.0
    current_rent = inputs.monthly_rent
    for _ in range(int(years)):
        total_cost += current_rent * MONTHS_PER_YEAR + insurance * MONTHS_PER_YEAR
        current_rent *= 1 + increase

    window_months = years * MONTHS_PER_YEAR
    average = total_cost / window_months if window_months > 0 else 0.0

    return RentingResult(
        initial_rent=inputs.monthly_rent,
        final_rent=current_rent,
        monthly_insurance=insurance,
        average_monthly_payment=average,
        total_cost=total_cost,
    )


def compute_break_even_years(buying_monthly: float, renting_monthly: float, down_payment: float) -> float:
    """Years for the down payment to be offset by the monthly gap.

    Zero when buying is no dearer per month than renting.
    """
    if buying_monthly <= renting_monthly:
        return 0.0
    months = down_payment / (buying_monthly - renting_monthly)
    return months / MONTHS_PER_YEAR


def compare_rent_vs_buy(inputs: RentVsBuyInputs) -> RentVsBuyResult:
    """Full comparison: both sides, break-even and net-worth impact."""
    buying = compute_buying_costs(inputs)
    renting = compute_renting_costs(inputs)

    break_even = compute_break_even_years(
        buying.total_monthly_payment, inputs.monthly_rent, inputs.down_payment,
    )

    net_buying = buying.final_equity - buying.total_cost
    net_renting = -renting.total_cost
    net_difference = net_buying - net_renting
    logger.debug(
        "Rent vs buy over %s years: net buying=%.2f net renting=%.2f",
        inputs.years_to_analyze, net_buying, net_renting,
    )

    return RentVsBuyResult(
        buying=buying,
        renting=renting,
        break_even_years=break_even,
        net_buying=net_buying,
        net_renting=net_renting,
        net_difference=net_difference,
        buying_is_better=net_difference > 0,
    )
