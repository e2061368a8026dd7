"""Rent-vs-buy inputs: purchase side, rental side, and the analysis window."""

from pydantic import BaseModel, ConfigDict, Field

from calckit.config.inputs import Number, numeric


REQUIRED_FIELDS: tuple[str, ...] = (
    "home_price",
    "down_payment",
    "mortgage_rate_pct",
    "monthly_rent",
    "years_to_analyze",
)
"""Fields that must hold text before a comparison is worth showing."""


class RentVsBuyInputs(BaseModel):
    """All inputs of the rent-vs-buy comparison.

    Monthly cost fields are in dollars per month.  Percentages are given as
    percent (7.0 = 7 %), not fractions.  Blank term, rent increase and
    analysis window fall back to 30 years, 3 % and 5 years.
    """

    model_config = ConfigDict(frozen=True)

    # --- Buying ---
    home_price: Number = Field(default=0.0, description="Purchase price ($)")
    down_payment: Number = Field(default=0.0, description="Cash paid upfront ($)")
    mortgage_rate_pct: Number = Field(default=0.0, description="Annual mortgage rate (%)")
    mortgage_term_years: numeric(30.0) = Field(default=30.0, description="Loan term (years)")
    property_tax: Number = Field(default=0.0, description="Property tax ($/month)")
    home_insurance: Number = Field(default=0.0, description="Homeowners insurance ($/month)")
    pmi: Number = Field(default=0.0, description="Private mortgage insurance ($/month)")
    hoa_fees: Number = Field(default=0.0, description="Homeowners association fee ($/month)")
    maintenance: Number = Field(default=0.0, description="Upkeep budget ($/month)")

    # --- Renting ---
    monthly_rent: Number = Field(default=0.0, description="Starting rent ($/month)")
    rent_increase_pct: numeric(3.0) = Field(default=3.0, description="Annual rent increase (%)")
    renters_insurance: Number = Field(default=0.0, description="Renters insurance ($/month)")

    # --- Window ---
    years_to_analyze: numeric(5.0) = Field(default=5.0, description="Analysis window (years)")
