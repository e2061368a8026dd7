"""Recurring bill entries, their categories and billing frequencies."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BillCategory(str, Enum):
    UTILITIES = "Utilities"
    HOUSING = "Housing"
    TRANSPORTATION = "Transportation"
    INSURANCE = "Insurance"
    SUBSCRIPTIONS = "Subscriptions"
    DEBT = "Debt Payments"
    OTHER = "Other"


class BillFrequency(str, Enum):
    WEEKLY = "Weekly"
    BIWEEKLY = "Bi-weekly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    ANNUALLY = "Annually"


FREQUENCY_MULTIPLIERS: dict[BillFrequency, float] = {
    BillFrequency.WEEKLY: 4.33,
    BillFrequency.BIWEEKLY: 2.17,
    BillFrequency.MONTHLY: 1.0,
    BillFrequency.QUARTERLY: 1.0 / 3.0,
    BillFrequency.ANNUALLY: 1.0 / 12.0,
}
"""Factor converting one payment at each frequency to its average monthly value."""


class BillItem(BaseModel):
    """One row of the bills list.

    ``amount`` keeps the raw text the user typed: a row whose amount does not
    parse is left out of every total rather than counted as zero.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Label, e.g. 'Electric'")
    amount: str = Field(default="", description="Amount per payment, as typed")
    category: BillCategory = Field(default=BillCategory.UTILITIES)
    frequency: BillFrequency = Field(default=BillFrequency.MONTHLY)

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_as_text(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value
