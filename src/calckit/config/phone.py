"""Phone usage inputs."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from calckit.config.inputs import Number


class PlanType(str, Enum):
    """Kind of phone plan.  Informational: the arithmetic is the same for all."""

    UNLIMITED = "Unlimited"
    LIMITED = "Limited Minutes"
    PAY_PER_USE = "Pay Per Use"

    @property
    def description(self) -> str:
        return PLAN_DESCRIPTIONS[self]


PLAN_DESCRIPTIONS: dict[PlanType, str] = {
    PlanType.UNLIMITED: "Unlimited talk, text, and data",
    PlanType.LIMITED: "Fixed number of minutes included",
    PlanType.PAY_PER_USE: "Pay for each minute/text/MB used",
}


class PhoneUsageInputs(BaseModel):
    """One month of phone usage against one bill."""

    model_config = ConfigDict(frozen=True)

    monthly_bill: Number = Field(default=0.0, description="Total monthly bill ($)")
    minutes_used: Number = Field(default=0.0, description="Voice minutes used this month")
    data_gb: Number = Field(default=0.0, description="Mobile data used this month (GB)")
    texts_sent: Number = Field(default=0.0, description="Text messages sent this month")
    plan_type: PlanType = Field(default=PlanType.UNLIMITED, description="Plan kind")
