"""Renting true-cost inputs."""

from pydantic import BaseModel, ConfigDict, Field

from calckit.config.inputs import Number, numeric


class RentingCostInputs(BaseModel):
    """Recurring costs of a lease plus its one-off deposit."""

    model_config = ConfigDict(frozen=True)

    monthly_rent: Number = Field(default=0.0, description="Base rent ($/month)")
    security_deposit: Number = Field(
        default=0.0,
        description="One-off deposit ($).  Counted in the lease total, not the monthly sum.",
    )
    utilities: Number = Field(default=0.0, description="Utilities ($/month)")
    parking: Number = Field(default=0.0, description="Parking ($/month)")
    insurance: Number = Field(default=0.0, description="Renters insurance ($/month)")
    other_fees: Number = Field(default=0.0, description="Pet rent, amenity fees, ... ($/month)")
    lease_length_months: numeric(12.0) = Field(default=12.0, description="Lease length (months)")
