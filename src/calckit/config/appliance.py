"""Appliance energy inputs."""

from pydantic import BaseModel, ConfigDict, Field

from calckit.config.inputs import Number


class ApplianceInputs(BaseModel):
    """Inputs for one appliance energy calculation."""

    model_config = ConfigDict(frozen=True)

    wattage: Number = Field(default=0.0, description="Active power draw (W)")
    hours_per_day: Number = Field(default=0.0, description="Hours of active use per day (0–24)")
    electricity_rate: Number = Field(default=0.0, description="Electricity price ($/kWh)")
    standby_wattage: Number = Field(default=0.0, description="Standby power draw (W)")
    include_standby: bool = Field(
        default=False,
        description="Count standby consumption for the hours the appliance is not in use",
    )
