"""Charging-time inputs: a catalog phone, a catalog charger and a battery window."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from calckit.catalog.loader import get_charger, get_phone
from calckit.config.inputs import OptionalNumber


class ChargingInputs(BaseModel):
    """Phone, charger and the battery window to fill.

    ``start_pct`` / ``end_pct`` stay ``None`` when the text is blank or not a
    number; the estimate is then zero rather than charging from 0 %.
    """

    model_config = ConfigDict(frozen=True)

    phone: str = Field(default="iPhone 15 Pro", description="Phone model name from the catalog")
    charger: str = Field(default="5W USB-A (In-box Legacy)", description="Charger name from the catalog")
    start_pct: OptionalNumber = Field(default=20.0, description="Battery level at plug-in (%)")
    end_pct: OptionalNumber = Field(default=80.0, description="Target battery level (%)")

    @field_validator("phone")
    @classmethod
    def _known_phone(cls, value: str) -> str:
        try:
            get_phone(value)
        except KeyError as exc:
            raise ValueError(f"unknown phone model: {value!r}") from exc
        return value

    @field_validator("charger")
    @classmethod
    def _known_charger(cls, value: str) -> str:
        try:
            get_charger(value)
        except KeyError as exc:
            raise ValueError(f"unknown charger: {value!r}") from exc
        return value
