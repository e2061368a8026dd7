"""Reference-data records: catalog appliances, iPhone models and chargers."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ApplianceProfile(BaseModel):
    """One entry of the static appliance catalog."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Display name, e.g. 'Refrigerator'")
    category: str = Field(description="Catalog group (Kitchen, Climate, ...)")
    typical_wattage: int = Field(gt=0, description="Typical draw while running (W)")
    standby_wattage: int | None = Field(
        default=None, ge=0,
        description="Draw while plugged in but idle (W).  None = no standby load.",
    )
    icon: str = Field(default="", description="Icon reference for the presentation layer")


class Connector(str, Enum):
    USB_C = "USB-C"
    LIGHTNING = "Lightning"


class PhoneModel(BaseModel):
    """One iPhone model."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Marketing name, e.g. 'iPhone 15 Pro'")
    battery_mah: float = Field(gt=0, description="Battery capacity (mAh)")
    max_charging_watts: float = Field(gt=0, description="Peak power the phone accepts (W)")
    connector: Connector = Field(description="Charging port")


class ChargerModel(BaseModel):
    """One charger."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Display name, e.g. '20W USB-C Power Adapter'")
    max_watts: float = Field(gt=0, description="Rated output (W)")
    wireless: bool = Field(default=False, description="Inductive (MagSafe / Qi) charger")
    efficiency: float = Field(
        default=0.95, gt=0, le=1.0,
        description="Share of rated output that reaches the battery. "
                    "Wired ≈ 0.95, MagSafe ≈ 0.85, Qi ≈ 0.75.",
    )
