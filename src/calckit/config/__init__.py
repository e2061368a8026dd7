"""Input models — one per calculator, plus free-text coercion and demo inputs."""

from calckit.config.inputs import Number, OptionalNumber, numeric, parse_number
from calckit.config.appliance import ApplianceInputs
from calckit.config.phone import PlanType, PhoneUsageInputs
from calckit.config.housing import REQUIRED_FIELDS, RentVsBuyInputs
from calckit.config.renting import RentingCostInputs
from calckit.config.bills import FREQUENCY_MULTIPLIERS, BillCategory, BillFrequency, BillItem
from calckit.config.charging import ChargingInputs
from calckit.config.examples import example_names, load_example

__all__ = [
    "parse_number",
    "numeric",
    "Number",
    "OptionalNumber",
    "ApplianceInputs",
    "PlanType",
    "PhoneUsageInputs",
    "REQUIRED_FIELDS",
    "RentVsBuyInputs",
    "RentingCostInputs",
    "BillCategory",
    "BillFrequency",
    "BillItem",
    "FREQUENCY_MULTIPLIERS",
    "ChargingInputs",
    "example_names",
    "load_example",
]
