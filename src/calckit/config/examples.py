"""Demo inputs behind each calculator's "load example" action.

Read from ``examples.yaml`` in the reference-data directory and validated
into the calculator's input model.
"""

from __future__ import annotations

from pydantic import BaseModel, ValidationError

from calckit.catalog.loader import CatalogError, load_data_file
from calckit.config.appliance import ApplianceInputs
from calckit.config.bills import BillItem
from calckit.config.charging import ChargingInputs
from calckit.config.housing import RentVsBuyInputs
from calckit.config.phone import PhoneUsageInputs
from calckit.config.renting import RentingCostInputs

EXAMPLES_FILE = "examples.yaml"

EXAMPLE_MODELS: dict[str, type[BaseModel]] = {
    "appliance_energy": ApplianceInputs,
    "phone_cost": PhoneUsageInputs,
    "rent_vs_buy": RentVsBuyInputs,
    "renting_cost": RentingCostInputs,
    "charging_time": ChargingInputs,
}


def example_names() -> list[str]:
    return list(load_data_file(EXAMPLES_FILE))


def load_example(name: str) -> BaseModel | list[BillItem]:
    """Demo inputs for calculator ``name``.

    Returns the calculator's input model, or a list of ``BillItem`` for
    ``monthly_bills``.  Raises ``KeyError`` for an unknown calculator.
    """
    raw = load_data_file(EXAMPLES_FILE)[name]
    try:
        if name == "monthly_bills":
            return [BillItem.model_validate(item) for item in raw]
        return EXAMPLE_MODELS[name].model_validate(raw)
    except ValidationError as error:
        raise CatalogError(f"{EXAMPLES_FILE}: invalid example '{name}': {error}") from error
