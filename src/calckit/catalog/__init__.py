"""Static reference data — appliance catalog and iPhone/charger tables."""

from calckit.catalog.models import ApplianceProfile, ChargerModel, Connector, PhoneModel
from calckit.catalog.loader import (
    CatalogError,
    appliances_by_category,
    clear_catalog_cache,
    data_directory,
    get_appliance,
    get_charger,
    get_phone,
    load_appliances,
    load_chargers,
    load_data_file,
    load_phones,
)

__all__ = [
    "ApplianceProfile",
    "ChargerModel",
    "Connector",
    "PhoneModel",
    "CatalogError",
    "appliances_by_category",
    "clear_catalog_cache",
    "data_directory",
    "get_appliance",
    "get_charger",
    "get_phone",
    "load_appliances",
    "load_chargers",
    "load_data_file",
    "load_phones",
]
