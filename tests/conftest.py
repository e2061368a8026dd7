"""Shared test fixtures — sample inputs matching the bundled examples."""

from __future__ import annotations

import pytest

from calckit.catalog import ChargerModel, PhoneModel, clear_catalog_cache, get_charger, get_phone
from calckit.config import (
    ApplianceInputs,
    BillCategory,
    BillFrequency,
    BillItem,
    PhoneUsageInputs,
    RentingCostInputs,
    RentVsBuyInputs,
)


@pytest.fixture(autouse=True)
def _fresh_catalog(monkeypatch: pytest.MonkeyPatch):
    """Each test reads the packaged reference data from scratch."""
    monkeypatch.delenv("CALCKIT_DATA_DIR", raising=False)
    clear_catalog_cache()
    yield
    clear_catalog_cache()


@pytest.fixture
def fridge() -> ApplianceInputs:
    return ApplianceInputs(
        wattage="150",
        hours_per_day="8",
        electricity_rate="0.15",
        standby_wattage="5",
        include_standby=True,
    )


@pytest.fixture
def phone_usage() -> PhoneUsageInputs:
    return PhoneUsageInputs(
        monthly_bill="85",
        minutes_used="450",
        data_gb="8.5",
        texts_sent="300",
    )


@pytest.fixture
def house() -> RentVsBuyInputs:
    return RentVsBuyInputs(
        home_price="400000",
        down_payment="80000",
        mortgage_rate_pct="7.0",
        mortgage_term_years="30",
        property_tax="500",
        home_insurance="150",
        pmi="200",
        hoa_fees="0",
        maintenance="300",
        monthly_rent="2500",
        rent_increase_pct="3.0",
        renters_insurance="25",
        years_to_analyze="5",
    )


@pytest.fixture
def lease() -> RentingCostInputs:
    return RentingCostInputs(
        monthly_rent="1500",
        security_deposit="1500",
        utilities="150",
        parking="50",
        insurance="25",
        other_fees="30",
        lease_length_months="12",
    )


@pytest.fixture
def bills() -> list[BillItem]:
    return [
        BillItem(name="Rent", amount="1200", category=BillCategory.HOUSING),
        BillItem(name="Electric", amount="85", category=BillCategory.UTILITIES),
        BillItem(name="Internet", amount="60", category=BillCategory.UTILITIES),
        BillItem(name="Car Insurance", amount="150", category=BillCategory.INSURANCE),
        BillItem(name="Gym", amount="10", category=BillCategory.SUBSCRIPTIONS,
                 frequency=BillFrequency.WEEKLY),
    ]


@pytest.fixture
def iphone_15_pro() -> PhoneModel:
    return get_phone("iPhone 15 Pro")


@pytest.fixture
def iphone_13() -> PhoneModel:
    return get_phone("iPhone 13")


@pytest.fixture
def usb_c_20w() -> ChargerModel:
    return get_charger("20W USB-C Power Adapter")
