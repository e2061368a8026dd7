"""YAML-backed reference data: appliance catalog and device tables."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from calckit.catalog.models import ApplianceProfile, ChargerModel, PhoneModel

logger = logging.getLogger(__name__)

DATA_DIR_ENV = "CALCKIT_DATA_DIR"
DEFAULT_DATA_DIRECTORY = Path(__file__).resolve().parent / "data"

APPLIANCES_FILE = "appliances.yaml"
DEVICES_FILE = "devices.yaml"


class CatalogError(RuntimeError):
    """Raised when a reference-data file is malformed."""


def data_directory() -> Path:
    """Directory holding the YAML files; ``$CALCKIT_DATA_DIR`` overrides the packaged one."""
    override = os.getenv(DATA_DIR_ENV, "").strip()
    return Path(override) if override else DEFAULT_DATA_DIRECTORY


@lru_cache(maxsize=None)
def load_data_file(name: str) -> dict[str, Any]:
    """Parsed top-level mapping of data file ``name``.  Callers must not mutate it."""
    path = data_directory() / name
    if not path.exists():
        raise FileNotFoundError(f"Reference data file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as error:
        raise CatalogError(f"{name}: invalid YAML: {error}") from error
    if not isinstance(data, dict):
        raise CatalogError(f"{name}: top level must be a mapping")
    logger.info("Loaded reference data from %s", path)
    return data


def _validate_list(name: str, key: str, model: type[BaseModel]) -> tuple[Any, ...]:
    raw = load_data_file(name).get(key)
    if not isinstance(raw, list):
        raise CatalogError(f"{name}: '{key}' must be a list")
    try:
        return tuple(model.model_validate(item) for item in raw)
    except ValidationError as error:
        raise CatalogError(f"{name}: invalid '{key}' entry: {error}") from error


# ═══════════════════════════════════════════════════════════════════════════
# Appliances
# ═══════════════════════════════════════════════════════════════════════════

@lru_cache(maxsize=1)
def load_appliances() -> tuple[ApplianceProfile, ...]:
    """All catalog appliances, in file order."""
    return _validate_list(APPLIANCES_FILE, "appliances", ApplianceProfile)


def appliances_by_category() -> dict[str, list[ApplianceProfile]]:
    """Catalog grouped by category; categories and entries keep file order."""
    grouped: dict[str, list[ApplianceProfile]] = {}
    for appliance in load_appliances():
        grouped.setdefault(appliance.category, []).append(appliance)
    return grouped


def get_appliance(name: str) -> ApplianceProfile:
    for appliance in load_appliances():
        if appliance.name == name:
            return appliance
    raise KeyError(name)


# ═══════════════════════════════════════════════════════════════════════════
# Phones & chargers
# ═══════════════════════════════════════════════════════════════════════════

@lru_cache(maxsize=1)
def load_phones() -> tuple[PhoneModel, ...]:
    return _validate_list(DEVICES_FILE, "phones", PhoneModel)


@lru_cache(maxsize=1)
def load_chargers() -> tuple[ChargerModel, ...]:
    return _validate_list(DEVICES_FILE, "chargers", ChargerModel)


def get_phone(name: str) -> PhoneModel:
    for phone in load_phones():
        if phone.name == name:
            return phone
    raise KeyError(name)


def get_charger(name: str) -> ChargerModel:
    for charger in load_chargers():
        if charger.name == name:
            return charger
    raise KeyError(name)


def clear_catalog_cache() -> None:
    """Forget cached files, e.g. after changing ``$CALCKIT_DATA_DIR``."""
    load_data_file.cache_clear()
    load_appliances.cache_clear()
    load_phones.cache_clear()
    load_chargers.cache_clear()
