# catalog_service/ignition.py

"""
Factory test demo: try to start a car fitted with one of the configured
engine variants using a given key.

The engine table is a plain mapping loaded at import time; the outcome only
depends on whether the key was cut for the car's manufacturer.
"""
import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class EngineVariant(str, Enum):
    ASPIRATED = "aspirated"
    ELECTRIC = "electric"
    TURBO = "turbo"


class EngineType(str, Enum):
    ASPIRATED = "ASPIRATED"
    ELECTRIC = "ELECTRIC"
    TURBO = "TURBO"


class Manufacturer(str, Enum):
    HONDA = "HONDA"
    TOYOTA = "TOYOTA"
    FORD = "FORD"
    VOLKSWAGEN = "VOLKSWAGEN"


class KeyType(str, Enum):
    MECHANICAL = "MECHANICAL"
    PRESENCE = "PRESENCE"


class IgnitionStatus(str, Enum):
    STARTED = "STARTED"
    FAILED_TO_START = "FAILED_TO_START"

    @property
    def description(self) -> str:
        return _STATUS_DESCRIPTIONS[self]


_STATUS_DESCRIPTIONS = {
    IgnitionStatus.STARTED: "Car started successfully",
    IgnitionStatus.FAILED_TO_START: "Could not start the car",
}


@dataclass(frozen=True)
class EngineSpec:
    variant: EngineVariant
    model: str
    horsepower: int
    cylinders: int
    displacement: float
    engine_type: EngineType


@dataclass(frozen=True)
class IgnitionOutcome:
    car_model: str
    manufacturer: Manufacturer
    engine: EngineSpec
    status: IgnitionStatus

    @property
    def description(self) -> str:
        return self.status.description


ENGINES = {
    EngineVariant.TURBO: EngineSpec(EngineVariant.TURBO, "XPTO_1", 180, 4, 1.5, EngineType.TURBO),
    EngineVariant.ELECTRIC: EngineSpec(EngineVariant.ELECTRIC, "TH_40", 110, 3, 1.4, EngineType.ELECTRIC),
    EngineVariant.ASPIRATED: EngineSpec(EngineVariant.ASPIRATED, "XPTO_0", 120, 4, 2.0, EngineType.ASPIRATED),
}

# The car every factory test is run against.
TEST_CAR_MODEL = "HR-V"
TEST_CAR_MANUFACTURER = Manufacturer.HONDA


def ignite(required: Manufacturer, supplied: Manufacturer) -> IgnitionStatus:
    """Start only when the key matches the car's manufacturer."""
    if supplied != required:
        return IgnitionStatus.FAILED_TO_START
    return IgnitionStatus.STARTED


def get_engine(variant) -> EngineSpec:
    return ENGINES[EngineVariant(variant)]


def start_car(variant, key_manufacturer: Manufacturer) -> IgnitionOutcome:
    engine = get_engine(variant)
    logger.info(f"Trying to start {TEST_CAR_MODEL} with the {engine.variant.value} engine, key for {key_manufacturer.value}")
    logger.debug(f"Engine in use: {engine}")
    status = ignite(TEST_CAR_MANUFACTURER, key_manufacturer)
    logger.info(f"Ignition ({engine.variant.value} engine) finished: {status.value} - {status.description}")
    return IgnitionOutcome(
        car_model=TEST_CAR_MODEL,
        manufacturer=TEST_CAR_MANUFACTURER,
        engine=engine,
        status=status,
    )
