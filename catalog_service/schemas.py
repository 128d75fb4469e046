# catalog_service/schemas.py

"""
Pydantic schemas for the Catalog Service API.
These define the data structures for incoming requests and outgoing responses.
Constraint checks (non-blank text, positive price) run here, before any
service operation sees the data.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .ignition import EngineType, EngineVariant, IgnitionStatus, KeyType, Manufacturer

PRICE_DIGITS = 16
PRICE_PLACES = 4


def _require_text(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


# Schema for creating a new product.
# Used in POST /products/ endpoint.
class ProductCreate(BaseModel):
    name: str = Field(..., max_length=255, description="Name of the product.")
    description: str = Field(..., description="Detailed description of the product.")
    price: Decimal = Field(
        ...,
        gt=0,
        max_digits=PRICE_DIGITS,
        decimal_places=PRICE_PLACES,
        description="Price of the product. Must be greater than 0.",
    )

    @field_validator("name", "description")
    @classmethod
    def text_not_blank(cls, value):
        return _require_text(value)


# Schema for updating an existing product.
# Every field is optional; a missing or null field keeps the stored value.
# Used in PATCH/PUT /products/{product_id} endpoints.
class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=255, description="New name of the product.")
    description: Optional[str] = Field(None, description="New detailed description of the product.")
    price: Optional[Decimal] = Field(
        None,
        gt=0,
        max_digits=PRICE_DIGITS,
        decimal_places=PRICE_PLACES,
        description="New price of the product. Must be greater than 0.",
    )

    @field_validator("name", "description")
    @classmethod
    def text_not_blank(cls, value):
        return _require_text(value)


# Optional search criteria for GET /products/. Absent criteria impose no constraint.
class ProductSearch(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    min_price: Optional[Decimal] = Field(None, gt=0)
    max_price: Optional[Decimal] = Field(None, gt=0)


class ProductResponse(BaseModel):
    id: int = Field(..., description="Unique identifier of the product.")
    name: str
    description: str
    price: Decimal

    model_config = ConfigDict(from_attributes=True)


# One page of search results plus pagination metadata.
class ProductPage(BaseModel):
    content: List[ProductResponse]
    page: int = Field(..., description="Zero-based index of this page.")
    size: int = Field(..., description="Requested page size.")
    total_elements: int
    total_pages: int
    first: bool
    last: bool


class IgnitionKey(BaseModel):
    manufacturer: Manufacturer = Field(..., description="Manufacturer the key was cut for.")
    key_type: KeyType = Field(KeyType.MECHANICAL, description="Kind of key.")


class EngineResponse(BaseModel):
    variant: EngineVariant
    model: str
    horsepower: int
    cylinders: int
    displacement: float
    engine_type: EngineType

    model_config = ConfigDict(from_attributes=True)


class IgnitionResult(BaseModel):
    car_model: str
    manufacturer: Manufacturer
    engine: EngineResponse
    status: IgnitionStatus
    description: str

    model_config = ConfigDict(from_attributes=True)
