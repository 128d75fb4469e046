# catalog_service/mapper.py

"""
Conversions between API schemas and the Product ORM model.
"""
from .models import Product
from .schemas import ProductCreate, ProductResponse, ProductUpdate

# Fields a partial update may touch. `id` is never among them.
UPDATABLE_FIELDS = ("name", "description", "price")


def to_entity(request: ProductCreate) -> Product:
    """New, unsaved Product; the store assigns the id."""
    return Product(name=request.name, description=request.description, price=request.price)


def to_response(product: Product) -> ProductResponse:
    return ProductResponse.model_validate(product)


def merge_update(request: ProductUpdate, product: Product) -> Product:
    """
    Copy every non-null field of `request` onto `product`, in place.
    Fields that are missing or null in the request keep their current value.
    """
    for field in UPDATABLE_FIELDS:
        value = getattr(request, field)
        if value is not None:
            setattr(product, field, value)
    return product
