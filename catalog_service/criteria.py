# catalog_service/criteria.py

"""
Translate optional search criteria into a single SQLAlchemy predicate.
Each supplied criterion adds one AND-ed condition; nothing supplied matches
every product. Text criteria are literal: `%` and `_` are escaped.
"""
from sqlalchemy import and_, true

from .models import Product


def _has_text(value) -> bool:
    return value is not None and bool(value.strip())


def name_contains(name):
    return Product.name.icontains(name, autoescape=True)


def description_contains(description):
    return Product.description.icontains(description, autoescape=True)


def price_between(min_price, max_price):
    """Inclusive bounds, each one optional."""
    if min_price is not None and max_price is not None:
        return Product.price.between(min_price, max_price)
    if min_price is not None:
        return Product.price >= min_price
    if max_price is not None:
        return Product.price <= max_price
    return None


def build_criteria(search=None):
    """
    Build the WHERE clause for a `ProductSearch` (or None).
    Blank text criteria are ignored.
    """
    if search is None:
        return true()

    conditions = []
    if _has_text(search.name):
        conditions.append(name_contains(search.name))
    if _has_text(search.description):
        conditions.append(description_contains(search.description))
    price_condition = price_between(search.min_price, search.max_price)
    if price_condition is not None:
        conditions.append(price_condition)

    if not conditions:
        return true()
    return and_(*conditions)
