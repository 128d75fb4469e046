# tests/test_criteria.py

from decimal import Decimal

import pytest

from catalog_service.criteria import build_criteria
from catalog_service.models import Product
from catalog_service.schemas import ProductSearch


@pytest.fixture
def catalog(add_products):
    return add_products(
        ("Steel Bolt", "Zinc plated fastener", "0.25"),
        ("Brass Nut", "Fits any BOLT", "0.10"),
        ("Hammer", "Steel head", "9.99"),
        ("Drill", "Cordless", "10.00"),
        ("Saw", "Hand saw", "20.00"),
        ("Ladder", "Aluminium", "20.01"),
    )


def matching(db_session, search):
    return [
        product.name
        for product in db_session.query(Product).filter(build_criteria(search)).order_by(Product.id)
    ]


def test_no_criteria_matches_everything(db_session, catalog):
    assert len(matching(db_session, None)) == len(catalog)
    assert len(matching(db_session, ProductSearch())) == len(catalog)


def test_blank_text_criteria_are_ignored(db_session, catalog):
    assert len(matching(db_session, ProductSearch(name="   ", description=""))) == len(catalog)


def test_name_is_case_insensitive_substring(db_session, catalog):
    assert matching(db_session, ProductSearch(name="bolt")) == ["Steel Bolt"]


def test_description_is_case_insensitive_substring(db_session, catalog):
    assert matching(db_session, ProductSearch(description="bolt")) == ["Brass Nut"]
    assert matching(db_session, ProductSearch(description="STEEL")) == ["Hammer"]


def test_min_price_only(db_session, catalog):
    assert matching(db_session, ProductSearch(min_price=Decimal("20"))) == ["Saw", "Ladder"]


def test_max_price_only(db_session, catalog):
    assert matching(db_session, ProductSearch(max_price=Decimal("0.25"))) == ["Steel Bolt", "Brass Nut"]


def test_price_range_is_inclusive(db_session, catalog):
    search = ProductSearch(min_price=Decimal("10"), max_price=Decimal("20"))
    assert matching(db_session, search) == ["Drill", "Saw"]


def test_criteria_are_combined_with_and(db_session, catalog):
    assert matching(db_session, ProductSearch(name="steel", max_price=Decimal("1"))) == ["Steel Bolt"]
    assert matching(db_session, ProductSearch(name="steel", min_price=Decimal("1"))) == []


def test_inverted_range_matches_nothing(db_session, catalog):
    assert matching(db_session, ProductSearch(min_price=Decimal("20"), max_price=Decimal("10"))) == []


def test_wildcard_characters_match_literally(db_session, add_products):
    add_products(("Steel Bolt", "plain_text", "1"), ("100% cotton", "plainXtext", "2"))

    assert matching(db_session, ProductSearch(name="%")) == ["100% cotton"]
    assert matching(db_session, ProductSearch(name="0%")) == ["100% cotton"]
    assert matching(db_session, ProductSearch(description="n_t")) == ["Steel Bolt"]
