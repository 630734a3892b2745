"""Tests for product query specifications."""

from uuid import uuid4

import pytest

from app.domain import (
    AllProducts,
    CategoryContains,
    Product,
    ProductById,
    ProductNameContains,
)


@pytest.fixture
def widget() -> Product:
    """Create a sample product."""
    return Product(
        id=uuid4(),
        product_name="Widget",
        category="Electronics",
        unit_price=9.99,
        quantity_in_stock=5,
    )


def test_all_products_matches_everything(widget: Product) -> None:
    assert AllProducts().matches(widget)
    assert AllProducts().matches(Product())


def test_product_by_id(widget: Product) -> None:
    assert ProductById(widget.id).matches(widget)
    assert not ProductById(uuid4()).matches(widget)


@pytest.mark.parametrize("text", ["Widget", "widget", "WIDG", "dge"])
def test_name_contains_ignores_case(widget: Product, text: str) -> None:
    assert ProductNameContains(text).matches(widget)


@pytest.mark.parametrize("text", ["Elect", "elect", "TRONICS"])
def test_category_contains_ignores_case(widget: Product, text: str) -> None:
    assert CategoryContains(text).matches(widget)


def test_name_and_category_are_searched_separately(widget: Product) -> None:
    assert not ProductNameContains("Elect").matches(widget)
    assert not CategoryContains("Widget").matches(widget)


def test_missing_values_never_match() -> None:
    product = Product(id=uuid4())
    assert not ProductNameContains("a").matches(product)
    assert not CategoryContains("a").matches(product)


def test_case_folding_is_simple_lowercase() -> None:
    """Matching lowercases both sides, the same as SQL lower() LIKE."""
    product = Product(id=uuid4(), product_name="STRASSE")
    assert not ProductNameContains("ß").matches(product)
    assert ProductNameContains("strasse").matches(product)
