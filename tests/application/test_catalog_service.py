"""Tests for the catalog application service."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from app.application.catalog_service import CatalogService, get_catalog_service
from app.application.dtos import ProductAddRequest, ProductUpdateRequest
from app.domain.exceptions import (
    ProductNotFoundError,
    ProductPersistenceError,
    ProductValidationError,
)
from app.domain.queries import AllProducts, CategoryContains, ProductById
from app.domain.repositories import ProductRepository
from app.infrastructure.product_repository import InMemoryProductRepository


@pytest.fixture
def repo() -> InMemoryProductRepository:
    """Create a fresh in-memory repository."""
    return InMemoryProductRepository()


@pytest.fixture
def service(repo: InMemoryProductRepository) -> CatalogService:
    """Create a catalog service over the in-memory repository."""
    return get_catalog_service(repo, request_id="req-test")


def widget(**overrides) -> ProductAddRequest:
    values = {
        "product_name": "Widget",
        "category": "Electronics",
        "unit_price": 9.99,
        "quantity_in_stock": 5,
    }
    values.update(overrides)
    return ProductAddRequest(**values)


class TestQueries:
    """Tests for list, filter, search and get-one."""

    @pytest.mark.asyncio
    async def test_list_products_empty(self, service: CatalogService) -> None:
        """An empty catalog lists nothing."""
        assert await service.list_products() == []

    @pytest.mark.asyncio
    async def test_list_products_in_insertion_order(self, service: CatalogService) -> None:
        """Listing returns every added product."""
        first = await service.add_product(widget(product_name="First"))
        second = await service.add_product(widget(product_name="Second"))

        products = await service.list_products()

        assert [p.product_id for p in products] == [first.product_id, second.product_id]

    @pytest.mark.asyncio
    async def test_filter_products(self, service: CatalogService) -> None:
        """Filtering returns only matching products."""
        await service.add_product(widget())
        chair = await service.add_product(
            widget(product_name="Chair", category="Furniture")
        )

        products = await service.filter_products(CategoryContains("furn"))

        assert products == [chair]

    @pytest.mark.asyncio
    async def test_filter_all_products(self, service: CatalogService) -> None:
        await service.add_product(widget())
        assert len(await service.filter_products(AllProducts())) == 1

    @pytest.mark.asyncio
    async def test_get_product(self, service: CatalogService) -> None:
        """Get-one returns the matching product or None."""
        added = await service.add_product(widget())

        assert await service.get_product(ProductById(added.product_id)) == added
        assert await service.get_product(ProductById(uuid4())) is None

    @pytest.mark.asyncio
    async def test_search_matches_name_or_category(self, service: CatalogService) -> None:
        """Search returns the union of name and category matches."""
        by_name = await service.add_product(widget(product_name="Electric Kettle", category="HomeAppliances"))
        by_category = await service.add_product(widget(product_name="Phone"))
        await service.add_product(widget(product_name="Sofa", category="Furniture"))

        results = await service.search_products("ELECT")

        assert results == [by_name, by_category]

    @pytest.mark.asyncio
    async def test_search_does_not_duplicate(self, service: CatalogService) -> None:
        """A product matching both name and category appears once."""
        added = await service.add_product(widget(product_name="Electronics Kit"))

        results = await service.search_products("electronics")

        assert results == [added]

    @pytest.mark.asyncio
    async def test_search_no_match(self, service: CatalogService) -> None:
        await service.add_product(widget())
        assert await service.search_products("zzz") == []


class TestAddProduct:
    """Tests for adding products."""

    @pytest.mark.asyncio
    async def test_add_product_assigns_identity(self, service: CatalogService) -> None:
        """Added products get a fresh identity and keep their attributes."""
        added = await service.add_product(widget())

        assert added.product_id is not None
        assert added.product_name == "Widget"
        assert added.category == "Electronics"
        assert added.unit_price == 9.99
        assert added.quantity_in_stock == 5

    @pytest.mark.asyncio
    async def test_add_product_is_retrievable(self, service: CatalogService) -> None:
        added = await service.add_product(widget())
        assert await service.get_product(ProductById(added.product_id)) == added

    @pytest.mark.asyncio
    async def test_add_product_none_request(self, service: CatalogService) -> None:
        """A missing request is a programming error."""
        with pytest.raises(TypeError):
            await service.add_product(None)  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_add_product_invalid(
        self, service: CatalogService, repo: InMemoryProductRepository
    ) -> None:
        """Invalid requests are rejected and nothing is stored."""
        with pytest.raises(ProductValidationError) as exc_info:
            await service.add_product(widget(product_name="", category="Toys"))

        assert exc_info.value.errors_by_field() == {
            "product_name": ["Product Name can't be blank"],
            "category": ["Category isn't valid"],
        }
        assert await repo.get_all() == []

    @pytest.mark.asyncio
    async def test_add_product_persistence_failure(self) -> None:
        """A repository returning nothing surfaces as a persistence error."""
        repository = AsyncMock(spec=ProductRepository)
        repository.insert.return_value = None
        service = get_catalog_service(repository)

        with pytest.raises(ProductPersistenceError) as exc_info:
            await service.add_product(widget())

        assert exc_info.value.message == "Error in adding product"


class TestUpdateProduct:
    """Tests for replacing products."""

    @pytest.mark.asyncio
    async def test_update_product(self, service: CatalogService) -> None:
        """Every attribute is replaced."""
        added = await service.add_product(widget())

        updated = await service.update_product(
            ProductUpdateRequest(
                product_id=added.product_id,
                product_name="Gadget",
                category="Accessories",
                unit_price=1.5,
                quantity_in_stock=0,
            )
        )

        assert updated.product_id == added.product_id
        assert updated.product_name == "Gadget"
        assert updated.category == "Accessories"
        assert updated.unit_price == 1.5
        assert updated.quantity_in_stock == 0
        assert await service.get_product(ProductById(added.product_id)) == updated

    @pytest.mark.asyncio
    async def test_update_product_none_request(self, service: CatalogService) -> None:
        with pytest.raises(TypeError):
            await service.update_product(None)  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_update_unknown_product(
        self, service: CatalogService, repo: InMemoryProductRepository
    ) -> None:
        """Unknown IDs are reported before validation and nothing is replaced."""
        repo.replace = AsyncMock(wraps=repo.replace)
        missing_id = uuid4()

        with pytest.raises(ProductNotFoundError) as exc_info:
            await service.update_product(
                ProductUpdateRequest(product_id=missing_id, unit_price=-1)
            )

        assert exc_info.value.product_id == missing_id
        repo.replace.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_without_id_is_not_found(self, service: CatalogService) -> None:
        with pytest.raises(ProductNotFoundError):
            await service.update_product(ProductUpdateRequest(product_name="Widget"))

    @pytest.mark.asyncio
    async def test_update_product_invalid(self, service: CatalogService) -> None:
        """Invalid replacements are rejected and the product is unchanged."""
        added = await service.add_product(widget())

        with pytest.raises(ProductValidationError) as exc_info:
            await service.update_product(
                ProductUpdateRequest(
                    product_id=added.product_id,
                    product_name="Widget",
                    category="Electronics",
                    unit_price=-1,
                    quantity_in_stock=5,
                )
            )

        assert list(exc_info.value.errors_by_field()) == ["unit_price"]
        assert await service.get_product(ProductById(added.product_id)) == added

    @pytest.mark.asyncio
    async def test_update_product_persistence_failure(
        self, service: CatalogService, repo: InMemoryProductRepository
    ) -> None:
        """A repository returning nothing surfaces as a persistence error."""
        added = await service.add_product(widget())
        repo.replace = AsyncMock(return_value=None)

        with pytest.raises(ProductPersistenceError) as exc_info:
            await service.update_product(
                ProductUpdateRequest(
                    product_id=added.product_id,
                    product_name="Widget",
                    category="Electronics",
                    unit_price=2.0,
                    quantity_in_stock=5,
                )
            )

        assert exc_info.value.message == "Error in updating product"


class TestDeleteProduct:
    """Tests for deleting products."""

    @pytest.mark.asyncio
    async def test_delete_product(self, service: CatalogService) -> None:
        """Deleting succeeds once and then reports nothing to delete."""
        added = await service.add_product(widget())

        assert await service.delete_product(added.product_id) is True
        assert await service.get_product(ProductById(added.product_id)) is None
        assert await service.delete_product(added.product_id) is False

    @pytest.mark.asyncio
    async def test_delete_unknown_product(
        self, service: CatalogService, repo: InMemoryProductRepository
    ) -> None:
        """Unknown IDs never reach the repository delete."""
        repo.delete_by_id = AsyncMock(wraps=repo.delete_by_id)

        assert await service.delete_product(uuid4()) is False
        repo.delete_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_leaves_other_products(self, service: CatalogService) -> None:
        keep = await service.add_product(widget(product_name="Keep"))
        drop = await service.add_product(widget(product_name="Drop"))

        await service.delete_product(drop.product_id)

        assert await service.list_products() == [keep]
