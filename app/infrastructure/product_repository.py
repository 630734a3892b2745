"""Product repository implementations.

Provides the SQLAlchemy-backed repository used in production and an
in-memory repository used by tests and the ``memory`` backend.
"""

import dataclasses
from collections.abc import Sequence
from typing import Any
from uuid import UUID, uuid4

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities import Product
from app.domain.queries import (
    AllProducts,
    CategoryContains,
    ProductById,
    ProductNameContains,
    ProductQuery,
)
from app.domain.repositories import ProductRepository
from app.infrastructure.models import ProductModel

logger = structlog.get_logger()


# ============================================================================
# SQLAlchemy Repository
# ============================================================================


class SqlAlchemyProductRepository(ProductRepository):
    """Repository for Product database operations.

    Writes are flushed inside the caller's session; committing is left
    to the session owner.

    Example usage:
        async with async_session_factory() as session:
            repo = SqlAlchemyProductRepository(session)
            products = await repo.get_many(CategoryContains("elect"))
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def get_all(self) -> Sequence[Product]:
        return await self.get_many(AllProducts())

    async def get_many(self, query: ProductQuery) -> Sequence[Product]:
        result = await self.session.execute(self._select(query))
        return [model.to_entity() for model in result.scalars().all()]

    async def get_one(self, query: ProductQuery) -> Product | None:
        result = await self.session.execute(self._select(query).limit(1))
        model = result.scalars().first()
        return model.to_entity() if model is not None else None

    async def insert(self, product: Product) -> Product | None:
        model = ProductModel.from_entity(product)
        try:
            self.session.add(model)
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.exception("Failed to insert product", error=str(e))
            await self.session.rollback()
            return None
        return model.to_entity()

    async def replace(self, product: Product) -> Product | None:
        try:
            model = await self.session.get(ProductModel, product.id)
            if model is None:
                return None
            model.apply(product)
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.exception(
                "Failed to replace product",
                product_id=str(product.id),
                error=str(e),
            )
            await self.session.rollback()
            return None
        return model.to_entity()

    async def delete_by_id(self, product_id: UUID) -> bool:
        try:
            result = await self.session.execute(
                delete(ProductModel).where(ProductModel.product_id == product_id)
            )
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.exception(
                "Failed to delete product",
                product_id=str(product_id),
                error=str(e),
            )
            await self.session.rollback()
            return False
        return result.rowcount > 0

    def _select(self, query: ProductQuery) -> Any:
        """Build a SELECT statement for a query specification.

        Args:
            query: Query specification.

        Returns:
            SQLAlchemy select statement.
        """
        statement = select(ProductModel)

        if isinstance(query, AllProducts):
            return statement
        if isinstance(query, ProductById):
            return statement.where(ProductModel.product_id == query.product_id)
        if isinstance(query, ProductNameContains):
            return statement.where(
                ProductModel.product_name.icontains(query.text, autoescape=True)
            )
        if isinstance(query, CategoryContains):
            return statement.where(
                ProductModel.category.icontains(query.text, autoescape=True)
            )

        raise TypeError(f"Unsupported product query: {query!r}")


# ============================================================================
# In-Memory Repository
# ============================================================================


class InMemoryProductRepository(ProductRepository):
    """In-memory repository for products.

    Keeps insertion order and stores copies, so entities handed out
    can be changed by callers without touching stored state.
    """

    def __init__(self) -> None:
        self._products: dict[UUID, Product] = {}

    async def get_all(self) -> Sequence[Product]:
        return [dataclasses.replace(p) for p in self._products.values()]

    async def get_many(self, query: ProductQuery) -> Sequence[Product]:
        return [dataclasses.replace(p) for p in self._products.values() if query.matches(p)]

    async def get_one(self, query: ProductQuery) -> Product | None:
        for product in self._products.values():
            if query.matches(product):
                return dataclasses.replace(product)
        return None

    async def insert(self, product: Product) -> Product | None:
        stored = dataclasses.replace(product, id=uuid4())
        self._products[stored.id] = stored
        return dataclasses.replace(stored)

    async def replace(self, product: Product) -> Product | None:
        if product.id is None or product.id not in self._products:
            return None
        stored = dataclasses.replace(product)
        self._products[product.id] = stored
        return dataclasses.replace(stored)

    async def delete_by_id(self, product_id: UUID) -> bool:
        return self._products.pop(product_id, None) is not None


# Global repository instance for the memory backend
_memory_repo: InMemoryProductRepository | None = None


def get_memory_repository() -> InMemoryProductRepository:
    """Get in-memory product repository singleton."""
    global _memory_repo
    if _memory_repo is None:
        _memory_repo = InMemoryProductRepository()
    return _memory_repo


def reset_memory_repository() -> None:
    """Drop the in-memory repository singleton."""
    global _memory_repo
    _memory_repo = None
