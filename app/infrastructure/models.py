"""SQLAlchemy models for database tables.

Provides the ORM model for the products table and its conversions
to and from the Product domain entity.
"""

from uuid import uuid4

from sqlalchemy import Column, Float, Integer, String, Uuid

from app.domain.entities import Product
from app.infrastructure.database import Base


# ============================================================================
# Product Models
# ============================================================================


class ProductModel(Base):
    """Product model for database persistence.

    Category is stored as a plain string; the allowed values are
    enforced by request validation.
    """

    __tablename__ = "products"

    product_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    product_name = Column(String(50), nullable=False)
    category = Column(String(50), nullable=False)
    unit_price = Column(Float, nullable=True)
    quantity_in_stock = Column(Integer, nullable=True)

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductModel(product_id={self.product_id}, product_name={self.product_name})>"

    def to_entity(self) -> Product:
        """Convert to Product domain entity.

        Returns:
            Product with the stored attributes.
        """
        return Product(
            id=self.product_id,
            product_name=self.product_name,
            category=self.category,
            unit_price=self.unit_price,
            quantity_in_stock=self.quantity_in_stock,
        )

    def apply(self, product: Product) -> None:
        """Copy every non-identity attribute from a Product.

        Args:
            product: Source entity.
        """
        self.product_name = product.product_name
        self.category = product.category
        self.unit_price = product.unit_price
        self.quantity_in_stock = product.quantity_in_stock

    @classmethod
    def from_entity(cls, product: Product) -> "ProductModel":
        """Create a model from a Product entity.

        Args:
            product: Source entity; identity may be unset.

        Returns:
            New, unsaved model.
        """
        model = cls() if product.id is None else cls(product_id=product.id)
        model.apply(product)
        return model
