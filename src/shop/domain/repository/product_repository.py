"""Abstract repository for the Product aggregate (the catalog store).

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live
elsewhere and are passed in explicitly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique product ID."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product.

        Raises ConcurrentModificationError if the stored version differs
        from ``product.version``; on success the version is bumped.
        """

    @abstractmethod
    def save_all(self, products: list[Product]) -> None:
        """Persist several products at once, all-or-nothing.

        Every version is checked before anything is written.
        """
