# app/domain/ports/product_repository.py
from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models.product import Product, ProductFilter


class ProductRepository(ABC):
    """Puerto para la persistencia del catálogo de productos."""

    @abstractmethod
    def find_by_id(self, product_id: str) -> Optional[Product]:
        pass

    @abstractmethod
    def find_by_code(self, code: str) -> Optional[Product]:
        pass

    @abstractmethod
    def insert(self, product: Product) -> Product:
        pass

    @abstractmethod
    def update(self, product: Product) -> Product:
        pass

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        pass

    @abstractmethod
    def find_by_filter(self, product_filter: ProductFilter, skip: int = 0, limit: Optional[int] = None) -> List[Product]:
        pass

    @abstractmethod
    def count(self, product_filter: ProductFilter) -> int:
        pass
