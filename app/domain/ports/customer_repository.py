# app/domain/ports/customer_repository.py
from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models.customer import Customer, CustomerFilter


class CustomerRepository(ABC):
    """Puerto para la persistencia de clientes."""

    @abstractmethod
    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        pass

    @abstractmethod
    def find_by_tax_id(self, tax_id: str) -> Optional[Customer]:
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Customer]:
        pass

    @abstractmethod
    def insert(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    def update(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    def delete(self, customer_id: str) -> bool:
        pass

    @abstractmethod
    def find_by_filter(self, customer_filter: CustomerFilter, skip: int = 0, limit: Optional[int] = None) -> List[Customer]:
        pass

    @abstractmethod
    def count(self, customer_filter: CustomerFilter) -> int:
        pass
