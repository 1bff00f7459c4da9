# app/domain/ports/invoice_repository.py
from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models.invoice import Invoice, InvoiceFilter, InvoiceStatus


class InvoiceRepository(ABC):
    """
    Contrato de persistencia de facturas. Los totales llegan ya calculados:
    el adaptador no los recalcula ni los valida.
    """

    @abstractmethod
    def find_by_id(self, invoice_id: str) -> Optional[Invoice]:
        pass

    @abstractmethod
    def find_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        pass

    @abstractmethod
    def insert(self, invoice: Invoice) -> Invoice:
        """
        Guarda la factura con sus ítems y la devuelve con su ID. Si el número
        de factura ya existe lanza ConflictError (índice único en la BD).
        """
        pass

    @abstractmethod
    def update_status(self, invoice_id: str, status: InvoiceStatus) -> Optional[Invoice]:
        pass

    @abstractmethod
    def delete(self, invoice_id: str) -> bool:
        pass

    @abstractmethod
    def find_by_filter(self, invoice_filter: InvoiceFilter, skip: int = 0, limit: Optional[int] = None) -> List[Invoice]:
        """Facturas que cumplen el filtro, de la más reciente a la más antigua."""
        pass

    @abstractmethod
    def count(self, invoice_filter: InvoiceFilter) -> int:
        pass

    @abstractmethod
    def count_by_customer(self, customer_id: str) -> int:
        pass

    @abstractmethod
    def count_by_product(self, product_id: str) -> int:
        pass
