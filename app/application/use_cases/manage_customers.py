# app/application/use_cases/manage_customers.py
import logging
from typing import Any, Dict, List, Tuple

from app.domain.exceptions import ConflictError, InUseError, NotFoundError
from app.domain.models.common import Pagination, build_pagination, page_to_skip
from app.domain.models.customer import Customer, CustomerFilter
from app.domain.ports.customer_repository import CustomerRepository
from app.domain.ports.invoice_repository import InvoiceRepository

logger = logging.getLogger(__name__)


class ManageCustomersUseCase:
    """Alta, consulta, modificación y baja de clientes."""

    def __init__(self, customer_repo: CustomerRepository, invoice_repo: InvoiceRepository):
        self.customer_repo = customer_repo
        self.invoice_repo = invoice_repo

    def create(self, customer: Customer) -> Customer:
        customer = customer.model_copy(update={"email": customer.email.strip().lower()})
        if self.customer_repo.find_by_tax_id(customer.tax_id):
            raise ConflictError("La identificación fiscal ya está registrada")
        if self.customer_repo.find_by_email(customer.email):
            raise ConflictError("El correo electrónico ya está registrado")

        saved = self.customer_repo.insert(customer)
        logger.info(f"[{saved.tax_id}] Cliente creado.")
        return saved

    def list(self, customer_filter: CustomerFilter, page: int, limit: int) -> Tuple[List[Customer], Pagination]:
        total = self.customer_repo.count(customer_filter)
        customers = self.customer_repo.find_by_filter(customer_filter, skip=page_to_skip(page, limit), limit=limit)
        return customers, build_pagination(total, page, limit)

    def get(self, customer_id: str) -> Customer:
        customer = self.customer_repo.find_by_id(customer_id)
        if not customer:
            raise NotFoundError("Cliente no encontrado")
        return customer

    def update(self, customer_id: str, changes: Dict[str, Any]) -> Customer:
        """
        Aplica solo los campos recibidos. La dirección se mezcla campo a campo
        con la que ya tenía el cliente. La identificación fiscal no cambia.
        """
        customer = self.get(customer_id)
        changes = dict(changes)
        changes.pop("tax_id", None)

        if not changes.get("name"):
            changes.pop("name", None)
        email = changes.pop("email", None)
        if email:
            email = email.strip().lower()
            if email != customer.email and self.customer_repo.find_by_email(email):
                raise ConflictError("El correo electrónico ya está registrado")
            changes["email"] = email

        address_changes = changes.pop("address", None)
        if address_changes:
            changes["address"] = customer.address.model_copy(update=address_changes)
        if changes.get("active") is None:
            changes.pop("active", None)

        return self.customer_repo.update(customer.model_copy(update=changes))

    def delete(self, customer_id: str) -> None:
        customer = self.get(customer_id)
        if self.invoice_repo.count_by_customer(customer_id):
            raise InUseError("No se puede eliminar el cliente porque tiene facturas asociadas")
        self.customer_repo.delete(customer_id)
        logger.info(f"[{customer.tax_id}] Cliente eliminado.")
