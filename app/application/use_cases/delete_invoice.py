# app/application/use_cases/delete_invoice.py
import logging

from app.domain.exceptions import NotFoundError
from app.domain.ports.invoice_repository import InvoiceRepository
from app.domain.services.invoice_lifecycle import InvoiceLifecycleGuard

logger = logging.getLogger(__name__)


class DeleteInvoiceUseCase:
    """Solo las facturas canceladas se pueden eliminar."""

    def __init__(self, invoice_repo: InvoiceRepository, guard: InvoiceLifecycleGuard):
        self.invoice_repo = invoice_repo
        self.guard = guard

    def execute(self, invoice_id: str) -> None:
        invoice = self.invoice_repo.find_by_id(invoice_id)
        if not invoice:
            raise NotFoundError("Factura no encontrada")

        self.guard.check_deletable(invoice)

        if not self.invoice_repo.delete(invoice_id):
            raise NotFoundError("Factura no encontrada")
        logger.info(f"[{invoice.invoice_number}] Factura eliminada.")
