# app/application/use_cases/update_invoice_status.py
import logging
from typing import Optional

from app.domain.exceptions import NotFoundError
from app.domain.models.invoice import Invoice
from app.domain.ports.invoice_repository import InvoiceRepository
from app.domain.services.invoice_lifecycle import InvoiceLifecycleGuard

logger = logging.getLogger(__name__)


class UpdateInvoiceStatusUseCase:
    def __init__(self, invoice_repo: InvoiceRepository, guard: InvoiceLifecycleGuard):
        self.invoice_repo = invoice_repo
        self.guard = guard

    def execute(self, invoice_id: str, status: Optional[str]) -> Invoice:
        # El estado se valida antes de buscar la factura: un valor fuera de la
        # lista nunca llega a tocar la base de datos.
        self.guard.parse_status(status)

        invoice = self.invoice_repo.find_by_id(invoice_id)
        if not invoice:
            raise NotFoundError("Factura no encontrada")

        target = self.guard.check_transition(invoice, status)
        updated = self.invoice_repo.update_status(invoice_id, target)
        if not updated:
            raise NotFoundError("Factura no encontrada")

        logger.info(f"[{invoice.invoice_number}] Estado actualizado: {invoice.status.value} -> {target.value}.")
        return updated
