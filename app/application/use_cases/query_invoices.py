# app/application/use_cases/query_invoices.py
from typing import List, Tuple

from app.domain.exceptions import NotFoundError
from app.domain.models.common import Pagination, build_pagination, page_to_skip
from app.domain.models.invoice import Invoice, InvoiceFilter, InvoiceReportSummary, InvoiceStatus
from app.domain.ports.invoice_repository import InvoiceRepository


class GetInvoiceUseCase:
    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    def execute(self, invoice_id: str) -> Invoice:
        invoice = self.invoice_repo.find_by_id(invoice_id)
        if not invoice:
            raise NotFoundError("Factura no encontrada")
        return invoice


class ListInvoicesUseCase:
    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    def execute(self, invoice_filter: InvoiceFilter, page: int, limit: int) -> Tuple[List[Invoice], Pagination]:
        total = self.invoice_repo.count(invoice_filter)
        invoices = self.invoice_repo.find_by_filter(invoice_filter, skip=page_to_skip(page, limit), limit=limit)
        return invoices, build_pagination(total, page, limit)


class InvoiceReportUseCase:
    """
    Reporte de facturas por fechas y estado: la lista completa más los
    totales acumulados y el conteo por estado.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    def execute(self, invoice_filter: InvoiceFilter) -> Tuple[List[Invoice], InvoiceReportSummary]:
        invoices = self.invoice_repo.find_by_filter(invoice_filter)

        by_status = {status.value: 0 for status in InvoiceStatus}
        for invoice in invoices:
            by_status[invoice.status.value] += 1

        summary = InvoiceReportSummary(
            count=len(invoices),
            total_amount=sum(invoice.total for invoice in invoices),
            total_tax=sum(invoice.tax_amount for invoice in invoices),
            total_subtotal=sum(invoice.subtotal for invoice in invoices),
            by_status=by_status,
        )
        return invoices, summary
