# app/application/use_cases/create_invoice.py
import logging
from datetime import datetime, timedelta
from typing import List, Optional

import config
from app.domain.exceptions import ConflictError, NotFoundError, ValidationError
from app.domain.models.invoice import Invoice, InvoiceDraft, InvoiceStatus, LineItem, PaymentMethod
from app.domain.ports.customer_repository import CustomerRepository
from app.domain.ports.invoice_repository import InvoiceRepository
from app.domain.ports.product_repository import ProductRepository
from app.domain.services.invoice_calculator import aggregate_totals, compute_line_item, format_currency
from app.domain.services.invoice_lifecycle import InvoiceLifecycleGuard

logger = logging.getLogger(__name__)


def to_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Las fechas se guardan sin zona horaria, en hora local como datetime.now()."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class CreateInvoiceUseCase:
    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        guard: InvoiceLifecycleGuard,
        due_days: int = config.DEFAULT_DUE_DAYS
    ):
        self.invoice_repo = invoice_repo
        self.customer_repo = customer_repo
        self.product_repo = product_repo
        self.guard = guard
        self.due_days = due_days

    def _build_items(self, draft: InvoiceDraft) -> List[LineItem]:
        items: List[LineItem] = []
        for item in draft.items:
            product = self.product_repo.find_by_id(item.product)
            if not product:
                raise NotFoundError(f"Producto no encontrado: {item.product}")

            line = LineItem(
                product=product.id,
                description=item.description or product.name,
                quantity=item.quantity,
                unit_price=item.unit_price,
                tax_rate=item.tax_rate or 0.0,
                product_code=product.code,
                product_name=product.name,
            )
            items.append(compute_line_item(line))
        return items

    def execute(self, draft: InvoiceDraft) -> Invoice:
        """
        Valida la factura, resuelve cliente y productos, calcula los totales
        y la guarda. Si algo falla no se persiste nada.
        """
        invoice_number = (draft.invoice_number or "").strip()

        # --- PASO 1: Número de factura duplicado ---
        if invoice_number and self.invoice_repo.find_by_invoice_number(invoice_number):
            raise ConflictError("El número de factura ya existe")

        # --- PASO 2: Validación de campos (se reportan todos los errores) ---
        errors = self.guard.validate_creation(draft)
        if errors:
            logger.info(f"[{invoice_number or '-'}] Factura rechazada con {len(errors)} error(es) de validación.")
            raise ValidationError(errors)

        # --- PASO 3: Referencias a cliente y productos ---
        if not self.customer_repo.find_by_id(draft.customer):
            raise NotFoundError("Cliente no encontrado")
        items = self._build_items(draft)

        # --- PASO 4: Totales calculados en el servidor ---
        totals = aggregate_totals(items)
        issue_date = to_local_naive(draft.issue_date) or datetime.now()
        due_date = to_local_naive(draft.due_date) or issue_date + timedelta(days=self.due_days)

        invoice = Invoice(
            invoice_number=invoice_number,
            issue_date=issue_date,
            due_date=due_date,
            customer=draft.customer,
            items=items,
            subtotal=totals.subtotal,
            tax_amount=totals.tax_amount,
            total=totals.total,
            status=InvoiceStatus.EMITIDA,
            payment_method=PaymentMethod(draft.payment_method),
            notes=draft.notes,
        )

        # El índice único de la BD resuelve la carrera entre el PASO 1 y este insert
        saved = self.invoice_repo.insert(invoice)
        logger.info(f"[{saved.invoice_number}] Factura creada con {len(items)} ítem(s), total {format_currency(saved.total)}.")
        return saved
