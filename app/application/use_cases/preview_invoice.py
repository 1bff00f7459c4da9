# app/application/use_cases/preview_invoice.py
from typing import List, Tuple

from app.domain.models.invoice import InvoiceTotals, LineItem, LineItemDraft
from app.domain.services.invoice_calculator import aggregate_totals, calculate_line_item


class PreviewInvoiceUseCase:
    """
    Calcula los totales de una factura que se está editando, sin validar ni
    guardar nada. Usa las mismas funciones que la creación, así lo que ve el
    usuario coincide con lo que se guarda.
    """

    def execute(self, drafts: List[LineItemDraft]) -> Tuple[List[LineItem], InvoiceTotals]:
        items = []
        for draft in drafts:
            totals = calculate_line_item(draft.quantity, draft.unit_price, draft.tax_rate)
            items.append(LineItem(
                product=draft.product or "",
                description=draft.description or "",
                quantity=draft.quantity or 0.0,
                unit_price=draft.unit_price or 0.0,
                tax_rate=draft.tax_rate or 0.0,
                **totals.model_dump()
            ))
        return items, aggregate_totals(items)
