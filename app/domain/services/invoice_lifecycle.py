# app/domain/services/invoice_lifecycle.py
import math
from typing import Dict, List, Optional

from app.domain.exceptions import DeleteNotAllowedError, TransitionError
from app.domain.models.invoice import Invoice, InvoiceDraft, InvoiceStatus, PaymentMethod

ALLOWED_STATUSES = [status.value for status in InvoiceStatus]
ALLOWED_PAYMENT_METHODS = [method.value for method in PaymentMethod]

# Solo se consulta en modo estricto
STRICT_TRANSITIONS = {
    InvoiceStatus.EMITIDA: {InvoiceStatus.PAGADA, InvoiceStatus.CANCELADA},
    InvoiceStatus.PAGADA: set(),
    InvoiceStatus.CANCELADA: set(),
}


class InvoiceLifecycleGuard:
    """
    Reglas de validación y de ciclo de vida de una factura: qué datos hacen
    falta para crearla, a qué estados puede pasar y cuándo se puede borrar.

    En modo permisivo (el de por defecto) cualquiera de los tres estados se
    acepta desde cualquier estado actual. Con `strict=True` se aplica la
    tabla STRICT_TRANSITIONS.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def validate_creation(self, draft: InvoiceDraft) -> List[Dict[str, str]]:
        """
        Revisa todos los campos y devuelve la lista completa de errores
        (vacía si todo es correcto). No consulta la base de datos.
        """
        errors: List[Dict[str, str]] = []

        if not draft.invoice_number or not draft.invoice_number.strip():
            errors.append({"field": "invoiceNumber", "message": "El número de factura es obligatorio"})
        if not draft.customer:
            errors.append({"field": "customer", "message": "El cliente es obligatorio"})
        if draft.payment_method not in ALLOWED_PAYMENT_METHODS:
            errors.append({"field": "paymentMethod", "message": "Método de pago no válido"})

        if not draft.items:
            errors.append({"field": "items", "message": "Debe incluir al menos un ítem"})

        for index, item in enumerate(draft.items):
            prefix = f"items[{index}]"
            if not item.product:
                errors.append({"field": f"{prefix}.product", "message": "El producto es obligatorio"})
            if item.quantity is None or not math.isfinite(item.quantity):
                errors.append({"field": f"{prefix}.quantity", "message": "La cantidad debe ser un número"})
            elif item.quantity < 1:
                errors.append({"field": f"{prefix}.quantity", "message": "La cantidad debe ser al menos 1"})
            if item.unit_price is None or not math.isfinite(item.unit_price):
                errors.append({"field": f"{prefix}.unitPrice", "message": "El precio unitario debe ser un número"})
            elif item.unit_price < 0:
                errors.append({"field": f"{prefix}.unitPrice", "message": "El precio unitario no puede ser negativo"})
            if item.tax_rate is not None and not math.isfinite(item.tax_rate):
                errors.append({"field": f"{prefix}.taxRate", "message": "La tasa de impuesto debe ser un número"})
            elif item.tax_rate is not None and item.tax_rate < 0:
                errors.append({"field": f"{prefix}.taxRate", "message": "La tasa de impuesto no puede ser negativa"})

        return errors

    def parse_status(self, status: Optional[str]) -> InvoiceStatus:
        if status not in ALLOWED_STATUSES:
            raise TransitionError("Estado de factura no válido")
        return InvoiceStatus(status)

    def check_transition(self, invoice: Invoice, status: Optional[str]) -> InvoiceStatus:
        """Valida el estado destino y devuelve el valor ya convertido."""
        target = self.parse_status(status)
        if self.strict and target != invoice.status and target not in STRICT_TRANSITIONS[invoice.status]:
            raise TransitionError(
                f"No se puede pasar una factura de '{invoice.status.value}' a '{target.value}'"
            )
        return target

    def check_deletable(self, invoice: Invoice) -> None:
        if invoice.status != InvoiceStatus.CANCELADA:
            raise DeleteNotAllowedError("Solo se pueden eliminar facturas canceladas")
