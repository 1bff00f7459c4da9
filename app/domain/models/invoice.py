# app/domain/models/invoice.py
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from datetime import datetime


class InvoiceStatus(str, Enum):
    EMITIDA = "emitida"
    PAGADA = "pagada"
    CANCELADA = "cancelada"


class PaymentMethod(str, Enum):
    EFECTIVO = "efectivo"
    TARJETA = "tarjeta"
    TRANSFERENCIA = "transferencia"
    CHEQUE = "cheque"
    OTRO = "otro"


class InvoiceTotals(BaseModel):
    """Subtotal, impuesto y total, ya sea de un ítem o de la factura completa."""
    subtotal: float = 0.0
    tax_amount: float = 0.0
    total: float = 0.0


class LineItem(BaseModel):
    """
    Una fila de la factura. Los campos subtotal, tax_amount y total se derivan
    siempre de quantity, unit_price y tax_rate; nunca se aceptan del cliente.
    """
    product: str
    description: str = ""
    quantity: float
    unit_price: float
    tax_rate: float = 0.0

    # --- Campos derivados ---
    subtotal: float = 0.0
    tax_amount: float = 0.0
    total: float = 0.0

    # --- Datos del producto, solo de lectura ---
    product_code: Optional[str] = None
    product_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CustomerSummary(BaseModel):
    id: str
    name: str
    tax_id: str
    email: str


class Invoice(BaseModel):
    """
    Raíz del agregado factura. Los totales son la suma de los totales de sus
    ítems y los calcula el servidor antes de guardarla.
    """
    id: Optional[str] = None
    invoice_number: str
    issue_date: datetime
    due_date: datetime
    customer: str
    items: List[LineItem]
    subtotal: float = 0.0
    tax_amount: float = 0.0
    total: float = 0.0
    status: InvoiceStatus = InvoiceStatus.EMITIDA
    payment_method: PaymentMethod = PaymentMethod.EFECTIVO
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Se rellena al leer desde la base de datos
    customer_info: Optional[CustomerSummary] = None

    model_config = ConfigDict(from_attributes=True)


class LineItemDraft(BaseModel):
    """Ítem tal como llega del cliente, todavía sin validar."""
    product: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[float] = None
    unit_price: Optional[float] = None
    tax_rate: Optional[float] = 0.0


class InvoiceDraft(BaseModel):
    """Datos de entrada para crear una factura, todavía sin validar."""
    invoice_number: str = ""
    customer: Optional[str] = None
    items: List[LineItemDraft] = Field(default_factory=list)
    payment_method: Optional[str] = PaymentMethod.EFECTIVO.value
    issue_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    notes: Optional[str] = None


class InvoiceFilter(BaseModel):
    status: Optional[str] = None
    customer: Optional[str] = None
    from_date: Optional[datetime] = None
    to_date: Optional[datetime] = None


class InvoiceReportSummary(BaseModel):
    count: int
    total_amount: float
    total_tax: float
    total_subtotal: float
    by_status: dict
