# app/infrastructure/api/schemas/invoice_schemas.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from app.domain.models.invoice import Invoice, InvoiceDraft, InvoiceStatus, LineItemDraft, PaymentMethod
from app.domain.services.invoice_calculator import to_number
from .common import CamelModel, PaginationResponse


# --- Peticiones ---

class LineItemRequest(CamelModel):
    product: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[float] = None
    unit_price: Optional[float] = None
    tax_rate: Optional[float] = 0.0

    def to_draft(self) -> LineItemDraft:
        return LineItemDraft(**self.model_dump())


class InvoiceCreateRequest(CamelModel):
    """
    Los totales que mande el cliente (subtotal, taxAmount, total) se ignoran:
    el servidor los recalcula siempre.
    """
    invoice_number: str = ""
    customer: Optional[str] = None
    items: List[LineItemRequest] = Field(default_factory=list)
    payment_method: Optional[str] = PaymentMethod.EFECTIVO.value
    issue_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    notes: Optional[str] = None

    def to_draft(self) -> InvoiceDraft:
        data = self.model_dump(exclude={"items"})
        return InvoiceDraft(**data, items=[item.to_draft() for item in self.items])


class LineItemPreviewRequest(CamelModel):
    """
    Ítem de la vista previa. Los números se aceptan como lleguen: lo que no sea
    numérico (vacío, texto, NaN, infinito) cuenta como 0, igual que en el
    formulario mientras se edita.
    """
    product: Optional[str] = None
    description: Optional[str] = None
    quantity: Any = None
    unit_price: Any = None
    tax_rate: Any = None

    def to_draft(self) -> LineItemDraft:
        return LineItemDraft(
            product=self.product,
            description=self.description,
            quantity=to_number(self.quantity),
            unit_price=to_number(self.unit_price),
            tax_rate=to_number(self.tax_rate),
        )


class InvoiceCalculateRequest(CamelModel):
    items: List[LineItemPreviewRequest] = Field(default_factory=list)


class InvoiceStatusRequest(CamelModel):
    status: Optional[str] = None


# --- Respuestas ---

class LineItemResponse(CamelModel):
    product: str
    product_code: Optional[str] = None
    product_name: Optional[str] = None
    description: str
    quantity: float
    unit_price: float
    tax_rate: float
    subtotal: float
    tax_amount: float
    total: float


class CustomerSummaryResponse(CamelModel):
    id: str = Field(alias="_id")
    name: str
    tax_id: str
    email: str


class InvoiceResponse(CamelModel):
    id: str = Field(alias="_id")
    invoice_number: str
    issue_date: datetime
    due_date: datetime
    customer: str
    customer_info: Optional[CustomerSummaryResponse] = None
    items: List[LineItemResponse]
    subtotal: float
    tax_amount: float
    total: float
    status: InvoiceStatus
    payment_method: PaymentMethod
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, invoice: Invoice) -> "InvoiceResponse":
        return cls.model_validate(invoice.model_dump())


class InvoiceListResponse(CamelModel):
    invoices: List[InvoiceResponse]
    pagination: PaginationResponse


class InvoiceCalculateResponse(CamelModel):
    items: List[LineItemResponse]
    subtotal: float
    tax_amount: float
    total: float


class InvoiceStatusResponse(CamelModel):
    message: str
    invoice: InvoiceResponse


class InvoiceReportSummaryResponse(CamelModel):
    count: int
    total_amount: float
    total_tax: float
    total_subtotal: float
    by_status: Dict[str, int]


class InvoiceReportResponse(CamelModel):
    invoices: List[InvoiceResponse]
    summary: InvoiceReportSummaryResponse
