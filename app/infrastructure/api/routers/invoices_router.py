# app/infrastructure/api/routers/invoices_router.py
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

import config
from app.application.use_cases.create_invoice import CreateInvoiceUseCase, to_local_naive
from app.application.use_cases.delete_invoice import DeleteInvoiceUseCase
from app.application.use_cases.preview_invoice import PreviewInvoiceUseCase
from app.application.use_cases.query_invoices import GetInvoiceUseCase, InvoiceReportUseCase, ListInvoicesUseCase
from app.application.use_cases.update_invoice_status import UpdateInvoiceStatusUseCase
from app.domain.models.invoice import InvoiceFilter
from app.domain.models.user import User
from app.domain.services.invoice_lifecycle import InvoiceLifecycleGuard
from app.infrastructure.api.dependencies import (
    get_current_user,
    get_customer_repository,
    get_invoice_repository,
    get_lifecycle_guard,
    get_product_repository,
    require_admin,
)
from app.infrastructure.api.schemas.common import MessageResponse, PaginationResponse
from app.infrastructure.api.schemas.invoice_schemas import (
    InvoiceCalculateRequest,
    InvoiceCalculateResponse,
    InvoiceCreateRequest,
    InvoiceListResponse,
    InvoiceReportResponse,
    InvoiceReportSummaryResponse,
    InvoiceResponse,
    InvoiceStatusRequest,
    InvoiceStatusResponse,
    LineItemResponse,
)
from app.infrastructure.persistence.customer_repository_adapter import SQLAlchemyCustomerRepository
from app.infrastructure.persistence.invoice_repository_adapter import SQLAlchemyInvoiceRepository
from app.infrastructure.persistence.product_repository_adapter import SQLAlchemyProductRepository

router = APIRouter(
    prefix=f"{config.API_PREFIX}/invoices",
    tags=["Facturas"],
    dependencies=[Depends(get_current_user)]
)


def _build_filter(
    status: Optional[str] = Query(None, description="emitida, pagada o cancelada"),
    customer: Optional[str] = Query(None, description="ID del cliente"),
    from_date: Optional[datetime] = Query(None, alias="fromDate"),
    to_date: Optional[datetime] = Query(None, alias="toDate"),
) -> InvoiceFilter:
    return InvoiceFilter(
        status=status,
        customer=customer,
        from_date=to_local_naive(from_date),
        to_date=to_local_naive(to_date),
    )


@router.post("", status_code=201, response_model=InvoiceResponse, summary="Crear una nueva factura")
def create_invoice(
    payload: InvoiceCreateRequest,
    invoice_repo: SQLAlchemyInvoiceRepository = Depends(get_invoice_repository),
    customer_repo: SQLAlchemyCustomerRepository = Depends(get_customer_repository),
    product_repo: SQLAlchemyProductRepository = Depends(get_product_repository),
    guard: InvoiceLifecycleGuard = Depends(get_lifecycle_guard),
):
    """
    Crea la factura en estado 'emitida'. Subtotal, impuestos y total se
    calculan en el servidor; los que envíe el cliente se ignoran.
    """
    use_case = CreateInvoiceUseCase(invoice_repo, customer_repo, product_repo, guard)
    return InvoiceResponse.from_domain(use_case.execute(payload.to_draft()))


@router.post("/calculate", response_model=InvoiceCalculateResponse, summary="Calcular totales sin guardar")
def calculate_invoice(payload: InvoiceCalculateRequest):
    items, totals = PreviewInvoiceUseCase().execute([item.to_draft() for item in payload.items])
    return InvoiceCalculateResponse(
        items=[LineItemResponse.model_validate(item.model_dump()) for item in items],
        **totals.model_dump()
    )


@router.get("", response_model=InvoiceListResponse, summary="Listar facturas")
def list_invoices(
    invoice_filter: InvoiceFilter = Depends(_build_filter),
    page: int = Query(1, ge=1),
    limit: int = Query(config.DEFAULT_PAGE_SIZE, ge=1, le=config.MAX_PAGE_SIZE),
    invoice_repo: SQLAlchemyInvoiceRepository = Depends(get_invoice_repository),
):
    invoices, pagination = ListInvoicesUseCase(invoice_repo).execute(invoice_filter, page, limit)
    return InvoiceListResponse(
        invoices=[InvoiceResponse.from_domain(invoice) for invoice in invoices],
        pagination=PaginationResponse.model_validate(pagination.model_dump()),
    )


@router.get("/report", response_model=InvoiceReportResponse, summary="Reporte de facturas")
def invoice_report(
    invoice_filter: InvoiceFilter = Depends(_build_filter),
    invoice_repo: SQLAlchemyInvoiceRepository = Depends(get_invoice_repository),
):
    invoices, summary = InvoiceReportUseCase(invoice_repo).execute(invoice_filter)
    return InvoiceReportResponse(
        invoices=[InvoiceResponse.from_domain(invoice) for invoice in invoices],
        summary=InvoiceReportSummaryResponse.model_validate(summary.model_dump()),
    )


@router.get("/{invoice_id}", response_model=InvoiceResponse, summary="Obtener una factura")
def get_invoice(
    invoice_id: str,
    invoice_repo: SQLAlchemyInvoiceRepository = Depends(get_invoice_repository),
):
    return InvoiceResponse.from_domain(GetInvoiceUseCase(invoice_repo).execute(invoice_id))


@router.patch("/{invoice_id}/status", response_model=InvoiceStatusResponse, summary="Cambiar el estado de una factura")
def update_invoice_status(
    invoice_id: str,
    payload: InvoiceStatusRequest,
    invoice_repo: SQLAlchemyInvoiceRepository = Depends(get_invoice_repository),
    guard: InvoiceLifecycleGuard = Depends(get_lifecycle_guard),
):
    invoice = UpdateInvoiceStatusUseCase(invoice_repo, guard).execute(invoice_id, payload.status)
    return InvoiceStatusResponse(
        message="Estado de factura actualizado",
        invoice=InvoiceResponse.from_domain(invoice),
    )


@router.delete("/{invoice_id}", response_model=MessageResponse, summary="Eliminar una factura cancelada")
def delete_invoice(
    invoice_id: str,
    invoice_repo: SQLAlchemyInvoiceRepository = Depends(get_invoice_repository),
    guard: InvoiceLifecycleGuard = Depends(get_lifecycle_guard),
    admin: User = Depends(require_admin),
):
    DeleteInvoiceUseCase(invoice_repo, guard).execute(invoice_id)
    return MessageResponse(message="Factura eliminada correctamente")
