# app/infrastructure/api/routers/customers_router.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

import config
from app.application.use_cases.manage_customers import ManageCustomersUseCase
from app.domain.models.customer import CustomerFilter
from app.infrastructure.api.dependencies import get_current_user, get_customer_repository, get_invoice_repository
from app.infrastructure.api.schemas.common import MessageResponse, PaginationResponse
from app.infrastructure.api.schemas.customer_schemas import (
    CustomerCreateRequest,
    CustomerListResponse,
    CustomerResponse,
    CustomerUpdateRequest,
)
from app.infrastructure.persistence.customer_repository_adapter import SQLAlchemyCustomerRepository
from app.infrastructure.persistence.invoice_repository_adapter import SQLAlchemyInvoiceRepository

router = APIRouter(
    prefix=f"{config.API_PREFIX}/customers",
    tags=["Clientes"],
    dependencies=[Depends(get_current_user)]
)


def get_use_case(
    customer_repo: SQLAlchemyCustomerRepository = Depends(get_customer_repository),
    invoice_repo: SQLAlchemyInvoiceRepository = Depends(get_invoice_repository),
) -> ManageCustomersUseCase:
    return ManageCustomersUseCase(customer_repo, invoice_repo)


@router.post("", status_code=201, response_model=CustomerResponse, summary="Crear un cliente")
def create_customer(payload: CustomerCreateRequest, use_case: ManageCustomersUseCase = Depends(get_use_case)):
    return CustomerResponse.from_domain(use_case.create(payload.to_domain()))


@router.get("", response_model=CustomerListResponse, summary="Listar clientes")
def list_customers(
    page: int = Query(1, ge=1),
    limit: int = Query(config.DEFAULT_PAGE_SIZE, ge=1, le=config.MAX_PAGE_SIZE),
    active: Optional[bool] = Query(None),
    search: Optional[str] = Query(None, description="Busca en nombre, identificación fiscal y correo"),
    use_case: ManageCustomersUseCase = Depends(get_use_case),
):
    customers, pagination = use_case.list(CustomerFilter(active=active, search=search), page, limit)
    return CustomerListResponse(
        customers=[CustomerResponse.from_domain(customer) for customer in customers],
        pagination=PaginationResponse.model_validate(pagination.model_dump()),
    )


@router.get("/{customer_id}", response_model=CustomerResponse, summary="Obtener un cliente")
def get_customer(customer_id: str, use_case: ManageCustomersUseCase = Depends(get_use_case)):
    return CustomerResponse.from_domain(use_case.get(customer_id))


@router.put("/{customer_id}", response_model=CustomerResponse, summary="Actualizar un cliente")
def update_customer(
    customer_id: str,
    payload: CustomerUpdateRequest,
    use_case: ManageCustomersUseCase = Depends(get_use_case),
):
    return CustomerResponse.from_domain(use_case.update(customer_id, payload.to_changes()))


@router.delete("/{customer_id}", response_model=MessageResponse, summary="Eliminar un cliente")
def delete_customer(customer_id: str, use_case: ManageCustomersUseCase = Depends(get_use_case)):
    use_case.delete(customer_id)
    return MessageResponse(message="Cliente eliminado correctamente")
