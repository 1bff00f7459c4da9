# app/infrastructure/api/routers/products_router.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

import config
from app.application.use_cases.manage_products import ManageProductsUseCase
from app.domain.models.product import ProductFilter
from app.infrastructure.api.dependencies import get_current_user, get_invoice_repository, get_product_repository
from app.infrastructure.api.schemas.common import MessageResponse, PaginationResponse
from app.infrastructure.api.schemas.product_schemas import (
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
)
from app.infrastructure.persistence.invoice_repository_adapter import SQLAlchemyInvoiceRepository
from app.infrastructure.persistence.product_repository_adapter import SQLAlchemyProductRepository

router = APIRouter(
    prefix=f"{config.API_PREFIX}/products",
    tags=["Productos"],
    dependencies=[Depends(get_current_user)]
)


def get_use_case(
    product_repo: SQLAlchemyProductRepository = Depends(get_product_repository),
    invoice_repo: SQLAlchemyInvoiceRepository = Depends(get_invoice_repository),
) -> ManageProductsUseCase:
    return ManageProductsUseCase(product_repo, invoice_repo)


@router.post("", status_code=201, response_model=ProductResponse, summary="Crear un producto")
def create_product(payload: ProductCreateRequest, use_case: ManageProductsUseCase = Depends(get_use_case)):
    return ProductResponse.from_domain(use_case.create(payload.to_domain()))


@router.get("", response_model=ProductListResponse, summary="Listar productos")
def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(config.DEFAULT_PAGE_SIZE, ge=1, le=config.MAX_PAGE_SIZE),
    active: Optional[bool] = Query(None),
    category: Optional[str] = Query(None),
    search: Optional[str] = Query(None, description="Busca en nombre y código"),
    use_case: ManageProductsUseCase = Depends(get_use_case),
):
    product_filter = ProductFilter(active=active, category=category, search=search)
    products, pagination = use_case.list(product_filter, page, limit)
    return ProductListResponse(
        products=[ProductResponse.from_domain(product) for product in products],
        pagination=PaginationResponse.model_validate(pagination.model_dump()),
    )


@router.get("/{product_id}", response_model=ProductResponse, summary="Obtener un producto")
def get_product(product_id: str, use_case: ManageProductsUseCase = Depends(get_use_case)):
    return ProductResponse.from_domain(use_case.get(product_id))


@router.put("/{product_id}", response_model=ProductResponse, summary="Actualizar un producto")
def update_product(
    product_id: str,
    payload: ProductUpdateRequest,
    use_case: ManageProductsUseCase = Depends(get_use_case),
):
    changes = payload.model_dump(exclude_unset=True)
    return ProductResponse.from_domain(use_case.update(product_id, changes))


@router.delete("/{product_id}", response_model=MessageResponse, summary="Eliminar un producto")
def delete_product(product_id: str, use_case: ManageProductsUseCase = Depends(get_use_case)):
    use_case.delete(product_id)
    return MessageResponse(message="Producto eliminado correctamente")
