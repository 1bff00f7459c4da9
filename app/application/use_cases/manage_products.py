# app/application/use_cases/manage_products.py
import logging
from typing import Any, Dict, List, Tuple

from app.domain.exceptions import ConflictError, InUseError, NotFoundError
from app.domain.models.common import Pagination, build_pagination, page_to_skip
from app.domain.models.product import Product, ProductFilter
from app.domain.ports.invoice_repository import InvoiceRepository
from app.domain.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ManageProductsUseCase:
    def __init__(self, product_repo: ProductRepository, invoice_repo: InvoiceRepository):
        self.product_repo = product_repo
        self.invoice_repo = invoice_repo

    def create(self, product: Product) -> Product:
        if self.product_repo.find_by_code(product.code):
            raise ConflictError(f"Ya existe un producto con el código {product.code}")
        saved = self.product_repo.insert(product)
        logger.info(f"[{saved.code}] Producto creado.")
        return saved

    def list(self, product_filter: ProductFilter, page: int, limit: int) -> Tuple[List[Product], Pagination]:
        total = self.product_repo.count(product_filter)
        products = self.product_repo.find_by_filter(product_filter, skip=page_to_skip(page, limit), limit=limit)
        return products, build_pagination(total, page, limit)

    def get(self, product_id: str) -> Product:
        product = self.product_repo.find_by_id(product_id)
        if not product:
            raise NotFoundError("Producto no encontrado")
        return product

    def update(self, product_id: str, changes: Dict[str, Any]) -> Product:
        product = self.get(product_id)
        # Los campos obligatorios no se pueden vaciar
        changes = {
            key: value for key, value in changes.items()
            if value is not None or key in ("description", "category")
        }

        code = changes.get("code")
        if code and code != product.code and self.product_repo.find_by_code(code):
            raise ConflictError(f"Ya existe un producto con el código {code}")

        return self.product_repo.update(product.model_copy(update=changes))

    def delete(self, product_id: str) -> None:
        product = self.get(product_id)
        if self.invoice_repo.count_by_product(product_id):
            raise InUseError("No se puede eliminar el producto porque aparece en facturas")
        self.product_repo.delete(product_id)
        logger.info(f"[{product.code}] Producto eliminado.")
