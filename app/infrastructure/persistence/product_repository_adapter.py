# app/infrastructure/persistence/product_repository_adapter.py
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.exceptions import ConflictError
from app.domain.models.product import Product, ProductFilter
from app.domain.ports.product_repository import ProductRepository
from .database import LIKE_ESCAPE, contains_pattern
from .models import Producto


class SQLAlchemyProductRepository(ProductRepository):
    def __init__(self, db: Session):
        self.db = db

    def _to_domain(self, producto: Producto) -> Product:
        return Product(
            id=producto.id,
            code=producto.codigo,
            name=producto.nombre,
            description=producto.descripcion,
            price=producto.precio,
            tax_rate=producto.tasa_impuesto,
            unit=producto.unidad,
            stock=producto.stock,
            category=producto.categoria,
            active=producto.activo,
            created_at=producto.creado_en,
            updated_at=producto.actualizado_en,
        )

    def _copy_fields(self, product: Product, producto: Producto) -> Producto:
        producto.codigo = product.code
        producto.nombre = product.name
        producto.descripcion = product.description
        producto.precio = product.price
        producto.tasa_impuesto = product.tax_rate
        producto.unidad = product.unit
        producto.stock = product.stock
        producto.categoria = product.category
        producto.activo = product.active
        return producto

    def _commit(self, code: str):
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(f"Ya existe un producto con el código {code}") from e

    def _apply_filter(self, query, product_filter: ProductFilter):
        if product_filter.active is not None:
            query = query.filter(Producto.activo == product_filter.active)
        if product_filter.category:
            query = query.filter(Producto.categoria == product_filter.category)
        if product_filter.search:
            pattern = contains_pattern(product_filter.search)
            query = query.filter(or_(
                Producto.nombre.ilike(pattern, escape=LIKE_ESCAPE),
                Producto.codigo.ilike(pattern, escape=LIKE_ESCAPE),
            ))
        return query

    def find_by_id(self, product_id: str) -> Optional[Product]:
        producto = self.db.query(Producto).filter(Producto.id == product_id).first()
        return self._to_domain(producto) if producto else None

    def find_by_code(self, code: str) -> Optional[Product]:
        producto = self.db.query(Producto).filter(Producto.codigo == code).first()
        return self._to_domain(producto) if producto else None

    def insert(self, product: Product) -> Product:
        producto = self._copy_fields(product, Producto())
        self.db.add(producto)
        self._commit(product.code)
        return self._to_domain(producto)

    def update(self, product: Product) -> Product:
        producto = self.db.query(Producto).filter(Producto.id == product.id).one()
        self._copy_fields(product, producto)
        self._commit(product.code)
        return self._to_domain(producto)

    def delete(self, product_id: str) -> bool:
        producto = self.db.query(Producto).filter(Producto.id == product_id).first()
        if not producto:
            return False
        self.db.delete(producto)
        self.db.commit()
        return True

    def find_by_filter(self, product_filter: ProductFilter, skip: int = 0, limit: Optional[int] = None) -> List[Product]:
        query = self._apply_filter(self.db.query(Producto), product_filter)
        query = query.order_by(Producto.creado_en.desc()).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_domain(producto) for producto in query.all()]

    def count(self, product_filter: ProductFilter) -> int:
        return self._apply_filter(self.db.query(Producto), product_filter).count()
