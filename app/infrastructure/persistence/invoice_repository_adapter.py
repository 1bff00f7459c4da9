# app/infrastructure/persistence/invoice_repository_adapter.py
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from app.domain.exceptions import ConflictError, PersistenceError
from app.domain.models.invoice import CustomerSummary, Invoice, InvoiceFilter, InvoiceStatus, LineItem
from app.domain.ports.invoice_repository import InvoiceRepository
from .models import Factura, ItemFactura

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    return "unique" in str(error.orig).lower()


class SQLAlchemyInvoiceRepository(InvoiceRepository):
    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Factura).options(
            joinedload(Factura.cliente),
            selectinload(Factura.items).joinedload(ItemFactura.producto)
        )

    def _to_domain(self, factura: Factura) -> Invoice:
        cliente = factura.cliente
        return Invoice(
            id=factura.id,
            invoice_number=factura.numero_factura,
            issue_date=factura.fecha_emision,
            due_date=factura.fecha_vencimiento,
            customer=factura.cliente_id,
            items=[
                LineItem(
                    product=item.producto_id,
                    description=item.descripcion,
                    quantity=item.cantidad,
                    unit_price=item.precio_unitario,
                    tax_rate=item.tasa_impuesto,
                    subtotal=item.subtotal,
                    tax_amount=item.monto_impuesto,
                    total=item.total,
                    product_code=item.producto.codigo if item.producto else None,
                    product_name=item.producto.nombre if item.producto else None,
                )
                for item in factura.items
            ],
            subtotal=factura.subtotal,
            tax_amount=factura.monto_impuesto,
            total=factura.total,
            status=factura.estado,
            payment_method=factura.metodo_pago,
            notes=factura.notas,
            created_at=factura.creado_en,
            updated_at=factura.actualizado_en,
            customer_info=CustomerSummary(
                id=cliente.id,
                name=cliente.nombre,
                tax_id=cliente.identificacion_fiscal,
                email=cliente.email,
            ) if cliente else None,
        )

    def _apply_filter(self, query, invoice_filter: InvoiceFilter):
        if invoice_filter.status:
            query = query.filter(Factura.estado == invoice_filter.status)
        if invoice_filter.customer:
            query = query.filter(Factura.cliente_id == invoice_filter.customer)
        if invoice_filter.from_date:
            query = query.filter(Factura.fecha_emision >= invoice_filter.from_date)
        if invoice_filter.to_date:
            query = query.filter(Factura.fecha_emision <= invoice_filter.to_date)
        return query

    def find_by_id(self, invoice_id: str) -> Optional[Invoice]:
        factura = self._query().filter(Factura.id == invoice_id).first()
        return self._to_domain(factura) if factura else None

    def find_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        factura = self._query().filter(Factura.numero_factura == invoice_number).first()
        return self._to_domain(factura) if factura else None

    def insert(self, invoice: Invoice) -> Invoice:
        db_factura = Factura(
            numero_factura=invoice.invoice_number,
            fecha_emision=invoice.issue_date,
            fecha_vencimiento=invoice.due_date,
            cliente_id=invoice.customer,
            subtotal=invoice.subtotal,
            monto_impuesto=invoice.tax_amount,
            total=invoice.total,
            estado=invoice.status.value,
            metodo_pago=invoice.payment_method.value,
            notas=invoice.notes,
            items=[
                ItemFactura(
                    posicion=position,
                    producto_id=item.product,
                    descripcion=item.description,
                    cantidad=item.quantity,
                    precio_unitario=item.unit_price,
                    tasa_impuesto=item.tax_rate,
                    subtotal=item.subtotal,
                    monto_impuesto=item.tax_amount,
                    total=item.total,
                )
                for position, item in enumerate(invoice.items)
            ],
        )
        try:
            self.db.add(db_factura)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if _is_unique_violation(e):
                raise ConflictError("El número de factura ya existe") from e
            logger.error(f"[{invoice.invoice_number}] Error de integridad al guardar la factura.", exc_info=True)
            raise PersistenceError("No se pudo guardar la factura") from e

        return self.find_by_id(db_factura.id)

    def update_status(self, invoice_id: str, status: InvoiceStatus) -> Optional[Invoice]:
        factura = self.db.query(Factura).filter(Factura.id == invoice_id).first()
        if not factura:
            return None
        factura.estado = status.value
        self.db.commit()
        return self.find_by_id(invoice_id)

    def delete(self, invoice_id: str) -> bool:
        factura = self.db.query(Factura).filter(Factura.id == invoice_id).first()
        if not factura:
            return False
        self.db.delete(factura)
        self.db.commit()
        return True

    def find_by_filter(self, invoice_filter: InvoiceFilter, skip: int = 0, limit: Optional[int] = None) -> List[Invoice]:
        query = self._apply_filter(self._query(), invoice_filter)
        query = query.order_by(Factura.creado_en.desc()).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_domain(factura) for factura in query.all()]

    def count(self, invoice_filter: InvoiceFilter) -> int:
        return self._apply_filter(self.db.query(Factura), invoice_filter).count()

    def count_by_customer(self, customer_id: str) -> int:
        return self.db.query(Factura).filter(Factura.cliente_id == customer_id).count()

    def count_by_product(self, product_id: str) -> int:
        return (
            self.db.query(ItemFactura.factura_id)
            .filter(ItemFactura.producto_id == product_id)
            .distinct()
            .count()
        )
