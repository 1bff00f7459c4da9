# app/infrastructure/persistence/customer_repository_adapter.py
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.exceptions import ConflictError
from app.domain.models.customer import Address, Customer, CustomerFilter
from app.domain.ports.customer_repository import CustomerRepository
from .database import LIKE_ESCAPE, contains_pattern
from .models import Cliente


class SQLAlchemyCustomerRepository(CustomerRepository):
    def __init__(self, db: Session):
        self.db = db

    def _to_domain(self, cliente: Cliente) -> Customer:
        return Customer(
            id=cliente.id,
            tax_id=cliente.identificacion_fiscal,
            name=cliente.nombre,
            email=cliente.email,
            phone=cliente.telefono,
            address=Address(
                street=cliente.calle,
                city=cliente.ciudad,
                state=cliente.estado,
                postal_code=cliente.codigo_postal,
                country=cliente.pais,
            ),
            active=cliente.activo,
            created_at=cliente.creado_en,
            updated_at=cliente.actualizado_en,
        )

    def _copy_fields(self, customer: Customer, cliente: Cliente) -> Cliente:
        cliente.identificacion_fiscal = customer.tax_id
        cliente.nombre = customer.name
        cliente.email = customer.email
        cliente.telefono = customer.phone
        cliente.calle = customer.address.street
        cliente.ciudad = customer.address.city
        cliente.estado = customer.address.state
        cliente.codigo_postal = customer.address.postal_code
        cliente.pais = customer.address.country
        cliente.activo = customer.active
        return cliente

    def _commit(self):
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError("La identificación fiscal o el correo electrónico ya están registrados") from e

    def _apply_filter(self, query, customer_filter: CustomerFilter):
        if customer_filter.active is not None:
            query = query.filter(Cliente.activo == customer_filter.active)
        if customer_filter.search:
            pattern = contains_pattern(customer_filter.search)
            query = query.filter(or_(
                Cliente.nombre.ilike(pattern, escape=LIKE_ESCAPE),
                Cliente.identificacion_fiscal.ilike(pattern, escape=LIKE_ESCAPE),
                Cliente.email.ilike(pattern, escape=LIKE_ESCAPE),
            ))
        return query

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        cliente = self.db.query(Cliente).filter(Cliente.id == customer_id).first()
        return self._to_domain(cliente) if cliente else None

    def find_by_tax_id(self, tax_id: str) -> Optional[Customer]:
        cliente = self.db.query(Cliente).filter(Cliente.identificacion_fiscal == tax_id).first()
        return self._to_domain(cliente) if cliente else None

    def find_by_email(self, email: str) -> Optional[Customer]:
        cliente = self.db.query(Cliente).filter(Cliente.email == email).first()
        return self._to_domain(cliente) if cliente else None

    def insert(self, customer: Customer) -> Customer:
        cliente = self._copy_fields(customer, Cliente())
        self.db.add(cliente)
        self._commit()
        return self._to_domain(cliente)

    def update(self, customer: Customer) -> Customer:
        cliente = self.db.query(Cliente).filter(Cliente.id == customer.id).one()
        self._copy_fields(customer, cliente)
        self._commit()
        return self._to_domain(cliente)

    def delete(self, customer_id: str) -> bool:
        cliente = self.db.query(Cliente).filter(Cliente.id == customer_id).first()
        if not cliente:
            return False
        self.db.delete(cliente)
        self.db.commit()
        return True

    def find_by_filter(self, customer_filter: CustomerFilter, skip: int = 0, limit: Optional[int] = None) -> List[Customer]:
        query = self._apply_filter(self.db.query(Cliente), customer_filter)
        query = query.order_by(Cliente.creado_en.desc()).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_domain(cliente) for cliente in query.all()]

    def count(self, customer_filter: CustomerFilter) -> int:
        return self._apply_filter(self.db.query(Cliente), customer_filter).count()
