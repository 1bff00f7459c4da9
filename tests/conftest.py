"""Configuración de pytest y fixtures compartidas.

Cada prueba corre contra una base SQLite en memoria nueva, con la
dependencia get_db de FastAPI sustituida por una sesión de esa base.
"""

import os

# Debe definirse antes de importar config: bcrypt con pocas rondas acelera las pruebas
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "clave-de-pruebas")
os.environ.setdefault("STRICT_STATUS_TRANSITIONS", "false")

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from app.domain.models.customer import Address, Customer
from app.domain.models.product import Product
from app.domain.models.user import User, UserRole
from app.infrastructure.persistence import models  # noqa: F401  registra las tablas
from app.infrastructure.persistence.customer_repository_adapter import SQLAlchemyCustomerRepository
from app.infrastructure.persistence.database import Base, get_db
from app.infrastructure.persistence.product_repository_adapter import SQLAlchemyProductRepository
from app.infrastructure.persistence.user_repository_adapter import SQLAlchemyUserRepository
from app.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from app.infrastructure.security.jwt_token_service import JWTTokenService

ADMIN_PASSWORD = "admin123"
USER_PASSWORD = "usuario123"


# ── Base de datos ────────────────────────────────────────────────

@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Sesión sobre una base SQLite en memoria, creada y destruida por prueba."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = TestingSession()
    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Cliente HTTP con get_db apuntando a la sesión de la prueba."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ── Usuarios y autenticación ─────────────────────────────────────

@pytest.fixture
def admin_user(db_session: Session) -> User:
    return SQLAlchemyUserRepository(db_session).insert(
        User(
            name="Administradora",
            email="admin@example.com",
            role=UserRole.ADMIN,
            password_hash=BcryptPasswordHasher().hash(ADMIN_PASSWORD),
        )
    )


@pytest.fixture
def regular_user(db_session: Session) -> User:
    return SQLAlchemyUserRepository(db_session).insert(
        User(
            name="Usuario Normal",
            email="usuario@example.com",
            role=UserRole.USER,
            password_hash=BcryptPasswordHasher().hash(USER_PASSWORD),
        )
    )


@pytest.fixture
def admin_headers(admin_user: User) -> dict:
    return {"Authorization": f"Bearer {JWTTokenService().issue(admin_user)}"}


@pytest.fixture
def auth_headers(regular_user: User) -> dict:
    """Cabeceras de un usuario sin permisos de administrador."""
    return {"Authorization": f"Bearer {JWTTokenService().issue(regular_user)}"}


# ── Datos de catálogo ────────────────────────────────────────────

@pytest.fixture
def customer(db_session: Session) -> Customer:
    return SQLAlchemyCustomerRepository(db_session).insert(
        Customer(
            tax_id="XAXX010101000",
            name="Comercial del Norte",
            email="compras@comercialnorte.mx",
            phone="8181234567",
            address=Address(street="Av. Juárez 100", city="Monterrey", state="NL", postal_code="64000"),
        )
    )


@pytest.fixture
def product(db_session: Session) -> Product:
    return SQLAlchemyProductRepository(db_session).insert(
        Product(
            code="SRV-001",
            name="Consultoría",
            description="Hora de consultoría técnica",
            price=100.0,
            tax_rate=16.0,
            unit="hora",
            category="servicios",
        )
    )


@pytest.fixture
def second_product(db_session: Session) -> Product:
    return SQLAlchemyProductRepository(db_session).insert(
        Product(code="MAT-002", name="Cable UTP", price=150.0, tax_rate=16.0, unit="metro", stock=500)
    )


@pytest.fixture
def invoice_payload(customer: Customer, product: Product) -> dict:
    """Cuerpo válido para POST /api/v1/invoices (total esperado 348.00)."""
    return {
        "invoiceNumber": "F-0001",
        "customer": customer.id,
        "paymentMethod": "transferencia",
        "items": [
            {"product": product.id, "quantity": 3, "unitPrice": 100, "taxRate": 16},
        ],
    }
