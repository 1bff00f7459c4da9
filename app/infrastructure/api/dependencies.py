# app/infrastructure/api/dependencies.py
"""
Dependencias de FastAPI: sesión de base de datos, adaptadores y usuario
autenticado de la petición.
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

import config
from app.application.use_cases.authenticate_user import ResolveCurrentUserUseCase
from app.domain.exceptions import PermissionDeniedError
from app.domain.models.user import User, UserRole
from app.domain.services.invoice_lifecycle import InvoiceLifecycleGuard
from app.infrastructure.persistence.customer_repository_adapter import SQLAlchemyCustomerRepository
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.invoice_repository_adapter import SQLAlchemyInvoiceRepository
from app.infrastructure.persistence.product_repository_adapter import SQLAlchemyProductRepository
from app.infrastructure.persistence.user_repository_adapter import SQLAlchemyUserRepository
from app.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from app.infrastructure.security.jwt_token_service import JWTTokenService

# auto_error=False: la falta de token se reporta con nuestro propio error 401
bearer_scheme = HTTPBearer(auto_error=False)


def get_invoice_repository(db: Session = Depends(get_db)) -> SQLAlchemyInvoiceRepository:
    return SQLAlchemyInvoiceRepository(db)


def get_customer_repository(db: Session = Depends(get_db)) -> SQLAlchemyCustomerRepository:
    return SQLAlchemyCustomerRepository(db)


def get_product_repository(db: Session = Depends(get_db)) -> SQLAlchemyProductRepository:
    return SQLAlchemyProductRepository(db)


def get_user_repository(db: Session = Depends(get_db)) -> SQLAlchemyUserRepository:
    return SQLAlchemyUserRepository(db)


def get_lifecycle_guard() -> InvoiceLifecycleGuard:
    return InvoiceLifecycleGuard(strict=config.STRICT_STATUS_TRANSITIONS)


def get_password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher()


def get_token_service() -> JWTTokenService:
    return JWTTokenService()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    user_repo: SQLAlchemyUserRepository = Depends(get_user_repository),
    tokens: JWTTokenService = Depends(get_token_service),
) -> User:
    token = credentials.credentials if credentials else None
    return ResolveCurrentUserUseCase(user_repo, tokens).execute(token)


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.ADMIN:
        raise PermissionDeniedError("Se requieren permisos de administrador")
    return current_user
