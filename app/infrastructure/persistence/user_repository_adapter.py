# app/infrastructure/persistence/user_repository_adapter.py
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.exceptions import ConflictError
from app.domain.models.user import User, UserFilter
from app.domain.ports.user_repository import UserRepository
from .database import LIKE_ESCAPE, contains_pattern
from .models import Usuario


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, db: Session):
        self.db = db

    def _to_domain(self, usuario: Usuario) -> User:
        return User(
            id=usuario.id,
            name=usuario.nombre,
            email=usuario.email,
            role=usuario.rol,
            active=usuario.activo,
            password_hash=usuario.password_hash,
            created_at=usuario.creado_en,
            updated_at=usuario.actualizado_en,
        )

    def _copy_fields(self, user: User, usuario: Usuario) -> Usuario:
        usuario.nombre = user.name
        usuario.email = user.email
        usuario.rol = user.role.value
        usuario.activo = user.active
        if user.password_hash:
            usuario.password_hash = user.password_hash
        return usuario

    def _commit(self):
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError("El correo electrónico ya está registrado") from e

    def _apply_filter(self, query, user_filter: UserFilter):
        if user_filter.active is not None:
            query = query.filter(Usuario.activo == user_filter.active)
        if user_filter.role:
            query = query.filter(Usuario.rol == user_filter.role)
        if user_filter.search:
            pattern = contains_pattern(user_filter.search)
            query = query.filter(or_(
                Usuario.nombre.ilike(pattern, escape=LIKE_ESCAPE),
                Usuario.email.ilike(pattern, escape=LIKE_ESCAPE),
            ))
        return query

    def find_by_id(self, user_id: str) -> Optional[User]:
        usuario = self.db.query(Usuario).filter(Usuario.id == user_id).first()
        return self._to_domain(usuario) if usuario else None

    def find_by_email(self, email: str) -> Optional[User]:
        usuario = self.db.query(Usuario).filter(Usuario.email == email).first()
        return self._to_domain(usuario) if usuario else None

    def insert(self, user: User) -> User:
        usuario = self._copy_fields(user, Usuario())
        self.db.add(usuario)
        self._commit()
        return self._to_domain(usuario)

    def update(self, user: User) -> User:
        usuario = self.db.query(Usuario).filter(Usuario.id == user.id).one()
        self._copy_fields(user, usuario)
        self._commit()
        return self._to_domain(usuario)

    def delete(self, user_id: str) -> bool:
        usuario = self.db.query(Usuario).filter(Usuario.id == user_id).first()
        if not usuario:
            return False
        self.db.delete(usuario)
        self.db.commit()
        return True

    def find_by_filter(self, user_filter: UserFilter, skip: int = 0, limit: Optional[int] = None) -> List[User]:
        query = self._apply_filter(self.db.query(Usuario), user_filter)
        query = query.order_by(Usuario.creado_en.desc()).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_domain(usuario) for usuario in query.all()]

    def count(self, user_filter: UserFilter) -> int:
        return self._apply_filter(self.db.query(Usuario), user_filter).count()
