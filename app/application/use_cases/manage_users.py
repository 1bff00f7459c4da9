# app/application/use_cases/manage_users.py
import logging
from typing import Any, Dict, List, Tuple

from app.domain.exceptions import ConflictError, NotFoundError, ValidationError
from app.domain.models.common import Pagination, build_pagination, page_to_skip
from app.domain.models.user import User, UserFilter, UserRole
from app.domain.ports.password_hasher import PasswordHasher
from app.domain.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


class ManageUsersUseCase:
    """Perfil propio y administración de usuarios."""

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher):
        self.user_repo = user_repo
        self.hasher = hasher

    def _apply_changes(self, user: User, changes: Dict[str, Any]) -> User:
        update: Dict[str, Any] = {}
        if changes.get("name"):
            update["name"] = changes["name"]

        email = changes.get("email")
        if email:
            email = email.strip().lower()
            if email != user.email:
                existing = self.user_repo.find_by_email(email)
                if existing and existing.id != user.id:
                    raise ConflictError("El correo electrónico ya está en uso")
            update["email"] = email

        if changes.get("password"):
            update["password_hash"] = self.hasher.hash(changes["password"])
        if changes.get("role"):
            update["role"] = UserRole(changes["role"])
        if changes.get("active") is not None:
            update["active"] = changes["active"]

        return self.user_repo.update(user.model_copy(update=update))

    def get(self, user_id: str) -> User:
        user = self.user_repo.find_by_id(user_id)
        if not user:
            raise NotFoundError("Usuario no encontrado")
        return user

    def update_profile(self, current_user: User, changes: Dict[str, Any]) -> User:
        # Desde el perfil no se cambia ni el rol ni el estado
        allowed = {key: changes.get(key) for key in ("name", "email", "password")}
        return self._apply_changes(self.get(current_user.id), allowed)

    def list(self, user_filter: UserFilter, page: int, limit: int) -> Tuple[List[User], Pagination]:
        total = self.user_repo.count(user_filter)
        users = self.user_repo.find_by_filter(user_filter, skip=page_to_skip(page, limit), limit=limit)
        return users, build_pagination(total, page, limit)

    def update(self, user_id: str, changes: Dict[str, Any]) -> User:
        return self._apply_changes(self.get(user_id), changes)

    def delete(self, current_user: User, user_id: str) -> None:
        user = self.get(user_id)
        if current_user.id == user_id:
            raise ValidationError(
                [{"field": "id", "message": "No puede eliminar su propia cuenta"}],
                message="No puede eliminar su propia cuenta"
            )
        self.user_repo.delete(user_id)
        logger.info(f"[{user.email}] Usuario eliminado por {current_user.email}.")
