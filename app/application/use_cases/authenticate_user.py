# app/application/use_cases/authenticate_user.py
import logging
from typing import Optional, Tuple

from app.domain.exceptions import AuthenticationError, ConflictError
from app.domain.models.user import User, UserRole
from app.domain.ports.password_hasher import PasswordHasher
from app.domain.ports.token_service import TokenService
from app.domain.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """
    Registro público. La cuenta se crea siempre con rol 'user'; solo un
    administrador puede cambiarlo después.
    """

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher, tokens: TokenService):
        self.user_repo = user_repo
        self.hasher = hasher
        self.tokens = tokens

    def execute(self, name: str, email: str, password: str) -> Tuple[User, str]:
        email = email.strip().lower()
        if self.user_repo.find_by_email(email):
            raise ConflictError("El correo electrónico ya está registrado")

        user = self.user_repo.insert(User(
            name=name,
            email=email,
            role=UserRole.USER,
            password_hash=self.hasher.hash(password),
        ))
        logger.info(f"[{user.email}] Usuario registrado.")
        return user, self.tokens.issue(user)


class LoginUserUseCase:
    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher, tokens: TokenService):
        self.user_repo = user_repo
        self.hasher = hasher
        self.tokens = tokens

    def execute(self, email: str, password: str) -> Tuple[User, str]:
        user = self.user_repo.find_by_email(email.strip().lower())
        if not user:
            raise AuthenticationError("Credenciales inválidas")
        if not user.active:
            raise AuthenticationError("Su cuenta ha sido desactivada")
        if not self.hasher.verify(password, user.password_hash):
            logger.warning(f"[{user.email}] Intento de inicio de sesión con contraseña incorrecta.")
            raise AuthenticationError("Credenciales inválidas")
        return user, self.tokens.issue(user)


class ResolveCurrentUserUseCase:
    """Obtiene el usuario de la petición a partir de su token."""

    def __init__(self, user_repo: UserRepository, tokens: TokenService):
        self.user_repo = user_repo
        self.tokens = tokens

    def execute(self, token: Optional[str]) -> User:
        if not token:
            raise AuthenticationError("No se proporcionó token de autenticación")

        payload = self.tokens.decode(token)
        user_id = payload.get("sub")
        user = self.user_repo.find_by_id(user_id) if user_id else None
        if not user or not user.active:
            raise AuthenticationError("Usuario no autorizado o cuenta desactivada")
        return user
