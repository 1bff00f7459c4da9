# app/domain/ports/token_service.py
from abc import ABC, abstractmethod
from typing import Any, Dict

from app.domain.models.user import User


class TokenService(ABC):
    """Puerto para emitir y leer los tokens de sesión."""

    @abstractmethod
    def issue(self, user: User) -> str:
        """Genera un token firmado con el ID y el rol del usuario."""
        pass

    @abstractmethod
    def decode(self, token: str) -> Dict[str, Any]:
        """
        Devuelve los claims del token. Lanza AuthenticationError si el token
        no es válido o ya expiró.
        """
        pass
