# app/domain/ports/password_hasher.py
from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Puerto para cifrar y verificar contraseñas."""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        pass
