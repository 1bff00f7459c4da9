# app/domain/ports/user_repository.py
from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models.user import User, UserFilter


class UserRepository(ABC):
    """
    Puerto para la persistencia de usuarios. Los usuarios devueltos incluyen
    `password_hash` para poder verificar credenciales.
    """

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    def insert(self, user: User) -> User:
        pass

    @abstractmethod
    def update(self, user: User) -> User:
        pass

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        pass

    @abstractmethod
    def find_by_filter(self, user_filter: UserFilter, skip: int = 0, limit: Optional[int] = None) -> List[User]:
        pass

    @abstractmethod
    def count(self, user_filter: UserFilter) -> int:
        pass
