# app/infrastructure/security/jwt_token_service.py
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt

import config
from app.domain.exceptions import AuthenticationError
from app.domain.models.user import User
from app.domain.ports.token_service import TokenService


class JWTTokenService(TokenService):
    """
    Tokens JWT firmados con la clave de config.JWT_SECRET.

    Claims:
      - sub:  ID del usuario
      - role: rol del usuario
      - exp:  fecha de expiración
    """

    def __init__(
        self,
        secret: str = config.JWT_SECRET,
        algorithm: str = config.JWT_ALGORITHM,
        expires_minutes: int = config.JWT_EXPIRES_MINUTES
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes

    def issue(self, user: User) -> str:
        expire = datetime.now(timezone.utc) + timedelta(minutes=self.expires_minutes)
        payload = {"sub": user.id, "role": user.role.value, "exp": expire}
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise AuthenticationError("Token inválido") from e
