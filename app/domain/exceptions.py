# app/domain/exceptions.py
from typing import Dict, List, Optional


class DomainError(Exception):
    """
    Error base del dominio. Cada subclase sabe con qué código HTTP y qué
    código de error debe responder la API.
    """
    status_code = 500
    error_code = "DOMAIN_ERROR"

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class ValidationError(DomainError):
    """Uno o más campos no son válidos. `errors` trae la lista completa."""
    status_code = 400
    error_code = "VALIDATION_ERROR"

    def __init__(self, errors: List[Dict[str, str]], message: str = "Datos de entrada no válidos"):
        super().__init__(message, errors)


class NotFoundError(DomainError):
    status_code = 404
    error_code = "NOT_FOUND"


class ConflictError(DomainError):
    """Violación de una clave única (número de factura, RFC, correo, código)."""
    status_code = 400
    error_code = "DUPLICATE"


class InUseError(ConflictError):
    """El registro no se puede borrar porque otras entidades lo referencian."""
    error_code = "IN_USE"


class TransitionError(DomainError):
    """Estado fuera de la lista permitida o transición no admitida."""
    status_code = 400
    error_code = "INVALID_STATUS"


class DeleteNotAllowedError(TransitionError):
    error_code = "DELETE_NOT_ALLOWED"


class AuthenticationError(DomainError):
    status_code = 401
    error_code = "UNAUTHORIZED"


class PermissionDeniedError(DomainError):
    status_code = 403
    error_code = "FORBIDDEN"


class PersistenceError(DomainError):
    status_code = 500
    error_code = "PERSISTENCE_ERROR"
