# app/infrastructure/api/routers/users_router.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

import config
from app.application.use_cases.authenticate_user import LoginUserUseCase, RegisterUserUseCase
from app.application.use_cases.manage_users import ManageUsersUseCase
from app.domain.models.user import User, UserFilter
from app.infrastructure.api.dependencies import (
    get_current_user,
    get_password_hasher,
    get_token_service,
    get_user_repository,
    require_admin,
)
from app.infrastructure.api.schemas.common import MessageResponse, PaginationResponse
from app.infrastructure.api.schemas.user_schemas import (
    AuthResponse,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)
from app.infrastructure.persistence.user_repository_adapter import SQLAlchemyUserRepository
from app.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from app.infrastructure.security.jwt_token_service import JWTTokenService

router = APIRouter(prefix=f"{config.API_PREFIX}/users", tags=["Usuarios"])


def get_use_case(
    user_repo: SQLAlchemyUserRepository = Depends(get_user_repository),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
) -> ManageUsersUseCase:
    return ManageUsersUseCase(user_repo, hasher)


# --- Rutas públicas ---

@router.post("/register", status_code=201, response_model=AuthResponse, summary="Registrar un usuario")
def register_user(
    payload: RegisterRequest,
    user_repo: SQLAlchemyUserRepository = Depends(get_user_repository),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    tokens: JWTTokenService = Depends(get_token_service),
):
    user, token = RegisterUserUseCase(user_repo, hasher, tokens).execute(payload.name, payload.email, payload.password)
    return AuthResponse(user=UserResponse.from_domain(user), token=token)


@router.post("/login", response_model=AuthResponse, summary="Iniciar sesión")
def login_user(
    payload: LoginRequest,
    user_repo: SQLAlchemyUserRepository = Depends(get_user_repository),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    tokens: JWTTokenService = Depends(get_token_service),
):
    user, token = LoginUserUseCase(user_repo, hasher, tokens).execute(payload.email, payload.password)
    return AuthResponse(user=UserResponse.from_domain(user), token=token)


# --- Perfil del usuario autenticado ---

@router.get("/profile", response_model=UserResponse, summary="Perfil del usuario actual")
def get_profile(current_user: User = Depends(get_current_user)):
    return UserResponse.from_domain(current_user)


@router.put("/profile", response_model=UserResponse, summary="Actualizar el perfil propio")
def update_profile(
    payload: ProfileUpdateRequest,
    current_user: User = Depends(get_current_user),
    use_case: ManageUsersUseCase = Depends(get_use_case),
):
    user = use_case.update_profile(current_user, payload.model_dump(exclude_unset=True))
    return UserResponse.from_domain(user)


# --- Administración (solo admin) ---

@router.get("", response_model=UserListResponse, summary="Listar usuarios")
def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(config.DEFAULT_PAGE_SIZE, ge=1, le=config.MAX_PAGE_SIZE),
    active: Optional[bool] = Query(None),
    role: Optional[str] = Query(None),
    search: Optional[str] = Query(None, description="Busca en nombre y correo"),
    admin: User = Depends(require_admin),
    use_case: ManageUsersUseCase = Depends(get_use_case),
):
    users, pagination = use_case.list(UserFilter(active=active, role=role, search=search), page, limit)
    return UserListResponse(
        users=[UserResponse.from_domain(user) for user in users],
        pagination=PaginationResponse.model_validate(pagination.model_dump()),
    )


@router.get("/{user_id}", response_model=UserResponse, summary="Obtener un usuario")
def get_user(
    user_id: str,
    admin: User = Depends(require_admin),
    use_case: ManageUsersUseCase = Depends(get_use_case),
):
    return UserResponse.from_domain(use_case.get(user_id))


@router.put("/{user_id}", response_model=UserResponse, summary="Actualizar un usuario")
def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    admin: User = Depends(require_admin),
    use_case: ManageUsersUseCase = Depends(get_use_case),
):
    return UserResponse.from_domain(use_case.update(user_id, payload.model_dump(exclude_unset=True)))


@router.delete("/{user_id}", response_model=MessageResponse, summary="Eliminar un usuario")
def delete_user(
    user_id: str,
    admin: User = Depends(require_admin),
    use_case: ManageUsersUseCase = Depends(get_use_case),
):
    use_case.delete(admin, user_id)
    return MessageResponse(message="Usuario eliminado correctamente")
