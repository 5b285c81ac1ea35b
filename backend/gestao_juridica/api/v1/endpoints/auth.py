"""
Endpoints de Autenticação.

Rotas para cadastro do escritório, login e alteração de credenciais.
"""

from fastapi import APIRouter, status

from gestao_juridica.core.dependencies import CurrentUser, Identity, Store
from gestao_juridica.models.usuario import Usuario
from gestao_juridica.schemas.base import APIResponse
from gestao_juridica.schemas.usuario import (
    ChangeEmailRequest,
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    PasswordResetRequest,
    SignupRequest,
)
from gestao_juridica.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Autenticação"])


@router.post(
    "/signup",
    response_model=APIResponse[Usuario],
    status_code=status.HTTP_201_CREATED,
)
async def signup(dados: SignupRequest, store: Store, identity: Identity) -> APIResponse[Usuario]:
    """
    Cria o escritório e o usuário administrador.

    Disponível apenas enquanto nenhum escritório foi criado.
    """
    service = AuthService(store, identity)
    usuario = await service.signup(dados)
    return APIResponse(success=True, data=usuario, message="Escritório criado com sucesso")


@router.post("/login", response_model=APIResponse[LoginResponse])
async def login(dados: LoginRequest, store: Store, identity: Identity) -> APIResponse[LoginResponse]:
    """Login com e-mail e senha."""
    service = AuthService(store, identity)
    return APIResponse(success=True, data=await service.login(dados))


@router.post("/password-reset", response_model=APIResponse)
async def password_reset(dados: PasswordResetRequest, store: Store, identity: Identity) -> APIResponse:
    """Envia e-mail de redefinição de senha."""
    await AuthService(store, identity).request_password_reset(dados.email)
    return APIResponse(
        success=True,
        message="E-mail de redefinição enviado. Verifique sua caixa de entrada.",
    )


@router.get("/me", response_model=APIResponse[Usuario])
async def get_me(current_user: CurrentUser) -> APIResponse[Usuario]:
    """Retorna dados do usuário logado."""
    return APIResponse(success=True, data=current_user)


@router.post("/change-password", response_model=APIResponse)
async def change_password(
    dados: ChangePasswordRequest,
    current_user: CurrentUser,
    store: Store,
    identity: Identity,
) -> APIResponse:
    """Altera a senha (exige a senha atual)."""
    await AuthService(store, identity).change_password(current_user, dados)
    return APIResponse(success=True, message="Senha alterada com sucesso")


@router.post("/change-email", response_model=APIResponse[Usuario])
async def change_email(
    dados: ChangeEmailRequest,
    current_user: CurrentUser,
    store: Store,
    identity: Identity,
) -> APIResponse[Usuario]:
    """Altera o e-mail (exige a senha atual)."""
    usuario = await AuthService(store, identity).change_email(current_user, dados)
    return APIResponse(success=True, data=usuario, message="E-mail alterado com sucesso")
