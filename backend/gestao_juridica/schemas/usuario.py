"""
Schemas do Usuário, autenticação e equipe.
"""

from pydantic import EmailStr, Field, field_validator

from gestao_juridica.models.usuario import UserRole, Usuario
from gestao_juridica.schemas.base import BaseSchema


# === Autenticação ===

class SignupRequest(BaseSchema):
    """Cadastro público do primeiro administrador."""

    full_name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6)


class LoginRequest(BaseSchema):
    """Login com e-mail e senha."""

    email: EmailStr
    password: str


class LoginResponse(BaseSchema):
    """Tokens emitidos pelo provedor de identidade."""

    id_token: str
    refresh_token: str | None = None
    expires_in: int | None = None
    user: Usuario


class PasswordResetRequest(BaseSchema):
    email: EmailStr


class ChangePasswordRequest(BaseSchema):
    """Troca de senha (exige a senha atual)."""

    current_password: str
    new_password: str = Field(..., min_length=6)


class ChangeEmailRequest(BaseSchema):
    """Troca de e-mail (exige a senha atual)."""

    current_password: str
    new_email: EmailStr


# === Perfil ===

class PerfilUpdate(BaseSchema):
    """Atualização parcial do próprio perfil."""

    non_nullable = frozenset({"full_name"})

    full_name: str | None = Field(None, min_length=2, max_length=255)
    oab: str | None = None
    legal_specialty: str | None = None
    bio: str | None = Field(None, max_length=2000)
    office: str | None = None


# === Equipe ===

class ConviteRequest(BaseSchema):
    """Convite de novo membro da equipe."""

    full_name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    role: UserRole

    @field_validator("role")
    @classmethod
    def validate_role(cls, v: UserRole) -> UserRole:
        """Convites criam apenas advogados e secretárias."""
        if v == UserRole.MASTER:
            raise ValueError("Papel deve ser 'lawyer' ou 'secretary'")
        return v


class MembroPublico(BaseSchema):
    """Dados de um advogado exibidos na página pública do escritório."""

    id: str
    full_name: str
    role: UserRole
    legal_specialty: str | None = None
    bio: str | None = None
    photo_url: str | None = None


class ConviteResponse(BaseSchema):
    """
    Resultado do convite.

    A senha temporária é devolvida apenas nesta resposta e não é gravada.
    """

    user: Usuario
    temporary_password: str
