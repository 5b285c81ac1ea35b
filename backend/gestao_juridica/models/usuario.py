"""
Modelo do Usuário do sistema.
"""

import enum

from gestao_juridica.models.base import TenantDocument


class UserRole(str, enum.Enum):
    """Papéis de usuário no escritório."""

    MASTER = "master"  # Administrador do escritório
    LAWYER = "lawyer"  # Advogado
    SECRETARY = "secretary"  # Secretária/Administrativo


class Usuario(TenantDocument):
    """Usuário do sistema (ID do documento = UID do Firebase Authentication)."""

    full_name: str
    email: str
    role: UserRole
    office: str | None = None  # Nome do escritório exibido no perfil
    oab: str | None = None
    legal_specialty: str | None = None
    bio: str | None = None
    photo_url: str | None = None

    @property
    def is_master(self) -> bool:
        return self.role == UserRole.MASTER

    def __repr__(self) -> str:
        return f"<Usuario(id={self.id}, email='{self.email}', role={self.role.value})>"
