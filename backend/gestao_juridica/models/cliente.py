"""
Modelo do Cliente.
"""

from gestao_juridica.models.base import TenantDocument


class Cliente(TenantDocument):
    """Cliente do escritório."""

    full_name: str
    email: str | None = None
    phone: str | None = None
    document: str | None = None  # CPF ou CNPJ
    address: str | None = None
    created_by: str | None = None

    @property
    def responsavel_id(self) -> str | None:
        return self.created_by
