"""
Modelo de documento (template em markdown) do escritório.
"""

from gestao_juridica.models.base import TenantDocument


class ModeloDocumento(TenantDocument):
    """Modelo de peça/documento reutilizável."""

    title: str
    content: str
    created_by: str | None = None

    @property
    def responsavel_id(self) -> str | None:
        return self.created_by
