"""
Repository do Usuário.
"""

from gestao_juridica.db.collections import COLLECTION_USERS
from gestao_juridica.db.store import DocumentStore, Filter
from gestao_juridica.models.usuario import UserRole, Usuario
from gestao_juridica.repositories.base import BaseRepository, MultiTenantRepository


class UsuarioRepository(BaseRepository[Usuario]):
    """
    Acesso global à coleção de usuários.

    Usado antes de se conhecer o escritório (autenticação, cadastro inicial).
    """

    def __init__(self, store: DocumentStore):
        super().__init__(Usuario, COLLECTION_USERS, store)

    async def master_exists(self) -> bool:
        """Indica se já existe algum administrador cadastrado."""
        masters = await self.find([Filter("role", "==", UserRole.MASTER.value)], limit=1)
        return bool(masters)


class EquipeRepository(MultiTenantRepository[Usuario]):
    """Usuários de um escritório."""

    def __init__(self, store: DocumentStore, office_id: str):
        super().__init__(Usuario, COLLECTION_USERS, store, office_id)

    async def get_by_email(self, email: str) -> Usuario | None:
        result = await self.find([Filter("email", "==", email)], limit=1)
        return result[0] if result else None
