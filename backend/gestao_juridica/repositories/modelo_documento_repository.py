"""
Repository de Modelos de documento.
"""

from gestao_juridica.db.collections import COLLECTION_DOCUMENT_TEMPLATES
from gestao_juridica.db.store import DocumentStore
from gestao_juridica.models.modelo_documento import ModeloDocumento
from gestao_juridica.repositories.base import MultiTenantRepository


class ModeloDocumentoRepository(MultiTenantRepository[ModeloDocumento]):
    """Repository para operações com ModeloDocumento."""

    def __init__(self, store: DocumentStore, office_id: str):
        super().__init__(ModeloDocumento, COLLECTION_DOCUMENT_TEMPLATES, store, office_id)
