"""
Health check endpoints.
"""

from fastapi import APIRouter

from gestao_juridica.core.dependencies import AppSettings, Store
from gestao_juridica.db.collections import COLLECTION_OFFICES

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health_check(settings: AppSettings) -> dict:
    """Health check básico."""
    return {
        "status": "healthy",
        "version": settings.VERSION,
    }


@router.get("/ready")
async def readiness_check(settings: AppSettings, store: Store) -> dict:
    """
    Readiness check para Cloud Run.

    Faz uma consulta mínima ao banco de documentos; falha de conexão vira 503.
    """
    await store.query(COLLECTION_OFFICES, limit=1)
    return {
        "status": "ready",
        "checks": {
            "documentStore": settings.DOCUMENT_STORE_BACKEND,
            "storageBucket": bool(settings.FIREBASE_STORAGE_BUCKET),
        },
    }
