"""
Configurações da aplicação usando Pydantic Settings.

Carrega variáveis de ambiente e valida configurações necessárias.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configurações globais da aplicação."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Aplicação
    PROJECT_NAME: str = "Gestão Jurídica API"
    VERSION: str = "0.1.0"
    DEBUG: bool = False
    API_V1_PREFIX: str = "/api/v1"
    ENVIRONMENT: str = "development"  # development, staging, production

    # Segurança (tokens locais, apenas desenvolvimento)
    SECRET_KEY: str = "CHANGE-ME-IN-PRODUCTION"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 24 horas
    ALGORITHM: str = "HS256"

    # CORS
    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:9002"]

    # Firebase (Authentication, Firestore e Storage)
    FIREBASE_CREDENTIALS_PATH: str = ""  # Caminho para service account JSON (dev)
    FIREBASE_PROJECT_ID: str = ""  # Usado em produção com ADC
    FIREBASE_WEB_API_KEY: str = ""  # Identity Toolkit REST (login, reset de senha)
    FIREBASE_STORAGE_BUCKET: str = ""

    # Banco de documentos: "firestore" ou "memory" (desenvolvimento local)
    DOCUMENT_STORE_BACKEND: str = "firestore"

    # Gemini (a chave de API é configurada por escritório)
    GEMINI_MODEL: str = "gemini-2.0-flash"
    GEMINI_TEMPERATURE: float = 0.4

    # Uploads
    MAX_UPLOAD_SIZE_MB: int = 50
    ALLOWED_DOCUMENT_TYPES: list[str] = [
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "image/jpeg",
        "image/png",
        "image/webp",
    ]
    ALLOWED_IMAGE_TYPES: list[str] = [
        "image/jpeg",
        "image/png",
        "image/webp",
    ]

    # Convites de equipe
    TEMP_PASSWORD_LENGTH: int = 12

    @field_validator("DOCUMENT_STORE_BACKEND")
    @classmethod
    def validate_store_backend(cls, v: str) -> str:
        """Aceita apenas os backends implementados."""
        v = v.lower()
        if v not in ("firestore", "memory"):
            raise ValueError("DOCUMENT_STORE_BACKEND deve ser 'firestore' ou 'memory'")
        return v


@lru_cache
def get_settings() -> Settings:
    """Retorna instância cacheada das configurações."""
    return Settings()


settings = get_settings()
