"""
Módulo de segurança: tokens JWT locais e senhas temporárias.

Tokens locais só são aceitos em desenvolvimento; em produção o token é
sempre um ID token do Firebase.
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from gestao_juridica.core.config import Settings, settings as default_settings


def create_access_token(
    subject: str | Any,
    expires_delta: timedelta | None = None,
    additional_claims: dict[str, Any] | None = None,
    settings: Settings | None = None,
) -> str:
    """
    Cria um token JWT de acesso.

    Args:
        subject: Identificador do usuário (uid)
        expires_delta: Tempo de expiração customizado
        additional_claims: Claims adicionais (ex: officeId, role)

    Returns:
        Token JWT codificado
    """
    settings = settings or default_settings
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )

    to_encode: dict[str, Any] = {
        "sub": str(subject),
        "exp": expire,
        "iat": datetime.now(timezone.utc),
    }

    if additional_claims:
        to_encode.update(additional_claims)

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: str, settings: Settings | None = None) -> dict[str, Any] | None:
    """
    Verifica e decodifica um token JWT.

    Returns:
        Payload do token ou None se inválido
    """
    settings = settings or default_settings
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None


def generate_temporary_password(length: int = 12) -> str:
    """Gera senha temporária aleatória para convites."""
    # token_urlsafe devolve ~1.3 caracteres por byte
    return secrets.token_urlsafe(length)[:length]
