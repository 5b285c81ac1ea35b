"""
Logging estruturado com structlog.

Em produção os eventos saem em JSON (Cloud Logging); em DEBUG, no console.
Campos com senhas, tokens e chaves de API são mascarados antes da
renderização, inclusive quando aparecem aninhados em dicionários.
"""

import logging
import sys
from typing import Any

import structlog

from gestao_juridica.core.config import Settings, settings as default_settings

REDACTED = "[redacted]"

SENSITIVE_KEYS = frozenset(
    {
        "password",
        "current_password",
        "new_password",
        "temporary_password",
        "temporaryPassword",
        "google_api_key",
        "googleApiKey",
        "api_key",
        "id_token",
        "idToken",
        "refresh_token",
        "refreshToken",
        "token",
        "authorization",
    }
)

# Bibliotecas do Google e HTTP logam cada requisição em INFO
NOISY_LOGGERS = ("google", "google_genai", "httpx", "httpcore", "urllib3", "grpc")


def _redact(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: REDACTED if k in SENSITIVE_KEYS else _redact(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_redact(v) for v in value]
    return value


def redact_sensitive(
    logger: Any,
    method_name: str,
    event_dict: structlog.types.EventDict,
) -> structlog.types.EventDict:
    """Processor que mascara valores de chaves sensíveis."""
    for key in list(event_dict):
        if key in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
        elif isinstance(event_dict[key], (dict, list, tuple)):
            event_dict[key] = _redact(event_dict[key])
    return event_dict


def setup_logging(settings: Settings | None = None) -> None:
    """Configura structlog e o logging padrão. Chamado uma vez no startup."""
    settings = settings or default_settings
    level = logging.DEBUG if settings.DEBUG else logging.INFO

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_sensitive,
    ]

    if settings.DEBUG:
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(colors=True)
        processors = shared_processors + [renderer]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
