"""
Router principal da API v1.

Agrega todas as rotas organizadas por domínio.
"""

from fastapi import APIRouter

from gestao_juridica.api.v1.endpoints import (
    agenda,
    auth,
    clientes,
    contatos,
    equipe,
    escritorio,
    financeiro,
    health,
    ia,
    modelos,
    perfil,
    processos,
    ws,
)

api_router = APIRouter()

# Health check
api_router.include_router(health.router)

# Autenticação, perfil e equipe
api_router.include_router(auth.router)
api_router.include_router(perfil.router)
api_router.include_router(equipe.router)
api_router.include_router(escritorio.router)

# Clientes e processos
api_router.include_router(clientes.router)
api_router.include_router(processos.router)

# Agenda e financeiro
api_router.include_router(agenda.router)
api_router.include_router(financeiro.router)

# Modelos, contatos e IA
api_router.include_router(modelos.router)
api_router.include_router(contatos.router)
api_router.include_router(ia.router)

# Tempo real
api_router.include_router(ws.router)
