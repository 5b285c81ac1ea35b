"""
Autorização por escritório, papel e lista de colaboradores.

Toda regra de acesso está na tabela POLICY (ação -> papel -> escopo) e é
avaliada por uma única função, `authorize`. Os services chamam `authorize`
antes de qualquer escrita.

Escopos:
    OFFICE:       qualquer recurso do escritório do usuário.
    COLLABORATOR: apenas processos em que o usuário está em collaboratorIds.
    OWNER:        apenas recursos cujo responsável é o próprio usuário.

Um recurso de outro escritório é tratado como inexistente
(ResourceNotFoundError), nunca como "proibido".
"""

import enum

from gestao_juridica.core.exceptions import (
    InsufficientPermissionsError,
    ResourceNotFoundError,
)
from gestao_juridica.db.store import Filter
from gestao_juridica.models.base import TenantDocument
from gestao_juridica.models.usuario import UserRole, Usuario


class Action(str, enum.Enum):
    """Ações protegidas."""

    CLIENT_READ = "client.read"
    CLIENT_CREATE = "client.create"
    CLIENT_UPDATE = "client.update"
    CLIENT_DELETE = "client.delete"

    PROCESS_READ = "process.read"
    PROCESS_CREATE = "process.create"
    PROCESS_UPDATE = "process.update"
    PROCESS_DELETE = "process.delete"
    PROCESS_STATUS_UPDATE = "process.status_update"
    PROCESS_DOCUMENT_UPLOAD = "process.document_upload"
    PROCESS_CHAT_READ = "process.chat_read"
    PROCESS_CHAT_POST = "process.chat_post"
    PROCESS_COLLABORATOR_MANAGE = "process.collaborator_manage"
    PROCESS_STATUS_MIGRATE = "process.status_migrate"

    EVENT_READ = "event.read"
    EVENT_CREATE = "event.create"
    EVENT_UPDATE_STATUS = "event.update_status"
    EVENT_DELETE = "event.delete"

    FINANCIAL_READ = "financial.read"
    FINANCIAL_CREATE = "financial.create"
    FINANCIAL_UPDATE_STATUS = "financial.update_status"
    FINANCIAL_DELETE = "financial.delete"
    FINANCIAL_RECEIPT = "financial.receipt"

    TEMPLATE_READ = "template.read"
    TEMPLATE_CREATE = "template.create"
    TEMPLATE_UPDATE = "template.update"
    TEMPLATE_DELETE = "template.delete"

    TEAM_READ = "team.read"
    TEAM_INVITE = "team.invite"

    OFFICE_READ = "office.read"
    OFFICE_SETTINGS = "office.settings"

    CONTACT_READ = "contact.read"
    CONTACT_UPDATE_STATUS = "contact.update_status"

    AI_PETITION = "ai.petition"
    AI_SUMMARIZE = "ai.summarize"


class Scope(str, enum.Enum):
    """Alcance de uma permissão concedida."""

    OFFICE = "office"
    COLLABORATOR = "collaborator"
    OWNER = "owner"


M, L, S = UserRole.MASTER, UserRole.LAWYER, UserRole.SECRETARY
OFFICE, COLLAB, OWNER = Scope.OFFICE, Scope.COLLABORATOR, Scope.OWNER

POLICY: dict[Action, dict[UserRole, Scope]] = {
    Action.CLIENT_READ: {M: OFFICE, L: OFFICE, S: OFFICE},
    Action.CLIENT_CREATE: {M: OFFICE, L: OFFICE},
    Action.CLIENT_UPDATE: {M: OFFICE, L: OFFICE},
    Action.CLIENT_DELETE: {M: OFFICE},

    Action.PROCESS_READ: {M: OFFICE, L: COLLAB, S: OFFICE},
    Action.PROCESS_CREATE: {M: OFFICE, L: OFFICE},
    Action.PROCESS_UPDATE: {M: OFFICE, L: COLLAB},
    Action.PROCESS_DELETE: {M: OFFICE},
    Action.PROCESS_STATUS_UPDATE: {M: OFFICE, L: COLLAB},
    Action.PROCESS_DOCUMENT_UPLOAD: {M: OFFICE, L: COLLAB},
    Action.PROCESS_CHAT_READ: {M: OFFICE, L: COLLAB, S: OFFICE},
    Action.PROCESS_CHAT_POST: {M: OFFICE, L: COLLAB},
    Action.PROCESS_COLLABORATOR_MANAGE: {M: OFFICE, L: OWNER},
    Action.PROCESS_STATUS_MIGRATE: {M: OFFICE},

    Action.EVENT_READ: {M: OFFICE, L: OFFICE, S: OFFICE},
    Action.EVENT_CREATE: {M: OFFICE, L: OFFICE},
    Action.EVENT_UPDATE_STATUS: {M: OFFICE, L: OWNER, S: OFFICE},
    Action.EVENT_DELETE: {M: OFFICE, L: OWNER},

    Action.FINANCIAL_READ: {M: OFFICE, S: OFFICE},
    Action.FINANCIAL_CREATE: {M: OFFICE},
    Action.FINANCIAL_UPDATE_STATUS: {M: OFFICE, S: OFFICE},
    Action.FINANCIAL_DELETE: {M: OFFICE},
    Action.FINANCIAL_RECEIPT: {M: OFFICE, S: OFFICE},

    Action.TEMPLATE_READ: {M: OFFICE, L: OFFICE, S: OFFICE},
    Action.TEMPLATE_CREATE: {M: OFFICE},
    Action.TEMPLATE_UPDATE: {M: OFFICE},
    Action.TEMPLATE_DELETE: {M: OFFICE},

    Action.TEAM_READ: {M: OFFICE, L: OFFICE, S: OFFICE},
    Action.TEAM_INVITE: {M: OFFICE},

    Action.OFFICE_READ: {M: OFFICE, L: OFFICE, S: OFFICE},
    Action.OFFICE_SETTINGS: {M: OFFICE},

    Action.CONTACT_READ: {M: OFFICE, S: OFFICE},
    Action.CONTACT_UPDATE_STATUS: {M: OFFICE, S: OFFICE},

    Action.AI_PETITION: {M: OFFICE, L: OFFICE},
    Action.AI_SUMMARIZE: {M: OFFICE, L: OFFICE, S: OFFICE},
}


def scope_for(role: UserRole, action: Action) -> Scope | None:
    """Escopo concedido ao papel para a ação (None = negado)."""
    return POLICY.get(action, {}).get(role)


def is_allowed(role: UserRole, action: Action) -> bool:
    return scope_for(role, action) is not None


def authorize(
    user: Usuario,
    action: Action,
    resource: TenantDocument | None = None,
    resource_name: str = "Recurso",
) -> None:
    """
    Verifica se o usuário pode executar a ação (sobre o recurso, se houver).

    Raises:
        ResourceNotFoundError: recurso de outro escritório
        InsufficientPermissionsError: papel, ACL ou responsável incompatíveis
    """
    if resource is not None and resource.office_id != user.office_id:
        raise ResourceNotFoundError(resource_name, resource.id)

    scope = scope_for(user.role, action)
    if scope is None:
        raise InsufficientPermissionsError(action.value)

    if resource is None or scope == Scope.OFFICE:
        return

    if scope == Scope.COLLABORATOR:
        collaborators = getattr(resource, "collaborator_ids", None) or []
        if user.id not in collaborators:
            raise InsufficientPermissionsError(action.value)
    elif scope == Scope.OWNER:
        if resource.responsavel_id != user.id:
            raise InsufficientPermissionsError(action.value)


def can(user: Usuario, action: Action, resource: TenantDocument | None = None) -> bool:
    """Versão booleana de `authorize` (usada para filtrar listagens)."""
    try:
        authorize(user, action, resource)
    except (InsufficientPermissionsError, ResourceNotFoundError):
        return False
    return True


def process_read_filters(user: Usuario, include_office: bool = True) -> list[Filter]:
    """Filtros da consulta de processos visíveis ao usuário."""
    authorize(user, Action.PROCESS_READ)
    filters = [Filter("officeId", "==", user.office_id)] if include_office else []
    if scope_for(user.role, Action.PROCESS_READ) == Scope.COLLABORATOR:
        filters.append(Filter("collaboratorIds", "array-contains", user.id))
    return filters
