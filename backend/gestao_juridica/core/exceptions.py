"""
Exceções customizadas da aplicação.

Define hierarquia de exceções para tratamento consistente de erros.
Nenhuma mensagem aqui carrega detalhes internos de provedores externos.
"""

from typing import Any


class CRMException(Exception):
    """Exceção base da Gestão Jurídica."""

    def __init__(
        self,
        message: str,
        code: str = "CRM_ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


# === Exceções de Autenticação ===

class AuthenticationError(CRMException):
    """Erro de autenticação."""

    def __init__(self, message: str = "Credenciais inválidas"):
        super().__init__(message, code="AUTH_ERROR")


class InvalidTokenError(AuthenticationError):
    """Token inválido ou expirado."""

    def __init__(self):
        super().__init__("Token inválido")
        self.code = "INVALID_TOKEN"


class TooManyAttemptsError(AuthenticationError):
    """Provedor de identidade bloqueou temporariamente as tentativas."""

    def __init__(self):
        super().__init__("Muitas tentativas foram feitas. Tente novamente mais tarde.")
        self.code = "TOO_MANY_ATTEMPTS"


# === Exceções de Autorização ===

class AuthorizationError(CRMException):
    """Erro de autorização/permissão."""

    def __init__(self, message: str = "Acesso negado"):
        super().__init__(message, code="AUTHORIZATION_ERROR")


class InsufficientPermissionsError(AuthorizationError):
    """Usuário não tem permissão para a ação."""

    def __init__(self, action: str):
        super().__init__(f"Permissão insuficiente para: {action}")
        self.code = "INSUFFICIENT_PERMISSIONS"
        self.action = action


# === Exceções de Recursos ===

class ResourceNotFoundError(CRMException):
    """Recurso não encontrado (inexistente ou de outro escritório)."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str | None = None,
    ):
        message = f"{resource_type} não encontrado"
        if resource_id:
            message = f"{resource_type} com ID {resource_id} não encontrado"
        super().__init__(message, code="NOT_FOUND")
        self.resource_type = resource_type
        self.resource_id = resource_id


class ResourceAlreadyExistsError(CRMException):
    """Recurso já existe (conflito)."""

    def __init__(
        self,
        resource_type: str,
        field: str,
        value: str,
    ):
        message = f"{resource_type} com {field}='{value}' já existe"
        super().__init__(message, code="ALREADY_EXISTS")
        self.resource_type = resource_type
        self.field = field
        self.value = value


class EmailAlreadyInUseError(ResourceAlreadyExistsError):
    """E-mail já cadastrado no provedor de identidade."""

    def __init__(self, email: str):
        super().__init__("Usuário", "email", email)
        self.message = "Este e-mail já está em uso na plataforma."
        self.code = "EMAIL_ALREADY_IN_USE"


# === Exceções de Validação ===

class ValidationError(CRMException):
    """Erro de validação de dados."""

    def __init__(
        self,
        message: str = "Dados inválidos.",
        field: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field
        self.errors = errors or []


# === Exceções de Negócio ===

class BusinessRuleError(CRMException):
    """Violação de regra de negócio."""

    def __init__(self, message: str, rule: str | None = None):
        super().__init__(message, code="BUSINESS_RULE_VIOLATION")
        self.rule = rule


class OfficeAlreadyExistsError(BusinessRuleError):
    """Cadastro público bloqueado: o escritório já foi criado."""

    def __init__(self):
        super().__init__(
            "Um escritório já foi criado. Novos usuários devem ser "
            "convidados pelo administrador.",
            rule="OFFICE_ALREADY_EXISTS",
        )
        self.code = "OFFICE_ALREADY_EXISTS"


class ApiKeyNotConfiguredError(BusinessRuleError):
    """Escritório sem chave de API do provedor de IA."""

    def __init__(self):
        super().__init__(
            "Chave de API não configurada para este escritório.",
            rule="API_KEY_REQUIRED",
        )
        self.code = "API_KEY_NOT_CONFIGURED"


# === Exceções de serviços externos ===

class UpstreamError(CRMException):
    """Falha em serviço gerenciado (identidade, banco, storage, IA)."""

    def __init__(self, message: str, service: str, code: str = "UPSTREAM_ERROR"):
        super().__init__(message, code=code)
        self.service = service


class IdentityProviderError(UpstreamError):
    """Erro no provedor de identidade (Firebase Authentication)."""

    def __init__(self, message: str = "Falha no serviço de autenticação. Tente novamente."):
        super().__init__(message, service="firebase_auth", code="IDENTITY_PROVIDER_ERROR")


class DocumentStoreError(UpstreamError):
    """Erro no banco de documentos (Firestore)."""

    def __init__(self, message: str = "O serviço de banco de dados não está disponível."):
        super().__init__(message, service="firestore", code="STORE_ERROR")


class StorageError(UpstreamError):
    """Erro de armazenamento de arquivos."""

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message, service="storage", code="STORAGE_ERROR")
        self.operation = operation


class FileUploadError(StorageError):
    """Erro no upload de arquivo."""

    def __init__(self, message: str = "Erro no upload do arquivo"):
        super().__init__(message, operation="upload")
        self.code = "FILE_UPLOAD_ERROR"


class FileTooLargeError(ValidationError):
    """Arquivo muito grande."""

    def __init__(self, max_size_mb: int, actual_size_mb: float):
        super().__init__(
            f"Arquivo muito grande. Máximo: {max_size_mb}MB, enviado: {actual_size_mb:.2f}MB",
            field="file",
        )
        self.code = "FILE_TOO_LARGE"


class InvalidFileTypeError(ValidationError):
    """Tipo de arquivo não permitido."""

    def __init__(self, mime_type: str, allowed_types: list[str]):
        super().__init__(
            f"Tipo de arquivo não permitido: {mime_type}. Permitidos: {', '.join(allowed_types)}",
            field="file",
        )
        self.code = "INVALID_FILE_TYPE"


class AIServiceError(UpstreamError):
    """Erro no serviço de IA."""

    def __init__(self, message: str = "Falha ao gerar conteúdo com IA. Tente novamente."):
        super().__init__(message, service="gemini", code="AI_SERVICE_ERROR")
