"""
Schemas base compartilhados.
"""

from datetime import datetime, timezone
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class BaseSchema(BaseModel):
    """
    Schema base com configurações padrão.

    Aceita tanto camelCase (front-end) quanto snake_case.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=True,
    )

    # Campos que uma atualização parcial pode omitir, mas não anular
    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_explicit_null(self):
        nulos = sorted(
            to_camel(name)
            for name in self.non_nullable
            if name in self.model_fields_set and getattr(self, name) is None
        )
        if nulos:
            raise ValueError(f"Campos não podem ser nulos: {', '.join(nulos)}")
        return self

    def changes(self) -> dict:
        """Campos informados na requisição, com as chaves gravadas no banco."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="python")


class APIResponse(BaseModel, Generic[T]):
    """
    Resposta padronizada da API.

    Exemplo de uso:
        return APIResponse(success=True, data=cliente)
    """

    success: bool
    data: T | None = None
    message: str | None = None


class ErrorDetail(BaseModel):
    """Detalhes de erro."""

    code: str
    message: str
    field: str | None = None


class ErrorResponse(BaseModel):
    """Resposta de erro padronizada."""

    success: bool = False
    error: ErrorDetail


def as_utc(value: datetime | None) -> datetime | None:
    """Datas sem fuso são interpretadas como UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
