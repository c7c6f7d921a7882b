"""
Admin DTO — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do Admin DTO.
Erros de configuração de DTO são direcionados ao administrador/desenvolvedor
(nunca ao usuário final do painel) e devem ser:

- explícitos
- serializáveis
- acionáveis

Nenhum fallback silencioso é permitido.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import AdminDTOException, InvalidConfiguration, ServiceNotFound


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AdminErrorPayload:
    """
    Payload canônico de erro do Admin DTO.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao desenvolvedor (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        # o chamador deve garantir que details seja serializável
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

DTO_INVALID_CONFIGURATION = "DTO_INVALID_CONFIGURATION"
SERVICE_NOT_FOUND = "SERVICE_NOT_FOUND"
UNEXPECTED_ERROR = "UNEXPECTED_ERROR"

_EXCEPTION_TYPES = {
    InvalidConfiguration: DTO_INVALID_CONFIGURATION,
    ServiceNotFound: SERVICE_NOT_FOUND,
}


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def dto_invalid_configuration(
    *,
    entity: str,
    view: Optional[str] = None,
    dto_factory: Any = None,
    reason: Optional[str] = None,
    hint: str = "Revise `dto_class`/`dto_factory` da entidade na configuração do painel.",
) -> AdminErrorPayload:
    return AdminErrorPayload(
        type=DTO_INVALID_CONFIGURATION,
        message="Não foi possível criar o DTO com a configuração declarada",
        details={
            "entity": entity,
            "view": view,
            "dto_factory": dto_factory if dto_factory is None else str(dto_factory),
            "reason": reason,
        },
        hint=hint,
    )


def service_not_found(
    *,
    service_id: str,
    hint: str = "Registre o serviço no container antes de referenciá-lo em `dto_factory`.",
) -> AdminErrorPayload:
    return AdminErrorPayload(
        type=SERVICE_NOT_FOUND,
        message="Serviço não registrado no container",
        details={"service_id": service_id},
        hint=hint,
    )


def exception_to_payload(exc: Exception) -> AdminErrorPayload:
    """Converte exceções em AdminErrorPayload (serializável, acionável).

    Regras:
    - AdminDTOException: já vem com message/details/hint; o código vem do catálogo.
    - Outras exceções: encapsular como UNEXPECTED_ERROR sem expor stack trace.
    """
    if isinstance(exc, AdminDTOException):
        return AdminErrorPayload(
            type=_EXCEPTION_TYPES.get(type(exc), exc.__class__.__name__),
            message=str(exc) or "Erro de configuração",
            details=dict(exc.details or {}),
            hint=exc.hint,
        )

    return AdminErrorPayload(
        type=UNEXPECTED_ERROR,
        message=str(exc) or "Erro inesperado durante criação do DTO",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o stacktrace e a configuração da entidade",
    )
