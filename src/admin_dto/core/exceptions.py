"""
Admin DTO — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Admin DTO.

Objetivo:
- Permitir que o resolver de DTOs e o container levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para AdminErrorPayload
- Evitar ValueError/RuntimeError genéricos em guardrails críticos

Regras:
- Não contém lógica específica de entidade ou de DTO concreto.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class AdminDTOException(Exception):
    """Base class para exceções internas do Admin DTO.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Resolução de DTO
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class InvalidConfiguration(AdminDTOException):
    """Nenhuma estratégia de criação se aplica à configuração da entidade/view."""


# ---------------------------------------------------------------------------
# Container de serviços
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class ServiceNotFound(AdminDTOException):
    """Serviço solicitado não está registrado no container."""
