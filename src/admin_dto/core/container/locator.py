# src/admin_dto/core/container/locator.py
"""
Contrato canônico de Service Locator do Admin DTO.

Este módulo define o protocolo mínimo que qualquer container de serviços
deve satisfazer para ser consumido pelo `DTOFactory` na estratégia
`service_id::method`.

Princípios fundamentais:
    - O resolver de DTOs só depende de `has` e `get`
    - Conformidade é garantida por duck typing (@runtime_checkable)
    - A política de instanciação de serviços é responsabilidade do container

Limites explícitos:
    - Não define registro de serviços
    - Não define tags nem ciclo de vida
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ServiceLocator(Protocol):
    """Registry que resolve identificadores string em instâncias de serviço."""

    def has(self, service_id: str) -> bool:
        ...

    def get(self, service_id: str) -> Any:
        ...
