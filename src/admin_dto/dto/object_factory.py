# src/admin_dto/dto/object_factory.py
"""
Contrato canônico de object factory nomeada.

Uma object factory é um serviço capaz de construir DTOs para qualquer
classe/view, referenciado na configuração de entidades pelo seu nome:

    entities:
      User:
        edit:
          dto_class: app.dto.EditUserDTO
          dto_factory: "my_factory"

Princípios fundamentais:
    - O nome identifica a factory de forma única no registry
    - A factory recebe a classe já resolvida, a view e os dados padrão
    - Conformidade é garantida por duck typing (@runtime_checkable)
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class ObjectFactory(Protocol):
    """Factory nomeada de DTOs descoberta via tag no container."""

    name: str

    def create_dto(self, dto_class: Optional[type], view: str, default_data: Any = None) -> Any:
        ...
