# src/admin_dto/dto/registry.py
"""
Registro estrutural de object factories nomeadas.

Este módulo define o `ObjectFactoryRegistry`, responsável por registrar
object factories e garantir que cada nome referenciado em `dto_factory`
aponte para exatamente uma factory.

Decisões arquiteturais:
    - A validação ocorre no momento do registro (bootstrap)
    - Nomes duplicados são tratados como falha fatal de configuração
    - A ordem de registro é mantida separadamente da estrutura de armazenamento

Invariantes:
    - Cada factory registrada possui um `name` único e não vazio
    - A lista de factories reflete exatamente a ordem de registro

Limites explícitos:
    - Não cria DTOs
    - Não consulta configuração de entidades
    - Não interage com o container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .object_factory import ObjectFactory


class DuplicateObjectFactoryError(ValueError):
    """
    Exceção levantada quando duas object factories declaram o mesmo nome.

    A duplicidade é tratada como erro fatal de configuração e é detectada
    no registro, antes de qualquer criação de DTO. Nenhum registro parcial
    é aceito: a factory original permanece registrada.
    """


@dataclass
class ObjectFactoryRegistry:
    """Registro canônico de object factories indexado por nome."""

    _factories: Dict[str, ObjectFactory] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, factory: ObjectFactory) -> None:
        name = getattr(factory, "name", None)
        if not isinstance(name, str) or not name.strip():
            raise ValueError("factory.name must be a non-empty string")

        if not callable(getattr(factory, "create_dto", None)):
            raise TypeError(f"Object factory '{name}' must implement create_dto()")

        if name in self._factories:
            raise DuplicateObjectFactoryError(
                f'Object factory com nome "{name}" já existe. '
                "Não é possível registrar duas object factories com o mesmo nome."
            )

        self._factories[name] = factory
        self._order.append(name)

    def has(self, name: str) -> bool:
        return name in self._factories

    def get(self, name: str) -> ObjectFactory:
        return self._factories[name]

    def list(self) -> List[ObjectFactory]:
        return [self._factories[n] for n in self._order]
