# src/admin_dto/core/container/container.py
"""
Container de serviços do Admin DTO.

Este módulo define o `ServiceContainer`, implementação concreta do
`ServiceLocator` usada para registrar serviços por identificador string,
anexar tags e descobrir serviços por tag durante o bootstrap.

Decisões arquiteturais:
    - Serviços podem ser registrados como instância pronta ou como factory
    - Serviços registrados via factory são compartilhados (criados no
      primeiro `get` e reutilizados depois)
    - Identificadores duplicados são erro estrutural
    - A ordem de registro é preservada na descoberta por tag

Invariantes:
    - Cada `service_id` é único no container
    - `has` nunca instancia serviços
    - `find_tagged_service_ids` reflete exatamente a ordem de registro

Limites explícitos:
    - Não resolve dependências entre serviços automaticamente
    - Não conhece DTOs nem configuração de entidades
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Tuple

from ..exceptions import ServiceNotFound


@dataclass
class ServiceContainer:
    """Registro de serviços indexado por identificador string."""

    _instances: Dict[str, Any] = field(default_factory=dict, init=False, repr=False)
    _factories: Dict[str, Callable[[], Any]] = field(default_factory=dict, init=False, repr=False)
    _tags: Dict[str, Tuple[str, ...]] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def _reserve(self, service_id: str, tags: Iterable[str]) -> None:
        if not isinstance(service_id, str) or not service_id.strip():
            raise ValueError("service_id must be a non-empty string")
        if service_id in self._tags:
            raise ValueError(f"service_id already registered: {service_id}")
        self._tags[service_id] = tuple(tags)
        self._order.append(service_id)

    def set(self, service_id: str, instance: Any, *, tags: Iterable[str] = ()) -> None:
        self._reserve(service_id, tags)
        self._instances[service_id] = instance

    def register_factory(
        self,
        service_id: str,
        factory: Callable[[], Any],
        *,
        tags: Iterable[str] = (),
    ) -> None:
        if not callable(factory):
            raise TypeError("factory must be callable")
        self._reserve(service_id, tags)
        self._factories[service_id] = factory

    def has(self, service_id: str) -> bool:
        return service_id in self._tags

    def get(self, service_id: str) -> Any:
        if service_id in self._instances:
            return self._instances[service_id]

        if service_id in self._factories:
            instance = self._factories[service_id]()
            self._instances[service_id] = instance
            return instance

        raise ServiceNotFound(
            message=f"Serviço não registrado: {service_id}",
            details={"service_id": service_id},
            hint="Registre o serviço no container antes de referenciá-lo.",
        )

    def find_tagged_service_ids(self, tag: str) -> List[str]:
        return [sid for sid in self._order if tag in self._tags[sid]]
