# src/admin_dto/dto/compiler.py
"""
Passo de registro de object factories por tag.

Durante o bootstrap, todo serviço do container marcado com
`OBJECT_FACTORY_TAG` é registrado no `DTOFactory` como object factory
nomeada, ficando disponível para referência em `dto_factory`.

Invariantes:
    - Serviços são registrados na ordem em que foram declarados no container
    - Nomes duplicados interrompem o bootstrap (`DuplicateObjectFactoryError`)
"""

from __future__ import annotations

from typing import List

from ..core.container.container import ServiceContainer
from .factory import DTOFactory


OBJECT_FACTORY_TAG = "admin_dto.object_factory"


def register_tagged_object_factories(container: ServiceContainer, dto_factory: DTOFactory) -> List[str]:
    """Registra no `dto_factory` todos os serviços marcados com a tag de object factory.

    Returns:
        List[str]: Identificadores dos serviços registrados, em ordem.
    """
    registered: List[str] = []
    for service_id in container.find_tagged_service_ids(OBJECT_FACTORY_TAG):
        dto_factory.add_factory(container.get(service_id))
        registered.append(service_id)
    return registered
