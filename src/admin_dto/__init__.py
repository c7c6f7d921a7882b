# src/admin_dto/__init__.py
"""
Admin DTO — resolução configurável de DTOs para painéis administrativos.

Dado o nome de uma entidade e uma view (`new`, `edit`, ...), o Admin DTO
descobre qual classe de DTO instanciar e como instanciá-la: construtor
padrão, método estático, callable, object factory nomeada ou método de
um serviço registrado no container.

Arquitetura em alto nível:
    - core.config     → configuração de entidades (YAML/JSON, defaults + local)
    - core.container  → Service Locator e container de serviços
    - dto             → DTOFactory, object factories e bootstrap

Limites explícitos:
    - Não contém rotas, controllers ou renderização de UI
    - Não conhece metadados de ORM
"""

from .core.config import ConfigManager, ConfigurationProvider
from .core.container import ServiceContainer, ServiceLocator
from .core.events import EventLog
from .core.exceptions import AdminDTOException, InvalidConfiguration, ServiceNotFound
from .dto import (
    OBJECT_FACTORY_TAG,
    DTOFactory,
    DuplicateObjectFactoryError,
    ObjectFactory,
    build_dto_factory,
)

__all__ = [
    "ConfigManager",
    "ConfigurationProvider",
    "ServiceContainer",
    "ServiceLocator",
    "EventLog",
    "AdminDTOException",
    "InvalidConfiguration",
    "ServiceNotFound",
    "OBJECT_FACTORY_TAG",
    "DTOFactory",
    "DuplicateObjectFactoryError",
    "ObjectFactory",
    "build_dto_factory",
]
