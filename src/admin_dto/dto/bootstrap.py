# src/admin_dto/dto/bootstrap.py
"""Montagem do `DTOFactory` a partir da configuração e do container."""

from __future__ import annotations

from typing import Optional

from ..core.config.provider import ConfigurationProvider
from ..core.container.container import ServiceContainer
from ..core.events import EventLog
from .compiler import register_tagged_object_factories
from .factory import DTOFactory


def build_dto_factory(
    config_manager: ConfigurationProvider,
    container: ServiceContainer,
    *,
    event_log: Optional[EventLog] = None,
) -> DTOFactory:
    dto_factory = DTOFactory(config_manager, container, event_log=event_log)
    registered = register_tagged_object_factories(container, dto_factory)

    if event_log is not None:
        event_log.log(
            source="bootstrap",
            level="INFO",
            message="object factories registered",
            services=registered,
            factories=[f.name for f in dto_factory.registry.list()],
        )
    return dto_factory
