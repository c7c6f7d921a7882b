"""
Container de serviços do Admin DTO.

Este pacote expõe o protocolo `ServiceLocator` (o único contrato
consumido pelo resolver de DTOs) e o `ServiceContainer`, implementação
concreta com suporte a instâncias, factories compartilhadas e tags.
"""

from .container import ServiceContainer
from .locator import ServiceLocator

__all__ = ["ServiceContainer", "ServiceLocator"]
