"""
Camada de DTOs do Admin DTO.

Este pacote reúne o resolver de DTOs por entidade/view (`DTOFactory`),
o contrato e o registro de object factories nomeadas, e o passo de
bootstrap que registra factories descobertas por tag no container.
"""

from .bootstrap import build_dto_factory
from .compiler import OBJECT_FACTORY_TAG, register_tagged_object_factories
from .factory import CONSTRUCTOR_MARKERS, FACTORY_SEPARATOR, DTOFactory, import_object
from .object_factory import ObjectFactory
from .registry import DuplicateObjectFactoryError, ObjectFactoryRegistry

__all__ = [
    "build_dto_factory",
    "OBJECT_FACTORY_TAG",
    "register_tagged_object_factories",
    "CONSTRUCTOR_MARKERS",
    "FACTORY_SEPARATOR",
    "DTOFactory",
    "import_object",
    "ObjectFactory",
    "DuplicateObjectFactoryError",
    "ObjectFactoryRegistry",
]
