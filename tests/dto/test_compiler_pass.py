# tests/dto/test_compiler_pass.py
"""
Testes do registro de object factories por tag e do bootstrap.

Este módulo valida que serviços marcados com `OBJECT_FACTORY_TAG`
são registrados no DTOFactory na ordem de declaração, e que o
`build_dto_factory` produz um resolver pronto para uso.
"""

import pytest

from tests.fixtures.dtos import EditProductDTO, Product, PrefixedObjectFactory, ProductServiceFactory

from admin_dto.dto.bootstrap import build_dto_factory
from admin_dto.dto.compiler import OBJECT_FACTORY_TAG, register_tagged_object_factories
from admin_dto.dto.factory import DTOFactory
from admin_dto.dto.registry import DuplicateObjectFactoryError


def test_tagged_services_are_registered_in_order(make_config_manager, service_container):
    service_container.set("factory.b", PrefixedObjectFactory("b"), tags=[OBJECT_FACTORY_TAG])
    service_container.set("untagged", ProductServiceFactory())
    service_container.register_factory(
        "factory.a",
        lambda: PrefixedObjectFactory("a"),
        tags=[OBJECT_FACTORY_TAG, "other.tag"],
    )
    dto_factory = DTOFactory(make_config_manager(), service_container)

    registered = register_tagged_object_factories(service_container, dto_factory)

    assert registered == ["factory.b", "factory.a"]
    assert [f.name for f in dto_factory.registry.list()] == ["b", "a"]
    assert not dto_factory.has_factory("untagged")


def test_duplicate_tagged_factory_names_abort(make_config_manager, service_container):
    service_container.set("one", PrefixedObjectFactory("same"), tags=[OBJECT_FACTORY_TAG])
    service_container.set("two", PrefixedObjectFactory("same"), tags=[OBJECT_FACTORY_TAG])

    with pytest.raises(DuplicateObjectFactoryError):
        register_tagged_object_factories(
            service_container, DTOFactory(make_config_manager(), service_container)
        )


def test_build_dto_factory_end_to_end(make_config_manager, service_container, event_log):
    """
    Verifica o bootstrap completo: factory nomeada e serviço `::` convivem.
    """
    service_container.set("prefixed", PrefixedObjectFactory("named"), tags=[OBJECT_FACTORY_TAG])
    service_container.set("product_dtos", ProductServiceFactory())
    config_manager = make_config_manager(
        {
            "new": {"dto_factory": "named"},
            "edit": {"dto_factory": "product_dtos::factory"},
        }
    )

    dto_factory = build_dto_factory(config_manager, service_container, event_log=event_log)
    new_dto = dto_factory.create_entity_dto("Product", "new")
    edit_dto = dto_factory.create_entity_dto("Product", "edit", Product())

    assert new_dto.name == "named:new"
    assert isinstance(edit_dto, EditProductDTO)

    boot = [e for e in event_log.events if e["source"] == "bootstrap"]
    assert boot[0]["services"] == ["prefixed"]
    assert boot[0]["factories"] == ["named"]
    assert [e["strategy"] for e in event_log.filter(level="DEBUG")] == ["object_factory", "service"]
