# tests/conftest.py
"""
Fixtures compartilhados para testes do Admin DTO.

Este módulo define fixtures reutilizáveis que fornecem:
- configuração determinística da entidade `Product` (views `new` e `edit`)
- uma factory de ConfigManager com overrides aplicados via deep-merge
- um ServiceContainer vazio e um EventLog isolados por teste

Decisões arquiteturais:
    - A configuração base espelha o formato real do bloco `entities`
    - Overrides de teste usam a mesma política de merge do loader
    - Imports do core são realizados de forma lazy para melhorar a
      clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture compartilha estado entre testes

Limites explícitos:
    - Não substituir testes de integração do loader
    - Não conter lógica condicional complexa
"""

import pytest

from tests.fixtures.dtos import EditProductDTO, NewProductDTO, Product


# =====================================================
# Configuração de entidades
# =====================================================

@pytest.fixture
def product_entity_config() -> dict:
    """
    Fixture que fornece a configuração base da entidade `Product`.

    As views `new` e `edit` declaram `dto_class` como classes Python
    e `dto_factory: None`, representando o caso padrão (construtor).

    Returns:
        dict: Configuração completa (com bloco `entities`).
    """
    return {
        "entities": {
            "Product": {
                "class": Product,
                "new": {
                    "fields": [],
                    "dto_class": NewProductDTO,
                    "dto_factory": None,
                    "dto_entity_method": None,
                },
                "edit": {
                    "dto_class": EditProductDTO,
                    "dto_factory": None,
                    "dto_entity_method": None,
                },
            }
        }
    }


@pytest.fixture
def make_config_manager(product_entity_config):
    """
    Fixture factory que constrói um ConfigManager para `Product`.

    Overrides por view são aplicados sobre a configuração base com
    `deep_merge`, da mesma forma que um arquivo local sobrescreve os
    defaults no loader.

    Returns:
        Callable[[dict], ConfigManager]
    """
    from admin_dto.core.config.manager import ConfigManager
    from admin_dto.core.config.merge import deep_merge

    def _make(view_overrides=None) -> ConfigManager:
        config = product_entity_config
        if view_overrides:
            config = deep_merge(config, {"entities": {"Product": view_overrides}})
        return ConfigManager(config)

    return _make


@pytest.fixture
def service_container():
    """Fixture que fornece um ServiceContainer vazio."""
    from admin_dto.core.container.container import ServiceContainer

    return ServiceContainer()


@pytest.fixture
def event_log():
    """Fixture que fornece um EventLog vazio."""
    from admin_dto.core.events import EventLog

    return EventLog()


# =====================================================
# Arquivos de configuração (como string, sem I/O)
# =====================================================

@pytest.fixture
def entities_defaults_yaml() -> str:
    """YAML típico de `admin.defaults.yaml` com a entidade Product."""
    return """\
entities:
  Product:
    class: tests.fixtures.dtos.Product
    new:
      dto_class: tests.fixtures.dtos.NewProductDTO
      dto_factory: null
    edit:
      dto_class: tests.fixtures.dtos.EditProductDTO
      dto_factory: null
"""


@pytest.fixture
def entities_local_yaml() -> str:
    """YAML de override local: troca a factory da view `edit`."""
    return """\
entities:
  Product:
    edit:
      dto_factory: from_entity
"""
