# src/admin_dto/core/config/manager.py
"""
Provedor de configuração de entidades (ConfigManager).

Este módulo define o `ConfigManager`, o ponto único de consulta da
configuração de entidades usada pelo resolver de DTOs.

A configuração esperada possui um bloco `entities`, indexado pelo nome
da entidade, onde cada view (`new`, `edit`, ...) declara ao menos
`dto_class` e, opcionalmente, `dto_factory`:

    entities:
      Product:
        class: app.entities.Product
        new:
          dto_class: app.dto.NewProductDTO
        edit:
          dto_class: app.dto.EditProductDTO
          dto_factory: "product_dtos::from_entity"

Decisões arquiteturais:
    - A configuração é resolvida uma única vez na construção
    - Cada view tem `dto_factory` e `dto_entity_method` normalizados para None
    - Consultas retornam cópias da estrutura (dicts/listas); classes e
      callables são compartilhados por referência
    - Entidades e views são validadas na construção (`validate_entities`)
    - O hash da configuração é calculado na construção para rastreabilidade

Limites explícitos:
    - Não importa `dto_class` nem resolve `dto_factory`
    - Não valida existência de serviços no container
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .errors import EntityNotFoundError
from .hashing import compute_config_hash
from .loader import load_config
from .merge import copy_structure
from .validation import validate_entities


_VIEW_DEFAULTS: Dict[str, Any] = {
    "dto_factory": None,
    "dto_entity_method": None,
}


def _normalize_entity(entity_config: Dict[str, Any]) -> Dict[str, Any]:
    normalized: Dict[str, Any] = {}
    for key, value in entity_config.items():
        if isinstance(value, dict):
            view = dict(_VIEW_DEFAULTS)
            view.update(value)
            normalized[key] = view
        else:
            normalized[key] = value
    return normalized


class ConfigManager:
    """Implementação padrão de `ConfigurationProvider`, consumida pelo `DTOFactory`."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        entities = validate_entities(config or {})
        self._entities: Dict[str, Dict[str, Any]] = {
            name: _normalize_entity(copy_structure(entity_config))
            for name, entity_config in entities.items()
        }
        self.config_hash: str = compute_config_hash({"entities": self._entities})

    @classmethod
    def from_files(
        cls,
        *,
        defaults_path: str,
        local_path: Optional[str] = None,
    ) -> "ConfigManager":
        """Carrega defaults (+ overrides locais) do disco e constrói o provider."""
        return cls(load_config(defaults_path=defaults_path, local_path=local_path))

    def has_entity(self, entity_name: str) -> bool:
        return entity_name in self._entities

    def entity_names(self) -> List[str]:
        return list(self._entities.keys())

    def get_entity_config(self, entity_name: str) -> Dict[str, Any]:
        if entity_name not in self._entities:
            raise EntityNotFoundError(f"Entidade não configurada: {entity_name}")
        return copy_structure(self._entities[entity_name])
