# src/admin_dto/core/config/provider.py
"""
Contrato de Configuration Provider consumido pelo `DTOFactory`.

O resolver de DTOs só depende de `get_entity_config`; `ConfigManager` é a
implementação padrão, mas qualquer objeto com o mesmo método é aceito.

Limites explícitos:
    - Não define carregamento, merge nem hashing
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class ConfigurationProvider(Protocol):
    """Fornece o mapa de configuração `{view: {dto_class, dto_factory, ...}}` de uma entidade."""

    def get_entity_config(self, entity_name: str) -> Dict[str, Any]:
        ...
