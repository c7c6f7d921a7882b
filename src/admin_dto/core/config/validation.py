# src/admin_dto/core/config/validation.py
"""
Validação estrutural do bloco `entities`.

Aplicada tanto pelo loader (após o merge defaults + local) quanto pelo
`ConfigManager` (configuração construída em memória), de modo que um
registro de view malformado é rejeitado antes de qualquer criação de DTO.

Regras (v1):
    - `entities` ausente ou None equivale a `{}`
    - `entities` deve ser dict; cada entidade deve ser dict
    - Em cada view (valor dict dentro da entidade):
        - `dto_class` ∈ {None, str, classe}
        - `dto_factory` ∈ {None, str, callable}

Limites explícitos:
    - Não importa `dto_class` nem verifica a existência de serviços
    - Chaves que não são views (`class`, listas, escalares) não são inspecionadas
"""

from typing import Any, Dict

from .errors import InvalidConfigRootTypeError, InvalidViewConfigError


def _check_view(entity_name: str, view: str, record: Dict[str, Any]) -> None:
    dto_class = record.get("dto_class")
    if dto_class is not None and not isinstance(dto_class, (str, type)):
        raise InvalidViewConfigError(
            f"{entity_name}.{view}.dto_class deve ser string ou classe, "
            f"recebido: {type(dto_class).__name__}"
        )

    dto_factory = record.get("dto_factory")
    if dto_factory is not None and not (isinstance(dto_factory, str) or callable(dto_factory)):
        raise InvalidViewConfigError(
            f"{entity_name}.{view}.dto_factory deve ser string ou callable, "
            f"recebido: {type(dto_factory).__name__}"
        )


def validate_entities(config: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """
    Valida o bloco `entities` e o devolve (None normalizado para `{}`).

    Raises:
        InvalidConfigRootTypeError: `entities` ou uma entidade não é dict.
        InvalidViewConfigError: `dto_class`/`dto_factory` com tipo não suportado.
    """
    entities = config.get("entities")
    if entities is None:
        return {}
    if not isinstance(entities, dict):
        raise InvalidConfigRootTypeError(
            f"'entities' deve ser dict, recebido: {type(entities).__name__}"
        )

    for name, entity_config in entities.items():
        if not isinstance(entity_config, dict):
            raise InvalidConfigRootTypeError(
                f"Configuração da entidade '{name}' deve ser dict, "
                f"recebido: {type(entity_config).__name__}"
            )
        for view, record in entity_config.items():
            if isinstance(record, dict):
                _check_view(name, view, record)

    return entities
