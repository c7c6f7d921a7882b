# src/admin_dto/core/config/merge.py
"""
Utilitário canônico de deep-merge de configuração.

Este módulo implementa a política oficial de deep-merge utilizada pelo
Admin DTO para resolver a configuração final de entidades a partir de
uma configuração base (defaults) e overrides locais explícitos.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - None → sempre aceito, em qualquer direção (ex.: `dto_factory: null`)
    - escalar → sobrescrita direta
    - conflito de tipos → erro estrutural explícito

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Nenhum input é mutado durante o processo
    - Conflitos estruturais interrompem o merge
"""

from typing import Any, Dict

from .errors import ConfigTypeConflictError


def copy_structure(value: Any) -> Any:
    """Copia apenas a estrutura (dict/list); folhas são mantidas por referência.

    Classes, callables e métodos ligados continuam apontando para os mesmos
    objetos, de modo que um `dto_factory` como `service.factory` segue
    operando sobre o serviço original.
    """
    if isinstance(value, dict):
        return {k: copy_structure(v) for k, v in value.items()}
    if isinstance(value, list):
        return [copy_structure(v) for v in value]
    return value


def _is_reference(value: Any) -> bool:
    return isinstance(value, str) or callable(value)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois dicionários de configuração.

    `None` é tratado como valor neutro para fins de tipagem: uma view pode
    trocar `dto_factory: null` por uma string (e vice-versa) sem conflito.
    Referências (strings de import, classes e callables) são
    intercambiáveis entre si.

    Args:
        base (Dict[str, Any]): Configuração base (ex.: defaults).
        override (Dict[str, Any]): Overrides explícitos da configuração.

    Returns:
        Dict[str, Any]: Nova configuração resultante do deep-merge.

    Raises:
        ConfigTypeConflictError: Se ocorrer conflito de tipo entre base e override.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = copy_structure(base)

    for key, override_value in override.items():
        if key not in result:
            result[key] = copy_structure(override_value)
            continue

        base_value = result[key]

        # dict -> merge recursivo
        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value)
            continue

        # list -> sobrescrita total
        if isinstance(override_value, list):
            result[key] = copy_structure(override_value)
            continue

        if base_value is not None and override_value is not None:
            compatible = type(base_value) is type(override_value) or (
                _is_reference(base_value) and _is_reference(override_value)
            )
            if not compatible:
                raise ConfigTypeConflictError(
                    f"Conflito de tipo na chave '{key}': "
                    f"{type(base_value).__name__} vs {type(override_value).__name__}"
                )

        # escalar -> sobrescrita
        result[key] = copy_structure(override_value)

    return result
