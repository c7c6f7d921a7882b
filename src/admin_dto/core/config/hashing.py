# src/admin_dto/core/config/hashing.py
"""
Hashing canônico de configuração do Admin DTO.

Este módulo implementa a geração de hash determinístico da configuração
efetiva de entidades. O hash representa a **identidade estrutural** da
configuração e é anexado aos eventos de criação de DTO, permitindo
associar cada DTO produzido à configuração que o originou.

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Classes e callables declarados diretamente em Python são
      representados por `módulo.qualname`
    - Callables sem `__qualname__` (`partial`, instâncias com `__call__`)
      são representados pelo `módulo.qualname` do seu tipo
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - Configurações estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres

Limites explícitos:
    - Não carrega nem resolve configuração
    - Não persiste o hash
"""

import json
import hashlib
from typing import Any, Dict


def _stable_default(value: Any) -> str:
    module = getattr(value, "__module__", None)
    qualname = getattr(value, "__qualname__", None)
    if module and qualname:
        return f"{module}.{qualname}"
    if callable(value):
        # partial, instâncias com __call__
        kind = type(value)
        return f"{kind.__module__}.{kind.__qualname__}"
    raise TypeError(
        f"Valor não serializável na configuração: {type(value).__name__}"
    )


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico da configuração efetiva.

    Args:
        config (Dict[str, Any]): Configuração efetiva resolvida.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário, ou se
            contiver valores sem representação estável.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=_stable_default,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
