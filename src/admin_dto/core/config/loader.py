# src/admin_dto/core/config/loader.py
"""
Leitura dos arquivos de configuração de entidades (defaults + local).

O loader lê um arquivo de defaults obrigatório e, quando presente, um
arquivo local de overrides, mescla ambos com `deep_merge` e valida o
bloco `entities` resultante com `validate_entities`.

Decisões arquiteturais:
    - O parser é escolhido pela extensão do arquivo (`_PARSERS`)
    - Falhas de leitura/parse são embrulhadas em `ConfigParseError`
      (ou `LocalOverrideError`, para o arquivo local), com a causa encadeada
    - Arquivo local ausente não é erro; arquivo local ilegível é
    - A validação ocorre sobre o resultado do merge, não sobre cada arquivo

Limites explícitos:
    - Não importa classes nem resolve serviços
    - Não normaliza views (responsabilidade do `ConfigManager`)
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TextIO, Type

import yaml  # PyYAML

from .errors import (
    ConfigParseError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    LocalOverrideError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge
from .validation import validate_entities


_PARSERS: Dict[str, Callable[[TextIO], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.load,
}


def _read_mapping(path: Path, *, error_cls: Type[ConfigParseError]) -> Dict[str, Any]:
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = parser(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError) as exc:
        raise error_cls(f"Falha ao ler {path}: {exc}") from exc

    # arquivo vazio
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root de {path.name} deve ser dict, recebido: {type(data).__name__}"
        )
    return data


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega defaults (+ overrides locais) e devolve a configuração validada.

    Args:
        defaults_path (str): Arquivo base obrigatório (YAML ou JSON).
        local_path (Optional[str]): Arquivo de overrides; ignorado se não existir.

    Returns:
        Dict[str, Any]: Configuração efetiva.

    Raises:
        DefaultsNotFoundError: Arquivo de defaults inexistente.
        UnsupportedConfigFormatError: Extensão sem parser registrado.
        ConfigParseError: Defaults ilegível ou malformado.
        LocalOverrideError: Arquivo local presente, porém ilegível ou malformado.
        InvalidConfigRootTypeError: Raiz, `entities` ou entidade que não é dict.
        InvalidViewConfigError: View com `dto_class`/`dto_factory` de tipo inválido.
        ConfigTypeConflictError: Conflito estrutural no merge.
    """
    defaults_file = Path(defaults_path)
    if not defaults_file.is_file():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {defaults_file}")

    effective = _read_mapping(defaults_file, error_cls=ConfigParseError)

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            local = _read_mapping(local_file, error_cls=LocalOverrideError)
            effective = deep_merge(effective, local)

    validate_entities(effective)
    return effective
