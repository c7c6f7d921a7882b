# src/admin_dto/core/config/__init__.py

"""
Camada de configuração do Admin DTO.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar, identificar e consultar a configuração de entidades do painel.

A configuração no Admin DTO é:
    - declarativa
    - determinística
    - imutável do ponto de vista do resolver de DTOs

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Geração de hash canônico para rastreabilidade
    - Validação estrutural do bloco `entities` e dos registros de view
    - Consulta por entidade via `ConfigManager` (contrato `ConfigurationProvider`)

Limites explícitos:
    - Não importa classes de DTO
    - Não resolve serviços do container
"""

from .errors import (
    ConfigError,
    ConfigParseError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    EntityNotFoundError,
    InvalidConfigRootTypeError,
    InvalidViewConfigError,
    LocalOverrideError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_config
from .manager import ConfigManager
from .merge import copy_structure, deep_merge
from .provider import ConfigurationProvider
from .validation import validate_entities

__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "EntityNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidViewConfigError",
    "LocalOverrideError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "load_config",
    "ConfigManager",
    "ConfigurationProvider",
    "copy_structure",
    "deep_merge",
    "validate_entities",
]
