# src/admin_dto/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Admin DTO.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, a resolução e a consulta da configuração de entidades.

As exceções aqui definidas representam **violações estruturais
explícitas** da configuração, e não erros de criação de DTO.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são direcionadas ao desenvolvedor

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa falha de estratégia de criação de DTO

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do resolver de DTOs nem do container
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do Admin DTO.

    Todas as exceções levantadas durante carregamento, merge e consulta
    de configuração devem herdar desta classe, permitindo captura
    genérica e distinção clara entre falhas de configuração e falhas
    de criação de DTO.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - Nenhum default é inferido ou criado automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    (ou o bloco `entities`) não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"entities": {"Product": {"new": {...}}}}
        - override: {"entities": {"Product": "disabled"}}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class EntityNotFoundError(ConfigError, KeyError):
    """
    Exceção levantada quando a entidade solicitada não está declarada
    no bloco `entities` da configuração.
    """

    def __str__(self) -> str:
        # KeyError.__str__ aplica repr() à mensagem
        return str(self.args[0]) if self.args else ""


class ConfigParseError(ConfigError):
    """
    Exceção levantada quando um arquivo de configuração existe, mas não
    pode ser lido ou interpretado (YAML/JSON malformado, erro de I/O).

    A exceção original é preservada em `__cause__`.
    """


class LocalOverrideError(ConfigParseError):
    """Arquivo local de overrides presente, porém ilegível ou malformado."""


class InvalidViewConfigError(ConfigError):
    """
    Exceção levantada quando um registro de view declara `dto_class` ou
    `dto_factory` com tipo não suportado.

    Tipos aceitos:
        - dto_class: None, string importável ou classe
        - dto_factory: None, string ou callable
    """
