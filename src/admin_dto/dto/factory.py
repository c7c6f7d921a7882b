# src/admin_dto/dto/factory.py
"""
Resolver canônico de DTOs por entidade/view (DTOFactory).

Dado o nome de uma entidade e uma view (`new`, `edit`, ...), este módulo
descobre qual classe de DTO instanciar e **como** instanciá-la, a partir
do par `(dto_class, dto_factory)` declarado na configuração da entidade.

Ordem de resolução (a primeira estratégia aplicável vence):
    0. `dto_factory` é o nome de uma object factory registrada
       → `factory.create_dto(dto_class, view, default_data)`
    1. `dto_factory` ausente ou marcador de construtor (`__construct`, `__init__`)
       → `dto_class(default_data)`
    2. `dto_factory` sem separador `::`
       → método estático/de classe de `dto_class`: `dto_class.<nome>(default_data)`
    3. `dto_factory` diretamente invocável (callable Python ou caminho importável
       `pacote.modulo::funcao` / `pacote.modulo.Classe::metodo`)
       → `dto_factory(default_data)`
    4. `service_id::metodo` com `service_id` registrado no Service Locator
       → `container.get(service_id).<metodo>(default_data)`
    5. nenhuma estratégia aplicável → `InvalidConfiguration`

Decisões arquiteturais:
    - A resolução é função total de `(dto_class, dto_factory)`; não há cache
    - Cada chamada relê a configuração e reinvoca a estratégia
    - O valor retornado pela estratégia é devolvido sem alteração
    - `dto_class` só é importado pelas estratégias 0-2; as estratégias 3 e 4
      ignoram o valor declarado
    - Erros de configuração nunca são recuperados; propagam ao chamador

Limites explícitos:
    - Não persiste nem valida DTOs produzidos
    - Não decide a política de instanciação de serviços (responsabilidade do container)
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Callable, Dict, NoReturn, Optional, Tuple

from ..core.config.provider import ConfigurationProvider
from ..core.errors import dto_invalid_configuration
from ..core.events import EventLog
from ..core.exceptions import InvalidConfiguration
from ..core.container.locator import ServiceLocator
from .object_factory import ObjectFactory
from .registry import ObjectFactoryRegistry


CONSTRUCTOR_MARKERS = frozenset({"__construct", "__init__"})
FACTORY_SEPARATOR = "::"

STRATEGY_OBJECT_FACTORY = "object_factory"
STRATEGY_CONSTRUCTOR = "constructor"
STRATEGY_STATIC_METHOD = "static_method"
STRATEGY_CALLABLE = "callable"
STRATEGY_SERVICE = "service"

_EVENT_SOURCE = "dto_factory"


def import_object(path: str) -> Any:
    """Importa um objeto a partir de `pacote.modulo:Qual.Nome` ou `pacote.modulo.Nome`.

    Raises:
        ImportError: Se o módulo não puder ser importado.
        AttributeError: Se o atributo não existir no módulo.
    """
    if not path or path.startswith("."):
        raise ImportError(f"Caminho de import inválido: {path!r}")

    if ":" in path:
        module_path, _, qualname = path.partition(":")
        if not module_path or not qualname:
            raise ImportError(f"Caminho de import inválido: {path!r}")
    else:
        try:
            return import_module(path)
        except ModuleNotFoundError as exc:
            if exc.name != path:
                raise
        module_path, _, qualname = path.rpartition(".")
        if not module_path:
            raise ImportError(f"Nenhum módulo encontrado para: {path!r}")

    obj: Any = import_module(module_path)
    for part in qualname.split("."):
        obj = getattr(obj, part)
    return obj


def _import_callable(reference: str) -> Optional[Callable[..., Any]]:
    target_path, _, attr = reference.partition(FACTORY_SEPARATOR)
    if not target_path or not attr:
        return None
    try:
        target = getattr(import_object(target_path), attr)
    except (ImportError, AttributeError):
        return None
    return target if callable(target) else None


class DTOFactory:
    """Factory Resolver: produz DTOs a partir da configuração de entidades."""

    def __init__(
        self,
        config_manager: ConfigurationProvider,
        container: Optional[ServiceLocator] = None,
        *,
        registry: Optional[ObjectFactoryRegistry] = None,
        event_log: Optional[EventLog] = None,
    ):
        self.config_manager = config_manager
        self.container = container
        self.registry = registry if registry is not None else ObjectFactoryRegistry()
        self.event_log = event_log

    # -----------------------------
    # Object factories nomeadas
    # -----------------------------
    def add_factory(self, factory: ObjectFactory) -> None:
        self.registry.add(factory)

    def has_factory(self, name: str) -> bool:
        return self.registry.has(name)

    # -----------------------------
    # Criação de DTO
    # -----------------------------
    def create_entity_dto(self, entity_name: str, view: str, default_data: Any = None) -> Any:
        entity_config = self.config_manager.get_entity_config(entity_name)
        view_config = entity_config.get(view)
        if not isinstance(view_config, dict):
            self._fail(entity_name, view, None, reason=f"view '{view}' não configurada")

        strategy, create = self._resolve_strategy(entity_name, view, view_config)
        dto = create(default_data)

        self._log(
            level="DEBUG",
            message="dto created",
            entity=entity_name,
            view=view,
            strategy=strategy,
            dto_type=type(dto).__name__,
            config_hash=getattr(self.config_manager, "config_hash", None),
        )
        return dto

    def _resolve_dto_class(
        self,
        entity_name: str,
        view: str,
        view_config: Dict[str, Any],
    ) -> Optional[type]:
        reference = view_config.get("dto_class")
        if reference is None or isinstance(reference, type):
            return reference

        if not isinstance(reference, str):
            self._fail(
                entity_name,
                view,
                view_config.get("dto_factory"),
                reason=f"dto_class inválido: {type(reference).__name__}",
            )

        try:
            dto_class = import_object(reference)
        except (ImportError, AttributeError) as exc:
            self._fail(
                entity_name,
                view,
                view_config.get("dto_factory"),
                reason=f"dto_class não importável: {reference}",
                cause=exc,
            )

        if not isinstance(dto_class, type):
            self._fail(
                entity_name,
                view,
                view_config.get("dto_factory"),
                reason=f"dto_class não é uma classe: {reference}",
            )
        return dto_class

    def _resolve_strategy(
        self,
        entity_name: str,
        view: str,
        view_config: Dict[str, Any],
    ) -> Tuple[str, Callable[[Any], Any]]:
        dto_factory = view_config.get("dto_factory")

        # dto_class só é importado pelas estratégias que o usam (0-2)
        if isinstance(dto_factory, str) and self.registry.has(dto_factory):
            object_factory = self.registry.get(dto_factory)
            dto_class = self._resolve_dto_class(entity_name, view, view_config)
            return STRATEGY_OBJECT_FACTORY, (
                lambda data: object_factory.create_dto(dto_class, view, data)
            )

        if dto_factory is None or (isinstance(dto_factory, str) and dto_factory in CONSTRUCTOR_MARKERS):
            dto_class = self._resolve_dto_class(entity_name, view, view_config)
            return STRATEGY_CONSTRUCTOR, self._require_dto_class(entity_name, view, dto_class, dto_factory)

        if isinstance(dto_factory, str) and FACTORY_SEPARATOR not in dto_factory:
            dto_class = self._resolve_dto_class(entity_name, view, view_config)
            owner = self._require_dto_class(entity_name, view, dto_class, dto_factory)
            method = getattr(owner, dto_factory, None)
            if not callable(method):
                self._fail(
                    entity_name,
                    view,
                    dto_factory,
                    reason=f"{owner.__name__} não possui método '{dto_factory}'",
                )
            return STRATEGY_STATIC_METHOD, method

        if callable(dto_factory):
            return STRATEGY_CALLABLE, dto_factory

        if isinstance(dto_factory, str):
            target = _import_callable(dto_factory)
            if target is not None:
                return STRATEGY_CALLABLE, target

            service_id, _, method_name = dto_factory.partition(FACTORY_SEPARATOR)
            if self.container is not None and self.container.has(service_id):
                service = self.container.get(service_id)
                method = getattr(service, method_name, None)
                if not callable(method):
                    self._fail(
                        entity_name,
                        view,
                        dto_factory,
                        reason=f"serviço '{service_id}' não possui método '{method_name}'",
                    )
                return STRATEGY_SERVICE, method

        self._fail(entity_name, view, dto_factory)

    def _require_dto_class(
        self,
        entity_name: str,
        view: str,
        dto_class: Optional[type],
        dto_factory: Any,
    ) -> type:
        if dto_class is None:
            self._fail(entity_name, view, dto_factory, reason="dto_class ausente")
        return dto_class

    # -----------------------------
    # Erros & eventos
    # -----------------------------
    def _fail(
        self,
        entity_name: str,
        view: Optional[str],
        dto_factory: Any,
        *,
        reason: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> NoReturn:
        payload = dto_invalid_configuration(
            entity=entity_name,
            view=view,
            dto_factory=dto_factory,
            reason=reason,
        )
        message = (
            f"Não foi possível criar o DTO da entidade {entity_name} "
            f"com a factory configurada {dto_factory}."
        )
        if reason:
            message = f"{message} ({reason})"

        self._log(level="ERROR", message=message, error=payload.to_dict())
        raise InvalidConfiguration(
            message=message,
            details=payload.details,
            hint=payload.hint,
        ) from cause

    def _log(self, *, level: str, message: str, **extra: Any) -> None:
        if self.event_log is not None:
            self.event_log.log(source=_EVENT_SOURCE, level=level, message=message, **extra)
