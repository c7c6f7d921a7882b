"""
Log estruturado de eventos do Admin DTO.

Este módulo define o `EventLog`, a estrutura canônica utilizada para
registrar eventos de criação de DTOs e falhas de configuração sem
depender de handlers globais de logging.

Princípios fundamentais:
    - Logs são eventos estruturados, não texto livre
    - Cada evento inclui `source`, `level`, `message` e `timestamp`
    - Campos extras são preservados sem filtragem implícita
    - Ausência de estado global compartilhado

Invariantes:
    - Cada chamada a `log` adiciona exatamente um evento
    - A ordem de inserção dos eventos é preservada
    - O timestamp é timezone-aware (UTC, ISO-8601)

Limites explícitos:
    - Não persiste eventos automaticamente
    - Não filtra por nível
    - Não formata saída para terminal

Este módulo existe para garantir observabilidade
e rastreabilidade da resolução de DTOs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class EventLog:
    """Coleção ordenada de eventos estruturados."""

    events: List[Dict[str, Any]] = field(default_factory=list)

    def log(self, *, source: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "source": source,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def filter(self, *, level: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["level"] == level]
