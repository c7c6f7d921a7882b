"""
Core do Admin DTO.

Este pacote contém a infraestrutura independente de DTOs concretos:

    - core.config     → carregamento, merge, hashing e consulta de configuração
    - core.container  → Service Locator e container de serviços com tags
    - core.exceptions → exceções tipadas
    - core.errors     → payloads canônicos e serializáveis de erro
    - core.events     → log estruturado de eventos

Limites explícitos:
    - Não cria DTOs
    - Não depende de frameworks web, ORM ou UI
"""
