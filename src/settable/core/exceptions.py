# src/settable/core/exceptions.py
"""
Settable — Exceções canônicas (v1)

Este módulo define as exceções tipadas do Settable.

Objetivo:
- Sinalizar falhas de definição (construção da árvore) imediatamente ao chamador
- Sinalizar falhas de leitura (avaliação de settings) sem encapsulamento
- Permitir mapeamento determinístico para SettableErrorPayload

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Chaves inexistentes NÃO possuem exceção própria: propagam como
  AttributeError/KeyError comuns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional

from .errors import (
    CIRCULAR_REFERENCE,
    DEFINITION_CONFLICT,
    DUPLICATE_MATCHER_NAME,
    INVALID_MATCHER,
    NO_MATCHER_CONFIGURED,
    UNKNOWN_ENVIRONMENT,
    SettableErrorPayload,
)


@dataclass(eq=False)
class SettableException(Exception):
    """Base class para exceções internas do Settable.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    code: ClassVar[str] = "SETTABLE_ERROR"

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> SettableErrorPayload:
        return SettableErrorPayload(
            type=self.code,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


# ---------------------------------------------------------------------------
# Definição (construction-time)
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class DefinitionConflictError(SettableException):
    """`set` recebeu simultaneamente um valor literal e um bloco."""

    code: ClassVar[str] = DEFINITION_CONFLICT


@dataclass(eq=False)
class InvalidMatcherError(SettableException):
    """Valor passado a `use_environment` não é um matcher reconhecível."""

    code: ClassVar[str] = INVALID_MATCHER


@dataclass(eq=False)
class DuplicateMatcherNameError(SettableException):
    """Nome de matcher já registrado no MatcherRegistry."""

    code: ClassVar[str] = DUPLICATE_MATCHER_NAME


# ---------------------------------------------------------------------------
# Leitura (read-time)
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class NoMatcherConfiguredError(SettableException):
    """Consulta de ambiente em um namespace sem matcher configurado."""

    code: ClassVar[str] = NO_MATCHER_CONFIGURED


@dataclass(eq=False)
class UnknownEnvironmentError(SettableException):
    """Nome de ambiente não declarado via `define_environments`."""

    code: ClassVar[str] = UNKNOWN_ENVIRONMENT


@dataclass(eq=False)
class CircularReferenceError(SettableException):
    """Setting computado leu a si mesmo durante a própria avaliação."""

    code: ClassVar[str] = CIRCULAR_REFERENCE
