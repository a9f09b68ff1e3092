# src/settable/core/errors.py
"""
Settable — Estruturas canônicas de erro (v1)

Este módulo define o payload serializável de erros do Settable.
Erros de definição e de leitura da árvore de settings são tratados como
artefatos de diagnóstico, devendo ser:

- explícitos
- serializáveis
- acionáveis

Nenhuma recuperação implícita é realizada.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SettableErrorPayload:
    """
    Payload canônico de erro do Settable.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida a quem definiu a árvore de settings
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Definição
DEFINITION_CONFLICT = "DEFINITION_CONFLICT"
INVALID_MATCHER = "INVALID_MATCHER"
DUPLICATE_MATCHER_NAME = "DUPLICATE_MATCHER_NAME"

# Leitura / Avaliação
NO_MATCHER_CONFIGURED = "NO_MATCHER_CONFIGURED"
UNKNOWN_ENVIRONMENT = "UNKNOWN_ENVIRONMENT"
CIRCULAR_REFERENCE = "CIRCULAR_REFERENCE"
