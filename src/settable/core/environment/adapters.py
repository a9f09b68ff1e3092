# src/settable/core/environment/adapters.py
"""
Adapters built-in de Environment Matcher.

Este módulo implementa os dois matchers fornecidos pelo Settable:

    - ProcessVariableMatcher → presença de variável de processo
    - HostStageMatcher       → igualdade com o "estágio atual" do host

O host embarcador (framework web, runner de jobs, etc.) é um colaborador
externo: o Settable conhece apenas o contrato de uma consulta sem
argumentos que retorna o identificador do estágio atual. Esse colaborador
é registrado via `set_stage_provider`.

Decisões arquiteturais:
    - Tags são comparadas pela sua forma textual (`str(tag)`)
    - Ausência do colaborador do host resulta em `False`, nunca em erro
    - Um colaborador que levanta exceção é tratado como indisponível
    - O ambiente de processo é lido a cada chamada (sem cache)

Limites explícitos:
    - Não detecta frameworks automaticamente
    - Não valida o valor das variáveis de processo, apenas a existência
"""

from __future__ import annotations

import os
from typing import Any, Callable, Mapping, Optional


StageProvider = Callable[[], Any]

_stage_provider: Optional[StageProvider] = None


# -----------------------------
# Colaborador "estágio atual" do host
# -----------------------------
def set_stage_provider(provider: Optional[StageProvider]) -> None:
    """Registra a consulta do host que retorna o estágio atual."""
    global _stage_provider
    if provider is not None and not callable(provider):
        raise TypeError("stage provider must be callable")
    _stage_provider = provider


def clear_stage_provider() -> None:
    set_stage_provider(None)


def current_stage() -> Optional[str]:
    """Estágio atual do host como texto, ou None se indisponível."""
    if _stage_provider is None:
        return None
    return _query_stage(_stage_provider)


def _query_stage(provider: StageProvider) -> Optional[str]:
    try:
        stage = provider()
    except Exception:  # noqa: BLE001
        return None
    return None if stage is None else str(stage)


# -----------------------------
# Matchers
# -----------------------------
class ProcessVariableMatcher:
    """
    Matcher por presença de variável de processo.

    `matches(tag)` é verdadeiro quando existe uma variável de processo
    chamada `str(tag)`, qualquer que seja o seu valor (inclusive vazio).

    Args:
        environ: mapeamento consultado; por padrão `os.environ`, lido no
            momento de cada chamada.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def matches(self, tag: Any) -> bool:
        return str(tag) in self.environ

    def __repr__(self) -> str:
        return "ProcessVariableMatcher()"


class HostStageMatcher:
    """
    Matcher por igualdade textual com o estágio atual do host.

    Quando `provider` não é informado, utiliza o colaborador global
    registrado via `set_stage_provider`. Sem colaborador disponível, ou
    quando a consulta do colaborador falha, `matches` retorna False.
    """

    def __init__(self, provider: Optional[StageProvider] = None):
        self._provider = provider

    def _stage(self) -> Optional[str]:
        if self._provider is None:
            return current_stage()
        return _query_stage(self._provider)

    def matches(self, tag: Any) -> bool:
        stage = self._stage()
        if stage is None:
            return False
        return stage == str(tag)

    def __repr__(self) -> str:
        return "HostStageMatcher()"
