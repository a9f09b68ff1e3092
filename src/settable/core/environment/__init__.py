# src/settable/core/environment/__init__.py
"""
Camada de ambiente do Settable.

Este pacote contém o contrato de Environment Matcher, os adapters
built-in e o registro de matchers nomeados usado por `use_environment`.

API pública exposta:
    - EnvironmentMatcher     → protocolo `matches(tag) -> bool`
    - PredicateMatcher       → adapter para predicados unários
    - ProcessVariableMatcher → presença de variável de processo
    - HostStageMatcher       → igualdade com o estágio atual do host
    - set_stage_provider     → registra o colaborador do host
    - MatcherRegistry        → nomes bem conhecidos → fábricas
    - resolve_matcher        → resolução do argumento de `use_environment`

Limites explícitos:
    - Não resolve overrides de settings
    - Não detecta frameworks host automaticamente
"""

from .adapters import (
    HostStageMatcher,
    ProcessVariableMatcher,
    clear_stage_provider,
    current_stage,
    set_stage_provider,
)
from .matcher import EnvironmentMatcher, PredicateMatcher
from .registry import DEFAULT_REGISTRY, MatcherRegistry, resolve_matcher

__all__ = [
    "EnvironmentMatcher",
    "PredicateMatcher",
    "ProcessVariableMatcher",
    "HostStageMatcher",
    "set_stage_provider",
    "clear_stage_provider",
    "current_stage",
    "MatcherRegistry",
    "DEFAULT_REGISTRY",
    "resolve_matcher",
]
