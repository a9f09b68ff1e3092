# src/settable/core/tree/__init__.py
"""
Árvore de settings do Settable.

Componentes:
    - Namespace         → container nomeado de settings e filhos
    - Setting           → valor literal ou computado
    - EvaluationContext → contexto transitório de avaliação de blocos
    - SettingsAttribute → anexação da árvore a uma classe host
    - configure         → construção de uma árvore raiz

A avaliação é sempre lazy: definir um setting nunca executa o seu bloco.
"""

from .attribute import SettingsAttribute, configure, settings_attribute
from .context import EvaluationContext
from .namespace import DEFAULT_ENVIRONMENTS, Namespace
from .setting import Setting, is_present

__all__ = [
    "Namespace",
    "Setting",
    "EvaluationContext",
    "SettingsAttribute",
    "settings_attribute",
    "configure",
    "is_present",
    "DEFAULT_ENVIRONMENTS",
]
