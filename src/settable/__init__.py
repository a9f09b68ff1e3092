# src/settable/__init__.py
"""
Settable — árvore declarativa de settings com overrides por ambiente.

Este pacote raiz expõe a API pública do Settable: settings nomeados,
literais ou computados de forma lazy, organizados em namespaces
aninhados, com overrides condicionados a um matcher de ambiente
plugável (ex.: estágio atual de deploy).

Uso típico:

    import settable

    def build(s):
        s.use_environment("process-variable")
        s.set("greeting", "hello")

        @s.computed("api_token")
        def api_token(ctx):
            ctx.environment("PRODUCTION", "PRODTOKEN")
            return "DEVTOKEN"

        s.namespace("email", lambda e: e.set(
            "subject", block=lambda ctx: ctx.root.greeting + " world"
        ))

    settings = settable.configure(build)
    settings.api_token

Este módulo existe como ponto de entrada lógico do Settable.
"""

from .core.environment import (
    EnvironmentMatcher,
    HostStageMatcher,
    MatcherRegistry,
    PredicateMatcher,
    ProcessVariableMatcher,
    clear_stage_provider,
    set_stage_provider,
)
from .core.errors import SettableErrorPayload
from .core.exceptions import (
    CircularReferenceError,
    DefinitionConflictError,
    DuplicateMatcherNameError,
    InvalidMatcherError,
    NoMatcherConfiguredError,
    SettableException,
    UnknownEnvironmentError,
)
from .core.tree import (
    EvaluationContext,
    Namespace,
    Setting,
    SettingsAttribute,
    configure,
    is_present,
    settings_attribute,
)

__version__ = "3.0.0"

__all__ = [
    "configure",
    "Namespace",
    "Setting",
    "EvaluationContext",
    "SettingsAttribute",
    "settings_attribute",
    "is_present",
    "EnvironmentMatcher",
    "PredicateMatcher",
    "ProcessVariableMatcher",
    "HostStageMatcher",
    "MatcherRegistry",
    "set_stage_provider",
    "clear_stage_provider",
    "SettableErrorPayload",
    "SettableException",
    "DefinitionConflictError",
    "InvalidMatcherError",
    "DuplicateMatcherNameError",
    "NoMatcherConfiguredError",
    "UnknownEnvironmentError",
    "CircularReferenceError",
]
