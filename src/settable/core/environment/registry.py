# src/settable/core/environment/registry.py
"""
Registro de matchers nomeados e resolução de `use_environment`.

Este módulo define o `MatcherRegistry`, responsável por associar nomes
bem conhecidos (ex.: "process-variable", "host-framework") a fábricas de
matchers, e a função `resolve_matcher`, que converte qualquer valor aceito
por `Namespace.use_environment` em um matcher concreto.

Política de resolução (v1):
    - classe com `matches`           → instanciada sem argumentos
    - objeto com `matches` invocável → usado diretamente (compartilhado)
    - str                            → fábrica registrada com esse nome
    - callable                       → encapsulado em `PredicateMatcher`
    - qualquer outro valor           → `InvalidMatcherError`

Decisões arquiteturais:
    - Nomes são únicos no registry
    - A ordem de registro é preservada para listagem e diagnósticos
    - Nomes desconhecidos são tratados como matcher inválido

Invariantes:
    - Cada nome registrado aponta para exatamente uma fábrica
    - `resolve_matcher` nunca retorna None

Limites explícitos:
    - Não avalia matchers
    - Não interage com namespaces ou settings
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from ..exceptions import DuplicateMatcherNameError, InvalidMatcherError
from .adapters import HostStageMatcher, ProcessVariableMatcher
from .matcher import EnvironmentMatcher, PredicateMatcher, has_matches_capability


MatcherFactory = Callable[[], EnvironmentMatcher]


@dataclass
class MatcherRegistry:
    """
    Registro canônico de fábricas de matchers nomeados.

    Invariantes:
        - Cada nome é único no registry
        - `names()` reflete exatamente a ordem de registro
    """

    _factories: Dict[str, MatcherFactory] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, name: str, factory: MatcherFactory) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("matcher name must be a non-empty string")
        if not callable(factory):
            raise TypeError("matcher factory must be callable")

        if name in self._factories:
            raise DuplicateMatcherNameError(
                f"Duplicate matcher name: {name}",
                details={"name": name},
            )

        self._factories[name] = factory
        self._order.append(name)

    def has(self, name: str) -> bool:
        return name in self._factories

    def create(self, name: str) -> EnvironmentMatcher:
        if name not in self._factories:
            raise InvalidMatcherError(
                f"Unknown matcher name: {name}",
                details={"name": name, "known": self.names()},
                hint="Use one of the registered names or pass an object exposing matches(tag).",
            )
        return self._factories[name]()

    def names(self) -> List[str]:
        return list(self._order)


def _default_registry() -> MatcherRegistry:
    registry = MatcherRegistry()
    registry.add("process-variable", ProcessVariableMatcher)
    registry.add("env", ProcessVariableMatcher)
    registry.add("host-framework", HostStageMatcher)
    registry.add("host", HostStageMatcher)
    return registry


DEFAULT_REGISTRY = _default_registry()


def resolve_matcher(candidate: Any, registry: MatcherRegistry = DEFAULT_REGISTRY) -> EnvironmentMatcher:
    """
    Converte o argumento de `use_environment` em um matcher concreto.

    Args:
        candidate: matcher, nome registrado ou predicado unário.
        registry: registry consultado para nomes.

    Returns:
        EnvironmentMatcher: matcher pronto para uso.

    Raises:
        InvalidMatcherError: se `candidate` não for reconhecível.
    """
    if isinstance(candidate, type) and has_matches_capability(candidate):
        return candidate()

    if has_matches_capability(candidate):
        return candidate

    if isinstance(candidate, str):
        return registry.create(candidate)

    if callable(candidate):
        return PredicateMatcher(candidate)

    raise InvalidMatcherError(
        f"{candidate!r} must expose matches(tag) or be callable as (tag) -> bool",
        details={"received": type(candidate).__name__},
        hint="Pass an object with a matches(tag) method, a registered name or a predicate.",
    )
