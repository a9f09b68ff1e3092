# src/settable/core/environment/matcher.py
"""
Contrato canônico de Environment Matcher do Settable.

Este módulo define o protocolo formal que qualquer matcher de ambiente
deve satisfazer para decidir se um override condicional se aplica.

Um matcher responde a uma única pergunta: "o ambiente atual corresponde
a esta tag?". Ele é compartilhado (por referência) entre namespaces que
o herdam e nunca pertence a um namespace específico.

Princípios fundamentais:
    - Conformidade é garantida por duck typing (@runtime_checkable)
    - Chamadas são baratas e livres de efeitos colaterais
    - Estado externo (variáveis de processo, estágio do host) pode ser
      lido a cada chamada

Limites explícitos:
    - Não resolve overrides
    - Não conhece namespaces nem settings
    - Não mantém cache de resultados
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class EnvironmentMatcher(Protocol):
    """
    Contrato mínimo de um matcher de ambiente.

    Qualquer objeto que exponha `matches(tag) -> bool` é aceito por
    `Namespace.use_environment`, sem herança obrigatória.

    Invariantes:
        - `matches` nunca altera o estado do matcher
        - O retorno é interpretado como booleano
    """

    def matches(self, tag: Any) -> bool:
        """Indica se o ambiente atual corresponde a `tag`."""
        ...


class PredicateMatcher:
    """Adapta um predicado unário `(tag) -> bool` ao protocolo de matcher."""

    def __init__(self, predicate: Callable[[Any], Any]):
        if not callable(predicate):
            raise TypeError("predicate must be callable")
        self.predicate = predicate

    def matches(self, tag: Any) -> bool:
        return bool(self.predicate(tag))

    def __repr__(self) -> str:
        return f"PredicateMatcher({self.predicate!r})"


def has_matches_capability(candidate: Any) -> bool:
    """Retorna True quando `candidate` expõe um `matches` invocável."""
    return callable(getattr(candidate, "matches", None))
