# src/settable/core/tree/context.py
"""
Contexto de avaliação de settings computados.

Este módulo define o `EvaluationContext`, o objeto transitório dentro do
qual o bloco de um setting computado é executado. O contexto medeia:

    - declarações de override por ambiente (`environment(...)`)
    - acesso ao namespace dono do setting e à raiz da árvore

Política de override (v1):
    1. Se um override já foi registrado nesta passada, ele é retornado e
       a condição da chamada atual não é avaliada (first-match-wins)
    2. Sem matcher configurado no namespace, a chamada é um no-op
    3. Se QUALQUER tag corresponder, o override é calculado (bloco, se
       fornecido; senão o valor literal) e registrado
    4. O bloco do setting continua executando até o fim: `environment`
       não é um mecanismo de retorno antecipado
    5. Ao final, o valor resolvido é o override registrado, se houver;
       caso contrário, o valor retornado pelo próprio bloco

Invariantes:
    - Um contexto novo é alocado a cada leitura do setting
    - O slot de override é preenchido no máximo uma vez por passada
    - Nenhum estado é compartilhado entre leituras concorrentes

Limites explícitos:
    - Não faz cache de valores entre leituras
    - Não interrompe a execução do bloco via exceção
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, List, Optional

from ..environment.matcher import EnvironmentMatcher

if TYPE_CHECKING:  # pragma: no cover
    from .namespace import Namespace
    from .setting import Setting


_UNSET = object()


def as_tags(tags: Any) -> List[Any]:
    """Normaliza uma tag única ou coleção de tags em lista ordenada."""
    if isinstance(tags, (list, tuple)):
        return list(tags)
    if isinstance(tags, (set, frozenset)):
        return sorted(tags, key=str)
    return [tags]


def flatten_tags(args: tuple) -> List[Any]:
    """`f("a", "b")` e `f(["a", "b"])` produzem a mesma lista de tags."""
    if len(args) == 1:
        return as_tags(args[0])
    return list(args)


class EvaluationContext:
    """
    Contexto transitório de uma passada de avaliação de um setting.

    Atributos desconhecidos são delegados ao namespace dono, de modo que
    um bloco pode ler settings irmãos diretamente (`ctx.sibling`) e
    settings de ancestrais via `ctx.root`.

    Na delegação, settings irmãos têm precedência sobre métodos do
    Namespace: `ctx.value` ou `ctx.keys` leem os settings homônimos.
    Apenas os atributos do próprio contexto (`root`, `namespace`,
    `setting`, `matcher`, `overridden`, `environment`, `evaluate`) não
    podem ser sombreados.
    """

    def __init__(self, setting: "Setting", namespace: "Namespace"):
        self._setting = setting
        self._namespace = namespace
        self._override: Any = _UNSET

    # -----------------------------
    # Acesso à árvore
    # -----------------------------
    @property
    def setting(self) -> "Setting":
        return self._setting

    @property
    def namespace(self) -> "Namespace":
        return self._namespace

    @property
    def root(self) -> "Namespace":
        return self._namespace.root

    @property
    def matcher(self) -> Optional[EnvironmentMatcher]:
        return self._namespace.matcher

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        entry = self._namespace._entries.get(name)
        if entry is not None:
            return self._namespace._read(entry)
        return getattr(self._namespace, name)

    # -----------------------------
    # Overrides por ambiente
    # -----------------------------
    @property
    def overridden(self) -> bool:
        return self._override is not _UNSET

    def environment(
        self,
        tags: Any,
        value: Any = None,
        block: Optional[Callable[[], Any]] = None,
    ) -> Any:
        """
        Declara um override condicional ao ambiente.

        Args:
            tags: tag única ou lista/tupla de tags.
            value: valor literal do override.
            block: callable sem argumentos; quando fornecido, tem
                precedência sobre `value` e só é chamado se houver match.

        Returns:
            Any: o override registrado nesta passada (deste ou de um
            `environment` anterior), ou None quando nada corresponde.
        """
        if self._override is not _UNSET:
            return self._override

        matcher = self._namespace.matcher
        if matcher is None:
            return None

        if any(matcher.matches(tag) for tag in as_tags(tags)):
            self._override = block() if block is not None else value
            return self._override

        return None

    # -----------------------------
    # Avaliação
    # -----------------------------
    def evaluate(self, block: Callable[["EvaluationContext"], Any]) -> Any:
        self._override = _UNSET
        result = block(self)
        if self._override is not _UNSET:
            return self._override
        return result
