# src/settable/core/tree/setting.py
"""
Setting — entrada nomeada da árvore de configuração.

Um setting armazena exatamente um entre:
    - um valor literal (qualquer tipo)
    - um bloco de avaliação `(ctx) -> valor`, executado a cada leitura

Decisões arquiteturais:
    - Blocos nunca têm o resultado memoizado entre leituras
    - Cada leitura aloca um `EvaluationContext` novo
    - Presença segue a regra "falso apenas para None e False":
      zero, strings vazias e coleções vazias SÃO presentes
    - Auto-referência durante a avaliação é detectada por thread e
      sinalizada com `CircularReferenceError`

Limites explícitos:
    - Não conhece matchers diretamente (delegado ao contexto)
    - Não registra eventos
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Callable, Iterator, List, Optional

from ..exceptions import CircularReferenceError, DefinitionConflictError
from .context import EvaluationContext

if TYPE_CHECKING:  # pragma: no cover
    from .namespace import Namespace


Block = Callable[[EvaluationContext], Any]

_active = threading.local()


def is_present(value: Any) -> bool:
    """Falso apenas para `None` e `False`."""
    return value is not None and value is not False


@contextmanager
def _evaluating(setting: "Setting") -> Iterator[None]:
    stack: Optional[List["Setting"]] = getattr(_active, "stack", None)
    if stack is None:
        stack = _active.stack = []

    for index, other in enumerate(stack):
        if other is setting:
            chain = [s.qualified_key for s in stack[index:]] + [setting.qualified_key]
            raise CircularReferenceError(
                f"Circular reference while evaluating '{setting.qualified_key}'",
                details={"chain": chain},
                hint="Break the cycle so that no computed setting reads itself.",
            )

    stack.append(setting)
    try:
        yield
    finally:
        stack.pop()


class Setting:
    """Valor nomeado, literal ou computado, pertencente a um Namespace."""

    def __init__(
        self,
        namespace: "Namespace",
        key: str,
        value: Any = None,
        block: Optional[Block] = None,
    ):
        if value is not None and block is not None:
            raise DefinitionConflictError(
                f"Setting '{key}' received both a value and a block",
                details={"key": key, "namespace": namespace.path},
                hint="Pass either a literal value or a block, not both.",
            )
        if block is not None and not callable(block):
            raise TypeError(f"block for setting '{key}' must be callable")

        self.namespace = namespace
        self.key = key
        self._literal = value
        self._block = block

    @property
    def computed(self) -> bool:
        return self._block is not None

    @property
    def qualified_key(self) -> str:
        prefix = self.namespace.path
        return f"{prefix}.{self.key}" if prefix else self.key

    def value(self) -> Any:
        if self._block is None:
            return self._literal

        with _evaluating(self):
            ctx = EvaluationContext(self, self.namespace)
            return ctx.evaluate(self._block)

    def present(self) -> bool:
        return is_present(self.value())

    def __repr__(self) -> str:
        kind = "computed" if self.computed else "literal"
        return f"<Setting {self.qualified_key} ({kind})>"
