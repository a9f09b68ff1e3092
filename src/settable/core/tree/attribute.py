# src/settable/core/tree/attribute.py
"""
Anexação de uma árvore de settings a uma classe host.

Este módulo define o `SettingsAttribute`, um descriptor que expõe UMA
única instância de `Namespace` tanto no nível da classe quanto no nível
de cada instância da classe host:

    class App:
        settings = SettingsAttribute(build_settings)

    App.settings is App().settings  # True

Decisões arquiteturais:
    - Propriedade compartilhada explícita: o descriptor é o dono da árvore
    - A árvore é construída no primeiro acesso, exatamente uma vez
    - Subclasses compartilham a árvore da classe onde o descriptor foi declarado

Limites explícitos:
    - Não permite reatribuição via instância
    - Não constrói árvores separadas por instância
"""

from __future__ import annotations

import threading
from typing import Any, Optional

from .namespace import Builder, Namespace


DEFAULT_ROOT_NAME = "settings"


def configure(
    builder: Optional[Builder] = None,
    *,
    matcher: Any = None,
    name: str = DEFAULT_ROOT_NAME,
) -> Namespace:
    """Cria e materializa uma nova árvore de settings (namespace raiz)."""
    return Namespace(name, matcher=matcher, builder=builder)


class SettingsAttribute:
    """Descriptor que compartilha um Namespace entre classe e instâncias."""

    def __init__(
        self,
        builder: Optional[Builder] = None,
        *,
        matcher: Any = None,
        name: Optional[str] = None,
    ):
        self._builder = builder
        self._matcher = matcher
        self._name = name
        self._namespace: Optional[Namespace] = None
        self._lock = threading.Lock()

    def __set_name__(self, owner: type, name: str) -> None:
        if self._name is None:
            self._name = name

    @property
    def namespace(self) -> Namespace:
        if self._namespace is None:
            with self._lock:
                if self._namespace is None:
                    self._namespace = configure(
                        self._builder,
                        matcher=self._matcher,
                        name=self._name or DEFAULT_ROOT_NAME,
                    )
        return self._namespace

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Namespace:
        return self.namespace

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError("settings tree cannot be reassigned")


def settings_attribute(builder: Builder) -> SettingsAttribute:
    """
    Decorator: transforma uma função builder em atributo de settings.

        class App:
            @settings_attribute
            def config(s):
                s.set("debug", False)
    """
    return SettingsAttribute(builder, name=getattr(builder, "__name__", None))
