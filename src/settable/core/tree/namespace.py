# src/settable/core/tree/namespace.py
"""
Namespace — nó da árvore declarativa de settings.

Este módulo define o `Namespace`, o container nomeado que agrupa settings
e namespaces filhos, possui o seu próprio Environment Matcher (herdado ou
sobrescrito) e dá acesso à raiz da árvore para referências cruzadas.

Ciclo de vida:
    - Um namespace é materializado de forma síncrona: o builder roda uma
      única vez, de cima para baixo, definindo settings e filhos
    - Filhos são construídos de forma EAGER, no momento de `namespace(...)`,
      e exatamente uma vez
    - O matcher do pai é copiado (por referência) na criação do filho;
      trocar o matcher do pai depois NÃO afeta filhos já construídos

Responsabilidades do módulo:
    - Definição de settings (`set`, `computed`, `enable`, `disable`)
    - Definição de namespaces filhos (`namespace`)
    - Configuração do matcher (`use_environment`) e consultas de ambiente
    - Leitura (`ns.key`, `ns["key"]`, `value`, `present`, `get`)
    - Introspecção (`keys`, `to_dict`, `to_yaml`, `fingerprint`)
    - Log estruturado de eventos de construção, agregado na raiz

Decisões arquiteturais:
    - Redefinir uma chave substitui a entrada anterior (last write wins)
    - Leituras nunca são memoizadas e nunca registram eventos
    - Atributos reais (métodos e propriedades) têm precedência sobre
      settings homônimos; use `get`/`value` para esses nomes

Invariantes:
    - A árvore é acíclica: o pai é fixado na construção e nunca muda
    - `root` termina sempre no namespace sem pai
    - Eventos e warnings de toda a árvore vivem no namespace raiz

Limites explícitos:
    - Não persiste configuração
    - Não carrega arquivos
    - Não detecta frameworks host
"""

from __future__ import annotations

from datetime import datetime, timezone
from functools import cached_property
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

import yaml  # PyYAML

from ..environment.matcher import EnvironmentMatcher
from ..environment.registry import resolve_matcher
from ..exceptions import CircularReferenceError, NoMatcherConfiguredError, UnknownEnvironmentError
from .context import flatten_tags
from .hashing import compute_fingerprint
from .setting import Block, Setting


DEFAULT_ENVIRONMENTS = ("development", "test", "production")

Builder = Callable[["Namespace"], Any]
Entry = Union[Setting, "Namespace"]


class Namespace:
    """
    Container nomeado de settings e namespaces filhos.

    Args:
        name: identificador do namespace (usado em `path` e diagnósticos).
        parent: namespace pai; None para a raiz.
        matcher: matcher explícito; quando omitido, herda o do pai.
        builder: callable `(namespace) -> None` executado na construção.

    Leitura por atributo (`ns.key`) consulta primeiro os atributos reais da
    classe: settings chamados `name`, `path`, `value`, `get`, `keys`, `set`,
    `root`, `events`, etc. ficam sombreados e devem ser lidos via
    `ns.get("name")`, `ns.value("name")` ou `ns["name"]`. Dentro de blocos,
    `ctx.name` lê o setting (ver EvaluationContext).
    """

    def __init__(
        self,
        name: str,
        parent: Optional["Namespace"] = None,
        matcher: Any = None,
        builder: Optional[Builder] = None,
    ):
        self._name = str(name)
        self._parent = parent
        self._entries: Dict[str, Entry] = {}

        if parent is None:
            self._matcher: Optional[EnvironmentMatcher] = None
            self._environments: List[str] = list(DEFAULT_ENVIRONMENTS)
            self._events: List[Dict[str, Any]] = []
            self._warnings: Dict[str, List[str]] = {}
        else:
            self._matcher = parent._matcher
            self._environments = list(parent._environments)

        if matcher is not None:
            self.use_environment(matcher)

        if builder is not None:
            self.configure(builder)

    # -----------------------------
    # Identidade e posição na árvore
    # -----------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> Optional["Namespace"]:
        return self._parent

    @cached_property
    def root(self) -> "Namespace":
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    @cached_property
    def path(self) -> str:
        """Caminho pontuado a partir da raiz (a raiz tem caminho vazio)."""
        if self._parent is None:
            return ""
        prefix = self._parent.path
        return f"{prefix}.{self._name}" if prefix else self._name

    @property
    def matcher(self) -> Optional[EnvironmentMatcher]:
        return self._matcher

    @property
    def environments(self) -> List[str]:
        return list(self._environments)

    # -----------------------------
    # Construção
    # -----------------------------
    def configure(self, builder: Builder) -> "Namespace":
        """Executa `builder(self)` e retorna o próprio namespace."""
        builder(self)
        return self

    def set(self, key: str, value: Any = None, *, block: Optional[Block] = None) -> Setting:
        """
        Define (ou redefine) um setting literal ou computado.

        Raises:
            DefinitionConflictError: se `value` não for None e `block`
                também for fornecido.
        """
        key = self._validate_key(key)
        setting = Setting(self, key, value, block)
        self._store(key, setting)
        self.log(
            level="DEBUG",
            message="setting defined",
            key=key,
            computed=setting.computed,
        )
        return setting

    def computed(self, key: str) -> Callable[[Block], Block]:
        """Decorator: `@ns.computed("key")` define um setting computado."""

        def decorator(block: Block) -> Block:
            self.set(key, block=block)
            return block

        return decorator

    def enable(self, *keys: str) -> None:
        for key in keys:
            self.set(key, True)

    def disable(self, *keys: str) -> None:
        for key in keys:
            self.set(key, False)

    def namespace(self, key: str, builder: Optional[Builder] = None) -> "Namespace":
        """
        Constrói e registra um namespace filho.

        O filho herda o matcher e os ambientes declarados deste namespace
        no momento da construção; o builder pode sobrescrevê-los.
        """
        key = self._validate_key(key)
        child = Namespace(key, parent=self)
        child.log(level="DEBUG", message="namespace opened")
        if builder is not None:
            child.configure(builder)
        self._store(key, child)
        return child

    def use_environment(self, matcher: Any) -> None:
        """
        Define o matcher deste namespace.

        Aceita um objeto com `matches(tag)`, um nome registrado
        ("process-variable", "host-framework", ...) ou um predicado
        unário. `None` é ignorado.

        Raises:
            InvalidMatcherError: se o valor não for reconhecível.
        """
        if matcher is None:
            return
        self._matcher = resolve_matcher(matcher)
        self.log(level="DEBUG", message="environment matcher set", matcher=repr(self._matcher))

    def define_environments(self, *names: Any) -> None:
        for name in flatten_tags(names):
            text = str(name)
            if text not in self._environments:
                self._environments.append(text)
        self.log(level="DEBUG", message="environments declared", environments=self.environments)

    # -----------------------------
    # Consultas de ambiente
    # -----------------------------
    def environment_matches_any(self, *tags: Any) -> bool:
        """
        True se o matcher corresponder a qualquer uma das tags.

        Raises:
            NoMatcherConfiguredError: se nenhum matcher estiver configurado.
        """
        matcher = self._require_matcher()
        return any(matcher.matches(tag) for tag in flatten_tags(tags))

    def in_environment(self, name: Any) -> bool:
        """Consulta um ambiente declarado (ver `define_environments`)."""
        text = str(name)
        if text not in self._environments:
            raise UnknownEnvironmentError(
                f"Environment '{text}' is not declared",
                details={"environment": text, "declared": self.environments},
                hint="Declare it first with define_environments(...).",
            )
        return self._require_matcher().matches(text)

    def in_environments(self, *names: Any) -> bool:
        return any(self.in_environment(name) for name in names)

    # -----------------------------
    # Leitura
    # -----------------------------
    def setting(self, key: str) -> Setting:
        entry = self._entries[str(key)]
        if not isinstance(entry, Setting):
            raise KeyError(key)
        return entry

    def value(self, key: str) -> Any:
        return self._read(self._entries[str(key)])

    def present(self, key: str) -> bool:
        entry = self._entries[str(key)]
        if isinstance(entry, Namespace):
            return True
        return entry.present()

    def get(self, key: str, default: Any = None) -> Any:
        entry = self._entries.get(str(key))
        if entry is None:
            return default
        return self._read(entry)

    def keys(self) -> List[str]:
        return list(self._entries)

    def __getitem__(self, key: str) -> Any:
        return self.value(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._entries)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        entries = self.__dict__.get("_entries", {})
        if name not in entries:
            label = self.__dict__.get("_name", "?")
            raise AttributeError(f"Namespace '{label}' has no setting or namespace '{name}'")
        return self._read(entries[name])

    def __repr__(self) -> str:
        return f"<Namespace {self.path or self._name} keys={self.keys()}>"

    # -----------------------------
    # Introspecção
    # -----------------------------
    def to_dict(self) -> Dict[str, Any]:
        """
        Dump recursivo dos valores resolvidos (avalia todos os blocos).

        Settings computados cujo valor é um Namespace (ex.: `ctx.root.email`)
        são expandidos como o namespace correspondente.

        Raises:
            CircularReferenceError: se um setting resolver para um namespace
                que já está sendo expandido (ex.: `ctx.root`).
        """
        return self._dump(())

    def _dump(self, expanding: Tuple["Namespace", ...]) -> Dict[str, Any]:
        expanding = expanding + (self,)
        dump: Dict[str, Any] = {}
        for key, entry in self._entries.items():
            value = self._read(entry)
            if isinstance(value, Namespace):
                if any(value is ns for ns in expanding):
                    raise CircularReferenceError(
                        f"Setting '{key}' resolves to namespace '{value.path or value.name}' being dumped",
                        details={"key": key, "namespace": self.path, "target": value.path},
                        hint="Reference a value inside the namespace instead of the namespace itself.",
                    )
                dump[key] = value._dump(expanding)
            else:
                dump[key] = value
        return dump

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, allow_unicode=True)

    def fingerprint(self) -> str:
        return compute_fingerprint(self.to_dict())

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    @property
    def events(self) -> List[Dict[str, Any]]:
        return self.root._events

    @property
    def warnings(self) -> Dict[str, List[str]]:
        return self.root._warnings

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "path": self.path,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, message: str) -> None:
        warnings = self.warnings
        if self.path not in warnings:
            warnings[self.path] = []
        warnings[self.path].append(message)

    # -----------------------------
    # Internos
    # -----------------------------
    @staticmethod
    def _validate_key(key: Any) -> str:
        text = str(key)
        if not text.strip():
            raise ValueError("setting key must be a non-empty string")
        return text

    def _store(self, key: str, entry: Entry) -> None:
        if key in self._entries:
            self.add_warning(message=f"'{key}' redefined")
        self._entries[key] = entry

    def _require_matcher(self) -> EnvironmentMatcher:
        if self._matcher is None:
            raise NoMatcherConfiguredError(
                f"No environment matcher configured for namespace '{self.path or self._name}'",
                details={"namespace": self.path},
                hint="Call use_environment(...) before querying the environment.",
            )
        return self._matcher

    @staticmethod
    def _read(entry: Entry) -> Any:
        if isinstance(entry, Namespace):
            return entry
        return entry.value()
