# tests/core/tree/test_root_references.py
"""
Testes de referências cruzadas via `root`.

Este módulo valida que blocos de avaliação podem ler settings de
ancestrais e irmãos através do contexto, independentemente da
profundidade de aninhamento, e que ciclos de leitura são detectados.

Invariantes:
    - `ctx.root` é sempre o namespace raiz da árvore
    - Referências são resolvidas no momento da leitura
    - Chave inexistente propaga AttributeError sem encapsulamento
    - Auto-referência resulta em CircularReferenceError
"""

import threading

import pytest

from settable import CircularReferenceError, configure


def test_root_reference_from_nested_namespace():
    """
    Verifica que `root.greeting + " world"` resolve em qualquer profundidade.
    """

    def build(s):
        s.set("greeting", "hello")
        s.namespace("a", lambda a: a.set("message", block=lambda ctx: ctx.root.greeting + " world"))
        s.namespace(
            "b",
            lambda b: b.namespace(
                "c",
                lambda c: c.namespace(
                    "d", lambda d: d.set("message", block=lambda ctx: ctx.root.greeting + " world")
                ),
            ),
        )

    settings = configure(build)
    assert settings.a.message == "hello world"
    assert settings.b.c.d.message == "hello world"


def test_root_reference_is_resolved_at_read_time():
    settings = configure(lambda s: s.set("greeting", "hello"))
    settings.namespace("a", lambda a: a.set("message", block=lambda ctx: ctx.root.greeting + " world"))
    settings.set("greeting", "goodbye")
    assert settings.a.message == "goodbye world"


def test_sibling_reference_through_context():
    def build(s):
        s.set("value", "value")
        s.set("block", block=lambda ctx: ctx.value)

    assert configure(build).block == "value"


def test_sibling_named_like_namespace_methods_through_context():
    """
    Verifica que, dentro de blocos, irmãos com nomes de métodos do
    Namespace (`keys`, `get`) são lidos como settings.

    Fora do contexto, `settings.keys` continua sendo o método.
    """

    def build(s):
        s.set("keys", "k")
        s.set("get", "g")
        s.set("combined", block=lambda ctx: ctx.keys + ctx.get)

    settings = configure(build)
    assert settings.combined == "kg"
    assert callable(settings.keys)


def test_sibling_namespace_through_context():
    def build(s):
        s.namespace("email", lambda e: e.set("sender", "no-reply@example.com"))
        s.set("reply_to", block=lambda ctx: ctx.email.sender)

    assert configure(build).reply_to == "no-reply@example.com"


def test_context_exposes_owning_namespace_and_setting():
    seen = {}

    def block(ctx):
        seen["namespace"] = ctx.namespace
        seen["setting"] = ctx.setting
        seen["root"] = ctx.root
        return "ok"

    settings = configure(lambda s: s.namespace("api", lambda a: a.set("token", block=block)))
    assert settings.api.token == "ok"
    assert seen["namespace"] is settings.api
    assert seen["root"] is settings
    assert seen["setting"].qualified_key == "api.token"


def test_missing_cross_reference_raises_attribute_error():
    settings = configure(
        lambda s: s.namespace("api", lambda a: a.set("url", block=lambda ctx: ctx.root.missing_host))
    )
    with pytest.raises(AttributeError):
        settings.api.url


def test_self_reference_is_detected():
    """
    Verifica que um setting que lê a si mesmo falha explicitamente.

    Invariantes:
        - O ciclo é reportado com a cadeia de chaves envolvidas
        - A árvore continua utilizável após o erro
    """

    def build(s):
        s.set("a", block=lambda ctx: ctx.b)
        s.set("b", block=lambda ctx: ctx.root.a)
        s.set("plain", "ok")

    settings = configure(build)
    with pytest.raises(CircularReferenceError) as exc_info:
        settings.a

    assert exc_info.value.details["chain"] == ["a", "b", "a"]
    assert settings.plain == "ok"

    with pytest.raises(CircularReferenceError):
        settings.a


def test_repeated_reads_of_same_setting_are_not_cycles():
    def build(s):
        s.set("base", block=lambda ctx: 2)
        s.set("square", block=lambda ctx: ctx.base * ctx.base)

    assert configure(build).square == 4


def test_concurrent_reads_use_independent_contexts(TagMatcher):
    """
    Verifica que leituras concorrentes não compartilham contexto.

    Cada thread lê o mesmo setting computado; todas observam o override
    e nenhuma é interrompida por detecção de ciclo indevida.
    """
    barrier = threading.Barrier(4)

    def block(ctx):
        barrier.wait(timeout=5)
        ctx.environment("production", "PROD")
        return "default"

    settings = configure(lambda s: s.set("v", block=block), matcher=TagMatcher("production"))
    results = []
    errors = []

    def read():
        try:
            results.append(settings.v)
        except Exception as exc:  # noqa: BLE001
            errors.append(exc)

    threads = [threading.Thread(target=read) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert results == ["PROD"] * 4
