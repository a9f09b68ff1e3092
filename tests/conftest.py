# tests/conftest.py
"""
Fixtures compartilhados para testes do Settable.

Este módulo define fixtures reutilizáveis que fornecem:
- matchers de ambiente determinísticos (sem depender do processo real)
- árvores de settings mínimas e semelhantes ao uso real
- isolamento do colaborador "estágio atual" do host

Decisões arquiteturais:
    - Matchers de teste utilizam duck typing em vez de herança
    - Imports do core são realizados de forma lazy para melhorar
      a clareza de erros durante falhas
    - O colaborador global do host é sempre restaurado após cada teste

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture depende de variáveis de ambiente reais

Este módulo existe como infraestrutura de teste e não
como validação funcional do Settable.
"""

import pytest


@pytest.fixture(autouse=True)
def _reset_stage_provider():
    """Garante que nenhum teste vaze um colaborador de estágio global."""
    yield
    from settable.core.environment import clear_stage_provider

    clear_stage_provider()


@pytest.fixture
def TagMatcher():
    """
    Fixture factory que fornece um matcher duck-typed baseado em conjunto.

    A classe retornada responde `matches(tag)` com True quando `str(tag)`
    pertence ao conjunto informado, e registra cada tag consultada em
    `calls` para verificação de ordem e curto-circuito.

    Returns:
        type: Classe _TagMatcher que pode ser instanciada pelos testes.
    """

    class _TagMatcher:
        def __init__(self, *tags):
            self.tags = {str(t) for t in tags}
            self.calls = []

        def matches(self, tag):
            self.calls.append(tag)
            return str(tag) in self.tags

    return _TagMatcher


@pytest.fixture
def basic_settings():
    """
    Fixture que fornece uma árvore raiz semelhante ao uso real do projeto.

    Contém um literal textual, um numérico, um bloco, um valor composto
    a partir de outro setting e flags habilitadas/desabilitadas.

    Returns:
        Namespace: árvore raiz materializada.
    """
    from settable import configure

    def build(s):
        s.set("string", "hello world")
        s.set("numeric", 10)
        s.set("block", block=lambda ctx: "block")
        s.set("combined", f"{s.string}-combined")
        s.enable("tracking")
        s.disable("caching")

    return configure(build)
