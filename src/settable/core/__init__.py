# src/settable/core/__init__.py
"""
Core do Settable.

Este pacote contém a implementação canônica do motor de resolução de
settings: a árvore de namespaces, a avaliação lazy de valores, a
resolução de overrides por ambiente e o acesso à raiz para referências
cruzadas.

Componentes principais:
    - tree        → Namespace, Setting, EvaluationContext, anexação a classes
    - environment → contrato de matcher, adapters built-in e registry
    - exceptions  → exceções tipadas de definição e leitura
    - errors      → payload serializável e catálogo de códigos de erro

Princípios fundamentais:
    - Definir nunca avalia; ler sempre reavalia
    - Overrides seguem first-match-wins dentro de uma passada
    - Erros são propagados ao chamador imediato, sem recuperação

Limites explícitos:
    - Não é uma linguagem de expressões
    - Não é um formato de persistência
    - Não é um serviço de configuração distribuído
"""
