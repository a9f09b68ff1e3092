# src/settable/core/tree/hashing.py
"""
Fingerprint canônico dos valores resolvidos de uma árvore de settings.

Política de hashing (v1):
    - Serialização JSON canônica do dump resolvido
    - Ordenação estável de chaves
    - Separadores compactos
    - Codificação UTF-8
    - Algoritmo SHA-256

Valores não serializáveis em JSON são representados por `str(value)`.

Invariantes:
    - Dumps estruturalmente equivalentes produzem o mesmo fingerprint
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Any, Dict


def compute_fingerprint(dump: Dict[str, Any]) -> str:
    """
    Gera o fingerprint SHA-256 de um dump resolvido (`Namespace.to_dict`).

    Raises:
        TypeError: se o dump não for um dicionário.
    """
    if not isinstance(dump, dict):
        raise TypeError(
            f"Dump para fingerprint deve ser dict, recebido: {type(dump).__name__}"
        )

    canonical_json = json.dumps(
        dump,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
