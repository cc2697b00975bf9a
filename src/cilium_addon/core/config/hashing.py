# src/cilium_addon/core/config/hashing.py
"""
Hashing canônico de values do Cilium Add-on.

Este módulo gera o hash determinístico dos values efetivos entregues ao
Chart Installer. O hash representa a **identidade estrutural** da
configuração e é gravado junto ao registro da release para auditoria.

Princípios fundamentais:
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Independente da ordem original das chaves
    - Algoritmo estável (SHA-256)

Limites explícitos:
    - Não valida schema do chart
    - Não persiste o hash
"""


import json
import hashlib
from typing import Dict, Any


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash SHA-256 determinístico dos values efetivos.

    O `ValuesFileInstaller` grava este valor como `values_sha256` em
    `<release>.release.json`. Um passo externo compara o hash com o da
    última aplicação para saber se os values mudaram (drift) sem reler o
    YAML; por isso a ordem de chaves não pode alterar o resultado.

    Args:
        config (Dict[str, Any]): Values resolvidos.

    Returns:
        str: Hash hexadecimal de 64 caracteres.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Values para hashing devem ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
