# src/cilium_addon/core/config/merge.py
"""
Utilitário canônico de deep-merge de values.

Este módulo implementa a política oficial de deep-merge utilizada pelo
Cilium Add-on para combinar os values base do chart, o overlay condicional
e os overrides informados pelo usuário.

Política de merge (v1):
    - map + map → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta
    - conflito de tipos (map vs escalar/lista) → o override vence, sem erro

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - O resultado nunca compartilha nós com base ou override

Ordem das chaves:
    - chaves da base primeiro, na ordem original
    - depois as chaves novas do override, na ordem original

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não valida schema do chart
    - Não realiza coerção de tipos
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Mapping

from ..values.tree import ConfigTree, NodeKind, ensure_tree, kind_of


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> ConfigTree:
    """
    Realiza um deep-merge determinístico entre duas ConfigTrees.

    Para cada chave presente em qualquer uma das árvores:
        - ausente no override → cópia do valor da base
        - ausente na base → cópia do valor do override
        - map nos dois lados → merge recursivo
        - qualquer outro caso → o valor do override substitui integralmente

    A função é total sobre o domínio de ConfigTree: conflitos de tipo não
    são erro ("last write wins").

    Args:
        base (Mapping[str, Any]): Values base (ex.: defaults do chart).
        override (Mapping[str, Any]): Values com precedência.

    Returns:
        ConfigTree: Nova árvore resultante do merge.

    Raises:
        InvalidConfigRootTypeError: Se base ou override não forem mapas.
        InvalidConfigTreeError: Se alguma árvore estiver fora do domínio.
    """
    base_tree = ensure_tree(base, what="base")
    override_tree = ensure_tree(override, what="override")
    return _merge_trees(base_tree, override_tree)


def _merge_trees(base: ConfigTree, override: ConfigTree) -> ConfigTree:
    # ambos já são cópias estruturais; nenhum nó do caller chega aqui
    result: ConfigTree = {}

    for key, base_value in base.items():
        if key not in override:
            result[key] = base_value
            continue

        override_value = override[key]
        if kind_of(base_value) is NodeKind.MAP and kind_of(override_value) is NodeKind.MAP:
            result[key] = _merge_trees(base_value, override_value)
        else:
            result[key] = override_value

    for key, override_value in override.items():
        if key not in result:
            result[key] = override_value

    return result


def merge_layers(*layers: Mapping[str, Any]) -> ConfigTree:
    """
    Aplica `deep_merge` da esquerda para a direita sobre várias camadas.

    A última camada tem a maior precedência. Sem camadas, retorna `{}`.
    """
    return reduce(deep_merge, layers, {})
