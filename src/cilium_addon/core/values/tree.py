# src/cilium_addon/core/values/tree.py
"""
Modelo canônico de ConfigTree (árvore de values de um chart Helm).

Uma ConfigTree é um mapa de chaves string para valores que podem ser:
    - escalares (str, bool, int, float ou None para null explícito)
    - listas (de escalares ou de árvores)
    - outras ConfigTrees (recursivo)

Em vez de checagens ad hoc de tipo espalhadas pelo código, todo nó é
classificado em um `NodeKind` explícito. O merge e a cópia estrutural
despacham exclusivamente sobre essa classificação.

Invariantes:
    - Chaves de mapas são sempre strings
    - A árvore é acíclica (nenhum nó é ancestral de si mesmo)
    - Cópias estruturais nunca compartilham nós com a origem

Limites explícitos:
    - Não valida schema de chart
    - Não serializa a árvore (responsabilidade do installer)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Set

from ..config.errors import InvalidConfigRootTypeError, InvalidConfigTreeError


ConfigTree = Dict[str, Any]

_SCALAR_TYPES = (str, bool, int, float, type(None))


class NodeKind(str, Enum):
    """Classificação de um nó de ConfigTree."""

    SCALAR = "scalar"
    LIST = "list"
    MAP = "map"


def kind_of(value: Any) -> NodeKind:
    """
    Classifica um valor como nó de ConfigTree.

    Tuplas são tratadas como listas. Qualquer outro tipo fora do domínio
    levanta `InvalidConfigTreeError`.
    """
    if isinstance(value, Mapping):
        return NodeKind.MAP
    if isinstance(value, (list, tuple)):
        return NodeKind.LIST
    if isinstance(value, _SCALAR_TYPES):
        return NodeKind.SCALAR
    raise InvalidConfigTreeError(
        f"Valor fora do domínio de ConfigTree: {type(value).__name__}"
    )


def copy_tree(value: Any, *, _ancestors: Optional[Set[int]] = None) -> Any:
    """
    Produz uma cópia estrutural de um nó de ConfigTree.

    Mapas são copiados para `dict` preservando a ordem de inserção e listas
    (ou tuplas) são copiadas para `list`. Escalares são imutáveis e
    retornados como estão.

    Raises:
        InvalidConfigTreeError: chave não-string, tipo não suportado ou ciclo.
    """
    kind = kind_of(value)
    if kind is NodeKind.SCALAR:
        return value

    ancestors = _ancestors if _ancestors is not None else set()
    node_id = id(value)
    if node_id in ancestors:
        raise InvalidConfigTreeError("Referência cíclica detectada na ConfigTree")
    ancestors.add(node_id)

    try:
        if kind is NodeKind.LIST:
            return [copy_tree(item, _ancestors=ancestors) for item in value]

        out: ConfigTree = {}
        for key, child in value.items():
            if not isinstance(key, str):
                raise InvalidConfigTreeError(
                    f"Chaves de ConfigTree devem ser str, recebido: {type(key).__name__}"
                )
            out[key] = copy_tree(child, _ancestors=ancestors)
        return out
    finally:
        ancestors.discard(node_id)


def ensure_tree(value: Any, *, what: str = "values") -> ConfigTree:
    """
    Valida que `value` é um mapa e devolve sua cópia estrutural.

    `None` é interpretado como árvore vazia.
    """
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidConfigRootTypeError(
            f"{what} deve ser um mapa, recebido: {type(value).__name__}"
        )
    return copy_tree(value)


def get_path(tree: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """Lê um valor por caminho pontuado (ex.: ``"hubble.ui.enabled"``)."""
    node: Any = tree
    for part in path.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return default
        node = node[part]
    return node


def paths(tree: Mapping[str, Any], prefix: str = "") -> List[str]:
    """Lista os caminhos pontuados de todas as folhas, em ordem de inserção."""
    out: List[str] = []
    for key, child in tree.items():
        full = f"{prefix}.{key}" if prefix else key
        if isinstance(child, Mapping) and child:
            out.extend(paths(child, full))
        else:
            out.append(full)
    return out
