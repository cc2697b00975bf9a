# src/cilium_addon/core/config/loader.py
"""
Loader canônico de arquivos de values do Cilium Add-on.

Este módulo é responsável por carregar arquivos de configuração
fornecidos pelo usuário e validar seus requisitos estruturais mínimos.

Assim como no `helm install -f a.yaml -f b.yaml`, vários arquivos podem
ser informados: eles são combinados na ordem recebida, com precedência
para o último.

Responsabilidades do módulo:
    - Carregar arquivos em YAML ou JSON
    - Validar que o conteúdo raiz é um mapa
    - Resolver múltiplos arquivos via deep-merge determinístico

Invariantes:
    - Arquivos informados são obrigatórios
    - O resultado é sempre um dicionário puro (`dict`)
    - Arquivos vazios equivalem a `{}`

Limites explícitos:
    - Não valida schema do chart
    - Não conhece as opções do add-on
"""

from pathlib import Path
from typing import Any, Dict, Union
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
    ValuesFileNotFoundError,
)
from ..values.tree import copy_tree


PathLike = Union[str, Path]


def load_mapping_file(path: PathLike) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Args:
        path (PathLike): Caminho para o arquivo.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo como dicionário.

    Raises:
        ValuesFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um mapa.
        InvalidConfigTreeError: Se o conteúdo estiver fora do domínio de ConfigTree.
    """
    path = Path(path)
    if not path.exists():
        raise ValuesFileNotFoundError(f"Arquivo de values não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return copy_tree(data)


def load_values(*paths: PathLike) -> Dict[str, Any]:
    """
    Carrega e combina arquivos de values na ordem informada.

    O último arquivo tem precedência. Sem caminhos, retorna `{}`.
    """
    effective: Dict[str, Any] = {}
    for path in paths:
        effective = deep_merge(effective, load_mapping_file(path))
    return effective
