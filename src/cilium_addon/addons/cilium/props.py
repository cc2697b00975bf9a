# src/cilium_addon/addons/cilium/props.py
"""
Opções do Cilium Add-on.

`CiliumAddOnProps` é uma estrutura imutável construída uma vez por
invocação a partir dos defaults canônicos e das opções do usuário.
Nenhum objeto de defaults é compartilhado entre chamadas: cada instância
carrega sua própria cópia estrutural de `values`.

Opções aceitas:
    - name, namespace, chart, version, release, repository
    - values: overrides do usuário para os values do chart
    - create_namespace: cria o namespace alvo
    - enable_alb: expõe o Hubble UI via AWS Load Balancer Controller
    - certificate_resource_name: certificado usado no listener HTTPS
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ...core.config.errors import UnknownOptionError
from ...core.config.loader import load_mapping_file
from ...core.install.chart import ChartSpec
from ...core.values.tree import ConfigTree, ensure_tree


DEFAULT_NAME = "cilium"
DEFAULT_NAMESPACE = "kube-system"
DEFAULT_CHART = "cilium"
DEFAULT_VERSION = "1.13.4"
DEFAULT_RELEASE = "blueprints-addon-cilium"
DEFAULT_REPOSITORY = "https://helm.cilium.io"

# Chaves camelCase usadas em arquivos de opções.
OPTION_ALIASES: Dict[str, str] = {
    "createNamespace": "create_namespace",
    "enableAlb": "enable_alb",
    "certificateResourceName": "certificate_resource_name",
}


@dataclass(frozen=True)
class CiliumAddOnProps:
    """Opções efetivas do add-on (defaults + opções do usuário)."""

    name: str = DEFAULT_NAME
    namespace: str = DEFAULT_NAMESPACE
    chart: str = DEFAULT_CHART
    version: str = DEFAULT_VERSION
    release: str = DEFAULT_RELEASE
    repository: str = DEFAULT_REPOSITORY
    values: ConfigTree = field(default_factory=dict)
    create_namespace: bool = True
    enable_alb: bool = False
    certificate_resource_name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", ensure_tree(self.values, what="values"))

    @classmethod
    def option_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]] = None) -> "CiliumAddOnProps":
        """
        Constrói as opções a partir de um mapa (ex.: arquivo de opções).

        Chaves `None` são ignoradas, mantendo o default correspondente.

        Raises:
            UnknownOptionError: Se alguma chave não for uma opção conhecida.
            InvalidConfigRootTypeError: Se `values` não for um mapa.
        """
        return cls(**cls._normalize_options(options))

    @classmethod
    def _normalize_options(cls, options: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        known = set(cls.option_names())
        kwargs: Dict[str, Any] = {}
        for key, value in (options or {}).items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                raise UnknownOptionError(f"Opção desconhecida para o add-on: {key}")
            if value is not None:
                kwargs[name] = value
        return kwargs

    def with_options(self, **options: Any) -> "CiliumAddOnProps":
        """
        Devolve uma cópia com as opções informadas aplicadas por cima.

        Segue as mesmas regras de `from_mapping` (aliases camelCase, `None`
        ignorado, opção desconhecida → `UnknownOptionError`).
        """
        return replace(self, **self._normalize_options(options))

    def chart_spec(self) -> ChartSpec:
        return ChartSpec(
            name=self.name,
            chart=self.chart,
            version=self.version,
            release=self.release,
            repository=self.repository,
            namespace=self.namespace,
            create_namespace=self.create_namespace,
        )


def resolve_props(**options: Any) -> CiliumAddOnProps:
    """Atalho para `CiliumAddOnProps.from_mapping(options)`."""
    return CiliumAddOnProps.from_mapping(options)


def load_addon_options(path: Union[str, Path]) -> CiliumAddOnProps:
    """Carrega um arquivo de opções (YAML ou JSON) e devolve as props efetivas."""
    return CiliumAddOnProps.from_mapping(load_mapping_file(path))
