# src/cilium_addon/core/cluster/info.py
"""
ClusterInfo e handles de recursos.

`ClusterInfo` agrega a identidade do cluster alvo e os dois registries
consultados por um add-on. `preflight` implementa a verificação explícita
de dependências: o chamador consulta o registry antes de resolver values
e repassa o resultado (handle ou `None`) como parâmetro.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

from .registry import AddonRegistry, ResourceRegistry


@dataclass(frozen=True)
class CertificateHandle:
    """Handle de um certificado registrado (ex.: ACM)."""

    name: str
    certificate_arn: str


@dataclass
class ClusterInfo:
    """Cluster alvo e seus registries de add-ons e recursos."""

    cluster_name: str
    addons: AddonRegistry = field(default_factory=AddonRegistry)
    resources: ResourceRegistry = field(default_factory=ResourceRegistry)

    def get_scheduled_addon(self, name: str) -> Optional[Any]:
        return self.addons.get_scheduled(name)


def preflight(cluster: ClusterInfo, names: Iterable[str]) -> Dict[str, Optional[Any]]:
    """
    Consulta o registry de add-ons para cada nome informado.

    Returns:
        Dict[str, Optional[Any]]: nome → handle agendado (ou None), na
        ordem recebida.
    """
    return {name: cluster.get_scheduled_addon(name) for name in names}
