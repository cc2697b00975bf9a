# src/cilium_addon/core/install/chart.py
"""
Contrato do Chart Installer.

O Chart Installer é o colaborador externo que recebe a identidade do chart
(nome, versão, repositório, namespace, release) e a ConfigTree final, e a
aplica contra o cluster. O add-on entrega os values de forma opaca e não
interpreta o handle devolvido.

Este módulo define:
    - `ChartSpec`: identidade imutável do chart a instalar
    - `ChartInstaller` (Protocol): contrato mínimo do installer
    - `InstallHandle`: handle devolvido pelos installers embarcados
    - `RecordingChartInstaller`: installer em memória (sem cluster)

Limites explícitos:
    - Não renderiza templates
    - Não fala com cluster nem com repositório de charts
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, Sequence, Tuple, runtime_checkable

from ..values.tree import ConfigTree, copy_tree


@dataclass(frozen=True)
class ChartSpec:
    """Identidade do chart Helm a ser instalado."""

    name: str
    chart: str
    version: str
    release: str
    repository: str
    namespace: str
    create_namespace: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "chart": self.chart,
            "version": self.version,
            "release": self.release,
            "repository": self.repository,
            "namespace": self.namespace,
            "create_namespace": self.create_namespace,
        }


@dataclass(frozen=True)
class InstallHandle:
    """Instalação pendente entregue a um installer."""

    chart: ChartSpec
    values: ConfigTree
    depends_on: Tuple[str, ...] = ()
    location: str = ""


@runtime_checkable
class ChartInstaller(Protocol):
    """
    Contrato canônico de um Chart Installer.

    Decisões arquiteturais:
        - O installer recebe values já resolvidos (nenhum merge adicional)
        - `depends_on` lista os add-ons que precisam estar aplicados antes
        - O retorno é opaco para o add-on
    """

    def add_helm_chart(
        self,
        chart: ChartSpec,
        values: ConfigTree,
        *,
        depends_on: Sequence[str] = (),
    ) -> Any:
        ...


@dataclass
class RecordingChartInstaller:
    """Installer em memória que apenas registra as solicitações recebidas."""

    requests: List[InstallHandle] = field(default_factory=list)

    def add_helm_chart(
        self,
        chart: ChartSpec,
        values: ConfigTree,
        *,
        depends_on: Sequence[str] = (),
    ) -> InstallHandle:
        handle = InstallHandle(
            chart=chart,
            values=copy_tree(values),
            depends_on=tuple(depends_on),
            location=f"memory://{chart.namespace}/{chart.release}",
        )
        self.requests.append(handle)
        return handle
