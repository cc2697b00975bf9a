# src/cilium_addon/addons/cilium/addon.py
"""
Cilium Add-on para clusters EKS.

Cilium é uma solução de rede, segurança e observabilidade para Kubernetes
baseada em eBPF. Este módulo resolve os values do chart e os entrega ao
Chart Installer:

    1. pre-flight das dependências no registry de add-ons
    2. values base (modo ENI)
    3. overlay condicional do Hubble UI (ALB + certificado)
    4. merge com os values do usuário (o usuário vence)
    5. `installer.add_helm_chart(...)`

Todos os erros são levantados antes do passo 5 e propagados sem conversão.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

from ...core.cluster.info import ClusterInfo, preflight
from ...core.config.merge import merge_layers
from ...core.deploy_context import DeployContext
from ...core.errors import exception_to_payload
from ...core.install.chart import ChartInstaller
from ...core.values.tree import ConfigTree, paths
from .overlay import ALB_CONTROLLER_ADDON, build_overlay
from .props import CiliumAddOnProps
from .values import base_values


EXTERNAL_SECRETS_ADDON = "ExternalsSecretsAddOn"


class CiliumAddOn:
    """Add-on canônico do Cilium (resolução de values + entrega ao installer)."""

    # Add-ons que, quando agendados, devem ser aplicados antes do Cilium.
    ordering_dependencies: Tuple[str, ...] = (ALB_CONTROLLER_ADDON, EXTERNAL_SECRETS_ADDON)

    def __init__(self, props: Optional[CiliumAddOnProps] = None, **options: Any):
        if props is not None and options:
            props = props.with_options(**options)
        elif props is None:
            props = CiliumAddOnProps.from_mapping(options)
        self.props: CiliumAddOnProps = props

    @property
    def name(self) -> str:
        return self.props.name

    def resolve_values(
        self,
        cluster: ClusterInfo,
        ctx: Optional[DeployContext] = None,
        *,
        dependencies: Optional[Mapping[str, Any]] = None,
    ) -> ConfigTree:
        """
        Resolve a ConfigTree final sem chamar o installer.

        Args:
            cluster (ClusterInfo): cluster alvo (registries).
            ctx (Optional[DeployContext]): contexto para logs.
            dependencies: resultado de `preflight`; consultado no cluster
                quando omitido.

        Raises:
            PreconditionError, MissingDependencyError: ver `build_overlay`.
        """
        if dependencies is None:
            dependencies = preflight(cluster, self.ordering_dependencies)

        values = base_values()
        overlay = build_overlay(
            self.props.enable_alb,
            dependencies.get(ALB_CONTROLLER_ADDON),
            self.props.certificate_resource_name,
            cluster.resources,
            ctx,
        )
        if ctx is not None:
            ctx.log(
                stage="overlay",
                level="INFO",
                message="hubble overlay enabled" if overlay else "hubble overlay disabled",
                enable_alb=self.props.enable_alb,
            )

        user_values = self.props.values
        resolved = merge_layers(values, overlay, user_values)
        if ctx is not None:
            ctx.log(
                stage="merge",
                level="INFO",
                message="values merged",
                overridden_paths=paths(user_values),
            )
        return resolved

    def deploy(
        self,
        cluster: ClusterInfo,
        installer: ChartInstaller,
        ctx: Optional[DeployContext] = None,
    ) -> Any:
        """
        Resolve os values e entrega o chart ao installer.

        Returns:
            O handle devolvido pelo installer, sem interpretação.
        """
        ctx = ctx if ctx is not None else DeployContext.new()
        try:
            dependencies = preflight(cluster, self.ordering_dependencies)
            scheduled = _scheduled(dependencies)
            ctx.log(
                stage="preflight",
                level="INFO",
                message="dependencies checked",
                cluster=cluster.cluster_name,
                scheduled=scheduled,
            )

            values = self.resolve_values(cluster, ctx, dependencies=dependencies)
        except Exception as e:
            ctx.log(
                stage="resolve",
                level="ERROR",
                message=str(e),
                error=exception_to_payload(e).to_dict(),
            )
            raise

        chart = self.props.chart_spec()
        try:
            handle = installer.add_helm_chart(chart, values, depends_on=scheduled)
        except Exception as e:
            ctx.log(
                stage="install",
                level="ERROR",
                message=str(e),
                error=exception_to_payload(e).to_dict(),
                release=chart.release,
            )
            raise

        ctx.log(
            stage="install",
            level="INFO",
            message="chart handed to installer",
            release=chart.release,
            namespace=chart.namespace,
            version=chart.version,
        )
        return handle


def _scheduled(dependencies: Dict[str, Any]) -> List[str]:
    return [name for name, handle in dependencies.items() if handle is not None]
