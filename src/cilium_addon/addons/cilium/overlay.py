# src/cilium_addon/addons/cilium/overlay.py
"""
Overlay condicional do Hubble UI exposto via AWS Load Balancer Controller.

Quando `enable_alb` está habilitado, o add-on publica o Hubble UI atrás de
um Ingress de classe `alb`, com um conjunto fixo de anotações de
roteamento. Se um certificado for informado, o listener passa a ser
HTTP + HTTPS e o ARN do certificado é injetado em anotação própria.

Política:
    - flag desabilitada + certificado informado → `PreconditionError`
    - flag desabilitada → overlay vazio
    - flag habilitada sem o controller agendado → `MissingDependencyError`
    - certificado não resolvido → anotação nula + warning (sem falha)

Este módulo não faz I/O: a consulta ao Resource Registry é uma leitura
síncrona em memória.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ...core.deploy_context import DeployContext
from ...core.errors import (
    certificate_not_resolved,
    missing_dependency,
    precondition_violation,
)
from ...core.exceptions import MissingDependencyError, PreconditionError
from ...core.values.tree import ConfigTree


ALB_CONTROLLER_ADDON = "AwsLoadBalancerControllerAddOn"

OVERLAY_STAGE = "overlay"

ANNOTATION_PREFIX = "alb.ingress.kubernetes.io"
GROUP_NAME = f"{ANNOTATION_PREFIX}/group.name"
SCHEME = f"{ANNOTATION_PREFIX}/scheme"
TARGET_TYPE = f"{ANNOTATION_PREFIX}/target-type"
LISTEN_PORTS = f"{ANNOTATION_PREFIX}/listen-ports"
HEALTHCHECK_PATH = f"{ANNOTATION_PREFIX}/healthcheck-path"
CERTIFICATE_ARN = f"{ANNOTATION_PREFIX}/certificate-arn"

HTTP_LISTENER = '[{"HTTP": 80}]'
HTTP_HTTPS_LISTENERS = '[{"HTTP": 80},{"HTTPS":443}]'

INGRESS_CLASS = "alb"


def preset_annotations() -> Dict[str, Any]:
    """Anotações padrão do Ingress do Hubble UI (listener único HTTP)."""
    return {
        GROUP_NAME: "hubble",
        SCHEME: "internet-facing",
        TARGET_TYPE: "ip",
        LISTEN_PORTS: HTTP_LISTENER,
        HEALTHCHECK_PATH: "/health",
    }


def build_overlay(
    flag: bool,
    dependency: Optional[Any],
    lookup_id: Optional[str],
    resources: Optional[Any] = None,
    ctx: Optional[DeployContext] = None,
) -> ConfigTree:
    """
    Constrói o overlay do Hubble UI.

    Args:
        flag (bool): `enable_alb` efetivo.
        dependency (Optional[Any]): handle do AWS Load Balancer Controller
            obtido no pre-flight (None quando não agendado).
        lookup_id (Optional[str]): nome do certificado no Resource Registry.
        resources: registry com `get(name)`; obrigatório apenas com `lookup_id`.
        ctx (Optional[DeployContext]): contexto para logs e warnings.

    Returns:
        ConfigTree: overlay (vazio quando a flag está desabilitada).

    Raises:
        PreconditionError: certificado informado com a flag desabilitada.
        MissingDependencyError: flag habilitada sem o controller agendado.
    """
    if not flag:
        if lookup_id:
            payload = precondition_violation(
                option="certificate_resource_name",
                requires="enable_alb",
            )
            raise PreconditionError(payload.message, payload.details, payload.hint)
        return {}

    if dependency is None:
        payload = missing_dependency(
            dependency=ALB_CONTROLLER_ADDON,
            required_by="enable_alb",
        )
        raise MissingDependencyError(payload.message, payload.details, payload.hint)

    annotations = preset_annotations()

    if lookup_id:
        annotations[LISTEN_PORTS] = HTTP_HTTPS_LISTENERS
        certificate = resources.get(lookup_id) if resources is not None else None
        certificate_arn = getattr(certificate, "certificate_arn", None)
        annotations[CERTIFICATE_ARN] = certificate_arn

        if certificate_arn is None and ctx is not None:
            warning = certificate_not_resolved(
                resource_name=lookup_id,
                annotation=CERTIFICATE_ARN,
            )
            ctx.add_warning(stage=OVERLAY_STAGE, message=warning.message)
            ctx.log(
                stage=OVERLAY_STAGE,
                level="WARNING",
                message=warning.message,
                error=warning.to_dict(),
            )

    return {
        "hubble": {
            "enabled": True,
            "ui": {
                "enabled": True,
                "ingress": {
                    "enabled": True,
                    "className": INGRESS_CLASS,
                    "annotations": annotations,
                },
            },
        },
    }
