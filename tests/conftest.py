# tests/conftest.py
"""
Fixtures compartilhados para testes do Cilium Add-on.

Este módulo define fixtures reutilizáveis que fornecem:
- arquivos de values em YAML semelhantes ao uso real
- clusters com e sem o AWS Load Balancer Controller agendado
- certificados registrados no Resource Registry
- contexto de deploy controlado (DeployContext)

Invariantes:
    - Nenhuma fixture instala nada em cluster real
    - Dados retornados são determinísticos e isolados por teste
"""

import pytest

from cilium_addon.core.cluster import CertificateHandle, ClusterInfo
from cilium_addon.core.deploy_context import DeployContext
from cilium_addon.core.install import RecordingChartInstaller


CERT_NAME = "certX"
CERT_ARN = "arn:aws:acm:us-east-1:123456789012:certificate/certX"


# =====================================================
# Values files
# =====================================================

@pytest.fixture
def user_values_yaml() -> str:
    """
    YAML de values do usuário, no formato de um `values.yaml` passado
    ao `helm install -f`.

    Returns:
        str: Conteúdo YAML com overrides parciais.
    """
    return """\
config:
  eni:
    enabled: false
hubble:
  relay:
    enabled: true
tunnel: vxlan
"""


@pytest.fixture
def team_values_yaml() -> str:
    """YAML de values aplicado depois de `user_values_yaml`."""
    return """\
hubble:
  relay:
    enabled: false
  ui:
    enabled: true
"""


# =====================================================
# Cluster fixtures
# =====================================================

@pytest.fixture
def cluster() -> ClusterInfo:
    """
    Cluster com o AWS Load Balancer Controller agendado e um certificado
    registrado com o nome `certX`.
    """
    info = ClusterInfo(cluster_name="blueprint-test")
    info.addons.add("AwsLoadBalancerControllerAddOn", "alb-controller-handle")
    info.resources.add(CERT_NAME, CertificateHandle(name=CERT_NAME, certificate_arn=CERT_ARN))
    return info


@pytest.fixture
def bare_cluster() -> ClusterInfo:
    """Cluster sem nenhum add-on agendado e sem recursos."""
    return ClusterInfo(cluster_name="bare")


@pytest.fixture
def ctx() -> DeployContext:
    return DeployContext(deploy_id="deploy-test", created_at="2026-01-01T00:00:00+00:00")


@pytest.fixture
def installer() -> RecordingChartInstaller:
    return RecordingChartInstaller()
