# src/cilium_addon/core/cluster/__init__.py
"""
Colaboradores do cluster consultados durante a resolução de values.

- **registry**
  - `AddonRegistry`: add-ons agendados (Dependency Registry)
  - `ResourceRegistry`: recursos por nome simbólico (Resource Registry)
- **info**
  - `ClusterInfo`: cluster alvo + registries
  - `CertificateHandle`: handle de certificado
  - `preflight`: verificação explícita de dependências
"""

from .info import CertificateHandle, ClusterInfo, preflight
from .registry import (
    AddonRegistry,
    DuplicateAddonError,
    DuplicateResourceError,
    ResourceRegistry,
)

__all__ = [
    "AddonRegistry",
    "CertificateHandle",
    "ClusterInfo",
    "DuplicateAddonError",
    "DuplicateResourceError",
    "ResourceRegistry",
    "preflight",
]
