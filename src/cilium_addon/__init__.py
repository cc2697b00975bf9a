# src/cilium_addon/__init__.py
"""
Cilium Add-on — resolução declarativa de values do chart Cilium para EKS.

Este pacote recebe as opções do usuário, combina-as com os values base do
chart e um overlay condicional (Hubble UI via ALB) e entrega a ConfigTree
final a um Chart Installer externo.

Arquitetura em alto nível:
    - core.config   → deep-merge, loader de values e hashing
    - core.values   → modelo de ConfigTree
    - core.cluster  → registries de add-ons e recursos, pre-flight
    - core.install  → contrato do Chart Installer
    - addons.cilium → opções, values base, overlay e deploy

Limites explícitos:
    - Não reconcilia recursos no cluster
    - Não valida schema do chart
    - Não gerencia o ciclo de vida da release após a entrega dos values
"""
# src/cilium_addon/__init__.py
from .addons.cilium import CiliumAddOn, CiliumAddOnProps
from .core.config.merge import deep_merge

__all__ = ["CiliumAddOn", "CiliumAddOnProps", "deep_merge"]
