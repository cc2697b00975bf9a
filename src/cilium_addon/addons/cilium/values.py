# src/cilium_addon/addons/cilium/values.py
"""
Values base do chart Cilium para EKS.

Valores recomendados pela documentação do Cilium para o modo ENI:
https://docs.cilium.io/en/stable/installation/k8s-install-helm/#install-cilium
"""

from __future__ import annotations

from ...core.values.tree import ConfigTree


def base_values() -> ConfigTree:
    """Retorna uma nova árvore com os values base (modo ENI, sem túnel)."""
    return {
        "config": {
            "eni": {
                "enabled": True,
            },
            "ipam": {
                "mode": "eni",
            },
        },
        "egressMasqueradeInterfaces": "eth0",
        "tunnel": "disabled",
    }
