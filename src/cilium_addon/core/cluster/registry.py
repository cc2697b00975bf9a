# src/cilium_addon/core/cluster/registry.py
"""
Registries de colaboradores do cluster.

Este módulo define os dois registries consultados durante a resolução de
values de um add-on:

    - `AddonRegistry`: add-ons agendados para deploy no cluster
      (Dependency Registry). Responde se um add-on colaborador está
      presente, devolvendo seu handle ou `None`.
    - `ResourceRegistry`: recursos compartilhados por nome simbólico
      (Resource Registry), como certificados do ACM.

Decisões arquiteturais:
    - Registro duplicado é falha fatal de configuração
    - Ausência em consulta não é erro: o chamador decide
    - A ordem de registro é preservada

Invariantes:
    - Cada nome registrado é único no registry
    - `names()` reflete exatamente a ordem de registro

Limites explícitos:
    - Não cria nem importa recursos na nuvem
    - Não resolve ordem de deploy entre add-ons
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class DuplicateAddonError(ValueError):
    """
    Exceção levantada quando o mesmo add-on é agendado duas vezes.

    A duplicidade é detectada no momento do registro, antes de qualquer
    resolução de values.
    """


class DuplicateResourceError(ValueError):
    """Exceção levantada quando um recurso é registrado duas vezes com o mesmo nome."""


def _require_name(name: Any, what: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"{what} name must be a non-empty string")
    return name


@dataclass
class AddonRegistry:
    """
    Registro de add-ons agendados no cluster.

    O handle associado a cada add-on é opaco: representa o deploy pendente
    ou aplicado do colaborador e é repassado ao installer como dependência
    de ordenação.
    """

    _addons: Dict[str, Any] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, name: str, handle: Any = None) -> None:
        name = _require_name(name, "add-on")
        if name in self._addons:
            raise DuplicateAddonError(f"Duplicate add-on: {name}")

        self._addons[name] = handle if handle is not None else name
        self._order.append(name)

    def get_scheduled(self, name: str) -> Optional[Any]:
        return self._addons.get(name)

    def is_scheduled(self, name: str) -> bool:
        return name in self._addons

    def names(self) -> List[str]:
        return list(self._order)


@dataclass
class ResourceRegistry:
    """Registro de recursos compartilhados indexados por nome simbólico."""

    _resources: Dict[str, Any] = field(default_factory=dict, init=False, repr=False)

    def add(self, name: str, resource: Any) -> None:
        name = _require_name(name, "resource")
        if name in self._resources:
            raise DuplicateResourceError(f"Duplicate resource: {name}")
        self._resources[name] = resource

    def get(self, name: str) -> Optional[Any]:
        return self._resources.get(name)

    def names(self) -> List[str]:
        return list(self._resources)
