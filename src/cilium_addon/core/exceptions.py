"""
Cilium Add-on — Canonical Exceptions (v1)

Este módulo define as exceções tipadas levantadas durante a resolução dos
values do add-on, antes de qualquer chamada ao Chart Installer.

Objetivo:
- Expressar combinações de opções inválidas e dependências ausentes
- Facilitar o mapeamento determinístico para AddonErrorPayload
- Evitar AssertionError/ValueError genéricos em guardrails críticos

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Nenhuma exceção é capturada e convertida internamente: todas chegam ao
  chamador de `deploy` sem alteração.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class AddonException(Exception):
    """Base class para exceções do add-on.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    - Não é frozen: o interpretador grava `__traceback__` e `__notes__`
      na instância durante a propagação
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


@dataclass(eq=False)
class PreconditionError(AddonException):
    """Combinação de opções definida como inválida (ex.: certificado sem ALB)."""


@dataclass(eq=False)
class MissingDependencyError(AddonException):
    """Add-on colaborador obrigatório não foi agendado no cluster."""

    @property
    def dependency(self) -> Optional[str]:
        return self.details.get("dependency")
