# src/cilium_addon/core/deploy_context.py
"""
DeployContext — Contexto canônico de uma resolução de values do add-on.

Este módulo define o **DeployContext**, a estrutura criada por invocação de
`deploy` e passada explicitamente aos estágios de resolução (pre-flight,
base, overlay, merge, install).

O DeployContext é o meio usado para:
- registrar logs estruturados de cada estágio
- coletar warnings não fatais (ex.: certificado não resolvido)

Princípios fundamentais:
- Isolamento por invocação (nenhum estado global compartilhado)
- Logs são eventos estruturados, não strings livres
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class DeployContext:
    """
    Contexto de uma resolução de values.

    Campos canônicos:
    - deploy_id: identificador único da invocação
    - created_at: timestamp UTC de criação do contexto
    - warnings: warnings por estágio
    - events: log estruturado de eventos
    """

    deploy_id: str
    created_at: str

    warnings: Dict[str, List[str]] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def new(cls) -> "DeployContext":
        return cls(
            deploy_id=uuid.uuid4().hex,
            created_at=datetime.now(timezone.utc).isoformat(),
        )

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "deploy_id": self.deploy_id,
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, stage: str, message: str) -> None:
        if stage not in self.warnings:
            self.warnings[stage] = []
        self.warnings[stage].append(message)

    def events_for(self, stage: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["stage"] == stage]
