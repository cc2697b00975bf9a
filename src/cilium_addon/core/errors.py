"""
Cilium Add-on — Canonical Error Structures (v1)

Este módulo define o payload canônico de erro do add-on e o catálogo de
códigos estáveis usados no event log do `DeployContext`.

Erros devem ser:

- explícitos
- serializáveis
- acionáveis
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import AddonException, MissingDependencyError, PreconditionError


@dataclass(frozen=True)
class AddonErrorPayload:
    """
    Payload canônico de erro do add-on.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

PRECONDITION_VIOLATION = "PRECONDITION_VIOLATION"
MISSING_DEPENDENCY = "MISSING_DEPENDENCY"
CERTIFICATE_NOT_RESOLVED = "CERTIFICATE_NOT_RESOLVED"
DEPLOY_EXECUTION_ERROR = "DEPLOY_EXECUTION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def precondition_violation(
    *,
    option: str,
    requires: str,
    hint: str = "Habilite a opção requerida ou remova a opção dependente antes de reexecutar.",
) -> AddonErrorPayload:
    return AddonErrorPayload(
        type=PRECONDITION_VIOLATION,
        message=f"A opção '{option}' é suportada apenas quando '{requires}' está habilitada",
        details={"option": option, "requires": requires},
        hint=hint,
    )


def missing_dependency(
    *,
    dependency: str,
    required_by: str,
    hint: Optional[str] = None,
) -> AddonErrorPayload:
    return AddonErrorPayload(
        type=MISSING_DEPENDENCY,
        message=f"Dependência ausente: {dependency}",
        details={"dependency": dependency, "required_by": required_by},
        hint=hint or f"Adicione {dependency} à lista de add-ons do cluster.",
    )


def certificate_not_resolved(
    *,
    resource_name: str,
    annotation: str,
    hint: str = "Registre o certificado no cluster antes do deploy ou remova `certificate_resource_name`.",
) -> AddonErrorPayload:
    return AddonErrorPayload(
        type=CERTIFICATE_NOT_RESOLVED,
        message=f"Certificado '{resource_name}' não encontrado; anotação deixada nula",
        details={"resource_name": resource_name, "annotation": annotation},
        hint=hint,
    )


def exception_to_payload(exc: BaseException) -> AddonErrorPayload:
    """Converte exceções em AddonErrorPayload (serializável, acionável).

    Regras:
    - AddonException: já vem com message/details/hint.
    - Outras exceções: encapsular como DEPLOY_EXECUTION_ERROR sem stack trace.
    """
    if isinstance(exc, PreconditionError):
        code = PRECONDITION_VIOLATION
    elif isinstance(exc, MissingDependencyError):
        code = MISSING_DEPENDENCY
    elif isinstance(exc, AddonException):
        code = exc.__class__.__name__
    else:
        return AddonErrorPayload(
            type=DEPLOY_EXECUTION_ERROR,
            message=str(exc) or "Erro inesperado durante o deploy",
            details={"exception_class": exc.__class__.__name__},
            hint="Verifique as opções do add-on e os values informados.",
        )

    return AddonErrorPayload(
        type=code,
        message=exc.message,
        details=dict(exc.details or {}),
        hint=exc.hint,
    )
