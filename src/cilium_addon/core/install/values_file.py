# src/cilium_addon/core/install/values_file.py
"""
Installer baseado em arquivos.

O `ValuesFileInstaller` não aplica nada no cluster: ele materializa o
pedido de instalação em dois arquivos dentro de um diretório de saída,
prontos para um passo externo do tipo
``helm upgrade --install <release> <repo>/<chart> -f <release>.values.yaml``:

    - `<release>.values.yaml`: a ConfigTree final (ordem de chaves preservada)
    - `<release>.release.json`: identidade do chart, flags de namespace,
      dependências de ordenação e hash dos values

Decisões arquiteturais:
    - UTC é o timezone canônico do timestamp de geração
    - O JSON é determinístico (chaves ordenadas, indentação fixa)
    - Arquivos existentes da mesma release são sobrescritos

Limites explícitos:
    - Não executa o helm
    - Não valida schema do chart
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Sequence, Union

import yaml  # PyYAML

from ..config.hashing import compute_config_hash
from ..values.tree import ConfigTree, copy_tree
from .chart import ChartSpec, InstallHandle


@dataclass
class ValuesFileInstaller:
    """Installer que grava values e descritor da release em disco."""

    output_dir: Union[str, Path]

    def values_path(self, chart: ChartSpec) -> Path:
        return Path(self.output_dir) / f"{chart.release}.values.yaml"

    def release_path(self, chart: ChartSpec) -> Path:
        return Path(self.output_dir) / f"{chart.release}.release.json"

    def add_helm_chart(
        self,
        chart: ChartSpec,
        values: ConfigTree,
        *,
        depends_on: Sequence[str] = (),
    ) -> InstallHandle:
        values = copy_tree(values)
        out_dir = Path(self.output_dir)
        out_dir.mkdir(parents=True, exist_ok=True)

        values_file = self.values_path(chart)
        with values_file.open("w", encoding="utf-8") as f:
            yaml.safe_dump(values, f, sort_keys=False, default_flow_style=False, allow_unicode=True)

        record: Dict[str, Any] = {
            "chart": chart.to_dict(),
            "depends_on": list(depends_on),
            "values_file": values_file.name,
            "values_sha256": compute_config_hash(values),
            "generated_at": datetime.now(timezone.utc).isoformat(),
        }
        self.release_path(chart).write_text(
            json.dumps(record, ensure_ascii=False, indent=2, sort_keys=True),
            encoding="utf-8",
        )

        return InstallHandle(
            chart=chart,
            values=values,
            depends_on=tuple(depends_on),
            location=str(values_file),
        )


def read_release(path: Union[str, Path]) -> Dict[str, Any]:
    """Lê um descritor `<release>.release.json` gravado pelo installer."""
    return json.loads(Path(path).read_text(encoding="utf-8"))
