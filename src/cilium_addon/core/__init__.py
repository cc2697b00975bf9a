# src/cilium_addon/core/__init__.py
"""
Core do Cilium Add-on.

Este pacote reúne as peças independentes do chart específico:

    - config   → deep-merge, loader de arquivos de values e hashing
    - values   → modelo de ConfigTree (classificação e cópia estrutural)
    - cluster  → registries de add-ons agendados e de recursos
    - install  → contrato do Chart Installer e installers embarcados

Princípios fundamentais:
    - Nenhuma decisão silenciosa: todo comportamento é explícito e testado
    - Todas as árvores são construídas por invocação
    - Erros são levantados antes de qualquer chamada ao installer

Limites explícitos:
    - Não reconcilia recursos no cluster
    - Não renderiza templates do chart
"""
