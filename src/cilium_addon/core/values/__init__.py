# src/cilium_addon/core/values/__init__.py
"""
Modelo de ConfigTree: classificação de nós (`NodeKind`), cópia estrutural
e helpers de leitura por caminho.
"""
