# src/cilium_addon/addons/__init__.py
"""
Add-ons concretos construídos sobre o core.
"""
