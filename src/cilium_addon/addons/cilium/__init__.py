# src/cilium_addon/addons/cilium/__init__.py
"""
Cilium Add-on: opções, values base, overlay do Hubble UI e orquestração.
"""

from .addon import CiliumAddOn, EXTERNAL_SECRETS_ADDON
from .overlay import ALB_CONTROLLER_ADDON, build_overlay, preset_annotations
from .props import CiliumAddOnProps, load_addon_options, resolve_props
from .values import base_values

__all__ = [
    "ALB_CONTROLLER_ADDON",
    "CiliumAddOn",
    "CiliumAddOnProps",
    "EXTERNAL_SECRETS_ADDON",
    "base_values",
    "build_overlay",
    "load_addon_options",
    "preset_annotations",
    "resolve_props",
]
