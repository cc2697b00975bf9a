# src/cilium_addon/core/install/__init__.py
"""
Contrato do Chart Installer e installers embarcados.
"""

from .chart import ChartInstaller, ChartSpec, InstallHandle, RecordingChartInstaller
from .values_file import ValuesFileInstaller, read_release

__all__ = [
    "ChartInstaller",
    "ChartSpec",
    "InstallHandle",
    "RecordingChartInstaller",
    "ValuesFileInstaller",
    "read_release",
]
