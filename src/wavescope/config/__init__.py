"""Configuration objects for WaveScope.

Settings can come from a YAML file (flat, or nested under a ``wavescope:``
key) and are overridden by command-line flags in :mod:`wavescope.gui.application`.
"""

from .runtime import WaveScopeConfig, config_from_mapping, load_config

__all__ = ["WaveScopeConfig", "config_from_mapping", "load_config"]
