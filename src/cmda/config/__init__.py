# topmark:header:start
#
#   project      : CMDA
#   file         : __init__.py
#   file_relpath : src/cmda/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for CMDA: TOML loading, component factory and logging setup."""

from __future__ import annotations

from .model import AnalyzerConfig, ComponentSpec, load_config, load_defaults_dict

__all__ = [
    "AnalyzerConfig",
    "ComponentSpec",
    "load_config",
    "load_defaults_dict",
]
