"""
Core module.

Example
-------
>>> from grouporder.core import SortConfiguration, LengthMode, load_config
>>>
>>> # Build a configuration directly
>>> config = SortConfiguration(group_namespace_first=True)
>>>
>>> # Or read [tool.grouporder] from a project's pyproject.toml
>>> config = load_config(Path("."))
"""
from __future__ import annotations

from .config import (
    ConfigError,
    LengthMode,
    SortConfiguration,
    config_from_mapping,
    load_config,
)
from .results import BatchResult, ErrorResult, Result

__all__ = [
    "ConfigError",
    "LengthMode",
    "SortConfiguration",
    "config_from_mapping",
    "load_config",
    "Result",
    "ErrorResult",
    "BatchResult",
]
