"""Sort configuration and its loader.

The sorter consumes a SortConfiguration value. Projects configure it under
``[tool.grouporder]`` in pyproject.toml:

    [tool.grouporder]
    sort-groups = true
    group-namespace-specifiers = false
    sort-by-length = "asc"   # "asc", "desc" or "none"
"""
from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)

TOOL_NAME = "grouporder"


class ConfigError(ValueError):
    """Raised when a configuration value cannot be used."""


class LengthMode(Enum):
    """Whether, and in which direction, to order by module name length."""

    NONE = "none"
    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def parse(cls, value: Any) -> LengthMode:
        """Convert a raw configuration value into a LengthMode.

        Accepts LengthMode members, None/False (no length sort) and the
        strings "none", "asc", "ascending", "desc" and "descending" in any
        case.

        Raises
        ------
        ConfigError
            If the value is not recognized.
        """
        if isinstance(value, cls):
            return value
        if value is None or value is False:
            return cls.NONE
        if isinstance(value, str):
            normalized = value.strip().lower()
            aliases = {
                "": cls.NONE,
                "none": cls.NONE,
                "null": cls.NONE,
                "asc": cls.ASCENDING,
                "ascending": cls.ASCENDING,
                "desc": cls.DESCENDING,
                "descending": cls.DESCENDING,
            }
            if normalized in aliases:
                return aliases[normalized]
        raise ConfigError(
            f"Invalid value for sort-by-length: {value!r} "
            "(expected 'asc', 'desc' or 'none')"
        )


@dataclass(frozen=True)
class SortConfiguration:
    """How to order the imports of one group.

    Attributes
    ----------
    sort_enabled : bool
        If False the group keeps its input order and every other option is
        ignored.
    group_namespace_first : bool
        Place namespace-style imports before all others.
    length_mode : LengthMode
        Order by module name length instead of natural alphabetical order.
    """

    sort_enabled: bool = True
    group_namespace_first: bool = False
    length_mode: LengthMode = LengthMode.NONE


# Recognized keys, after normalizing hyphens to underscores.
_KEY_ALIASES = {
    "sort_groups": "sort_enabled",
    "sort_enabled": "sort_enabled",
    "importOrderSortGroups": "sort_enabled",
    "group_namespace_specifiers": "group_namespace_first",
    "group_namespace_first": "group_namespace_first",
    "importOrderGroupNamespaceSpecifiers": "group_namespace_first",
    "sort_by_length": "length_mode",
    "length_mode": "length_mode",
    "importOrderSortByLength": "length_mode",
}


def _require_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"Invalid value for {key}: {value!r} (expected a boolean)")
    return value


def config_from_mapping(mapping: Mapping[str, Any]) -> SortConfiguration:
    """Build a validated SortConfiguration from a plain mapping.

    Parameters
    ----------
    mapping : Mapping[str, Any]
        Raw options, typically the ``[tool.grouporder]`` table.

    Returns
    -------
    SortConfiguration
        The configuration, with defaults for absent options.

    Raises
    ------
    ConfigError
        If an option has a value of the wrong type or an unknown length mode,
        or if two spellings of the same option are both present.
    """
    options: dict[str, Any] = {}
    seen: dict[str, str] = {}
    for raw_key, value in mapping.items():
        field_name = _KEY_ALIASES.get(raw_key.replace("-", "_"))
        if field_name is None:
            logger.warning("Ignoring unknown %s option: %s", TOOL_NAME, raw_key)
            continue
        if field_name in seen:
            raise ConfigError(
                f"Options {seen[field_name]!r} and {raw_key!r} set the same value; "
                "use only one of them"
            )
        seen[field_name] = raw_key
        if field_name == "length_mode":
            options[field_name] = LengthMode.parse(value)
        else:
            options[field_name] = _require_bool(raw_key, value)
    return SortConfiguration(**options)


def load_config(root: Path) -> SortConfiguration:
    """Load the sort configuration from ``root / "pyproject.toml"``.

    A missing file or a missing ``[tool.grouporder]`` table yields the
    default configuration.

    Raises
    ------
    ConfigError
        If pyproject.toml is not valid TOML or holds invalid options.
    """
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        logger.debug("No pyproject.toml in %s, using defaults", root)
        return SortConfiguration()

    try:
        with open(pyproject, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse {pyproject}: {e}") from e

    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigError(f"[tool] in {pyproject} must be a table")

    table = tool.get(TOOL_NAME)
    if table is None:
        logger.debug("No [tool.%s] table in %s, using defaults", TOOL_NAME, pyproject)
        return SortConfiguration()
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{TOOL_NAME}] in {pyproject} must be a table")

    config = config_from_mapping(table)
    logger.debug("Loaded %s from %s", config, pyproject)
    return config
