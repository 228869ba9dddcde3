"""Configuration for the Datastar decree. Immutable value objects created by Infrastructure."""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass

from datastar_hygiene.domain.constants import (
    ALL_RULES,
    RULE_ACTION_SYNTAX,
    RULE_ALPINE_VUE,
    RULE_FOR_TEMPLATE,
    RULE_INVALID_MODIFIER,
    RULE_NAMESPACE,
    RULE_REQUIRE_VALUE,
    RULE_TYPO,
    SUPPORTED_EXTENSIONS,
)

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when configuration cannot be read or has the wrong shape."""


@dataclass(frozen=True)
class DatastarConfig:
    """One boolean toggle per rule group; all enabled by default."""

    check_alpine_vue: bool = True
    check_required_values: bool = True
    check_typos: bool = True
    check_modifiers: bool = True
    check_actions: bool = True
    check_for_template: bool = True

    def enabled_rule_ids(self) -> tuple[str, ...]:
        """Rule ids whose toggle is on, in dispatch order."""
        return tuple(rule for rule in ALL_RULES if getattr(self, TOGGLE_BY_RULE[rule]))

    def without(self, *rule_ids: str) -> DatastarConfig:
        """Return a copy with the given rules switched off."""
        changes = {TOGGLE_BY_RULE[r]: False for r in rule_ids if r in TOGGLE_BY_RULE}
        return dataclasses.replace(self, **changes)


TOGGLE_BY_RULE: dict[str, str] = {
    RULE_ALPINE_VUE: "check_alpine_vue",
    RULE_REQUIRE_VALUE: "check_required_values",
    RULE_FOR_TEMPLATE: "check_for_template",
    RULE_TYPO: "check_typos",
    RULE_INVALID_MODIFIER: "check_modifiers",
    RULE_ACTION_SYNTAX: "check_actions",
}

_TOGGLES: frozenset[str] = frozenset(f.name for f in dataclasses.fields(DatastarConfig))
_OTHER_KEYS: frozenset[str] = frozenset({"enforce", "exclude", "extensions", "workers"})


class ConfigurationLoader:
    """
    Immutable settings built from a [tool.datastar-hygiene] table.

    Domain does not read the filesystem; Infrastructure calls
    ConfigFileLoader.load_config_from_fs() and hands the dict in here.
    Unknown keys and wrongly typed values are logged and ignored.
    """

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._config: dict[str, object] = {
            str(k).replace("-", "_"): v for k, v in (config_dict or {}).items()
        }
        self.validate_config(self._config)
        self._rules = self._build_rule_config()

    def validate_config(self, config: dict[str, object]) -> None:
        """Log every key or value that will be ignored."""
        for key, value in config.items():
            if key not in _TOGGLES and key not in _OTHER_KEYS:
                logger.warning("Configuration Warning: unknown key '%s' ignored.", key)
            elif key in _TOGGLES and not isinstance(value, bool):
                logger.warning(
                    "Configuration Warning: '%s' must be true or false, got %r; using default.",
                    key,
                    value,
                )
        for rule in self._rule_ids("enforce"):
            if rule not in ALL_RULES:
                logger.warning("Configuration Warning: unknown rule '%s' in 'enforce'.", rule)

    def _build_rule_config(self) -> DatastarConfig:
        toggles = {
            key: value
            for key, value in self._config.items()
            if key in _TOGGLES and isinstance(value, bool)
        }
        return DatastarConfig(**toggles)

    def _string_list(self, key: str) -> list[str]:
        raw = self._config.get(key, [])
        if isinstance(raw, str):
            return [raw]
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        logger.warning("Configuration Warning: '%s' must be a list of strings.", key)
        return []

    def _rule_ids(self, key: str) -> list[str]:
        """Rule ids listed under key, with any "datastar/" prefix removed."""
        prefix = f"{RULE_NAMESPACE}/"
        return [r[len(prefix):] if r.startswith(prefix) else r for r in self._string_list(key)]

    @property
    def config(self) -> dict[str, object]:
        """Return the normalized configuration mapping."""
        return dict(self._config)

    @property
    def rules(self) -> DatastarConfig:
        return self._rules

    @property
    def enforced_rules(self) -> frozenset[str]:
        """Rule ids whose findings are escalated to must-fix."""
        return frozenset(r for r in self._rule_ids("enforce") if r in ALL_RULES)

    @property
    def exclude_paths(self) -> list[str]:
        """Path fragments skipped when expanding directories."""
        return self._string_list("exclude")

    @property
    def extensions(self) -> tuple[str, ...]:
        raw = self._string_list("extensions") if "extensions" in self._config else []
        cleaned = tuple(e.lower().lstrip(".") for e in raw if e.strip("."))
        return cleaned or SUPPORTED_EXTENSIONS

    @property
    def workers(self) -> int:
        """Worker count for multi-file runs; at least 1."""
        raw = self._config.get("workers")
        if isinstance(raw, int) and not isinstance(raw, bool) and raw > 0:
            return raw
        if raw is not None:
            logger.warning("Configuration Warning: 'workers' must be a positive integer.")
        return min(os.cpu_count() or 1, 8)
