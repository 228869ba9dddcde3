"""GuidanceService: loads the rule registry and provides per-rule guidance text."""

from pathlib import Path
from typing import cast

import yaml

from datastar_hygiene.domain.constants import RULE_NAMESPACE
from datastar_hygiene.domain.protocols import GuidanceServiceProtocol
from datastar_hygiene.domain.registry_types import RuleRegistryEntry


class GuidanceService(GuidanceServiceProtocol):
    """Loads rule_registry.yaml and answers lookups by bare or qualified rule id."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if self._path.exists():
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
                self._registry = (
                    cast(dict[str, RuleRegistryEntry], data) if isinstance(data, dict) else {}
                )
        else:
            self._registry = {}

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded registry."""
        return dict(self._registry)

    def get_entry(self, rule_id: str) -> RuleRegistryEntry | None:
        """Return the entry for 'typo' or 'datastar/typo'."""
        prefix = f"{RULE_NAMESPACE}/"
        key = rule_id[len(prefix):] if rule_id.startswith(prefix) else rule_id
        entry = self._registry.get(key)
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        return None

    def get_manual_instructions(self, rule_id: str) -> str:
        entry = self.get_entry(rule_id)
        if entry is None:
            return ""
        return str(entry.get("manual_instructions", "")).strip()
