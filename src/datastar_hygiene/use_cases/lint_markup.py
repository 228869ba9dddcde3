"""Use Case: Lint Markup - run the enabled Datastar rules over one source text."""

import logging

from datastar_hygiene.domain.config import DatastarConfig
from datastar_hygiene.domain.constants import (
    ABI_VERSION,
    DECREE_AUTHORS,
    DECREE_DESCRIPTION,
    DECREE_NAME,
    DECREE_VERSION,
    SUPPORTED_EXTENSIONS,
)
from datastar_hygiene.domain.entities import (
    Capability,
    DecreeMetadata,
    Diagnostics,
)
from datastar_hygiene.domain.markup import MarkupTokenizer
from datastar_hygiene.domain.rules import TagRule
from datastar_hygiene.domain.rules.actions import ActionSyntaxRule
from datastar_hygiene.domain.rules.alpine_vue import AlpineVueRule
from datastar_hygiene.domain.rules.for_template import ForTemplateRule
from datastar_hygiene.domain.rules.modifiers import ModifierRule
from datastar_hygiene.domain.rules.required_value import RequiredValueRule
from datastar_hygiene.domain.rules.typos import TypoRule

logger = logging.getLogger(__name__)

METADATA = DecreeMetadata(
    abi_version=ABI_VERSION,
    decree_version=DECREE_VERSION,
    description=DECREE_DESCRIPTION,
    authors=DECREE_AUTHORS,
    supported_extensions=SUPPORTED_EXTENSIONS,
    capabilities=(Capability.LINT,),
)


class DatastarHygiene:
    """
    Datastar hygiene decree.

    Tokenizes the source once, then runs each enabled rule over every tag in
    a fixed order, appending to a single Diagnostics sink. The result is in
    discovery order (tag by tag, rule by rule), not sorted by span.
    """

    def __init__(self, config: DatastarConfig | None = None) -> None:
        self._config = config if config is not None else DatastarConfig()
        self._rules = self._build_rules(self._config)

    @staticmethod
    def _build_rules(config: DatastarConfig) -> tuple[TagRule, ...]:
        toggled: tuple[tuple[bool, TagRule], ...] = (
            (config.check_alpine_vue, AlpineVueRule()),
            (config.check_required_values, RequiredValueRule()),
            (config.check_for_template, ForTemplateRule()),
            (config.check_typos, TypoRule()),
            (config.check_modifiers, ModifierRule()),
            (config.check_actions, ActionSyntaxRule()),
        )
        return tuple(rule for enabled, rule in toggled if enabled)

    @property
    def config(self) -> DatastarConfig:
        return self._config

    def rules(self) -> tuple[TagRule, ...]:
        """Enabled rules in dispatch order."""
        return self._rules

    def name(self) -> str:
        return DECREE_NAME

    def lint(self, path: str, source: str | bytes) -> Diagnostics:
        """Lint one source text. path is informational only."""
        diagnostics = Diagnostics()
        tags = MarkupTokenizer.tokenize(source)
        for tag in tags:
            for rule in self._rules:
                rule.check(tag, diagnostics)
        logger.debug(
            "Linted %s: %d tags, %d diagnostics", path or "<source>", len(tags), len(diagnostics)
        )
        return diagnostics

    def metadata(self) -> DecreeMetadata:
        return METADATA
