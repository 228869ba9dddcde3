"""Typo rule (typo): known misspellings and hyphen-vs-colon separators."""

from datastar_hygiene.domain.attribute_names import AttributeNames
from datastar_hygiene.domain.constants import (
    EVENT_COLON_PREFIX,
    EVENT_HYPHEN_PREFIX,
    HYPHENATED_EVENT_ATTRS,
    KNOWN_TYPO_MAP,
    RULE_TYPO,
    SEPARATOR_PREFIXES,
)
from datastar_hygiene.domain.entities import Attribute, Diagnostic, Diagnostics, Tag
from datastar_hygiene.domain.rules import TagRule


class TypoRule(TagRule):
    """
    Rule for common Datastar attribute typos.

    A hit in the known-typo table is reported alone. Otherwise the separator
    checks run: data-on-<event> (unless it is a real hyphenated plugin such as
    data-on-intersect) and one check per keyed prefix (data-bind-, data-attr-,
    data-class-, data-style-, data-indicator-).
    """

    code: str = RULE_TYPO
    description: str = "Detect common typos in Datastar attribute names."

    def check(self, tag: Tag, diagnostics: Diagnostics) -> None:
        for attr in tag.attributes:
            if not AttributeNames.is_datastar(attr.name):
                continue
            base = AttributeNames.base_name(attr.name)

            suggestion = KNOWN_TYPO_MAP.get(base)
            if suggestion is not None:
                diagnostics.push(
                    self._diagnostic(
                        attr, f"Possible typo: '{base}' - did you mean '{suggestion}'?"
                    )
                )
                continue

            if base.startswith(EVENT_HYPHEN_PREFIX) and base not in HYPHENATED_EVENT_ATTRS:
                event = base[len(EVENT_HYPHEN_PREFIX):]
                diagnostics.push(
                    self._diagnostic(
                        attr,
                        f"Use colon for events: '{EVENT_COLON_PREFIX}{event}' "
                        f"instead of '{EVENT_HYPHEN_PREFIX}{event}'",
                    )
                )

            for wrong, correct in SEPARATOR_PREFIXES:
                if not base.startswith(wrong):
                    continue
                suffix = base[len(wrong):]
                diagnostics.push(
                    self._diagnostic(
                        attr,
                        f"Use colon separator: '{correct}{suffix}' instead of '{wrong}{suffix}'",
                    )
                )

    def _diagnostic(self, attr: Attribute, message: str) -> Diagnostic:
        return Diagnostic(rule=self.code, message=message, span=attr.name_span)
