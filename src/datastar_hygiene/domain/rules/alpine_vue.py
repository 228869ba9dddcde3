"""Alpine/Vue attribute rule (no-alpine-vue-attrs)."""

from datastar_hygiene.domain.constants import ALPINE_VUE_PREFIXES, RULE_ALPINE_VUE
from datastar_hygiene.domain.entities import Diagnostic, Diagnostics, Tag
from datastar_hygiene.domain.rules import TagRule


class AlpineVueRule(TagRule):
    """Flags x-*, x:*, v-*, @* and :* attributes, which Datastar does not understand."""

    code: str = RULE_ALPINE_VUE
    description: str = "Disallow Alpine.js / Vue.js style attributes."

    def check(self, tag: Tag, diagnostics: Diagnostics) -> None:
        for attr in tag.attributes:
            if attr.name.startswith(ALPINE_VUE_PREFIXES):
                diagnostics.push(
                    Diagnostic(
                        rule=self.code,
                        message=f"Disallowed Alpine/Vue-style attribute: {attr.name}",
                        span=attr.name_span,
                    )
                )
