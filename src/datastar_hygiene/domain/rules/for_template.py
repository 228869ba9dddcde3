"""Template scoping rule (for-template)."""

from datastar_hygiene.domain.attribute_names import AttributeNames
from datastar_hygiene.domain.constants import FOR_ATTR, RULE_FOR_TEMPLATE, TEMPLATE_TAG
from datastar_hygiene.domain.entities import Diagnostic, Diagnostics, Tag
from datastar_hygiene.domain.rules import TagRule


class ForTemplateRule(TagRule):
    """data-for clones its element's content, so it only works on <template>."""

    code: str = RULE_FOR_TEMPLATE
    description: str = "Require data-for to be placed on <template> elements."

    def check(self, tag: Tag, diagnostics: Diagnostics) -> None:
        if tag.name.lower() == TEMPLATE_TAG:
            return
        for attr in tag.attributes:
            if AttributeNames.base_name(attr.name) != FOR_ATTR:
                continue
            diagnostics.push(
                Diagnostic(
                    rule=self.code,
                    message=f"data-for must be on a <template> element, found on <{tag.name}>",
                    span=attr.name_span,
                )
            )
