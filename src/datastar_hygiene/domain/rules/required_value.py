"""Required value rule (require-value)."""

from datastar_hygiene.domain.attribute_names import AttributeNames
from datastar_hygiene.domain.constants import (
    RULE_REQUIRE_VALUE,
    VALUE_REQUIRED_ATTRS,
    VALUE_REQUIRED_PREFIXES,
)
from datastar_hygiene.domain.entities import Diagnostic, Diagnostics, Tag
from datastar_hygiene.domain.rules import TagRule


class RequiredValueRule(TagRule):
    """Expression attributes must carry a non-empty value; absent and empty are both flagged."""

    code: str = RULE_REQUIRE_VALUE
    description: str = "Require values for expression-based Datastar attributes."

    def check(self, tag: Tag, diagnostics: Diagnostics) -> None:
        for attr in tag.attributes:
            if not self.requires_value(attr.name):
                continue
            if attr.value:
                continue
            diagnostics.push(
                Diagnostic(
                    rule=self.code,
                    message=f"Datastar attribute '{attr.name}' requires a value",
                    span=attr.name_span,
                )
            )

    @staticmethod
    def requires_value(name: str) -> bool:
        base = AttributeNames.base_name(name)
        return base in VALUE_REQUIRED_ATTRS or base.startswith(VALUE_REQUIRED_PREFIXES)
