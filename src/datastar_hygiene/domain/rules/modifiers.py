"""Modifier rule (invalid-modifier): per-family allow-lists for __modifier suffixes."""

from datastar_hygiene.domain.attribute_names import AttributeNames
from datastar_hygiene.domain.constants import (
    CASE_MODIFIER,
    CASE_ONLY_MODIFIERS,
    CASE_ONLY_PREFIXES,
    CASE_VALUES,
    EVENT_COLON_PREFIX,
    EVENT_MODIFIERS,
    MODIFIERS_BY_ATTR,
    RULE_INVALID_MODIFIER,
    TIMING_KEYWORDS,
)
from datastar_hygiene.domain.entities import Attribute, Diagnostic, Diagnostics, Tag
from datastar_hygiene.domain.rules import TagRule


class ModifierRule(TagRule):
    """Rule for invalid-modifier: each modifier must be allowed for its attribute family."""

    code: str = RULE_INVALID_MODIFIER
    description: str = "Validate Datastar attribute modifiers."

    def check(self, tag: Tag, diagnostics: Diagnostics) -> None:
        for attr in tag.attributes:
            if not AttributeNames.is_datastar(attr.name):
                continue
            modifiers = AttributeNames.modifiers(attr.name)
            if not modifiers:
                continue
            base = AttributeNames.base_name(attr.name)
            allowed = self.allowed_modifiers(base)
            for modifier in modifiers:
                self._check_modifier(attr, base, modifier, allowed, diagnostics)

    def _check_modifier(
        self,
        attr: Attribute,
        base: str,
        modifier: str,
        allowed: tuple[str, ...],
        diagnostics: Diagnostics,
    ) -> None:
        mod_base, mod_value = AttributeNames.split_modifier(modifier)

        # __case.x is validated on its own, regardless of the family allow-list
        if mod_base == CASE_MODIFIER:
            if mod_value is not None and mod_value not in CASE_VALUES:
                diagnostics.push(
                    Diagnostic(
                        rule=self.code,
                        message=(
                            f"Invalid case modifier '{mod_value}'. "
                            f"Valid options: {', '.join(CASE_VALUES)}"
                        ),
                        span=attr.name_span,
                    )
                )
            return

        if mod_base in allowed or self.is_timing_modifier(mod_base):
            return
        valid = ", ".join(allowed) if allowed else "none"
        diagnostics.push(
            Diagnostic(
                rule=self.code,
                message=f"Invalid modifier '{modifier}' for '{base}'. Valid modifiers: {valid}",
                span=attr.name_span,
            )
        )

    @staticmethod
    def allowed_modifiers(base: str) -> tuple[str, ...]:
        """Return the allow-list for an attribute base name; empty when the family is unknown."""
        if base.startswith(EVENT_COLON_PREFIX):
            return EVENT_MODIFIERS
        exact = MODIFIERS_BY_ATTR.get(base)
        if exact is not None:
            return exact
        if base.startswith(CASE_ONLY_PREFIXES):
            return CASE_ONLY_MODIFIERS
        return ()

    @staticmethod
    def is_timing_modifier(token: str) -> bool:
        """True for 500ms, 1s, leading/trailing variants and bare numbers such as 0.5."""
        if token.endswith("s") or token in TIMING_KEYWORDS:
            return True
        if not token or "_" in token:
            return False
        try:
            float(token)
        except ValueError:
            return False
        return True
