"""Unit tests for ModifierRule (invalid-modifier)."""

import pytest

from datastar_hygiene.domain.entities import Diagnostics
from datastar_hygiene.domain.markup import MarkupTokenizer
from datastar_hygiene.domain.rules.modifiers import ModifierRule


def _messages(source: str) -> list[str]:
    rule = ModifierRule()
    diagnostics = Diagnostics()
    for tag in MarkupTokenizer.tokenize(source):
        rule.check(tag, diagnostics)
    return [d.message for d in diagnostics]


class TestModifierRule:
    """Family allow-lists, case values and timing tokens."""

    @pytest.mark.parametrize(
        "source",
        [
            '<div data-on:click__debounce.500ms__once="handle()">',
            '<div data-on:keydown__window__prevent__stop="k()">',
            '<div data-on-intersect__once__half="@get(\'/x\')">',
            '<div data-persist__session>',
            '<div data-init__delay.1s="go()">',
            '<div data-on-raf__throttle.16ms="tick()">',
            '<div data-effect__viewtransition="$x">',
            '<div data-signals__case.kebab="{a: 1}">',
            '<input data-bind__case.snake="userName">',
            '<div data-on-interval__delay__500ms="poll()">',
        ],
    )
    def test_valid_modifiers_pass(self, source: str) -> None:
        assert _messages(source) == []

    def test_unknown_event_modifier(self) -> None:
        assert _messages('<div data-on:click__bogux="x()">') == [
            "Invalid modifier 'bogux' for 'data-on:click'. Valid modifiers: "
            "once, passive, capture, case, delay, debounce, throttle, viewtransition, "
            "window, outside, prevent, stop"
        ]

    def test_token_ending_in_s_reads_as_timing(self) -> None:
        assert _messages('<div data-on:click__props="x()">') == []

    def test_family_without_modifiers_lists_none(self) -> None:
        assert _messages('<div data-show__once="$x">') == [
            "Invalid modifier 'once' for 'data-show'. Valid modifiers: none"
        ]

    def test_modifier_allowed_elsewhere_is_rejected_here(self) -> None:
        messages = _messages("<div data-persist__once>")

        assert messages == ["Invalid modifier 'once' for 'data-persist'. Valid modifiers: session"]

    def test_invalid_case_value(self) -> None:
        assert _messages('<div data-signals__case.upper="{}">') == [
            "Invalid case modifier 'upper'. Valid options: camel, kebab, snake, pascal"
        ]

    def test_case_is_checked_even_outside_the_allow_list(self) -> None:
        assert _messages('<div data-show__case.camel="$x">') == []

    def test_each_bad_modifier_is_reported(self) -> None:
        assert len(_messages('<div data-on:click__foo__bar="x()">')) == 2

    def test_non_datastar_attributes_are_ignored(self) -> None:
        assert _messages('<div aria-label__foo="x">') == []


class TestTimingModifier:
    @pytest.mark.parametrize("token", ["500ms", "1s", "props", "leading", "notrailing", "0.5", "10"])
    def test_timing_tokens(self, token: str) -> None:
        assert ModifierRule.is_timing_modifier(token)

    @pytest.mark.parametrize("token", ["", "fast", "1_000", "nan5"])
    def test_non_timing_tokens(self, token: str) -> None:
        assert not ModifierRule.is_timing_modifier(token)


class TestAllowedModifiers:
    def test_event_prefix(self) -> None:
        assert "debounce" in ModifierRule.allowed_modifiers("data-on:input")

    def test_case_only_prefix(self) -> None:
        assert ModifierRule.allowed_modifiers("data-computed:total") == ("case",)

    def test_unknown_family(self) -> None:
        assert ModifierRule.allowed_modifiers("data-text") == ()
