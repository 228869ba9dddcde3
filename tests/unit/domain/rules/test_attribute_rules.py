"""Unit tests for the attribute-name rules: alpine/vue, required values, for-template, typos."""

import unittest

from datastar_hygiene.domain.entities import Diagnostics
from datastar_hygiene.domain.markup import MarkupTokenizer
from datastar_hygiene.domain.rules.alpine_vue import AlpineVueRule
from datastar_hygiene.domain.rules.for_template import ForTemplateRule
from datastar_hygiene.domain.rules.required_value import RequiredValueRule
from datastar_hygiene.domain.rules.typos import TypoRule


def _run(rule, source: str) -> Diagnostics:
    diagnostics = Diagnostics()
    for tag in MarkupTokenizer.tokenize(source):
        rule.check(tag, diagnostics)
    return diagnostics


class TestAlpineVueRule(unittest.TestCase):
    def setUp(self) -> None:
        self.rule = AlpineVueRule()

    def test_flags_each_framework_prefix(self) -> None:
        source = '<div x-show="a" x:on="b" v-if="c" @click="d()" :class="e">'
        diagnostics = _run(self.rule, source)

        self.assertEqual(len(diagnostics), 5)
        self.assertTrue(all(d.rule == "no-alpine-vue-attrs" for d in diagnostics))
        self.assertEqual(
            diagnostics[0].message, "Disallowed Alpine/Vue-style attribute: x-show"
        )

    def test_span_covers_attribute_name(self) -> None:
        source = '<div class="a" x-show="b">'
        diagnostic = _run(self.rule, source)[0]

        self.assertEqual(source[diagnostic.span.start:diagnostic.span.end], "x-show")

    def test_datastar_and_plain_attributes_pass(self) -> None:
        self.assertTrue(_run(self.rule, '<div data-show="$a" class="x" id="y">').is_empty())


class TestRequiredValueRule(unittest.TestCase):
    def setUp(self) -> None:
        self.rule = RequiredValueRule()

    def test_absent_value_is_flagged(self) -> None:
        diagnostics = _run(self.rule, "<span data-text></span>")

        self.assertEqual(len(diagnostics), 1)
        self.assertEqual(diagnostics[0].message, "Datastar attribute 'data-text' requires a value")

    def test_empty_value_is_flagged(self) -> None:
        self.assertEqual(len(_run(self.rule, '<div data-show="">')), 1)

    def test_prefixed_families_require_value(self) -> None:
        source = "<button data-on:click data-attr:disabled data-class:active data-style:color data-computed:total>"

        self.assertEqual(len(_run(self.rule, source)), 5)

    def test_modifiers_do_not_hide_the_base(self) -> None:
        self.assertEqual(len(_run(self.rule, "<div data-on:click__once>")), 1)

    def test_non_expression_attributes_may_be_bare(self) -> None:
        self.assertTrue(_run(self.rule, "<div data-ignore data-ref data-signals>").is_empty())

    def test_requires_value(self) -> None:
        self.assertTrue(RequiredValueRule.requires_value("data-show"))
        self.assertTrue(RequiredValueRule.requires_value("data-on:keydown__window"))
        self.assertFalse(RequiredValueRule.requires_value("data-bind"))


class TestForTemplateRule(unittest.TestCase):
    def setUp(self) -> None:
        self.rule = ForTemplateRule()

    def test_data_for_on_div_is_flagged(self) -> None:
        diagnostics = _run(self.rule, '<div data-for="item in $items">')

        self.assertEqual(len(diagnostics), 1)
        self.assertEqual(diagnostics[0].rule, "for-template")
        self.assertEqual(
            diagnostics[0].message, "data-for must be on a <template> element, found on <div>"
        )

    def test_data_for_on_template_passes(self) -> None:
        self.assertTrue(_run(self.rule, '<template data-for="item in $items">').is_empty())
        self.assertTrue(_run(self.rule, '<TEMPLATE data-for="item in $items">').is_empty())

    def test_modifiers_are_ignored_for_matching(self) -> None:
        self.assertEqual(len(_run(self.rule, '<li data-for__case.kebab="x in $xs">')), 1)

    def test_similar_names_are_not_matched(self) -> None:
        self.assertTrue(_run(self.rule, '<div data-format="x" data-for-each="y">').is_empty())


class TestTypoRule(unittest.TestCase):
    def setUp(self) -> None:
        self.rule = TypoRule()

    def test_known_typo_reports_suggestion_only(self) -> None:
        diagnostics = _run(self.rule, '<button data-on-click="go()">')

        self.assertEqual(len(diagnostics), 1)
        self.assertEqual(
            diagnostics[0].message,
            "Possible typo: 'data-on-click' - did you mean 'data-on:click'?",
        )

    def test_intersect_misspelling(self) -> None:
        diagnostics = _run(self.rule, "<div data-intersects=\"@get('/foo')\">")

        self.assertEqual(diagnostics[0].rule, "typo")
        self.assertIn("data-on-intersect", diagnostics[0].message)

    def test_unknown_hyphenated_event(self) -> None:
        diagnostics = _run(self.rule, '<div data-on-dblclick="go()">')

        self.assertEqual(len(diagnostics), 1)
        self.assertEqual(
            diagnostics[0].message,
            "Use colon for events: 'data-on:dblclick' instead of 'data-on-dblclick'",
        )

    def test_real_hyphenated_plugins_pass(self) -> None:
        source = '<div data-on-intersect="a" data-on-interval__delay.1s="b" data-on-signal-patch="c">'

        self.assertTrue(_run(self.rule, source).is_empty())

    def test_separator_prefixes(self) -> None:
        diagnostics = _run(self.rule, '<input data-bind-email data-indicator-loading>')

        self.assertEqual(
            [d.message for d in diagnostics],
            [
                "Use colon separator: 'data-bind:email' instead of 'data-bind-email'",
                "Use colon separator: 'data-indicator:loading' instead of 'data-indicator-loading'",
            ],
        )

    def test_non_datastar_attributes_are_ignored(self) -> None:
        self.assertTrue(_run(self.rule, '<div aria-on-click="a">').is_empty())
