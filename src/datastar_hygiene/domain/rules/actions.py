"""
Action syntax rule (action-syntax).

Scans Datastar attribute values for @action(...) calls. Expressions are
scanned lexically only: quote-aware parenthesis matching plus a shape check
on the first argument of SSE actions. Nothing is parsed as JavaScript.
"""

import string

from datastar_hygiene.domain.attribute_names import AttributeNames
from datastar_hygiene.domain.constants import (
    ACTION_QUOTES,
    ALL_ACTIONS,
    PRO_ACTIONS,
    RULE_ACTION_SYNTAX,
    SSE_ACTIONS,
)
from datastar_hygiene.domain.entities import Diagnostic, Diagnostics, Span, Tag
from datastar_hygiene.domain.rules import TagRule

_ACTION_CHARS: frozenset[str] = frozenset(string.ascii_letters)


class ActionSyntaxRule(TagRule):
    """Rule for action-syntax: @get/@post/... and Pro actions must be well-formed calls."""

    code: str = RULE_ACTION_SYNTAX
    description: str = "Validate @action syntax in Datastar expressions."

    def check(self, tag: Tag, diagnostics: Diagnostics) -> None:
        for attr in tag.attributes:
            if not AttributeNames.is_datastar(attr.name) or attr.value is None:
                continue
            self.check_value(attr.value, attr.report_span, diagnostics)

    def check_value(self, value: str, span: Span, diagnostics: Diagnostics) -> None:
        """Check every @ occurrence in value; all findings are reported at span."""
        n = len(value)
        i = 0
        while i < n:
            if value[i] != "@":
                i += 1
                continue

            start = i
            i += 1
            while i < n and value[i] in _ACTION_CHARS:
                i += 1
            action = value[start:i]
            if len(action) == 1:
                continue

            is_sse = action in SSE_ACTIONS
            if not is_sse and action not in PRO_ACTIONS:
                suggestion = self.suggest_action(action)
                if suggestion is not None:
                    self._push(
                        diagnostics,
                        span,
                        f"Unknown action '{action}'. Did you mean '{suggestion}'?",
                    )
                continue

            while i < n and value[i] == " ":
                i += 1
            if i >= n or value[i] != "(":
                self._push(
                    diagnostics,
                    span,
                    f"Action '{action}' requires parentheses, e.g., {action}('/path')",
                )
                continue

            close = self.find_closing_paren(value, i)
            if close is None:
                # the scan already ran to the end of the value
                self._push(diagnostics, span, f"Unclosed parentheses in '{action}' call")
                break

            if is_sse:
                self._check_url_argument(action, value[i + 1:close], span, diagnostics)
            i = close + 1

    def _check_url_argument(
        self, action: str, args: str, span: Span, diagnostics: Diagnostics
    ) -> None:
        first_arg = args.split(",", 1)[0].strip()
        if not first_arg:
            self._push(
                diagnostics,
                span,
                f"SSE action '{action}' requires a URL argument, e.g., {action}('/api/endpoint')",
            )
        elif not self.looks_like_url(first_arg) and not self.looks_like_expression(first_arg):
            self._push(
                diagnostics,
                span,
                f"SSE action '{action}' URL should start with '/' or be a string/expression, "
                f"got: {first_arg}",
            )

    def _push(self, diagnostics: Diagnostics, span: Span, message: str) -> None:
        diagnostics.push(Diagnostic(rule=self.code, message=message, span=span))

    @staticmethod
    def find_closing_paren(value: str, open_index: int) -> int | None:
        """
        Return the index of the ')' matching the '(' at open_index, or None.

        Quoted spans (", ', `) are skipped verbatim so parentheses inside
        string literals never change depth; a backslash inside a quoted span
        skips the following character. An unterminated quote consumes the
        rest of the value and therefore never balances.
        """
        n = len(value)
        depth = 1
        i = open_index + 1
        while i < n:
            ch = value[i]
            if ch == "(":
                depth += 1
            elif ch == ")":
                depth -= 1
                if depth == 0:
                    return i
            elif ch in ACTION_QUOTES:
                i += 1
                while i < n and value[i] != ch:
                    if value[i] == "\\":
                        i += 1
                    i += 1
            i += 1
        return None

    @staticmethod
    def suggest_action(name: str) -> str | None:
        """
        Best-effort "did you mean" lookup for an unknown action.

        Matches case-insensitively, or when a known action name (without '@')
        appears anywhere in the candidate. The substring test is loose: any
        name containing e.g. "get" or "put" matches.
        """
        lower = name.lower()
        for action in ALL_ACTIONS:
            if action.lower() == lower or action[1:] in lower:
                return action
        return None

    @staticmethod
    def looks_like_url(arg: str) -> bool:
        """A bare path, or a quoted string literal whose content starts with '/'."""
        trimmed = arg.strip()
        if trimmed.startswith("/"):
            return True
        if len(trimmed) >= 2 and trimmed[0] in ACTION_QUOTES and trimmed[-1] == trimmed[0]:
            return trimmed[1:-1].startswith("/")
        return False

    @staticmethod
    def looks_like_expression(arg: str) -> bool:
        """Signal reference, concatenation or template literal."""
        trimmed = arg.strip()
        return "$" in trimmed or "+" in trimmed or trimmed.startswith("`")
