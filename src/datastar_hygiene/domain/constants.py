"""
Static lookup tables for the Datastar hygiene rules.

Everything here is immutable and built once at import time.
"""

from types import MappingProxyType

DECREE_NAME: str = "datastar"
DECREE_VERSION: str = "0.3.0"
DECREE_AUTHORS: str = "datastar-hygiene contributors"
DECREE_DESCRIPTION: str = "Datastar HTML attribute hygiene and best practices"
ABI_VERSION: str = "1"
SUPPORTED_EXTENSIONS: tuple[str, ...] = ("html", "htm")

RULE_NAMESPACE: str = DECREE_NAME

RULE_ALPINE_VUE: str = "no-alpine-vue-attrs"
RULE_REQUIRE_VALUE: str = "require-value"
RULE_FOR_TEMPLATE: str = "for-template"
RULE_TYPO: str = "typo"
RULE_INVALID_MODIFIER: str = "invalid-modifier"
RULE_ACTION_SYNTAX: str = "action-syntax"

ALL_RULES: tuple[str, ...] = (
    RULE_ALPINE_VUE,
    RULE_REQUIRE_VALUE,
    RULE_FOR_TEMPLATE,
    RULE_TYPO,
    RULE_INVALID_MODIFIER,
    RULE_ACTION_SYNTAX,
)

DATASTAR_PREFIX: str = "data-"
MODIFIER_DELIMITER: str = "__"

# -----------------------------------------------------------------------------
# Alpine / Vue
# -----------------------------------------------------------------------------

ALPINE_VUE_PREFIXES: tuple[str, ...] = ("x-", "x:", "v-", "@", ":")

# -----------------------------------------------------------------------------
# Required values
# -----------------------------------------------------------------------------

VALUE_REQUIRED_ATTRS: frozenset[str] = frozenset(
    {
        "data-show",
        "data-text",
        "data-html",
        "data-class",
        "data-effect",
        "data-computed",
        "data-replace-url",
    }
)
VALUE_REQUIRED_PREFIXES: tuple[str, ...] = (
    "data-on:",
    "data-attr:",
    "data-class:",
    "data-style:",
    "data-computed:",
)

FOR_ATTR: str = "data-for"
TEMPLATE_TAG: str = "template"

# -----------------------------------------------------------------------------
# Typos
# -----------------------------------------------------------------------------

# Ordered (typo, suggestion) pairs; first exact match wins.
KNOWN_TYPOS: tuple[tuple[str, str], ...] = (
    # hyphen where a colon belongs
    ("data-on-click", "data-on:click"),
    ("data-on-submit", "data-on:submit"),
    ("data-on-input", "data-on:input"),
    ("data-on-change", "data-on:change"),
    ("data-on-keydown", "data-on:keydown"),
    ("data-on-keyup", "data-on:keyup"),
    ("data-on-focus", "data-on:focus"),
    ("data-on-blur", "data-on:blur"),
    ("data-on-mouseenter", "data-on:mouseenter"),
    ("data-on-mouseleave", "data-on:mouseleave"),
    ("data-bind-value", "data-bind:value"),
    ("data-bind-checked", "data-bind:checked"),
    ("data-attr-disabled", "data-attr:disabled"),
    ("data-attr-href", "data-attr:href"),
    ("data-class-active", "data-class:active"),
    ("data-style-color", "data-style:color"),
    # misspellings
    ("data-intersects", "data-on-intersect"),
    ("data-intersect", "data-on-intersect"),
    ("data-onload", "data-on:load or data-init"),
    ("data-onclick", "data-on:click"),
    ("data-onsubmit", "data-on:submit"),
    # pluralization
    ("data-signal", "data-signals"),
    # renamed or never existed
    ("data-visible", "data-show"),
    ("data-hidden", "data-show (with negation)"),
    ("data-content", "data-text or data-html"),
    ("data-value", "data-bind"),
    ("data-model", "data-bind"),
    # Vue / Alpine habits
    ("data-if", "data-show"),
    ("data-else", "data-show (with negation)"),
    ("data-v-show", "data-show"),
    ("data-v-if", "data-show"),
    ("data-x-show", "data-show"),
    ("data-x-if", "data-show"),
)
KNOWN_TYPO_MAP: MappingProxyType[str, str] = MappingProxyType(dict(KNOWN_TYPOS))

EVENT_HYPHEN_PREFIX: str = "data-on-"
EVENT_COLON_PREFIX: str = "data-on:"

# data-on-* names that are real plugins, not a mistyped data-on:*
HYPHENATED_EVENT_ATTRS: frozenset[str] = frozenset(
    {
        "data-on-intersect",
        "data-on-interval",
        "data-on-signal-patch",
        "data-on-raf",
        "data-on-resize",
        "data-on-load",
    }
)

# (wrong prefix, correct prefix); each is checked independently
SEPARATOR_PREFIXES: tuple[tuple[str, str], ...] = (
    ("data-bind-", "data-bind:"),
    ("data-attr-", "data-attr:"),
    ("data-class-", "data-class:"),
    ("data-style-", "data-style:"),
    ("data-indicator-", "data-indicator:"),
)

# -----------------------------------------------------------------------------
# Modifiers
# -----------------------------------------------------------------------------

EVENT_MODIFIERS: tuple[str, ...] = (
    "once",
    "passive",
    "capture",
    "case",
    "delay",
    "debounce",
    "throttle",
    "viewtransition",
    "window",
    "outside",
    "prevent",
    "stop",
)
INTERSECT_MODIFIERS: tuple[str, ...] = (
    "once",
    "exit",
    "half",
    "full",
    "threshold",
    "delay",
    "debounce",
    "throttle",
    "viewtransition",
)
PERSIST_MODIFIERS: tuple[str, ...] = ("session",)
INIT_MODIFIERS: tuple[str, ...] = ("delay", "viewtransition")
TIMED_EVENT_MODIFIERS: tuple[str, ...] = ("delay", "debounce", "throttle", "viewtransition")
FRAME_MODIFIERS: tuple[str, ...] = ("debounce", "throttle")
EFFECT_MODIFIERS: tuple[str, ...] = ("viewtransition",)
CASE_ONLY_MODIFIERS: tuple[str, ...] = ("case",)

# Exact base name -> allow-list
MODIFIERS_BY_ATTR: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "data-on-intersect": INTERSECT_MODIFIERS,
        "data-persist": PERSIST_MODIFIERS,
        "data-init": INIT_MODIFIERS,
        "data-on-interval": TIMED_EVENT_MODIFIERS,
        "data-on-signal-patch": TIMED_EVENT_MODIFIERS,
        "data-on-raf": FRAME_MODIFIERS,
        "data-on-resize": FRAME_MODIFIERS,
        "data-effect": EFFECT_MODIFIERS,
    }
)
CASE_ONLY_PREFIXES: tuple[str, ...] = (
    "data-signals",
    "data-computed",
    "data-ref",
    "data-bind",
    "data-indicator",
)

CASE_MODIFIER: str = "case"
CASE_VALUES: tuple[str, ...] = ("camel", "kebab", "snake", "pascal")
TIMING_KEYWORDS: frozenset[str] = frozenset({"leading", "trailing", "noleading", "notrailing"})

# -----------------------------------------------------------------------------
# Actions
# -----------------------------------------------------------------------------

SSE_ACTIONS: tuple[str, ...] = ("@get", "@post", "@patch", "@put", "@delete")
PRO_ACTIONS: tuple[str, ...] = ("@clipboard", "@fit")
ALL_ACTIONS: tuple[str, ...] = SSE_ACTIONS + PRO_ACTIONS
ACTION_QUOTES: frozenset[str] = frozenset({'"', "'", "`"})
