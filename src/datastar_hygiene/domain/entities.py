import dataclasses
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TypedDict, overload

from datastar_hygiene.domain.constants import RULE_NAMESPACE


@dataclass(frozen=True)
class Span:
    """Half-open [start, end) byte range into the UTF-8 encoded source."""

    start: int
    end: int

    @classmethod
    def clamped(cls, start: int, end: int, length: int) -> "Span":
        """Build a span guaranteed to satisfy 0 <= start <= end <= length."""
        length = max(length, 0)
        start = min(max(start, 0), length)
        end = min(max(end, start), length)
        return cls(start=start, end=end)

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Attribute:
    """
    One attribute found on a tag.

    value is None when no '=' followed the name (present without a value);
    an empty string means '=' was seen with nothing, or only quotes, after it.
    """

    name: str
    name_span: Span
    value: str | None = None
    value_span: Span | None = None

    @property
    def has_value(self) -> bool:
        return self.value is not None

    @property
    def report_span(self) -> Span:
        """Value span when present, else name span. Used by value-level rules."""
        return self.value_span if self.value_span is not None else self.name_span


@dataclass(frozen=True)
class Tag:
    """One opening, self-closing or closing tag occurrence."""

    name: str
    attributes: tuple[Attribute, ...] = ()


class DiagnosticDict(TypedDict):
    """Serialization shape for Diagnostic."""

    rule: str
    qualified_rule: str
    message: str
    enforced: bool
    span: dict[str, int]


@dataclass(frozen=True)
class Diagnostic:
    """A single finding: rule id, message, severity flag and byte span."""

    rule: str
    message: str
    span: Span
    enforced: bool = False

    @property
    def qualified_rule(self) -> str:
        """Host-facing id, e.g. 'datastar/typo'."""
        return f"{RULE_NAMESPACE}/{self.rule}"

    def escalate(self) -> "Diagnostic":
        """Return an enforced copy. Diagnostics are immutable, so a new instance is built."""
        if self.enforced:
            return self
        return dataclasses.replace(self, enforced=True)

    def to_dict(self) -> DiagnosticDict:
        """Convert to dictionary for serialization."""
        return {
            "rule": self.rule,
            "qualified_rule": self.qualified_rule,
            "message": self.message,
            "enforced": self.enforced,
            "span": {"start": self.span.start, "end": self.span.end},
        }


class Diagnostics:
    """
    Append-only, ordered collection of diagnostics for one lint call.

    Discovery order is the observable order: nothing is ever sorted,
    deduplicated, replaced or removed.
    """

    def __init__(self, items: Iterable[Diagnostic] = ()) -> None:
        self._items: list[Diagnostic] = list(items)

    def push(self, diagnostic: Diagnostic) -> None:
        self._items.append(diagnostic)

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        for diagnostic in diagnostics:
            self.push(diagnostic)

    def is_empty(self) -> bool:
        return not self._items

    def to_list(self) -> list[Diagnostic]:
        """Return a copy so callers cannot reach the internal list."""
        return list(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> Diagnostic: ...

    @overload
    def __getitem__(self, index: slice) -> list[Diagnostic]: ...

    def __getitem__(self, index: int | slice) -> Diagnostic | list[Diagnostic]:
        return self._items[index]

    def __repr__(self) -> str:
        return f"Diagnostics({self._items!r})"


class Capability(Enum):
    """Capabilities a decree may advertise to its host."""

    LINT = "lint"
    AUTO_FIX = "auto_fix"
    STREAMING = "streaming"
    RUNTIME_CONFIG = "runtime_config"
    RICH_DIAGNOSTICS = "rich_diagnostics"


@dataclass(frozen=True)
class DecreeMetadata:
    """Static descriptor handed to the host."""

    abi_version: str
    decree_version: str
    description: str
    authors: str | None
    supported_extensions: tuple[str, ...]
    supported_filenames: tuple[str, ...] = ()
    skip_filenames: tuple[str, ...] = ()
    capabilities: tuple[Capability, ...] = (Capability.LINT,)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization."""
        return {
            "abi_version": self.abi_version,
            "decree_version": self.decree_version,
            "description": self.description,
            "authors": self.authors,
            "supported_extensions": list(self.supported_extensions),
            "supported_filenames": list(self.supported_filenames),
            "skip_filenames": list(self.skip_filenames),
            "capabilities": [c.value for c in self.capabilities],
        }


@dataclass(frozen=True)
class FileReport:
    """Diagnostics for one linted file, with the source needed to locate them."""

    path: str
    diagnostics: tuple[Diagnostic, ...]
    source: str = ""

    @property
    def enforced_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.enforced)


@dataclass(frozen=True)
class LintRun:
    """Result of linting a set of files."""

    files: tuple[FileReport, ...] = ()
    skipped: tuple[str, ...] = field(default_factory=tuple)

    @property
    def diagnostic_count(self) -> int:
        return sum(len(f.diagnostics) for f in self.files)

    @property
    def enforced_count(self) -> int:
        return sum(f.enforced_count for f in self.files)

    def has_diagnostics(self) -> bool:
        return self.diagnostic_count > 0
