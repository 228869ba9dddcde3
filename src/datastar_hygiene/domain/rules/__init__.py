"""Rule protocol shared by every Datastar checker."""

from typing import Protocol

__all__ = [
    "TagRule",
]

from datastar_hygiene.domain.entities import Diagnostics, Tag


# -----------------------------------------------------------------------------
# Every checker is a stateless object with a code and a check(tag, sink) entry
# point. Checkers never read each other's output; the only shared state is the
# Diagnostics sink they append to, so any subset can run in any order.
# -----------------------------------------------------------------------------


class TagRule(Protocol):
    """One independent pass over a single tag."""

    code: str
    description: str

    def check(self, tag: Tag, diagnostics: Diagnostics) -> None:
        """Append any findings for tag to diagnostics."""
        ...
