"""Byte offset -> (line, column) mapping for human-readable diagnostic locations."""

from bisect import bisect_right

from datastar_hygiene.domain.entities import Span
from datastar_hygiene.domain.markup import MarkupTokenizer


class SourceLocator:
    """
    Maps byte offsets in the UTF-8 encoded source to 1-based line and column.

    The source is encoded exactly as the tokenizer encodes it, so offsets
    taken from diagnostic spans land on the same bytes. Columns count
    characters, not bytes, so they line up with what an editor shows for
    multi-byte text; each undecodable byte counts as one column.
    """

    def __init__(self, source: str | bytes) -> None:
        self._data, _ = MarkupTokenizer.encode_source(source)
        self._line_starts = [0]
        pos = self._data.find(b"\n")
        while pos >= 0:
            self._line_starts.append(pos + 1)
            pos = self._data.find(b"\n", pos + 1)

    def position(self, offset: int) -> tuple[int, int]:
        """Return (line, column) for offset, clamped into the source."""
        offset = min(max(offset, 0), len(self._data))
        line_index = bisect_right(self._line_starts, offset) - 1
        line_start = self._line_starts[line_index]
        column = len(self._data[line_start:offset].decode("utf-8", "replace")) + 1
        return line_index + 1, column

    def location(self, path: str, span: Span) -> str:
        """path:line:column of the span start, the format the terminal reporter prints."""
        line, column = self.position(span.start)
        return f"{path}:{line}:{column}"
