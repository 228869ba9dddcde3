"""
Fault-tolerant markup tokenizer.

Extracts tags and their attributes with absolute byte spans. It does not
validate: malformed input yields fewer or partial tags, never an error.
All scanning is done over the UTF-8 bytes of the source so spans are byte
offsets, and every slice is cut at an ASCII delimiter so it decodes cleanly.
"""

from datastar_hygiene.domain.entities import Attribute, Span, Tag

_LT = ord("<")
_GT = ord(">")
_SLASH = ord("/")
_EQ = ord("=")
_BANG = ord("!")
_QUESTION = ord("?")
_DQUOTE = ord('"')
_SQUOTE = ord("'")

_SPACE: frozenset[int] = frozenset(b" \t\n\r\x0c")
_TAG_NAME: frozenset[int] = frozenset(
    b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-:_"
)
_ATTR_NAME_STOP: frozenset[int] = _SPACE | frozenset(b"=>/")
_VALUE_STOP: frozenset[int] = _SPACE | frozenset(b">")


class MarkupTokenizer:
    """
    Single left-to-right scan producing Tag objects.

    Accepts raw bytes or str. A str is encoded back to the bytes it was decoded
    from when it carries surrogateescape'd bytes; other lone surrogates are
    passed through, so any Python string is accepted.
    """

    def __init__(self, source: str | bytes) -> None:
        self._data, self._errors = self.encode_source(source)
        self._length = len(self._data)

    @staticmethod
    def encode_source(source: str | bytes) -> tuple[bytes, str]:
        """Return (UTF-8 bytes, error handler that decodes slices of them)."""
        if isinstance(source, bytes):
            return source, "surrogateescape"
        try:
            return source.encode("utf-8", "surrogateescape"), "surrogateescape"
        except UnicodeEncodeError:
            return source.encode("utf-8", "surrogatepass"), "surrogatepass"

    @classmethod
    def tokenize(cls, source: str | bytes) -> list[Tag]:
        """Return every tag found in source, in document order."""
        return cls(source).scan()

    def scan(self) -> list[Tag]:
        data = self._data
        n = self._length
        tags: list[Tag] = []
        i = 0
        while i < n:
            if data[i] != _LT:
                i += 1
                continue

            if data.startswith(b"!--", i + 1):
                end = data.find(b"-->", i + 4)
                if end < 0:
                    break
                i = end + 3
                continue

            idx = i + 1
            if idx < n and data[idx] == _SLASH:
                idx += 1
            idx = self._skip_space(idx)

            # doctype, CDATA, processing instructions
            if idx < n and data[idx] in (_BANG, _QUESTION):
                end = data.find(b">", idx)
                if end < 0:
                    break
                i = end + 1
                continue

            name_start = idx
            while idx < n and data[idx] in _TAG_NAME:
                idx += 1
            if idx == name_start:
                i += 1
                continue

            tag_name = self._text(name_start, idx)
            attributes, idx = self._scan_attributes(idx)
            tags.append(Tag(name=tag_name, attributes=tuple(attributes)))
            i = idx
        return tags

    def _scan_attributes(self, idx: int) -> tuple[list[Attribute], int]:
        """Scan attributes from idx until the tag closes or input ends."""
        data = self._data
        n = self._length
        attributes: list[Attribute] = []
        while True:
            idx = self._skip_space(idx)
            if idx >= n:
                break
            current = data[idx]
            if current == _GT:
                idx += 1
                break
            if current == _SLASH and idx + 1 < n and data[idx + 1] == _GT:
                idx += 2
                break

            name_start = idx
            while idx < n and data[idx] not in _ATTR_NAME_STOP:
                idx += 1
            name_end = idx
            if name_end == name_start:
                # stray '=' or '/'
                idx += 1
                continue

            idx = self._skip_space(idx)
            value: str | None = None
            value_span: Span | None = None
            if idx < n and data[idx] == _EQ:
                idx = self._skip_space(idx + 1)
                if idx < n:
                    value_start, value_end, idx = self._scan_value(idx)
                    value = self._text(value_start, value_end)
                    value_span = self._span(value_start, value_end)

            attributes.append(
                Attribute(
                    name=self._text(name_start, name_end),
                    name_span=self._span(name_start, name_end),
                    value=value,
                    value_span=value_span,
                )
            )
        return attributes, idx

    def _scan_value(self, idx: int) -> tuple[int, int, int]:
        """Return (value_start, value_end, next_index) for the value at idx."""
        data = self._data
        n = self._length
        quote = data[idx]
        if quote in (_DQUOTE, _SQUOTE):
            start = idx + 1
            end = data.find(bytes((quote,)), start)
            if end < 0:
                # unterminated quote runs to end of input
                return start, n, n
            return start, end, end + 1
        start = idx
        while idx < n and data[idx] not in _VALUE_STOP:
            idx += 1
        return start, idx, idx

    def _skip_space(self, idx: int) -> int:
        data = self._data
        n = self._length
        while idx < n and data[idx] in _SPACE:
            idx += 1
        return idx

    def _span(self, start: int, end: int) -> Span:
        return Span.clamped(start, end, self._length)

    def _text(self, start: int, end: int) -> str:
        return self._data[start:end].decode("utf-8", self._errors)
