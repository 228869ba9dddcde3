"""Unit tests for SourceLocator."""

import unittest

from datastar_hygiene.domain.entities import Span
from datastar_hygiene.domain.locations import SourceLocator


class TestSourceLocator(unittest.TestCase):
    def test_first_line(self) -> None:
        self.assertEqual(SourceLocator("<div>").position(0), (1, 1))
        self.assertEqual(SourceLocator("<div>").position(4), (1, 5))

    def test_later_lines(self) -> None:
        locator = SourceLocator("a\nbc\n<div>")

        self.assertEqual(locator.position(2), (2, 1))
        self.assertEqual(locator.position(5), (3, 1))
        self.assertEqual(locator.position(7), (3, 3))

    def test_columns_count_characters(self) -> None:
        source = "é中<p>"
        offset = source.encode("utf-8").index(b"<")

        self.assertEqual(SourceLocator(source).position(offset), (1, 3))

    def test_offsets_are_clamped(self) -> None:
        locator = SourceLocator("ab")

        self.assertEqual(locator.position(-5), (1, 1))
        self.assertEqual(locator.position(99), (1, 3))

    def test_location_string(self) -> None:
        locator = SourceLocator("x\n  <div x-show>")

        self.assertEqual(locator.location("a.html", Span(9, 15)), "a.html:2:8")

    def test_escaped_bytes_keep_file_offsets(self) -> None:
        raw = b'<div data-show="\xff" x-show="a">'
        source = raw.decode("utf-8", "surrogateescape")

        self.assertEqual(SourceLocator(source).position(raw.index(b"x-show")), (1, 20))
        self.assertEqual(SourceLocator(raw).position(19), (1, 20))
