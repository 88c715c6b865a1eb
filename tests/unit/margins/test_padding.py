"""Right-padding tests."""

from __future__ import annotations

import unittest

from termreflow.padding import Padding, pad

PINK = "\x1b[38;2;249;38;114m"
RESET = "\x1b[0m"


class PaddingTests(unittest.TestCase):
    def test_zero_width_passes_through(self) -> None:
        self.assertEqual(pad("foo", 0), "foo")

    def test_single_line_is_padded(self) -> None:
        self.assertEqual(pad("foo", 6), "foo   ")

    def test_every_line_is_padded(self) -> None:
        self.assertEqual(pad("foo\nbar", 4), "foo \nbar ")

    def test_lines_at_or_beyond_width_are_untouched(self) -> None:
        self.assertEqual(pad("foobar\nfoo", 3), "foobar\nfoo")

    def test_empty_trailing_line_is_not_padded(self) -> None:
        self.assertEqual(pad("foo\n", 6), "foo   \n")

    def test_wide_characters_count_two_cells(self) -> None:
        self.assertEqual(pad("你", 4), "你  ")

    def test_custom_fill(self) -> None:
        self.assertEqual(pad("foo", 5, fill=lambda: "."), "foo..")

    def test_sequences_do_not_count_toward_width(self) -> None:
        self.assertEqual(pad(f"{PINK}foo{RESET}", 6), f"{PINK}foo{RESET}   ")

    def test_style_is_closed_around_newlines(self) -> None:
        self.assertEqual(
            pad("\x1b[31mfoo\nbar", 6),
            f"\x1b[31mfoo   {RESET}\n\x1b[31mbar   ",
        )

    def test_bytes_in_bytes_out(self) -> None:
        self.assertEqual(pad(b"foo", 4), b"foo ")

    def test_negative_width_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Padding(-1)


if __name__ == "__main__":
    unittest.main()
