"""Hard-wrap behavior tests.

Lines are cut at exact cell widths between grapheme clusters, with tabs
expanded and forced-break whitespace trimmed unless preserved.
"""

from __future__ import annotations

import unittest

from termreflow.wrap import Wrap, wrap

PINK = "\x1b[38;2;249;38;114m"
WHITE = "\x1b[38;2;248;248;242m"
RESET = "\x1b[0m"


class HardWrapTests(unittest.TestCase):
    def test_zero_limit_passes_input_through(self) -> None:
        self.assertEqual(wrap("foo\tbar ", 0), "foo\tbar ")

    def test_empty_input(self) -> None:
        self.assertEqual(wrap("", 4), "")

    def test_words_are_split_at_the_limit(self) -> None:
        self.assertEqual(wrap("foobarfoo", 4), "foob\narfo\no")

    def test_space_before_forced_break_stays_on_its_line(self) -> None:
        self.assertEqual(wrap("foo bar", 4), "foo \nbar")

    def test_leading_space_after_forced_break_is_dropped(self) -> None:
        self.assertEqual(wrap("foo  bar", 3), "foo\nbar")

    def test_leading_space_after_forced_break_can_be_preserved(self) -> None:
        self.assertEqual(wrap("foo  bar", 3, preserve_space=True), "foo\n  b\nar")

    def test_explicit_newline_resets_the_line(self) -> None:
        self.assertEqual(wrap("foo\nbarbaz", 3), "foo\nbar\nbaz")

    def test_space_after_explicit_newline_is_kept(self) -> None:
        self.assertEqual(wrap("foo\n bar", 4), "foo\n bar")

    def test_newlines_can_be_dropped(self) -> None:
        self.assertEqual(wrap("foo\nbar", 10, keep_newlines=False), "foobar")

    def test_dropped_crlf_leaves_no_carriage_return(self) -> None:
        self.assertEqual(wrap("ab\r\ncd", 10, keep_newlines=False), "abcd")

    def test_tabs_measure_tab_width_and_stay_tabs(self) -> None:
        self.assertEqual(wrap("\tfoo", 3, tab_width=2), "\tf\noo")

    def test_fitting_tab_is_left_unchanged(self) -> None:
        self.assertEqual(wrap("a\tb", 10), "a\tb")

    def test_tab_split_by_a_break_becomes_spaces(self) -> None:
        self.assertEqual(wrap("ab\tc", 4), "ab  \nc")
        self.assertEqual(wrap("ab\tc", 4, preserve_space=True), "ab  \n  c")

    def test_wide_characters_move_whole(self) -> None:
        self.assertEqual(wrap("你好", 1), "你\n好")
        self.assertEqual(wrap("你好", 3), "你\n好")

    def test_combining_sequence_split_across_writes(self) -> None:
        writer = Wrap(1)
        writer.write("e")
        writer.write("\u0301x")
        writer.close()
        self.assertEqual(writer.getvalue(), "e\u0301\nx")

    def test_undecodable_bytes_round_trip(self) -> None:
        self.assertEqual(wrap(b"ab\xffcd", 2), b"ab\xff\ncd")


class HardWrapStyleTests(unittest.TestCase):
    SOURCE = f"{PINK}({RESET}{WHITE}just another test{PINK}){RESET}"

    def test_style_reopens_on_every_inserted_line(self) -> None:
        expected = (
            f"{PINK}({RESET}{WHITE}ju{RESET}\n"
            f"{WHITE}st {RESET}\n"
            f"{WHITE}ano{RESET}\n"
            f"{WHITE}the{RESET}\n"
            f"{WHITE}r t{RESET}\n"
            f"{WHITE}est{PINK}{RESET}\n"
            f"{PINK}){RESET}"
        )
        self.assertEqual(wrap(self.SOURCE, 3), expected)

    def test_without_continuity_only_newlines_are_inserted(self) -> None:
        expected = f"{PINK}({RESET}{WHITE}ju\nst \nano\nthe\nr t\nest{PINK}\n){RESET}"
        self.assertEqual(wrap(self.SOURCE, 3, style_continuity=False), expected)

    def test_sequences_survive_byte_at_a_time_input(self) -> None:
        writer = Wrap(3)
        for byte in self.SOURCE.encode("utf-8"):
            writer.write(bytes([byte]))
        writer.close()
        self.assertEqual(writer.getvalue(), wrap(self.SOURCE, 3))


if __name__ == "__main__":
    unittest.main()
