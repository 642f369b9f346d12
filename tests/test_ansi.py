# test_ansi.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from hilite.display.ansi import AnsiSplitter, Segment, strip_ansi, visible_length

RED = "\033[31m"
BOLD = "\033[1m"
RESET = "\033[0m"

SAMPLES = [
    "",
    "plain text",
    f"{RED}red{RESET} tail",
    f"{BOLD}{RED}x",
    f"x{RED}",
    f"{RED}{RESET}",
    f"a{RED}b{BOLD}{RESET}c\033[mend",
    "not an escape: [31m and \033[2J",
]


class TestAnsiSplitter:
    """Partitioning text on escape sequences."""

    def setup_method(self):
        self.splitter = AnsiSplitter()

    def test_plain_text(self):
        segments = self.splitter.split("hello")
        assert list(segments) == [Segment("hello", active=RESET)]

    def test_empty_text(self):
        assert len(self.splitter.split("")) == 0

    def test_escapes_and_plain_text_alternate(self):
        segments = self.splitter.split(f"{RED}red{RESET} tail")
        assert list(segments) == [
            Segment(RED, escape=True, active=RED),
            Segment("red", active=RED),
            Segment(RESET, escape=True, active=RESET),
            Segment(" tail", active=RESET),
        ]

    def test_consecutive_escapes_are_composed(self):
        segments = self.splitter.split(f"{BOLD}{RED}x")
        assert list(segments) == [
            Segment(BOLD + RED, escape=True, active=BOLD + RED),
            Segment("x", active=BOLD + RED),
        ]

    def test_trailing_escape_is_recorded(self):
        segments = self.splitter.split(f"x{RED}")
        assert segments[0] == Segment("x", active=RESET)
        assert segments[1] == Segment(RED, escape=True, active=RED)

    def test_empty_parameter_list_is_an_escape(self):
        segments = self.splitter.split("a\033[mb")
        assert segments[1].escape
        assert segments[2].active == "\033[m"

    def test_other_sequences_are_kept_whole(self):
        segments = self.splitter.split("a\033[2Jb")
        assert list(segments) == [
            Segment("a", active=RESET),
            Segment("\033[2J", escape=True, active=RESET),
            Segment("b", active=RESET),
        ]

    def test_only_sgr_codes_update_active_escape(self):
        segments = self.splitter.split(f"{RED}a\033[2K{BOLD}\033[1Ab\033[2Kc")
        assert segments[1] == Segment("a", active=RED)
        assert segments[2] == Segment(f"\033[2K{BOLD}\033[1A", escape=True, active=BOLD)
        assert segments[3] == Segment("b", active=BOLD)
        assert segments[5] == Segment("c", active=BOLD)
        assert segments.active_escape_before(5) == BOLD

    def test_base_escape(self):
        segments = AnsiSplitter(base=BOLD).split("x")
        assert segments[0].active == BOLD
        assert self.splitter.split("x", base=RED)[0].active == RED

    def test_active_escape_before(self):
        segments = self.splitter.split(f"a{RED}b{BOLD}{RESET}c")
        assert segments.active_escape_before(0) == RESET
        assert segments.active_escape_before(2) == RED
        assert segments.active_escape_before(4) == BOLD + RESET
        for index, segment in enumerate(segments):
            if not segment.escape:
                assert segment.active == segments.active_escape_before(index)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_partition_is_lossless(self, text):
        assert self.splitter.split(text).text == text

    @pytest.mark.parametrize("text", SAMPLES)
    def test_splitting_is_idempotent(self, text):
        segments = self.splitter.split(text)
        again = self.splitter.split("".join(segment.text for segment in segments))
        assert again == segments


class TestAnsiHelpers:
    """Measuring text that contains escapes."""

    def test_strip_ansi(self):
        assert strip_ansi(f"{BOLD}{RED}x{RESET}y\033[2J") == "xy"

    def test_visible_length(self):
        assert visible_length(f"{RED}abc{RESET}") == 3
