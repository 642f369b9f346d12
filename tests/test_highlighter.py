# test_highlighter.py

import pytest
from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from hilite import colorize, default_highlighter
from hilite.display.ansi import strip_ansi
from hilite.display.style import StyleDefinitions
from hilite.errors import ResolutionError
from hilite.grammar import Grammar, Rule
from hilite.highlighter import Highlighter

RED = "\033[31m"
GREEN = "\033[32m"
BLUE = "\033[34m"
RESET = "\033[0m"

SAMPLES = [
    "",
    "nothing to see",
    "12+7",
    'Yume\\App\\Http\\Controller::index($request)',
    '$name = "Hello {user} [1] \\x41\\n $who";',
    "// comment with $var and v1.2.3",
    "/* multi\nline */ True, False, Null",
    "String $value = 42; Int|Void",
    "'single' `tick` \"open",
    f"{RED}already red 12{RESET} then 34",
    "\t tabs\r\nand newlines\n",
]


class TestHighlighter:
    """Driver behaviour over grammars and pre-existing escapes."""

    def setup_method(self):
        self.grammar = Grammar([
            Rule("number", r"\b\d+\b", RED),
            Rule("symbol", r"[+\-*/]", BLUE),
        ])
        self.logger = Mock()
        self.highlighter = Highlighter(self.grammar, RESET, self.logger)

    def test_colorize_tokens(self):
        expected = RED + "12" + RESET + BLUE + "+" + RESET + RED + "7" + RESET
        assert self.highlighter.colorize("12+7") == expected

    def test_base_escape_is_restored(self):
        out = self.highlighter.colorize("1", base=GREEN)
        assert out == RED + "1" + GREEN

    def test_existing_escapes_are_kept_and_restored(self):
        text = f"\033[31mvalue 12 here\033[0m"
        highlighter = Highlighter(Grammar([Rule("number", r"\d+", GREEN)]))
        expected = "\033[31m" + "value " + GREEN + "12" + "\033[31m" + " here" + "\033[0m"
        assert highlighter.colorize(text) == expected

    def test_text_after_escape_restores_to_it(self):
        out = self.highlighter.colorize(f"1{GREEN}2")
        assert out == RED + "1" + RESET + GREEN + RED + "2" + GREEN

    def test_cursor_sequences_keep_active_escape(self):
        out = self.highlighter.colorize(f"{GREEN}1\033[2K2")
        assert out == GREEN + RED + "1" + GREEN + "\033[2K" + RED + "2" + GREEN

    def test_unmatched_text_passes_through(self):
        assert self.highlighter.colorize("abc") == "abc"

    def test_resolution_error_aborts(self):
        class Broken(Grammar):
            def resolve(self, match):
                raise ResolutionError("broken")

        highlighter = Highlighter(Broken([Rule("number", r"\d+", RED)]), logger=self.logger)
        with pytest.raises(ResolutionError):
            highlighter.colorize("a 1 b")
        self.logger.error.assert_called_once()

    def test_compiled_grammar_is_reusable(self):
        first = self.highlighter.colorize("1+2")
        other = Highlighter(self.grammar)
        assert other.colorize("1+2") == first
        assert self.highlighter.colorize("1+2") == first


class TestDefaultHighlighter:
    """The stock rules."""

    def setup_method(self):
        self.definitions = StyleDefinitions()

    @pytest.mark.parametrize("text", SAMPLES)
    def test_colorize_is_lossless(self, text):
        assert strip_ansi(colorize(text)) == strip_ansi(text)

    def test_number(self):
        assert colorize("42") == self.definitions.get_style("NUMBER") + "42" + RESET

    def test_qualified_name_rematches_symbols(self):
        ns = self.definitions.get_style("NAMESPACE")
        sy = self.definitions.get_style("SYMBOL")
        expected = ns + "Yume" + sy + "\\" + ns + "App" + sy + "\\" + ns + "Main" + RESET
        assert colorize("Yume\\App\\Main") == expected

    def test_version_inside_comment(self):
        comment = self.definitions.get_style("COMMENT")
        version = self.definitions.get_style("VERSION")
        floating = self.definitions.get_style("FLOATING")
        expected = (
            comment + "# at " + version + "v" + floating + "1.2" + version + comment + RESET
        )
        assert colorize("# at v1.2") == expected

    def test_string_interpolation(self):
        string = self.definitions.get_style("STRING")
        bracket = self.definitions.get_style("BRACKET")
        chars = self.definitions.get_style("CHARS")
        expected = (
            string + '"a '
            + bracket + bracket + "{" + bracket + chars + "b" + bracket + bracket + "}" + bracket + string
            + '"' + RESET
        )
        assert colorize('"a {b}"') == expected

    def test_cursor_sequence_is_not_recolored(self):
        bracket = self.definitions.get_style("BRACKET")
        number = self.definitions.get_style("NUMBER")
        expected = (
            "\033[2K" + bracket + "[" + RESET + number + "1" + RESET + bracket + "]" + RESET
        )
        assert colorize("\033[2K[1]") == expected

    def test_shared_instance(self):
        assert default_highlighter() is default_highlighter()
