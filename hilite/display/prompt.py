# display/prompt.py

from typing import Callable

from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import ANSI, StyleAndTextTuples, to_formatted_text
from prompt_toolkit.lexers import Lexer


class HighlightLexer(Lexer):
    """prompt_toolkit lexer that colors the input buffer line by line."""

    def __init__(self, colorize: Callable[[str], str]):
        self.colorize = colorize

    def lex_document(self, document: Document) -> Callable[[int], StyleAndTextTuples]:
        lines = [to_formatted_text(ANSI(self.colorize(line))) for line in document.lines]

        def get_line(lineno: int) -> StyleAndTextTuples:
            try:
                return lines[lineno]
            except IndexError:
                return []

        return get_line
