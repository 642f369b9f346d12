# highlighter.py

from functools import lru_cache
from typing import Optional

from .config import RESET
from .display.ansi import AnsiSplitter
from .errors import HighlightError
from .grammar import Grammar, default_rules
from .logger import Logger


class Highlighter:
    """
    Colors plain text with a grammar while leaving escape sequences
    already in the text untouched.
    """

    def __init__(self, grammar: Grammar, base: str = RESET, logger: Optional[Logger] = None):
        self.grammar = grammar
        self.base = base
        self.splitter = AnsiSplitter(base)
        self.logger = logger or Logger(__name__)

    def colorize(self, text: str, base: Optional[str] = None) -> str:
        """
        Return text with every token wrapped in its rule's style.

        Args:
            text: Text to highlight, possibly already containing SGR codes
            base: Escape restored after tokens that no earlier escape
                sequence governs. Defaults to the highlighter's base.

        Returns:
            The highlighted text. Stripping escapes from it gives back text.
        """
        segments = self.splitter.split(text, base)
        self.logger.debug(f"Colorizing {len(text)} chars in {len(segments)} segments")
        out = []
        try:
            for segment in segments:
                if segment.escape:
                    out.append(segment.text)
                else:
                    out.append(self.grammar.substitute(segment.text, segment.active))
        except HighlightError as e:
            self.logger.error(f"Highlight error: {e}")
            raise
        return ''.join(out)


@lru_cache(maxsize=None)
def default_highlighter() -> Highlighter:
    """Return the shared highlighter built from the stock rules."""
    return Highlighter(Grammar(default_rules()))


def colorize(text: str, base: Optional[str] = None) -> str:
    """Highlight text with the stock rules."""
    return default_highlighter().colorize(text, base)
