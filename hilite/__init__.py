# __init__.py

from .config import RESET
from .errors import GrammarError, HighlightError, PatternError, ResolutionError
from .logger import Logger
from .regexp import Capture, Cursor, Matches, Pattern, Scanner
from .grammar import DEFAULT_GRAMMAR, Grammar, Rule, default_rules
from .display import AnsiSplitter, StyleDefinitions, strip_ansi
from .highlighter import Highlighter, colorize, default_highlighter
from .interface import Interface

__all__ = [
    "Interface", "Highlighter", "Grammar", "Rule", "Pattern", "Scanner", "Cursor",
    "Matches", "Capture", "AnsiSplitter", "StyleDefinitions", "Logger",
    "HighlightError", "PatternError", "GrammarError", "ResolutionError",
    "DEFAULT_GRAMMAR", "RESET", "colorize", "default_highlighter", "default_rules", "strip_ansi",
]
