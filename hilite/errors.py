# errors.py

from typing import Dict, Optional


class HighlightError(Exception):
    """Base class for every error raised by hilite."""


class PatternError(HighlightError, ValueError):
    """Raised when a pattern or its flags can't be compiled."""

    def __init__(self, message: str, pattern: Optional[str] = None, flag: Optional[str] = None):
        super().__init__(message)
        self.pattern = pattern
        self.flag = flag


class GrammarError(HighlightError, ValueError):
    """Raised when a rule set can't be compiled into a grammar."""

    def __init__(self, message: str, rule: Optional[str] = None):
        super().__init__(message)
        self.rule = rule


class ResolutionError(HighlightError, RuntimeError):
    """Raised when a match can't be traced back to exactly one rule."""

    def __init__(self, message: str, groups: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.groups = groups or {}
