# regexp/__init__.py

from .matches import Capture, Matches
from .pattern import FLAGS, Cursor, Pattern, Scanner, parse_flags

__all__ = ['Capture', 'Matches', 'Pattern', 'Scanner', 'Cursor', 'FLAGS', 'parse_flags']
