# regexp/pattern.py

import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, Optional, Tuple, Union

from ..errors import PatternError
from .matches import Matches

# Supported flag letters
FLAGS = {
    'a': re.ASCII,
    'i': re.IGNORECASE,
    'm': re.MULTILINE,
    's': re.DOTALL,
    'x': re.VERBOSE,
}


def parse_flags(flags: Union[str, Iterable[str]], pattern: Optional[str] = None) -> int:
    """Fold flag letters into re flags, rejecting unknown and repeated ones."""
    value = 0
    checked = set()
    for flag in flags:
        if flag not in FLAGS:
            raise PatternError(f"Unsupported flag '{flag}' for pattern {pattern!r}", pattern, flag)
        if flag in checked:
            raise PatternError(f"Duplicate flag '{flag}' for pattern {pattern!r}", pattern, flag)
        checked.add(flag)
        value |= FLAGS[flag]
    return value


@dataclass(frozen=True)
class Cursor:
    """Scan position within one subject."""
    subject: Optional[str] = None
    index: int = 0

    def on(self, subject: str) -> "Cursor":
        """Return this cursor if it already tracks subject, otherwise a fresh one."""
        return self if self.subject == subject else Cursor(subject, 0)


class Pattern:
    """
    A compiled regular expression with match, scan and replace helpers.

    A Pattern holds no scan state, so one instance can be shared freely.
    Incremental scanning goes through a Cursor value or a Scanner.
    """

    def __init__(self, pattern: str, flags: Union[str, Iterable[str]] = ''):
        if not pattern:
            raise PatternError("Pattern can't be empty", pattern)
        self.pattern = pattern
        self.flags = ''.join(flags)
        try:
            self._compiled = re.compile(pattern, parse_flags(self.flags, pattern))
        except re.error as e:
            raise PatternError(f"Invalid pattern {pattern!r}: {e}", pattern) from e

    def __str__(self) -> str:
        return f"/{self.pattern}/{self.flags}"

    def __repr__(self) -> str:
        return f"Pattern({self.pattern!r}, {self.flags!r})"

    @property
    def compiled(self) -> re.Pattern:
        return self._compiled

    @property
    def groupindex(self) -> Dict[str, int]:
        return dict(self._compiled.groupindex)

    def match(self, subject: str) -> Optional[Matches]:
        """Return the first match found scanning subject from position 0."""
        return self.search(subject, 0)

    def search(self, subject: str, pos: int = 0) -> Optional[Matches]:
        """Return the first match at or after pos."""
        if not subject or pos > len(subject):
            return None
        match = self._compiled.search(subject, pos)
        return Matches.from_match(match) if match else None

    def advance(self, subject: str, cursor: Optional[Cursor] = None) -> Tuple[Optional[Matches], Cursor]:
        """
        Find the next match of subject after cursor.

        Args:
            subject: Text being scanned
            cursor: Position left by the previous call, if any. A cursor
                that tracks another subject is reset to 0.

        Returns:
            The match (or None) and the cursor to pass to the next call.
            The cursor is unchanged when nothing matched.
        """
        cursor = (cursor or Cursor()).on(subject)
        match = self.search(subject, cursor.index)
        if match is None:
            return None, cursor
        # Empty matches still step forward one character
        end = match.end if match.end > match.start else match.end + 1
        return match, Cursor(subject, end)

    def scanner(self) -> "Scanner":
        return Scanner(self)

    def matches(self, subject: str) -> Iterator[Matches]:
        """Yield successive matches of subject, left to right."""
        scanner = self.scanner()
        while True:
            match = scanner.advance(subject)
            if match is None:
                return
            yield match

    def replace(self, subject: str, callback: Callable[[Matches], str]) -> str:
        """
        Substitute callback(match) for every match in subject.

        Text between matches is copied through unchanged.
        """
        if not subject:
            return subject
        parts = []
        last = 0
        for match in self.matches(subject):
            parts.append(subject[last:match.start])
            parts.append(callback(match))
            last = match.end
        parts.append(subject[last:])
        return ''.join(parts)


class Scanner:
    """Owns one cursor over a shared Pattern."""

    def __init__(self, pattern: Pattern):
        self.pattern = pattern
        self.cursor = Cursor()

    @property
    def subject(self) -> Optional[str]:
        return self.cursor.subject

    @property
    def index(self) -> int:
        return self.cursor.index

    def advance(self, subject: str) -> Optional[Matches]:
        match, self.cursor = self.pattern.advance(subject, self.cursor)
        return match

    def reset(self) -> None:
        self.cursor = Cursor()
