# display/ansi.py

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from ..config import RESET
from ..regexp import Pattern

# Any CSI sequence, used when measuring visible text
ANSI_REGEX = re.compile(r'\x1B\[[0-?]*[ -/]*[@-~]')


def strip_ansi(text: str) -> str:
    """Return text without any ANSI escape sequences."""
    return ANSI_REGEX.sub('', text)


def visible_length(text: str) -> int:
    """Return visible length of text without ANSI codes."""
    return len(strip_ansi(text))


@dataclass(frozen=True)
class Segment:
    """
    A slice of the input: either escape sequences already present, or
    plain text. For plain text, active is the escape in effect right
    before it; for escapes, active is the escape in effect after them.
    """
    text: str
    escape: bool = False
    active: str = RESET


class Segments(Sequence[Segment]):
    """Ordered, lossless partition of a string into segments."""

    def __init__(self, segments: List[Segment], base: str = RESET):
        self._segments = list(segments)
        self.base = base

    def __getitem__(self, index):
        return self._segments[index]

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __eq__(self, other) -> bool:
        if isinstance(other, Segments):
            return self._segments == other._segments and self.base == other.base
        return NotImplemented

    def __repr__(self) -> str:
        return f"Segments({self._segments!r})"

    @property
    def text(self) -> str:
        return ''.join(segment.text for segment in self._segments)

    def active_escape_before(self, index: int) -> str:
        """Return the escape in effect right before segment index."""
        for segment in reversed(self._segments[:index]):
            if segment.escape:
                return segment.active
        return self.base


class AnsiSplitter:
    """Splits text on escape sequences that are already present."""

    # Any CSI sequence is kept intact
    pattern = Pattern(ANSI_REGEX.pattern)

    # Only SGR sequences (ESC [ params m, empty params meaning reset) change the active escape
    sgr = re.compile(r'\x1b\[[0-9;]*m')

    def __init__(self, base: str = RESET):
        self.base = base

    def split(self, text: str, base: Optional[str] = None) -> Segments:
        """
        Partition text into escape and plain segments.

        Args:
            text: Input possibly containing CSI sequences
            base: Escape assumed active before the first sequence

        Returns:
            Segments whose concatenation is text. Consecutive sequences
            are merged into one escape segment, whose SGR codes become the
            active escape of the plain text after it.
        """
        base = self.base if base is None else base
        segments: List[Segment] = []
        active = base
        last = 0
        pending = ''
        styles = ''

        for match in self.pattern.matches(text):
            if match.start > last:
                if pending:
                    active = styles or active
                    segments.append(Segment(pending, escape=True, active=active))
                    pending = styles = ''
                segments.append(Segment(text[last:match.start], active=active))
            pending += match.full
            if self.sgr.fullmatch(match.full):
                styles += match.full
            last = match.end

        if pending:
            active = styles or active
            segments.append(Segment(pending, escape=True, active=active))
        if last < len(text):
            segments.append(Segment(text[last:], active=active))
        return Segments(segments, base)
