# regexp/matches.py

import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Union


@dataclass(frozen=True)
class Capture:
    """Text captured by one named group, offset relative to the match start."""
    name: str
    value: str
    offset: int

    @property
    def end(self) -> int:
        return self.offset + len(self.value)


@dataclass(frozen=True)
class Matches:
    """
    One full match of a pattern against a subject.

    Only named groups that took part in the match with non-empty text
    appear in groups, in the order they are declared in the pattern.
    """
    full: str
    start: int
    groups: Dict[str, Capture] = field(default_factory=dict)

    @property
    def end(self) -> int:
        return self.start + len(self.full)

    @classmethod
    def from_match(cls, match: re.Match) -> "Matches":
        """Build from a re match, keeping absolute offsets."""
        start = match.start()
        groups = {}
        for name, index in sorted(match.re.groupindex.items(), key=lambda item: item[1]):
            value = match.group(index)
            if value:
                groups[name] = Capture(name, value, match.start(index) - start)
        return cls(full=match.group(0), start=start, groups=groups)

    def group(self, name: str, default: Optional[str] = None) -> Optional[str]:
        capture = self.groups.get(name)
        return capture.value if capture else default

    def __getitem__(self, key: Union[int, str]) -> str:
        if key == 0:
            return self.full
        if isinstance(key, str) and key in self.groups:
            return self.groups[key].value
        raise KeyError(key)

    def __contains__(self, name: str) -> bool:
        return name in self.groups
