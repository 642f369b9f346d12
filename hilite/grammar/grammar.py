# grammar/grammar.py

from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..config import DEFAULT_FLAGS, MAX_DEPTH
from ..errors import GrammarError, PatternError, ResolutionError
from ..regexp import Capture, Matches, Pattern
from .rule import Rule


class _Node:
    """A rule together with the grammars compiled for its handler and rematch."""

    def __init__(self, rule: Rule, handler: Optional["Grammar"] = None):
        self.rule = rule
        self.handler = handler
        self.rematch: Optional["Grammar"] = None

    def render(self, chars: str, escape: str) -> str:
        """Recolor chars for this rule, restoring escape afterwards."""
        rule = self.rule
        restore = rule.style or escape
        if rule.transform is not None:
            chars = rule.transform(chars)
        if self.handler is not None:
            chars = self.handler.substitute(chars, restore)
        if self.rematch is not None:
            chars = self.rematch.substitute(chars, restore)
        if not rule.style:
            return chars
        return f"{rule.style}{chars}{escape}"


class Grammar:
    """
    An ordered set of rules compiled into one alternation.

    Every rule becomes a named group, so whichever group is populated tells
    which rule fired. When several rules could match at the same position
    the one declared first wins.
    """

    def __init__(
        self,
        rules: Union[Mapping[str, Rule], Iterable[Rule]],
        flags: str = DEFAULT_FLAGS,
        max_depth: int = MAX_DEPTH,
        _depth: int = 0,
        _level: Optional[Dict[str, _Node]] = None
    ):
        self.flags = flags
        self.max_depth = max_depth
        self.rules = self._collect(rules)
        if not self.rules:
            raise GrammarError("Grammar needs at least one rule")
        if _depth > max_depth:
            raise GrammarError(
                f"Rule nesting deeper than {max_depth} levels at '{next(iter(self.rules))}'",
                next(iter(self.rules))
            )

        self._check_groups()
        self.pattern = Pattern('|'.join(rule.group for rule in self.rules.values()), flags)

        if _level is None:
            self._check_rematch()
            _level = {
                name: _Node(rule, self._child(rule, _depth))
                for name, rule in self.rules.items()
            }
            self._level = _level
            for name, rule in self.rules.items():
                if rule.rematch:
                    _level[name].rematch = Grammar(
                        [self.rules[target] for target in rule.rematch],
                        flags, max_depth, _depth, _level
                    )
        else:
            self._level = _level

    def __repr__(self) -> str:
        return f"Grammar({list(self.rules)!r})"

    def __contains__(self, name: str) -> bool:
        return name in self.rules

    @staticmethod
    def _collect(rules: Union[Mapping[str, Rule], Iterable[Rule]]) -> Dict[str, Rule]:
        if isinstance(rules, Mapping):
            for key, rule in rules.items():
                if key != rule.name:
                    raise GrammarError(f"Rule '{rule.name}' is registered under '{key}'", rule.name)
            rules = rules.values()
        collected: Dict[str, Rule] = {}
        for rule in rules:
            if rule.name in collected:
                raise GrammarError(f"Rule '{rule.name}' is declared twice", rule.name)
            collected[rule.name] = rule
        return collected

    def _child(self, rule: Rule, depth: int) -> Optional["Grammar"]:
        if not rule.handler:
            return None
        return Grammar(rule.handler, self.flags, self.max_depth, depth + 1)

    def _check_groups(self) -> None:
        """Reject group names shared by two rules of this alternation."""
        owners: Dict[str, str] = {}
        for name, rule in self.rules.items():
            try:
                inner = Pattern(rule.pattern, self.flags).groupindex
            except PatternError as e:
                raise PatternError(f"Rule '{name}': {e}", rule.pattern, e.flag) from e
            for group in [name, *inner]:
                if group in owners:
                    other = owners[group]
                    where = "itself" if other == name else f"rule '{other}'"
                    raise GrammarError(f"Group '{group}' of rule '{name}' collides with {where}", name)
                owners[group] = name

    def _check_rematch(self) -> None:
        """Reject unknown rematch targets and rematch cycles."""
        for name, rule in self.rules.items():
            for target in rule.rematch:
                if target not in self.rules:
                    raise GrammarError(f"Rule '{name}' rematches unknown rule '{target}'", name)

        done = set()

        def visit(name: str, path: List[str]) -> None:
            if name in path:
                cycle = ' -> '.join(path[path.index(name):] + [name])
                raise GrammarError(f"Rematch cycle: {cycle}", name)
            if name in done:
                return
            for target in self.rules[name].rematch:
                visit(target, path + [name])
            done.add(name)

        for name in self.rules:
            visit(name, [])

    def resolve(self, match: Matches) -> Tuple[str, Capture]:
        """Return the name and capture of the single rule that produced match."""
        fired = [name for name in match.groups if name in self.rules]
        if len(fired) != 1:
            groups = {name: capture.value for name, capture in match.groups.items()}
            raise ResolutionError(
                f"Expected exactly one rule group in match {match.full!r} at {match.start}, found {fired}",
                groups
            )
        name = fired[0]
        return name, match.groups[name]

    def apply(self, match: Matches, escape: str) -> str:
        """Recolor one match, restoring escape after it."""
        if not match.full:
            return match.full
        name, capture = self.resolve(match)
        return self._level[name].render(capture.value, escape)

    def substitute(self, text: str, escape: str) -> str:
        """Recolor every token of text, restoring escape after each."""
        return self.pattern.replace(text, lambda match: self.apply(match, escape))
