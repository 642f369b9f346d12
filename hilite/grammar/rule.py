# grammar/rule.py

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from ..errors import GrammarError, PatternError


@dataclass(frozen=True)
class Rule:
    """
    One named production of a grammar.

    The grammar wraps pattern in a group named after the rule. Text matched
    by the rule is passed through transform, then re-tokenized by the child
    rules in handler, then by the sibling rules named in rematch, and finally
    wrapped in style.
    """
    name: str
    pattern: str
    style: str = ''
    handler: Tuple["Rule", ...] = ()
    rematch: Tuple[str, ...] = ()
    transform: Optional[Callable[[str], str]] = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.isidentifier():
            raise GrammarError(f"Rule name {self.name!r} is not a valid group name", self.name)
        if not self.pattern:
            raise PatternError(f"Pattern of rule '{self.name}' can't be empty", self.pattern)
        # Accept lists and dicts from callers, store tuples
        handler = self.handler.values() if isinstance(self.handler, Mapping) else self.handler
        object.__setattr__(self, 'handler', tuple(handler))
        object.__setattr__(self, 'rematch', tuple(self.rematch))

    @property
    def group(self) -> str:
        return f"(?P<{self.name}>{self.pattern})"

    @classmethod
    def from_config(
        cls,
        name: str,
        config: Dict[str, Any],
        resolve_style: Optional[Callable[[str], str]] = None
    ) -> "Rule":
        """
        Build a rule tree from its declarative form.

        Args:
            name: Rule name
            config: Mapping with 'pattern' and optionally 'style' (raw escape),
                'color' (palette name), 'handler' (name -> config of child
                rules), 'rematch' (sibling names) and 'transform'
            resolve_style: Turns a 'color' name into an escape string

        Returns:
            The rule with its whole handler subtree built
        """
        style = config.get('style', '')
        if not style and config.get('color'):
            if resolve_style is None:
                raise GrammarError(f"Rule '{name}' names color '{config['color']}' but no palette was given", name)
            style = resolve_style(config['color'])
        handler = tuple(
            cls.from_config(child, cfg, resolve_style)
            for child, cfg in config.get('handler', {}).items()
        )
        return cls(
            name=name,
            pattern=config['pattern'],
            style=style,
            handler=handler,
            rematch=tuple(config.get('rematch', ())),
            transform=config.get('transform'),
        )


def rules_from_config(
    config: Dict[str, Dict[str, Any]],
    resolve_style: Optional[Callable[[str], str]] = None
) -> Dict[str, Rule]:
    """Build an ordered rule set from name -> config."""
    return {name: Rule.from_config(name, cfg, resolve_style) for name, cfg in config.items()}
