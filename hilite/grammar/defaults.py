# grammar/defaults.py

from typing import Any, Dict, Optional

from ..display.style import StyleDefinitions
from .rule import Rule, rules_from_config

# Rules used inside {...} and [...] interpolations of a string literal
_INTERPOLATION = {
    'chars': {'pattern': r"[a-zA-Z][a-zA-Z0-9_]*", 'color': 'CHARS'},
    'define': {'pattern': r"\$[a-zA-Z_][a-zA-Z0-9_]*", 'color': 'DEFINE'},
    'number': {'pattern': r"\b\d+\b", 'color': 'NUMBER'},
    'symbol': {'pattern': r"[{}\[\]()<>\-]", 'color': 'BRACKET'},
    'mismatch': {'pattern': r".", 'color': 'STRING'},
}

DEFAULT_GRAMMAR: Dict[str, Dict[str, Any]] = {
    'comment': {
        'pattern': r"\#\[[^\]]*\]|(?:\#|//)[^\n]*|/\*.*?\*/",
        'color': 'COMMENT',
        'rematch': ['define', 'version'],
    },
    'number': {
        'pattern': r"\b\d+\b",
        'color': 'NUMBER',
    },
    'define': {
        'pattern': r"[@$][a-zA-Z_][a-zA-Z0-9_\-.]*",
        'color': 'DEFINE',
        'rematch': ['symbol'],
    },
    'symbol': {
        'pattern': r"[\\:*\-+/&%=;,.?!|<>~]",
        'color': 'SYMBOL',
    },
    'bracket': {
        'pattern': r"[{}\[\]()]",
        'color': 'BRACKET',
    },
    'boolean': {
        'pattern': r"\b(?:False|True|Null|None)\b",
        'color': 'BOOLEAN',
    },
    'type': {
        'pattern': r"\b(?:Array|Bool|Callable|Closure|Double|Float|Int|Integer|Mixed|Object|Resource|String|Void)\b",
        'color': 'TYPE',
    },
    'version': {
        'pattern': r"\b[vV]\d+(?:\.\d+)*\b",
        'color': 'VERSION',
        'handler': {
            'floating': {'pattern': r"[\d.]+", 'color': 'FLOATING'},
        },
    },
    'namespace': {
        'pattern': r"\b[a-zA-Z_][a-zA-Z0-9_]*(?:\\[a-zA-Z_][a-zA-Z0-9_]*)+\b",
        'color': 'NAMESPACE',
        'rematch': ['symbol'],
    },
    'string': {
        'pattern': r"(?<!\\)(?:\".*?(?<!\\)\"|'.*?(?<!\\)'|`.*?(?<!\\)`)",
        'color': 'STRING',
        'handler': {
            'curly': {
                'pattern': r"(?<!\\)\{(?:[^}\\]|\\.)*\}",
                'color': 'BRACKET',
                'handler': _INTERPOLATION,
            },
            'bracket': {
                'pattern': r"(?<!\\)\[(?:[^\]\\]|\\.)*\]",
                'color': 'BRACKET',
                'handler': _INTERPOLATION,
            },
            'hexadec': {'pattern': r"\\x[a-fA-F0-9]{2}", 'color': 'HEXADEC'},
            'escape': {'pattern': r"\\(?:[0-7]{1,3}|[abefnrtvAZdDsSwWhHkpPg\\\"'`])", 'color': 'ESCAPE'},
            'define': {'pattern': r"\$[a-zA-Z_][a-zA-Z0-9_]*", 'color': 'DEFINE'},
        },
    },
}


def default_rules(definitions: Optional[StyleDefinitions] = None) -> Dict[str, Rule]:
    """Build the stock rule set colored from definitions."""
    definitions = definitions or StyleDefinitions()
    return rules_from_config(DEFAULT_GRAMMAR, definitions.get_style)
