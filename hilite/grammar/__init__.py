# grammar/__init__.py

from .rule import Rule, rules_from_config
from .grammar import Grammar
from .defaults import DEFAULT_GRAMMAR, default_rules

__all__ = ['Rule', 'Grammar', 'rules_from_config', 'DEFAULT_GRAMMAR', 'default_rules']
