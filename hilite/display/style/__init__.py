# display/style/__init__.py

from .definitions import StyleDefinitions

__all__ = ['StyleDefinitions']
