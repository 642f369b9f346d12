# display/__init__.py

from .ansi import AnsiSplitter, Segment, Segments, strip_ansi, visible_length
from .style import StyleDefinitions

__all__ = ['AnsiSplitter', 'Segment', 'Segments', 'StyleDefinitions', 'strip_ansi', 'visible_length']
