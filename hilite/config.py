# config.py

import os
import sys
from typing import Optional, TextIO

# Default base escape restored after every token
RESET = '\033[0m'

# Flags every grammar level is compiled with
DEFAULT_FLAGS = 'ms'

# Deepest sub-handler nesting a grammar may declare
MAX_DEPTH = 16


def color_enabled(stream: Optional[TextIO] = None) -> bool:
    """
    Decide whether output written to stream should be colored.

    NO_COLOR wins over FORCE_COLOR; without either, color is used only
    when the stream is a terminal.
    """
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())
