# display/style/definitions.py

from typing import Dict, Optional

from rich.style import Style


class StyleDefinitions:
    """
    Named ANSI formats and the color palette used for token categories.
    Each palette entry carries the raw escape and the equivalent rich style.
    """

    # ANSI format utility
    FMT = staticmethod(lambda x: f'\033[{x}m')

    def __init__(
        self,
        formats: Optional[Dict[str, str]] = None,
        colors: Optional[Dict[str, Dict[str, str]]] = None
    ):
        """
        Initialize style definitions with optional custom configurations.
        """
        # Initialize default formats
        self._default_formats = {
            'RESET': self.FMT('0'),
            'ITALIC_ON': self.FMT('3'),
            'ITALIC_OFF': self.FMT('23'),
            'BOLD_ON': self.FMT('1'),
            'BOLD_OFF': self.FMT('22')
        }

        # Initialize default colors, one per token category
        self._default_colors = {
            'COMMENT': self._color(250),
            'NUMBER': self._color(61),
            'DEFINE': self._color(111),
            'SYMBOL': self._color(69),
            'BRACKET': self._color(214),
            'BOOLEAN': self._color(199),
            'TYPE': self._color(213),
            'VERSION': self._color(112),
            'FLOATING': self._color(190),
            'NAMESPACE': self._color(111),
            'STRING': self._color(220),
            'CHARS': self._color(11),
            'HEXADEC': self._color(85),
            'ESCAPE': self._color(208)
        }

        # Set instance attributes with defaults or custom values
        self.formats = formats if formats is not None else self._default_formats.copy()
        self.colors = colors if colors is not None else self._default_colors.copy()

    def _color(self, code: int) -> Dict[str, str]:
        """Bold 256-color foreground in both notations."""
        return {'ansi': self.FMT(f'1;38;5;{code}'), 'rich': f'bold color({code})'}

    def get_format(self, name: str) -> str:
        """Get a format code by name."""
        return self.formats.get(name, '')

    def get_color(self, name: str) -> Dict[str, str]:
        """Get a color configuration by name."""
        return self.colors.get(name, {'ansi': '', 'rich': ''})

    def get_style(self, name: str) -> str:
        """Get the ANSI escape of a palette entry."""
        return self.get_color(name).get('ansi', '')

    def get_rich_style(self, name: str) -> Style:
        """Get the rich style of a palette entry."""
        rich = self.get_color(name).get('rich', '')
        return Style.parse(rich) if rich else Style()

    def add_color(self, name: str, ansi: str, rich: str = '') -> None:
        """Add a new palette entry."""
        if name in self.colors:
            raise ValueError(f"Color '{name}' already exists")
        self.colors[name] = {'ansi': ansi, 'rich': rich}
