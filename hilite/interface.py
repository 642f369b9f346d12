# interface.py

import sys
from typing import Mapping, Optional, TextIO

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.formatted_text import ANSI
from rich.table import Table
from rich.text import Text

from .config import RESET, color_enabled
from .display.prompt import HighlightLexer
from .display.style import StyleDefinitions
from .grammar import Grammar, Rule, default_rules
from .highlighter import Highlighter
from .logger import Logger


class Interface:
    """
    Main entry point that assembles palette, grammar and highlighter.
    """

    def __init__(self, rules: Optional[Mapping[str, Rule]] = None,
                 base: Optional[str] = None,
                 definitions: Optional[StyleDefinitions] = None,
                 enabled: Optional[bool] = None,
                 logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        """
        Initialize components.

        Args:
            rules: Rule set to highlight with. Defaults to the stock rules.
            base: Escape restored after each token. Defaults to the RESET
                format of definitions.
            definitions: Palette used to build the stock rules.
            enabled: Force color on or off. Detected from the environment
                when None.
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stdout.
        """
        self._init_components(rules, base, definitions, enabled, logging_enabled, log_file)

    def _init_components(self, rules: Optional[Mapping[str, Rule]],
                         base: Optional[str],
                         definitions: Optional[StyleDefinitions],
                         enabled: Optional[bool],
                         logging_enabled: bool,
                         log_file: Optional[str]) -> None:
        try:
            self.logger = Logger(__name__, logging_enabled, log_file)

            self.definitions = definitions or StyleDefinitions()
            self.grammar = Grammar(rules if rules is not None else default_rules(self.definitions))
            base = base or self.definitions.get_format('RESET') or RESET
            self.highlighter = Highlighter(self.grammar, base, self.logger)
            self.enabled = color_enabled() if enabled is None else enabled

            self.logger.debug(f"Compiled grammar with rules: {', '.join(self.grammar.rules)}")
            if not self.enabled:
                self.logger.debug("Color disabled, text will pass through unchanged")

        except Exception as e:
            if hasattr(self, 'logger'):
                self.logger.error(f"Init error: {e}")
            raise

    def colorize(self, text: str, base: Optional[str] = None) -> str:
        """Highlight text, or return it unchanged when color is disabled."""
        if not self.enabled:
            return text
        return self.highlighter.colorize(text, base)

    def render(self, text: str) -> Text:
        """Return highlighted text as a rich Text."""
        return Text.from_ansi(self.highlighter.colorize(text))

    def write(self, text: str, file: Optional[TextIO] = None) -> None:
        """Highlight text and write it to file (stdout by default)."""
        file = file if file is not None else sys.stdout
        file.write(self.colorize(text))
        file.flush()

    def palette(self) -> Table:
        """Return a table previewing every palette color."""
        table = Table(title="hilite palette")
        table.add_column("Name")
        table.add_column("Sample")
        table.add_column("ANSI")
        for name in self.definitions.colors:
            ansi = self.definitions.get_style(name)
            table.add_row(
                name,
                Text(name.lower(), style=self.definitions.get_rich_style(name)),
                repr(ansi)
            )
        return table

    def interactive(self, prompt: str = "> ") -> None:
        """Read lines and echo them highlighted until EOF or Ctrl-C."""
        session = PromptSession(
            lexer=HighlightLexer(self.colorize) if self.enabled else None
        )
        self.logger.debug("Starting interactive session")
        while True:
            try:
                line = session.prompt(prompt)
            except (EOFError, KeyboardInterrupt):
                break
            print_formatted_text(ANSI(self.colorize(line)))
        self.logger.debug("Interactive session ended")
