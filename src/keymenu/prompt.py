"""Typed value capture for ValueLeaf items."""
import logging

from .errors import UserCancelled, ValueParseError
from .render import render_prompt
from .terminal import DEFAULT_CANCEL_TOKEN
from .values import parse_value

logger = logging.getLogger(__name__)


class ValuePrompt:
    """Asks for a value until it parses or the user cancels.

    There is no retry limit: every rejected line just redraws the prompt
    with an error message.
    """

    def __init__(self, reader, writer, cancel_token=DEFAULT_CANCEL_TOKEN, clear_screen=True):
        self.reader = reader
        self.writer = writer
        self.cancel_token = cancel_token
        self.clear_screen = clear_screen

    @property
    def cancel_hint(self):
        return 'Esc' if self.cancel_token == DEFAULT_CANCEL_TOKEN else repr(self.cancel_token)

    def capture(self, leaf, path):
        """Return the parsed Value for ``leaf``.

        Raises:
            UserCancelled: when the cancel token is entered
        """
        error = None
        while True:
            if self.clear_screen:
                self.writer.clear()
            self.writer.write_lines(
                render_prompt(leaf, path, error=error, cancel_hint=self.cancel_hint)
            )
            raw = self.reader.read_line().rstrip('\r\n')
            if raw == self.cancel_token:
                logger.debug(f"Prompt for '{leaf.name}' cancelled")
                raise UserCancelled('prompt')
            try:
                value = parse_value(leaf.kind, raw)
            except ValueParseError as e:
                logger.debug(f"Rejected input for '{leaf.name}': {e}")
                error = str(e)
                continue
            return value
