"""Navigation loop: render a level, read a key, move through the tree."""
import logging
from dataclasses import dataclass
from enum import Enum

from .errors import TerminalIOError, UserCancelled
from .menu import Action, SubMenu, ValueLeaf
from .prompt import ValuePrompt
from .render import render_menu
from .selection import build_selection
from .terminal import DEFAULT_CANCEL_TOKEN, ConsoleWriter, KeyboardReader, KeyKind

logger = logging.getLogger(__name__)


class NavState(Enum):
    AT_MENU = 'at_menu'
    PROMPTING = 'prompting'
    DONE = 'done'
    ABORTED = 'aborted'


@dataclass
class Frame:
    """One open level: the Menu/SubMenu shown and its highlighted row."""
    node: object
    cursor: int = 0


class Navigator:
    def __init__(self, reader, writer, cancel_token=DEFAULT_CANCEL_TOKEN,
                 index_keys=False, clear_screen=True):
        self.reader = reader
        self.writer = writer
        self.cancel_token = cancel_token
        self.index_keys = index_keys
        self.clear_screen = clear_screen

    def run(self, menu):
        """Navigate ``menu`` until a leaf is chosen.

        Returns:
            Selection for the chosen Action or ValueLeaf

        Raises:
            ConfigError: the tree is invalid; nothing has been rendered
            UserCancelled: the user escaped
            TerminalIOError: reading or writing failed
        """
        menu.validate()
        try:
            return self._loop(menu)
        except (OSError, EOFError) as e:
            logger.error(f"Terminal I/O failed: {e}")
            raise TerminalIOError(str(e)) from e

    def _loop(self, menu):
        frames = [Frame(menu)]
        state = NavState.AT_MENU
        selection = None
        while state is NavState.AT_MENU:
            self._show(frames)
            event = self.reader.read_key()
            state, chosen = self._handle_key(frames, event)

            if state is NavState.ABORTED:
                raise UserCancelled(chosen)

            if state is NavState.PROMPTING:
                path = self._names(frames) + (chosen.name,)
                prompt = ValuePrompt(self.reader, self.writer, self.cancel_token, self.clear_screen)
                value = prompt.capture(chosen, path)
                selection = build_selection(frames, chosen, value)
                state = NavState.DONE
            elif state is NavState.DONE:
                selection = build_selection(frames, chosen)

        logger.info(f"Selected {'/'.join(selection.path)}")
        return selection

    def _names(self, frames):
        return tuple(frame.node.name for frame in frames)

    def _show(self, frames):
        frame = frames[-1]
        if self.clear_screen:
            self.writer.clear()
        self.writer.write_lines(render_menu(
            frame.node,
            self._names(frames),
            cursor=frame.cursor,
            index_keys=self.index_keys,
        ))

    def _handle_key(self, frames, event):
        """Apply one key to the frame stack. Returns ``(state, chosen_leaf)``, or ``(ABORTED, reason)``."""
        frame = frames[-1]
        items = frame.node.items

        if event.kind is KeyKind.ESCAPE:
            logger.debug("Escape pressed")
            return NavState.ABORTED, 'escape'

        if event.kind is KeyKind.BACK:
            if len(frames) > 1:
                frames.pop()
            elif frame.node.allow_escape:
                logger.debug("Back pressed at top level")
                return NavState.ABORTED, 'back'
            else:
                logger.debug("Back ignored at top level")
            return NavState.AT_MENU, None

        if event.kind is KeyKind.HOME:
            del frames[1:]
            return NavState.AT_MENU, None

        if event.kind is KeyKind.UP:
            if frame.cursor > 0:
                frame.cursor -= 1
            return NavState.AT_MENU, None

        if event.kind is KeyKind.DOWN:
            if frame.cursor < len(items) - 1:
                frame.cursor += 1
            return NavState.AT_MENU, None

        if event.kind is KeyKind.ENTER:
            if not items:
                return NavState.AT_MENU, None
            return self._select(frames, frame.cursor)

        if event.kind is KeyKind.CHAR:
            index = self._match(items, event.char)
            if index is not None:
                return self._select(frames, index)

        logger.debug(f"Ignored key {event!r} in '{frame.node.name}'")
        return NavState.AT_MENU, None

    def _match(self, items, char):
        for index, node in enumerate(items):
            if node.hotkey == char:
                return index
        if self.index_keys and char.isascii() and char.isdigit():
            index = int(char)
            if index < len(items):
                return index
        return None

    def _select(self, frames, index):
        frame = frames[-1]
        frame.cursor = index
        node = frame.node.items[index]
        if isinstance(node, SubMenu):
            logger.debug(f"Entering '{node.name}'")
            frames.append(Frame(node))
            return NavState.AT_MENU, None
        if isinstance(node, ValueLeaf):
            return NavState.PROMPTING, node
        if isinstance(node, Action):
            return NavState.DONE, node
        raise TypeError(f"Unsupported menu item: {node!r}")


def run(menu, reader=None, writer=None, cancel_token=DEFAULT_CANCEL_TOKEN,
        index_keys=False, clear_screen=True):
    """Run ``menu`` on the terminal (or the given reader/writer) and return the Selection."""
    if writer is None:
        writer = ConsoleWriter(clear_screen=clear_screen)
    if reader is None:
        reader = KeyboardReader(writer=writer, cancel_token=cancel_token)
    navigator = Navigator(reader, writer, cancel_token=cancel_token,
                          index_keys=index_keys, clear_screen=clear_screen)
    return navigator.run(menu)
