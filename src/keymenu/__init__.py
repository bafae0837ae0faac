"""KeyMenu - hotkey driven nested menus for terminal applications."""

from .errors import (
    ConfigError, EmptyName, EngineError, HotkeyCollision, InvalidHotkey,
    MenuFileError, TerminalIOError, UserCancelled,
)
from .menu import Action, Menu, SubMenu, ValueLeaf
from .navigator import Navigator, run
from .selection import Selection
from .terminal import KeyEvent, KeyKind, InputReader, OutputWriter
from .values import Value, ValueKind
from .config import load_menu

__all__ = [
    'Action', 'Menu', 'SubMenu', 'ValueLeaf', 'Value', 'ValueKind', 'Selection',
    'Navigator', 'run', 'load_menu',
    'KeyEvent', 'KeyKind', 'InputReader', 'OutputWriter',
    'EngineError', 'ConfigError', 'HotkeyCollision', 'EmptyName', 'InvalidHotkey',
    'MenuFileError', 'UserCancelled', 'TerminalIOError',
]
