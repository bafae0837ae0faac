"""Menu structure and node representation."""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .errors import EmptyName, HotkeyCollision, InvalidHotkey
from .values import ValueKind


@dataclass(frozen=True)
class Action:
    """Leaf item. Choosing it ends the run."""
    name: str
    hotkey: Optional[str] = None
    explanation: Optional[str] = None


@dataclass(frozen=True)
class ValueLeaf:
    """Leaf item that asks for a typed value before the run ends."""
    name: str
    kind: ValueKind
    hotkey: Optional[str] = None
    explanation: Optional[str] = None


@dataclass(frozen=True)
class SubMenu:
    """Item that opens a nested list of items."""
    name: str
    hotkey: Optional[str] = None
    explanation: Optional[str] = None
    items: Tuple = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'items', tuple(self.items))


@dataclass(frozen=True)
class Menu:
    """Root of a menu tree.

    With ``allow_escape`` set, Back at the top level cancels the run.
    Otherwise only Escape does.
    """
    name: str
    items: Tuple = field(default_factory=tuple)
    explanation: Optional[str] = None
    allow_escape: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'items', tuple(self.items))

    def validate(self):
        """Check the whole tree, raising a ConfigError on the first problem."""
        if not _has_name(self):
            raise EmptyName(parent='<root>')
        validate_items(self.items, self.name)
        return self

    def find(self, path):
        """Return the node reached by following item names from the root."""
        node = self
        for name in path:
            for child in getattr(node, 'items', ()):
                if child.name == name:
                    node = child
                    break
            else:
                raise KeyError('/'.join(path))
        return node

    def iter_nodes(self):
        """Yield ``(path, node)`` for every item, depth first."""
        return _walk(self.items, ())


def _has_name(node):
    return isinstance(node.name, str) and node.name.strip() != ''


def _walk(items, prefix):
    for node in items:
        path = prefix + (node.name,)
        yield path, node
        if isinstance(node, SubMenu):
            yield from _walk(node.items, path)


def validate_items(items, parent):
    """Validate one sibling list and everything below it.

    Sibling hotkeys must be unique (case-sensitive), every hotkey a single
    character and every name non-empty.
    """
    pending = [(items, parent)]
    while pending:
        siblings, owner = pending.pop()
        seen = {}
        for node in siblings:
            if not _has_name(node):
                raise EmptyName(parent=owner)
            if node.hotkey is not None:
                if not isinstance(node.hotkey, str) or len(node.hotkey) != 1:
                    raise InvalidHotkey(node.hotkey, node.name)
                if node.hotkey in seen:
                    raise HotkeyCollision(node.hotkey, (seen[node.hotkey], node.name), owner)
                seen[node.hotkey] = node.name
            if isinstance(node, SubMenu):
                pending.append((node.items, node.name))
            elif not isinstance(node, (Action, ValueLeaf)):
                raise TypeError(f"Unsupported menu item in '{owner}': {node!r}")
