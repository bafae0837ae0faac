"""Result of a completed menu run."""
from dataclasses import dataclass
from typing import Optional, Tuple

from .values import Value


@dataclass(frozen=True)
class Selection:
    """What the user chose.

    ``path`` holds item names from the first level down to the chosen leaf.
    The root menu's own name is not part of it.
    """
    path: Tuple[str, ...]
    value: Optional[Value] = None

    @property
    def name(self):
        return self.path[-1]

    def to_dict(self):
        return {
            'path': list(self.path),
            'value': self.value.to_dict() if self.value is not None else None,
        }


def build_selection(frames, leaf, value=None):
    """Build a Selection from the navigation stack (root frame first) and the chosen leaf."""
    names = tuple(frame.node.name for frame in frames[1:])
    return Selection(path=names + (leaf.name,), value=value)
