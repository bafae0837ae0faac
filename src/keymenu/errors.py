"""Exceptions raised by the menu engine."""


class EngineError(Exception):
    """Base class for everything that can cross ``run()``."""


class ConfigError(EngineError):
    """The menu tree is malformed. Raised before any input is read."""


class HotkeyCollision(ConfigError):
    def __init__(self, hotkey, names, parent):
        self.hotkey = hotkey
        self.names = tuple(names)
        self.parent = parent
        super().__init__(
            f"Hotkey '{hotkey}' is used by {', '.join(repr(n) for n in self.names)} in '{parent}'"
        )


class EmptyName(ConfigError):
    def __init__(self, parent):
        self.parent = parent
        super().__init__(f"Item with an empty name in '{parent}'")


class InvalidHotkey(ConfigError):
    def __init__(self, hotkey, name):
        self.hotkey = hotkey
        self.name = name
        super().__init__(f"Hotkey {hotkey!r} of '{name}' must be a single character")


class MenuFileError(ConfigError):
    """A YAML menu file could not be read or describes an invalid tree."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class UserCancelled(EngineError):
    """The user left the menu without choosing anything.

    This is an expected outcome, callers are meant to catch it.
    ``reason`` is one of ``"escape"``, ``"back"`` or ``"prompt"``.
    """

    def __init__(self, reason="escape"):
        self.reason = reason
        super().__init__(f"Menu cancelled ({reason})")


class TerminalIOError(EngineError):
    """Reading keys or writing lines failed."""


class ValueParseError(ValueError):
    """Raw prompt input could not be converted. Never leaves the prompt loop."""

    def __init__(self, kind, raw):
        self.kind = kind
        self.raw = raw
        super().__init__(f"Invalid {kind.label}: {raw!r}")
