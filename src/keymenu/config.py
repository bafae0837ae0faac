"""Loading menu trees and engine settings from YAML files."""
import logging
from dataclasses import dataclass, fields

import yaml

from .errors import MenuFileError
from .menu import Action, Menu, SubMenu, ValueLeaf
from .terminal import DEFAULT_CANCEL_TOKEN
from .values import ValueKind

logger = logging.getLogger(__name__)


@dataclass
class EngineSettings:
    cancel_token: str = DEFAULT_CANCEL_TOKEN
    index_keys: bool = False
    clear_screen: bool = True

    @classmethod
    def from_config(cls, raw, path='<config>'):
        """Build settings from the ``engine`` section of a config file."""
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise MenuFileError(path, "'engine' must be a mapping")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise MenuFileError(path, f"Unknown engine setting(s): {', '.join(unknown)}")
        for f in fields(cls):
            if f.name in raw and not isinstance(raw[f.name], type(f.default)):
                raise MenuFileError(
                    path, f"engine setting '{f.name}' must be a {type(f.default).__name__}"
                )
        if raw.get('cancel_token') == '':
            raise MenuFileError(path, "engine setting 'cancel_token' must not be empty")
        return cls(**raw)

    def as_kwargs(self):
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_config(path):
    """Read a YAML config file into a dict."""
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        logger.error(f"Failed to load config: {e}")
        raise MenuFileError(path, f"cannot read file ({e.strerror or e})") from e
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse config: {e}")
        raise MenuFileError(path, f"invalid YAML ({e})") from e
    if not isinstance(data, dict):
        raise MenuFileError(path, "top level must be a mapping")
    return data


def _name(raw):
    name = raw.get('name')
    # `name:` with no value reads as None
    return '' if name is None else str(name)


def _hotkey(raw):
    hotkey = raw.get('hotkey')
    if hotkey is None:
        return None
    # YAML reads `hotkey: 1` as an int
    return str(hotkey)


def parse_items(raw_items, path='<config>'):
    """Turn a list of item mappings into menu nodes.

    An item with ``items`` becomes a SubMenu, one with ``value`` a ValueLeaf,
    anything else an Action.
    """
    if not isinstance(raw_items, list):
        raise MenuFileError(path, "'items' must be a list")
    nodes = []
    for item in raw_items:
        if not isinstance(item, dict) or 'name' not in item:
            raise MenuFileError(path, f"every item needs a 'name': {item!r}")
        name = _name(item)
        if 'items' in item and 'value' in item:
            raise MenuFileError(path, f"'{name}' cannot have both 'items' and 'value'")

        if 'items' in item:
            nodes.append(SubMenu(
                name=name,
                hotkey=_hotkey(item),
                explanation=item.get('explanation'),
                items=parse_items(item['items'] or [], path),
            ))
        elif 'value' in item:
            try:
                kind = ValueKind.from_name(item['value'])
            except ValueError:
                raise MenuFileError(path, f"unknown value kind {item['value']!r} for '{name}'") from None
            nodes.append(ValueLeaf(
                name=name,
                kind=kind,
                hotkey=_hotkey(item),
                explanation=item.get('explanation'),
            ))
        else:
            nodes.append(Action(
                name=name,
                hotkey=_hotkey(item),
                explanation=item.get('explanation'),
            ))
    return nodes


def parse_menu(raw, path='<config>'):
    """Build the root Menu from the ``menu`` section of a config file."""
    if not isinstance(raw, dict):
        raise MenuFileError(path, "'menu' must be a mapping")
    allow_escape = raw.get('allow_escape', False)
    if not isinstance(allow_escape, bool):
        raise MenuFileError(path, "'allow_escape' must be true or false")
    return Menu(
        name=_name(raw),
        items=parse_items(raw.get('items') or [], path),
        explanation=raw.get('explanation'),
        allow_escape=allow_escape,
    )


def load_menu(path):
    """Load and validate a menu file.

    Returns:
        Tuple of (Menu, EngineSettings)
    """
    config = load_config(path)
    if 'menu' not in config:
        raise MenuFileError(path, "missing 'menu' section")
    menu = parse_menu(config['menu'], path).validate()
    settings = EngineSettings.from_config(config.get('engine'), path)
    logger.info(f"Loaded menu '{menu.name}' from {path}")
    return menu, settings
