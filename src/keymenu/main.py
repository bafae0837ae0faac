import sys
import json
import argparse
import logging
from pathlib import Path

# Local imports
from .config import load_menu
from .errors import ConfigError, TerminalIOError, UserCancelled
from .menu import SubMenu, ValueLeaf
from .navigator import run

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CANCELLED = 1
EXIT_CONFIG = 2
EXIT_IO = 3


def _setup_logging(verbosity):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def list_menu(menu, out=None):
    """Print every item path with its type."""
    out = out if out is not None else sys.stdout
    for path, node in menu.iter_nodes():
        if isinstance(node, SubMenu):
            kind = 'menu'
        elif isinstance(node, ValueLeaf):
            kind = node.kind.value
        else:
            kind = 'action'
        hotkey = node.hotkey or '-'
        print(f"[{hotkey}] {'/'.join(path)} ({kind})", file=out)


def format_selection(selection, as_json=False):
    if as_json:
        return json.dumps(selection.to_dict())
    text = '/'.join(selection.path)
    if selection.value is not None:
        text += f" = {selection.value.data!r}"
    return text


def main(argv=None):
    parser = argparse.ArgumentParser(description="Hotkey driven terminal menus")
    parser.add_argument("--config", default="menu.yaml", help="Path to menu file")
    parser.add_argument("--list", action="store_true", help="List menu items instead of running")
    parser.add_argument("--json", action="store_true", help="Print the selection as JSON")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeatable)")
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        menu, settings = load_menu(Path(args.config))
    except ConfigError as e:
        logger.error(f"Invalid menu: {e}")
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    if args.list:
        list_menu(menu)
        return EXIT_OK

    try:
        selection = run(menu, **settings.as_kwargs())
    except UserCancelled as e:
        logger.warning(f"Cancelled: {e.reason}")
        return EXIT_CANCELLED
    except TerminalIOError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_IO

    print(format_selection(selection, args.json))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
