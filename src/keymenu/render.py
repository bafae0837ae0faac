"""Turn menu nodes into display lines.

Nothing here writes to the terminal; the navigator hands the returned lines
to its output writer.
"""
from .menu import Action, Menu, SubMenu, ValueLeaf
from .values import describe_kind

NO_HOTKEY = '-'
CURSOR = '>'


def breadcrumb(path):
    """``('Main', 'Sub')`` -> ``'Main/Sub/'``."""
    return ''.join(f"{name}/" for name in path)


def _type_marker(node):
    if isinstance(node, SubMenu):
        return '+'
    if isinstance(node, ValueLeaf):
        return '?'
    return ' '


def render_item(index, node, selected=False):
    """Format one child line: ``>0.[s] +Submenu - explanation``."""
    prefix = CURSOR if selected else ' '
    hotkey = node.hotkey if node.hotkey is not None else NO_HOTKEY
    line = f"{prefix}{index}.[{hotkey}] {_type_marker(node)}{node.name}"
    if node.explanation:
        line += f" - {node.explanation}"
    return line


def render_menu(node, path=None, cursor=None, index_keys=False):
    """Render a Menu or SubMenu level.

    Args:
        node: the Menu or SubMenu being shown
        path: names from the root down to ``node``, used for the breadcrumb
        cursor: index of the highlighted item, or None for no highlight
        index_keys: mention index numbers in the footer

    Returns:
        List of display lines
    """
    if path is None:
        path = (node.name,)
    is_root = isinstance(node, Menu)

    lines = [breadcrumb(path)]
    if node.explanation:
        lines.append(node.explanation)
    lines.append('')

    if not node.items:
        lines.append('  (empty)')
    for index, child in enumerate(node.items):
        lines.append(render_item(index, child, selected=(index == cursor)))

    if not is_root or node.allow_escape:
        lines.append('(Bksp) Back')
    if not is_root:
        lines.append('(Home) Top')
    lines.append('(Esc)  Exit')
    lines.append('')
    if index_keys:
        lines.append('Press an index number or a hotkey to select:')
    else:
        lines.append('Press a hotkey to select:')
    return lines


def render_prompt(leaf, path, error=None, cancel_hint='Esc'):
    """Render the value capture screen for a ValueLeaf.

    ``path`` ends with the leaf's own name. ``error`` is shown above the
    input indicator after a rejected attempt.
    """
    lines = [breadcrumb(path)]
    if leaf.explanation:
        lines.append(leaf.explanation)
    lines.append('')
    if error:
        lines.append(error)
    lines.append(f"Enter {describe_kind(leaf.kind)} ({cancel_hint} to cancel):")
    return lines


def render(node, path=None, **kwargs):
    """Render any node. Actions only get their breadcrumb and explanation."""
    if isinstance(node, (Menu, SubMenu)):
        return render_menu(node, path, **kwargs)
    if isinstance(node, ValueLeaf):
        return render_prompt(node, path or (node.name,), **kwargs)
    if isinstance(node, Action):
        lines = [breadcrumb(path or (node.name,))]
        if node.explanation:
            lines.append(node.explanation)
        return lines
    raise TypeError(f"Cannot render {node!r}")
