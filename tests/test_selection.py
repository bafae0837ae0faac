"""Tests for building selections."""
from keymenu.menu import Action, Menu, SubMenu, ValueLeaf
from keymenu.navigator import Frame
from keymenu.selection import Selection, build_selection
from keymenu.values import Value, ValueKind


class TestBuildSelection:
    """Test build_selection()."""

    def test_root_excluded(self):
        """Test the root frame's name is not part of the path."""
        sub = SubMenu("S", items=[Action("X")])
        frames = [Frame(Menu("Root", items=[sub])), Frame(sub)]
        selection = build_selection(frames, sub.items[0])
        assert selection == Selection(("S", "X"))

    def test_top_level_leaf(self):
        """Test a leaf chosen on the first level."""
        leaf = ValueLeaf("N", ValueKind.SIGNED_INT)
        value = Value(ValueKind.SIGNED_INT, 3)
        selection = build_selection([Frame(Menu("Root", items=[leaf]))], leaf, value)
        assert selection.path == ("N",)
        assert selection.value is value

    def test_to_dict(self):
        """Test the JSON friendly form."""
        assert Selection(("A",)).to_dict() == {'path': ['A'], 'value': None}
