"""Tests for the keymenu command line."""
import json
import os
import tempfile

import pytest
import yaml
from unittest.mock import patch

from keymenu.errors import TerminalIOError, UserCancelled
from keymenu.main import EXIT_CANCELLED, EXIT_CONFIG, EXIT_IO, EXIT_OK, format_selection, main
from keymenu.selection import Selection
from keymenu.values import Value, ValueKind


@pytest.fixture
def config_file():
    """Create a temporary menu file."""
    config = {
        'engine': {'index_keys': True},
        'menu': {
            'name': 'Main',
            'items': [
                {'name': 'Go', 'hotkey': 'g'},
                {'name': 'Sub', 'hotkey': 's', 'items': [{'name': 'Port', 'value': 'uint'}]},
            ],
        },
    }
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config, f)
        temp_path = f.name
    yield temp_path
    os.unlink(temp_path)


class TestMain:
    """Test main() exit codes and output."""

    def test_selection_printed(self, config_file, capsys):
        """Test a selection is printed as a path."""
        with patch('keymenu.main.run', return_value=Selection(('Go',))) as mock_run:
            assert main(['--config', config_file]) == EXIT_OK
        assert capsys.readouterr().out.strip() == 'Go'
        assert mock_run.call_args.kwargs['index_keys'] is True

    def test_json_output(self, config_file, capsys):
        """Test --json prints the selection dict."""
        selection = Selection(('Sub', 'Port'), Value(ValueKind.UNSIGNED_INT, 8080))
        with patch('keymenu.main.run', return_value=selection):
            assert main(['--config', config_file, '--json']) == EXIT_OK
        assert json.loads(capsys.readouterr().out) == {
            'path': ['Sub', 'Port'],
            'value': {'kind': 'uint', 'data': 8080},
        }

    def test_cancelled(self, config_file):
        """Test cancelling exits with 1."""
        with patch('keymenu.main.run', side_effect=UserCancelled('escape')):
            assert main(['--config', config_file]) == EXIT_CANCELLED

    def test_io_error(self, config_file):
        """Test terminal failures exit with 3."""
        with patch('keymenu.main.run', side_effect=TerminalIOError('closed')):
            assert main(['--config', config_file]) == EXIT_IO

    def test_bad_config(self, capsys):
        """Test an unreadable menu file exits with 2."""
        assert main(['--config', '/nonexistent/menu.yaml']) == EXIT_CONFIG
        assert 'error:' in capsys.readouterr().err

    def test_list(self, config_file, capsys):
        """Test --list prints every item without running."""
        with patch('keymenu.main.run') as mock_run:
            assert main(['--config', config_file, '--list']) == EXIT_OK
        mock_run.assert_not_called()
        assert capsys.readouterr().out.splitlines() == [
            '[g] Go (action)',
            '[s] Sub (menu)',
            '[-] Sub/Port (uint)',
        ]


class TestFormatSelection:
    """Test format_selection()."""

    def test_with_value(self):
        """Test values are appended to the path."""
        selection = Selection(('Settings', 'Name'), Value(ValueKind.STRING, 'bob'))
        assert format_selection(selection) == "Settings/Name = 'bob'"

    def test_without_value(self):
        """Test plain actions print only the path."""
        assert format_selection(Selection(('A', 'B'))) == 'A/B'
