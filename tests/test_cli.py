"""Unit tests for linkshelf.cli module."""

import pytest
from unittest.mock import patch

from linkshelf.cli import main
from linkshelf.prompts import TerminalPrompter
from linkshelf.store import Store


@pytest.fixture(autouse=True)
def config_file(monkeypatch, tmp_path):
    path = tmp_path / "config.json"
    monkeypatch.setenv("LINKSHELF_CONFIG", str(path))
    return path


class TestMain:
    """Test main function."""

    @patch('linkshelf.cli.cmd_add')
    def test_add_command(self, mock_cmd, config_file):
        """Should call cmd_add with the url, one store and a terminal prompter."""
        main(['add', 'https://example.com'])
        mock_cmd.assert_called_once()
        args, store, prompter = mock_cmd.call_args[0]
        assert args.url == 'https://example.com'
        assert isinstance(store, Store)
        assert store.path == config_file
        assert isinstance(prompter, TerminalPrompter)

    @patch('linkshelf.cli.cmd_add')
    def test_add_without_url(self, mock_cmd):
        main(['add'])
        assert mock_cmd.call_args[0][0].url is None

    @pytest.mark.parametrize("name", ["remove", "open", "list"])
    def test_dispatch(self, name):
        with patch(f'linkshelf.cli.cmd_{name}') as mock_cmd:
            main([name])
            mock_cmd.assert_called_once()

    def test_no_args_prints_help(self, capsys):
        """Should show help and return normally."""
        main([])
        assert 'CLI bookmark organizer' in capsys.readouterr().out

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['--help'])
        assert exc.value.code == 0
        assert 'remove' in capsys.readouterr().out

    def test_unknown_flag(self):
        with pytest.raises(SystemExit) as exc:
            main(['list', '--json'])
        assert exc.value.code == 2

    @patch('linkshelf.cli.cmd_remove', side_effect=KeyboardInterrupt)
    def test_interrupt(self, mock_cmd, capsys):
        """Ctrl-C at a prompt should exit quietly with 130."""
        with pytest.raises(SystemExit) as exc:
            main(['remove'])
        assert exc.value.code == 130
        assert 'aborted' in capsys.readouterr().err

    def test_list_real_store(self, capsys):
        """End to end on an empty store."""
        main(['list'])
        assert 'collections' in capsys.readouterr().out
