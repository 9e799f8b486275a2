"""Unit tests for smallsh.cli."""

from unittest.mock import MagicMock, patch

import pytest

from smallsh import __version__
from smallsh.cli import entrypoint, main
from smallsh.models import ShellConfig


def _cli_patches(**overrides):
    """Return a patch.multiple context with standard defaults plus overrides."""
    shell = MagicMock()
    shell.return_value.run.return_value = 0
    defaults = dict(
        load_config=MagicMock(return_value=ShellConfig()),
        SignalPolicy=MagicMock(),
        Shell=shell,
    )
    defaults.update(overrides)
    return patch.multiple("smallsh.cli", **defaults), defaults


class TestMain:
    def test_returns_shell_exit_code(self):
        shell = MagicMock()
        shell.return_value.run.return_value = 7
        patcher, _ = _cli_patches(Shell=shell)
        with patcher:
            assert main([]) == 7

    def test_installs_shell_signal_disposition(self):
        policy = MagicMock()
        patcher, mocks = _cli_patches(SignalPolicy=policy)
        with patcher:
            main([])
        policy.return_value.install_shell_disposition.assert_called_once_with()
        mocks["Shell"].assert_called_once()
        assert mocks["Shell"].call_args.kwargs["policy"] is policy.return_value

    def test_passes_config_path(self):
        load = MagicMock(return_value=ShellConfig(prompt="> "))
        patcher, mocks = _cli_patches(load_config=load)
        with patcher:
            main(["--config", "/tmp/custom.json"])
        load.assert_called_once_with("/tmp/custom.json")
        assert mocks["Shell"].call_args.kwargs["config"].prompt == "> "

    def test_default_config_path_is_none(self):
        load = MagicMock(return_value=ShellConfig())
        patcher, _ = _cli_patches(load_config=load)
        with patcher:
            main([])
        load.assert_called_once_with(None)

    def test_invalid_config_returns_one(self, capsys):
        shell = MagicMock()
        patcher, _ = _cli_patches(load_config=MagicMock(side_effect=ValueError("bad")), Shell=shell)
        with patcher:
            assert main([]) == 1
        shell.assert_not_called()
        assert "Error: invalid configuration: bad" in capsys.readouterr().err

    @patch("smallsh.cli.logging.basicConfig")
    def test_debug_flag_enables_debug_logging(self, mock_basic):
        patcher, _ = _cli_patches()
        with patcher:
            main(["--debug"])
        assert mock_basic.call_args.kwargs["level"] == 10

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestEntrypoint:
    def test_raises_system_exit_with_main_result(self):
        with patch("smallsh.cli.main", return_value=4):
            with pytest.raises(SystemExit) as exc_info:
                entrypoint()
        assert exc_info.value.code == 4
