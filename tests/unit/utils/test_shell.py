"""Unit tests for shell execution utilities."""

from unittest.mock import MagicMock, patch

import pytest
from zfsrewrite.utils.shell import command_exists, run_interactive


class TestRunInteractive:
    """Tests for run_interactive function."""

    @patch("zfsrewrite.utils.shell.subprocess.run")
    def test_returns_exit_code(self, mock_run: MagicMock) -> None:
        """run_interactive returns the subprocess exit code."""
        mock_run.return_value = MagicMock(returncode=0)

        result = run_interactive(["echo", "hello"])

        assert result == 0

    @patch("zfsrewrite.utils.shell.subprocess.run")
    def test_returns_nonzero_exit_code(self, mock_run: MagicMock) -> None:
        """run_interactive returns nonzero exit codes."""
        mock_run.return_value = MagicMock(returncode=1)

        result = run_interactive(["false"])

        assert result == 1

    @patch("zfsrewrite.utils.shell.subprocess.run")
    def test_does_not_capture_output(self, mock_run: MagicMock) -> None:
        """run_interactive does not capture stdout/stderr (inherits TTY)."""
        mock_run.return_value = MagicMock(returncode=0)

        run_interactive(["echo", "hello"])

        call_kwargs = mock_run.call_args
        assert "capture_output" not in call_kwargs.kwargs
        assert "stdout" not in call_kwargs.kwargs
        assert "stderr" not in call_kwargs.kwargs

    @patch("zfsrewrite.utils.shell.subprocess.run")
    def test_no_shell_and_no_default_timeout(self, mock_run: MagicMock) -> None:
        """Arguments go straight to exec and there is no timeout by default."""
        mock_run.return_value = MagicMock(returncode=0)

        run_interactive(["zfs", "rewrite", "--", "/tank/a b"])

        assert mock_run.call_args.args[0] == ["zfs", "rewrite", "--", "/tank/a b"]
        assert "shell" not in mock_run.call_args.kwargs
        assert mock_run.call_args.kwargs["timeout"] is None

    @patch("zfsrewrite.utils.shell.subprocess.run")
    def test_merges_env(self, mock_run: MagicMock) -> None:
        """run_interactive merges custom env with current environment."""
        mock_run.return_value = MagicMock(returncode=0)

        run_interactive(["echo"], env={"MY_VAR": "value"})

        call_env = mock_run.call_args.kwargs["env"]
        assert call_env["MY_VAR"] == "value"
        assert "PATH" in call_env

    def test_raises_file_not_found(self) -> None:
        """run_interactive raises FileNotFoundError for missing commands."""
        with pytest.raises(FileNotFoundError):
            run_interactive(["nonexistent_command_xyz_12345"])


class TestCommandExists:
    """Tests for command_exists function."""

    @patch("zfsrewrite.utils.shell.shutil.which")
    def test_found(self, mock_which: MagicMock) -> None:
        """command_exists is True when which() finds the command."""
        mock_which.return_value = "/usr/sbin/zfs"

        assert command_exists("zfs") is True

    @patch("zfsrewrite.utils.shell.shutil.which")
    def test_not_found(self, mock_which: MagicMock) -> None:
        """command_exists is False when which() finds nothing."""
        mock_which.return_value = None

        assert command_exists("zfs") is False
