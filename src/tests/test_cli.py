"""Unit tests for the command line entry point."""

from pathlib import Path
from unittest.mock import patch

from lectern import cli


class TestCli:
    def test_parse_args(self):
        args = cli.parse_args(["--content", "site", "--port", "9000"])
        assert args.content == Path("site")
        assert args.port == 9000
        assert args.host is None

    def test_main_runs_uvicorn_with_overrides(self, tmp_path):
        with patch.object(cli.uvicorn, "run") as run:
            cli.main(["--content", str(tmp_path), "--port", "9001", "--log-level", "debug"])
        run.assert_called_once()
        _, kwargs = run.call_args
        assert kwargs["port"] == 9001
        assert kwargs["log_level"] == "debug"
