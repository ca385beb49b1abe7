"""Unit tests for application configuration."""

from pathlib import Path
from unittest.mock import patch

from lectern.config import Settings


class TestSettings:
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings()
            assert s.content_dir == Path("content")
            assert s.debug is False
            assert s.site_title == "Lectern"
            assert s.port == 8080
            assert "extra" in s.markdown_extensions

    def test_from_env(self):
        env = {
            "LECTERN_CONTENT_DIR": "/tmp/site",
            "LECTERN_DEBUG": "true",
            "LECTERN_SITE_TITLE": "My Website",
            "LECTERN_PORT": "9000",
            "LECTERN_WORKER_THREADS": "2",
        }
        with patch.dict("os.environ", env, clear=True):
            s = Settings()
            assert s.content_dir == Path("/tmp/site")
            assert s.debug is True
            assert s.site_title == "My Website"
            assert s.port == 9000
            assert s.worker_threads == 2

    def test_markdown_extensions_from_env(self):
        env = {"LECTERN_MARKDOWN_EXTENSIONS": '["tables"]'}
        with patch.dict("os.environ", env, clear=True):
            s = Settings()
            assert s.markdown_extensions == ["tables"]

    def test_root_is_absolute(self, tmp_path):
        s = Settings(content_dir=tmp_path / "sub" / "..")
        assert s.root == tmp_path.resolve()
        assert s.root.is_absolute()
