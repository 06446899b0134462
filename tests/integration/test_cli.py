"""
Integration tests for the fuzz-wordlist command line interface

Tests the preview command end to end:
- File and stdin wordlists
- Filter flags and extension handling
- Environment driven configuration
- Error reporting
"""

import logging

import pytest
from click.testing import CliRunner

from fuzz_wordlist.main import cli


@pytest.fixture
def runner(monkeypatch, tmp_path):
    """Create a CLI runner isolated from user environment and .env files."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FUZZ_WORDLIST_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FUZZ_WORDLIST_DEBUG", raising=False)
    yield CliRunner()

    logger = logging.getLogger("fuzz_wordlist")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestPreviewCommand:
    """Test loading and printing wordlists."""

    def test_comment_scenario(self, runner, write_wordlist):
        path = write_wordlist("# comment\n\nadmin\nadmin #tag\n")
        result = runner.invoke(cli, ["preview", path, "--ic"])

        assert result.exit_code == 0
        assert result.output == "admin\nadmin\n"

    def test_suffix_extensions(self, runner, write_wordlist):
        path = write_wordlist("admin\n")
        result = runner.invoke(cli, ["preview", path, "-e", ".bak,.old"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["admin", "admin.bak", "admin.old"]

    def test_non_fuzz_keyword_skips_suffixes(self, runner, write_wordlist):
        path = write_wordlist("admin\n")
        result = runner.invoke(cli, ["preview", path, "-w", "USER", "-e", ".bak"])

        assert result.output.splitlines() == ["admin"]

    def test_dirsearch_marker(self, runner, write_wordlist):
        path = write_wordlist("index.%EXT%\nadmin\n")
        result = runner.invoke(cli, ["preview", path, "-D", "-e", "php,txt"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["index.php", "index.txt", "admin"]

    def test_exclusion_flags(self, runner, write_wordlist):
        path = write_wordlist(".git\ngit\n404\nAdmin\n~backup\n")
        result = runner.invoke(cli, ["preview", path, "--xc-d", "--xc-n", "--xc-s-upper", "--xc-c"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["git"]

    def test_limit(self, runner, write_wordlist):
        path = write_wordlist("a\nb\nc\n")
        result = runner.invoke(cli, ["preview", path, "--limit", "2"])

        assert result.output.splitlines() == ["a", "b"]

    def test_count(self, runner, write_wordlist):
        path = write_wordlist("a\nb\nc\n")
        result = runner.invoke(cli, ["preview", path, "--count", "-e", ".bak"])

        assert result.exit_code == 0
        assert result.output.strip() == "6"

    def test_stdin(self, runner):
        result = runner.invoke(cli, ["preview", "-", "--xc-lower"], input="admin\nAdmin\n")

        assert result.exit_code == 0
        assert result.output.splitlines() == ["Admin"]

    def test_extensions_from_environment(self, runner, write_wordlist, monkeypatch):
        monkeypatch.setenv("FUZZ_WORDLIST_WORDLIST__EXTENSIONS", '[".php"]')
        path = write_wordlist("index\n")
        result = runner.invoke(cli, ["preview", path])

        assert result.output.splitlines() == ["index", "index.php"]


class TestPreviewErrors:
    """Test error reporting."""

    def test_missing_wordlist(self, runner, tmp_path):
        result = runner.invoke(cli, ["preview", str(tmp_path / "missing.txt")])

        assert result.exit_code == 1
        assert "Wordlist error" in result.output

    def test_read_error_prints_partial_values(self, runner, write_wordlist, monkeypatch):
        monkeypatch.setenv("FUZZ_WORDLIST_WORDLIST__MAX_LINE_LENGTH", "10")
        path = write_wordlist(b"short\n" + b"x" * 32 + b"\n")
        result = runner.invoke(cli, ["preview", path])

        assert result.exit_code == 1
        assert "short" in result.output.splitlines()
        assert "read failed" in result.output


class TestLogFile:
    """Test the --log-file option."""

    def test_debug_records_reach_log_file(self, runner, write_wordlist, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        path = write_wordlist("admin\n")
        result = runner.invoke(cli, ["--debug", "--log-file", str(log_file), "preview", path])

        assert result.exit_code == 0
        content = log_file.read_text()
        assert "fuzz_wordlist.input - DEBUG" in content
        assert "Loaded 1 values for FUZZ" in content

    def test_error_records_reach_log_file(self, runner, tmp_path):
        log_file = tmp_path / "run.log"
        missing = tmp_path / "missing.txt"
        result = runner.invoke(cli, ["--log-file", str(log_file), "preview", str(missing)])

        assert result.exit_code == 1
        content = log_file.read_text()
        assert "fuzz_wordlist.input - ERROR" in content
        assert "is not readable" in content
        assert "Loaded" not in content


class TestShowConfig:
    """Test configuration display."""

    def test_lists_filter_settings(self, runner):
        result = runner.invoke(cli, ["show-config"])

        assert result.exit_code == 0
        assert "exclude_dot_lines" in result.output
        assert "dirsearch_compat" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output
