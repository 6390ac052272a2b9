"""Tests for the command-line interface."""

import logging

import pytest

from cgpattern.codec.files import load_pattern
from cgpattern.main import build_parser, main, summarize
from cgpattern.pattern.map_pattern import MapPattern
from cgpattern.pattern.prefab import Prefab
from cgpattern.utils.logging_setup import shutdown_logging


@pytest.fixture(autouse=True)
def _close_cli_logging(capsys):
    """Detach the console handler while capsys still owns stderr."""
    yield
    shutdown_logging()


@pytest.fixture
def config_file(tmp_path):
    """Config that pins every setting the CLI reads."""
    path = tmp_path / "cgpattern.yaml"
    path.write_text("codec:\n  strict_levels: true\nlogging:\n  level: WARNING\n", encoding="utf-8")
    return path


class TestParser:
    """Test argument parsing."""

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_format_output_option(self):
        args = build_parser().parse_args(["--lenient", "format", "a.cgp", "-o", "b"])

        assert args.command == "format"
        assert args.lenient is True
        assert args.output == "b"


class TestCommands:
    """Test each subcommand end to end."""

    def test_new_then_check(self, tmp_path, config_file, capsys):
        assert main(["--config", str(config_file), "new", str(tmp_path / "blank")]) == 0
        path = tmp_path / "blank.cgp"
        assert load_pattern(path) == MapPattern.default()

        assert main(["--config", str(config_file), "check", str(path)]) == 0
        out = capsys.readouterr().out
        assert "ok (levels 0..0, 0 prefabs placed)" in out

    def test_format_rewrites_canonically(self, tmp_path, config_file, mixed_pattern):
        messy = tmp_path / "messy.cgp"
        messy.write_text(" ".join(mixed_pattern.get_map_raw().split()), encoding="utf-8")

        assert main(["--config", str(config_file), "format", str(messy)]) == 0
        assert messy.read_text(encoding="utf-8") == mixed_pattern.get_map_raw()

    def test_format_keeps_other_suffix(self, tmp_path, config_file, mixed_pattern, capsys):
        """Without -o the given file is rewritten in place, whatever its suffix."""
        source = tmp_path / "arena.txt"
        source.write_text(" ".join(mixed_pattern.get_map_raw().split()), encoding="utf-8")

        assert main(["--config", str(config_file), "format", str(source)]) == 0
        assert source.read_text(encoding="utf-8") == mixed_pattern.get_map_raw()
        assert not (tmp_path / "arena.txt.cgp").exists()
        assert capsys.readouterr().out.strip() == str(source)

    def test_format_to_other_name(self, tmp_path, config_file, pattern_file, mixed_pattern):
        target = tmp_path / "copy"
        assert main(["--config", str(config_file), "format", str(pattern_file), "-o", str(target)]) == 0
        assert load_pattern(tmp_path / "copy.cgp") == mixed_pattern

    def test_show(self, config_file, pattern_file, capsys):
        assert main(["--config", str(config_file), "show", str(pattern_file)]) == 0
        assert "p = projectile" in capsys.readouterr().out

    def test_parse_error_exit_code(self, tmp_path, config_file, capsys):
        bad = tmp_path / "bad.cgp"
        bad.write_text("0" * 256 + "X", encoding="utf-8")

        assert main(["--config", str(config_file), "check", str(bad)]) == 1
        captured = capsys.readouterr()
        assert "check failed" in captured.err
        assert "Invalid prefab character" in captured.err
        assert captured.out == ""

    def test_missing_file_exit_code(self, tmp_path, config_file):
        assert main(["--config", str(config_file), "check", str(tmp_path / "none.cgp")]) == 1

    def test_lenient_flag(self, tmp_path, config_file):
        tall = tmp_path / "tall.cgp"
        tall.write_text("(99)", encoding="utf-8")

        assert main(["--config", str(config_file), "check", str(tall)]) == 1
        assert main(["--config", str(config_file), "--lenient", "check", str(tall)]) == 0

    def test_huge_literal_exit_code(self, tmp_path, config_file, capsys):
        huge = tmp_path / "huge.cgp"
        huge.write_text("(" + "1" * 5000 + ")", encoding="utf-8")

        assert main(["--config", str(config_file), "check", str(huge)]) == 1
        assert "signed byte" in capsys.readouterr().err

    def test_repeated_runs_reset_console_logging(self, tmp_path, config_file, capsys):
        """Each run replaces the console handler bound to the current stderr."""
        for _ in range(2):
            assert main(["--config", str(config_file), "check", str(tmp_path / "none.cgp")]) == 1
        assert capsys.readouterr().err.count("check failed") == 2

        shutdown_logging()
        assert logging.getLogger("cgpattern").handlers == []

    def test_bad_config_exit_code(self, tmp_path, pattern_file, capsys):
        config = tmp_path / "bad.yaml"
        config.write_text("logging:\n  level: LOUD\n", encoding="utf-8")

        assert main(["--config", str(config), "check", str(pattern_file)]) == 2
        assert "validation failed" in capsys.readouterr().err


def test_summarize(default_pattern):
    default_pattern.set_level_at(0, 0, -7)
    default_pattern.set_prefab_at(1, 1, Prefab.HIDEOUS)

    assert summarize(default_pattern) == "levels -7..0, 1 prefabs placed"
