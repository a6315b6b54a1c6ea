"""Tests for the command-line interface."""

from __future__ import annotations

import json

import pytest

from lockgen.cli import EXIT_GENERATION_ERROR, EXIT_OK, build_parser, main, resolve_options
from lockgen.config import AMBIGUOUS, CharacterClass, options_for_level


def parse(*argv):
    return resolve_options(build_parser().parse_args(list(argv)))


class TestResolveOptions:
    def test_default_level_is_strong(self):
        level, opts = parse()
        assert level == "strong"
        assert opts == options_for_level("strong")

    def test_length_override_keeps_level(self):
        level, opts = parse("--level", "easy", "--length", "20")
        assert level == "easy"
        assert opts.length == 20
        assert opts.classes == options_for_level("easy").classes

    def test_class_toggle_switches_to_custom(self):
        level, opts = parse("--level", "easy", "--digits")
        assert level == "custom"
        assert CharacterClass.DIGIT in opts.classes
        assert opts.length == 8

    def test_disabling_a_class(self):
        _level, opts = parse("--no-symbols")
        assert CharacterClass.SYMBOL not in opts.classes

    def test_ambiguous_toggle(self):
        level, opts = parse("--level", "strong", "--include-ambiguous")
        assert level == "custom"
        assert opts.exclude_ambiguous is False

    def test_ambiguous_flags_are_exclusive(self):
        with pytest.raises(SystemExit):
            parse("--exclude-ambiguous", "--include-ambiguous")


class TestMain:
    def test_quiet_prints_passwords_only(self, capsys):
        assert main(["--level", "easy", "--count", "3", "-q"]) == EXIT_OK
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        for line in lines:
            assert len(line) == 8
            assert line.isalpha()
            assert not set(line) & AMBIGUOUS

    def test_default_output_includes_strength(self, capsys):
        assert main(["--level", "insane"]) == EXIT_OK
        password, strength = capsys.readouterr().out.splitlines()
        assert len(password) == 24
        assert strength.startswith("Strength: Insane")
        assert strength.endswith("bits")

    def test_json_output(self, capsys):
        assert main(["--length", "12", "--count", "2", "--json"]) == EXIT_OK
        payload = json.loads(capsys.readouterr().out)
        assert len(payload) == 2
        for item in payload:
            assert set(item) == {"password", "entropy_bits", "label"}
            assert len(item["password"]) == 12
            assert isinstance(item["entropy_bits"], int)

    def test_empty_pool_exits_with_error(self, capsys):
        code = main(["--no-lower", "--no-upper", "--no-digits", "--no-symbols"])
        assert code == EXIT_GENERATION_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Select at least one character set." in captured.err

    def test_invalid_count_exits_with_error(self, capsys):
        assert main(["--count", "0"]) == EXIT_GENERATION_ERROR
        assert "count" in capsys.readouterr().err
