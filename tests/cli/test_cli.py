"""Tests for the command-line entry point."""
from __future__ import annotations

import io

import pytest

from fuzzymatch_lite.cli import main


def _run(monkeypatch, stdin: str, argv: list[str] | None = None) -> int:
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    return main(argv or [])


class TestMatchCommand:
    def test_prints_count_and_positions(self, monkeypatch, capsys):
        assert _run(monkeypatch, "a?a aaaa\n") == 0
        assert capsys.readouterr().out == "2\n0 1 \n"

    def test_pattern_as_long_as_text(self, monkeypatch, capsys):
        assert _run(monkeypatch, "a?a aaa\n") == 0
        assert capsys.readouterr().out == "1\n0 \n"

    def test_tokens_on_separate_lines(self, monkeypatch, capsys):
        assert _run(monkeypatch, "ab\n\nababab\n") == 0
        assert capsys.readouterr().out == "3\n0 2 4 \n"

    def test_no_matches(self, monkeypatch, capsys):
        assert _run(monkeypatch, "xyz abc") == 0
        assert capsys.readouterr().out == "0\n\n"

    def test_explicit_match_subcommand(self, monkeypatch, capsys):
        assert _run(monkeypatch, "? xyz", ["match"]) == 0
        assert capsys.readouterr().out == "3\n0 1 2 \n"

    def test_custom_wildcard(self, monkeypatch, capsys):
        assert _run(monkeypatch, "a*c abcadc", ["--wildcard", "*"]) == 0
        assert capsys.readouterr().out == "2\n0 3 \n"

    def test_wildcard_after_subcommand(self, monkeypatch, capsys):
        assert _run(monkeypatch, "a*c abcadc", ["match", "--wildcard", "*"]) == 0
        assert capsys.readouterr().out == "2\n0 3 \n"

    def test_wildcard_before_subcommand_survives(self, monkeypatch, capsys):
        assert _run(monkeypatch, "a*c abcadc", ["--wildcard", "*", "match"]) == 0
        assert capsys.readouterr().out == "2\n0 3 \n"

    def test_verbose_after_subcommand(self, monkeypatch, capsys):
        assert _run(monkeypatch, "ab abab", ["match", "-v"]) == 0
        assert capsys.readouterr().out == "2\n0 2 \n"

    def test_extra_tokens_ignored(self, monkeypatch, capsys):
        assert _run(monkeypatch, "ab abab trailing junk") == 0
        assert capsys.readouterr().out == "2\n0 2 \n"


class TestMatchErrors:
    def test_missing_text(self, monkeypatch, capsys):
        assert _run(monkeypatch, "a?a\n") == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Expected 2" in captured.err
        assert "got 1" in captured.err

    def test_empty_input(self, monkeypatch, capsys):
        assert _run(monkeypatch, "   \n") == 2
        assert "got 0" in capsys.readouterr().err

    def test_bad_wildcard_rejected(self, monkeypatch):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, "a b", ["--wildcard", "ab"])
        assert exc.value.code == 2


class TestProfileCommand:
    def test_profile_report(self, monkeypatch, capsys):
        code = main(["profile", "--text-length", "500", "--pattern", "a?b"])
        assert code == 0
        out = capsys.readouterr().out
        assert "=== automaton ===" in out
        assert "Text length:       500" in out

    def test_profile_compare(self, capsys):
        assert main(["profile", "--text-length", "300", "--compare"]) == 0
        out = capsys.readouterr().out
        assert "Before (naive)" in out
        assert "After (automaton)" in out
        assert "Speedup" in out

    def test_profile_with_cprofile(self, capsys):
        assert main(["profile", "--text-length", "200", "--cprofile"]) == 0
        out = capsys.readouterr().out
        assert "cProfile top functions" in out
        assert "function calls" in out

    def test_profile_accepts_wildcard_after_subcommand(self, capsys):
        code = main([
            "profile", "--text-length", "200", "--pattern", "a*b",
            "--wildcard", "*",
        ])
        assert code == 0
        assert "Fragments:         2" in capsys.readouterr().out
