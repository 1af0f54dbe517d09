"""Tests for the fontshorthand command line interface."""

from __future__ import annotations

import io
import json
import logging

import pytest

from fontshorthand import __version__
from fontshorthand.cli import build_arg_parser, main


class TestArgParser:
    def test_defaults(self) -> None:
        args = build_arg_parser().parse_args([])

        assert args.values == []
        assert args.format == "rust"
        assert args.indent is None
        assert args.max_source_size == 64 * 1024
        assert args.verbose is False

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args(["--format", "xml"])

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMain:
    def test_single_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["bold 12px/1.5 Georgia, serif"])

        captured = capsys.readouterr()
        assert exit_code == 0
        assert json.loads(captured.out) == {
            "font-family": ["Georgia", "serif"],
            "font-size": "12px",
            "font-weight": "bold",
            "line-height": "1.5",
        }
        assert captured.err == ""

    def test_multiple_values_one_line_each(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["12px serif", "larger cursive"])

        lines = capsys.readouterr().out.splitlines()
        assert exit_code == 0
        assert [json.loads(line)["font-size"] for line in lines] == ["12px", "larger"]

    def test_indent(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--indent", "2", "12px serif"])

        assert capsys.readouterr().out.startswith('{\n  "font-family"')

    def test_rejected_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(['12px "Comic'])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert captured.err.startswith("error[UNCLOSED_QUOTE]: ")
        assert ' 1 | 12px "Comic' in captured.err

    def test_partial_failure(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["--format", "simple", "12px serif", "serif"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert json.loads(captured.out)["font-family"] == ["serif"]
        assert captured.err.strip() == "INVALID_SHORTHAND: Cannot parse font shorthand 'serif'"

    def test_json_diagnostics(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--format", "json", '12px "Lucida" Grande'])

        data = json.loads(capsys.readouterr().err)
        assert data["code"] == "TRAILING_FAMILY_TEXT"

    def test_max_source_size(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["--format", "simple", "--max-source-size", "5", "12px serif"])

        assert exit_code == 1
        assert capsys.readouterr().err.startswith("SOURCE_TOO_LARGE: ")

    def test_reads_stdin_when_no_values(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("12px serif\n\n  bold 1em cursive  \n"))

        exit_code = main([])

        lines = capsys.readouterr().out.splitlines()
        assert exit_code == 0
        assert len(lines) == 2
        assert json.loads(lines[1])["font-weight"] == "bold"

    def test_empty_stdin(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(""))

        assert main([]) == 0
        assert capsys.readouterr().out == ""

    def test_verbose_enables_debug_logging(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        calls: list[dict[str, object]] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        main(["-v", "12px serif"])

        capsys.readouterr()
        assert calls
        assert calls[0]["level"] == logging.DEBUG
