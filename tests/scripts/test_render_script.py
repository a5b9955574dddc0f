import pytest

import io

import sys

from argparse import ArgumentTypeError

from pathlib import Path

from formatted_text.scripts.formatted_text import (
    css_property,
    generate_standalone_page,
    main,
)


class TestCssProperty:
    def test_valid(self) -> None:
        assert css_property("color:red") == ("color", "red")
        assert css_property(" font-size : 2em ") == ("font-size", "2em")
        assert css_property("background:url(http://x)") == (
            "background",
            "url(http://x)",
        )

    @pytest.mark.parametrize("value", ["color", "color:", ":red", ""])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(ArgumentTypeError):
            css_property(value)


def test_generate_standalone_page() -> None:
    page = generate_standalone_page("<div>hi</div>", "<Cake>")
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>&lt;Cake&gt;</title>" in page
    assert "<div>hi</div>" in page


class TestMain:
    def test_render_to_stdout(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "cake.txt"
        source.write_text("A **very** moist cake.\nServes *8*.")
        main([str(source)])
        assert capsys.readouterr().out == (
            "<div>A <strong>very</strong> moist cake.<br />Serves <em>8</em>.</div>\n"
        )

    def test_render_to_file(self, tmp_path: Path) -> None:
        source = tmp_path / "cake.txt"
        source.write_text("~~Butter~~ Margarine")
        output = tmp_path / "cake.html"
        main([str(source), str(output)])
        assert output.read_text() == (
            '<div><s class="ft-strikethrough" style="opacity: 0.6">Butter</s>'
            " Margarine</div>\n"
        )

    def test_class_and_style(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "cake.txt"
        source.write_text("hi")
        main(
            [
                str(source),
                "--class",
                "note",
                "--style",
                "color:red",
                "-s",
                "font-size: 2em",
            ]
        )
        assert capsys.readouterr().out == (
            '<div class="note" style="color: red; font-size: 2em">hi</div>\n'
        )

    def test_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO("`code`"))
        main(["-"])
        assert "<code" in capsys.readouterr().out

    def test_empty_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "empty.txt"
        source.write_text("")
        main([str(source)])
        assert capsys.readouterr().out == ""

    def test_standalone(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "cake.txt"
        source.write_text("*hi*")
        main([str(source), "--standalone"])
        out = capsys.readouterr().out
        assert out.startswith("<!DOCTYPE html>")
        assert "<title>cake</title>" in out
        assert "<div><em>hi</em></div>" in out

    def test_missing_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.txt")])
        assert exc_info.value.code == 1
        assert "missing.txt" in capsys.readouterr().err

    def test_bad_style(self, tmp_path: Path) -> None:
        source = tmp_path / "cake.txt"
        source.write_text("hi")
        with pytest.raises(SystemExit) as exc_info:
            main([str(source), "--style", "nonsense"])
        assert exc_info.value.code == 2

    def test_invalid_utf8(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "latin1.txt"
        source.write_bytes(b"\xff\xfe**x**")
        with pytest.raises(SystemExit) as exc_info:
            main([str(source)])
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "can't decode" in captured.err
        assert captured.out == ""
