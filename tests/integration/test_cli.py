"""
Integration tests for the command line tool.
"""

import io
import json
import sys

import pytest

from htmlq.main import (
    EXIT_BAD_SELECTOR,
    EXIT_ERROR,
    EXIT_OK,
    extract,
    main,
    parse_args,
    read_input,
)
from htmlq.nodeset import parse


PAGE = """<!DOCTYPE html>
<html>
<head><title>Posts</title></head>
<body>
  <span class="post-id">102</span><div class="msg">Hello</div>
  <span class="post-id">103</span><div class="msg">There <b>again</b></div>
  <a class="ext" href="https://example.com/a">A</a>
  <a class="ext" href="https://example.com/b">B</a>
  <form><input name="q" value="search"></form>
</body>
</html>
"""


@pytest.fixture
def page_file(tmp_path):
    path = tmp_path / "page.html"
    path.write_text(PAGE, encoding="utf-8")
    return path


class TestParseArgs:
    def test_defaults(self):
        args = parse_args(["p"])
        assert args.selector == "p"
        assert args.file is None
        assert args.attr is None
        assert args.value is False
        assert args.index is None
        assert args.features is None
        assert args.debug is False
        assert args.log is False

    def test_all_flags(self):
        args = parse_args(["a", "page.html", "--attr", "href", "--index", "1",
                           "--parser", "html.parser", "--config", "c.json", "--debug"])
        assert args.file == "page.html"
        assert args.attr == "href"
        assert args.index == 1
        assert args.features == "html.parser"
        assert args.config == "c.json"
        assert args.debug is True

    def test_attr_and_value_are_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(["input", "--attr", "name", "--value"])


class TestReadInput:
    def test_reads_file_bytes(self, page_file):
        assert read_input(str(page_file)) == PAGE.encode("utf-8")

    def test_reads_stdin(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"<p>x</p>")))
        assert read_input(None) == b"<p>x</p>"
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"<p>y</p>")))
        assert read_input("-") == b"<p>y</p>"


class TestExtract:
    def test_inner_html(self):
        assert extract(parse(PAGE).find("div.msg")) == ["Hello", "There <b>again</b>"]

    def test_attr(self):
        assert extract(parse(PAGE).find("a.ext"), attr="href") == [
            "https://example.com/a", "https://example.com/b"]

    def test_value(self):
        assert extract(parse(PAGE).find("input"), value=True) == ["search"]

    def test_empty(self):
        assert extract(parse(PAGE).find("table")) == []


class TestMain:
    def test_prints_each_match(self, page_file, capsys):
        assert main(["span.post-id", str(page_file)]) == EXIT_OK
        assert capsys.readouterr().out == "102\n103\n"

    def test_attr_output(self, page_file, capsys):
        assert main(["a.ext", str(page_file), "--attr", "href"]) == EXIT_OK
        assert capsys.readouterr().out.splitlines() == [
            "https://example.com/a", "https://example.com/b"]

    def test_value_output(self, page_file, capsys):
        assert main(["form input", str(page_file), "--value"]) == EXIT_OK
        assert capsys.readouterr().out == "search\n"

    def test_index(self, page_file, capsys):
        assert main(["span.post-id", str(page_file), "--index", "1"]) == EXIT_OK
        assert capsys.readouterr().out == "103\n"

    def test_index_out_of_range_prints_nothing(self, page_file, capsys):
        assert main(["span.post-id", str(page_file), "--index", "9"]) == EXIT_OK
        assert capsys.readouterr().out == ""

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(PAGE.encode("utf-8"))))
        assert main(["title"]) == EXIT_OK
        assert capsys.readouterr().out == "Posts\n"

    def test_parser_option(self, page_file, capsys):
        assert main(["span.post-id", str(page_file), "--parser", "html.parser"]) == EXIT_OK
        assert capsys.readouterr().out == "102\n103\n"

    def test_bad_selector(self, page_file, capsys):
        assert main(["span[", str(page_file)]) == EXIT_BAD_SELECTOR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid selector" in captured.err

    def test_missing_file(self, tmp_path, capsys):
        assert main(["p", str(tmp_path / "nope.html")]) == EXIT_ERROR
        assert capsys.readouterr().out == ""

    def test_config_file(self, page_file, tmp_path, capsys):
        config_path = tmp_path / "cli-config.json"
        config_path.write_text(json.dumps({"render": {"formatter": "html"}}))
        (tmp_path / "cafe.html").write_text('<meta charset="utf-8"><p>café</p>', encoding="utf-8")
        assert main(["p", str(tmp_path / "cafe.html"), "--config", str(config_path)]) == EXIT_OK
        assert capsys.readouterr().out == "caf&eacute;\n"

    def test_debug_logs_timings(self, page_file, capsys):
        assert main(["span", str(page_file), "--debug"]) == EXIT_OK
        assert "htmlq parse took" in capsys.readouterr().err

    def test_log_flag_writes_default_log_file(self, page_file, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert main(["span", str(page_file), "--log"]) == EXIT_OK
        log_files = list((tmp_path / ".htmlq" / "logs").glob("htmlq_*.log"))
        assert len(log_files) == 1
        assert "parse took" in log_files[0].read_text()

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert "htmlq" in capsys.readouterr().out
