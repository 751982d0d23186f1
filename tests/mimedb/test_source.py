"""Tests for mimedb/source.py."""

import logging

from src.mimedb.source import format_source, parse_lines, read_source, write_source

NGINX_SAMPLE = """\
types {
    text/html                                        html htm shtml;
    text/css                                         css;
    # comment line
    image/jpeg                                       jpeg jpg;

    application/vnd.openxmlformats-officedocument.wordprocessingml.document
                                                     docx;
}
"""


class TestParseLines:
    """Tests for parse_lines."""

    def test_basic_lines(self):
        rows = list(parse_lines(["text/html html htm\n", "image/png png\n"]))
        assert rows == [("text/html", ["html", "htm"]), ("image/png", ["png"])]

    def test_skips_comments_and_blank_lines(self):
        rows = list(parse_lines(["# text/html html\n", "   # indented\n", "\n", "   \n"]))
        assert rows == []

    def test_skips_lines_with_braces(self):
        rows = list(parse_lines(["types {\n", "text/css css }\n", "}\n"]))
        assert rows == []

    def test_strips_semicolons_and_leading_whitespace(self):
        rows = list(parse_lines(["    text/css    css;\n", "a/b c;d\n"]))
        assert rows == [("text/css", ["css"]), ("a/b", ["cd"])]

    def test_skips_single_field_lines(self):
        rows = list(parse_lines(["text/plain\n", "docx;\n"]))
        assert rows == []

    def test_tabs_and_runs_of_whitespace(self):
        rows = list(parse_lines(["video/mpeg\t\tmpeg   mpg\n"]))
        assert rows == [("video/mpeg", ["mpeg", "mpg"])]

    def test_nginx_style_source(self):
        rows = list(parse_lines(NGINX_SAMPLE.splitlines(keepends=True)))
        assert rows == [
            ("text/html", ["html", "htm", "shtml"]),
            ("text/css", ["css"]),
            ("image/jpeg", ["jpeg", "jpg"]),
        ]


class TestReadSource:
    """Tests for read_source."""

    def test_reads_rows_in_order(self, tmp_path):
        path = tmp_path / "mime.types"
        path.write_text("text/plain txt\ntext/html html\n", encoding="utf-8")
        assert read_source(path) == [("text/plain", ["txt"]), ("text/html", ["html"])]

    def test_missing_file_returns_none(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            assert read_source(tmp_path / "missing.types") is None
        assert "missing.types" in caplog.text

    def test_undecodable_bytes_only_affect_their_line(self, tmp_path):
        path = tmp_path / "mime.types"
        path.write_bytes(b"# caf\xe9\ntext/plain txt\nimage/x-caf\xe9 cafe\n")
        rows = read_source(path)
        assert rows[0] == ("text/plain", ["txt"])
        assert rows[1] == ("image/x-caf\ufffd", ["cafe"])

    def test_directory_returns_none(self, tmp_path):
        assert read_source(tmp_path) is None


class TestWriteSource:
    """Tests for format_source and write_source."""

    def test_format_sorted_by_mime(self):
        text = format_source({"video/mp4": ["mp4"], "audio/midi": ["mid", "midi"]})
        assert text == "audio/midi mid midi\nvideo/mp4 mp4\n"

    def test_format_empty(self):
        assert format_source({}) == ""

    def test_write_creates_parent_directories(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "mime.types"
        assert write_source(path, {"text/plain": ["txt"]}) is True
        assert path.read_text(encoding="utf-8") == "text/plain txt\n"

    def test_write_then_read(self, tmp_path):
        path = tmp_path / "mime.types"
        data = {"text/html": ["html", "htm"], "image/png": ["png"]}
        write_source(path, data)
        assert dict(read_source(path)) == data

    def test_write_to_directory_fails(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            assert write_source(tmp_path, {"text/plain": ["txt"]}) is False
        assert "Could not write MIME source" in caplog.text
