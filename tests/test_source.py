"""
Tests for wordrank/source.py - Input streams.
"""

import io
import sys

import pytest

from wordrank.source import open_source, extract_visible_text
from wordrank.tokenizer import tokenize


HTML = """
<html>
  <head><title>Ignored Title</title><style>p { color: red; }</style></head>
  <body>
    <p>Hello <b>world</b></p>
    <script>var hidden = "secret";</script>
    <p>hello again</p>
  </body>
</html>
"""


class TestExtractVisibleText:

    def test_drops_script_style_and_head(self):
        text = extract_visible_text(HTML)
        assert text == "Hello world hello again"

    def test_plain_fragment(self):
        assert extract_visible_text("<p>one  two</p>") == "one two"


class TestOpenSource:
    """Tests for open_source()."""

    def test_reads_text_file(self, tmp_path):
        path = tmp_path / "in.txt"
        path.write_text("Alpha beta\nalpha\n", encoding="utf-8")
        with open_source(str(path)) as stream:
            assert list(tokenize(stream)) == ["alpha", "beta", "alpha"]

    def test_ignores_undecodable_bytes(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"good \xff\xfe words\n")
        with open_source(str(path)) as stream:
            assert list(tokenize(stream)) == ["good", "words"]

    def test_reads_html_file(self, tmp_path):
        path = tmp_path / "page.html"
        path.write_text(HTML, encoding="utf-8")
        with open_source(str(path), "html") as stream:
            assert list(tokenize(stream)) == ["hello", "world", "hello", "again"]

    def test_stdin_is_default_and_left_open(self, monkeypatch):
        fake = io.StringIO("from stdin")
        monkeypatch.setattr(sys, "stdin", fake)
        with open_source() as stream:
            assert list(tokenize(stream)) == ["from", "stdin"]
        assert not fake.closed

    def test_stdin_bytes_decoded_with_configured_encoding(self, monkeypatch):
        """
        Given: A byte-backed stdin with invalid UTF-8 and a latin-1 word
        When: open_source() reads it with each encoding
        Then: utf-8 drops the bad bytes, latin-1 decodes them, stdin stays open
        """
        raw = b"caf\xe9 ok \xff\xfe fine\n"
        fake = io.TextIOWrapper(io.BytesIO(raw), encoding="utf-8")
        monkeypatch.setattr(sys, "stdin", fake)
        with open_source(encoding="utf-8") as stream:
            assert list(tokenize(stream)) == ["caf", "ok", "fine"]
        assert not fake.buffer.closed

        fake.buffer.seek(0)
        with open_source(encoding="latin-1") as stream:
            assert stream.read() == "caf\u00e9 ok \u00ff\u00fe fine\n"

    def test_dash_means_stdin(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO("x"))
        with open_source("-") as stream:
            assert list(tokenize(stream)) == ["x"]

    def test_missing_file_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            with open_source(str(tmp_path / "missing.txt")):
                pass

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown input format"):
            with open_source(None, "pdf"):
                pass
