"""
source.py - Input Streams

Opens the text the pipeline reads: stdin, a file, or an HTML document whose
visible text is extracted with BeautifulSoup first.
"""

import io
import re
import sys
from contextlib import contextmanager

from bs4 import BeautifulSoup


FORMATS = ("text", "html")

# Tags whose contents are never visible page text
NON_CONTENT_TAGS = ["script", "style", "noscript", "svg", "iframe",
                    "template", "meta", "link", "head"]


def extract_visible_text(markup):
    """
    Strip non-content tags from an HTML document and return its text,
    with runs of whitespace collapsed to single spaces.
    """
    soup = BeautifulSoup(markup, "lxml")
    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()

    root = soup.body or soup
    text = root.get_text(separator=" ")
    return re.sub(r"\s+", " ", text).strip()


@contextmanager
def open_source(path=None, input_format="text", encoding="utf-8"):
    """
    Yield an iterable of text lines for the pipeline.

    Args:
        path: File to read; None or "-" reads stdin (left open afterwards)
        input_format: "text" or "html"
        encoding: Used for files and stdin; undecodable bytes are ignored

    Raises:
        ValueError: If input_format is unknown
        OSError: If the file cannot be opened (propagated)
    """
    if input_format not in FORMATS:
        raise ValueError(
            f"Unknown input format {input_format!r}, expected one of {list(FORMATS)}")

    wrapper = None
    if path is None or path == "-":
        stream = sys.stdin
        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            wrapper = io.TextIOWrapper(buffer, encoding=encoding, errors="ignore")
            stream = wrapper
        close = False
    else:
        stream = open(path, "r", encoding=encoding, errors="ignore")
        close = True

    try:
        if input_format == "html":
            yield io.StringIO(extract_visible_text(stream.read()))
        else:
            yield stream
    finally:
        if close:
            stream.close()
        elif wrapper is not None:
            # hand the byte stream back without closing stdin
            wrapper.detach()
