import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import utils
from split_paragraphs import Span


def test_filter_paragraphs_keeps_everything_by_default():
    text = "a\n\nbb\n\nccc"
    spans = utils.filter_paragraphs(text)
    assert [text[s.start:s.end] for s in spans] == ["a", "bb", "ccc"]


def test_filter_paragraphs_drops_short():
    text = "  x  \n\nlonger paragraph\r\n\r\nok"
    spans = utils.filter_paragraphs(text, min_length=3)
    assert [text[s.start:s.end] for s in spans] == ["longer paragraph"]


def test_filter_paragraphs_reverse():
    assert utils.filter_paragraphs("a\n\nb", reverse=True) == [Span(3, 4), Span(0, 1)]


def test_is_valid_file(tmp_path):
    good = tmp_path / "doc.TXT"
    good.write_text("x")
    assert utils.is_valid_file(str(good))
    bad_ext = tmp_path / "doc.pdf"
    bad_ext.write_text("x")
    assert not utils.is_valid_file(str(bad_ext))
    assert not utils.is_valid_file(str(tmp_path / "missing.txt"))


def test_read_text_preserves_line_endings(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"a\r\n\r\nb\r")
    assert utils.read_text(str(path)) == "a\r\n\r\nb\r"
