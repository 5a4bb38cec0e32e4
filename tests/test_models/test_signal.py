"""Tests for RawSignal and Attachment models."""

from cultural_signals.models.signal import Attachment, RawSignal


def test_empty_signal():
    assert RawSignal().is_empty


def test_whitespace_only_content_is_empty():
    assert RawSignal(text="  ", content="  \n").is_empty


def test_attachment_alone_is_not_empty():
    signal = RawSignal(attachment=Attachment(mime_type="image/png", base64="aGk="))
    assert not signal.is_empty


def test_text_alone_is_not_empty():
    assert not RawSignal(text="hello", content="hello").is_empty


def test_attachment_is_pdf():
    assert Attachment(mime_type="application/pdf", base64="").is_pdf
    assert not Attachment(mime_type="image/jpeg", base64="").is_pdf


def test_attachment_default_name():
    assert Attachment(mime_type="image/png", base64="").name == "unnamed"
