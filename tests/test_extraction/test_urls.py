"""Tests for URL extraction from raw message text."""

from cultural_signals.extraction.urls import extract_urls


def test_extract_single_url():
    assert extract_urls("Check this out https://example.com") == ["https://example.com"]


def test_extract_http_and_https():
    text = "a http://one.com b https://two.com/path?q=1"
    assert extract_urls(text) == ["http://one.com", "https://two.com/path?q=1"]


def test_extract_preserves_order_and_duplicates():
    """No deduplication: repeated URLs are returned every time they appear."""
    text = "https://b.com then https://a.com then https://b.com"
    assert extract_urls(text) == ["https://b.com", "https://a.com", "https://b.com"]


def test_extract_strips_slack_angle_brackets():
    """Slack wraps links as <url>; the brackets are not part of the match."""
    assert extract_urls("Look <https://example.com/page>") == ["https://example.com/page"]


def test_extract_stops_at_whitespace():
    assert extract_urls("https://example.com/a b") == ["https://example.com/a"]


def test_extract_ignores_bare_domains():
    """Domains without a scheme are not URLs."""
    assert extract_urls("visit example.com or www.example.org") == []


def test_extract_case_insensitive_scheme():
    assert extract_urls("HTTPS://EXAMPLE.COM") == ["HTTPS://EXAMPLE.COM"]


def test_extract_empty_and_none():
    assert extract_urls("") == []
    assert extract_urls(None) == []


def test_extract_returns_all_urls_uncapped():
    """Capping at 3 is the caller's job."""
    text = " ".join(f"https://site{i}.com" for i in range(5))
    assert len(extract_urls(text)) == 5
