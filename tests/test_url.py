import pytest

from saba.url import Url, UrlError


def test_url():
    url = "http://example.com"
    expected = Url(url=url, host="example.com", port="80", path="", searchpart="")
    assert Url(url).parse() == expected


def test_url_with_port():
    url = "http://example.com:8888"
    expected = Url(url=url, host="example.com", port="8888", path="", searchpart="")
    assert Url(url).parse() == expected


def test_url_with_path():
    url = "http://example.com/index.html"
    expected = Url(
        url=url, host="example.com", port="80", path="index.html", searchpart=""
    )
    assert Url(url).parse() == expected


def test_url_with_port_path():
    url = "http://example.com:8888/index.html"
    expected = Url(
        url=url, host="example.com", port="8888", path="index.html", searchpart=""
    )
    assert Url(url).parse() == expected


def test_url_with_port_path_searchpart():
    url = "http://example.com:8888/index.html?a=123&b=456"
    expected = Url(
        url=url,
        host="example.com",
        port="8888",
        path="index.html",
        searchpart="a=123&b=456",
    )
    assert Url(url).parse() == expected


def test_localhost():
    url = "http://localhost:8000"
    expected = Url(url=url, host="localhost", port="8000", path="", searchpart="")
    assert Url(url).parse() == expected


def test_no_scheme():
    with pytest.raises(UrlError, match="Only HTTP scheme is supported."):
        Url("example.com").parse()


def test_unsupported_scheme():
    with pytest.raises(UrlError, match="Only HTTP scheme is supported."):
        Url("https://example.com:8888/index.html").parse()


def test_parse_leaves_original_unchanged():
    original = Url("http://example.com:8888/index.html")
    parsed = original.parse()
    assert original.host == ""
    assert parsed.url == original.url
    assert parsed.parse() == parsed