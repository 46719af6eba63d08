"""
Tests for header classification: languages, browsers and crawlers.
"""

import pytest

from analytics_service.classifier import readable_language, browser_name, is_crawler


CHROME_UA = ("Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
             "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36")
FIREFOX_UA = "Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0"
SAFARI_UA = ("Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
             "(KHTML, like Gecko) Version/17.1 Safari/605.1.15")
LEGACY_EDGE_UA = ("Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
                  "(KHTML, like Gecko) Chrome/70.0.3538.102 Safari/537.36 Edge/18.17763")
OPERA_UA = ("Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 OPR/106.0.0.0")
IE_UA = "Mozilla/5.0 (Windows NT 10.0; WOW64; Trident/7.0; rv:11.0) like Gecko"
GOOGLEBOT_UA = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"


class TestReadableLanguage:
    """Test Accept-Language conversion."""

    @pytest.mark.parametrize("header,expected", [
        ("en-US,en;q=0.9", "English"),
        ("fr-FR,fr;q=0.8,en;q=0.5", "French"),
        ("de", "German"),
        ("es-419", "Spanish"),
        ("it-IT", "Italian"),
        ("pt-BR", "Portuguese"),
        ("ru", "Russian"),
        ("zh-CN,zh;q=0.9", "Chinese"),
        ("ja-JP", "Japanese"),
        ("ko-KR", "Korean"),
    ])
    def test_known_languages(self, header, expected):
        """Known codes map to their language names."""
        assert readable_language(header) == expected

    def test_only_first_tag_counts(self):
        """Later tags in the header are ignored."""
        assert readable_language("nl-NL,en;q=0.9") == "Nl"

    def test_case_and_whitespace(self):
        """The code is trimmed and lowercased before lookup."""
        assert readable_language("  DE-de") == "German"

    def test_unknown_code_is_capitalized(self):
        """Unknown codes fall back to the capitalised code."""
        assert readable_language("sv-SE") == "Sv"
        assert readable_language("unknown") == "Un"

    def test_empty_header(self):
        """An empty header yields the fallback on an empty code."""
        assert readable_language("") == ""
        assert readable_language(",en") == ""


class TestBrowserName:
    """Test browser family detection."""

    @pytest.mark.parametrize("user_agent,expected", [
        (CHROME_UA, "Chrome"),
        (FIREFOX_UA, "Firefox"),
        (SAFARI_UA, "Safari"),
        (LEGACY_EDGE_UA, "Edge"),
        (OPERA_UA, "Opera"),
        ("Opera/9.80 (Windows NT 6.1) Presto/2.12.388 Version/12.18", "Opera"),
        (IE_UA, "Internet Explorer"),
        ("Mozilla/4.0 (compatible; MSIE 8.0; Windows NT 6.1)", "Internet Explorer"),
        ("curl/8.4.0", "Other"),
        ("", "Other"),
    ])
    def test_browser_families(self, user_agent, expected):
        """Each family is recognised despite overlapping vendor tokens."""
        assert browser_name(user_agent) == expected

    def test_case_insensitive(self):
        """Matching ignores case."""
        assert browser_name("FIREFOX/1.0") == "Firefox"


class TestIsCrawler:
    """Test crawler detection."""

    @pytest.mark.parametrize("user_agent", [
        GOOGLEBOT_UA,
        "Mozilla/5.0 (compatible; bingbot/2.0; +http://www.bing.com/bingbot.htm)",
        "Mozilla/5.0 (compatible; Yahoo! Slurp; http://help.yahoo.com/help/us/ysearch/slurp)",
        "DuckDuckBot/1.1; (+http://duckduckgo.com/duckduckbot.html)",
        "Mozilla/5.0 (compatible; Baiduspider/2.0; +http://www.baidu.com/search/spider.html)",
        "Mozilla/5.0 (compatible; YandexBot/3.0; +http://yandex.com/bots)",
        "Sogou web spider/4.0(+http://www.sogou.com/docs/help/webmasters.htm#07)",
        "Mozilla/5.0 (compatible; AhrefsBot/7.0; +http://ahrefs.com/robot/)",
    ])
    def test_known_crawlers(self, user_agent):
        """Every bot signature is flagged."""
        assert is_crawler(user_agent)

    @pytest.mark.parametrize("user_agent", [CHROME_UA, FIREFOX_UA, SAFARI_UA, "", "unknown"])
    def test_browsers_are_not_crawlers(self, user_agent):
        """Regular browsers are not flagged."""
        assert not is_crawler(user_agent)
