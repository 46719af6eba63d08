"""
Header classification helpers.

Turns raw Accept-Language and User-Agent strings into the readable
categories used by the stats groupings, and flags crawler traffic.
"""

LANGUAGE_NAMES = {
    "en": "English",
    "fr": "French",
    "de": "German",
    "es": "Spanish",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
    "zh": "Chinese",
    "ja": "Japanese",
    "ko": "Korean",
}

CRAWLER_TOKENS = (
    "googlebot",
    "bingbot",
    "slurp",
    "duckduckbot",
    "baiduspider",
    "yandexbot",
    "sogou",
    "ahrefs",
)


def readable_language(header: str) -> str:
    """Convert an Accept-Language header into a human-readable language.

    Only the first tag is considered. Unknown codes come back with their
    first letter capitalised, e.g. "nl-NL" -> "Nl".

    Args:
        header: Raw Accept-Language header value

    Returns:
        Language name, or the capitalised two-letter code
    """
    code = (header or "").split(",")[0].strip()[:2].lower()
    return LANGUAGE_NAMES.get(code, code[:1].upper() + code[1:])


def browser_name(user_agent: str) -> str:
    """Return a simple browser family for a user agent.

    Checks run in priority order because most UA strings carry several
    vendor tokens (Chrome UAs contain "Safari", Edge and Opera contain
    "Chrome").
    """
    ua = (user_agent or "").lower()

    if "chrome" in ua and "edge" not in ua and "opr" not in ua:
        return "Chrome"
    elif "firefox" in ua:
        return "Firefox"
    elif "safari" in ua and "chrome" not in ua:
        return "Safari"
    elif "edge" in ua:
        return "Edge"
    elif "opr" in ua or "opera" in ua:
        return "Opera"
    elif "msie" in ua or "trident" in ua:
        return "Internet Explorer"
    return "Other"


def is_crawler(user_agent: str) -> bool:
    """Check whether a user agent belongs to a known search-engine crawler."""
    ua = (user_agent or "").lower()
    return any(token in ua for token in CRAWLER_TOKENS)
