import enum
import re
from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import urlsplit

from snippet_resolver.core.lines import strip_line_markers

GIST_API_BASE = "https://api.github.com/gists"

URL_PATTERN = re.compile(r"https?://[^\s<]+")

NORMAL_URL_PATTERN = re.compile(
    r"https?://github\.com/(?P<owner>[\w.-]+)/(?P<repo>[\w.-]+)/(?:blob|blame)/(?P<path>[^\s#?>]+)"
    r"(?:\?[^\s#>]*)?#(?P<opts>L\d+(?:C\d+)?(?:-L\d+(?:C\d+)?)?)"
)

GIST_URL_PATTERN = re.compile(
    r"https?://gist\.github\.com/(?:(?P<user>[\w-]+)/)?(?P<id>[0-9a-fA-F]+)?(?:#(?P<opts>[\w.-]+))?"
)


class LinkShape(enum.Enum):
    NORMAL = "normal"
    GIST = "gist"
    DIFF = "diff"


Converter = Callable[[str], str | None]


@dataclass(frozen=True)
class LinkValidator:
    shape: LinkShape
    pattern: re.Pattern[str]
    converter: Converter


@dataclass(frozen=True)
class Match:
    url: str
    opts: str | None
    shape: LinkShape
    converter: Converter


def convert_normal_url(url: str) -> str:
    """Rewrite a blob/blame page URL into its raw-content URL."""
    url = url.replace(">", "").replace("github.com", "raw.githubusercontent.com", 1)
    url = re.sub(r"^(https?://[^/]+/[^/]+/[^/]+)/(?:blob|blame)/", r"\1/", url)
    return urlsplit(url)._replace(query="", fragment="").geturl()


def convert_gist_url(url: str) -> str | None:
    """Return the metadata API URL of a Gist, or ``None`` if the link lacks a user, id or file."""
    found = GIST_URL_PATTERN.match(strip_line_markers(url))
    if found is None:
        return None
    user, gist_id, opts = found.group("user", "id", "opts")
    if not user or not gist_id or not opts or not opts.startswith("file-"):
        return None
    return f"{GIST_API_BASE}/{gist_id}"


# Evaluated in order; the first pattern that matches decides the shape.
VALIDATORS: tuple[LinkValidator, ...] = (
    LinkValidator(LinkShape.NORMAL, NORMAL_URL_PATTERN, convert_normal_url),
    LinkValidator(LinkShape.GIST, GIST_URL_PATTERN, convert_gist_url),
)


def _classify(url: str) -> Match | None:
    for validator in VALIDATORS:
        found = validator.pattern.match(url)
        if found is None or not found.group(0):
            continue
        return Match(
            url=found.group(0),
            opts=found.group("opts"),
            shape=validator.shape,
            converter=validator.converter,
        )
    return None


def match_github_urls(text: str) -> list[Match]:
    """Find every GitHub file or Gist link in ``text``.

    Identical URLs are only reported once, in the order they first appear.
    """
    matches: dict[str, Match] = {}
    for found in URL_PATTERN.finditer(text):
        match = _classify(found.group(0))
        if match is not None and match.url not in matches:
            matches[match.url] = match
    return list(matches.values())
