"""Logic for turning JSDoc markdown into sanitized HTML or plain text."""

import re
from html import unescape
from xml.etree.ElementTree import Element

import markdown
from markdown.treeprocessors import Treeprocessor

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]
TAG_RE = re.compile(r"<[^>]+>")

SAFE_SCHEMES = {"http", "https", "mailto"}
URL_ATTRIBUTES = ("href", "src")
# Browsers ignore control characters and whitespace inside a scheme.
_IGNORED_URL_CHARS = re.compile(r"[\x00-\x20\x7f]+")
_SCHEME_RE = re.compile(r"([a-zA-Z][a-zA-Z0-9+.\-]*):")


def is_safe_url(url: str) -> bool:
    """Return True for relative URLs and http, https or mailto URLs."""
    match = _SCHEME_RE.match(_IGNORED_URL_CHARS.sub("", unescape(url)))
    return match is None or match.group(1).lower() in SAFE_SCHEMES


class SafeLinkTreeprocessor(Treeprocessor):
    """Drop link and image destinations whose scheme is not allowed."""

    def run(self, root: Element) -> None:
        for element in root.iter():
            for attribute in URL_ATTRIBUTES:
                value = element.get(attribute)
                if value is not None and not is_safe_url(value):
                    del element.attrib[attribute]


def _markdown() -> markdown.Markdown:
    """Build a Markdown converter that escapes raw HTML instead of passing it."""
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS, output_format="html")
    md.preprocessors.deregister("html_block")
    md.inlinePatterns.deregister("html")
    # After "inline" (20), which builds the links and images.
    md.treeprocessors.register(SafeLinkTreeprocessor(md), "safe_links", 5)
    return md


def render_markdown(text: str) -> str:
    """Render markdown to HTML; raw HTML is escaped and unsafe links dropped."""
    if not text.strip():
        return ""
    return _markdown().convert(text)


def clean_markdown(text: str) -> str:
    """Render markdown to a single line of plain text for descriptions."""
    rendered = TAG_RE.sub("", render_markdown(text))
    return " ".join(unescape(rendered).split())
