"""Utilities for generating HTML code blocks and small inline fragments."""

from html import escape


def html_codeblock(lang: str, code: str) -> str:
    """Generate an HTML code block with escaped content."""
    body = escape(code.rstrip())
    return f'<pre class="code-block"><code class="language-{lang}">{body}</code></pre>'


def kw(word: str) -> str:
    """Wrap a keyword in a highlight span."""
    return f'<span class="code-keyword">{escape(word)}</span>'
