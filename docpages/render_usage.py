"""Logic for rendering the Usage block with its copy-to-clipboard script."""

import json
from html import escape

from docpages.html_codeblock import kw
from docpages.parse_usage import parse_usage


def copy_script(import_statement: str) -> str:
    """Return the script that copies the import statement to the clipboard."""
    literal = json.dumps(import_statement).replace("</", "<\\/")
    return (
        "<script>function copyImportStatement() {\n"
        f"  navigator.clipboard.writeText({literal});\n"
        "}</script>"
    )


def render_usage(
    url: str,
    item: str | None = None,
    is_type: bool | None = None,
    *,
    default_symbol: str = "mod",
) -> str:
    """Render the highlighted import snippet, Copy button and script."""
    usage = parse_usage(url, item, is_type, default_symbol=default_symbol)
    symbol = escape(usage.import_symbol)
    if item:
        type_kw = kw("type") + " " if is_type else ""
        target = f"{type_kw}&#123; {symbol} &#125;"
    else:
        target = f"* {kw('as')} {symbol}"
    code = (
        f"{kw('import')} {target} {kw('from')} "
        f'<span class="code-string">"{escape(url)}"</span>;'
    )
    if usage.usage_symbol:
        code += (
            f" \n\n{kw('const')} &#123; {escape(usage.usage_symbol)} &#125; = "
            f"{escape(usage.local_var or '')};"
        )

    parts = ['<div class="usage">']
    if not item:
        parts.append('<h2 class="section" id="usage">Usage</h2>')
    parts.append('<div class="markdown"><pre>')
    parts.append(
        '<button class="copy" type="button" onclick="copyImportStatement()">Copy</button>'
    )
    parts.append(f"<code>{code}</code>")
    parts.append("</pre></div>")
    parts.append(copy_script(usage.import_statement))
    parts.append("</div>")
    return "\n".join(parts)
