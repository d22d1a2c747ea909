"""Logic for rendering the sidebar header describing a module specifier."""

from html import escape
from typing import Any

from docpages.library_label import get_lib_with_version
from docpages.parse_url import STD_REGISTRY, parse_url


def _field(label: str, value: str, *, raw: bool = False) -> list[str]:
    body = value if raw else escape(value)
    return [f'<h3 class="sidebar-label">{label}</h3>', f'<p class="truncate">{body}</p>']


def render_sidebar_header(url: str, config: dict[str, Any] | None = None) -> str:
    """Render title, subtitle and the registry/package/version listing."""
    href = escape(f"/{url}")
    parsed = parse_url(url)
    if not parsed:
        label, version = get_lib_with_version(url, config)
        parts = [f'<h2 class="sidebar-title"><a href="{href}">{escape(label)}</a></h2>']
        if version:
            parts += _field("Version", version)
        return '<div class="sidebar-header">' + "\n".join(parts) + "</div>"

    # zero-width spaces let long module paths wrap at slashes
    module = escape(parsed.module).replace("/", "&#8203;/") if parsed.module else None
    title = module
    subtitle = None
    org_pkg = f"{parsed.org}/{parsed.package}" if parsed.org else parsed.package
    if org_pkg:
        if module:
            subtitle = escape(org_pkg)
        else:
            title = escape(org_pkg)
    elif parsed.registry == STD_REGISTRY:
        subtitle = "std"

    parts = [f'<h2 class="sidebar-title"><a href="{href}">{title or ""}</a></h2>']
    if subtitle:
        parts.append(f'<h3 class="sidebar-subtitle">{subtitle}</h3>')
    parts += _field("Registry", parsed.registry)
    if parsed.org:
        parts += _field("Organization", parsed.org)
    if parsed.package:
        parts += _field("Package", parsed.package)
    if module:
        parts += _field("Module", module, raw=True)
    if parsed.version:
        parts += _field("Version", parsed.version)
    source = (
        f'<a href="{escape(url)}" target="_blank" rel="noopener" class="truncate">'
        f"{escape(url)}</a>"
    )
    parts += _field("Source", source, raw=True)
    return '<div class="sidebar-header">' + "\n".join(parts) + "</div>"
