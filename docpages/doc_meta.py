"""Logic for building page titles and social preview meta tags."""

from dataclasses import dataclass
from html import escape
from urllib.parse import urljoin

from docpages.library_label import get_url_label
from docpages.markdown_renderer import clean_markdown
from docpages.parse_url import STD_REGISTRY, parse_url


@dataclass(frozen=True)
class DocMeta:
    """Title, description and preview image of a rendered page."""

    title: str
    description: str
    image_url: str


def build_doc_meta(
    base_url: str,
    url: str,
    doc: str,
    item: str | None = None,
    *,
    site_title: str = "Deno Doc",
    config: dict | None = None,
) -> DocMeta:
    """Build the meta data for a module page or an item page."""
    description = clean_markdown(doc)
    href = f"{url}{'' if url.endswith('/') else '/'}~/{item}" if item else url
    image_url = urljoin(base_url, f"/img/{href}")
    parsed = parse_url(url)
    if parsed:
        org_pkg = f"{parsed.org}/{parsed.package}" if parsed.org else parsed.package
        parts = []
        if parsed.module:
            parts.append(parsed.module)
        if org_pkg:
            parts.append(org_pkg)
        elif parsed.registry == STD_REGISTRY:
            parts.append("std")
        if parsed.version:
            parts.append(f"@{parsed.version}")
        parts.append(parsed.registry)
        title = f"{' – '.join(parts)} | {site_title}"
    elif item:
        title = f"{get_url_label(url, config)} – {item} | {site_title}"
    else:
        title = f"{get_url_label(url, config)} | {site_title}"
    return DocMeta(title=title, description=description, image_url=image_url)


def render_meta_tags(meta: DocMeta, twitter: str | None = None) -> str:
    """Render the ``<title>`` and twitter/og meta tags for a page head."""
    title = escape(meta.title)
    description = escape(meta.description)
    image = escape(meta.image_url)
    tags = [
        f"<title>{title}</title>",
        '<meta name="twitter:card" content="summary_large_image">',
    ]
    if twitter:
        tags.append(f'<meta name="twitter:site" content="{escape(twitter)}">')
        tags.append(f'<meta name="twitter:creator" content="{escape(twitter)}">')
    tags += [
        f'<meta name="twitter:title" content="{title}">',
        f'<meta name="twitter:image" content="{image}">',
        '<meta name="twitter:image:alt" content="rendered description as image">',
        f'<meta name="twitter:description" content="{description}">',
        f'<meta property="og:title" content="{title}">',
        f'<meta property="og:image" content="{image}">',
        '<meta property="og:image:alt" content="rendered description as image">',
        f'<meta property="og:description" content="{description}">',
        '<meta property="og:type" content="article">',
        f'<meta name="description" content="{description}">',
    ]
    return "\n".join(tags)
