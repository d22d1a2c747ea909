"""Tests for page titles, preview images and meta tags."""

from docpages.doc_meta import build_doc_meta, render_meta_tags
from docpages.load_config import load_config

BASE = "https://doc.deno.land/"


def test_module_meta() -> None:
    """Verify title parts and image url for a registry module."""
    meta = build_doc_meta(BASE, "deno.land/x/oak@v10.0.0/mod.ts", "The *oak* module.")
    assert meta.title == "mod.ts – oak – @v10.0.0 – deno.land/x | Deno Doc"
    assert meta.description == "The oak module."
    assert meta.image_url == "https://doc.deno.land/img/deno.land/x/oak@v10.0.0/mod.ts"


def test_item_meta_image_url() -> None:
    """Verify that item pages point the preview image at the item."""
    meta = build_doc_meta(BASE, "deno.land/x/oak/mod.ts", "", "Application")
    assert meta.image_url == "https://doc.deno.land/img/deno.land/x/oak/mod.ts/~/Application"
    trailing = build_doc_meta(BASE, "deno.land/x/oak/", "", "Application")
    assert trailing.image_url.endswith("/deno.land/x/oak/~/Application")


def test_std_meta_title() -> None:
    """Verify that std modules show std in place of a package."""
    meta = build_doc_meta(BASE, "deno.land/std@0.120.0/http/server.ts", "")
    assert meta.title == "http/server.ts – std – @0.120.0 – deno.land/std | Deno Doc"


def test_library_meta_title() -> None:
    """Verify library titles use the configured label."""
    config = load_config()
    meta = build_doc_meta(BASE, "deno/stable", "", "Deno.readFile", config=config)
    assert meta.title == "Deno CLI APIs – Deno.readFile | Deno Doc"
    module = build_doc_meta(BASE, "deno/stable@1.18.0", "", site_title="Docs", config=config)
    assert module.title == "Deno CLI APIs @1.18.0 | Docs"


def test_render_meta_tags_escapes() -> None:
    """Verify meta tag rendering and attribute escaping."""
    meta = build_doc_meta(BASE, "deno.land/x/oak/mod.ts", 'Say "hi" <now>')
    tags = render_meta_tags(meta, "@denoland")
    assert "<title>mod.ts – oak – deno.land/x | Deno Doc</title>" in tags
    assert '<meta name="twitter:site" content="@denoland">' in tags
    assert 'content="Say &quot;hi&quot; &lt;now&gt;"' in tags
    assert "twitter:site" not in render_meta_tags(meta)
