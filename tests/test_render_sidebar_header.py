"""Tests for the sidebar header."""

from docpages.load_config import load_config
from docpages.render_sidebar_header import render_sidebar_header


def test_module_with_package() -> None:
    """Verify module title, package subtitle and field listing."""
    html = render_sidebar_header("deno.land/x/oak@v10.0.0/http/mod.ts")
    assert '<a href="/deno.land/x/oak@v10.0.0/http/mod.ts">http&#8203;/mod.ts</a>' in html
    assert '<h3 class="sidebar-subtitle">oak</h3>' in html
    assert ">Registry<" in html
    assert ">Package<" in html
    assert ">Version<" in html
    assert ">Organization<" not in html
    assert 'target="_blank"' in html


def test_package_root_uses_package_title() -> None:
    """Verify that org/package becomes the title when there is no module."""
    html = render_sidebar_header("esm.sh/@org/pkg@1.0.0")
    assert ">@org/pkg</a></h2>" in html
    assert "sidebar-subtitle" not in html
    assert ">Organization<" in html


def test_std_subtitle() -> None:
    """Verify the std subtitle for standard library modules."""
    html = render_sidebar_header("deno.land/std@0.120.0/fs/mod.ts")
    assert '<h3 class="sidebar-subtitle">std</h3>' in html


def test_library_header() -> None:
    """Verify library label and version for library specifiers."""
    html = render_sidebar_header("deno/unstable@1.18.0", load_config())
    assert "Deno CLI APIs (unstable)" in html
    assert ">Version<" in html
    assert ">Registry<" not in html
