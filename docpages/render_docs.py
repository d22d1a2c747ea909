"""Render HTML documentation pages from ``deno doc --json`` output.

Loads the doc nodes of one module, renders the module root page (or a single
item page) and writes each page as ``index.html`` under the output directory,
or prints a single page to stdout when no output directory is given.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from docpages.iter_item_paths import iter_item_paths
from docpages.load_config import load_config
from docpages.load_doc_nodes import load_doc_nodes
from docpages.output_file_for_page import output_file_for_page
from docpages.render_context import RenderContext, build_render_context
from docpages.render_doc_page import render_doc_page
from docpages.render_section import item_href

logger = logging.getLogger(__name__)


def run_render(args: argparse.Namespace) -> int:
    """Execute the render pipeline for one module."""
    config = load_config(args.config)
    if args.base_url:
        config["site"]["base_url"] = args.base_url

    entries = load_doc_nodes(args.nodes_file)
    ctx = build_render_context(
        entries,
        args.url,
        config,
        include_private=True if args.include_private else None,
    )

    if args.out_dir is None:
        page = render_doc_page(ctx, args.item)
        sys.stdout.write(page.html)
        return 1 if page.not_found else 0

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)
    if args.item:
        written, missing = _write_pages(ctx, [args.item], out_root)
    else:
        items: list[str | None] = [None]
        if args.all_items:
            items.extend(iter_item_paths(ctx.entries))
        written, missing = _write_pages(ctx, items, out_root)

    print(f"Generated {written} HTML pages into: {out_root}")
    return 1 if missing else 0


def _write_pages(
    ctx: RenderContext, items: list[str | None], out_root: Path
) -> tuple[int, int]:
    """Render and write each page; returns (written, not found)."""
    written = 0
    missing = 0
    total = len(items)
    for item in items:
        page = render_doc_page(ctx, item)
        if page.not_found:
            logger.warning("Entry %r not found in %s", item, ctx.url)
            missing += 1
        page_path = item_href(ctx.url, item) if item else f"/{ctx.url}"
        out_file = output_file_for_page(out_root, page_path)
        out_file.write_text(page.html, encoding="utf-8")
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{total} pages")
    return written, missing


def main(argv: list[str] | None = None) -> int:
    """Run the render process."""
    ap = argparse.ArgumentParser(
        description="Render HTML documentation pages from deno doc JSON output.",
    )
    ap.add_argument(
        "nodes_file",
        type=Path,
        help="JSON file produced by `deno doc --json <url>`",
    )
    ap.add_argument(
        "url",
        help="Module specifier the nodes belong to, e.g. deno.land/x/oak/mod.ts",
    )
    ap.add_argument(
        "--item",
        help="Dotted path of a single export to render, e.g. Ns.Item",
    )
    ap.add_argument(
        "--all-items",
        action="store_true",
        help="Also write one page per exported item (requires --out)",
    )
    ap.add_argument(
        "--out",
        dest="out_dir",
        type=Path,
        help="Output directory; without it the page is printed to stdout",
    )
    ap.add_argument(
        "--include-private",
        action="store_true",
        help="Keep nodes declared private",
    )
    ap.add_argument(
        "--base-url",
        help="Base URL for social preview image links",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_render(args)


if __name__ == "__main__":
    raise SystemExit(main())
