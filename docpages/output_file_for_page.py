"""Utility for determining the output file path for a page."""

import re
from pathlib import Path

SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]*://", re.IGNORECASE)


def output_file_for_page(out_root: Path, page_path: str) -> Path:
    """Determine the output file for a page path.

    ``/deno.land/x/oak/mod.ts/~/Application`` becomes
    ``out_root/deno.land/x/oak/mod.ts/~/Application/index.html``. Scheme
    prefixes and ``..`` segments are dropped so pages stay under out_root.
    """
    rel = SCHEME_RE.sub("", page_path.lstrip("/"))
    segments = [s for s in rel.split("/") if s and s not in {".", ".."}]
    p = out_root.joinpath(*segments, "index.html")
    p.parent.mkdir(parents=True, exist_ok=True)
    return p
