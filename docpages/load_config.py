"""Logic for loading and merging renderer configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from docpages.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "site": {
        "title": "Deno Doc",
        "base_url": "https://doc.deno.land/",
        "twitter": "@denoland",
    },
    "library_prefix": "deno/",
    "libraries": {
        "deno/stable": "Deno CLI APIs",
        "deno/unstable": "Deno CLI APIs (unstable)",
        "deno/esnext": "ESNext APIs",
        "deno/dom": "DOM APIs",
    },
    "usage_suppressed_suffixes": [".d.ts"],
    "default_import_symbol": "mod",
    "include_private": False,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
