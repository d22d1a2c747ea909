"""Immutable per-render state threaded through page rendering."""

import copy
from dataclasses import dataclass, field
from typing import Any

from docpages.doc_node import DocNode
from docpages.filter_private import filter_private
from docpages.library_label import is_library_url
from docpages.load_config import DEFAULT_CONFIG


@dataclass(frozen=True)
class RenderContext:
    """Everything one page render reads: module entries, url and config."""

    entries: tuple[DocNode, ...]
    url: str
    include_private: bool = False
    namespaces: tuple[DocNode, ...] = ()  # trail walked while resolving an item
    config: dict[str, Any] = field(
        default_factory=lambda: copy.deepcopy(DEFAULT_CONFIG), compare=False
    )

    @property
    def library(self) -> bool:
        return is_library_url(self.url, self.config)

    @property
    def base_url(self) -> str:
        return self.config["site"]["base_url"]

    @property
    def site_title(self) -> str:
        return self.config["site"]["title"]

    def show_usage(self) -> bool:
        """Usage snippets are hidden for libraries and declaration files."""
        suffixes = tuple(self.config.get("usage_suppressed_suffixes") or ())
        return not self.library and not (suffixes and self.url.endswith(suffixes))


def build_render_context(
    entries: tuple[DocNode, ...],
    url: str,
    config: dict[str, Any],
    *,
    include_private: bool | None = None,
) -> RenderContext:
    """Build a context, dropping private nodes unless asked to keep them."""
    if include_private is None:
        include_private = bool(config.get("include_private"))
    return RenderContext(
        entries=filter_private(tuple(entries), include_private=include_private),
        url=url,
        include_private=include_private,
        config=config,
    )
