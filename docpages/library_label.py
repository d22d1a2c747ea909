"""Display labels for built-in library specifiers (``deno/stable`` etc.)."""

from typing import Any

DEFAULT_LIBRARY_PREFIX = "deno/"


def is_library_url(url: str, config: dict[str, Any] | None = None) -> bool:
    """Check if the url names a built-in library rather than a module."""
    prefix = (config or {}).get("library_prefix", DEFAULT_LIBRARY_PREFIX)
    return url.startswith(prefix)


def get_lib_with_version(
    url: str, config: dict[str, Any] | None = None
) -> tuple[str, str | None]:
    """Split a library specifier into its display label and optional version."""
    lib, _, version = url.partition("@")
    labels = (config or {}).get("libraries") or {}
    return labels.get(lib, lib), version or None


def get_url_label(url: str, config: dict[str, Any] | None = None) -> str:
    """Return a short label for a specifier (library label or the url itself)."""
    if is_library_url(url, config):
        label, version = get_lib_with_version(url, config)
        return f"{label} @{version}" if version else label
    return url
