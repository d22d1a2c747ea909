"""Logic for parsing registry module specifiers into their parts."""

import re

from docpages.parsed_url import ParsedURL

STD_REGISTRY = "deno.land/std"
_SCHEME_RE = re.compile(r"^https?://")

# Optional "@scope/" segment used by npm-backed CDNs.
_NPM_TAIL = r"(?:(?P<org>@[^/]+)/)?(?P<pkg>[^@/]+)(?:@(?P<ver>[^/]+))?(?:/(?P<mod>.*))?"

# Tried in order, first match wins.
REGISTRY_PATTERNS: list[tuple[str, list[re.Pattern[str]]]] = [
    (
        "deno.land/x",
        [
            re.compile(
                r"https://deno\.land/x/(?P<pkg>[^@/]+)(?:@(?P<ver>[^/]+))?(?:/(?P<mod>.*))?"
            )
        ],
    ),
    (
        STD_REGISTRY,
        [re.compile(r"https://deno\.land/std(?:@(?P<ver>[^/]+))?(?:/(?P<mod>.*))?")],
    ),
    (
        "nest.land",
        [re.compile(r"https://x\.nest\.land/(?P<pkg>[^@/]+)@(?P<ver>[^/]+)(?:/(?P<mod>.*))?")],
    ),
    (
        "crux.land",
        [re.compile(r"https://crux\.land/(?P<pkg>[^@/]+)@(?P<ver>[^/]+)")],
    ),
    (
        "github.com",
        [
            re.compile(
                r"https://raw\.githubusercontent\.com/(?P<org>[^/]+)/(?P<pkg>[^/]+)"
                r"/(?P<ver>[^/]+)(?:/(?P<mod>.*))?"
            ),
            re.compile(
                r"https://github\.com/(?P<org>[^/]+)/(?P<pkg>[^/]+)/raw"
                r"/(?P<ver>[^/]+)(?:/(?P<mod>.*))?"
            ),
        ],
    ),
    (
        "gist.github.com",
        [
            re.compile(
                r"https://gist\.githubusercontent\.com/(?P<org>[^/]+)/(?P<pkg>[^/]+)"
                r"/raw/(?P<ver>[^/]+)(?:/(?P<mod>.*))?"
            ),
        ],
    ),
    ("esm.sh", [re.compile(r"https://esm\.sh/" + _NPM_TAIL)]),
    ("skypack.dev", [re.compile(r"https://cdn\.skypack\.dev/" + _NPM_TAIL)]),
    ("unpkg.com", [re.compile(r"https://unpkg\.com/" + _NPM_TAIL)]),
    (
        "cdn.jsdelivr.net",
        [
            re.compile(r"https://cdn\.jsdelivr\.net/npm/" + _NPM_TAIL),
            re.compile(
                r"https://cdn\.jsdelivr\.net/gh/(?P<org>[^/]+)/(?P<pkg>[^@/]+)"
                r"(?:@(?P<ver>[^/]+))?(?:/(?P<mod>.*))?"
            ),
        ],
    ),
]


def parse_url(url: str) -> ParsedURL | None:
    """Parse a module specifier, or return None for non-registry specifiers.

    Specifiers without a scheme (``deno.land/x/oak/mod.ts``) and http URLs
    are treated as https URLs. Anything that matches no registry, such as the
    ``deno/stable`` library specifiers, yields None.
    """
    full = "https://" + _SCHEME_RE.sub("", url)
    for registry, patterns in REGISTRY_PATTERNS:
        for pattern in patterns:
            match = pattern.fullmatch(full)
            if not match:
                continue
            groups = match.groupdict()
            pkg = groups.get("pkg") or None
            ver = groups.get("ver") or None
            if registry == "gist.github.com":
                # gist ids and revisions are long hashes
                pkg = pkg[:7] if pkg else pkg
                ver = ver[:7] if ver else ver
            return ParsedURL(
                registry=registry,
                org=groups.get("org") or None,
                package=pkg,
                version=ver,
                module=groups.get("mod") or None,
            )
    return None
